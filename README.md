# cloudmaid

cloudmaid reads a CloudFormation template in JSON and writes a Mermaid
flowchart of its Lambda functions, SQS queues and API Gateway methods, with
an arrow from each drawn resource to every drawn resource it refers to.

## Installation

```
pip install .
```

## Command line

```
cloudmaid --input-file template.json --output-file diagram.md
```

The short options are `-i` and `-o`; `-V` / `--version` prints the version.
The same entry point can be run as `python -m cloudmaid.cli`.

- If the output file already exists, it is deleted first
  (`Deleted existing ...` is printed) and then written again.
- On success `Mermaid written to ...` is printed.
- If the input file cannot be read, `Error reading file: ...` is printed and
  nothing is written.
- If the input is not a valid template, `Error parsing template: ...` goes to
  standard error and the command exits with status 1.

The written file holds a fenced Mermaid block, ready to drop into Markdown.
For a template with a Lambda function whose logical ID is `MyFunction` and an
API Gateway method `GetMethod` whose `Integration` mentions `MyFunction`:

~~~
```mermaid
flowchart LR

my-function([my-function])
GetMethod[[GetMethod]] --> my-function([my-function])
```
~~~

The first line after `flowchart LR` is always blank.

## How the diagram is built

Resource types and their shapes:

| Resource type              | Shape           |
|----------------------------|-----------------|
| `AWS::Lambda::Function`    | `name([name])`  |
| `AWS::SQS::Queue`          | `name((name))`  |
| `AWS::ApiGateway::Method`  | `name[[name]]`  |

Resources of any other type are left out of the diagram.

Properties are read as follows (`cloudmaid.property.parse_property`):

- `FunctionName` (string) with `Architectures` (list of strings) gives a
  `LambdaProperty`; the node is labelled with the function name.
- `QueueName` (string) gives an `SqsProperty`; the node is labelled with the
  queue name.
- `HttpMethod` (string) with `Integration` gives an `ApiGatewayProperty`.
- Anything else is kept as raw JSON in an `OtherProperty`.

Nodes without a function or queue name are labelled with their logical ID.

A resource refers to another when the logical ID of the other appears
anywhere in the JSON text of its raw properties (`OtherProperty`) or of its
API Gateway `Integration`. Lambda and SQS properties are never searched.
Each drawn resource is listed once, followed by a line
`referrer --> resource` for every drawn resource that refers to it.

## Library use

```python
from cloudmaid.template import Template
from cloudmaid.graph import AST

with open("template.json", encoding="utf-8") as handle:
    template = Template.from_json(handle.read())

print(AST.from_template(template).to_mermaid())
```

- `Template.from_dict` takes a template that has already been decoded.
- A template that cannot be read raises `cloudmaid.template.TemplateError`.
- `cloudmaid.graph.find_references(template, name)` lists the resources that
  refer to a logical ID.
- `cloudmaid.graph.should_keep(resource_type)` tells whether a
  `cloudmaid.resource.ResourceType` is drawn.
- `cloudmaid.node.Node` renders one resource in Mermaid syntax via `str()`.

## What it does not do

Only JSON templates are read; YAML templates are not supported. Only
`AWS::Lambda::Function`, `AWS::SQS::Queue` and `AWS::ApiGateway::Method`
resources are drawn, and references are found by plain text matching of
logical IDs, not by resolving `Ref`, `Fn::GetAtt` or other intrinsic
functions.

## Running the tests

```
pip install ".[test]"
pytest
```