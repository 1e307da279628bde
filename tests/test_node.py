from cloudmaid.node import Node
from cloudmaid.property import ApiGatewayProperty, LambdaProperty, OtherProperty, SqsProperty
from cloudmaid.resource import Resource, ResourceType


def test_from_resource_copies_fields():
    resource = Resource("r", ResourceType.SQS, SqsProperty("q"))
    node = Node.from_resource(resource)
    assert (node.name, node.resource_type, node.properties) == (
        resource.name,
        resource.resource_type,
        resource.properties,
    )


def test_label_prefers_function_name():
    node = Node("reallylongname", ResourceType.LAMBDA, LambdaProperty("mylambda", ["arm64"]))
    assert node.label() == "mylambda"


def test_label_prefers_queue_name():
    node = Node("logical", ResourceType.SQS, SqsProperty("orders"))
    assert node.label() == "orders"


def test_label_falls_back_to_name():
    api = Node("getorders", ResourceType.API_GATEWAY, ApiGatewayProperty("GET", {}))
    other = Node("role", ResourceType.OTHER, OtherProperty({}))
    assert api.label() == api.name
    assert other.label() == other.name


def test_lambda_shape():
    node = Node("reallylongname", ResourceType.LAMBDA, LambdaProperty("mylambda", ["arm64"]))
    assert str(node) == "mylambda([mylambda])"


def test_sqs_shape():
    node = Node("logical", ResourceType.SQS, SqsProperty("orders"))
    assert str(node) == "orders((orders))"


def test_api_gateway_shape():
    node = Node("getorders", ResourceType.API_GATEWAY, ApiGatewayProperty("GET", None))
    assert str(node) == "getorders[[getorders]]"


def test_other_draws_nothing():
    node = Node("role", ResourceType.OTHER, OtherProperty({"a": 1}))
    assert str(node) == ""