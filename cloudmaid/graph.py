"""The resource graph and its Mermaid rendering."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from cloudmaid.node import Node
from cloudmaid.property import ApiGatewayProperty, OtherProperty
from cloudmaid.resource import Resource, ResourceType
from cloudmaid.template import Template


def _root_node() -> Node:
    return Node("", ResourceType.OTHER, OtherProperty(""))


def _json_text(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, sort_keys=True)


@dataclass
class AST:
    """A node and the trees hanging from it."""

    node: Node
    children: list[AST] = field(default_factory=list)

    @classmethod
    def from_template(cls, template: Template) -> AST:
        """Build the graph of drawable resources and those that refer to them."""
        branches = []
        for resource in template.resources:
            if not should_keep(resource.resource_type):
                continue
            children = [
                cls(Node.from_resource(referrer))
                for referrer in find_references(template, resource.name)
                if should_keep(referrer.resource_type)
            ]
            branches.append(cls(Node.from_resource(resource), children))
        return cls(_root_node(), branches)

    def to_mermaid(self) -> str:
        """Render the graph as a fenced Mermaid flowchart."""
        body = "".join(self._lines(_root_node()))
        return f"```mermaid\nflowchart LR\n{body}```"

    def _lines(self, parent: Node) -> Iterator[str]:
        if parent.name:
            yield f"{self.node} --> {parent}\n"
        else:
            yield f"{self.node}\n"
        for child in self.children:
            yield from child._lines(self.node)


def find_references(template: Template, resource_name: str) -> list[Resource]:
    """Resources whose properties mention the given resource name."""

    def mentions(resource: Resource) -> bool:
        match resource.properties:
            case OtherProperty(value=value):
                return resource_name in _json_text(value)
            case ApiGatewayProperty(integration=integration):
                return resource_name in _json_text(integration)
        return False

    return [resource for resource in template.resources if mentions(resource)]


def should_keep(resource_type: ResourceType) -> bool:
    """Whether resources of this type appear in the diagram."""
    return resource_type is not ResourceType.OTHER