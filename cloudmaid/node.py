"""Nodes of the resource graph."""

from __future__ import annotations

from dataclasses import dataclass

from cloudmaid.property import LambdaProperty, Property, SqsProperty
from cloudmaid.resource import Resource, ResourceType


@dataclass(frozen=True)
class Node:
    """A resource as drawn in a Mermaid flowchart."""

    name: str
    resource_type: ResourceType
    properties: Property

    @classmethod
    def from_resource(cls, resource: Resource) -> Node:
        """Make a node from a template resource."""
        return cls(resource.name, resource.resource_type, resource.properties)

    def label(self) -> str:
        """The name shown for the node: function or queue name if known."""
        match self.properties:
            case LambdaProperty(function_name=function_name):
                return function_name
            case SqsProperty(queue_name=queue_name):
                return queue_name
        return self.name

    def __str__(self) -> str:
        label = self.label()
        if self.resource_type is ResourceType.LAMBDA:
            return f"{label}([{label}])"
        if self.resource_type is ResourceType.SQS:
            return f"{label}(({label}))"
        if self.resource_type is ResourceType.API_GATEWAY:
            return f"{label}[[{label}]]"
        return ""