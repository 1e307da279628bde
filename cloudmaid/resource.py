"""CloudFormation resources and their types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from cloudmaid.property import OtherProperty, Property, parse_property


class ResourceType(Enum):
    """The kinds of resource the diagram distinguishes."""

    LAMBDA = "Lambda"
    SQS = "Sqs"
    API_GATEWAY = "ApiGateway"
    OTHER = "Other"


_RAW_TYPES = {
    "AWS::Lambda::Function": ResourceType.LAMBDA,
    "AWS::SQS::Queue": ResourceType.SQS,
    "AWS::ApiGateway::Method": ResourceType.API_GATEWAY,
}


@dataclass(frozen=True)
class Resource:
    """A named resource of a template."""

    name: str
    resource_type: ResourceType
    properties: Property


def determine_resource_type(raw_type: str) -> ResourceType:
    """Map a CloudFormation type string to a resource type."""
    return _RAW_TYPES.get(raw_type, ResourceType.OTHER)


def parse_properties(resource_type: ResourceType, properties: Any) -> Property:
    """Read the properties of a resource of the given type."""
    if resource_type is ResourceType.OTHER:
        return OtherProperty(properties)
    return parse_property(properties)