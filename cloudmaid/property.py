"""Property variants a CloudFormation resource can carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


class PropertyError(ValueError):
    """Raised when a properties value is not a JSON value."""


@dataclass(frozen=True)
class LambdaProperty:
    """Properties of a Lambda function."""

    function_name: str
    architectures: list[str]


@dataclass(frozen=True)
class SqsProperty:
    """Properties of an SQS queue."""

    queue_name: str


@dataclass(frozen=True)
class ApiGatewayProperty:
    """Properties of an API Gateway method."""

    http_method: str
    integration: Any


@dataclass(frozen=True)
class OtherProperty:
    """Properties of any other resource, kept as raw JSON."""

    value: Any


Property = Union[LambdaProperty, SqsProperty, ApiGatewayProperty, OtherProperty]


def _check_json(value: Any) -> None:
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, list):
        for item in value:
            _check_json(item)
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise PropertyError(f"object key {key!r} is not a string")
            _check_json(item)
        return
    raise PropertyError(f"{type(value).__name__} is not a JSON value")


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _from_mapping(mapping: dict[str, Any]) -> Property:
    function_name = mapping.get("FunctionName")
    architectures = mapping.get("Architectures")
    if isinstance(function_name, str) and _is_str_list(architectures):
        return LambdaProperty(function_name, list(architectures))
    queue_name = mapping.get("QueueName")
    if isinstance(queue_name, str):
        return SqsProperty(queue_name)
    http_method = mapping.get("HttpMethod")
    if isinstance(http_method, str) and "Integration" in mapping:
        return ApiGatewayProperty(http_method, mapping["Integration"])
    return OtherProperty(mapping)


def _from_sequence(items: list[Any]) -> Property:
    match items:
        case [str() as function_name, list() as architectures] if _is_str_list(
            architectures
        ):
            return LambdaProperty(function_name, list(architectures))
        case [str() as queue_name]:
            return SqsProperty(queue_name)
        case [str() as http_method, integration]:
            return ApiGatewayProperty(http_method, integration)
    return OtherProperty(items)


def parse_property(value: Any) -> Property:
    """Pick the first property variant that the JSON value fits."""
    _check_json(value)
    if isinstance(value, dict):
        return _from_mapping(value)
    if isinstance(value, list):
        return _from_sequence(value)
    return OtherProperty(value)