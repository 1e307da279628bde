"""Reading CloudFormation templates."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from cloudmaid.property import PropertyError
from cloudmaid.resource import Resource, determine_resource_type, parse_properties


class TemplateError(ValueError):
    """Raised when a template cannot be read."""


@dataclass
class Template:
    """The resources of a template, in document order."""

    resources: list[Resource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Template:
        """Build a template from decoded JSON."""
        if not isinstance(data, dict):
            raise TemplateError("invalid type: expected a template object")
        if "Resources" not in data:
            raise TemplateError("missing field `Resources`")
        raw_resources = data["Resources"]
        if not isinstance(raw_resources, dict):
            raise TemplateError("invalid type: expected a map of resources")
        return cls([_read_resource(name, raw) for name, raw in raw_resources.items()])

    @classmethod
    def from_json(cls, text: str) -> Template:
        """Build a template from JSON text."""
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise TemplateError(str(exc)) from exc
        return cls.from_dict(data)


def _read_resource(name: str, raw: Any) -> Resource:
    if not isinstance(raw, dict):
        raise TemplateError(f"resource {name!r}: expected an object")
    for key in ("Type", "Properties"):
        if key not in raw:
            raise TemplateError(f"resource {name!r}: missing field `{key}`")
    raw_type = raw["Type"]
    if not isinstance(raw_type, str):
        raise TemplateError(f"resource {name!r}: `Type` must be a string")
    resource_type = determine_resource_type(raw_type)
    try:
        properties = parse_properties(resource_type, raw["Properties"])
    except PropertyError as exc:
        raise TemplateError("Failed to parse properties") from exc
    return Resource(name, resource_type, properties)