"""
Schema entity for attrschema.

A Schema is a named, identifiable, ordered collection of attributes:
- id: Stable identifier, used as the registry key
- name: Human-readable label
- description: Explanatory text
- attributes: Attribute definitions in declaration order

Invariants:
    - A schema never changes after construction
    - Attribute order is preserved by every codec
    - Schema.decode(s.encode()) == s

Wire format (JSON object, YAML mapping):
    {"id": ..., "name": ..., "description": ..., "attributes": [...]}

    All four keys are always written. When reading, a missing or null key
    takes its empty value, a key with the wrong type is an error and
    unknown keys are ignored unless strict decoding is enabled.

Example:
    >>> User = Schema(
    ...     id="urn:ietf:params:scim:schemas:core:2.0:User",
    ...     name="User",
    ...     description="User Account",
    ...     attributes=(
    ...         attribute("userName", "string", required=True),
    ...         attribute("active", "boolean"),
    ...     ),
    ... )
    >>> Schema.decode(User.encode()) == User
    True
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Any, Callable

import yaml

from .attribute import Attribute
from .config import get_settings
from .errors import DecodeError, EncodeError

WIRE_FIELDS = ("id", "name", "description", "attributes")


@dataclass(frozen=True)
class Schema:
    """A named collection of attributes.

    Attributes:
        id: Stable identifier (never changes)
        name: Human-readable name
        description: Human-readable description
        attributes: Tuple of attribute definitions, order is significant
    """

    id: str
    name: str = ""
    description: str = ""
    attributes: tuple[Attribute, ...] = dataclass_field(default_factory=tuple)

    def __post_init__(self) -> None:
        for key in ("id", "name", "description"):
            value = getattr(self, key)
            if not isinstance(value, str):
                raise TypeError(f"Schema {key} must be a string, got {type(value).__name__}")
        if not isinstance(self.attributes, tuple):
            object.__setattr__(self, "attributes", tuple(self.attributes))

    def for_each_attribute(self, visit: Callable[[Attribute], None]) -> None:
        """Invoke ``visit`` once per attribute, in declaration order."""
        for attr in self.attributes:
            visit(attr)

    def get_attribute(self, name: str) -> Attribute | None:
        """Get an attribute by name."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "attributes": [a.to_dict() for a in self.attributes],
        }

    def encode(self) -> bytes:
        """Encode to compact UTF-8 JSON.

        Raises:
            EncodeError: If the schema holds a value JSON cannot represent
        """
        text = self.to_json()
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodeError(f"Cannot encode schema '{self.id}': {e}", schema_id=self.id) from e

    def to_json(self, indent: int | None = None) -> str:
        """Convert to JSON string.

        Raises:
            EncodeError: If the schema holds a value JSON cannot represent
        """
        separators = (",", ":") if indent is None else None
        try:
            return json.dumps(
                self.to_dict(),
                indent=indent,
                separators=separators,
                ensure_ascii=False,
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise EncodeError(f"Cannot encode schema '{self.id}': {e}", schema_id=self.id) from e

    def to_yaml(self) -> str:
        """Convert to YAML string.

        Raises:
            EncodeError: If the schema holds a value YAML cannot represent
        """
        try:
            return yaml.safe_dump(
                self.to_dict(),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except (AttributeError, yaml.YAMLError) as e:
            raise EncodeError(f"Cannot encode schema '{self.id}': {e}", schema_id=self.id) from e

    @classmethod
    def from_dict(cls, data: Any, *, strict: bool | None = None) -> Schema:
        """Create from dictionary representation.

        Args:
            data: Decoded wire mapping
            strict: Reject unknown keys (defaults to ``Settings.strict_decode``)

        Raises:
            DecodeError: If the mapping does not describe a schema
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Schema payload must be an object, got {type(data).__name__}")

        if strict is None:
            strict = get_settings().strict_decode
        if strict:
            unknown = sorted(set(data) - set(WIRE_FIELDS))
            if unknown:
                raise DecodeError(f"Unknown fields: {unknown}", field_name=unknown[0])

        raw_attributes = data.get("attributes")
        if raw_attributes is None:
            raw_attributes = []
        elif not isinstance(raw_attributes, list):
            raise DecodeError(
                f"Field 'attributes' must be an array, got {type(raw_attributes).__name__}",
                field_name="attributes",
            )

        attributes = []
        for index, item in enumerate(raw_attributes):
            try:
                attributes.append(Attribute.from_dict(item))
            except KeyError as e:
                raise DecodeError(
                    f"attributes[{index}]: missing field {e}", field_name="attributes"
                ) from e
            except (TypeError, ValueError) as e:
                raise DecodeError(f"attributes[{index}]: {e}", field_name="attributes") from e

        return cls(
            id=_string_field(data, "id"),
            name=_string_field(data, "name"),
            description=_string_field(data, "description"),
            attributes=tuple(attributes),
        )

    @classmethod
    def decode(cls, raw: bytes | str, *, strict: bool | None = None) -> Schema:
        """Decode a schema from JSON bytes or text.

        Raises:
            DecodeError: If the payload is not valid JSON or not a schema
        """
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON: {e}") from e
        return cls.from_dict(data, strict=strict)

    @classmethod
    def from_json(cls, json_str: str, *, strict: bool | None = None) -> Schema:
        """Create from JSON string."""
        return cls.decode(json_str, strict=strict)

    @classmethod
    def from_yaml(cls, yaml_str: str, *, strict: bool | None = None) -> Schema:
        """Create from YAML string.

        Raises:
            DecodeError: If the document is not valid YAML or not a schema
        """
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise DecodeError(f"Invalid YAML: {e}") from e
        return cls.from_dict(data, strict=strict)


def _string_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"Field '{key}' must be a string, got {type(value).__name__}", field_name=key
        )
    return value
