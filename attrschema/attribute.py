"""
Attribute definitions for attrschema.

An Attribute describes one named, typed member of a schema. The schema
module stores and orders attributes but never looks inside them; all
knowledge of the attribute wire shape lives here.

Wire keys are camelCase (``multiValued``, ``subAttributes``...). Optional
collections are omitted when empty and flags are written out in full.

Example:
    >>> emails = Attribute(
    ...     name="emails",
    ...     type=AttributeType.COMPLEX,
    ...     multi_valued=True,
    ...     sub_attributes=(
    ...         attribute("value", "string", required=True),
    ...         attribute("primary", "boolean"),
    ...     ),
    ... )
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from typing import Any


class AttributeType(Enum):
    """Data type of an attribute value."""

    STRING = "string"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    INTEGER = "integer"
    DATETIME = "dateTime"
    BINARY = "binary"  # base64 encoded
    REFERENCE = "reference"
    COMPLEX = "complex"  # value is made of sub-attributes

    @classmethod
    def from_str(cls, value: str) -> AttributeType:
        """Convert string representation to AttributeType.

        Raises:
            ValueError: If value is not a valid attribute type
        """
        for kind in cls:
            if kind.value == value:
                return kind
        valid = [k.value for k in cls]
        raise ValueError(f"Invalid attribute type '{value}'. Valid types: {valid}")


class Mutability(Enum):
    """Whether and how an attribute may be modified."""

    READ_ONLY = "readOnly"
    READ_WRITE = "readWrite"
    IMMUTABLE = "immutable"
    WRITE_ONLY = "writeOnly"


class Returned(Enum):
    """When an attribute is returned in a response."""

    ALWAYS = "always"
    NEVER = "never"
    DEFAULT = "default"
    REQUEST = "request"


class Uniqueness(Enum):
    """Scope in which attribute values must be unique."""

    NONE = "none"
    SERVER = "server"
    GLOBAL = "global"


@dataclass(frozen=True)
class Attribute:
    """Definition of a single attribute.

    Attributes:
        name: Attribute name
        type: Data type of the value
        multi_valued: Whether the attribute holds a list of values
        description: Human-readable description
        required: Whether a value must be present
        canonical_values: Suggested values
        case_exact: Whether string comparison is case sensitive
        mutability: Modification rules
        returned: Return rules
        uniqueness: Uniqueness scope
        reference_types: Resource types a reference may point to
        sub_attributes: Member attributes of a complex attribute
    """

    name: str
    type: AttributeType
    multi_valued: bool = False
    description: str = ""
    required: bool = False
    canonical_values: tuple[str, ...] = dataclass_field(default_factory=tuple)
    case_exact: bool = False
    mutability: Mutability = Mutability.READ_WRITE
    returned: Returned = Returned.DEFAULT
    uniqueness: Uniqueness = Uniqueness.NONE
    reference_types: tuple[str, ...] = dataclass_field(default_factory=tuple)
    sub_attributes: tuple[Attribute, ...] = dataclass_field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Attribute name cannot be empty")
        # collections are always stored as tuples
        for key in ("canonical_values", "reference_types", "sub_attributes"):
            value = getattr(self, key)
            if not isinstance(value, tuple):
                object.__setattr__(self, key, tuple(value))

    def get_sub_attribute(self, name: str) -> Attribute | None:
        """Get a sub-attribute by name."""
        for sub in self.sub_attributes:
            if sub.name == name:
                return sub
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation for serialization."""
        result: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "multiValued": self.multi_valued,
            "description": self.description,
            "required": self.required,
            "caseExact": self.case_exact,
            "mutability": self.mutability.value,
            "returned": self.returned.value,
            "uniqueness": self.uniqueness.value,
        }
        if self.canonical_values:
            result["canonicalValues"] = list(self.canonical_values)
        if self.reference_types:
            result["referenceTypes"] = list(self.reference_types)
        if self.sub_attributes:
            result["subAttributes"] = [s.to_dict() for s in self.sub_attributes]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attribute:
        """Create from dictionary representation.

        Raises:
            KeyError: If ``name`` or ``type`` is missing
            TypeError: If a value has the wrong type
            ValueError: If an enum value is unknown
        """
        if not isinstance(data, dict):
            raise TypeError(f"attribute must be an object, got {type(data).__name__}")

        sub_attributes = _expect(data, "subAttributes", list, [])
        return cls(
            name=_expect(data, "name", str),
            type=AttributeType.from_str(_expect(data, "type", str)),
            multi_valued=_expect(data, "multiValued", bool, False),
            description=_expect(data, "description", str, ""),
            required=_expect(data, "required", bool, False),
            canonical_values=_string_tuple(data, "canonicalValues"),
            case_exact=_expect(data, "caseExact", bool, False),
            mutability=Mutability(_expect(data, "mutability", str, Mutability.READ_WRITE.value)),
            returned=Returned(_expect(data, "returned", str, Returned.DEFAULT.value)),
            uniqueness=Uniqueness(_expect(data, "uniqueness", str, Uniqueness.NONE.value)),
            reference_types=_string_tuple(data, "referenceTypes"),
            sub_attributes=tuple(cls.from_dict(s) for s in sub_attributes),
        )


_MISSING = object()


def _expect(data: dict[str, Any], key: str, kind: type, default: Any = _MISSING) -> Any:
    """Read ``key`` from ``data`` and check its type.

    A missing key (or null value) falls back to ``default``; without a
    default the key is required.
    """
    value = data.get(key)
    if value is None:
        if default is _MISSING:
            raise KeyError(key)
        return default
    if not isinstance(value, kind):
        raise TypeError(f"'{key}' must be {kind.__name__}, got {type(value).__name__}")
    return value


def _string_tuple(data: dict[str, Any], key: str) -> tuple[str, ...]:
    values = _expect(data, key, list, [])
    if not all(isinstance(v, str) for v in values):
        raise TypeError(f"'{key}' must contain only strings")
    return tuple(values)


def attribute(
    name: str,
    type: str | AttributeType,
    *,
    multi_valued: bool = False,
    description: str = "",
    required: bool = False,
    canonical_values: tuple[str, ...] = (),
    case_exact: bool = False,
    mutability: str | Mutability = Mutability.READ_WRITE,
    returned: str | Returned = Returned.DEFAULT,
    uniqueness: str | Uniqueness = Uniqueness.NONE,
    reference_types: tuple[str, ...] = (),
    sub_attributes: tuple[Attribute, ...] = (),
) -> Attribute:
    """Convenience function to create an Attribute.

    Enum arguments accept either the enum member or its wire string.

    Example:
        >>> user_name = attribute("userName", "string", required=True, uniqueness="server")
        >>> active = attribute("active", "boolean")
    """
    if isinstance(type, str):
        type = AttributeType.from_str(type)
    return Attribute(
        name=name,
        type=type,
        multi_valued=multi_valued,
        description=description,
        required=required,
        canonical_values=canonical_values,
        case_exact=case_exact,
        mutability=Mutability(mutability),
        returned=Returned(returned),
        uniqueness=Uniqueness(uniqueness),
        reference_types=reference_types,
        sub_attributes=sub_attributes,
    )
