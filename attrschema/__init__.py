"""
attrschema - named attribute collections and a process-wide schema registry.

This package provides:
- Attribute definitions (Attribute, AttributeType, attribute)
- The Schema entity with JSON and YAML codecs
- A lazily created global SchemaRegistry

Example:
    >>> from attrschema import Schema, attribute, get_registry
    >>>
    >>> User = Schema(
    ...     id="user-v1",
    ...     name="User",
    ...     description="user profile",
    ...     attributes=(
    ...         attribute("userName", "string", required=True),
    ...         attribute("emails", "string", multi_valued=True),
    ...     ),
    ... )
    >>> get_registry().register(User)
    >>> schema, found = get_registry().lookup("user-v1")

Invariants:
    - Schema ids are immutable after construction
    - Attribute order survives every encode/decode
    - One registry per process

Version: 1.0.0
"""

__version__ = "1.0.0"

from .attribute import (
    Attribute,
    AttributeType,
    Mutability,
    Returned,
    Uniqueness,
    attribute,
)
from .config import Settings, get_settings, setup_logging
from .errors import AttrSchemaError, DecodeError, EncodeError
from .registry import (
    SchemaRegistry,
    get_registry,
    get_schema,
    register_schema,
)
from .schema import Schema

__all__ = [
    # Version
    "__version__",
    # Attributes
    "Attribute",
    "AttributeType",
    "Mutability",
    "Returned",
    "Uniqueness",
    "attribute",
    # Schema
    "Schema",
    # Registry
    "SchemaRegistry",
    "get_registry",
    "get_schema",
    "register_schema",
    # Config
    "Settings",
    "get_settings",
    "setup_logging",
    # Errors
    "AttrSchemaError",
    "EncodeError",
    "DecodeError",
]
