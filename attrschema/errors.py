"""
Error types for attrschema.

This module defines the exceptions raised by the package:
- AttrSchemaError: Base exception
- EncodeError: A schema could not be serialized
- DecodeError: A payload could not be turned into a schema

Registry operations raise nothing: overwriting an id is allowed and a
missing id is reported through the lookup result.

Invariants:
    - All errors inherit from AttrSchemaError
    - Errors include context for debugging
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AttrSchemaError(Exception):
    """Base exception for all attrschema errors.

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "ATTRSCHEMA_ERROR"
        self.details = details or {}


class EncodeError(AttrSchemaError):
    """Schema could not be encoded.

    Raised when:
    - An attribute carries a value the encoder cannot represent
    """

    def __init__(
        self,
        message: str,
        schema_id: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            code="ENCODE_ERROR",
            details={"schema_id": schema_id},
        )
        self.schema_id = schema_id


class DecodeError(AttrSchemaError):
    """Payload could not be decoded into a schema.

    Raised when:
    - Payload is not valid JSON or YAML
    - Payload is not an object
    - A field has the wrong type
    - An attribute entry fails to decode
    - Strict decoding is on and an unknown field is present
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            code="DECODE_ERROR",
            details={"field": field_name},
        )
        self.field_name = field_name
