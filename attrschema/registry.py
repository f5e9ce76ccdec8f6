"""
Schema registry for attrschema.

The registry maps schema ids to Schema instances so that a schema defined
once can be looked up anywhere in the process.

Invariants:
    - Exactly one global registry exists per process, created on first use
    - register() never fails; an existing id is silently replaced
    - Lookups of unknown ids return a not-found result, never raise
    - Registered schemas are stored by reference, not copied

How to change safely:
    - Use register_if_absent() where an id must not be replaced
    - Use reset_registry() only from tests

Example:
    >>> from attrschema import Schema, get_registry
    >>> registry = get_registry()
    >>> registry.register(Schema(id="user-v1", name="User"))
    >>> schema, found = registry.lookup("user-v1")
    >>> found
    True
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Tuple

from .schema import Schema

logger = logging.getLogger(__name__)

# Global registry instance
_global_registry: Optional[SchemaRegistry] = None
_registry_lock = threading.Lock()


class SchemaRegistry:
    """Mapping of schema id to Schema.

    Thread-safety:
        - Every read and write of the mapping holds an internal lock
        - Concurrent registrations under one id resolve to the last writer

    Example:
        >>> registry = SchemaRegistry()
        >>> registry.register(User)
        >>> registry.get(User.id) is User
        True
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._schemas: Dict[str, Schema] = {}
        self._lock = threading.Lock()

    def register(self, schema: Schema) -> None:
        """Relate a schema with its id.

        The id is not checked for existence: registering a second schema
        under a known id replaces the first one.

        Args:
            schema: The schema to register
        """
        with self._lock:
            previous = self._schemas.get(schema.id)
            self._schemas[schema.id] = schema

        if previous is not None and previous is not schema:
            logger.debug(f"Replaced schema '{schema.id}' ({previous.name} -> {schema.name})")
        else:
            logger.debug(f"Registered schema: {schema.name} (id={schema.id})")

    def register_if_absent(self, schema: Schema) -> bool:
        """Register a schema only if its id is not taken.

        Args:
            schema: The schema to register

        Returns:
            True if the schema was stored, False if the id was already taken
        """
        with self._lock:
            if schema.id in self._schemas:
                return False
            self._schemas[schema.id] = schema

        logger.debug(f"Registered schema: {schema.name} (id={schema.id})")
        return True

    def lookup(self, schema_id: str) -> Tuple[Optional[Schema], bool]:
        """Look up a schema by id.

        Returns:
            Tuple of (schema, found); schema is None when not found
        """
        with self._lock:
            schema = self._schemas.get(schema_id)
        return schema, schema is not None

    def get(self, schema_id: str) -> Optional[Schema]:
        """Get a schema by id, None if not registered."""
        schema, _ = self.lookup(schema_id)
        return schema

    def __contains__(self, schema_id: object) -> bool:
        with self._lock:
            return schema_id in self._schemas


def get_registry() -> SchemaRegistry:
    """Get the global schema registry.

    The registry is created by the first caller. Concurrent first callers
    wait on the lock and all receive the same instance; once created, no
    lock is taken.

    Returns:
        Global SchemaRegistry instance
    """
    global _global_registry
    registry = _global_registry
    if registry is None:
        with _registry_lock:
            if _global_registry is None:
                _global_registry = SchemaRegistry()
                logger.debug("Created global schema registry")
            registry = _global_registry
    return registry


def register_schema(schema: Schema) -> None:
    """Register a schema in the global registry."""
    get_registry().register(schema)


def get_schema(schema_id: str) -> Optional[Schema]:
    """Get a schema from the global registry."""
    return get_registry().get(schema_id)


def reset_registry() -> None:
    """Reset the global registry (for testing only).

    Warning: This is intended for test cleanup only.
    Never use in production code.
    """
    global _global_registry
    with _registry_lock:
        _global_registry = None
