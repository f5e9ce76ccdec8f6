"""
Shared fixtures for attrschema tests.
"""

import pytest

from attrschema.attribute import attribute
from attrschema.config import reset_settings
from attrschema.registry import reset_registry
from attrschema.schema import Schema


@pytest.fixture(autouse=True)
def clean_globals(monkeypatch):
    """Give every test a fresh global registry and default settings."""
    for name in ("ATTRSCHEMA_LOG_LEVEL", "ATTRSCHEMA_LOG_FORMAT", "ATTRSCHEMA_STRICT_DECODE"):
        monkeypatch.delenv(name, raising=False)
    reset_registry()
    reset_settings()
    yield
    reset_registry()
    reset_settings()


@pytest.fixture
def user_schema():
    """The user profile schema used across tests."""
    return Schema(
        id="user-v1",
        name="User",
        description="user profile",
        attributes=(
            attribute("userName", "string", required=True, uniqueness="server"),
            attribute(
                "emails",
                "complex",
                multi_valued=True,
                sub_attributes=(
                    attribute("value", "string"),
                    attribute("type", "string", canonical_values=("work", "home")),
                    attribute("primary", "boolean"),
                ),
            ),
        ),
    )
