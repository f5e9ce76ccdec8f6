"""
Unit tests for attribute definitions.

Tests cover:
- Attribute creation through the convenience function
- Enum parsing
- Dictionary serialization/deserialization
- Shape errors on decode
"""

import pytest

from attrschema.attribute import (
    Attribute,
    AttributeType,
    Mutability,
    Returned,
    Uniqueness,
    attribute,
)


class TestAttributeType:
    """Tests for AttributeType."""

    def test_from_str(self):
        """Wire strings map to enum members."""
        assert AttributeType.from_str("dateTime") == AttributeType.DATETIME
        assert AttributeType.from_str("complex") == AttributeType.COMPLEX

    def test_from_str_invalid_raises(self):
        """Unknown type strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid attribute type"):
            AttributeType.from_str("datetime")


class TestAttribute:
    """Tests for Attribute."""

    def test_create_with_defaults(self):
        """Attribute defaults follow the usual attribute characteristics."""
        a = attribute("userName", "string")

        assert a.name == "userName"
        assert a.type == AttributeType.STRING
        assert a.multi_valued is False
        assert a.required is False
        assert a.case_exact is False
        assert a.mutability == Mutability.READ_WRITE
        assert a.returned == Returned.DEFAULT
        assert a.uniqueness == Uniqueness.NONE

    def test_create_with_enum_strings(self):
        """Enum arguments accept wire strings."""
        a = attribute("id", "string", mutability="readOnly", returned="always", uniqueness="server")

        assert a.mutability == Mutability.READ_ONLY
        assert a.returned == Returned.ALWAYS
        assert a.uniqueness == Uniqueness.SERVER

    def test_empty_name_raises(self):
        """Attribute name cannot be empty."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            attribute("", "string")

    def test_lists_become_tuples(self):
        """Collections passed as lists are stored as tuples."""
        values = ["work", "home"]
        a = Attribute(name="type", type=AttributeType.STRING, canonical_values=values)
        values.append("other")

        assert a.canonical_values == ("work", "home")
        hash(a)

    def test_get_sub_attribute(self):
        """Sub-attributes can be found by name."""
        value = attribute("value", "string")
        emails = attribute("emails", "complex", sub_attributes=(value,))

        assert emails.get_sub_attribute("value") is value
        assert emails.get_sub_attribute("display") is None

    def test_to_dict(self):
        """Attribute serializes with camelCase keys."""
        a = attribute("groups", "reference", multi_valued=True, reference_types=("Group",))
        d = a.to_dict()

        assert d["name"] == "groups"
        assert d["type"] == "reference"
        assert d["multiValued"] is True
        assert d["referenceTypes"] == ["Group"]
        assert d["mutability"] == "readWrite"
        assert "canonicalValues" not in d
        assert "subAttributes" not in d

    def test_from_dict_defaults(self):
        """Missing optional keys take default values."""
        a = Attribute.from_dict({"name": "active", "type": "boolean"})

        assert a == attribute("active", "boolean")

    def test_from_dict_nested(self):
        """Sub-attributes decode in order."""
        d = {
            "name": "name",
            "type": "complex",
            "subAttributes": [
                {"name": "givenName", "type": "string"},
                {"name": "familyName", "type": "string", "required": True},
            ],
        }
        a = Attribute.from_dict(d)

        assert [s.name for s in a.sub_attributes] == ["givenName", "familyName"]
        assert a.sub_attributes[1].required is True

    def test_dict_round_trip(self):
        """to_dict output decodes back to an equal attribute."""
        a = attribute(
            "emails",
            "complex",
            multi_valued=True,
            description="Email addresses",
            sub_attributes=(
                attribute("type", "string", canonical_values=("work", "home")),
                attribute("primary", "boolean", returned="request"),
            ),
        )

        assert Attribute.from_dict(a.to_dict()) == a

    def test_from_dict_missing_type_raises(self):
        """type is required."""
        with pytest.raises(KeyError):
            Attribute.from_dict({"name": "active"})

    def test_from_dict_wrong_flag_type_raises(self):
        """Flags must be booleans."""
        with pytest.raises(TypeError, match="multiValued"):
            Attribute.from_dict({"name": "emails", "type": "string", "multiValued": "yes"})

    def test_from_dict_unknown_mutability_raises(self):
        """Unknown enum values raise ValueError."""
        with pytest.raises(ValueError):
            Attribute.from_dict({"name": "id", "type": "string", "mutability": "sometimes"})

    def test_from_dict_not_object_raises(self):
        """Attribute payload must be an object."""
        with pytest.raises(TypeError, match="must be an object"):
            Attribute.from_dict(["name", "string"])
