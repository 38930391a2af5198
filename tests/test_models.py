"""Tests for inventory models."""

import pytest
from pydantic import ValidationError

from clreport.core.models import (
    Attribute,
    ClassloaderHandle,
    ClassloaderInventory,
    ClassloaderNode,
    Entry,
    ParentDefinition,
    ParentLink,
)


class TestClassloaderHandle:
    """Tests for ClassloaderHandle."""

    def test_type_required(self):
        """Test an empty type is rejected."""
        with pytest.raises(ValidationError):
            ClassloaderHandle(type="")

    def test_name_optional(self):
        """Test name defaults to None."""
        assert ClassloaderHandle(type="jdk").name is None

    def test_hashable_and_equal(self):
        """Test handles can be used as dictionary keys."""
        first = ClassloaderHandle(type="jdk", name="sys")
        second = ClassloaderHandle(type="jdk", name="sys")

        assert first == second
        assert {first: 1}[second] == 1

    def test_str(self):
        """Test string form."""
        assert str(ClassloaderHandle(type="jdk")) == "jdk"
        assert str(ClassloaderHandle(type="jdk", name="sys")) == "jdk:sys"


class TestParentLink:
    """Tests for ParentLink."""

    def test_default_definition(self):
        """Test parents are inherited unless stated otherwise."""
        link = ParentLink(handle=ClassloaderHandle(type="bootstrap"))

        assert link.definition == ParentDefinition.DEFAULT
        assert link.is_explicit is False

    def test_explicit_from_json_value(self):
        """Test the wire value selects the explicit definition."""
        link = ParentLink.model_validate(
            {"handle": {"type": "system"}, "definition": "explicitely"}
        )

        assert link.is_explicit is True


class TestClassloaderNode:
    """Tests for ClassloaderNode."""

    def test_entry_count(self):
        """Test URL and typed entries are counted together."""
        node = ClassloaderNode(
            handle=ClassloaderHandle(type="core"),
            urls=["file:///a.jar", "https://example.org/b.jar"],
            entries=[Entry(type="file", value="/etc")],
        )

        assert node.entry_count == 3

    def test_invalid_url_rejected(self):
        """Test URL entries are validated."""
        with pytest.raises(ValidationError):
            ClassloaderNode(handle=ClassloaderHandle(type="core"), urls=["not a url"])

    def test_entry_type_required(self):
        """Test an entry needs a type to serve as attribute name."""
        with pytest.raises(ValidationError):
            Entry(type="", value="x")

    def test_attribute_value_defaults_empty(self):
        """Test attributes may omit a value."""
        assert Attribute(name="foo").value == ""


class TestClassloaderInventory:
    """Tests for ClassloaderInventory."""

    def test_find(self):
        """Test looking up a node by handle."""
        handle = ClassloaderHandle(type="core", name="ant")
        inventory = ClassloaderInventory(classloaders=[ClassloaderNode(handle=handle)])

        assert inventory.find(ClassloaderHandle(type="core", name="ant")).handle == handle
        assert inventory.find(ClassloaderHandle(type="core")) is None


class TestUrlNormalization:
    """Tests for how URL entries are stored."""

    def test_urls_stored_in_canonical_form(self):
        """Test URL entries are kept in their canonical text form."""
        node = ClassloaderNode(
            handle=ClassloaderHandle(type="core"),
            urls=["file:/opt/a.jar", "http://host"],
        )

        assert [str(url) for url in node.urls] == ["file:///opt/a.jar", "http://host/"]
