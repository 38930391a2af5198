"""Tests for the report writer."""

import io
import json

import pytest

from clreport.core.config import Settings
from clreport.core.logging import classloader_var, configure_logging
from clreport.core.models import (
    Attribute,
    ClassloaderHandle,
    ClassloaderInventory,
    ClassloaderNode,
    Entry,
    ParentDefinition,
    ParentLink,
)
from clreport.output.cursor import IndentCursor
from clreport.output.writer import ReportWriter, format_json, format_xml
from clreport.output.xml_formatter import XmlReportFormatter


@pytest.fixture
def settings():
    """Create settings with default rendering options."""
    return Settings(include_empty_sections=False, xml_declaration=False)


@pytest.fixture
def writer(settings):
    """Create writer with test settings."""
    return ReportWriter(XmlReportFormatter(), settings)


@pytest.fixture
def inventory():
    """Create a two-level inventory."""
    system = ClassloaderHandle(type="system")
    core = ClassloaderHandle(type="core", name="ant")
    return ClassloaderInventory(
        classloaders=[
            ClassloaderNode(
                handle=system,
                class_name="sun.misc.Launcher$AppClassLoader",
                parent=ParentLink(handle=ClassloaderHandle(type="bootstrap")),
                roles=[ClassloaderHandle(type="role", name="system")],
                attributes=[Attribute(name="foo", value="bar")],
                children=[core],
            ),
            ClassloaderNode(
                handle=core,
                parent=ParentLink(handle=system, definition=ParentDefinition.EXPLICIT),
                urls=["file:///opt/lib/ant.jar"],
                entries=[Entry(type="file", value="/opt/etc")],
                packages=["org.example"],
                errors=["cannot read manifest"],
            ),
        ],
        unassigned_roles=[ClassloaderHandle(type="role", name="context")],
    )


class TestReportWriter:
    """Tests for ReportWriter."""

    def test_render_full_report(self, writer, inventory):
        """Test element order and indentation of a complete report."""
        expected = "\n".join([
            "<classloaderreport>",
            '  <classloader type="system">',
            '    <class name="sun.misc.Launcher$AppClassLoader"/>',
            '    <parent definition="default" type="bootstrap"/>',
            '    <roles count="1">',
            '      <role type="role" name="system"/>',
            "    </roles>",
            '    <attributes count="1">',
            '      <attribute name="foo" value="bar"/>',
            "    </attributes>",
            '    <childs count="1">',
            '      <child type="core" name="ant"/>',
            "    </childs>",
            "  </classloader>",
            '  <classloader type="core" name="ant">',
            '    <parent definition="explicitely" type="system"/>',
            '    <entries count="2">',
            '      <entry url="file:///opt/lib/ant.jar"/>',
            '      <entry file="/opt/etc"/>',
            "    </entries>",
            '    <packages count="1">',
            '      <package name="org.example"/>',
            "    </packages>",
            '    <errors count="1">',
            '      <error msg="cannot read manifest"/>',
            "    </errors>",
            "  </classloader>",
            '  <unassigned-roles count="1">',
            '    <role type="role" name="context"/>',
            "  </unassigned-roles>",
            "</classloaderreport>",
        ])

        assert writer.render(inventory) == expected

    def test_empty_inventory(self, writer):
        """Test an empty inventory still has a root element."""
        result = writer.render(ClassloaderInventory())

        assert result == "<classloaderreport>\n</classloaderreport>"

    def test_include_empty_sections(self):
        """Test empty sections are rendered with a zero count when enabled."""
        writer = ReportWriter(settings=Settings(include_empty_sections=True))
        inventory = ClassloaderInventory(
            classloaders=[ClassloaderNode(handle=ClassloaderHandle(type="system"))]
        )

        lines = list(writer.iter_lines(inventory))

        assert '    <roles count="0">' in lines
        assert '    <childs count="0">' in lines
        assert '    <entries count="0">' in lines
        assert '  <unassigned-roles count="0">' in lines
        assert lines[-1] == "</classloaderreport>"

    def test_xml_declaration(self):
        """Test the declaration precedes the root element."""
        writer = ReportWriter(settings=Settings(xml_declaration=True))

        lines = list(writer.iter_lines(ClassloaderInventory()))

        assert lines[0].startswith("<?xml")
        assert lines[1] == "<classloaderreport>"

    def test_counts_match_elements(self, writer, inventory):
        """Test counts are taken from the inventory."""
        lines = list(writer.iter_lines(inventory))

        assert '    <entries count="2">' in lines
        assert sum(1 for line in lines if line.strip().startswith("<entry ")) == 2

    def test_balanced_output(self, writer, inventory):
        """Test every opened container is closed."""
        lines = [line.strip() for line in writer.iter_lines(inventory)]

        for tag in ("classloaderreport", "classloader", "roles", "entries", "childs"):
            opened = sum(1 for line in lines if line.startswith(f"<{tag}>") or line.startswith(f"<{tag} "))
            closed = lines.count(f"</{tag}>")
            assert opened == closed

    def test_default_formatter(self, settings):
        """Test the XML formatter is used by default."""
        assert isinstance(ReportWriter(settings=settings).formatter, XmlReportFormatter)


class TestCustomFormatter:
    """Tests for driving a different formatter."""

    def test_calls_are_forwarded(self, settings, inventory):
        """Test the writer drives any formatter implementation."""

        class TagOnlyFormatter(XmlReportFormatter):
            def format_role(self, handle, prefix: IndentCursor) -> str:
                return f"{prefix.value}ROLE {handle}"

        writer = ReportWriter(TagOnlyFormatter(), settings)

        lines = list(writer.iter_lines(inventory))

        assert "      ROLE role:system" in lines
        # Unassigned roles go through format_role as well
        assert "    ROLE role:context" in lines


class TestFormatFunctions:
    """Tests for the format_* helpers."""

    def test_format_xml(self, settings, inventory):
        """Test format_xml renders with the XML formatter."""
        result = format_xml(inventory, settings)

        assert result.startswith("<classloaderreport>")
        assert result.endswith("</classloaderreport>")

    def test_format_json(self, inventory):
        """Test format_json round-trips the inventory data."""
        result = format_json(inventory, indent=2)
        data = json.loads(result)

        assert data["classloaders"][0]["handle"] == {"type": "system", "name": None}
        assert data["unassigned_roles"][0]["name"] == "context"
        assert ClassloaderInventory.model_validate(data) == inventory

    def test_format_json_compact(self, inventory):
        """Test indent 0 produces a single line."""
        assert "\n" not in format_json(inventory, indent=0)


class TestLoggingContext:
    """Tests for log context handling while lines are streamed."""

    def test_partial_iteration_leaves_context_clean(self, writer, inventory):
        """Test the caller's logging context is untouched between lines."""
        lines = writer.iter_lines(inventory)
        next(lines)
        next(lines)

        assert classloader_var.get() is None

    def test_interleaved_iteration_leaves_context_clean(self, writer, inventory):
        """Test two reports consumed alternately leave no context behind."""
        first = writer.iter_lines(inventory)
        second = writer.iter_lines(inventory)
        for a, b in zip(first, second):
            assert a == b

        assert classloader_var.get() is None

    def test_classloader_tagged_on_record(self, writer, inventory):
        """Test per-classloader debug records carry the handle as a field."""
        stream = io.StringIO()
        configure_logging("DEBUG", stream=stream)

        writer.render(inventory)

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        rendering = [r for r in records if r["message"] == "Rendering classloader"]
        assert [r["classloader"] for r in rendering] == ["system", "core:ant"]
        assert all("report_id" in r for r in rendering)
