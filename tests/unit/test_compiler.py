"""
Unit tests for the default template compiler.
"""

import pytest

from loom.compiler import Compiler, TemplateCompiler
from loom.identity import unit_id_for
from loom.runtime.activator import Activator
from loom.utils.exceptions import CompilationError


class TestTemplateCompiler:
    """Test cases for TemplateCompiler."""

    def setup_method(self):
        """Set up test fixtures."""
        self.compiler = TemplateCompiler()

    def test_is_compiler(self):
        """Test that the default compiler implements the interface."""
        assert isinstance(self.compiler, Compiler)

    def test_output_defines_unit_class(self):
        """Test that output names the unit class after the template."""
        code = self.compiler.compile("Hello", "greeting")

        assert f"class {unit_id_for('greeting')}(Template):" in code
        assert "template_name = 'greeting'" in code

    def test_output_is_deterministic(self):
        """Test that the same input compiles to the same output."""
        assert self.compiler.compile("Hello", "greeting") == self.compiler.compile("Hello", "greeting")

    @pytest.mark.parametrize("name,source", [
        ("quotes", "It's \"quoted\" '''triple'''"),
        ("lines\nin name", "line one\nline two\n"),
        ("", ""),
        ("unicode", "Grüße, $name ✓"),
        ("backslashes", "C:\\path\\$name"),
    ])
    def test_awkward_input_round_trips(self, name, source):
        """Test that any name and source survive compilation intact."""
        unit = Activator().activate(unit_id_for(name), self.compiler.compile(source, name))

        assert unit.template_name == name
        assert unit.source == source

    def test_render_placeholders(self):
        """Test placeholder substitution at render time."""
        unit = Activator().activate(unit_id_for("t"), self.compiler.compile("$greet, ${name}! $missing", "t"))

        assert unit().render(greet="Hi", name="Bo") == "Hi, Bo! $missing"

    def test_non_text_source_rejected(self):
        """Test that non-string source is a compilation error."""
        with pytest.raises(CompilationError) as exc_info:
            self.compiler.compile(b"bytes", "binary")

        assert exc_info.value.template_name == "binary"
