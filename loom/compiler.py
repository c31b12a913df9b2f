"""
Template compilation.

A compiler turns template source into compiled output: the text of a
Python module that defines one ``Template`` subclass named after the
unit identifier of the template. The loader treats that text as opaque;
it is written to the cache as-is and later executed by the activator.
"""

from abc import ABC, abstractmethod

from .identity import unit_id_for
from .utils.exceptions import CompilationError
from .utils.logging import get_logger

logger = get_logger(__name__)

_MODULE_TEMPLATE = '''\
# Compiled by loom. Do not edit.
# template: {name_repr}
from loom.runtime.template import Template


class {unit_id}(Template):
    template_name = {name_repr}
    source = {source_repr}
'''


class Compiler(ABC):
    """Interface for template compilers."""

    @abstractmethod
    def compile(self, source: str, name: str) -> str:
        """
        Compile template source.

        Args:
            source: Template source text
            name: Template name

        Returns:
            Python module source defining the class ``unit_id_for(name)``

        Raises:
            CompilationError: If the source cannot be compiled
        """


class TemplateCompiler(Compiler):
    """
    Default compiler.

    Embeds the source in a ``Template`` subclass; placeholders are
    resolved at render time.
    """

    def compile(self, source: str, name: str) -> str:
        if not isinstance(source, str):
            raise CompilationError(
                f"Template source must be text, got {type(source).__name__}",
                template_name=name,
            )

        code = _MODULE_TEMPLATE.format(
            name_repr=repr(name),
            unit_id=unit_id_for(name),
            source_repr=repr(source),
        )

        try:
            compile(code, f"<loom template {name!r}>", "exec")
        except (SyntaxError, ValueError) as e:
            raise CompilationError(f"Generated code is invalid: {e}", name, source) from e

        logger.debug(f"Compiled template '{name}' into {len(code)} chars")
        return code
