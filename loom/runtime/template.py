"""
Base class for compiled templates.

Every compiled unit is a subclass of ``Template`` whose class name is the
unit identifier of its template name.
"""

import string
from typing import Any


class Template:
    """
    Runnable compiled template.

    Subclasses produced by the compiler set ``template_name`` and
    ``source``. Rendering substitutes ``$name`` and ``${name}``
    placeholders and leaves unknown placeholders untouched.
    """

    template_name: str = ""
    source: str = ""

    def render(self, /, **context: Any) -> str:
        """
        Render the template with the given context.

        Args:
            **context: Placeholder values

        Returns:
            Rendered text
        """
        return string.Template(self.source).safe_substitute(context)

    def __repr__(self) -> str:
        return f"<{type(self).__name__[:24]}... template={self.template_name!r}>"
