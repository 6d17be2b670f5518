"""
Jinja2 environment used by the language generators.

Templates live in ``languages/<lang>/templates`` and are rendered with
``trim_blocks``/``lstrip_blocks`` so block tags never leave stray
whitespace in generated code.
"""

from typing import Dict, Any, Optional
from pathlib import Path

import jinja2

from .naming import quote_string, to_camel_case, to_pascal_case

# Filters available to every template
TEMPLATE_FILTERS = {
    "json_string": quote_string,
    "pascal_case": to_pascal_case,
    "camel_case": to_camel_case,
}


class TemplateError(Exception):
    """Exception raised when a template is missing or fails to render."""

    pass


class TemplateEngine:
    """Renders the templates of one generator."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing ``*.j2`` files; None (or a
                missing directory) gives an engine without templates
        """
        self.template_dir = template_dir

        if template_dir is not None and template_dir.is_dir():
            loader = jinja2.FileSystemLoader(str(template_dir))
        else:
            loader = jinja2.DictLoader({})

        self._env = jinja2.Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self._env.filters.update(TEMPLATE_FILTERS)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template file.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered text (the template's final newline is dropped)

        Raises:
            TemplateError: If the template is missing, invalid, or uses an
                undefined variable
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.list_templates()


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
