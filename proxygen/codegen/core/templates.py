"""
Jinja2 rendering for generated source files.

Each language back-end ships its templates in a ``templates/`` directory
next to its generator. Templates see ``indent_unit`` (one configured
indentation level).
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, FileSystemLoader, StrictUndefined, TemplateNotFound
from jinja2.exceptions import TemplateError as JinjaTemplateError


class TemplateError(Exception):
    """A template is missing or failed to render."""

    pass


class TemplateEngine:
    """Jinja2 environment configured for source code output."""

    def __init__(self, template_dir: Optional[Path] = None, indent: str = "    "):
        self.template_dir = template_dir
        self.indent = indent

        if template_dir is not None and template_dir.exists():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        # Block tags leave no stray newlines or indentation
        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.globals["indent_unit"] = indent

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing or rendering fails
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


def create_template_engine(
    template_dir: Optional[Path] = None, indent: str = "    "
) -> TemplateEngine:
    return TemplateEngine(template_dir, indent)
