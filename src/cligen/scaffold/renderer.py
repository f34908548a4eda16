"""Jinja2 rendering for the bundled project templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, TemplateNotFound

from cligen.contracts.exceptions import TemplateRenderingError


class TemplateRenderer:
    """Render the packaged ``*.tmpl`` files.

    Undefined names raise :class:`TemplateRenderingError` instead of rendering
    as empty text, and output keeps the template bytes (no autoescape, trailing
    newline preserved).
    """

    def __init__(self, package: str = "cligen.scaffold", directory: str = "templates") -> None:
        self._env = Environment(
            loader=PackageLoader(package, directory),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateNotFound as exc:
            raise TemplateRenderingError(f"template not found: {template_name}") from exc
        except TemplateError as exc:
            raise TemplateRenderingError(f"failed to render {template_name}: {exc}") from exc

    def render_string(self, source: str, context: Mapping[str, Any]) -> str:
        try:
            return self._env.from_string(source).render(**context)
        except TemplateError as exc:
            raise TemplateRenderingError(f"failed to render template: {exc}") from exc
