from __future__ import annotations

import pytest

from cligen.contracts.exceptions import TemplateRenderingError
from cligen.scaffold import TemplateRenderer


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_substitutes_placeholders(renderer: TemplateRenderer) -> None:
    assert renderer.render_string("# {{ name }}\n{{name}}", {"name": "mytool"}) == "# mytool\nmytool"


def test_render_string_rejects_undefined_name(renderer: TemplateRenderer) -> None:
    with pytest.raises(TemplateRenderingError, match="'owner' is undefined"):
        renderer.render_string("{{ owner }}", {"name": "x"})


def test_render_string_does_not_escape_markup(renderer: TemplateRenderer) -> None:
    assert renderer.render_string("{{ description }}", {"description": "<b> & 'q'"}) == "<b> & 'q'"


def test_render_string_keeps_trailing_newline_and_single_braces(renderer: TemplateRenderer) -> None:
    template = "public class Program\n{\n}\n"
    assert renderer.render_string(template, {}) == template


def test_render_string_reports_syntax_errors(renderer: TemplateRenderer) -> None:
    with pytest.raises(TemplateRenderingError, match="failed to render"):
        renderer.render_string("{{ name ", {"name": "x"})


@pytest.mark.parametrize(
    "template_name",
    ["project.csproj.tmpl", "Program.cs.tmpl", "gitignore.tmpl", "README.md.tmpl", "ci.yml.tmpl"],
)
def test_bundled_templates_render(renderer: TemplateRenderer, template_name: str) -> None:
    rendered = renderer.render(template_name, {"name": "mytool", "description": "demo"})
    assert rendered
    assert "{{" not in rendered


def test_bundled_template_without_trailing_newline(renderer: TemplateRenderer) -> None:
    rendered = renderer.render("README.md.tmpl", {"name": "mytool", "description": "  demo  "})
    assert rendered.startswith("# mytool\n\n  demo  \n")
    assert not rendered.endswith("\n")


def test_render_unknown_template(renderer: TemplateRenderer) -> None:
    with pytest.raises(TemplateRenderingError, match="template not found"):
        renderer.render("nope.tmpl", {})
