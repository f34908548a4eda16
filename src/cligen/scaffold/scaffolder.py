"""Project scaffolding and post-write verification."""

from __future__ import annotations

import logging
from pathlib import Path

from cligen.contracts.config import RunConfig
from cligen.contracts.exceptions import MissingFileError, ScaffoldError
from cligen.scaffold.renderer import TemplateRenderer

_LOG = logging.getLogger(__name__)

WORKFLOWS_DIR = Path(".github") / "workflows"


def _file_templates(name: str) -> list[tuple[Path, str]]:
    return [
        (Path(f"{name}.csproj"), "project.csproj.tmpl"),
        (Path("Program.cs"), "Program.cs.tmpl"),
        (Path(".gitignore"), "gitignore.tmpl"),
        (Path("README.md"), "README.md.tmpl"),
        (WORKFLOWS_DIR / "ci.yml", "ci.yml.tmpl"),
    ]


def expected_files(name: str) -> list[Path]:
    """Relative paths every scaffolded project must contain, in write order."""
    return [relative for relative, _ in _file_templates(name)]


class ProjectScaffolder:
    """Write the fixed template file set for a new CLI project."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self._renderer = renderer or TemplateRenderer()

    def create(self, config: RunConfig, target_dir: str | Path | None = None) -> Path:
        """Create the project described by ``config`` and return its directory.

        ``target_dir`` defaults to :attr:`RunConfig.project_dir`. An existing,
        non-empty target is refused so a previous project is never overwritten.
        """
        project_dir = Path(target_dir).expanduser().resolve() if target_dir is not None else config.project_dir
        if project_dir.exists() and (not project_dir.is_dir() or any(project_dir.iterdir())):
            raise ScaffoldError(f"Target directory already exists and is not empty: {project_dir}")

        context = {"name": config.name, "description": config.description}
        for relative, template_name in _file_templates(config.name):
            destination = project_dir / relative
            content = self._renderer.render(template_name, context)
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise ScaffoldError(f"Failed to write {destination}: {exc}") from exc
            _LOG.debug("Wrote %s", destination)

        return project_dir


def verify_files(project_dir: Path, name: str) -> list[Path]:
    """Return the absolute expected paths, raising on the first one missing."""
    found: list[Path] = []
    for relative in expected_files(name):
        path = project_dir / relative
        if not path.is_file():
            raise MissingFileError(path)
        found.append(path)
    return found
