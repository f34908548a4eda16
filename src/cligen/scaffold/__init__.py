"""Project file generation."""

from cligen.scaffold.renderer import TemplateRenderer
from cligen.scaffold.scaffolder import WORKFLOWS_DIR, ProjectScaffolder, expected_files, verify_files

__all__ = ["WORKFLOWS_DIR", "ProjectScaffolder", "TemplateRenderer", "expected_files", "verify_files"]
