"""
Unified test infrastructure for third-party-imports.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess
- project_builders: Fluent builder for throwaway projects
"""

from .file_utils import write, write_source_file
from .cli_utils import run_cli, jload
from .project_builders import ProjectBuilder, make_project

__all__ = [
    # File utilities
    "write", "write_source_file",

    # CLI utilities
    "run_cli", "jload",

    # Project builders
    "ProjectBuilder", "make_project",
]
