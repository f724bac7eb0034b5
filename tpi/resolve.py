from __future__ import annotations

import logging
from pathlib import Path

from .types import SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


def _is_dir(p: Path) -> bool:
    try:
        return p.is_dir()
    except OSError:
        return False


def _is_file(p: Path) -> bool:
    try:
        return p.is_file()
    except OSError:
        return False


def _module_exists_in(base_dir: Path, module: str) -> bool:
    """Пакет `base_dir/module/` или модуль `base_dir/module.py(i)`."""
    if _is_dir(base_dir / module):
        return True
    return any(_is_file(base_dir / f"{module}{ext}") for ext in sorted(SOURCE_EXTENSIONS))


def is_local(project_root: Path, file_path: Path, module: str) -> bool:
    """
    Check whether `module` (a module base) refers to code inside the project.

    A module is local when:
      1. the resolved project root itself is named `module`
         (the scan is run from inside the package);
      2. it exists as a package directory or .py/.pyi file in the project root;
      3. it exists next to the importing file.

    Only the root and the file's own directory are checked; intermediate
    ancestors are not. Never raises: filesystem failures mean "not local".
    """
    try:
        if project_root.resolve().name == module:
            return True
    except (OSError, RuntimeError) as e:
        logger.debug(f"Cannot resolve project root {project_root}: {e}")

    if _module_exists_in(project_root, module):
        return True

    return _module_exists_in(file_path.parent, module)


__all__ = ["is_local"]
