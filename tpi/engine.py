"""
Scheduler / aggregator.

One task per discovered file runs in a bounded thread pool; every task owns
its text and syntax tree and returns the file's third-party bases. The
coordinating thread unions the per-file sets as tasks complete.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import FrozenSet, Optional, Set

from .classify import ImportClassifier
from .errors import InvalidProjectRootError, ParseError
from .extract import absolute_bases, extract_imports
from .fs import iter_source_files, read_source
from .parsing import parse_source
from .stdlib import STANDARD_LIBRARY, StdlibRegistry
from .types import ModuleBase, RunResult, ScanOptions

logger = logging.getLogger(__name__)


def default_workers() -> int:
    """Same ceiling as ThreadPoolExecutor's own default."""
    return min(32, (os.cpu_count() or 1) + 4)


def ensure_project_root(project_root: Path) -> Path:
    """
    Validate the project root before any processing.

    Raises:
        InvalidProjectRootError: path does not exist or is not a directory
    """
    if not project_root.exists():
        raise InvalidProjectRootError(project_root, "Path does not exist")
    if not project_root.is_dir():
        raise InvalidProjectRootError(project_root, "Path must be a directory")
    return project_root


def scan_file(path: Path, classifier: ImportClassifier) -> Optional[FrozenSet[ModuleBase]]:
    """
    Third-party bases imported by one file.

    Returns None when the file cannot be read or parsed; such a file is
    skipped and never aborts the run.
    """
    try:
        text = read_source(path)
        doc = parse_source(text, path)
    except (OSError, UnicodeDecodeError, ParseError) as e:
        logger.debug(f"Skipping {path}: {e}")
        return None
    bases = absolute_bases(extract_imports(doc))
    return frozenset(classifier.third_party(path, bases))


def run(
    project_root: Path,
    options: Optional[ScanOptions] = None,
    *,
    registry: StdlibRegistry = STANDARD_LIBRARY,
) -> RunResult:
    """
    Traverse all Python files under `project_root` and collect every
    third-party package they import, plus the number of files dispatched.
    """
    project_root = ensure_project_root(Path(project_root))
    options = options or ScanOptions()
    classifier = ImportClassifier(project_root, registry)

    files = list(iter_source_files(
        project_root,
        exclude=options.exclude,
        respect_gitignore=options.respect_gitignore,
    ))
    if not files:
        logger.debug(f"No Python files under {project_root}")
        return RunResult()

    workers = min(options.workers or default_workers(), len(files))
    logger.debug(f"Scanning {len(files)} files with {workers} workers")

    packages: Set[ModuleBase] = set()
    failed = 0
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="tpi") as pool:
        futures = [pool.submit(scan_file, path, classifier) for path in files]
        for fut in as_completed(futures):
            found = fut.result()
            if found is None:
                failed += 1
            else:
                packages |= found

    if failed:
        logger.debug(f"{failed} of {len(files)} files were skipped")
    return RunResult(file_count=len(files), packages=frozenset(packages), failed_files=failed)


__all__ = ["run", "scan_file", "ensure_project_root", "default_workers"]
