from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

import pathspec

from .types import SOURCE_EXTENSIONS


def read_source(path: Path) -> str:
    """
    Read a source file as UTF-8 (a leading BOM is dropped).

    Raises OSError / UnicodeDecodeError; the caller decides what a failure means.
    """
    with path.open(encoding="utf-8-sig") as f:
        return f.read()


def build_gitignore_spec(root: Path) -> Optional[pathspec.PathSpec]:
    """
    Build PathSpec from .gitignore. Return None if .gitignore is missing.
    """
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    return build_spec(gitignore.read_text(encoding="utf-8", errors="ignore").splitlines())


def build_spec(patterns: Iterable[str]) -> Optional[pathspec.PathSpec]:
    """PathSpec from gitwildmatch lines; None when nothing meaningful is left."""
    lines = []
    for ln in patterns:
        ln = ln.strip()
        if ln and not ln.startswith("#"):
            lines.append(ln)
    if not lines:
        return None
    return pathspec.PathSpec.from_lines(pathspec.patterns.GitWildMatchPattern, lines)


def iter_source_files(
    root: Path,
    *,
    exclude: Sequence[str] = (),
    respect_gitignore: bool = False,
) -> Iterator[Path]:
    """
    Recursive iterator over .py/.pyi files under `root`.

    .git is never entered. Excluded or git-ignored directories are pruned
    early; symlinked directories are not followed. Order is deterministic
    (sorted per directory) but callers must not rely on it.
    """
    root = root.resolve()
    specs: List[pathspec.PathSpec] = []
    spec_exclude = build_spec(exclude)
    if spec_exclude is not None:
        specs.append(spec_exclude)
    if respect_gitignore:
        spec_git = build_gitignore_spec(root)
        if spec_git is not None:
            specs.append(spec_git)

    def ignored(rel_posix: str) -> bool:
        return any(s.match_file(rel_posix) for s in specs)

    for dirpath, dirnames, filenames in os.walk(root):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        if specs:
            keep: List[str] = []
            for d in dirnames:
                rel_dir = Path(dirpath, d).relative_to(root).as_posix()
                if not ignored(rel_dir + "/"):
                    keep.append(d)
            dirnames[:] = keep
        dirnames.sort()

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in SOURCE_EXTENSIONS:
                continue
            if specs and ignored(p.relative_to(root).as_posix()):
                continue
            yield p


__all__ = ["read_source", "build_gitignore_spec", "build_spec", "iter_source_files"]
