from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import List, Optional

from .config import load_config, merge_overrides
from .engine import ensure_project_root, run
from .errors import TPIUserError
from .jsonic import dumps as jdumps
from .report import RunReport
from .types import RunResult
from .version import tool_version

_LOG = logging.getLogger("tpi")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("TPI_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tpi",
        description="Find all third-party packages imported into your python project.",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("project_root", type=Path, help="Path to the project's root directory.")
    p.add_argument("--sort", action="store_true", help="print packages in alphabetical order")
    p.add_argument("--json", action="store_true", help="print a JSON report instead of text")
    p.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="number of parsing threads (default: tpi.yaml or min(32, cpu+4))",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="gitwildmatch pattern relative to the root; may be repeated",
    )
    p.add_argument(
        "--gitignore",
        action="store_true",
        default=None,
        help="skip files ignored by the root .gitignore",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return p


def format_elapsed(seconds: float) -> str:
    """'1.23s', '41.07ms', '512.00µs' — the unit follows the magnitude."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds * 1e6:.2f}µs"


def render_text(result: RunResult, elapsed: float, *, sort: bool = False) -> str:
    lines: List[str] = [
        f"Found '{len(result.packages)}' third-party package imports in "
        f"'{result.file_count}' files. (Took {format_elapsed(elapsed)})",
        "",
    ]
    lines.extend(result.sorted_packages() if sort else result.packages)
    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    started = time.perf_counter()
    try:
        root = ensure_project_root(ns.project_root)
        options = merge_overrides(
            load_config(root),
            workers=ns.workers,
            exclude=ns.exclude,
            respect_gitignore=ns.gitignore,
        )
        result = run(root, options)
    except TPIUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    elapsed = time.perf_counter() - started

    if ns.json:
        report = RunReport.from_result(result, elapsed)
        sys.stdout.write(jdumps(report.model_dump(mode="json", by_alias=True)) + "\n")
    else:
        sys.stdout.write(render_text(result, elapsed, sort=ns.sort))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
