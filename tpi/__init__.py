"""
third-party-imports: find the external packages a Python project depends on.
"""

from .engine import run
from .types import RunResult, ScanOptions

__all__ = ["run", "RunResult", "ScanOptions"]
