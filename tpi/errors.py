"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TPIUserError.

Programming errors and bugs should NOT inherit from TPIUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path


class TPIUserError(Exception):
    """
    Base class for all user-facing errors in third-party-imports.

    These errors indicate problems that the user can fix:
    a wrong project path, a broken tpi.yaml, etc.
    """
    pass


class InvalidProjectRootError(TPIUserError):
    """Корень проекта не существует или не является каталогом."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ConfigError(TPIUserError):
    """Ошибка чтения или валидации tpi.yaml."""
    pass


class ParseError(Exception):
    """
    Source file could not be parsed.

    Internal per-file error: the scheduler absorbs it and skips the file.
    """

    def __init__(self, path: Path | None, message: str):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


__all__ = ["TPIUserError", "InvalidProjectRootError", "ConfigError", "ParseError"]
