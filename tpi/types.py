from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple, Union

# ---- Aliases for clarity ----
ModuleBase = str  # "django" для "django.http"

SOURCE_SUFFIX = ".py"
STUB_SUFFIX = ".pyi"
SOURCE_EXTENSIONS: FrozenSet[str] = frozenset({SOURCE_SUFFIX, STUB_SUFFIX})


# ---- Import references ----

@dataclass(frozen=True)
class DirectImport:
    """`import a.b.c as x` — one reference per imported name."""
    module: str
    alias: Optional[str] = None


@dataclass(frozen=True)
class FromImport:
    """
    `from ..a.b import x, y`.

    level — number of leading dots (0 for absolute imports);
    module is None for `from . import x`.
    """
    module: Optional[str]
    level: int = 0
    names: Tuple[str, ...] = ()

    @property
    def is_absolute(self) -> bool:
        return self.level == 0 and bool(self.module)


ImportRef = Union[DirectImport, FromImport]


def module_base(module: str) -> ModuleBase:
    """Первый сегмент dotted-имени: 'django.http' → 'django'."""
    return module.split(".", 1)[0]


# ---- Classification ----

class Kind(str, Enum):
    STDLIB = "stdlib"
    LOCAL = "local"
    THIRD_PARTY = "third_party"


@dataclass(frozen=True)
class Classification:
    kind: Kind
    base: ModuleBase

    @property
    def is_third_party(self) -> bool:
        return self.kind is Kind.THIRD_PARTY


# ---- Run options / result ----

@dataclass(frozen=True)
class ScanOptions:
    workers: Optional[int] = None  # None → размер пула по умолчанию
    exclude: Tuple[str, ...] = ()  # gitwildmatch-паттерны относительно корня
    respect_gitignore: bool = False


@dataclass(frozen=True)
class RunResult:
    """
    Итог прогона по проекту.

    file_count counts every dispatched file, including the ones that
    failed to read or parse (those are also counted in failed_files).
    """
    file_count: int = 0
    packages: FrozenSet[ModuleBase] = field(default_factory=frozenset)
    failed_files: int = 0

    def sorted_packages(self) -> list[str]:
        return sorted(self.packages)


__all__ = [
    "ModuleBase", "SOURCE_SUFFIX", "STUB_SUFFIX", "SOURCE_EXTENSIONS",
    "DirectImport", "FromImport", "ImportRef", "module_base",
    "Kind", "Classification", "ScanOptions", "RunResult",
]
