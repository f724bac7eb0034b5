"""
Classification of imports into standard library, local, or third-party.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from .resolve import is_local
from .stdlib import STANDARD_LIBRARY, StdlibRegistry
from .types import Classification, Kind, ModuleBase, module_base


class ImportClassifier:
    """
    Classifies module references of files under one project root.

    Holds only read-only state (the root path and the registry), so a single
    instance is shared by all scanning workers.
    """

    def __init__(self, project_root: Path, registry: StdlibRegistry = STANDARD_LIBRARY):
        self.project_root = project_root
        self.registry = registry

    def classify(self, file_path: Path, module: str) -> Classification:
        """
        Classify a (possibly dotted) module name imported from `file_path`.

        Only the module base takes part in the decision:
        standard library first, then local lookup, otherwise third-party.
        """
        base = module_base(module)
        if base in self.registry:
            return Classification(Kind.STDLIB, base)
        if is_local(self.project_root, file_path, base):
            return Classification(Kind.LOCAL, base)
        return Classification(Kind.THIRD_PARTY, base)

    def third_party(self, file_path: Path, modules: Iterable[str]) -> Set[ModuleBase]:
        """Subset of `modules` (reduced to bases) that are third-party packages."""
        result: Set[ModuleBase] = set()
        for module in modules:
            cls = self.classify(file_path, module)
            if cls.is_third_party:
                result.add(cls.base)
        return result


def classify(
    project_root: Path,
    file_path: Path,
    module: str,
    registry: StdlibRegistry = STANDARD_LIBRARY,
) -> Classification:
    return ImportClassifier(project_root, registry).classify(file_path, module)


__all__ = ["ImportClassifier", "classify"]
