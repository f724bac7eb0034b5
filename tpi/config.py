from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .types import ScanOptions

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

# Single source of truth for the configuration file name.
CONFIG_FILE = "tpi.yaml"

_KNOWN_KEYS = ("workers", "exclude", "gitignore")


def config_path(root: Path) -> Path:
    """Path to the optional project configuration file <root>/tpi.yaml."""
    return root / CONFIG_FILE


def load_config(root: Path) -> ScanOptions:
    """
    Read <root>/tpi.yaml. Missing file → defaults.

    Raises:
        ConfigError: malformed YAML, unknown keys or wrong value types
    """
    p = config_path(root)
    if not p.is_file():
        return ScanOptions()
    try:
        raw = _yaml.load(p.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        raise ConfigError(f"{p}: cannot read config: {e}") from e
    options = parse_config(raw, source=str(p))
    logger.debug(f"Loaded {p}: {options}")
    return options


def parse_config(raw: Any, *, source: str = CONFIG_FILE) -> ScanOptions:
    if raw is None:
        return ScanOptions()
    if not isinstance(raw, dict):
        raise ConfigError(f"{source}: must be a mapping with keys: {', '.join(_KNOWN_KEYS)}")

    unknown = sorted(str(k) for k in raw if k not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source}: unknown keys: {', '.join(unknown)}")

    return ScanOptions(
        workers=_parse_workers(raw.get("workers"), f"{source}: workers"),
        exclude=tuple(_parse_exclude(raw.get("exclude"), source)),
        respect_gitignore=_parse_bool(raw.get("gitignore", False), f"{source}: gitignore"),
    )


def _parse_workers(val: Any, where: str) -> Optional[int]:
    if val is None:
        return None
    # bool is a subclass of int
    if isinstance(val, bool) or not isinstance(val, int) or val < 1:
        raise ConfigError(f"{where}: expected positive integer, got {val!r}")
    return val


def _parse_exclude(val: Any, source: str) -> List[str]:
    if val is None:
        return []
    if isinstance(val, str):
        return [val]
    if not isinstance(val, list) or not all(isinstance(x, str) for x in val):
        raise ConfigError(f"{source}: exclude: expected a list of glob strings")
    return list(val)


def _parse_bool(val: Any, where: str) -> bool:
    if not isinstance(val, bool):
        raise ConfigError(f"{where}: expected true/false, got {val!r}")
    return val


def merge_overrides(
    base: ScanOptions,
    *,
    workers: Optional[int] = None,
    exclude: Sequence[str] = (),
    respect_gitignore: Optional[bool] = None,
) -> ScanOptions:
    """
    Наложить параметры командной строки поверх файла конфигурации.
    Исключения из CLI дополняют список из файла, остальные значения замещают его.
    """
    changes: Dict[str, Any] = {}
    if workers is not None:
        if workers < 1:
            raise ConfigError(f"--workers: expected positive integer, got {workers}")
        changes["workers"] = workers
    if exclude:
        changes["exclude"] = tuple(base.exclude) + tuple(exclude)
    if respect_gitignore is not None:
        changes["respect_gitignore"] = respect_gitignore
    return replace(base, **changes) if changes else base


__all__ = ["CONFIG_FILE", "config_path", "load_config", "parse_config", "merge_overrides"]
