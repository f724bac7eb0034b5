"""
Утилиты для создания файлов и директорий в тестах.
"""

from __future__ import annotations

import textwrap
from pathlib import Path


def write(p: Path, text: str) -> Path:
    """
    Записывает текст в файл, создавая родительские директории при необходимости.

    Args:
        p: Путь к файлу
        text: Содержимое для записи

    Returns:
        Путь к созданному файлу
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_source_file(p: Path, content: str) -> Path:
    """
    Создает Python-файл: содержимое проходит через dedent,
    первой строкой добавляется комментарий с именем файла.
    """
    body = textwrap.dedent(content).strip()
    lines = [f"# Source file: {p.name}", ""]
    if body:
        lines.append(body)
    return write(p, "\n".join(lines) + "\n")


__all__ = ["write", "write_source_file"]
