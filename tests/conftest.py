import textwrap
from pathlib import Path

import pytest

from tpi.parsing import parse_source

# Импорт из унифицированной инфраструктуры
from tests.infrastructure import make_project, run_cli, jload


SAMPLE_SOURCE = """\
import requests
from uuid import UUID
from . import another
from .new import local
from ..again import loc
from django.http import (
    Http404,
    JsonResponse,
)

from .another import one, two, three
import os, sys

def f():
    import pandas
    from .new import local
    print('test')
"""


@pytest.fixture
def tmpproj(tmp_path: Path) -> Path:
    """Пустой корень проекта."""
    return make_project(tmp_path / "proj").build()


@pytest.fixture
def nested_project(tmp_path: Path) -> Path:
    """
    Пять файлов, в которых сторонние импорты спрятаны во всех видах
    составных инструкций.
    """
    return (
        make_project(tmp_path / "examples")
        .module("simple.py", SAMPLE_SOURCE)
        .module("control_flow.py", """
            import os

            if os.name == "nt":
                import if_package
            elif os.name == "java":
                import elif_package
            elif os.name == "posix":
                from elif2_package import thing
            else:
                import else_package

            for _ in range(1):
                import for_package
            else:
                import for_else_package

            while False:
                import while_package

            with open(__file__) as fh:
                import with_package
        """)
        .module("errors.py", """
            try:
                import try_package
            except ImportError:
                import except_package
            else:
                import try_else_package
            finally:
                import try_finally_package

            try:
                pass
            except Exception:
                if True:
                    import nested_if_except_package
        """)
        .module("defs.py", """
            import celery


            def f():
                import f_package


            class C:
                import c_package

                def m(self):
                    import m_package
                    if self:
                        import m_if_package
                        if not self:
                            import nested_m_if_package
        """)
        .module("pkg/stub.pyi", """
            import requests
            from . import sibling
        """)
        .build()
    )


NESTED_PROJECT_PACKAGES = {
    "pandas", "else_package", "if_package", "except_package", "c_package",
    "for_package", "f_package", "nested_if_except_package", "m_package",
    "celery", "requests", "try_else_package", "m_if_package",
    "nested_m_if_package", "try_finally_package", "django", "elif2_package",
    "with_package", "elif_package", "for_else_package", "while_package",
    "try_package",
}


def doc_of(source: str):
    """Dedent and parse source text."""
    return parse_source(textwrap.dedent(source))


__all__ = ["run_cli", "jload", "doc_of", "SAMPLE_SOURCE", "NESTED_PROJECT_PACKAGES"]
