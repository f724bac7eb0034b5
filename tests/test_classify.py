from pathlib import Path

import pytest

from tpi.classify import ImportClassifier, classify
from tpi.stdlib import STANDARD_LIBRARY, StdlibRegistry
from tpi.types import Classification, Kind

from tests.infrastructure import make_project


@pytest.mark.parametrize("name", ["os", "sys", "uuid", "json", "__future__", "asyncio", "tomllib", "_thread"])
def test_stdlib_is_always_stdlib(tmp_path: Path, name: str):
    # even a local directory of the same name does not win over the registry
    (tmp_path / name).mkdir()
    assert classify(tmp_path, tmp_path / "x.py", name) == Classification(Kind.STDLIB, name)


def test_dotted_module_reduced_to_base(tmpproj: Path):
    cls = classify(tmpproj, tmpproj / "x.py", "django.http.response")
    assert cls == Classification(Kind.THIRD_PARTY, "django")
    assert cls.is_third_party


def test_local_package_submodule(tmpproj: Path):
    make_project(tmpproj).package("mypkg").module("mypkg/utils.py").module("mypkg/main.py", "import mypkg.utils")
    cls = classify(tmpproj, tmpproj / "mypkg" / "main.py", "mypkg.utils")
    assert cls == Classification(Kind.LOCAL, "mypkg")


def test_classification_is_idempotent(tmpproj: Path):
    make_project(tmpproj).package("mypkg")
    clf = ImportClassifier(tmpproj)
    for name in ("os", "mypkg", "requests.adapters"):
        assert clf.classify(tmpproj / "x.py", name) == clf.classify(tmpproj / "x.py", name)


def test_third_party_subset(tmpproj: Path):
    make_project(tmpproj).module("helpers.py")
    clf = ImportClassifier(tmpproj)
    modules = ["os", "helpers", "requests", "requests.adapters", "yaml"]
    assert clf.third_party(tmpproj / "x.py", modules) == {"requests", "yaml"}


def test_custom_registry(tmpproj: Path):
    clf = ImportClassifier(tmpproj, StdlibRegistry({"requests"}, version="custom"))
    assert clf.classify(tmpproj / "x.py", "requests").kind is Kind.STDLIB
    assert clf.classify(tmpproj / "x.py", "os").kind is Kind.THIRD_PARTY


def test_registry_is_read_only():
    assert "os" in STANDARD_LIBRARY
    assert "requests" not in STANDARD_LIBRARY
    assert not hasattr(STANDARD_LIBRARY, "add")
    with pytest.raises(AttributeError):
        STANDARD_LIBRARY.extra = 1  # type: ignore[attr-defined]
    assert STANDARD_LIBRARY.version == "3.12"
