from pathlib import Path

from tpi.resolve import is_local

from tests.infrastructure import make_project


def test_root_package_directory(tmpproj: Path):
    make_project(tmpproj).package("mypkg")
    assert is_local(tmpproj, tmpproj / "main.py", "mypkg")


def test_root_module_file_and_stub(tmpproj: Path):
    make_project(tmpproj).module("settings.py").module("typed_only.pyi")
    assert is_local(tmpproj, tmpproj / "main.py", "settings")
    assert is_local(tmpproj, tmpproj / "main.py", "typed_only")


def test_namespace_directory_without_init_counts(tmpproj: Path):
    (tmpproj / "ns").mkdir()
    assert is_local(tmpproj, tmpproj / "main.py", "ns")


def test_sibling_of_importing_file(tmpproj: Path):
    make_project(tmpproj).module("app/core/helpers.py").module("app/core/views.py")
    assert is_local(tmpproj, tmpproj / "app" / "core" / "views.py", "helpers")
    # not visible from another directory
    assert not is_local(tmpproj, tmpproj / "app" / "main.py", "helpers")


def test_running_from_inside_the_package(tmp_path: Path):
    root = tmp_path / "mytool"
    make_project(root).module("cli.py", "import mytool.core")
    assert is_local(root, root / "cli.py", "mytool")


def test_root_name_checked_after_symlink_resolution(tmp_path: Path):
    real = tmp_path / "realname"
    real.mkdir()
    link = tmp_path / "alias"
    link.symlink_to(real, target_is_directory=True)
    assert is_local(link, link / "x.py", "realname")
    assert not is_local(link, link / "x.py", "alias")


def test_intermediate_ancestors_are_not_searched(tmpproj: Path):
    make_project(tmpproj).module("a/shared.py").module("a/b/c/deep.py")
    assert not is_local(tmpproj, tmpproj / "a" / "b" / "c" / "deep.py", "shared")


def test_other_suffixes_do_not_count(tmpproj: Path):
    (tmpproj / "data.txt").write_text("x", encoding="utf-8")
    (tmpproj / "native.so").write_bytes(b"\0")
    assert not is_local(tmpproj, tmpproj / "main.py", "data")
    assert not is_local(tmpproj, tmpproj / "main.py", "native")


def test_missing_root_never_raises(tmp_path: Path):
    ghost = tmp_path / "does-not-exist"
    assert not is_local(ghost, ghost / "x.py", "requests")
