"""Tests for the depth-first file walk."""

import os
from pathlib import Path

import pytest

from autoloader.find_file_in_directory import find_file_in_directory


def touch(path: Path) -> Path:
    """Create an empty file, including its parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    return path


def test_finds_file_at_top_level(tmp_path: Path) -> None:
    """Verify that a file directly in the directory is found."""
    target = touch(tmp_path / "Helper.php")
    assert find_file_in_directory("Helper.php", tmp_path) == str(target)


def test_finds_deeply_nested_file(tmp_path: Path) -> None:
    """Verify that depth does not matter."""
    target = touch(tmp_path / "a" / "b" / "c" / "d" / "Helper.php")
    assert find_file_in_directory("Helper.php", tmp_path) == str(target)


def test_match_is_exact_and_case_sensitive(tmp_path: Path) -> None:
    """Verify that similar names do not match."""
    touch(tmp_path / "helper.php")
    touch(tmp_path / "Helper.php.bak")
    touch(tmp_path / "Helper.inc")
    assert find_file_in_directory("Helper.php", tmp_path) is None


def test_directory_with_matching_name_is_not_returned(tmp_path: Path) -> None:
    """Verify that a directory named like the target is walked, not returned."""
    (tmp_path / "Helper.php").mkdir()
    assert find_file_in_directory("Helper.php", tmp_path) is None


def test_depth_first_in_sorted_order(tmp_path: Path) -> None:
    """Verify that an earlier subdirectory wins over a later sibling file."""
    nested = touch(tmp_path / "A" / "deep" / "Helper.php")
    touch(tmp_path / "B" / "Helper.php")
    assert find_file_in_directory("Helper.php", tmp_path) == str(nested)


def test_missing_directory(tmp_path: Path) -> None:
    """Verify that a nonexistent root yields no match."""
    assert find_file_in_directory("Helper.php", tmp_path / "missing") is None


def test_root_is_a_file(tmp_path: Path) -> None:
    """Verify that a file given as root yields no match."""
    target = touch(tmp_path / "Helper.php")
    assert find_file_in_directory("Helper.php", target) is None


def test_very_deep_tree_does_not_hit_recursion_limit(tmp_path: Path) -> None:
    """Verify that the walk is not bounded by the interpreter stack."""
    current = tmp_path
    for _ in range(1100):
        current = current / "d"
        current.mkdir()
    target = touch(current / "Helper.php")
    assert find_file_in_directory("Helper.php", tmp_path) == str(target)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinked_directory_is_followed(tmp_path: Path) -> None:
    """Verify that symlinks to directories are searched."""
    touch(tmp_path / "real" / "Helper.php")
    root = tmp_path / "root"
    root.mkdir()
    (root / "link").symlink_to(tmp_path / "real", target_is_directory=True)
    assert find_file_in_directory("Helper.php", root) == str(
        root / "link" / "Helper.php"
    )


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlink_cycle_terminates(tmp_path: Path) -> None:
    """Verify that a symlink pointing back up the tree is not followed forever."""
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "loop").symlink_to(tmp_path, target_is_directory=True)
    touch(tmp_path / "z" / "Other.php")
    assert find_file_in_directory("Missing.php", tmp_path) is None
    assert find_file_in_directory("Other.php", tmp_path) == str(
        tmp_path / "z" / "Other.php"
    )


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permissions are not enforced for root or on Windows",
)
def test_unreadable_directory_is_skipped(tmp_path: Path) -> None:
    """Verify that the walk continues past a directory it cannot list."""
    locked = tmp_path / "a"
    touch(locked / "Helper.php")
    target = touch(tmp_path / "b" / "Helper.php")
    locked.chmod(0)
    try:
        assert find_file_in_directory("Helper.php", tmp_path) == str(target)
    finally:
        locked.chmod(0o755)


def test_root_string_is_not_normalized(tmp_path: Path) -> None:
    """Verify that the root is joined to entry names as given."""
    touch(tmp_path / "Helper.php")
    root = f"{tmp_path}{os.sep}{os.sep}"
    assert find_file_in_directory("Helper.php", root) == root + "Helper.php"
