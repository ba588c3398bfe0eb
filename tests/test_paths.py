from __future__ import annotations

from pathlib import Path

import pytest

from flatcopy.paths import (
    BACK_LABEL,
    BROWSE_LABEL,
    bool_display,
    build_shortcuts,
    is_filesystem_root,
    list_subdirectories,
    normalize_extension_list,
    split_extension,
    truncate_for_display,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (".txt, .log, pdf", [".txt", ".log", ".pdf"]),
        ("jpg, png, .gif", [".jpg", ".png", ".gif"]),
        ("  .doc,   .docx  , txt  ", [".doc", ".docx", ".txt"]),
        ("mp4 avi .mkv", [".mp4", ".avi", ".mkv"]),
        ("JPG,,Png", [".jpg", ".png"]),
        ("", []),
        (" , ,  ", []),
    ],
)
def test_normalize_extension_list(raw: str, expected: list[str]) -> None:
    assert normalize_extension_list(raw) == expected


@pytest.mark.parametrize("raw", [".txt, .log, pdf", "jpg png GIF", "  .doc,   .docx  , txt  ", ""])
def test_normalize_extension_list_is_idempotent(raw: str) -> None:
    first = normalize_extension_list(raw)
    assert normalize_extension_list(", ".join(first)) == first


def test_normalize_extension_list_keeps_duplicates() -> None:
    assert normalize_extension_list("txt, .TXT") == [".txt", ".txt"]


def test_list_subdirectories_sorted_and_visible_only(workspace: Path) -> None:
    assert list_subdirectories(workspace) == ["alpha", "beta"]


def test_list_subdirectories_unreadable_is_empty(tmp_path: Path) -> None:
    assert list_subdirectories(tmp_path / "missing") == []


def test_truncate_for_display() -> None:
    short = "/home/user/photos"
    assert truncate_for_display(short) == short
    exact = "x" * 50
    assert truncate_for_display(exact) == exact

    long = "/very/long/" + "segment/" * 10 + "end"
    shown = truncate_for_display(long)
    assert len(shown) == 50
    assert shown.startswith("...")
    assert shown.endswith(long[-47:])


def test_truncate_for_display_unset_path() -> None:
    assert truncate_for_display(None) == "not selected"
    assert truncate_for_display("") == "not selected"


def test_bool_display() -> None:
    assert bool_display(True) == "✅ Yes"
    assert bool_display(False) == "❌ No"


def test_build_shortcuts(tmp_path: Path) -> None:
    home = tmp_path / "home"
    cwd = tmp_path / "work"
    shortcuts = build_shortcuts(home, cwd)

    assert len(shortcuts) == 10
    assert shortcuts[0].path == cwd
    assert shortcuts[1].path == home
    assert shortcuts[4].path == home / "Downloads"
    assert [s.label for s in shortcuts[-2:]] == [BROWSE_LABEL, BACK_LABEL]
    assert all(s.path is None for s in shortcuts[-2:])


def test_is_filesystem_root(tmp_path: Path) -> None:
    assert is_filesystem_root(Path(tmp_path.anchor))
    assert not is_filesystem_root(tmp_path)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("photo.JPG", ("photo", ".JPG")),
        ("backup.tar.gz", ("backup.tar", ".gz")),
        (".txt", ("", ".txt")),
        ("README", ("README", "")),
        ("trailing.", ("trailing", ".")),
    ],
)
def test_split_extension_uses_last_dot(name: str, expected: tuple) -> None:
    assert split_extension(name) == expected
