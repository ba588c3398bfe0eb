from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest

from flatcopy.config import Settings
from flatcopy.models import Command
from flatcopy.wizard import WizardState, new_session, update


def write_file(path: Path, text: str = "data") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def press(state: WizardState, *keys: str) -> Tuple[WizardState, Command | None]:
    command = None
    for key in keys:
        state, command = update(state, key)
    return state, command


@pytest.fixture()
def source_tree(tmp_path: Path) -> Path:
    root = tmp_path / "source"
    write_file(root / "a.txt", "alpha")
    write_file(root / "B.TXT", "bravo")
    write_file(root / "notes.md", "notes")
    write_file(root / "image.jpg", "jpeg")
    write_file(root / "nested" / "c.txt", "charlie")
    write_file(root / "nested" / "deeper" / "a.txt", "second alpha")
    (root / "folder.txt").mkdir()
    return root


@pytest.fixture()
def settings() -> Settings:
    return Settings(dry_run_delay=0)


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    for name in ("beta", "alpha", ".hidden"):
        (root / name).mkdir(parents=True)
    (root / "alpha" / "inner").mkdir()
    write_file(root / "file.txt")
    return root


@pytest.fixture()
def session(settings: Settings, workspace: Path, tmp_path: Path) -> WizardState:
    return new_session(settings, home=tmp_path / "home", cwd=workspace)
