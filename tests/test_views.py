from __future__ import annotations

from pathlib import Path

from rich.console import Console

from flatcopy.models import CopySummary, ProgressEvent, ScanComplete
from flatcopy.tui.views import render_screen
from flatcopy.wizard import MISSING_FOLDERS_WARNING, WizardState, apply_event

from .conftest import press


def _text(renderable) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(renderable)
    return console.export_text()


def _copying(session: WizardState, tmp_path: Path) -> WizardState:
    session.config.source_dir = tmp_path / "source"
    session.config.dest_dir = tmp_path / "dest"
    state, _ = press(session, *(("down",) * 4), "enter", "enter")
    return state


def test_menu_lists_rows_and_unset_folders(session: WizardState) -> None:
    text = _text(render_screen(session))
    assert "Main Menu" in text
    assert "Source folder: not selected" in text
    assert "File formats: .jpg, .png, .pdf" in text
    assert "Exit" in text


def test_warning_message_is_rendered(session: WizardState) -> None:
    state, _ = press(session, *(("down",) * 4), "enter")
    assert MISSING_FOLDERS_WARNING in _text(render_screen(state))


def test_custom_extensions_screen_shows_buffer(session: WizardState) -> None:
    state, _ = press(session, "down", "down", "enter", *(("down",) * 5), "enter")
    text = _text(render_screen(state))
    assert "Input: .jpg, .png, .pdf|" in text
    assert "Ctrl+X: cancel" in text


def test_copying_screen_shows_progress(session: WizardState, tmp_path: Path) -> None:
    state = _copying(session, tmp_path)
    state = apply_event(state, ScanComplete(files=(tmp_path / "a.txt", tmp_path / "b.txt", tmp_path / "c.txt")))
    state = apply_event(state, ProgressEvent("b.txt", 66, 3, 1))

    text = _text(render_screen(state))
    assert "Progress: 66%" in text
    assert "Files: 1/3" in text
    assert "Current: b.txt" in text


def test_verbose_copying_screen_shows_log(session: WizardState, tmp_path: Path) -> None:
    session.config.verbose = True
    state = _copying(session, tmp_path)
    text = _text(render_screen(state, ["Copied a.txt -> dest/a.txt"]))
    assert "Copied a.txt -> dest/a.txt" in text


def test_complete_screen_summary(session: WizardState, tmp_path: Path) -> None:
    state = apply_event(_copying(session, tmp_path), CopySummary(copied_count=2, total_count=3))
    text = _text(render_screen(state))
    assert "Files copied: 2 of 3" in text
    assert "Skipped after errors: 1" in text
    assert "Press 'q' to exit" in text


def test_complete_screen_failed_scan(session: WizardState, tmp_path: Path) -> None:
    state = apply_event(
        _copying(session, tmp_path),
        CopySummary(copied_count=0, total_count=0, success=False, error="Cannot scan /nowhere"),
    )
    text = _text(render_screen(state))
    assert "Files copied: 0 of 0" in text
    assert "Operation failed: Cannot scan /nowhere" in text
