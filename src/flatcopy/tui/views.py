"""Render wizard state to rich renderables."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.style import Style
from rich.text import Text

from ..models import CopyJob, Screen
from ..paths import bool_display
from ..wizard import WizardState, options_for

TITLE = "📁 Flat File Copy Utility"
PROGRESS_WIDTH = 50

ACCENT = "#7C3AED"
HEADER_STYLE = Style(color="#06B6D4", bold=True)
SELECTED_STYLE = Style(color="#FFFFFF", bgcolor=ACCENT, bold=True)
NORMAL_STYLE = Style(color="#94A3B8")
SUCCESS_STYLE = Style(color="#10B981", bold=True)
ERROR_STYLE = Style(color="#EF4444", bold=True)
WARNING_STYLE = Style(color="#F59E0B", bold=True)
INFO_STYLE = Style(color="#06B6D4")
BOX_BORDER = "#475569"

NAVIGATION_HINT = "↑/↓: navigation • Enter: select • Backspace: back • Esc: exit"
CUSTOM_HINT = "Enter: save • Backspace: delete character • Ctrl+X: cancel • Esc: exit"

_HEADERS = {
    Screen.MENU: "📋 Main Menu",
    Screen.SOURCE_SELECT: "📂 Select source folder",
    Screen.DEST_SELECT: "📁 Select destination folder",
    Screen.EXTENSIONS_PRESET: "📄 Select file types",
    Screen.EXTENSIONS_CUSTOM: "✏️ Custom extensions",
    Screen.OPTIONS: "⚙️ Additional settings",
    Screen.CONFIRM: "🚀 Operation confirmation",
    Screen.COPYING: "📋 Copying files",
    Screen.COMPLETE: "✅ Operation completed",
}


def _header(state: WizardState) -> Text:
    if state.screen in (Screen.BROWSE_SOURCE, Screen.BROWSE_DEST) and state.browse is not None:
        return Text(f"📁 {state.browse.current_path}", style=HEADER_STYLE)
    return Text(_HEADERS.get(state.screen, ""), style=HEADER_STYLE)


def _rows(labels: Sequence[str], cursor: int) -> Text:
    text = Text()
    for index, label in enumerate(labels):
        style = SELECTED_STYLE if index == cursor else NORMAL_STYLE
        text.append(f" {label} ", style=style)
        text.append("\n")
    return text


def _buttons(labels: Sequence[str], cursor: int) -> Text:
    text = Text()
    for index, label in enumerate(labels):
        style = SELECTED_STYLE if index == cursor else NORMAL_STYLE
        text.append(f" {label} ", style=style)
        text.append("  ")
    return text


def _box(body: RenderableType, border: str = BOX_BORDER) -> Panel:
    return Panel(body, box=box.ROUNDED, border_style=border, padding=(1, 2), expand=False)


def _confirm_body(state: WizardState) -> List[RenderableType]:
    config = state.config
    summary = "\n".join(
        [
            f"📂 Source folder: {config.source_dir}",
            f"📁 Destination folder: {config.dest_dir}",
            f"📄 Formats: {', '.join(config.extensions)}",
            f"🔍 Recursive: {bool_display(config.recursive)}",
            "📋 Copy mode: flat (all files in one folder)",
            f"🧪 Dry run mode: {bool_display(config.dry_run)}",
        ]
    )
    return [_box(Text(summary)), _buttons(options_for(state), state.cursor)]


def _custom_body(state: WizardState) -> List[RenderableType]:
    prompt = Text(
        "Enter file extensions separated by commas\n"
        "Example: .txt, .log, pdf, docx\n\n"
        f"Input: {state.custom_input}|"
    )
    return [
        _box(prompt),
        Text(CUSTOM_HINT, style=INFO_STYLE),
        Text(f"Current extensions: {', '.join(state.config.extensions)}", style=INFO_STYLE),
    ]


def _log_panel(log_lines: Iterable[str]) -> Panel:
    return Panel(
        Text("\n".join(log_lines) or "—", style=NORMAL_STYLE),
        title="Log",
        box=box.ROUNDED,
        border_style=BOX_BORDER,
    )


def render_progress(job: CopyJob) -> Panel:
    bar = ProgressBar(
        total=100,
        completed=job.percent_complete,
        width=PROGRESS_WIDTH,
        complete_style="#10B981",
        finished_style="#10B981",
        style="#374151",
    )
    body = Group(
        Text(f"Progress: {job.percent_complete}%"),
        bar,
        Text(f"Files: {job.copied_count}/{job.total_count}"),
        Text(f"Current: {job.current_file_name}"),
    )
    return Panel(body, box=box.ROUNDED, border_style="#06B6D4", padding=(1, 1), expand=False)


def render_summary(job: CopyJob) -> Panel:
    lines = Text(f"Files copied: {job.copied_count} of {job.total_count}\n")
    if not job.success:
        lines.append(f"Operation failed: {job.error or 'unknown error'}", style=ERROR_STYLE)
    elif job.dry_run:
        lines.append("Dry run completed, no files were written.", style=SUCCESS_STYLE)
    else:
        if job.skipped_count:
            lines.append(f"Skipped after errors: {job.skipped_count}\n", style=WARNING_STYLE)
        lines.append("Operation completed successfully!", style=SUCCESS_STYLE)
    return _box(lines)


def render_screen(state: WizardState, log_lines: Sequence[str] = ()) -> RenderableType:
    """Full-screen rendering of ``state``."""

    parts: List[RenderableType] = [
        Panel(Text(TITLE, style=Style(color=ACCENT, bold=True)), box=box.ROUNDED, border_style=ACCENT, expand=False),
        _header(state),
        Text(""),
    ]

    screen = state.screen
    if screen == Screen.CONFIRM:
        parts.extend(_confirm_body(state))
    elif screen == Screen.EXTENSIONS_CUSTOM:
        parts.extend(_custom_body(state))
    elif screen == Screen.COPYING and state.job is not None:
        parts.append(render_progress(state.job))
        if state.config.verbose:
            parts.append(_log_panel(log_lines))
    elif screen == Screen.COMPLETE and state.job is not None:
        parts.append(render_summary(state.job))
        if state.config.verbose:
            parts.append(_log_panel(log_lines))
        parts.append(Text("Press 'q' to exit", style=INFO_STYLE))
    else:
        parts.append(_rows(options_for(state), state.cursor))
        if screen == Screen.EXTENSIONS_PRESET:
            parts.append(Text(f"Current: {', '.join(state.config.extensions)}", style=INFO_STYLE))

    if state.message:
        parts.append(Text(f"⚠️ {state.message}", style=WARNING_STYLE))
    if screen != Screen.EXTENSIONS_CUSTOM:
        parts.append(Text(""))
        parts.append(Text(NAVIGATION_HINT, style=INFO_STYLE))
    return Group(*parts)


__all__ = ["render_screen", "render_progress", "render_summary"]
