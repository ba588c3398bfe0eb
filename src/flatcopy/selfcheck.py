"""Non-interactive self-check exercising discovery, parsing and copying."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from .copier import copy_file
from .paths import build_shortcuts, list_subdirectories, normalize_extension_list
from .scanner import ScanFailed, scan

FIXTURE_SOURCE = "test_source"
FIXTURE_DEST = "test_dest"
SAMPLE_INPUTS = (
    ".txt, .log, pdf",
    "jpg, png, .gif",
    "  .doc,   .docx  , txt  ",
    "mp4 avi .mkv",
)
PREVIEW_LIMIT = 3


def _check_scan(console: Console, cwd: Path) -> None:
    extensions = [".py", ".md"]
    try:
        files = scan(cwd, extensions, recursive=True)
    except ScanFailed as exc:
        console.print(f"[red]❌ Scanning error:[/red] {exc}")
        return
    console.print(f"[green]✅ Found {len(files)} files with extensions {', '.join(extensions)}[/green]")
    for file in files[:PREVIEW_LIMIT]:
        console.print(f"   - {file.name}")
    if len(files) > PREVIEW_LIMIT:
        console.print(f"   ... and {len(files) - PREVIEW_LIMIT} more files")


def _check_fixture_copy(console: Console, source: Path, dest: Path) -> None:
    console.print("\n[bold]📁 Testing copy functionality...[/bold]")
    try:
        files = scan(source, [".txt", ".md"], recursive=True)
    except ScanFailed as exc:
        console.print(f"[red]❌ {FIXTURE_SOURCE} scanning error:[/red] {exc}")
        return
    console.print(f"[green]✅ Found {len(files)} files for copying in {FIXTURE_SOURCE}[/green]")
    if not files:
        return
    for file in files:
        console.print(f"   - {file.name} (from {file.parent})")

    console.print("📋 Copying files in flat structure...")
    copied = 0
    for file in files:
        try:
            target = copy_file(file, dest)
        except OSError as exc:
            console.print(f"   [red]❌ {file.name}: {exc}[/red]")
            continue
        copied += 1
        console.print(f"   [green]✅ {file.name}[/green] → {target.name}")
    console.print(f"📁 Copied {copied} files to {dest}")


def _check_parsing(console: Console) -> None:
    console.print("\n[bold]🔧 Testing extensions parsing...[/bold]")
    table = Table(show_header=True)
    table.add_column("Input")
    table.add_column("Parsed")
    for raw in SAMPLE_INPUTS:
        table.add_row(repr(raw), ", ".join(normalize_extension_list(raw)))
    console.print(table)


def _check_custom_scan(console: Console, source: Path) -> None:
    console.print("\n[bold]📁 Test with custom extensions...[/bold]")
    extensions = normalize_extension_list(".log, ini, csv")
    try:
        files = scan(source, extensions, recursive=True)
    except ScanFailed as exc:
        console.print(f"[red]❌ Scanning error:[/red] {exc}")
        return
    console.print(f"[green]✅ Found {len(files)} files with custom extensions {', '.join(extensions)}:[/green]")
    for file in files:
        console.print(f"   - {file.name}")


def run_self_check(console: Console, cwd: Path | None = None, home: Path | None = None) -> None:
    """Print the outcome of each check; failures are reported, never raised."""

    cwd = cwd if cwd is not None else Path.cwd()
    home = home if home is not None else Path.home()

    console.print("[bold]🧪 flatcopy self-check[/bold]")
    console.print("=" * 23)
    console.print(f"[green]✅ Working directory: {cwd}[/green]")
    shortcuts = build_shortcuts(home, cwd)
    console.print(f"[green]✅ Found {len(shortcuts)} directory shortcuts[/green]")

    _check_scan(console, cwd)
    console.print(f"[green]✅ Found {len(list_subdirectories(cwd))} subdirectories[/green]")

    source = cwd / FIXTURE_SOURCE
    if source.is_dir():
        _check_fixture_copy(console, source, cwd / FIXTURE_DEST)

    _check_parsing(console)

    if source.is_dir():
        _check_custom_scan(console, source)

    console.print("\n[bold green]🎯 Core functions work correctly![/bold green]")
    console.print("For full testing run in an interactive terminal:")
    console.print("   flatcopy")


__all__ = ["run_self_check"]
