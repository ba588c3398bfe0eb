from __future__ import annotations

from pathlib import Path

from flatcopy.copier import copy_file, resolve_collision, run_copy
from flatcopy.models import CopySummary, ProgressEvent
from flatcopy.scanner import scan

from .conftest import write_file


def test_resolve_collision_unused_name(tmp_path: Path) -> None:
    target = tmp_path / "a.txt"
    assert resolve_collision(target) == target


def test_resolve_collision_skips_taken_names(tmp_path: Path) -> None:
    write_file(tmp_path / "a.txt")
    write_file(tmp_path / "a_1.txt")
    assert resolve_collision(tmp_path / "a.txt") == tmp_path / "a_2.txt"


def test_resolve_collision_keeps_last_suffix(tmp_path: Path) -> None:
    write_file(tmp_path / "backup.tar.gz")
    assert resolve_collision(tmp_path / "backup.tar.gz").name == "backup.tar_1.gz"


def test_copy_file_creates_destination(tmp_path: Path) -> None:
    source = write_file(tmp_path / "src" / "report.pdf", "contents")
    dest = tmp_path / "out" / "flat"

    target = copy_file(source, dest)

    assert target == dest / "report.pdf"
    assert target.read_text() == "contents"


def test_run_copy_flattens_and_renames(source_tree: Path, tmp_path: Path) -> None:
    files = scan(source_tree, [".txt"], recursive=True)
    dest = tmp_path / "dest"

    events = list(run_copy(files, dest, dry_run=False))

    progress = [event for event in events if isinstance(event, ProgressEvent)]
    assert len(progress) == len(files) == 4
    assert events[-1] == CopySummary(copied_count=4, total_count=4)
    assert sorted(path.name for path in dest.iterdir()) == ["B.TXT", "a.txt", "a_1.txt", "c.txt"]
    assert (dest / "a.txt").read_text() == "alpha"
    assert (dest / "a_1.txt").read_text() == "second alpha"


def test_run_copy_progress_reports_count_before_each_file(tmp_path: Path) -> None:
    files = [write_file(tmp_path / "src" / f"{name}.txt") for name in ("one", "two", "three")]

    events = list(run_copy(files, tmp_path / "dest"))

    progress = events[:-1]
    assert [event.file_name for event in progress] == ["one.txt", "two.txt", "three.txt"]
    assert [event.percent_complete for event in progress] == [33, 66, 100]
    assert [event.copied_so_far for event in progress] == [0, 1, 2]
    assert all(event.total_count == 3 for event in progress)
    assert events[-1].copied_count == 3


def test_run_copy_skips_failed_files(tmp_path: Path) -> None:
    good = write_file(tmp_path / "src" / "good.txt")
    missing = tmp_path / "src" / "gone.txt"
    last = write_file(tmp_path / "src" / "last.txt")

    events = list(run_copy([good, missing, last], tmp_path / "dest"))

    summary = events[-1]
    assert isinstance(summary, CopySummary)
    assert summary.copied_count == 2
    assert summary.total_count == 3
    assert sorted(path.name for path in (tmp_path / "dest").iterdir()) == ["good.txt", "last.txt"]


def test_dry_run_matches_real_run_without_writing(source_tree: Path, tmp_path: Path) -> None:
    files = scan(source_tree, [".txt", ".md"], recursive=True)
    dry_dest = tmp_path / "dry"
    real_dest = tmp_path / "real"

    dry_events = list(run_copy(files, dry_dest, dry_run=True, delay=0))
    real_events = list(run_copy(files, real_dest, dry_run=False))

    assert not dry_dest.exists()
    assert dry_events[-1] == real_events[-1]
    assert len(dry_events) == len(real_events) == len(files) + 1


def test_run_copy_empty_input(tmp_path: Path) -> None:
    events = list(run_copy([], tmp_path / "dest"))
    assert events == [CopySummary(copied_count=0, total_count=0)]
    assert not (tmp_path / "dest").exists()


def test_resolve_collision_on_dotfile_keeps_extension(tmp_path: Path) -> None:
    write_file(tmp_path / ".txt")
    assert resolve_collision(tmp_path / ".txt").name == "_1.txt"
