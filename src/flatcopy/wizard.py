"""Navigation state machine driving the interactive wizard.

The wizard is a pure transition function: :func:`update` takes the current
state and a normalised key name and returns a new state together with an
optional :class:`~flatcopy.models.Command` for the host application to carry
out (quit, or start the background copy). Events produced by the copy worker
are folded in with :func:`apply_event`.

Key names follow Textual's conventions (``"up"``, ``"enter"``,
``"backspace"``, ``"ctrl+c"`` ...); printable input arrives as the single
character itself.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Tuple

from .config import ExtensionPreset, Settings
from .models import (
    BrowseContext,
    Command,
    CopyConfig,
    CopyJob,
    CopySummary,
    ProgressEvent,
    ScanComplete,
    Screen,
    Shortcut,
    WorkerEvent,
)
from .paths import (
    BACK_LABEL,
    bool_display,
    build_shortcuts,
    is_filesystem_root,
    list_subdirectories,
    normalize_extension_list,
    truncate_for_display,
)

# Menu rows
ROW_SOURCE = 0
ROW_DEST = 1
ROW_EXTENSIONS = 2
ROW_OPTIONS = 3
ROW_START = 4
ROW_EXIT = 5
MENU_ROW_COUNT = 6

# Options rows
OPTION_RECURSIVE = 0
OPTION_VERBOSE = 1
OPTION_DRY_RUN = 2
OPTION_BACK = 3

SELECT_FOLDER_LABEL = "✅ Select this folder"
UP_LABEL = "⬆️  Up"
CUSTOM_LABEL = "✏️  Custom extensions"
CONFIRM_LABELS = ("✅ Start", "❌ Cancel")

MISSING_FOLDERS_WARNING = "Please select source and destination folders first!"

UP_KEYS = {"up", "k"}
DOWN_KEYS = {"down", "j"}
LEFT_KEYS = {"left", "h"}
RIGHT_KEYS = {"right", "l"}
QUIT_KEYS = {"escape", "ctrl+c"}
CANCEL_KEY = "ctrl+x"
_CUSTOM_PUNCTUATION = {".", ",", " "}


@dataclass(slots=True)
class WizardState:
    """Everything the wizard knows about the running session."""

    config: CopyConfig
    shortcuts: Tuple[Shortcut, ...]
    presets: Tuple[ExtensionPreset, ...]
    start_dir: Path
    screen: Screen = Screen.MENU
    cursor: int = 0
    message: str = ""
    browse: Optional[BrowseContext] = None
    custom_input: str = ""
    job: Optional[CopyJob] = None
    quitting: bool = False
    dry_run_delay: float = 0.05


def new_session(
    settings: Settings | None = None,
    *,
    home: Path | None = None,
    cwd: Path | None = None,
) -> WizardState:
    """Build the initial state; shortcuts and presets are fixed from here on."""

    settings = settings or Settings()
    home = home if home is not None else Path.home()
    cwd = cwd if cwd is not None else Path.cwd()
    return WizardState(
        config=settings.initial_copy_config(),
        shortcuts=build_shortcuts(home, cwd),
        presets=tuple(settings.presets),
        start_dir=cwd,
        dry_run_delay=settings.dry_run_delay,
    )


def _clone(state: WizardState) -> WizardState:
    browse = state.browse
    if browse is not None:
        browse = replace(browse, listing=list(browse.listing))
    job = state.job
    if job is not None:
        job = replace(job, candidate_files=list(job.candidate_files))
    return replace(
        state,
        config=replace(state.config, extensions=list(state.config.extensions)),
        browse=browse,
        job=job,
    )


# ---------------------------------------------------------------------------
# Presentation contract
# ---------------------------------------------------------------------------
def _browse_has_up(browse: BrowseContext) -> bool:
    return not is_filesystem_root(browse.current_path)


def options_for(state: WizardState) -> List[str]:
    """Ordered row labels of the current screen."""

    config = state.config
    screen = state.screen
    if screen == Screen.MENU:
        return [
            f"📂 Source folder: {truncate_for_display(config.source_dir)}",
            f"📁 Destination folder: {truncate_for_display(config.dest_dir)}",
            f"📄 File formats: {', '.join(config.extensions)}",
            "⚙️  Additional settings",
            "🚀 Start copying",
            "🚪 Exit",
        ]
    if screen in (Screen.SOURCE_SELECT, Screen.DEST_SELECT):
        return [shortcut.label for shortcut in state.shortcuts]
    if screen in (Screen.BROWSE_SOURCE, Screen.BROWSE_DEST):
        browse = state.browse
        rows = [SELECT_FOLDER_LABEL]
        if browse is None:
            return rows + [BACK_LABEL]
        if _browse_has_up(browse):
            rows.append(UP_LABEL)
        rows.extend(f"📁 {name}" for name in browse.listing)
        rows.append(BACK_LABEL)
        return rows
    if screen == Screen.EXTENSIONS_PRESET:
        return [preset.label for preset in state.presets] + [CUSTOM_LABEL, BACK_LABEL]
    if screen == Screen.OPTIONS:
        return [
            f"🔍 Search in subfolders: {bool_display(config.recursive)}",
            f"📝 Verbose output: {bool_display(config.verbose)}",
            f"🧪 Dry run mode: {bool_display(config.dry_run)}",
            BACK_LABEL,
        ]
    if screen == Screen.CONFIRM:
        return list(CONFIRM_LABELS)
    return []


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------
def _move_cursor(state: WizardState, key: str, row_count: int) -> bool:
    if key in UP_KEYS:
        if state.cursor > 0:
            state.cursor -= 1
        return True
    if key in DOWN_KEYS:
        if state.cursor < row_count - 1:
            state.cursor += 1
        return True
    return False


def _to_menu(state: WizardState, row: int) -> None:
    state.screen = Screen.MENU
    state.cursor = row
    state.browse = None


def _enter_browse(state: WizardState, screen: Screen, path: Path) -> None:
    state.screen = screen
    state.cursor = 0
    state.browse = BrowseContext(current_path=path, listing=list_subdirectories(path))


def _update_menu(state: WizardState, key: str) -> Optional[Command]:
    if _move_cursor(state, key, MENU_ROW_COUNT) or key != "enter":
        return None
    if state.cursor == ROW_SOURCE:
        state.screen = Screen.SOURCE_SELECT
        state.cursor = 0
    elif state.cursor == ROW_DEST:
        state.screen = Screen.DEST_SELECT
        state.cursor = 0
    elif state.cursor == ROW_EXTENSIONS:
        state.screen = Screen.EXTENSIONS_PRESET
        state.cursor = 0
    elif state.cursor == ROW_OPTIONS:
        state.screen = Screen.OPTIONS
        state.cursor = 0
    elif state.cursor == ROW_START:
        if state.config.is_ready:
            state.screen = Screen.CONFIRM
            state.cursor = 0
        else:
            state.message = MISSING_FOLDERS_WARNING
    elif state.cursor == ROW_EXIT:
        state.quitting = True
        return Command.QUIT
    return None


def _update_folder_select(state: WizardState, key: str) -> Optional[Command]:
    is_source = state.screen == Screen.SOURCE_SELECT
    menu_row = ROW_SOURCE if is_source else ROW_DEST
    shortcuts = state.shortcuts
    if key == "backspace":
        _to_menu(state, menu_row)
        return None
    if _move_cursor(state, key, len(shortcuts)) or key != "enter":
        return None

    browse_row = len(shortcuts) - 2
    if state.cursor < browse_row:
        path = shortcuts[state.cursor].path
        if is_source:
            state.config.source_dir = path
        else:
            state.config.dest_dir = path
        _to_menu(state, menu_row)
    elif state.cursor == browse_row:
        _enter_browse(state, Screen.BROWSE_SOURCE if is_source else Screen.BROWSE_DEST, state.start_dir)
    else:
        _to_menu(state, menu_row)
    return None


def _update_browse(state: WizardState, key: str) -> Optional[Command]:
    is_source = state.screen == Screen.BROWSE_SOURCE
    back_screen = Screen.SOURCE_SELECT if is_source else Screen.DEST_SELECT
    browse = state.browse
    if browse is None:
        browse = state.browse = BrowseContext(
            current_path=state.start_dir, listing=list_subdirectories(state.start_dir)
        )
    if key == "backspace":
        state.screen = back_screen
        state.cursor = 0
        state.browse = None
        return None

    rows = options_for(state)
    if _move_cursor(state, key, len(rows)) or key != "enter":
        return None

    has_up = _browse_has_up(browse)
    first_dir_row = 2 if has_up else 1
    if state.cursor == 0:
        if is_source:
            state.config.source_dir = browse.current_path
            _to_menu(state, ROW_SOURCE)
        else:
            state.config.dest_dir = browse.current_path
            _to_menu(state, ROW_DEST)
    elif has_up and state.cursor == 1:
        parent = browse.current_path.parent
        state.browse = BrowseContext(current_path=parent, listing=list_subdirectories(parent))
        state.cursor = 0
    elif state.cursor == len(rows) - 1:
        state.screen = back_screen
        state.cursor = 0
        state.browse = None
    else:
        index = state.cursor - first_dir_row
        if 0 <= index < len(browse.listing):
            child = browse.current_path / browse.listing[index]
            state.browse = BrowseContext(current_path=child, listing=list_subdirectories(child))
            state.cursor = 0
    return None


def _update_extensions_preset(state: WizardState, key: str) -> Optional[Command]:
    presets = state.presets
    if key == "backspace":
        _to_menu(state, ROW_EXTENSIONS)
        return None
    if _move_cursor(state, key, len(presets) + 2) or key != "enter":
        return None
    if state.cursor < len(presets):
        state.config.extensions = list(presets[state.cursor].extensions)
        _to_menu(state, ROW_EXTENSIONS)
    elif state.cursor == len(presets):
        state.screen = Screen.EXTENSIONS_CUSTOM
        state.custom_input = ", ".join(state.config.extensions)
        state.cursor = 0
    else:
        _to_menu(state, ROW_EXTENSIONS)
    return None


def _accepts_custom_char(key: str) -> bool:
    if len(key) != 1:
        return False
    return (key.isascii() and key.isalnum()) or key in _CUSTOM_PUNCTUATION


def _update_extensions_custom(state: WizardState, key: str) -> Optional[Command]:
    if key == "enter":
        state.config.extensions = normalize_extension_list(state.custom_input)
        state.custom_input = ""
        _to_menu(state, ROW_EXTENSIONS)
    elif key == "backspace":
        state.custom_input = state.custom_input[:-1]
    elif key == CANCEL_KEY:
        state.custom_input = ""
        state.screen = Screen.EXTENSIONS_PRESET
        state.cursor = len(state.presets)
    elif key == "space":
        state.custom_input += " "
    elif _accepts_custom_char(key):
        state.custom_input += key
    return None


def _update_options(state: WizardState, key: str) -> Optional[Command]:
    if key == "backspace":
        _to_menu(state, ROW_OPTIONS)
        return None
    if _move_cursor(state, key, OPTION_BACK + 1) or key != "enter":
        return None
    config = state.config
    if state.cursor == OPTION_RECURSIVE:
        config.recursive = not config.recursive
    elif state.cursor == OPTION_VERBOSE:
        config.verbose = not config.verbose
    elif state.cursor == OPTION_DRY_RUN:
        config.dry_run = not config.dry_run
    else:
        _to_menu(state, ROW_OPTIONS)
    return None


def _update_confirm(state: WizardState, key: str) -> Optional[Command]:
    if key in LEFT_KEYS:
        state.cursor = 0
    elif key in RIGHT_KEYS:
        state.cursor = 1
    elif key == "backspace":
        _to_menu(state, ROW_START)
    elif key == "enter":
        if state.cursor == 0 and state.config.is_ready:
            state.screen = Screen.COPYING
            state.cursor = 0
            state.job = CopyJob(dest_dir=state.config.dest_dir, dry_run=state.config.dry_run)
            return Command.START_COPY
        _to_menu(state, ROW_START)
    return None


def update(state: WizardState, key: str) -> Tuple[WizardState, Optional[Command]]:
    """Apply one key press and return the next state and any requested command."""

    state = _clone(state)
    state.message = ""

    if key in QUIT_KEYS:
        state.quitting = True
        return state, Command.QUIT

    screen = state.screen
    if screen == Screen.MENU:
        command = _update_menu(state, key)
    elif screen in (Screen.SOURCE_SELECT, Screen.DEST_SELECT):
        command = _update_folder_select(state, key)
    elif screen in (Screen.BROWSE_SOURCE, Screen.BROWSE_DEST):
        command = _update_browse(state, key)
    elif screen == Screen.EXTENSIONS_PRESET:
        command = _update_extensions_preset(state, key)
    elif screen == Screen.EXTENSIONS_CUSTOM:
        command = _update_extensions_custom(state, key)
    elif screen == Screen.OPTIONS:
        command = _update_options(state, key)
    elif screen == Screen.CONFIRM:
        command = _update_confirm(state, key)
    elif screen == Screen.COMPLETE and key == "q":
        state.quitting = True
        command = Command.QUIT
    else:
        command = None
    return state, command


def apply_event(state: WizardState, event: WorkerEvent) -> WizardState:
    """Fold a worker event into the copy job shown on the copying screens."""

    state = _clone(state)
    job = state.job
    if job is None:
        job = state.job = CopyJob(dest_dir=state.config.dest_dir or state.start_dir)

    if isinstance(event, ScanComplete):
        job.candidate_files = list(event.files)
        job.total_count = len(event.files)
    elif isinstance(event, ProgressEvent):
        job.current_file_name = event.file_name
        job.percent_complete = event.percent_complete
        job.total_count = event.total_count
        job.copied_count = event.copied_so_far
    elif isinstance(event, CopySummary):
        job.copied_count = event.copied_count
        job.total_count = event.total_count
        job.success = event.success
        job.error = event.error
        job.finished = True
        if event.success and event.total_count:
            job.percent_complete = 100
        state.screen = Screen.COMPLETE
        state.cursor = 0
    return state


__all__ = [
    "WizardState",
    "new_session",
    "options_for",
    "update",
    "apply_event",
    "MISSING_FOLDERS_WARNING",
]
