"""Location paste API command.

CLI: loclink location paste <path> [--offset N] [--metalink/--no-metalink]
"""

from collections.abc import Callable, Iterator

from ..config.LoclinkConfig import LoclinkConfig
from ..config.normalize_path import normalize_path
from ..decoration.TextBuffer import TextBuffer
from ..LoclinkError import LoclinkError
from ..StageResult import StageResult
from . import LocationPasteOutput
from .get_clipboard_store import get_clipboard_store
from .paste_location import paste_location


def cmd_paste(
    path: str,
    offset: int | None = None,
    metalink: bool | None = None,
    confirm: Callable[[str], bool] | None = None,
) -> StageResult:
    """Paste the clipboard's location into a note.

    Args:
        path: Note to paste into (created if missing)
        offset: Insertion offset, default end of the note
        metalink: Force (True) or forbid (False) metalink installation;
            None follows ``root.metalink_policy``
        confirm: Prompt used when the policy is ``ask``
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        note_path = normalize_path(path)

        def failure(message: str, error: str) -> None:
            result_obj.output = LocationPasteOutput(
                path=str(note_path),
                offset=offset if offset is not None else -1,
                inserted="",
                metalink_installed=False,
                metalink_root=None,
                errors=[error],
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        yield (0.2, "Loading configuration...")
        try:
            config = LoclinkConfig.load()
        except ValueError as e:
            failure(f"Cannot load configuration: {e}", str(e))
            return

        warnings: list[str] = []
        if metalink is not None:
            confirm_metalink: Callable[[str], bool] = lambda _root: metalink
        elif config.root.metalink_policy == "always":
            confirm_metalink = lambda _root: True
        elif config.root.metalink_policy == "ask" and confirm is not None:
            confirm_metalink = confirm
        else:
            confirm_metalink = lambda _root: False

        yield (0.4, "Reading note...")
        if note_path.exists() and not note_path.is_file():
            failure(f"Not a file: {path}", "Path is not a file")
            return
        buffer = TextBuffer.from_file(note_path) if note_path.exists() else TextBuffer(path=note_path)

        yield (0.6, "Inserting link...")
        try:
            pasted = paste_location(get_clipboard_store(), buffer, offset, confirm_metalink)
        except (LoclinkError, ValueError, IndexError) as e:
            failure(f"Cannot paste: {e}", str(e))
            return

        if not pasted.metalink_installed and pasted.metalink_root is None:
            warnings.append("Note has no metalink; link written with its captured path")

        yield (0.9, "Saving note...")
        try:
            note_path.parent.mkdir(parents=True, exist_ok=True)
            buffer.save()
        except OSError as e:
            failure(f"Cannot save note: {e}", str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = LocationPasteOutput(
            path=str(note_path),
            offset=pasted.offset,
            inserted=pasted.inserted,
            metalink_installed=pasted.metalink_installed,
            metalink_root=pasted.metalink_root,
            warnings=warnings,
        ).model_dump(mode="python")
        result_obj.result = f"Pasted {pasted.inserted.strip()} into {note_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Pasting location into {path}...", progress_callback=do_work)
