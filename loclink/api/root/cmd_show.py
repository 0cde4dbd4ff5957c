"""Root show API command.

CLI: loclink root show <path>
"""

from collections.abc import Iterator

from ..config.normalize_path import normalize_path
from ..link.parse_metalink_root import parse_metalink_root
from ..StageResult import StageResult
from . import RootShowOutput


def cmd_show(path: str) -> StageResult:
    """Show the root declared by a note's metalink."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        note_path = normalize_path(path)

        yield (0.3, "Reading note...")
        if not note_path.is_file():
            result_obj.output = RootShowOutput(
                path=str(note_path), metalink_root=None, errors=["File does not exist"]
            ).model_dump(mode="python")
            result_obj.result = f"File not found: {path}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        root = parse_metalink_root(note_path.read_text(encoding="utf-8"))
        result_obj.output = RootShowOutput(path=str(note_path), metalink_root=root).model_dump(mode="python")
        result_obj.result = f"Metalink root: {root}" if root else f"No metalink in {note_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Reading metalink of {path}...", progress_callback=do_work)
