"""Location show API command.

CLI: loclink location show
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import LocationShowOutput
from .get_clipboard_store import get_clipboard_store


def cmd_show() -> StageResult:
    """Show the location held in the clipboard."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        store = get_clipboard_store()

        yield (0.5, "Reading clipboard...")
        try:
            location = store.peek()
        except ValueError as e:
            result_obj.output = LocationShowOutput(
                location=None, store_path=str(store.path), errors=[str(e)]
            ).model_dump(mode="python")
            result_obj.result = f"Cannot read clipboard: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LocationShowOutput(
            location=location.to_dict() if location else None, store_path=str(store.path)
        ).model_dump(mode="python")
        result_obj.result = f"Clipboard holds {location.file}:L{location.line}" if location else "Clipboard is empty"
        result_obj.success = True

    return StageResult(announce="Reading clipboard...", progress_callback=do_work)
