"""Location capture API command.

CLI: loclink location capture <path> <line>
"""

from collections.abc import Iterator

from ..config.LoclinkConfig import LoclinkConfig
from ..LoclinkError import LoclinkError
from ..root.detect_root import make_root_detector
from ..StageResult import StageResult
from . import LocationCaptureOutput
from .capture_location import capture_location
from .get_clipboard_store import get_clipboard_store


def cmd_capture(path: str, line: int) -> StageResult:
    """Capture ``path:line`` into the clipboard."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = LoclinkConfig.load()
            store = get_clipboard_store()
            previous = store.peek()
        except ValueError as e:
            result_obj.output = LocationCaptureOutput(location=None, previous=None, errors=[str(e)]).model_dump(
                mode="python"
            )
            result_obj.result = f"Cannot capture location: {e}"
            result_obj.success = False
            return

        yield (0.5, "Detecting project root...")
        try:
            location = capture_location(store, path, line, make_root_detector(config.root.markers))
        except (LoclinkError, ValueError) as e:
            result_obj.output = LocationCaptureOutput(
                location=None,
                previous=previous.to_dict() if previous else None,
                errors=[str(e)],
            ).model_dump(mode="python")
            result_obj.result = f"Cannot capture location: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if location.root else ["No project root detected; link will carry an absolute path"]
        result_obj.output = LocationCaptureOutput(
            location=location.to_dict(),
            previous=previous.to_dict() if previous else None,
            warnings=warnings,
        ).model_dump(mode="python")
        result_obj.result = f"Captured {location.file}:L{location.line}"
        result_obj.success = True

    return StageResult(announce=f"Capturing {path}:{line}...", progress_callback=do_work)
