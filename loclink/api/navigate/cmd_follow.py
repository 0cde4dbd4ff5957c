"""Navigate follow API command.

CLI: loclink link follow <path> <line> <column>
"""

from collections.abc import Iterator

from ..config.normalize_path import normalize_path
from ..StageResult import StageResult
from . import NavigateFollowOutput
from .line_to_offset import line_to_offset
from .Navigator import Navigator
from .TargetMissingError import TargetMissingError


def cmd_follow(path: str, line: int, column: int) -> StageResult:
    """Follow the link at ``line``/``column`` (both 1-based) of a note."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        note_path = normalize_path(path)

        yield (0.2, "Reading note...")
        if not note_path.is_file():
            result_obj.output = NavigateFollowOutput(
                path=str(note_path),
                state="idle",
                target_path=None,
                line=None,
                offset=None,
                errors=["File does not exist"],
            ).model_dump(mode="python")
            result_obj.result = f"File not found: {path}"
            result_obj.success = False
            return
        text = note_path.read_text(encoding="utf-8")
        line_start = line_to_offset(text, line)
        line_end = text.find("\n", line_start)
        if line_end == -1:
            line_end = len(text)
        column_offset = max(column, 1) - 1

        yield (0.5, "Resolving link...")
        navigator = Navigator()
        try:
            # A column past the end of its line never reaches into the next one
            target = None if column_offset > line_end - line_start else navigator.follow(text, line_start + column_offset)
        except TargetMissingError as e:
            result_obj.output = NavigateFollowOutput(
                path=str(note_path),
                state=navigator.state.value,
                target_path=str(e.path),
                line=None,
                offset=None,
                errors=[str(e)],
            ).model_dump(mode="python")
            result_obj.result = f"Link target missing: {e.path}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if target is None:
            result_obj.output = NavigateFollowOutput(
                path=str(note_path),
                state=navigator.state.value,
                target_path=None,
                line=None,
                offset=None,
                errors=[f"No link at {line}:{column}"],
            ).model_dump(mode="python")
            result_obj.result = f"No link at {line}:{column}"
            result_obj.success = False
            return

        result_obj.output = NavigateFollowOutput(
            path=str(note_path),
            state=navigator.state.value,
            target_path=str(target.path),
            line=target.line,
            offset=target.offset,
        ).model_dump(mode="python")
        result_obj.result = f"{target.path}:{target.line}"
        result_obj.success = True

    return StageResult(announce=f"Following link at {path}:{line}:{column}...", progress_callback=do_work)
