"""Activation check API command.

CLI: loclink link check <path>
"""

from collections.abc import Iterator

from ..config.LoclinkConfig import LoclinkConfig
from ..config.normalize_path import normalize_path
from ..link.has_link import has_link
from ..StageResult import StageResult
from . import ActivationCheckOutput
from .document_category import document_category
from .should_auto_activate import should_auto_activate


def cmd_check(path: str) -> StageResult:
    """Check whether link decoration would be enabled for a note."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        note_path = normalize_path(path)
        category = document_category(note_path)

        yield (0.2, "Loading configuration...")
        try:
            config = LoclinkConfig.load()
        except ValueError as e:
            result_obj.output = ActivationCheckOutput(
                path=str(note_path), category=category, has_link=False, enabled=False, errors=[str(e)]
            ).model_dump(mode="python")
            result_obj.result = f"Cannot load configuration: {e}"
            result_obj.success = False
            return

        yield (0.5, "Reading note...")
        if not note_path.is_file():
            result_obj.output = ActivationCheckOutput(
                path=str(note_path), category=category, has_link=False, enabled=False, errors=["File does not exist"]
            ).model_dump(mode="python")
            result_obj.result = f"File not found: {path}"
            result_obj.success = False
            return
        text = note_path.read_text(encoding="utf-8")

        yield (1.0, "Complete")
        enabled = should_auto_activate(category, text, config.activation.categories)
        result_obj.output = ActivationCheckOutput(
            path=str(note_path), category=category, has_link=has_link(text), enabled=enabled
        ).model_dump(mode="python")
        result_obj.result = f"Decoration {'enabled' if enabled else 'disabled'} for {note_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Checking {path}...", progress_callback=do_work)
