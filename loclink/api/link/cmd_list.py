"""Link list API command.

CLI: loclink link list <path>
"""

from collections.abc import Iterator

from ..config.normalize_path import normalize_path
from ..StageResult import StageResult
from . import LinkListOutput
from .find_link_spans import find_link_spans
from .LinkKind import LinkKind
from .parse_location_link import parse_location_link
from .parse_metalink_root import parse_metalink_root


def cmd_list(path: str) -> StageResult:
    """List the links of a note in document order."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        note_path = normalize_path(path)

        yield (0.2, "Reading note...")
        if not note_path.is_file():
            result_obj.output = LinkListOutput(
                path=str(note_path), metalink_root=None, links=[], count=0, errors=["File does not exist"]
            ).model_dump(mode="python")
            result_obj.result = f"File not found: {path}"
            result_obj.success = False
            return
        text = note_path.read_text(encoding="utf-8")

        yield (0.5, "Scanning for links...")
        links = []
        for span in find_link_spans(text):
            line_start = text.rfind("\n", 0, span.start) + 1
            entry = {
                "kind": span.kind.value,
                "text": text[span.start : span.end],
                "line_number": text.count("\n", 0, span.start) + 1,
                "column_number": span.start - line_start + 1,
                "file": None,
                "line": None,
            }
            if span.kind is LinkKind.LOCATION:
                location = parse_location_link(text[line_start : span.end], span.start - line_start)
                if location is not None:
                    entry["file"] = location.file
                    entry["line"] = location.line
            links.append(entry)

        yield (1.0, "Complete")
        result_obj.output = LinkListOutput(
            path=str(note_path),
            metalink_root=parse_metalink_root(text),
            links=links,
            count=len(links),
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links)} links in {note_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Listing links in {path}...", progress_callback=do_work)
