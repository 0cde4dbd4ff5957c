"""Root install API command.

CLI: loclink root install <path> <root>
"""

from collections.abc import Iterator

from ..config.normalize_path import normalize_path
from ..decoration.TextBuffer import TextBuffer
from ..link.parse_metalink_root import parse_metalink_root
from ..StageResult import StageResult
from . import RootInstallOutput
from .canonicalize_root import canonicalize_root
from .install_metalink import install_metalink


def cmd_install(path: str, root: str) -> StageResult:
    """Append a metalink declaring ``root`` to a note that has none."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        note_path = normalize_path(path)

        yield (0.3, "Reading note...")
        if note_path.exists() and not note_path.is_file():
            result_obj.output = RootInstallOutput(
                path=str(note_path), root=root, installed=False, metalink_root=None, errors=["Path is not a file"]
            ).model_dump(mode="python")
            result_obj.result = f"Not a file: {path}"
            result_obj.success = False
            return
        buffer = TextBuffer.from_file(note_path) if note_path.exists() else TextBuffer(path=note_path)

        existing = parse_metalink_root(buffer.text)
        if existing is not None:
            yield (1.0, "Complete")
            result_obj.output = RootInstallOutput(
                path=str(note_path),
                root=root,
                installed=False,
                metalink_root=existing,
                warnings=[f"Note already declares root {existing}"],
            ).model_dump(mode="python")
            result_obj.result = f"Metalink already present: {existing}"
            result_obj.success = True
            return

        yield (0.6, "Installing metalink...")
        try:
            canonical = canonicalize_root(root)
            install_metalink(buffer, canonical)
            note_path.parent.mkdir(parents=True, exist_ok=True)
            buffer.save()
        except (ValueError, OSError) as e:
            result_obj.output = RootInstallOutput(
                path=str(note_path), root=root, installed=False, metalink_root=None, errors=[str(e)]
            ).model_dump(mode="python")
            result_obj.result = f"Cannot install metalink: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RootInstallOutput(
            path=str(note_path), root=root, installed=True, metalink_root=canonical
        ).model_dump(mode="python")
        result_obj.result = f"Installed metalink for {canonical}"
        result_obj.success = True

    return StageResult(announce=f"Installing metalink in {path}...", progress_callback=do_work)
