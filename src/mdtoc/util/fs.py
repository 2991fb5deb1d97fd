from __future__ import annotations
import os
from pathlib import Path
import stat
import tempfile


def read_document(path: Path) -> str:
    """Read the whole file as UTF-8; invalid byte sequences become U+FFFD.

    Line endings are returned untranslated so CRLF documents round-trip.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as fh:
        return fh.read()


def _existing_mode(path: Path) -> int | None:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return None


def atomic_rewrite(path: Path, new_content: str) -> None:
    """Replace path's contents with new_content via temp file + rename.

    The temp file lives in the target's directory so os.replace stays on one
    filesystem. It is removed on every failure path, leaving the original intact.
    """
    if not isinstance(new_content, str):
        raise IOError(f"Content for {path} must be str, got {type(new_content).__name__}")

    path = Path(path)
    mode = _existing_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(new_content)
            fh.flush()
            os.fsync(fh.fileno())
        if mode is not None:
            os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
