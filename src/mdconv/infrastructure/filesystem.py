"""Filesystem operations for input documents and generated outputs.

Pure parsing/rendering utilities live in :mod:`mdconv.domain`.  This
module handles actual file I/O and path resolution.  Errors are not
caught here; the service layer maps them onto result codes.
"""

from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_document(path: Path) -> str:
    """Read *path* as bytes and decode it as strict UTF-8.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the bytes are not valid UTF-8.
    """
    raw = path.read_bytes()
    return raw.decode("utf-8")


def write_output(path: Path, text: str, *, create_parents: bool = False) -> None:
    """Write *text* to *path* as UTF-8, replacing any existing file.

    The parent directory must already exist unless *create_parents* is set.
    """
    if create_parents:
        path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def resolve_path(name: str | Path, base_dir: str | Path | None = None) -> Path:
    """Resolve *name* against *base_dir*.

    - Absolute names are returned unchanged.
    - Relative names are joined under *base_dir* when one is given.
    - An empty or missing *base_dir* leaves the name relative to CWD.
    """
    path = Path(name)
    if path.is_absolute() or not base_dir:
        return path
    return Path(base_dir) / path
