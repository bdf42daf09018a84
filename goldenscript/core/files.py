"""
Script file I/O.

Scripts are read and written without newline translation, so \\r\\n files
round-trip byte-for-byte.
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def read_script(path: Path, encoding: str = "utf-8") -> str:
    """Read a script file verbatim (no newline translation)."""
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """
    Atomic text write.

    Behavior:
    - No intermediate state: temp file -> rename
    - fsync the file where possible; on failure log a warning and continue
    - On failure the temp file is removed and the original is kept

    Args:
        path: Destination file
        text: Content, written verbatim
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
            encoding=encoding,
            newline="",
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)
        temp_path = None
    finally:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
