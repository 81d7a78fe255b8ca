"""Tamper-evident audit log chaining each entry to the previous one by SHA-256."""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

LOG_FILE_PATH = "ix_encryption_audit.log"

PathLike = Union[str, Path]


def _read_last_hash(path: Path) -> bytes | None:
    """Return the hash recorded on the last line of the log, if any."""
    last_line = None
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            for line in handle:
                last_line = line
    except OSError:
        return None
    if last_line is None:
        return None
    last_line = last_line.removesuffix("\n").removesuffix("\r")
    parts = last_line.split("|")
    if len(parts) < 3:
        return None
    try:
        return bytes.fromhex(parts[2])
    except ValueError:
        return b""


class AuditLogger:
    """Append-only log whose lines read ``timestamp|event|hash``."""

    def __init__(self, log_path: PathLike = LOG_FILE_PATH) -> None:
        path = Path(log_path)
        self._file = path.open("a", encoding="utf-8", newline="")
        self._last_hash = _read_last_hash(path)

    def log_event(self, event: str) -> None:
        """Append ``event`` with a hash over it, its timestamp and the previous hash."""
        timestamp = datetime.now(timezone.utc).isoformat()
        hasher = hashlib.sha256(timestamp.encode("utf-8"))
        hasher.update(event.encode("utf-8"))
        if self._last_hash:
            hasher.update(self._last_hash)
        digest = hasher.digest()
        self._file.write(f"{timestamp}|{event}|{digest.hex()}\n")
        self._file.flush()
        self._last_hash = digest

    def close(self) -> None:
        """Close the underlying log file."""
        self._file.close()

    def __enter__(self) -> AuditLogger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()