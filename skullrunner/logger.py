"""A per-run log file, one line per message."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Union


class Logger:
    """Writes messages to ``<directory>/<name>/<YYYYmmdd_HH.MM.SS>.log``."""

    def __init__(
        self,
        name: str,
        directory: Union[str, Path] = "Logs",
        now: Optional[datetime] = None,
    ) -> None:
        stamp = (now or datetime.now()).strftime("%Y%m%d_%H.%M.%S")
        folder = Path(directory) / name
        folder.mkdir(parents=True, exist_ok=True)
        self.path = folder / f"{stamp}.log"
        self._stream = self.path.open("w", encoding="utf-8")
        self.log("Process started.\n")

    def log(self, message: str) -> None:
        """Append ``message`` followed by a newline and flush."""
        self._stream.write(message + "\n")
        self._stream.flush()

    def close(self) -> None:
        """Close the log file."""
        self._stream.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()