from __future__ import annotations

import json
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

LOGGER_NAME = "linerev-structured-logger-v1"


class StructuredLogger:
    """One JSON object per line, to a stream and optionally a file.

    The stream defaults to stderr so stdout never carries anything but data.
    """

    _LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}

    def __init__(self, log_file: Optional[Path] = None, level: str = "WARNING", stream: Optional[TextIO] = None):
        self.log_file = Path(log_file) if log_file else None
        self.level = (level or "WARNING").upper()
        self.stream = stream or sys.stderr

    def debug(self, event: str, **fields: Any) -> None:
        self._log("DEBUG", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log("INFO", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log("WARNING", event, **fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log("ERROR", event, **fields)

    def _enabled(self, level: str) -> bool:
        return self._LEVELS.get(level, 20) >= self._LEVELS.get(self.level, 30)

    def _log(self, level: str, event: str, **fields: Any) -> None:
        lvl = (level or "INFO").upper()
        if not self._enabled(lvl):
            return

        record: Dict[str, Any] = {
            "timestamp": int(time.time() * 1000),
            "level": lvl,
            "logger": LOGGER_NAME,
            "event": event,
            **fields,
        }
        line = json.dumps(record, ensure_ascii=True, separators=(",", ":"), default=str)

        self.stream.write(line + "\n")
        self.stream.flush()

        if self.log_file:
            self._append(line)

    def _append(self, line: str) -> None:
        # The stream copy is already written; on failure only the file copy is lost.
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with self.log_file.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as exc:
            failed, self.log_file = self.log_file, None
            notice = {
                "timestamp": int(time.time() * 1000),
                "level": "WARNING",
                "logger": LOGGER_NAME,
                "event": "log file unavailable, logging to stream only",
                "path": str(failed),
                "error": f"{type(exc).__name__}: {exc}",
            }
            self.stream.write(json.dumps(notice, ensure_ascii=True, separators=(",", ":")) + "\n")
            self.stream.flush()
