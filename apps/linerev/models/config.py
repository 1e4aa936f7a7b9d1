from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Runtime settings for a single reversal run."""

    # Files
    input_path: Path = field(default_factory=lambda: Path("input.txt"))
    output_path: Path = field(default_factory=lambda: Path("output.txt"))
    encoding: str = "utf-8"
    errors: str = "surrogateescape"

    # Failure policy
    strict: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def validate(self) -> List[str]:
        """Validate the settings and return error messages."""
        errors: List[str] = []

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"Unknown encoding: {self.encoding}")

        try:
            codecs.lookup_error(self.errors)
        except LookupError:
            errors.append(f"Unknown codec error handler: {self.errors}")

        if str(self.log_level).upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level} (allowed: {', '.join(LOG_LEVELS)})")

        if Path(self.input_path) == Path(self.output_path):
            errors.append(f"Input and output must differ: {self.input_path}")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_path": str(self.input_path),
            "output_path": str(self.output_path),
            "encoding": self.encoding,
            "errors": self.errors,
            "strict": self.strict,
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
        }
