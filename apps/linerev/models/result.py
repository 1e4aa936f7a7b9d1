from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class ReversalResult:
    """Outcome of one read -> reverse -> write pass."""

    input_line: str
    reversed_line: str
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    input_ok: bool = True
    output_ok: bool = True
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.input_ok and self.output_ok

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_path": str(self.input_path) if self.input_path else None,
            "output_path": str(self.output_path) if self.output_path else None,
            "length": len(self.input_line),
            "input_ok": self.input_ok,
            "output_ok": self.output_ok,
            "error": self.error,
        }
