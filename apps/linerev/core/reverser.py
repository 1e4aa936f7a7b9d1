from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO, Tuple

from apps.linerev.core.logger import StructuredLogger
from apps.linerev.models import Config, ReversalResult


class LineReverserError(RuntimeError):
    """Raised in strict mode when the input or output cannot be opened."""


def read_first_line(stream: TextIO) -> str:
    """Return the text before the first newline, or everything if there is none."""
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line


def reverse_line(line: str) -> str:
    """Reverse code point by code point. Combining marks are not kept with their base."""
    return line[::-1]


class LineReverser:
    """Reverse the first line of one file into another."""

    def __init__(
        self,
        input_path: Path = Path("input.txt"),
        output_path: Path = Path("output.txt"),
        encoding: str = "utf-8",
        errors: str = "surrogateescape",
        strict: bool = False,
        logger: Optional[StructuredLogger] = None,
    ):
        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.encoding = encoding
        self.errors = errors
        self.strict = strict
        self.logger = logger or StructuredLogger()

    @classmethod
    def from_config(cls, config: Config, logger: Optional[StructuredLogger] = None) -> "LineReverser":
        return cls(
            input_path=config.input_path,
            output_path=config.output_path,
            encoding=config.encoding,
            errors=config.errors,
            strict=config.strict,
            logger=logger,
        )

    def read(self) -> Tuple[str, Optional[str]]:
        """Read the first input line; an unreadable input yields ("", reason)."""
        try:
            # Only "\n" terminates a line; a preceding "\r" stays part of it.
            with self.input_path.open("r", encoding=self.encoding, errors=self.errors, newline="\n") as f:
                return read_first_line(f), None
        except (OSError, UnicodeError) as exc:
            return "", f"{type(exc).__name__}: {exc}"

    def write(self, text: str) -> Optional[str]:
        """Truncate the output and write text verbatim; return the reason on failure."""
        try:
            with self.output_path.open("w", encoding=self.encoding, errors=self.errors, newline="") as f:
                f.write(text)
        except (OSError, UnicodeError) as exc:
            return f"{type(exc).__name__}: {exc}"
        return None

    def run(self) -> ReversalResult:
        line, read_error = self.read()
        if read_error:
            self._fault("input unavailable, using empty line", self.input_path, read_error)

        reversed_text = reverse_line(line)

        write_error = self.write(reversed_text)
        if write_error:
            self._fault("output unavailable, result dropped", self.output_path, write_error)

        result = ReversalResult(
            input_line=line,
            reversed_line=reversed_text,
            input_path=self.input_path,
            output_path=self.output_path,
            input_ok=read_error is None,
            output_ok=write_error is None,
            error=read_error or write_error,
        )
        self.logger.debug("line reversed", **result.to_dict())
        return result

    def run_streams(self, source: TextIO, sink: TextIO) -> str:
        """Same pipeline over caller-owned text streams."""
        reversed_text = reverse_line(read_first_line(source))
        sink.write(reversed_text)
        return reversed_text

    def _fault(self, event: str, path: Path, reason: str) -> None:
        if self.strict:
            self.logger.error(event, path=str(path), error=reason)
            raise LineReverserError(f"{path}: {reason}")
        self.logger.info(event, path=str(path), error=reason)
