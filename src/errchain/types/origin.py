"""errchain Types - Origin.

Source location captured when an error record is built.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Origin:
    """Call site of an error record.

    An empty origin (no file) means the frame could not be resolved;
    formatters skip the location line for it.

    Attributes:
        file: Source path after root stripping
        function: Simplified function name ("Class.method", "func")
        line: Line number (0 if unknown)
    """
    file: str = ""
    function: str = ""
    line: int = 0

    def __bool__(self) -> bool:
        return bool(self.file)

    def location(self) -> str:
        """Return "file:line", or an empty string for an empty origin."""
        if not self.file:
            return ""
        return f"{self.file}:{self.line}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "file": self.file,
            "function": self.function,
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Origin:
        """Create from dictionary (JSON deserialization)."""
        return cls(
            file=data.get("file", ""),
            function=data.get("function", ""),
            line=int(data.get("line", 0)),
        )
