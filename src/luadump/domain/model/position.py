"""Source position value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Position in Lua source text.

    Attributes:
        line: Line number (1-based, must be > 0)
        column: Column number (0-based, must be >= 0), None if unknown
    """

    line: int
    column: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column is not None and self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        """Format as line:column."""
        if self.column is None:
            return f"{self.line}"
        return f"{self.line}:{self.column}"
