"""JSON reporter: AnalysisOutcome → JSON string.

Golden-file format:
    shape        → {"member": "Kind", ...} with keys in lexicographic order
    no shape     → null
    syntax error → null
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from luadump.domain.model.module_shape import ModuleShape

if TYPE_CHECKING:
    from luadump.domain.model.outcome import AnalysisOutcome


class JsonReporter:
    """JSON reporter: outputs machine-readable member objects."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, outcome: AnalysisOutcome) -> str:
        """Format outcome as JSON string.

        Args:
            outcome: Analysis outcome to format.

        Returns:
            JSON object of members, or null when there is no shape.
        """
        return json.dumps(to_json_value(outcome), indent=self._indent)

    @staticmethod
    def load(text: str) -> ModuleShape | None:
        """Parse a previously reported JSON string.

        Raises:
            TypeError: JSON is neither an object nor null
            UnknownMemberKindError: a member kind label is unknown
        """
        data = json.loads(text)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise TypeError(f"module dump must be object or null, got {type(data).__name__}")
        return ModuleShape.from_dict(data)


def to_json_value(outcome: AnalysisOutcome) -> dict[str, str] | None:
    """Convert outcome to a JSON-compatible value."""
    if outcome.members is None:
        return None
    return outcome.members.to_dict()
