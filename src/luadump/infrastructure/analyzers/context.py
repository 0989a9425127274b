"""Accumulator state for one member extraction."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from luadump.domain.model.member_kind import MemberKind
from luadump.domain.model.module_shape import ModuleShape

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExtractorState:
    """Mutable state threaded through a single traversal.

    Created once the base identifier is known, discarded after freeze().
    Never shared between analyses.

    Attributes:
        base_name: Identifier returned by the module
        members: Members discovered so far, last write wins
    """

    base_name: str
    members: dict[str, MemberKind] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.base_name:
            raise ValueError("base_name must be non-empty string")

    def record(self, name: str, kind: MemberKind) -> None:
        """Insert or overwrite one member.

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("member name must be non-empty string")

        previous = self.members.get(name)
        if previous is not None and previous is not kind:
            logger.debug("%s.%s: %s overwritten by %s", self.base_name, name, previous, kind)
        self.members[name] = kind

    def merge(self, members: Mapping[str, MemberKind]) -> None:
        """Insert all members of a table literal, overwriting existing keys."""
        for name, kind in members.items():
            self.record(name, kind)

    def freeze(self) -> ModuleShape:
        """Consume accumulated members into an immutable shape."""
        return ModuleShape.from_members(self.members)
