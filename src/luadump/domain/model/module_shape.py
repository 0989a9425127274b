"""Module shape: inferred public interface of a Lua module."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from luadump.domain.model.member_kind import MemberKind


@dataclass(frozen=True, slots=True, eq=False)
class ModuleShape(Mapping[str, MemberKind]):
    """Immutable mapping member name → MemberKind.

    Iteration order is ALWAYS lexicographic by key, regardless of the
    order members were discovered in. Golden files and RPC consumers
    rely on this.

    Compares equal to any Mapping with the same items.

    Examples:
        return { b = 1, a = function() end }
            → ModuleShape({"a": FUNCTION, "b": VALUE}), iterates "a", "b"

    Invariants (FAIL-FIRST):
        - keys are non-empty strings
        - values are MemberKind
    """

    members: Mapping[str, MemberKind] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants and freeze in key order. FAIL-FIRST."""
        for name, kind in self.members.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"member name must be non-empty string, got {name!r}")
            if not isinstance(kind, MemberKind):
                raise TypeError(f"member kind must be MemberKind, got {type(kind).__name__}")

        ordered = dict(sorted(self.members.items()))
        object.__setattr__(self, "members", MappingProxyType(ordered))

    @classmethod
    def from_members(cls, members: Mapping[str, MemberKind]) -> ModuleShape:
        """Build shape from an accumulated name → kind mapping."""
        return cls(dict(members))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ModuleShape:
        """Build shape from serialized form {"name": "Kind"}.

        Raises:
            UnknownMemberKindError: a value is not a kind label
        """
        return cls({name: MemberKind.from_label(label) for name, label in data.items()})

    def __getitem__(self, name: str) -> MemberKind:
        return self.members[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name!r}: {kind.value}" for name, kind in self.members.items())
        return f"ModuleShape({{{inner}}})"

    def to_dict(self) -> dict[str, str]:
        """Serialize as {"name": "Kind"} in key order."""
        return {name: kind.value for name, kind in self.members.items()}

    def to_pairs(self) -> list[list[str]]:
        """Serialize as [[name, "Kind"], ...] in key order."""
        return [[name, kind.value] for name, kind in self.members.items()]
