"""Member kind enumeration."""

from __future__ import annotations

from enum import Enum

from luadump.domain.exceptions import UnknownMemberKindError


class MemberKind(Enum):
    """Classification of an exported member.

    Value is the label used on every wire format.
    """

    VALUE = "Value"  # default, unknown shape, deeper dotted chains
    FUNCTION = "Function"  # free callable
    METHOD = "Method"  # declared with receiver syntax only

    @classmethod
    def from_label(cls, label: object) -> MemberKind:
        """Parse kind label.

        Raises:
            UnknownMemberKindError: label is not Value/Function/Method
        """
        for kind in cls:
            if kind.value == label:
                return kind
        raise UnknownMemberKindError(label)

    def __str__(self) -> str:
        return self.value
