"""Domain exceptions: all public errors of luadump.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application/Presentation use these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from luadump.domain.model.position import SourcePosition


class LuaDumpError(Exception):
    """Base for all luadump error exceptions.

    Allows: except LuaDumpError to catch all library errors.
    """


class LuaSyntaxError(LuaDumpError, SyntaxError):
    """Lua source failed to parse.

    Inherits SyntaxError for semantic correctness.
    Distinct from "no shape": a module that parses but exports nothing
    analysable is NOT an error.

    Attributes:
        position: Where the parser gave up.
        reason: Parser message.
    """

    def __init__(self, *, position: SourcePosition, reason: str) -> None:
        """Initialize with error position and reason."""
        if not reason:
            raise ValueError("reason must be non-empty string")
        self.position = position
        self.reason = reason
        super().__init__(f"{position}: {reason}")


class UnknownMemberKindError(LuaDumpError, ValueError):
    """Member kind label is not one of Value/Function/Method.

    Attributes:
        label: The rejected label.
    """

    def __init__(self, label: object) -> None:
        """Initialize with rejected label."""
        self.label = label
        super().__init__(f"unknown member kind: {label!r}")


class RpcError(LuaDumpError):
    """JSON-RPC level failure, converted to an error response by the server.

    Attributes:
        code: JSON-RPC error code.
        message: Human-readable message.
    """

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    def __init__(self, code: int, message: str) -> None:
        """Initialize with JSON-RPC error code and message."""
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")
