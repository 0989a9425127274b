"""Domain ports (interfaces/protocols)."""

from luadump.domain.ports.syntax_provider import SyntaxProviderPort

__all__ = [
    "SyntaxProviderPort",
]
