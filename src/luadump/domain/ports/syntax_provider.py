"""Syntax provider port (interface)."""

from abc import ABC, abstractmethod
from typing import Any


class SyntaxProviderPort(ABC):
    """Port for turning Lua source text into a syntax tree.

    Infrastructure layer must provide implementation.
    The tree type belongs to the implementation; the domain never inspects it.
    Consumers treat returned trees as read-only.
    """

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse one module's full source text.

        Args:
            text: Lua source

        Returns:
            Root node of the syntax tree

        Raises:
            LuaSyntaxError: If text is not valid Lua
        """
        ...
