"""luaparser-based syntax provider adapter.

Implements SyntaxProviderPort using the off-the-shelf luaparser grammar.
FAIL-FIRST: parser and lexer errors become LuaSyntaxError with a source position.
"""

from __future__ import annotations

import logging
import re

from antlr4.error.ErrorListener import ErrorListener
from luaparser import astnodes
from luaparser.builder import Builder, SyntaxException, Tokens

from luadump.domain.exceptions import LuaSyntaxError
from luadump.domain.model.position import SourcePosition
from luadump.domain.ports.syntax_provider import SyntaxProviderPort

logger = logging.getLogger(__name__)

# "Expecting one of ... at line 3, column 7"
_LINE_COLUMN = re.compile(r"\bline\s+(\d+),\s*column\s+(\d+)", re.IGNORECASE)
# "(3,41): Error: ..." - second number is a character offset, not a column
_LINE_OFFSET = re.compile(r"^\((\d+)\s*,\s*\d+\)")
_LINE_ONLY = re.compile(r"\bline\s+(\d+)", re.IGNORECASE)


class _RaisingErrorListener(ErrorListener):
    """Turns lexer errors into parser errors instead of printing and skipping."""

    def syntaxError(self, recognizer, offendingSymbol, line, column, msg, e):  # noqa: N802
        raise SyntaxException(f"{msg} at line {line}, column {column}")


class _ModuleBuilder(Builder):
    """luaparser Builder that fails on lexer errors and keeps parentheses.

    The stock builder returns the inner expression of `( ... )` as is;
    here it comes back with `wrapped = True`.
    """

    def __init__(self, source: str) -> None:
        super().__init__(source)
        lexer = self._stream.tokenSource
        lexer.removeErrorListeners()
        lexer.addErrorListener(_RaisingErrorListener())

    def parse_callee(self):
        opens_paren = self._stream.LT(1).type == Tokens.OPAR
        node = super().parse_callee()
        if node and opens_paren:
            node.wrapped = True
        return node


class LuaparserSyntaxProvider(SyntaxProviderPort):
    """Parser using luaparser to build a Lua syntax tree.

    Stateless between parse() calls.
    """

    def parse(self, text: str) -> astnodes.Chunk:
        """Parse Lua source to a Chunk.

        Args:
            text: Lua source

        Returns:
            Root Chunk node; parenthesised expressions carry `wrapped = True`

        Raises:
            LuaSyntaxError: If text is not valid Lua, including lexer errors
        """
        if text is None:
            raise TypeError("text must not be None")

        try:
            return _ModuleBuilder(text).process()
        except SyntaxException as e:
            error = to_syntax_error(e)
            logger.debug("syntax error at %s: %s", error.position, error.reason)
            raise error from e


def to_syntax_error(exc: Exception) -> LuaSyntaxError:
    """Convert a parser exception to LuaSyntaxError.

    Position is recovered from the parser message; line 1 when absent.
    """
    message = str(exc).strip() or "invalid syntax"
    return LuaSyntaxError(position=_position_from_message(message), reason=message)


def _position_from_message(message: str) -> SourcePosition:
    """Extract position from parser message."""
    if match := _LINE_COLUMN.search(message):
        line, column = int(match.group(1)), int(match.group(2))
        return SourcePosition(line=max(line, 1), column=max(column, 0))

    if match := _LINE_OFFSET.search(message) or _LINE_ONLY.search(message):
        return SourcePosition(line=max(int(match.group(1)), 1))

    return SourcePosition(line=1)
