"""Analyzer service: Lua source → AnalysisOutcome.

Orchestrates syntax provider, return resolution and member visitor.
Pure: same text always yields the same outcome. No state survives a call
except whatever the syntax provider caches.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from luadump.domain.exceptions import LuaSyntaxError
from luadump.domain.model.outcome import NoShape, Shape, SyntaxErrorOutcome
from luadump.infrastructure.adapters import CachedSyntaxProvider, LuaparserSyntaxProvider
from luadump.infrastructure.analyzers import (
    MemberVisitor,
    ReturnsName,
    ReturnsTable,
    ReturnsUnknown,
    resolve_return,
)

if TYPE_CHECKING:
    from luadump.domain.model.configuration import DumpConfig
    from luadump.domain.model.module_shape import ModuleShape
    from luadump.domain.model.outcome import AnalysisOutcome
    from luadump.domain.ports.syntax_provider import SyntaxProviderPort

logger = logging.getLogger(__name__)


def build_provider(config: DumpConfig | None = None) -> SyntaxProviderPort:
    """Build syntax provider honoring cache configuration.

    Args:
        config: Runtime configuration. None = defaults.

    Returns:
        luaparser provider, wrapped in a cache unless caching is disabled
    """
    provider = LuaparserSyntaxProvider()
    if config is None:
        return CachedSyntaxProvider(provider)
    if not config.cache_enabled:
        return provider
    return CachedSyntaxProvider(provider, max_size=config.cache_size)


@functools.cache
def default_provider() -> SyntaxProviderPort:
    """Process-wide provider used when callers pass none."""
    return build_provider()


def analyze_source(text: str, provider: SyntaxProviderPort | None = None) -> AnalysisOutcome:
    """Infer the export shape of one Lua module.

    Args:
        text: Full module source.
        provider: Syntax provider. None = process-wide cached luaparser provider.

    Returns:
        SyntaxErrorOutcome, NoShape or Shape. Never raises for invalid Lua.
    """
    try:
        shape = generate_module_dump(text, provider)
    except LuaSyntaxError as e:
        return SyntaxErrorOutcome(position=e.position, message=e.reason)

    if shape is None:
        return NoShape()
    return Shape(shape)


def generate_module_dump(
    text: str,
    provider: SyntaxProviderPort | None = None,
) -> ModuleShape | None:
    """Infer the export shape, raising on invalid syntax.

    Args:
        text: Full module source.
        provider: Syntax provider. None = process-wide cached luaparser provider.

    Returns:
        Shape, or None when no shape is statically determinable.

    Raises:
        LuaSyntaxError: text is not valid Lua.
    """
    if text is None:
        raise TypeError("text must not be None")

    chunk = (provider or default_provider()).parse(text)

    match resolve_return(chunk):
        case ReturnsTable(shape=shape):
            logger.debug("module returns table literal with %d member(s)", len(shape))
            return shape
        case ReturnsName(base_name=base_name):
            logger.debug("module returns %s, scanning file", base_name)
            return MemberVisitor().visit(chunk, base_name)
        case ReturnsUnknown(reason=reason):
            logger.debug("no shape: %s", reason)
            return None
