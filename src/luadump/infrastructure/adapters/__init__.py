"""Infrastructure adapters for external interfaces."""

from luadump.infrastructure.adapters.cached_parser import CachedSyntaxProvider
from luadump.infrastructure.adapters.lua_parser import LuaparserSyntaxProvider

__all__ = [
    "CachedSyntaxProvider",
    "LuaparserSyntaxProvider",
]
