"""Infrastructure layer: luaparser adapters and syntax tree analyzers."""
