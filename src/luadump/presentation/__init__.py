"""Presentation layer: bindings, JSON-RPC server, CLI, pytest plugin.

The pytest plugin is not imported here; pytest loads it via entry point.
"""

from luadump.presentation.bindings import generate_module_dump_js, generate_module_dump_pairs
from luadump.presentation.rpc import RpcServer, serve_stdio

__all__ = [
    "RpcServer",
    "generate_module_dump_js",
    "generate_module_dump_pairs",
    "serve_stdio",
]
