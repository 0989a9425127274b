"""JSON-RPC delivery of module dumps."""

from luadump.presentation.rpc.server import JSONRPC_VERSION, RpcServer, serve_stdio

__all__ = [
    "JSONRPC_VERSION",
    "RpcServer",
    "serve_stdio",
]
