"""Line-oriented JSON-RPC 2.0 server over stdio.

One JSON message per line in, one per line out. Exposes one method:

    generate_module_dump(["<lua source>"]) → {"member": "Kind", ...} | null

null covers both "no shape" and syntax errors. Notifications (no "id")
are executed but never answered. Batches are supported.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from luadump.application.reporters import to_json_value
from luadump.application.services import analyze_source
from luadump.domain.exceptions import RpcError

if TYPE_CHECKING:
    from typing import TextIO

    from luadump.domain.ports.syntax_provider import SyntaxProviderPort

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"

Handler = Callable[[Any], Any]


class RpcServer:
    """JSON-RPC dispatcher bound to luadump methods.

    Requests are independent: no state is kept between messages.
    """

    def __init__(
        self,
        provider: SyntaxProviderPort | None = None,
        handlers: Mapping[str, Handler] | None = None,
    ) -> None:
        """Initialize server.

        Args:
            provider: Syntax provider for analyses. None = process-wide default.
            handlers: Extra or replacement methods, name → callable(params).
        """
        self._provider = provider
        self._handlers: dict[str, Handler] = {
            "generate_module_dump": self._generate_module_dump,
        }
        if handlers:
            self._handlers.update(handlers)

    @property
    def methods(self) -> frozenset[str]:
        """Names of callable methods."""
        return frozenset(self._handlers)

    def serve(self, stdin: TextIO, stdout: TextIO) -> None:
        """Answer requests line by line until EOF."""
        logger.info("serving JSON-RPC on stdio (%s)", ", ".join(sorted(self.methods)))

        for line in stdin:
            response = self.handle_line(line)
            if response is None:
                continue
            stdout.write(response + "\n")
            stdout.flush()

        logger.info("stdin closed, stopping")

    def handle_line(self, line: str) -> str | None:
        """Handle one raw message line.

        Returns:
            Serialized response, None for blank lines and notifications
        """
        if not line.strip():
            return None

        try:
            message = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning("unparseable message: %s", e)
            return _dumps(_error_response(None, RpcError(RpcError.PARSE_ERROR, "Parse error")))

        response = self.handle_message(message)
        if response is None:
            return None
        return _dumps(response)

    def handle_message(self, message: Any) -> dict[str, Any] | list[dict[str, Any]] | None:
        """Handle a decoded single request or batch."""
        if isinstance(message, list):
            if not message:
                return _error_response(None, RpcError(RpcError.INVALID_REQUEST, "Invalid Request"))
            responses = [r for r in (self._handle_request(m) for m in message) if r is not None]
            return responses or None

        return self._handle_request(message)

    def _handle_request(self, request: Any) -> dict[str, Any] | None:
        """Dispatch one request object."""
        if not isinstance(request, dict):
            return _error_response(None, RpcError(RpcError.INVALID_REQUEST, "Invalid Request"))

        is_notification = "id" not in request
        request_id = request.get("id")

        try:
            _validate_request(request)
            handler = self._handlers.get(request["method"])
            if handler is None:
                raise RpcError(RpcError.METHOD_NOT_FOUND, f"Method not found: {request['method']}")
            result = handler(request.get("params"))
        except RpcError as e:
            logger.debug("request %r failed: %s", request_id, e)
            return None if is_notification else _error_response(request_id, e)
        except Exception:
            logger.exception("request %r crashed", request_id)
            error = RpcError(RpcError.INTERNAL_ERROR, "Internal error")
            return None if is_notification else _error_response(request_id, error)

        if is_notification:
            return None
        return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id}

    def _generate_module_dump(self, params: Any) -> dict[str, str] | None:
        """generate_module_dump(["<source>"]): members object or null."""
        if params is None:
            params = []
        if not isinstance(params, list) or not all(isinstance(p, str) for p in params):
            raise RpcError(RpcError.INVALID_PARAMS, "Invalid params: expected [source: string]")

        if not params:
            return None

        return to_json_value(analyze_source(params[0], self._provider))


def _validate_request(request: dict[str, Any]) -> None:
    """Check JSON-RPC 2.0 request envelope. FAIL-FIRST."""
    if request.get("jsonrpc") != JSONRPC_VERSION:
        raise RpcError(RpcError.INVALID_REQUEST, "Invalid Request: jsonrpc must be \"2.0\"")
    if not isinstance(request.get("method"), str):
        raise RpcError(RpcError.INVALID_REQUEST, "Invalid Request: method must be a string")
    if "params" in request and not isinstance(request["params"], list | dict):
        raise RpcError(RpcError.INVALID_REQUEST, "Invalid Request: params must be array or object")
    request_id = request.get("id")
    if request_id is not None and not isinstance(request_id, str | int | float):
        raise RpcError(RpcError.INVALID_REQUEST, "Invalid Request: bad id")


def _error_response(request_id: Any, error: RpcError) -> dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "error": {"code": error.code, "message": error.message},
        "id": request_id,
    }


def _dumps(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def serve_stdio(stdin: TextIO, stdout: TextIO, provider: SyntaxProviderPort | None = None) -> None:
    """Run the JSON-RPC server until stdin closes."""
    RpcServer(provider).serve(stdin, stdout)
