"""Tests for presentation/rpc/server.py."""

import io
import json
from typing import Any

import pytest

from luadump.domain.exceptions import RpcError
from luadump.infrastructure.adapters import LuaparserSyntaxProvider
from luadump.presentation.rpc import JSONRPC_VERSION, RpcServer, serve_stdio


def _request(method: str, params: Any = None, request_id: Any = 1) -> dict[str, Any]:
    request: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": method, "id": request_id}
    if params is not None:
        request["params"] = params
    return request


def _call(server: RpcServer, request: Any) -> Any:
    response = server.handle_line(json.dumps(request))
    assert response is not None
    return json.loads(response)


@pytest.fixture
def server() -> RpcServer:
    return RpcServer(LuaparserSyntaxProvider())


class TestGenerateModuleDumpMethod:
    """Tests for the generate_module_dump RPC method."""

    def test_shape(self, server: RpcServer) -> None:
        source = "local M = {}\nfunction M.foo() end\nfunction M:bar() end\nreturn M"
        response = _call(server, _request("generate_module_dump", [source]))
        assert response == {
            "jsonrpc": "2.0",
            "result": {"bar": "Method", "foo": "Function"},
            "id": 1,
        }

    def test_result_keys_sorted(self, server: RpcServer) -> None:
        response = server.handle_line(
            json.dumps(_request("generate_module_dump", ["return { b = 1, a = 2 }"]))
        )
        assert response is not None
        assert response.index('"a"') < response.index('"b"')

    def test_no_shape_is_null(self, server: RpcServer) -> None:
        response = _call(server, _request("generate_module_dump", ["return 3 + 5"]))
        assert response["result"] is None

    def test_syntax_error_is_null(self, server: RpcServer) -> None:
        response = _call(server, _request("generate_module_dump", ["return {"]))
        assert response["result"] is None
        assert "error" not in response

    def test_empty_params_is_null(self, server: RpcServer) -> None:
        response = _call(server, _request("generate_module_dump", []))
        assert response["result"] is None

    def test_missing_params_is_null(self, server: RpcServer) -> None:
        response = _call(server, _request("generate_module_dump"))
        assert response["result"] is None

    def test_extra_params_ignored(self, server: RpcServer) -> None:
        response = _call(server, _request("generate_module_dump", ["return { a = 1 }", "x"]))
        assert response["result"] == {"a": "Value"}

    @pytest.mark.parametrize("params", [[1], [None], {"source": "return {}"}])
    def test_invalid_params(self, server: RpcServer, params: Any) -> None:
        response = _call(server, _request("generate_module_dump", params))
        assert response["error"]["code"] == RpcError.INVALID_PARAMS
        assert response["id"] == 1


class TestProtocol:
    """Tests for JSON-RPC envelope handling."""

    def test_parse_error(self, server: RpcServer) -> None:
        response = server.handle_line("{not json")
        assert response is not None
        data = json.loads(response)
        assert data["error"]["code"] == RpcError.PARSE_ERROR
        assert data["id"] is None

    def test_blank_line_ignored(self, server: RpcServer) -> None:
        assert server.handle_line("   \n") is None

    def test_method_not_found(self, server: RpcServer) -> None:
        response = _call(server, _request("nope", [], request_id="abc"))
        assert response["error"]["code"] == RpcError.METHOD_NOT_FOUND
        assert response["id"] == "abc"

    def test_wrong_version(self, server: RpcServer) -> None:
        response = _call(server, {"jsonrpc": "1.0", "method": "generate_module_dump", "id": 2})
        assert response["error"]["code"] == RpcError.INVALID_REQUEST

    def test_not_an_object(self, server: RpcServer) -> None:
        response = _call(server, 42)
        assert response["error"]["code"] == RpcError.INVALID_REQUEST

    def test_notification_not_answered(self, server: RpcServer) -> None:
        request = {"jsonrpc": "2.0", "method": "generate_module_dump", "params": ["return {}"]}
        assert server.handle_line(json.dumps(request)) is None

    def test_failed_notification_not_answered(self, server: RpcServer) -> None:
        assert server.handle_line(json.dumps({"jsonrpc": "2.0", "method": "nope"})) is None

    def test_batch(self, server: RpcServer) -> None:
        batch = [
            _request("generate_module_dump", ["return { a = 1 }"], request_id=1),
            {"jsonrpc": "2.0", "method": "generate_module_dump", "params": ["return {}"]},
            _request("nope", [], request_id=2),
        ]
        response = _call(server, batch)
        assert [r["id"] for r in response] == [1, 2]
        assert response[0]["result"] == {"a": "Value"}
        assert response[1]["error"]["code"] == RpcError.METHOD_NOT_FOUND

    def test_empty_batch(self, server: RpcServer) -> None:
        response = _call(server, [])
        assert response["error"]["code"] == RpcError.INVALID_REQUEST

    def test_handler_crash_is_internal_error(self) -> None:
        def explode(params: Any) -> Any:
            raise RuntimeError("boom")

        server = RpcServer(handlers={"explode": explode})
        response = _call(server, _request("explode", []))
        assert response["error"]["code"] == RpcError.INTERNAL_ERROR

    def test_custom_handler(self) -> None:
        server = RpcServer(handlers={"ping": lambda params: "pong"})
        assert "ping" in server.methods
        assert "generate_module_dump" in server.methods
        assert _call(server, _request("ping", []))["result"] == "pong"


class TestServeStdio:
    """Tests for the stdio loop."""

    def test_one_response_per_request_line(self) -> None:
        lines = [
            json.dumps(_request("generate_module_dump", ["return { x = 1 }"], request_id=1)),
            "",
            json.dumps(_request("generate_module_dump", ["return"], request_id=2)),
        ]
        stdin = io.StringIO("\n".join(lines) + "\n")
        stdout = io.StringIO()

        serve_stdio(stdin, stdout, LuaparserSyntaxProvider())

        responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert [r["id"] for r in responses] == [1, 2]
        assert responses[0]["result"] == {"x": "Value"}
        assert responses[1]["result"] is None

    def test_empty_input(self) -> None:
        stdout = io.StringIO()
        serve_stdio(io.StringIO(""), stdout)
        assert stdout.getvalue() == ""
