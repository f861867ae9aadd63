import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

import multichainrpc.cli.command_groups.chain_commands as chain_commands
from multichainrpc.cli.command_groups.chain_commands import (
    describe_parameters,
    format_rpc_exception,
    run_rpc_call,
    schema_method_name,
)
from multichainrpc.cli.commands import app
from multichainrpc.cli.shared.value_utils import parse_value
from multichainrpc.config.schema import Settings
from multichainrpc.errors import InvalidChainError, MissingParameterError, ProtocolError, TransportError

runner = CliRunner()


@pytest.fixture
def cli_env(chain_path: Path, tmp_path: Path, monkeypatch) -> list[str]:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("MULTICHAINRPC_CHAIN_PATH", str(chain_path))
    return ["--config", str(tmp_path / "no-config.json")]


def test_parse_value_prefers_json() -> None:
    assert parse_value("10") == 10
    assert parse_value('{"a": 1}') == {"a": 1}
    assert parse_value("True") is True
    assert parse_value("stream1") == "stream1"
    assert parse_value("  ") == ""


def test_describe_parameters_marks_defaults() -> None:
    assert describe_parameters(["stream", {"verbose": False}, {"count": 10}]) == 'stream [verbose=false] [count=10]'


def test_format_rpc_exception_levels() -> None:
    level, detail = format_rpc_exception(ProtocolError({"error": "boom"}, 500))
    assert level == "red"
    assert 'status=500: {"error": "boom"}' in detail

    level, detail = format_rpc_exception(MissingParameterError("publish", 2, "data"))
    assert level == "yellow"
    assert "MISSING_PARAMETER" in detail

    level, detail = format_rpc_exception(TransportError("Request failed. HTTP 503", status_code=503))
    assert level == "red"
    assert "HTTP_ERROR, status=503" in detail

    level, detail = format_rpc_exception(InvalidChainError("gamma"))
    assert detail == "INVALID_CHAIN: Invalid chain: gamma"

    request = httpx.Request("POST", "http://localhost:1/")
    level, detail = format_rpc_exception(httpx.ConnectError("refused", request=request))
    assert level == "red"
    assert detail == "network error: refused"


def test_run_rpc_call_applies_overrides(chain_path: Path, make_transport) -> None:
    transport = make_transport()
    settings = Settings(chain_path=chain_path, method_casing="default")
    result = run_rpc_call(
        settings, "beta", "getBlockCount", [], protocol="https", host="10.0.0.9", transport=transport
    )
    sent = transport.requests[0]
    assert str(sent.url) == "https://10.0.0.9:5770/"
    assert json.loads(sent.content)["method"] == "getBlockCount"
    assert result["result"] == "getBlockCount"

    run_rpc_call(settings, "beta", "getBlockCount", [], casing="upper", transport=transport)
    assert json.loads(transport.requests[1].content)["method"] == "GETBLOCKCOUNT"


def test_schema_method_name_ignores_case() -> None:
    assert schema_method_name("liststreamitems") == "listStreamItems"
    assert schema_method_name(" GETINFO ") == "getInfo"
    assert schema_method_name("customMethod") == "customMethod"


def test_run_rpc_call_fills_defaults_for_lowercase_method(chain_path: Path, make_transport) -> None:
    transport = make_transport()
    settings = Settings(chain_path=chain_path)
    run_rpc_call(settings, "alpha", "liststreamitems", ["stream1"], transport=transport)
    body = transport.bodies()[0]
    assert body["method"] == "liststreamitems"
    assert body["params"] == ["stream1", False, 10, -10, False]

    with pytest.raises(MissingParameterError):
        run_rpc_call(settings, "alpha", "publish", ["stream1", "key1"], transport=transport)
    assert len(transport.requests) == 1


def test_chains_command_lists_chains_and_ports(cli_env) -> None:
    result = runner.invoke(app, [*cli_env, "chains"])
    assert result.exit_code == 0
    assert "alpha" in result.stdout
    assert "4770" in result.stdout
    assert "5770" in result.stdout
    assert "multichaind" not in result.stdout


def test_chains_command_reports_missing_folder(cli_env, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("MULTICHAINRPC_CHAIN_PATH", str(tmp_path / "nowhere"))
    result = runner.invoke(app, [*cli_env, "chains"])
    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_commands_command_filters(cli_env) -> None:
    result = runner.invoke(app, [*cli_env, "commands", "--filter", "stream"])
    assert result.exit_code == 0
    assert "listStreamItems" in result.stdout
    assert "getInfo" not in result.stdout


def test_call_command_prints_json_and_parses_params(cli_env, monkeypatch) -> None:
    seen = {}

    def fake_run(settings, chain, method, params, **options):
        seen.update(chain=chain, method=method, params=params, options=options)
        return {"result": [1, 2], "error": None, "id": "x"}

    monkeypatch.setattr(chain_commands, "run_rpc_call", fake_run)
    result = runner.invoke(app, [*cli_env, "call", "alpha", "listStreamItems", "stream1", "true", "5", "--casing", "upper"])
    assert result.exit_code == 0, result.stdout
    assert seen["chain"] == "alpha"
    assert seen["params"] == ["stream1", True, 5]
    assert seen["options"]["casing"] == "upper"
    assert json.loads(result.stdout)["result"] == [1, 2]


def test_call_command_exits_nonzero_on_rpc_error_body(cli_env, monkeypatch) -> None:
    monkeypatch.setattr(
        chain_commands,
        "run_rpc_call",
        lambda *a, **k: {"result": None, "error": {"code": -32601, "message": "Method not found"}, "id": "x"},
    )
    result = runner.invoke(app, [*cli_env, "call", "alpha", "nosuch"])
    assert result.exit_code == 1
    assert "Method not found" in result.stdout


def test_call_command_reports_errors(cli_env, monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise ProtocolError({"error": "boom"}, 500)

    monkeypatch.setattr(chain_commands, "run_rpc_call", fail)
    result = runner.invoke(app, [*cli_env, "call", "alpha", "getinfo"])
    assert result.exit_code == 1
    assert "PROTOCOL_ERROR" in result.stdout


def test_call_command_unknown_chain(cli_env) -> None:
    result = runner.invoke(app, [*cli_env, "info", "gamma"])
    assert result.exit_code == 1
    assert "Invalid chain: gamma" in result.stdout


def test_invalid_config_file_is_bad_parameter(cli_env, tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(bad), "chains"])
    assert result.exit_code != 0


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "multichainrpc v" in result.stdout
