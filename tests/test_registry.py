import pytest

from jobgate.exceptions import ConfigurationError, JobTimeoutError
from jobgate.mcp.registry import ToolRegistry
from jobgate.mcp.schema import ParamSpec, ToolSpec


async def _echo(text):
    return text


async def _boom(text):
    raise RuntimeError("kaput")


async def _slow(text):
    raise JobTimeoutError("run-9", "RUNNING", 60)


def _registry(handler=_echo, prefix="Error echoing"):
    registry = ToolRegistry()
    registry.register(
        ToolSpec("echo", handler, params=(ParamSpec("text", "string", required=True),), error_prefix=prefix)
    )
    return registry


def test_duplicate_registration_fails():
    registry = _registry()
    with pytest.raises(ConfigurationError, match="already registered"):
        registry.register(ToolSpec("echo", _echo))


def test_lookup_helpers():
    registry = _registry()
    assert "echo" in registry
    assert len(registry) == 1
    assert registry.names() == ["echo"]
    assert registry.get("missing") is None


@pytest.mark.asyncio
async def test_dispatch_runs_handler():
    result = await _registry().dispatch("echo", {"text": "hi"})
    assert result.text == "hi"


@pytest.mark.asyncio
async def test_unknown_tool_is_text():
    result = await _registry().dispatch("nope", {})
    assert result.text == "Error: Unknown tool 'nope'"


@pytest.mark.asyncio
async def test_validation_failure_is_text():
    result = await _registry().dispatch("echo", {})
    assert result.text == "Error echoing: Invalid arguments: text is required"


@pytest.mark.asyncio
async def test_unexpected_exception_is_text():
    result = await _registry(_boom).dispatch("echo", {"text": "x"})
    assert result.text == "Error echoing: kaput"
    assert "Traceback" not in result.text


@pytest.mark.asyncio
async def test_timeout_is_text():
    result = await _registry(_slow).dispatch("echo", {"text": "x"})
    assert result.text.startswith("Error echoing: Actor run run-9 did not complete")
    assert result.text.endswith("status=RUNNING")
