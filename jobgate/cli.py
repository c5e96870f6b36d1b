# SPDX-License-Identifier: Apache-2.0
# jobgate/cli.py
from __future__ import annotations

import asyncio
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from jobgate import __version__
from jobgate.mcp.schema import ParamSpec
from jobgate.mcp.server import create_mcp_server
from jobgate.mcp.tools import build_registry
from jobgate.settings import SETTINGS
from jobgate.utils.logging import setup_logger

app = typer.Typer(add_completion=False, help="MCP tool gateway for calculator and job-board tools.")

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse", "streamable-http")

THEME = Theme({
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
    "table.title": "bold blue",
    "table.header": "green",
})
console = Console(theme=THEME)
# stdout belongs to the stdio transport while serving
err_console = Console(theme=THEME, stderr=True)


def _describe_param(p: ParamSpec) -> str:
    kind = f"{p.items}[]" if p.type == "array" else p.type
    text = f"{p.name}: {kind}"
    if p.required:
        text += " *"
    if p.choices:
        text += f" {{{', '.join(p.choices)}}}"
    if p.minimum is not None or p.maximum is not None:
        text += f" [{p.minimum if p.minimum is not None else ''}..{p.maximum if p.maximum is not None else ''}]"
    if p.default is not None:
        text += f" = {json.dumps(p.default)}"
    return text


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    log_json: Optional[bool] = typer.Option(None, "--log-json/--no-log-json", help="JSON log lines"),
) -> None:
    setup_logger(log_level or SETTINGS.log_level, SETTINGS.log_json if log_json is None else log_json)


@app.command()
def serve(
    transport: Optional[str] = typer.Option(None, "--transport", "-t", help="stdio, sse or streamable-http"),
    host: Optional[str] = typer.Option(None, "--host", help="Bind host for sse/streamable-http"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port for sse/streamable-http"),
) -> None:
    """Run the MCP server."""
    transport = (transport or SETTINGS.server.transport).lower()
    if transport not in TRANSPORTS:
        err_console.print(f"[error]Unknown transport '{transport}'. Use one of: {', '.join(TRANSPORTS)}[/error]")
        raise typer.Exit(code=2)

    if not SETTINGS.apify.token:
        logger.warning("APIFY_TOKEN is not set; scrape tools will report a configuration error")

    mcp = create_mcp_server()
    logger.info("jobgate v%s starting (%s)", __version__, transport)
    try:
        if transport == "stdio":
            mcp.run(transport="stdio")
        else:
            mcp.run(
                transport=transport,
                host=host or SETTINGS.server.host,
                port=port or SETTINGS.server.port,
            )
    except KeyboardInterrupt:
        err_console.print("\n[warning]Server stopped by user[/warning]")


@app.command("tools")
def list_tools() -> None:
    """List registered tools and their parameters."""
    registry = build_registry()
    table = Table(title="jobgate tools", title_style="table.title", header_style="table.header")
    table.add_column("Tool", style="bold", no_wrap=True)
    table.add_column("Parameters")
    table.add_column("Description")
    for spec in registry.list_specs():
        params = "\n".join(_describe_param(p) for p in spec.params)
        table.add_row(spec.name, params, spec.description)
    console.print(table)
    console.print("[dim]* required[/dim]")


@app.command()
def call(
    name: str = typer.Argument(..., help="Tool name, e.g. calculate"),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object"),
) -> None:
    """Dispatch one tool call locally and print its text result."""
    try:
        raw = json.loads(args)
    except json.JSONDecodeError as e:
        err_console.print(f"[error]--args is not valid JSON: {e}[/error]")
        raise typer.Exit(code=2)

    result = asyncio.run(build_registry().dispatch(name, raw))
    console.print(result.text, markup=False, highlight=False)


@app.command()
def config() -> None:
    """
    Print an MCP client configuration snippet (stdio).

    The Apify token is never written into the snippet; keep it in the
    environment of the process that launches the server.
    """
    env_vars: Dict[str, str] = {
        "LOG_LEVEL": SETTINGS.log_level,
        "LINKEDIN_ACTOR_MODE": SETTINGS.linkedin.mode,
        "INDEED_ACTOR_MODE": SETTINGS.indeed.mode,
    }
    args: List[str] = ["-m", "jobgate", "serve"]
    config_json: Dict[str, Any] = {
        "mcpServers": {
            SETTINGS.server.name: {
                "command": os.environ.get("PYTHON", sys.executable or "python"),
                "args": args,
                "env": env_vars,
            }
        }
    }
    console.print_json(json.dumps(config_json))

    if SETTINGS.apify.token:
        err_console.print("[success]APIFY_TOKEN detected in this environment.[/success]")
    else:
        err_console.print(
            "[warning]APIFY_TOKEN is not set. Export it before starting the server, e.g.\n"
            "   export APIFY_TOKEN='apify_api_...'[/warning]"
        )
