# SPDX-License-Identifier: Apache-2.0
"""
jobgate MCP tool gateway.

Exposes arithmetic helpers and Apify-backed job scrapers over the Model
Context Protocol:
- add, calculate
- scrape_linkedin_jobs, scrape_indeed_jobs

Principles:
- Token from the environment only (APIFY_TOKEN); never embedded or printed
- Every call returns one text block; failures are text, never tracebacks
- Arguments are validated before any platform request is made

Convenience:
- `create_mcp_server()` builds a FastMCP instance with all tools registered.
"""

from __future__ import annotations

from .registry import ToolRegistry, ToolResult
from .schema import ParamSpec, ToolSpec
from .server import create_mcp_server

__all__ = ["ToolRegistry", "ToolResult", "ParamSpec", "ToolSpec", "create_mcp_server"]
