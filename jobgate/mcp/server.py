# SPDX-License-Identifier: Apache-2.0
"""
FastMCP server for jobgate tools.

- Publishes every ToolRegistry entry as an MCP tool.
- The published input schema comes from the ToolSpec; validation, dispatch
  and error text stay in the registry, so each call yields exactly one
  text content item.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastmcp import FastMCP  # type: ignore
from fastmcp.tools import Tool  # type: ignore
from fastmcp.tools.tool import ToolResult as MCPToolResult  # type: ignore
from mcp.types import TextContent
from pydantic import PrivateAttr

from ..settings import SETTINGS
from .registry import ToolRegistry
from .schema import ToolSpec
from .tools import build_registry

logger = logging.getLogger(__name__)


class RegistryTool(Tool):
    """MCP tool whose arguments are handled by a ToolRegistry entry."""

    _registry: ToolRegistry = PrivateAttr()

    @classmethod
    def from_spec(cls, registry: ToolRegistry, spec: ToolSpec) -> "RegistryTool":
        tool = cls(
            name=spec.name,
            description=spec.description,
            parameters=spec.input_schema(),
        )
        tool._registry = registry
        return tool

    async def run(self, arguments: Dict[str, Any]) -> MCPToolResult:
        result = await self._registry.dispatch(self.name, arguments)
        return MCPToolResult(content=[TextContent(type="text", text=result.text)])


def create_mcp_server(registry: Optional[ToolRegistry] = None, name: Optional[str] = None) -> FastMCP:
    """Create and configure the MCP server with all registry tools."""
    registry = registry if registry is not None else build_registry()
    mcp = FastMCP(name or SETTINGS.server.name)

    for spec in registry.list_specs():
        mcp.add_tool(RegistryTool.from_spec(registry, spec))

    logger.info("MCP server '%s' ready with tools: %s", mcp.name, ", ".join(registry.names()))
    return mcp
