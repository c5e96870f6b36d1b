# SPDX-License-Identifier: Apache-2.0
"""
Tool implementations for the jobgate MCP server.

- Calculator tools: add, calculate
- Job tools: scrape_linkedin_jobs, scrape_indeed_jobs (Apify actors)

Each module exposes a register_*_tools(registry) function; every tool
returns a single text block and reports failures as text.
"""

from __future__ import annotations

from typing import Callable, Optional

from ...apify.client import ActorClient
from ..registry import ToolRegistry
from .calculator import register_calculator_tools
from .indeed import register_indeed_tools
from .linkedin import register_linkedin_tools


def register_all_tools(
    registry: ToolRegistry,
    client_factory: Optional[Callable[[], ActorClient]] = None,
) -> None:
    """
    Register every jobgate tool in one call.

    Usage:
        registry = ToolRegistry()
        register_all_tools(registry)
    """
    register_calculator_tools(registry)
    register_linkedin_tools(registry, client_factory=client_factory)
    register_indeed_tools(registry, client_factory=client_factory)


def build_registry(client_factory: Optional[Callable[[], ActorClient]] = None) -> ToolRegistry:
    registry = ToolRegistry()
    register_all_tools(registry, client_factory=client_factory)
    return registry


__all__ = [
    "build_registry",
    "register_all_tools",
    "register_calculator_tools",
    "register_linkedin_tools",
    "register_indeed_tools",
]
