# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import ConfigurationError
from .error_handler import convert_exception_to_text
from .schema import ToolSpec
from .validation import validate_arguments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """The single text block handed back to the MCP client."""
    text: str


class ToolRegistry:
    """Name → ToolSpec map. Filled once at startup, read-only afterwards."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._tools:
            raise ConfigurationError(f"Tool already registered: {spec.name}")
        self._tools[spec.name] = spec
        logger.debug("Registered tool %s (%d params)", spec.name, len(spec.params))

    def get(self, name: str) -> Optional[ToolSpec]:
        return self._tools.get(name)

    def list_specs(self) -> List[ToolSpec]:
        return list(self._tools.values())

    def names(self) -> List[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    async def dispatch(self, name: str, raw_args: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """
        Validate and run one tool call. Never raises for tool-level failures:
        unknown names, bad arguments and handler errors all come back as text.
        """
        spec = self._tools.get(name)
        if spec is None:
            logger.warning("Call to unknown tool %s", name)
            return ToolResult(f"Error: Unknown tool '{name}'")

        try:
            args = validate_arguments(spec, raw_args)
            logger.info("Calling tool %s", name)
            text = await spec.handler(**args)
        except Exception as e:
            return ToolResult(convert_exception_to_text(e, spec.error_prefix, context=name))

        return ToolResult(text)
