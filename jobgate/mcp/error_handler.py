# SPDX-License-Identifier: Apache-2.0
"""
Centralized error handling for jobgate tools.

Every failure is rendered as '<operation prefix>: <cause>' so the MCP client
always gets a single text block and never a traceback.
"""

from __future__ import annotations

import logging

from ..exceptions import (
    ConfigurationError,
    DatasetFetchError,
    JobFailedError,
    JobGateError,
    JobTimeoutError,
    ToolExecutionError,
    ToolValidationError,
    TransportError,
)

logger = logging.getLogger(__name__)


def format_error(prefix: str, cause: str) -> str:
    cause = (cause or "").strip()
    return f"{prefix}: {cause}" if cause else f"{prefix}: unknown error"


def convert_exception_to_text(exception: Exception, prefix: str, context: str = "") -> str:
    """
    Convert an exception raised while serving a tool call into user-facing text.
    """
    if isinstance(exception, ToolValidationError):
        logger.info("Rejected arguments for %s: %s", context or "<tool>", exception)
        return format_error(prefix, f"Invalid arguments: {exception}")

    if isinstance(exception, ToolExecutionError):
        return format_error(prefix, str(exception))

    if isinstance(exception, ConfigurationError):
        logger.error("Configuration problem in %s: %s", context or "<tool>", exception)
        return format_error(prefix, str(exception))

    # Check the subclass before its TransportError parent
    if isinstance(exception, DatasetFetchError):
        logger.warning("Dataset fetch failed in %s: %s", context or "<tool>", exception)
        return format_error(prefix, f"Dataset fetch failed: {exception}")

    if isinstance(exception, TransportError):
        logger.warning("Platform request failed in %s: %s", context or "<tool>", exception)
        return format_error(prefix, str(exception))

    if isinstance(exception, (JobFailedError, JobTimeoutError)):
        logger.warning("Actor run problem in %s: %s", context or "<tool>", exception)
        return format_error(prefix, str(exception))

    if isinstance(exception, JobGateError):
        return format_error(prefix, str(exception))

    # --- Unknown/unexpected errors ---
    logger.error(
        "Unhandled error in %s: %s",
        context or "<unknown>",
        exception,
        exc_info=True,
    )
    return format_error(prefix, str(exception) or type(exception).__name__)
