# SPDX-License-Identifier: Apache-2.0
"""
Custom exceptions for jobgate.

Failure categories:
- Configuration (duplicate tools, missing token, bad mode)
- Argument validation
- Tool-level failures with a known user-facing message
- Platform transport, run failure and poll timeout

None of these cross the tool boundary; error_handler turns them into text.
"""

from __future__ import annotations

from typing import Optional


class JobGateError(Exception):
    """Base exception for jobgate."""
    pass


class ConfigurationError(JobGateError):
    """Invalid or missing configuration (fatal at startup when raised by the registry)."""
    pass


class ToolValidationError(JobGateError):
    """One or more tool arguments failed validation."""

    def __init__(self, problems: list[str]):
        super().__init__("; ".join(problems))
        self.problems = problems


class ToolExecutionError(JobGateError):
    """A handler refused its (valid) input, e.g. division by zero."""
    pass


# --- Platform errors ---
class TransportError(JobGateError):
    """Non-2xx response or network failure talking to the actor platform."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DatasetFetchError(TransportError):
    """The run succeeded but its dataset items could not be fetched."""
    pass


class JobFailedError(JobGateError):
    """The actor run reached a terminal status other than SUCCEEDED."""

    def __init__(self, run_id: str, status: str):
        super().__init__(f"Actor run {run_id} finished with status {status}")
        self.run_id = run_id
        self.status = status


class JobTimeoutError(JobGateError):
    """The poll budget ran out before the run reached a terminal status."""

    def __init__(self, run_id: str, last_status: str, attempts: int):
        super().__init__(
            f"Actor run {run_id} did not complete after {attempts} status checks, status={last_status}"
        )
        self.run_id = run_id
        self.last_status = last_status
        self.attempts = attempts


__all__ = [
    "JobGateError",
    "ConfigurationError",
    "ToolValidationError",
    "ToolExecutionError",
    "TransportError",
    "DatasetFetchError",
    "JobFailedError",
    "JobTimeoutError",
]
