# SPDX-License-Identifier: Apache-2.0
"""
Argument validation for registered tools.

Turns raw MCP arguments into a complete keyword dict for the handler using
the ToolSpec's pydantic model: required fields present, types checked,
ranges and enums enforced (never clamped), defaults filled, empty optional
arrays dropped. Every pydantic error is rewritten as a "<field> ..." line.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ..exceptions import ToolValidationError
from .schema import ParamSpec, ToolSpec

logger = logging.getLogger(__name__)

_EXPECTED = {
    "string": "a string",
    "number": "a number",
    "integer": "an integer",
    "boolean": "a boolean",
    "array": "an array",
}

_TYPE_ERRORS = frozenset({"string_type", "float_type", "int_type", "bool_type", "list_type"})


def as_float(value: int) -> float:
    """int -> float the way a JSON number lands in a double: huge values become +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _show(v: Any) -> str:
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def coerce_value(param: ParamSpec, value: Any) -> Any:
    """Bring JSON numbers to the Python type the model expects; anything else passes through."""
    if isinstance(value, bool):
        return value
    if param.type == "number" and isinstance(value, int):
        return as_float(value)
    if param.type == "integer" and isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _problem(spec: ToolSpec, err: Mapping[str, Any]) -> str:
    loc = err.get("loc") or ()
    name = str(loc[0]) if loc else "arguments"
    index = next((part for part in loc[1:] if isinstance(part, int)), None)
    label = name if index is None else f"{name}[{index}]"
    param = spec.param(name)
    kind = err.get("type")
    value = err.get("input")
    ctx = err.get("ctx") or {}

    if kind == "missing":
        return f"{label} is required"
    if kind in _TYPE_ERRORS and param is not None:
        expected = param.items if index is not None and param.items else param.type
        return f"{label} must be {_EXPECTED[expected]}, got {type(value).__name__}"
    if kind == "greater_than_equal":
        return f"{label} must be >= {_show(ctx.get('ge'))}, got {_show(value)}"
    if kind == "less_than_equal":
        return f"{label} must be <= {_show(ctx.get('le'))}, got {_show(value)}"
    if kind == "literal_error" and param is not None and param.choices:
        return f"{label} must be one of: {', '.join(param.choices)} (got {value!r})"
    return f"{label}: {err.get('msg')}"


def validate_arguments(spec: ToolSpec, raw_args: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Validate `raw_args` against `spec.params`.

    Returns:
        Keyword arguments for the handler, defaults included.

    Raises:
        ToolValidationError: listing every problem found.
    """
    if raw_args is None:
        raw_args = {}
    if not isinstance(raw_args, Mapping):
        raise ToolValidationError([f"arguments must be an object, got {type(raw_args).__name__}"])

    extra = sorted(k for k in raw_args if spec.param(k) is None)
    if extra:
        logger.debug("Ignoring unknown arguments for %s: %s", spec.name, ", ".join(extra))

    prepared: Dict[str, Any] = {}
    for param in spec.params:
        value = raw_args.get(param.name)
        # None means "not given"
        if value is None:
            continue
        # Empty filter arrays mean "no filter"
        if param.type == "array" and not param.required and isinstance(value, (list, tuple)) and not value:
            continue
        prepared[param.name] = coerce_value(param, value)

    try:
        model = spec.model.model_validate(prepared)
    except ValidationError as e:
        problems: List[str] = []
        for err in e.errors():
            text = _problem(spec, err)
            if text not in problems:
                problems.append(text)
        raise ToolValidationError(problems) from e

    return {k: v for k, v in model.model_dump().items() if v is not None}
