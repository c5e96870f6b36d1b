# SPDX-License-Identifier: Apache-2.0
"""
Arithmetic tools: add, calculate.
"""

from __future__ import annotations

import math
import operator
from typing import Callable, Dict, Union

from ...exceptions import ToolExecutionError
from ..registry import ToolRegistry
from ..schema import ParamSpec, ToolSpec
from ..validation import as_float

Number = Union[int, float]

OPERATIONS: Dict[str, Callable[[Number, Number], Number]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
}


def _to_float(value: Number) -> float:
    return value if isinstance(value, float) else as_float(value)


def format_number(value: Number) -> str:
    """Render like a JS number: 5.0 -> '5', inf -> 'Infinity', 1e30 -> '1e+30'."""
    value = _to_float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exp_text = text.split("e")
    exp = int(exp_text)
    if -7 < exp < 0:
        # JS keeps plain decimals down to 1e-6
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-exp - 1)}{digits}"
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def register_calculator_tools(registry: ToolRegistry) -> None:

    async def add(a: Number, b: Number) -> str:
        return format_number(_to_float(a) + _to_float(b))

    async def calculate(operation: str, a: Number, b: Number) -> str:
        a, b = _to_float(a), _to_float(b)
        if operation == "divide" and b == 0:
            raise ToolExecutionError("Cannot divide by zero")
        return format_number(OPERATIONS[operation](a, b))

    registry.register(
        ToolSpec(
            name="add",
            handler=add,
            description="Add two numbers.",
            params=(
                ParamSpec("a", "number", "First number", required=True),
                ParamSpec("b", "number", "Second number", required=True),
            ),
        )
    )
    registry.register(
        ToolSpec(
            name="calculate",
            handler=calculate,
            description="Apply add, subtract, multiply or divide to two numbers.",
            params=(
                ParamSpec("operation", "string", "Operation to apply", required=True, choices=tuple(OPERATIONS)),
                ParamSpec("a", "number", "Left operand", required=True),
                ParamSpec("b", "number", "Right operand", required=True),
            ),
        )
    )
