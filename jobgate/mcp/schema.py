# SPDX-License-Identifier: Apache-2.0
"""
Tool and parameter declarations.

A ToolSpec is the single source of truth for a tool: it compiles its
ParamSpecs into a pydantic model that the registry validates calls with,
and the MCP bridge publishes that model's JSON Schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, create_model

from ..exceptions import ConfigurationError

PARAM_TYPES = ("string", "number", "integer", "boolean", "array")

Handler = Callable[..., Awaitable[str]]

# Numbers arrive as floats (see validation.coerce_value), integers as ints.
_SCALARS: Dict[str, Any] = {
    "string": StrictStr,
    "number": StrictFloat,
    "integer": StrictInt,
    "boolean": StrictBool,
}


def _bound(v: Optional[float], kind: str) -> Optional[float]:
    if v is not None and kind == "integer" and float(v).is_integer():
        return int(v)
    return v


def _strip_titles(schema: Dict[str, Any]) -> Dict[str, Any]:
    out = {k: v for k, v in schema.items() if k != "title"}
    if "default" in out and out["default"] is None:
        del out["default"]
    return out


@dataclass(frozen=True)
class ParamSpec:
    """One tool argument: type, requiredness, default and constraints."""
    name: str
    type: str
    description: str = ""
    required: bool = False
    default: Any = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    choices: Optional[Tuple[str, ...]] = None
    items: Optional[str] = None  # element type for arrays

    def __post_init__(self) -> None:
        if self.type not in PARAM_TYPES:
            raise ConfigurationError(f"Parameter '{self.name}' has unsupported type '{self.type}'")
        if self.type == "array" and self.items not in _SCALARS:
            raise ConfigurationError(f"Array parameter '{self.name}' needs an item type")
        if self.required and self.default is not None:
            raise ConfigurationError(f"Parameter '{self.name}' cannot be both required and defaulted")

    def annotation(self) -> Any:
        if self.type == "array":
            return List[_SCALARS[self.items]]  # type: ignore[index]
        if self.choices:
            return Literal[self.choices]  # type: ignore[valid-type]
        return _SCALARS[self.type]

    def field_info(self) -> Any:
        return Field(
            ... if self.required else self.default,
            description=self.description or None,
            ge=_bound(self.minimum, self.type),
            le=_bound(self.maximum, self.type),
        )


@dataclass(frozen=True)
class ToolSpec:
    """
    A named tool: ordered parameters plus an async handler returning text.

    `error_prefix` names the operation in error messages, e.g.
    "Error scraping LinkedIn jobs".
    """
    name: str
    handler: Handler
    params: Tuple[ParamSpec, ...] = ()
    description: str = ""
    error_prefix: str = "Error"
    model: Type[BaseModel] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        seen = set()
        for p in self.params:
            if p.name in seen:
                raise ConfigurationError(f"Tool '{self.name}' declares parameter '{p.name}' twice")
            seen.add(p.name)
        object.__setattr__(self, "model", self._build_model())

    def _build_model(self) -> Type[BaseModel]:
        fields = {p.name: (p.annotation(), p.field_info()) for p in self.params}
        model_name = "".join(part.capitalize() for part in self.name.split("_")) + "Args"
        try:
            return create_model(model_name, __config__=ConfigDict(extra="ignore"), **fields)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Tool '{self.name}' has an invalid parameter declaration: {e}") from e

    def param(self, name: str) -> Optional[ParamSpec]:
        for p in self.params:
            if p.name == name:
                return p
        return None

    def input_schema(self) -> Dict[str, Any]:
        raw = self.model.model_json_schema()
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {k: _strip_titles(v) for k, v in raw.get("properties", {}).items()},
        }
        if raw.get("required"):
            schema["required"] = list(raw["required"])
        return schema
