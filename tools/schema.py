from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from core.request_spec import RequestSpec

PARAM_TYPES = ("string", "number", "boolean", "array", "object")

BuildRule = Callable[[Mapping[str, Any]], RequestSpec]


@dataclass(frozen=True)
class ParamSpec:
    type: str
    description: Optional[str] = None
    required: bool = False
    enum: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.type not in PARAM_TYPES:
            raise ValueError(f"Unsupported parameter type: {self.type}")

    def to_schema(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.enum is not None:
            out["enum"] = list(self.enum)
        if self.type == "array":
            out["items"] = {"type": "string"}
        if self.description is not None:
            out["description"] = self.description
        return out


def string(description: Optional[str] = None, *, required: bool = False) -> ParamSpec:
    return ParamSpec("string", description, required)


def number(description: Optional[str] = None, *, required: bool = False) -> ParamSpec:
    return ParamSpec("number", description, required)


def boolean(description: Optional[str] = None, *, required: bool = False) -> ParamSpec:
    return ParamSpec("boolean", description, required)


def strings(description: Optional[str] = None, *, required: bool = False) -> ParamSpec:
    return ParamSpec("array", description, required)


def obj(description: Optional[str] = None, *, required: bool = False) -> ParamSpec:
    return ParamSpec("object", description, required)


def choice(values: Tuple[str, ...], description: Optional[str] = None, *, required: bool = False) -> ParamSpec:
    return ParamSpec("string", description, required, tuple(values))


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    params: Tuple[Tuple[str, ParamSpec], ...]
    build: BuildRule = field(repr=False, compare=False)

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(k for k, p in self.params if p.required)

    def missing(self, args: Mapping[str, Any]) -> Tuple[str, ...]:
        return tuple(k for k in self.required if args.get(k) is None)

    def input_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {k: p.to_schema() for k, p in self.params},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema

    def to_spec(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


def tool(name: str, description: str, build: BuildRule, **params: ParamSpec) -> ToolDescriptor:
    # kwargs keep declaration order, which is the property order in inputSchema
    return ToolDescriptor(name, description, tuple(params.items()), build)
