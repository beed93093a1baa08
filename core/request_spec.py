from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

METHODS = ("GET", "POST", "PATCH", "DELETE")


@dataclass(frozen=True)
class RequestSpec:
    path: str
    method: str = "GET"
    query: Optional[Mapping[str, str]] = None
    body: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        if not self.path.startswith("/"):
            raise ValueError(f"Request path must start with '/': {self.path!r}")
        if self.query is not None:
            object.__setattr__(self, "query", MappingProxyType(dict(self.query)))
        if self.body is not None:
            object.__setattr__(self, "body", MappingProxyType(dict(self.body)))

    def json_body(self) -> Optional[Dict[str, Any]]:
        if self.body is None or self.method == "GET":
            return None
        return dict(self.body)


def split_args(args: Mapping[str, Any], *keys: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Pull the given keys out of a copy of args.
    Returns (extracted, residual); the caller's mapping is left untouched.
    """
    residual = dict(args)
    extracted = {k: residual.pop(k) for k in keys if k in residual}
    return extracted, residual


def segment(value: Any) -> str:
    if value is None or value == "":
        raise ValueError("Path identifier is empty")
    return quote(query_value(value), safe="")


def query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(args: Mapping[str, Any], keys: Tuple[str, ...]) -> Dict[str, str]:
    query: Dict[str, str] = {}
    for k in keys:
        v = args.get(k)
        if v is None or v == "":
            continue
        query[k] = query_value(v)
    return query
