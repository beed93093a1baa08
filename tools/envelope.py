from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Union

# Opaque JSON value relayed from the remote API.
JSON = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


@dataclass(frozen=True)
class Success:
    payload: JSON

    ok = True

    @property
    def text(self) -> str:
        return json.dumps(self.payload, indent=2, ensure_ascii=False)

    def to_mcp(self) -> Dict[str, Any]:
        return {"content": [{"type": "text", "text": self.text}]}


@dataclass(frozen=True)
class Failure:
    message: str

    ok = False

    @property
    def text(self) -> str:
        return f"Error: {self.message}"

    def to_mcp(self) -> Dict[str, Any]:
        return {"content": [{"type": "text", "text": self.text}], "isError": True}


ResultEnvelope = Union[Success, Failure]
