from __future__ import annotations
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Tuple

from tools.schema import ToolDescriptor


class DuplicateToolError(ValueError):
    pass


class ToolRegistry:
    """Read-only catalog of tool descriptors, kept in registration order."""

    def __init__(self, descriptors: Iterable[ToolDescriptor]) -> None:
        ordered: List[ToolDescriptor] = []
        by_name: Dict[str, ToolDescriptor] = {}
        for d in descriptors:
            if d.name in by_name:
                raise DuplicateToolError(f"Duplicate tool name: {d.name}")
            by_name[d.name] = d
            ordered.append(d)
        self._tools: Tuple[ToolDescriptor, ...] = tuple(ordered)
        self._by_name = MappingProxyType(by_name)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def list_tools(self) -> Tuple[ToolDescriptor, ...]:
        return self._tools

    def find_tool(self, name: str) -> Optional[ToolDescriptor]:
        return self._by_name.get(name)

    def list_specs(self) -> List[Dict[str, Any]]:
        return [d.to_spec() for d in self._tools]
