from .loader import load_tools
from .registry import ToolRegistry

REGISTRY = ToolRegistry(load_tools())


def list_tools():
    return REGISTRY.list_tools()


def find_tool(name: str):
    return REGISTRY.find_tool(name)
