from __future__ import annotations
import asyncio
import logging
import sys
from typing import Any, Dict, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError, ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.config import ConfigurationError, Settings, load_settings
from core.volkern_api import VolkernAPI
from tools import REGISTRY
from tools.dispatcher import Dispatcher, Transport
from tools.envelope import Failure, ResultEnvelope
from tools.registry import ToolRegistry

logger = logging.getLogger("volkern.server")

# Extra seconds on top of the HTTP timeout before giving up on the worker thread.
TIMEOUT_GRACE = 5.0


def configure_logging(level: str = "INFO") -> None:
    # stdout carries the stdio MCP stream, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


async def call_tool(
    dispatcher: Dispatcher,
    name: str,
    arguments: Optional[Dict[str, Any]],
    timeout: float,
) -> ResultEnvelope:
    try:
        return await asyncio.wait_for(asyncio.to_thread(dispatcher.invoke, name, arguments), timeout)
    except asyncio.TimeoutError:
        logger.warning("%s timed out after %ss", name, timeout)
        return Failure(f"Timed out after {timeout:g}s waiting for {name}")


def as_tool_result(envelope: ResultEnvelope) -> ToolResult:
    if not envelope.ok:
        # surfaces as {"content": [...], "isError": true}
        raise ToolError(envelope.text)
    return ToolResult(content=[TextContent(type="text", text=envelope.text)])


class VolkernTool(Tool):
    """MCP tool whose inputSchema comes straight from a ToolDescriptor."""

    dispatcher: Any = Field(default=None, exclude=True)
    call_timeout: float = Field(default=30.0 + TIMEOUT_GRACE, exclude=True)

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        envelope = await call_tool(self.dispatcher, self.name, arguments, self.call_timeout)
        return as_tool_result(envelope)


class UnknownToolMiddleware(Middleware):
    """Sends calls for unregistered names through the dispatcher instead of fastmcp's NotFoundError."""

    def __init__(self, dispatcher: Dispatcher, call_timeout: float) -> None:
        self.dispatcher = dispatcher
        self.call_timeout = call_timeout

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        try:
            return await call_next(context)
        except NotFoundError:
            params = context.message
            envelope = await call_tool(self.dispatcher, params.name, params.arguments, self.call_timeout)
            return as_tool_result(envelope)


def build_server(
    settings: Settings,
    registry: ToolRegistry = REGISTRY,
    transport: Optional[Transport] = None,
) -> FastMCP:
    dispatcher = Dispatcher(registry, transport or VolkernAPI(settings))
    call_timeout = settings.timeout + TIMEOUT_GRACE
    mcp = FastMCP(name=settings.service_name, version=settings.version)
    mcp.add_middleware(UnknownToolMiddleware(dispatcher, call_timeout))
    for d in registry.list_tools():
        mcp.add_tool(
            VolkernTool(
                name=d.name,
                description=d.description,
                parameters=d.input_schema(),
                dispatcher=dispatcher,
                call_timeout=call_timeout,
            )
        )
    return mcp


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    api = VolkernAPI(settings)
    mcp = build_server(settings, transport=api)
    logger.info("Volkern MCP Server running on stdio (%s tools, api=%s)", len(REGISTRY), settings.api_url)
    try:
        mcp.run()
    finally:
        api.close()


if __name__ == "__main__":
    main()
