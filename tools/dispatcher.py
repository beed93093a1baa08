from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, Protocol, Tuple

from core.request_spec import RequestSpec
from tools.envelope import Failure, ResultEnvelope, Success
from tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def perform(self, spec: RequestSpec) -> Any:
        ...


def _message(e: BaseException) -> str:
    return str(e) or type(e).__name__


class Dispatcher:
    """
    Turns one tool invocation into one ResultEnvelope.

    Holds only the read-only registry and the transport, so a single
    instance can serve concurrent invocations. invoke() never raises.
    """

    def __init__(self, registry: ToolRegistry, transport: Transport) -> None:
        self.registry = registry
        self.transport = transport

    def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ResultEnvelope:
        envelope, spec = self._dispatch(name, arguments)
        target = f"{spec.method} {spec.path}" if spec is not None else "-"
        if envelope.ok:
            logger.info("%s %s -> ok", name, target)
        else:
            logger.warning("%s %s -> failed: %s", name, target, envelope.message)
        return envelope

    def _dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]]
    ) -> Tuple[ResultEnvelope, Optional[RequestSpec]]:
        descriptor = self.registry.find_tool(name) if isinstance(name, str) else None
        if descriptor is None:
            return Failure(f"Unknown tool: {name}"), None

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return Failure(f"Arguments for {name} must be an object"), None

        missing = descriptor.missing(arguments)
        if missing:
            return Failure(f"Missing required argument(s): {', '.join(missing)}"), None

        spec = None
        try:
            spec = descriptor.build(dict(arguments))
            payload = self.transport.perform(spec)
        except Exception as e:
            # VolkernAPIError already carries status and error body in its message
            return Failure(_message(e)), spec

        return Success(payload), spec
