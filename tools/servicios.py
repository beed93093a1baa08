from __future__ import annotations
from typing import Any, Mapping

from core.request_spec import RequestSpec, build_query, segment
from tools.schema import boolean, string, tool


def list_servicios(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec("/servicios", "GET", query=build_query(args, ("activo",)))


def get_servicio(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec(f"/servicios/{segment(args.get('servicioId'))}", "GET")


TOOLS = [
    tool(
        "volkern_list_servicios",
        "List available services from the catalog",
        list_servicios,
        activo=boolean("Filter only active services (default: true)"),
    ),
    tool(
        "volkern_get_servicio",
        "Get detailed information about a specific service",
        get_servicio,
        servicioId=string("The service's unique ID", required=True),
    ),
]
