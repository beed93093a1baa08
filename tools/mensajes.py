from __future__ import annotations
from typing import Any, Mapping

from core.request_spec import RequestSpec, build_query
from tools.schema import choice, number, string, tool

MENSAJE_TIPOS = ("texto", "imagen", "documento")


def send_whatsapp(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec("/mensajes/enviar", "POST", body=args)


def list_conversaciones(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec("/mensajes/conversaciones", "GET", query=build_query(args, ("leadId", "page", "limit")))


TOOLS = [
    tool(
        "volkern_send_whatsapp",
        "Send a WhatsApp message to a lead. Requires active WhatsApp integration.",
        send_whatsapp,
        leadId=string("ID of the lead to message", required=True),
        mensaje=string("Message content", required=True),
        tipo=choice(MENSAJE_TIPOS, "Message type (default: texto)"),
    ),
    tool(
        "volkern_list_conversaciones",
        "List WhatsApp conversations, optionally filtered by lead",
        list_conversaciones,
        leadId=string("Filter by lead ID"),
        page=number(),
        limit=number(),
    ),
]
