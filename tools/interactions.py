from __future__ import annotations
from typing import Any, Mapping

from core.request_spec import RequestSpec, segment, split_args
from tools.schema import choice, obj, string, tool

INTERACTION_TIPOS = ("llamada", "email", "whatsapp", "reunion", "nota", "otro")
INTERACTION_RESULTADOS = ("positivo", "neutro", "negativo")


def list_interactions(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec(f"/leads/{segment(args.get('leadId'))}/interactions", "GET")


def create_interaction(args: Mapping[str, Any]) -> RequestSpec:
    ids, data = split_args(args, "leadId")
    return RequestSpec(f"/leads/{segment(ids.get('leadId'))}/interactions", "POST", body=data)


TOOLS = [
    tool(
        "volkern_list_interactions",
        "List all interactions for a specific lead",
        list_interactions,
        leadId=string("ID of the lead", required=True),
    ),
    tool(
        "volkern_create_interaction",
        "Log an interaction (call, email, meeting) with a lead",
        create_interaction,
        leadId=string("ID of the lead", required=True),
        tipo=choice(INTERACTION_TIPOS, "Interaction type", required=True),
        contenido=string("Interaction summary/content", required=True),
        resultado=choice(INTERACTION_RESULTADOS, "Outcome of the interaction"),
        metadatos=obj("Additional metadata (e.g., call duration, meeting attendees)"),
    ),
]
