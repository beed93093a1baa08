from __future__ import annotations
from typing import Any, Mapping

from core.request_spec import RequestSpec, build_query, segment, split_args
from tools.schema import choice, string, strings, number, tool

LEAD_ESTADOS = ("nuevo", "contactado", "calificado", "negociacion", "cliente", "perdido")
LEAD_CANALES = ("web", "referido", "whatsapp", "telefono", "email", "otro")


def list_leads(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec("/leads", "GET", query=build_query(args, ("estado", "canal", "search", "page", "limit")))


def get_lead(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec(f"/leads/{segment(args.get('leadId'))}", "GET")


def create_lead(args: Mapping[str, Any]) -> RequestSpec:
    # upsert by email is decided remotely
    return RequestSpec("/leads", "POST", body=args)


def update_lead(args: Mapping[str, Any]) -> RequestSpec:
    ids, data = split_args(args, "leadId")
    return RequestSpec(f"/leads/{segment(ids.get('leadId'))}", "PATCH", body=data)


TOOLS = [
    tool(
        "volkern_list_leads",
        "List leads with optional filters. Returns paginated results.",
        list_leads,
        estado=choice(LEAD_ESTADOS, "Filter by lead status"),
        canal=choice(LEAD_CANALES, "Filter by acquisition channel"),
        search=string("Search by name, email, or phone"),
        page=number("Page number (default: 1)"),
        limit=number("Results per page (default: 50, max: 100)"),
    ),
    tool(
        "volkern_get_lead",
        "Get detailed information about a specific lead by ID",
        get_lead,
        leadId=string("The lead's unique ID", required=True),
    ),
    tool(
        "volkern_create_lead",
        "Create a new lead in the CRM. If email already exists, updates the existing lead.",
        create_lead,
        nombre=string("Lead's full name (required)", required=True),
        email=string("Email address"),
        telefono=string("Phone number with country code (e.g., +34612345678)"),
        empresa=string("Company name"),
        canal=choice(LEAD_CANALES, "Acquisition channel"),
        estado=choice(LEAD_ESTADOS, "Initial status (default: nuevo)"),
        etiquetas=strings("Tags for categorization"),
        notas=string("Initial notes"),
        contextoProyecto=string("Project context or requirements"),
    ),
    tool(
        "volkern_update_lead",
        "Update an existing lead's information",
        update_lead,
        leadId=string("The lead's unique ID", required=True),
        nombre=string(),
        email=string(),
        telefono=string(),
        empresa=string(),
        canal=string(),
        estado=string(),
        etiquetas=strings(),
        notas=string(),
    ),
]
