from __future__ import annotations
from typing import Any, Mapping

from core.request_spec import RequestSpec, build_query, segment, split_args
from tools.schema import choice, number, string, tool

CITA_ESTADOS = ("Pendiente", "Confirmada", "Completada", "Cancelada", "Pagada")
CITA_TIPOS = ("reunion", "servicio", "llamada", "otro")
CITA_ACCIONES = ("confirmar", "cancelar", "reprogramar")


def check_disponibilidad(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec("/citas/disponibilidad", "GET", query=build_query(args, ("fecha", "duracion")))


def list_citas(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec("/citas", "GET", query=build_query(args, ("estado", "tipo", "fecha", "fechaInicio", "fechaFin")))


def create_cita(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec("/citas", "POST", body=args)


def update_cita(args: Mapping[str, Any]) -> RequestSpec:
    ids, data = split_args(args, "citaId")
    return RequestSpec(f"/citas/{segment(ids.get('citaId'))}", "PATCH", body=data)


def cita_accion(args: Mapping[str, Any]) -> RequestSpec:
    # citaId travels in the body here, the endpoint is shared
    return RequestSpec("/citas/accion", "POST", body=args)


TOOLS = [
    tool(
        "volkern_check_disponibilidad",
        "Check available time slots for a specific date. Always call this before booking.",
        check_disponibilidad,
        fecha=string("Date in YYYY-MM-DD format", required=True),
        duracion=number("Duration in minutes (default: 60)"),
    ),
    tool(
        "volkern_list_citas",
        "List appointments with optional filters",
        list_citas,
        estado=choice(CITA_ESTADOS, "Filter by appointment status"),
        tipo=choice(CITA_TIPOS, "Filter by appointment type"),
        fecha=string("Filter by specific date (YYYY-MM-DD)"),
        fechaInicio=string("Start of date range (ISO 8601)"),
        fechaFin=string("End of date range (ISO 8601)"),
    ),
    tool(
        "volkern_create_cita",
        "Create a new appointment. Check availability first with volkern_check_disponibilidad.",
        create_cita,
        leadId=string("ID of the lead for this appointment", required=True),
        fechaHora=string("Appointment date/time in ISO 8601 UTC (e.g., 2026-02-10T10:00:00Z)", required=True),
        tipo=choice(CITA_TIPOS, "Appointment type (default: reunion)"),
        titulo=string("Appointment title"),
        descripcion=string("Appointment description or notes"),
        duracion=number("Duration in minutes (default: 60)"),
        servicioId=string("Service ID (required if tipo is 'servicio')"),
    ),
    tool(
        "volkern_update_cita",
        "Update an existing appointment",
        update_cita,
        citaId=string("The appointment's unique ID", required=True),
        fechaHora=string("New date/time in ISO 8601 UTC"),
        estado=choice(CITA_ESTADOS[:4]),
        descripcion=string(),
        duracion=number(),
    ),
    tool(
        "volkern_cita_accion",
        "Perform an action on an appointment (confirm, cancel, or reschedule)",
        cita_accion,
        citaId=string("The appointment's unique ID", required=True),
        accion=choice(CITA_ACCIONES, "Action to perform", required=True),
        nuevaFecha=string("New date/time for reschedule (ISO 8601)"),
        motivo=string("Reason for cancellation"),
    ),
]
