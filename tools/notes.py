from __future__ import annotations
from typing import Any, Mapping

from core.request_spec import RequestSpec, segment, split_args
from tools.schema import string, tool


def list_notes(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec(f"/leads/{segment(args.get('leadId'))}/notes", "GET")


def create_note(args: Mapping[str, Any]) -> RequestSpec:
    ids, data = split_args(args, "leadId")
    return RequestSpec(f"/leads/{segment(ids.get('leadId'))}/notes", "POST", body=data)


TOOLS = [
    tool(
        "volkern_list_notes",
        "List all notes for a specific lead",
        list_notes,
        leadId=string("ID of the lead", required=True),
    ),
    tool(
        "volkern_create_note",
        "Create a note for a lead",
        create_note,
        leadId=string("ID of the lead", required=True),
        contenido=string("Note content", required=True),
        titulo=string("Optional note title"),
    ),
]
