from __future__ import annotations
from typing import Any, Mapping

from core.request_spec import RequestSpec, segment, split_args
from tools.schema import choice, string, tool

TASK_TIPOS = ("llamada", "email", "reunion", "recordatorio")


def create_task(args: Mapping[str, Any]) -> RequestSpec:
    ids, data = split_args(args, "leadId")
    return RequestSpec(f"/leads/{segment(ids.get('leadId'))}/tasks", "POST", body=data)


def list_tasks(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec(f"/leads/{segment(args.get('leadId'))}/tasks", "GET")


def complete_task(args: Mapping[str, Any]) -> RequestSpec:
    return RequestSpec(f"/tasks/{segment(args.get('taskId'))}", "PATCH", body={"completada": True})


TOOLS = [
    tool(
        "volkern_create_task",
        "Create a follow-up task for a lead",
        create_task,
        leadId=string("ID of the lead", required=True),
        tipo=choice(TASK_TIPOS, "Task type", required=True),
        titulo=string("Task title", required=True),
        descripcion=string("Task description/context"),
        fechaVencimiento=string("Due date in ISO 8601 UTC", required=True),
        asignadoA=string("User ID to assign the task to"),
    ),
    tool(
        "volkern_list_tasks",
        "List tasks for a specific lead",
        list_tasks,
        leadId=string("ID of the lead", required=True),
    ),
    tool(
        "volkern_complete_task",
        "Mark a task as completed",
        complete_task,
        taskId=string("The task's unique ID", required=True),
    ),
]
