"""Dependency-aware planning tools: dependency checks and ready-to-start tasks."""

import json

from mcp.types import ToolAnnotations

from taskito_mcp.engine.dependencies import available_tasks, dependency_status, dependents
from taskito_mcp.engine.repository import TaskRepository
from taskito_mcp.enums import ResponseFormat
from taskito_mcp.errors import TaskitoError
from taskito_mcp.models.inputs import AvailableTasksInput, CheckDependenciesInput
from taskito_mcp.server import mcp
from taskito_mcp.utils.formatters import _format_available_markdown, _format_dependency_check, _format_error
from taskito_mcp.utils.storage import _get_store


@mcp.tool(
    name="check_dependencies",
    annotations=ToolAnnotations(
        title="Check Dependencies",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def check_dependencies(params: CheckDependenciesInput) -> str:
    """
    Check whether a task's dependencies are satisfied.

    USE THIS WHEN:
    - Deciding whether a task can be moved to "in-progress"
    - Finding out which tasks block a given task

    A dependency counts as completed only if it is an active task with
    status "done". Deleted or archived dependencies are reported as pending
    with status "unknown".

    Args:
        params: CheckDependenciesInput with task_id and format

    Returns:
        Completed and pending dependencies and whether the task can start
    """
    try:
        repo = TaskRepository(_get_store().load())
        task = repo.get(params.task_id)
    except TaskitoError as e:
        return _format_error(e)

    status = dependency_status(task, repo)

    if params.format == ResponseFormat.JSON:
        return json.dumps(
            {
                "task_id": task.id,
                "can_start": status.can_start,
                "completed": [d.model_dump(mode="json") for d in status.completed],
                "pending": [d.model_dump(mode="json") for d in status.pending],
                "dependents": [t.id for t in dependents(task.id, repo)],
            },
            indent=2,
        )

    return _format_dependency_check(status)


@mcp.tool(
    name="get_available_tasks",
    annotations=ToolAnnotations(
        title="Available Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def get_available_tasks(params: AvailableTasksInput) -> str:
    """
    List tasks that can be started now.

    A task is available when its status is "todo" and every dependency is
    an active task with status "done". Results are grouped by priority
    (high, medium, low).

    Args:
        params: AvailableTasksInput with format

    Returns:
        Startable tasks grouped by priority
    """
    try:
        repo = TaskRepository(_get_store().load())
    except TaskitoError as e:
        return _format_error(e)

    tasks = available_tasks(repo)

    if params.format == ResponseFormat.JSON:
        return json.dumps({"count": len(tasks), "tasks": [t.model_dump(mode="json") for t in tasks]}, indent=2)

    return _format_available_markdown(tasks)
