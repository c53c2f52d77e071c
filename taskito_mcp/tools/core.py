"""Core MCP tool definitions: project setup and task CRUD."""

import json

from mcp.types import ToolAnnotations

from taskito_mcp.engine import lifecycle
from taskito_mcp.engine.dependencies import available_tasks, resolve_dependency
from taskito_mcp.engine.repository import TaskRepository
from taskito_mcp.enums import ResponseFormat
from taskito_mcp.errors import TaskitoError
from taskito_mcp.models.inputs import (
    CreateTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    InitializeProjectInput,
    ListTasksInput,
    ProjectOverviewInput,
    UpdateTaskInput,
    UpdateTaskStatusInput,
)
from taskito_mcp.models.task import TaskFilter, TaskUpdate
from taskito_mcp.server import mcp
from taskito_mcp.utils.formatters import (
    _format_created,
    _format_delete,
    _format_error,
    _format_overview_markdown,
    _format_task_markdown,
    _format_tasks_markdown,
    _format_tasks_simple,
    _format_transition,
    _format_updated,
)
from taskito_mcp.utils.storage import _get_store, read_prd_file


@mcp.tool(
    name="initialize_project",
    annotations=ToolAnnotations(
        title="Initialize Project",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def initialize_project(params: InitializeProjectInput) -> str:
    """
    Initialize a new Taskito project from a description or a PRD file.

    Creates `taskito/tasks.json` in the current working directory. Any
    existing project in that location is replaced.

    Args:
        params: InitializeProjectInput with name, description and optional prd_file

    Returns:
        Confirmation with the project location

    Examples:
        - From a description: params with name="Demo", description="A demo project"
        - From a PRD: params with name="Demo", description="", prd_file="docs/prd.md"
    """
    try:
        description = params.description
        if params.prd_file:
            description = read_prd_file(params.prd_file)

        store = _get_store()
        project = store.initialize(params.name, description)
    except TaskitoError as e:
        return _format_error(e)

    return (
        f"# 🎯 Taskito Project Initialized\n\n"
        f"**Project:** {project.name}\n\n"
        f"**Location:** `{store.path}`\n\n"
        f"**Status:** Ready for tasks! 🚀\n\n"
        f"You can now create tasks using the `create_task` command."
    )


@mcp.tool(
    name="create_task",
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def create_task(params: CreateTaskInput) -> str:
    """
    Create a new task in the project.

    USE THIS WHEN:
    - Adding a new unit of work
    - Breaking a PRD down into tasks with sizes and dependencies

    DO NOT USE WHEN:
    - Changing an existing task → use update_task or update_task_status

    Every dependency must be the ID of an existing active task. New tasks
    start in status "todo" and receive the next free ID (task-1, task-2, ...).

    Args:
        params: CreateTaskInput with title, description and optional size, priority, tags, dependencies

    Returns:
        The created task's ID and attributes

    Examples:
        - Simple task: params with title="Set up CI", description="GitHub Actions"
        - With dependency: params with title="Deploy", description="...", dependencies=["task-1"]
    """
    try:
        store = _get_store()
        project = store.load()
        task = lifecycle.create_task(
            TaskRepository(project),
            title=params.title,
            description=params.description,
            size=params.size,
            priority=params.priority,
            tags=params.tags,
            dependencies=params.dependencies,
            now=store.clock(),
        )
        store.save(project)
    except TaskitoError as e:
        return _format_error(e)

    return _format_created(task)


@mcp.tool(
    name="update_task_status",
    annotations=ToolAnnotations(
        title="Update Task Status",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def update_task_status(params: UpdateTaskStatusInput) -> str:
    """
    Change a task's status (todo, in-progress, in-review, done).

    Moving a task to "in-progress" is refused while any of its dependencies
    is missing or not "done"; the reply lists the blocking task IDs and
    nothing is changed. All other moves, including backward ones, are allowed.

    Args:
        params: UpdateTaskStatusInput with task_id and status

    Returns:
        The old and new status, or the list of blocking dependencies

    Examples:
        - Start work: params with task_id="task-2", status="in-progress"
        - Finish: params with task_id="task-2", status="done"
    """
    try:
        store = _get_store()
        project = store.load()
        result = lifecycle.transition(TaskRepository(project), params.task_id, params.status, now=store.clock())
        if result.accepted:
            store.save(project)
    except TaskitoError as e:
        return _format_error(e)

    return _format_transition(result)


@mcp.tool(
    name="update_task",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def update_task(params: UpdateTaskInput) -> str:
    """
    Update a task's title, description, size, priority or tags.

    Only the fields provided are changed. Tags replace the existing list.
    Use update_task_status to change status.

    Args:
        params: UpdateTaskInput with task_id and the fields to change

    Returns:
        The task's updated attributes

    Examples:
        - Resize: params with task_id="task-3", size="l"
        - Retag: params with task_id="task-3", tags=["backend", "api"]
    """
    update = TaskUpdate(
        title=params.title,
        description=params.description,
        size=params.size,
        priority=params.priority,
        tags=params.tags,
    )
    try:
        store = _get_store()
        project = store.load()
        task = lifecycle.apply_update(TaskRepository(project), params.task_id, update, now=store.clock())
        store.save(project)
    except TaskitoError as e:
        return _format_error(e)

    return _format_updated(task)


@mcp.tool(
    name="list_tasks",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def list_tasks(params: ListTasksInput) -> str:
    """
    List active tasks, optionally filtered by status, priority, size and tag.

    Filters combine with AND. Archived tasks are never listed.

    Args:
        params: ListTasksInput with optional filters and format

    Returns:
        Tasks grouped by status (markdown), one per line (simple), or JSON

    Examples:
        - Everything: params with default values
        - High priority work in progress: params with status="in-progress", priority="high"
        - Tagged tasks as a flat list: params with tag="backend", format="simple"
    """
    criteria = TaskFilter(status=params.status, priority=params.priority, size=params.size, tag=params.tag)
    try:
        project = _get_store().load()
    except TaskitoError as e:
        return _format_error(e)

    tasks = TaskRepository(project).filter(criteria)

    if params.format == ResponseFormat.JSON:
        return json.dumps(
            {
                "total": len(project.tasks),
                "count": len(tasks),
                "tasks": [t.model_dump(mode="json") for t in tasks],
            },
            indent=2,
        )

    if params.format == ResponseFormat.SIMPLE:
        return _format_tasks_simple(tasks)

    title = "Task List"
    if criteria.describe():
        title = f"Task List ({criteria.describe()})"
    return _format_tasks_markdown(tasks, title)


@mcp.tool(
    name="get_task",
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def get_task(params: GetTaskInput) -> str:
    """
    Retrieve full details for a single active task.

    Args:
        params: GetTaskInput with task_id and format

    Returns:
        Task details including each dependency's title and status

    Examples:
        - params with task_id="task-4"
    """
    try:
        repo = TaskRepository(_get_store().load())
        task = repo.get(params.task_id)
    except TaskitoError as e:
        return _format_error(e)

    deps = [resolve_dependency(dep_id, repo) for dep_id in task.dependencies]

    if params.format == ResponseFormat.JSON:
        data = task.model_dump(mode="json")
        data["resolved_dependencies"] = [d.model_dump(mode="json") for d in deps]
        return json.dumps(data, indent=2)

    return _format_task_markdown(task, deps)


@mcp.tool(
    name="delete_task",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def delete_task(params: DeleteTaskInput) -> str:
    """
    Permanently delete an active task.

    Deletion is refused while other tasks list this task as a dependency;
    the reply names them. The task ID is never reused.

    Args:
        params: DeleteTaskInput with task_id

    Returns:
        Confirmation, or the list of dependent tasks blocking deletion
    """
    try:
        store = _get_store()
        project = store.load()
        result = lifecycle.delete_task(TaskRepository(project), params.task_id)
        if result.accepted:
            store.save(project)
    except TaskitoError as e:
        return _format_error(e)

    return _format_delete(result)


@mcp.tool(
    name="get_project_overview",
    annotations=ToolAnnotations(
        title="Project Overview",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def get_project_overview(params: ProjectOverviewInput) -> str:
    """
    Summarize the project: task counts by status and size, completion rate.

    Args:
        params: ProjectOverviewInput with format

    Returns:
        Overview tables (markdown) or JSON counts
    """
    try:
        project = _get_store().load()
    except TaskitoError as e:
        return _format_error(e)

    repo = TaskRepository(project)
    overview = repo.overview()
    overview.available = len(available_tasks(repo))

    if params.format == ResponseFormat.JSON:
        data = overview.model_dump(mode="json")
        data["description"] = project.description
        data["updated"] = project.updated.isoformat()
        return json.dumps(data, indent=2)

    return _format_overview_markdown(overview, project)
