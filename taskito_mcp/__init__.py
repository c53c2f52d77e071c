"""
MCP Server for Taskito.

This server tracks the tasks of a single project stored in
``taskito/tasks.json``: creating and updating tasks, gating work on
dependencies, listing what is ready to start, and archiving finished work.
"""

# Re-export enums
from taskito_mcp.enums import Priority, ResponseFormat, TaskSize, TaskStatus

# Re-export errors
from taskito_mcp.errors import (
    MissingDependencyError,
    PrdUnreadableError,
    ProjectNotFoundError,
    StorageError,
    TaskitoError,
    TaskNotFoundError,
)

# Re-export models
from taskito_mcp.models import (
    ArchiveCompletedInput,
    AvailableTasksInput,
    CheckDependenciesInput,
    CleanProjectInput,
    CompactionReport,
    CreateTaskInput,
    DeleteResult,
    DeleteTaskInput,
    DependencyRef,
    DependencyStatus,
    GetTaskInput,
    InitializeProjectInput,
    ListTasksInput,
    Project,
    ProjectOverview,
    ProjectOverviewInput,
    Task,
    TaskFilter,
    TaskUpdate,
    TransitionResult,
    UpdateTaskInput,
    UpdateTaskStatusInput,
)

# Re-export MCP server instance
from taskito_mcp.server import mcp

# Re-export tools
from taskito_mcp.tools import (
    archive_completed_tasks,
    check_dependencies,
    clean_project,
    create_task,
    delete_task,
    get_available_tasks,
    get_project_overview,
    get_task,
    initialize_project,
    list_tasks,
    update_task,
    update_task_status,
)

# Re-export utilities (including private functions used by tests)
from taskito_mcp.utils import (
    ProjectStore,
    _format_task_markdown,
    _format_task_simple,
    _format_tasks_markdown,
    _format_tasks_simple,
    _get_store,
    read_prd_file,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "TaskSize",
    "Priority",
    # Errors
    "TaskitoError",
    "ProjectNotFoundError",
    "TaskNotFoundError",
    "MissingDependencyError",
    "PrdUnreadableError",
    "StorageError",
    # Document models
    "Task",
    "Project",
    "TaskUpdate",
    "TaskFilter",
    # Tool input models
    "InitializeProjectInput",
    "ProjectOverviewInput",
    "CreateTaskInput",
    "UpdateTaskStatusInput",
    "UpdateTaskInput",
    "ListTasksInput",
    "GetTaskInput",
    "DeleteTaskInput",
    "CheckDependenciesInput",
    "AvailableTasksInput",
    "ArchiveCompletedInput",
    "CleanProjectInput",
    # Engine results
    "DependencyRef",
    "DependencyStatus",
    "TransitionResult",
    "DeleteResult",
    "CompactionReport",
    "ProjectOverview",
    # Storage
    "ProjectStore",
    "read_prd_file",
    "_get_store",
    # Formatters
    "_format_task_markdown",
    "_format_task_simple",
    "_format_tasks_markdown",
    "_format_tasks_simple",
    # Tools
    "initialize_project",
    "create_task",
    "update_task_status",
    "update_task",
    "list_tasks",
    "get_task",
    "delete_task",
    "get_project_overview",
    "check_dependencies",
    "get_available_tasks",
    "archive_completed_tasks",
    "clean_project",
    # MCP server instance
    "mcp",
]
