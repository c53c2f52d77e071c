"""MCP tool definitions for Taskito."""

# Import all tools to register them with the MCP server
from taskito_mcp.tools.core import (
    create_task,
    delete_task,
    get_project_overview,
    get_task,
    initialize_project,
    list_tasks,
    update_task,
    update_task_status,
)
from taskito_mcp.tools.maintenance import archive_completed_tasks, clean_project
from taskito_mcp.tools.planning import check_dependencies, get_available_tasks

__all__ = [
    # Core tools
    "initialize_project",
    "create_task",
    "update_task_status",
    "update_task",
    "list_tasks",
    "get_task",
    "delete_task",
    "get_project_overview",
    # Planning tools
    "check_dependencies",
    "get_available_tasks",
    # Maintenance tools
    "archive_completed_tasks",
    "clean_project",
]
