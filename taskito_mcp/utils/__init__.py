"""Utility functions for Taskito MCP."""

from taskito_mcp.utils.formatters import (
    _format_task_markdown,
    _format_task_simple,
    _format_tasks_markdown,
    _format_tasks_simple,
)
from taskito_mcp.utils.storage import ProjectStore, _get_store, read_prd_file

__all__ = [
    "ProjectStore",
    "read_prd_file",
    "_get_store",
    "_format_task_markdown",
    "_format_task_simple",
    "_format_tasks_markdown",
    "_format_tasks_simple",
]
