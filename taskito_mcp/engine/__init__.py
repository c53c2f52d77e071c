"""Task dependency and lifecycle engine."""

from taskito_mcp.engine.archival import archive_completed, repair_and_compact, select_archivable
from taskito_mcp.engine.dependencies import (
    available_tasks,
    blocking_dependencies,
    can_start,
    dependency_status,
    dependents,
    is_available,
    resolve_dependency,
    validate_dependencies_exist,
)
from taskito_mcp.engine.lifecycle import apply_update, create_task, delete_task, transition
from taskito_mcp.engine.repository import TaskRepository

__all__ = [
    "TaskRepository",
    # Dependency resolution
    "dependency_status",
    "blocking_dependencies",
    "can_start",
    "is_available",
    "available_tasks",
    "dependents",
    "resolve_dependency",
    "validate_dependencies_exist",
    # Lifecycle
    "create_task",
    "transition",
    "apply_update",
    "delete_task",
    # Archival
    "archive_completed",
    "select_archivable",
    "repair_and_compact",
]
