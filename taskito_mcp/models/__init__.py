"""Pydantic models for Taskito MCP."""

from taskito_mcp.models.inputs import (
    ArchiveCompletedInput,
    AvailableTasksInput,
    CheckDependenciesInput,
    CleanProjectInput,
    CreateTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    InitializeProjectInput,
    ListTasksInput,
    ProjectOverviewInput,
    UpdateTaskInput,
    UpdateTaskStatusInput,
)
from taskito_mcp.models.results import (
    CompactionReport,
    DeleteResult,
    DependencyRef,
    DependencyStatus,
    ProjectOverview,
    TransitionResult,
)
from taskito_mcp.models.task import Project, Task, TaskFilter, TaskUpdate

__all__ = [
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
]
