"""Input models for Taskito MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskito_mcp.enums import Priority, ResponseFormat, TaskSize, TaskStatus

# ============================================================================
# Project Input Models
# ============================================================================


class InitializeProjectInput(BaseModel):
    """Input model for initializing a project."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Project name", min_length=1, max_length=200)
    description: str = Field(..., description="Project description or summary of the PRD")
    prd_file: str | None = Field(
        default=None,
        description="Optional: path to a PRD file whose contents replace the description",
    )


class ProjectOverviewInput(BaseModel):
    """Input model for the project overview."""

    model_config = ConfigDict(str_strip_whitespace=True)

    format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


# ============================================================================
# Task Input Models
# ============================================================================


def _clean_ids(v: list[str] | None) -> list[str] | None:
    if v is None:
        return None
    return [item.strip() for item in v if item.strip()]


class CreateTaskInput(BaseModel):
    """Input model for creating a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Task title", min_length=1, max_length=500)
    description: str = Field(..., description="Task description")
    size: TaskSize = Field(
        default=TaskSize.M,
        description="Task size: xs (< 1h), s (1-4h), m (4-8h), l (1-2 days), xl (2+ days)",
    )
    dependencies: list[str] = Field(
        default_factory=list, description="Task IDs this task depends on (e.g. ['task-1'])"
    )
    priority: Priority = Field(default=Priority.MEDIUM, description="Task priority: low, medium or high")
    tags: list[str] = Field(default_factory=list, description="Tags for categorizing the task", max_length=20)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()

    @field_validator("dependencies", "tags")
    @classmethod
    def validate_lists(cls, v: list[str]) -> list[str]:
        return _clean_ids(v) or []


class UpdateTaskStatusInput(BaseModel):
    """Input model for changing a task's status."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to update (e.g. 'task-3')", min_length=1)
    status: TaskStatus = Field(..., description="New status: todo, in-progress, in-review or done")


class UpdateTaskInput(BaseModel):
    """Input model for editing task details."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to update", min_length=1)
    title: str | None = Field(default=None, description="New task title", min_length=1)
    description: str | None = Field(default=None, description="New task description")
    size: TaskSize | None = Field(default=None, description="New task size")
    priority: Priority | None = Field(default=None, description="New priority")
    tags: list[str] | None = Field(default=None, description="Replacement tag list")

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        return _clean_ids(v)


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: TaskStatus | None = Field(default=None, description="Filter by status")
    priority: Priority | None = Field(default=None, description="Filter by priority")
    size: TaskSize | None = Field(default=None, description="Filter by size")
    tag: str | None = Field(default=None, description="Filter by tag")
    format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' (grouped by status), 'simple' (one line per task) or 'json'",
    )


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to retrieve", min_length=1)
    format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to delete", min_length=1)


# ============================================================================
# Dependency Input Models
# ============================================================================


class CheckDependenciesInput(BaseModel):
    """Input model for checking a task's dependencies."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to check dependencies for", min_length=1)
    format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


class AvailableTasksInput(BaseModel):
    """Input model for listing tasks that can be started."""

    model_config = ConfigDict(str_strip_whitespace=True)

    format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )


# ============================================================================
# Maintenance Input Models
# ============================================================================


class ArchiveCompletedInput(BaseModel):
    """Input model for archiving old completed tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    days_old: int | None = Field(
        default=None,
        description="Archive completed tasks not updated for this many days (default 30; 0 archives every done task)",
        ge=0,
        le=3650,
    )


class CleanProjectInput(BaseModel):
    """Input model for project cleanup."""

    model_config = ConfigDict(str_strip_whitespace=True)
    # No parameters needed - cleanup always covers the whole project
