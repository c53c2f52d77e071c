"""Core task and project models for Taskito MCP."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskito_mcp.enums import Priority, TaskSize, TaskStatus

TASK_ID_PREFIX = "task-"
_TASK_ID_RE = re.compile(r"^task-(\d+)$")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_task_id(number: int) -> str:
    """Build a task identifier from its numeric suffix."""
    return f"{TASK_ID_PREFIX}{number}"


def parse_task_number(task_id: str) -> int | None:
    """Return the numeric suffix of a ``task-<N>`` id, or None for foreign ids."""
    match = _TASK_ID_RE.match(task_id)
    return int(match.group(1)) if match else None


class Task(BaseModel):
    """A unit of work tracked in a project.

    Field order here is the canonical field order of the persisted document.
    """

    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    dependencies: list[str] = Field(default_factory=list)
    created: datetime = Field(default_factory=utc_now)
    updated: datetime = Field(default_factory=utc_now)
    size: TaskSize = TaskSize.M
    priority: Priority = Priority.MEDIUM
    tags: list[str] = Field(default_factory=list)

    @field_validator("created", "updated")
    @classmethod
    def validate_timestamp(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @field_validator("priority", mode="before")
    @classmethod
    def default_missing_priority(cls, v: object) -> object:
        # Older documents store a null priority
        return Priority.MEDIUM if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def default_missing_tags(cls, v: object) -> object:
        return [] if v is None else v

    @property
    def number(self) -> int | None:
        return parse_task_number(self.id)


class Project(BaseModel):
    """The single project document: metadata, active tasks and the archive."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    created: datetime = Field(default_factory=utc_now)
    updated: datetime = Field(default_factory=utc_now)
    tasks: list[Task] = Field(default_factory=list)
    next_task_id: int = Field(default=1, alias="nextTaskId", ge=1)
    archived_tasks: list[Task] = Field(default_factory=list, alias="archivedTasks")

    @field_validator("created", "updated")
    @classmethod
    def validate_timestamp(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @field_validator("archived_tasks", mode="before")
    @classmethod
    def default_missing_archive(cls, v: object) -> object:
        return [] if v is None else v

    def highest_issued_number(self) -> int:
        """Highest numeric id suffix among active and archived tasks (0 if none)."""
        numbers = [t.number for t in [*self.tasks, *self.archived_tasks] if t.number is not None]
        return max(numbers, default=0)

    def to_document(self) -> str:
        """Serialize to the persisted JSON document."""
        return self.model_dump_json(by_alias=True, indent=2)


class TaskUpdate(BaseModel):
    """Partial update of a task's descriptive fields.

    A field left as None is not touched.
    """

    title: str | None = None
    description: str | None = None
    size: TaskSize | None = None
    priority: Priority | None = None
    tags: list[str] | None = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class TaskFilter(BaseModel):
    """Conjunctive filter over active tasks; an unset criterion matches everything."""

    status: TaskStatus | None = None
    priority: Priority | None = None
    size: TaskSize | None = None
    tag: str | None = None

    def matches(self, task: Task) -> bool:
        if self.status is not None and task.status != self.status:
            return False
        if self.priority is not None and task.priority != self.priority:
            return False
        if self.size is not None and task.size != self.size:
            return False
        if self.tag is not None and self.tag not in task.tags:
            return False
        return True

    def describe(self) -> str:
        """Short human-readable summary of the active criteria."""
        parts = [f"{k}:{v}" for k, v in self.model_dump(mode="json", exclude_none=True).items()]
        return " ".join(parts)
