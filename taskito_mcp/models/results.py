"""Outcome models returned by engine operations."""

from pydantic import BaseModel, Field

from taskito_mcp.enums import TaskStatus
from taskito_mcp.models.task import Task


class DependencyRef(BaseModel):
    """A dependency id resolved against the active tasks.

    ``title`` and ``status`` are None when the referenced task is missing
    (deleted or archived).
    """

    id: str
    title: str | None = None
    status: TaskStatus | None = None

    @property
    def missing(self) -> bool:
        return self.status is None

    @property
    def completed(self) -> bool:
        return self.status == TaskStatus.DONE


class DependencyStatus(BaseModel):
    """Completed and pending dependencies of one task."""

    task: Task
    completed: list[DependencyRef] = Field(default_factory=list)
    pending: list[DependencyRef] = Field(default_factory=list)

    @property
    def can_start(self) -> bool:
        return not self.pending


class TransitionResult(BaseModel):
    """Result of a status change; ``accepted`` is False for a gated refusal."""

    task: Task
    old_status: TaskStatus
    new_status: TaskStatus
    accepted: bool = True
    blocked_by: list[str] = Field(default_factory=list)


class DeleteResult(BaseModel):
    """Result of a deletion; ``accepted`` is False while dependents exist."""

    task: Task
    accepted: bool = True
    dependents: list[str] = Field(default_factory=list)


class CompactionReport(BaseModel):
    """What repair_and_compact changed."""

    removed_references: dict[str, list[str]] = Field(default_factory=dict)
    next_task_id_repaired: bool = False
    active_count: int = 0
    archived_count: int = 0

    @property
    def removed_count(self) -> int:
        return sum(len(ids) for ids in self.removed_references.values())


class ProjectOverview(BaseModel):
    """Aggregate counts over the active tasks of a project."""

    name: str
    total_active: int
    archived: int
    completion_rate: float
    status_counts: dict[str, int]
    size_counts: dict[str, int]
    available: int = 0
