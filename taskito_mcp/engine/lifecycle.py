"""Task lifecycle: creation, status transitions, field edits and deletion.

Any status may move to any other status. The single gate is entry into
``in-progress``, which is refused while a dependency is missing or not done.
Refusals are returned as results, not raised.
"""

from __future__ import annotations

import logging
from datetime import datetime

from taskito_mcp.engine.dependencies import blocking_dependencies, dependents, validate_dependencies_exist
from taskito_mcp.engine.repository import TaskRepository
from taskito_mcp.enums import Priority, TaskSize, TaskStatus
from taskito_mcp.models.results import DeleteResult, TransitionResult
from taskito_mcp.models.task import Task, TaskUpdate, utc_now

logger = logging.getLogger(__name__)


def create_task(
    repo: TaskRepository,
    *,
    title: str,
    description: str,
    size: TaskSize = TaskSize.M,
    priority: Priority = Priority.MEDIUM,
    tags: list[str] | None = None,
    dependencies: list[str] | None = None,
    now: datetime | None = None,
) -> Task:
    """
    Create a ``todo`` task and append it to the project.

    Dependencies are validated before an id is minted, so a failed creation
    leaves both the task list and the id counter untouched.

    Raises:
        MissingDependencyError: a dependency id is not an active task
    """
    dependencies = list(dependencies or [])
    validate_dependencies_exist(dependencies, repo)

    now = now or utc_now()
    task = Task(
        id=repo.mint_id(),
        title=title,
        description=description,
        status=TaskStatus.TODO,
        dependencies=dependencies,
        created=now,
        updated=now,
        size=size,
        priority=priority,
        tags=list(tags or []),
    )
    repo.insert(task)
    logger.info("Created %s %r (deps: %s)", task.id, task.title, ", ".join(dependencies) or "none")
    return task


def transition(
    repo: TaskRepository,
    task_id: str,
    status: TaskStatus,
    now: datetime | None = None,
) -> TransitionResult:
    """
    Move a task to ``status``.

    Raises:
        TaskNotFoundError: ``task_id`` is not an active task
    """
    task = repo.get(task_id)
    old_status = task.status

    if status == TaskStatus.IN_PROGRESS:
        blockers = blocking_dependencies(task, repo)
        if blockers:
            logger.info("Refused to start %s: blocked by %s", task_id, ", ".join(blockers))
            return TransitionResult(
                task=task,
                old_status=old_status,
                new_status=status,
                accepted=False,
                blocked_by=blockers,
            )

    task.status = status
    task.updated = now or utc_now()
    logger.info("%s: %s -> %s", task_id, old_status.value, status.value)
    return TransitionResult(task=task, old_status=old_status, new_status=status)


def apply_update(
    repo: TaskRepository,
    task_id: str,
    update: TaskUpdate,
    now: datetime | None = None,
) -> Task:
    """
    Overwrite the provided fields of a task and refresh ``updated``.

    Raises:
        TaskNotFoundError: ``task_id`` is not an active task
    """
    task = repo.get(task_id)
    changes = update.model_dump(exclude_none=True)
    for field, value in changes.items():
        setattr(task, field, getattr(update, field))
    task.updated = now or utc_now()
    logger.info("Updated %s fields: %s", task_id, ", ".join(changes) or "none")
    return task


def delete_task(repo: TaskRepository, task_id: str) -> DeleteResult:
    """
    Remove a task unless other active tasks depend on it.

    Raises:
        TaskNotFoundError: ``task_id`` is not an active task
    """
    task = repo.get(task_id)
    blocking = [t.id for t in dependents(task_id, repo)]
    if blocking:
        logger.info("Refused to delete %s: depended on by %s", task_id, ", ".join(blocking))
        return DeleteResult(task=task, accepted=False, dependents=blocking)

    removed = repo.remove(task_id)
    logger.info("Deleted %s %r", removed.id, removed.title)
    return DeleteResult(task=removed)
