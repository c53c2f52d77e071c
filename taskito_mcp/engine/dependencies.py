"""Dependency resolution: readiness, availability and dependents.

Dependencies are resolved one hop deep against the active tasks only. A
reference to a deleted or archived task is reported as missing and never
counts as satisfied.
"""

from __future__ import annotations

from collections.abc import Iterable

from taskito_mcp.engine.repository import TaskRepository
from taskito_mcp.enums import Priority, TaskStatus
from taskito_mcp.errors import MissingDependencyError
from taskito_mcp.models.results import DependencyRef, DependencyStatus
from taskito_mcp.models.task import Task

PRIORITY_ORDER = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)


def resolve_dependency(dep_id: str, repo: TaskRepository) -> DependencyRef:
    dep_task = repo.find_by_id(dep_id)
    if dep_task is None:
        return DependencyRef(id=dep_id)
    return DependencyRef(id=dep_id, title=dep_task.title, status=dep_task.status)


def dependency_status(task: Task, repo: TaskRepository) -> DependencyStatus:
    """Split a task's dependencies into completed and pending."""
    result = DependencyStatus(task=task)
    for dep_id in task.dependencies:
        ref = resolve_dependency(dep_id, repo)
        if ref.completed:
            result.completed.append(ref)
        else:
            result.pending.append(ref)
    return result


def blocking_dependencies(task: Task, repo: TaskRepository) -> list[str]:
    """Ids of dependencies that are missing or not done, in dependency order."""
    return [ref.id for ref in dependency_status(task, repo).pending]


def can_start(task: Task, repo: TaskRepository) -> bool:
    return dependency_status(task, repo).can_start


def is_available(task: Task, repo: TaskRepository) -> bool:
    """True for a todo task whose every dependency is an active done task."""
    if task.status != TaskStatus.TODO:
        return False
    return can_start(task, repo)


def available_tasks(repo: TaskRepository) -> list[Task]:
    """Startable tasks, high priority first, insertion order within a priority."""
    ready = [t for t in repo if is_available(t, repo)]
    return [t for priority in PRIORITY_ORDER for t in ready if t.priority == priority]


def dependents(task_id: str, repo: TaskRepository) -> list[Task]:
    """Active tasks that list ``task_id`` as a dependency."""
    return [t for t in repo if task_id in t.dependencies]


def validate_dependencies_exist(dep_ids: Iterable[str], repo: TaskRepository) -> None:
    """
    Check every id refers to an active task.

    Raises:
        MissingDependencyError: for the first id that does not resolve
    """
    for dep_id in dep_ids:
        if repo.find_by_id(dep_id) is None:
            raise MissingDependencyError(dep_id)
