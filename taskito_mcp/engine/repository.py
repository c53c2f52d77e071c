"""In-memory view over a project's active tasks."""

from __future__ import annotations

from taskito_mcp.enums import TaskSize, TaskStatus
from taskito_mcp.errors import TaskNotFoundError
from taskito_mcp.models.results import ProjectOverview
from taskito_mcp.models.task import Project, Task, TaskFilter, format_task_id


class TaskRepository:
    """Lookup, filtering and insertion over ``project.tasks``.

    The repository does not copy: every mutation is applied to the wrapped
    project, which the caller then saves.
    """

    def __init__(self, project: Project):
        self.project = project

    @property
    def tasks(self) -> list[Task]:
        return self.project.tasks

    def __len__(self) -> int:
        return len(self.project.tasks)

    def __iter__(self):
        return iter(self.project.tasks)

    def find_by_id(self, task_id: str) -> Task | None:
        for task in self.project.tasks:
            if task.id == task_id:
                return task
        return None

    def get(self, task_id: str) -> Task:
        task = self.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def filter(self, criteria: TaskFilter | None = None) -> list[Task]:
        if criteria is None:
            return list(self.project.tasks)
        return [t for t in self.project.tasks if criteria.matches(t)]

    def insert(self, task: Task) -> None:
        self.project.tasks.append(task)

    def remove(self, task_id: str) -> Task:
        for index, task in enumerate(self.project.tasks):
            if task.id == task_id:
                return self.project.tasks.pop(index)
        raise TaskNotFoundError(task_id)

    def mint_id(self) -> str:
        """Issue the next task id and advance the project counter."""
        task_id = format_task_id(self.project.next_task_id)
        self.project.next_task_id += 1
        return task_id

    def overview(self) -> ProjectOverview:
        status_counts = {status.value: 0 for status in TaskStatus}
        size_counts = {size.value: 0 for size in TaskSize}
        for task in self.project.tasks:
            status_counts[task.status.value] += 1
            size_counts[task.size.value] += 1

        total = len(self.project.tasks)
        rate = round(status_counts[TaskStatus.DONE.value] / total * 100, 1) if total else 0.0

        return ProjectOverview(
            name=self.project.name,
            total_active=total,
            archived=len(self.project.archived_tasks),
            completion_rate=rate,
            status_counts=status_counts,
            size_counts=size_counts,
        )
