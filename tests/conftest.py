"""Pytest configuration and fixtures for taskito-mcp tests."""

from datetime import datetime, timedelta, timezone

import pytest

from taskito_mcp.enums import Priority, TaskSize, TaskStatus
from taskito_mcp.models.task import Project, Task
from taskito_mcp.utils.storage import ProjectStore

FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_task(number: int, **overrides) -> Task:
    """Build a task-<number> with sensible defaults."""
    fields = {
        "id": f"task-{number}",
        "title": f"Task {number}",
        "description": f"Description {number}",
        "status": TaskStatus.TODO,
        "dependencies": [],
        "created": FIXED_NOW - timedelta(days=60),
        "updated": FIXED_NOW - timedelta(days=1),
        "size": TaskSize.M,
        "priority": Priority.MEDIUM,
        "tags": [],
    }
    fields.update(overrides)
    return Task(**fields)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run a test inside an empty working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TASKITO_ROOT", raising=False)
    monkeypatch.delenv("TASKITO_ARCHIVE_DAYS", raising=False)
    return tmp_path


@pytest.fixture
def store(tmp_path):
    """A project store with a frozen clock."""
    return ProjectStore(tmp_path / "taskito" / "tasks.json", clock=lambda: FIXED_NOW)


@pytest.fixture
def sample_project():
    """
    A small dependency graph:

    task-1 (done) <- task-2 (todo) <- task-4 (todo)
    task-3 (todo, high, no deps)
    task-5 (in-progress, depends on missing task-9)
    """
    return Project(
        name="Demo",
        description="Demo project",
        created=FIXED_NOW - timedelta(days=90),
        updated=FIXED_NOW - timedelta(days=1),
        tasks=[
            make_task(1, status=TaskStatus.DONE, tags=["setup"]),
            make_task(2, dependencies=["task-1"], tags=["backend"], size=TaskSize.S),
            make_task(3, priority=Priority.HIGH, tags=["backend", "api"], size=TaskSize.XS),
            make_task(4, dependencies=["task-2"], priority=Priority.LOW),
            make_task(5, status=TaskStatus.IN_PROGRESS, dependencies=["task-9"]),
        ],
        next_task_id=10,
        archived_tasks=[],
    )


@pytest.fixture
def saved_project(workdir, sample_project):
    """The sample project persisted in the working directory."""
    ProjectStore(workdir / "taskito" / "tasks.json").save(sample_project)
    return sample_project
