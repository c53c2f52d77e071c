"""Tests for the document and input models."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from conftest import make_task
from taskito_mcp import (
    ArchiveCompletedInput,
    CreateTaskInput,
    ListTasksInput,
    Priority,
    Project,
    ResponseFormat,
    Task,
    TaskFilter,
    TaskSize,
    TaskStatus,
    TaskUpdate,
    UpdateTaskInput,
    UpdateTaskStatusInput,
)


class TestTaskModel:
    """Tests for the Task model."""

    def test_defaults(self):
        task = Task(id="task-1", title="Write docs")
        assert task.status == TaskStatus.TODO
        assert task.size == TaskSize.M
        assert task.priority == Priority.MEDIUM
        assert task.dependencies == []
        assert task.tags == []
        assert task.created.tzinfo is not None

    def test_number(self):
        assert make_task(42).number == 42
        assert Task(id="imported", title="x").number is None

    def test_naive_timestamp_is_utc(self):
        task = Task(id="task-1", title="x", updated=datetime(2025, 1, 1, 8, 0))
        assert task.updated == datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)

    def test_null_priority_and_tags_default(self):
        task = Task.model_validate({"id": "task-1", "title": "x", "priority": None, "tags": None})
        assert task.priority == Priority.MEDIUM
        assert task.tags == []

    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError):
            Task(id="task-1", title="x", status="blocked")


class TestProjectModel:
    """Tests for the Project model and its persisted form."""

    def test_document_uses_persisted_field_names(self, sample_project):
        data = json.loads(sample_project.to_document())
        assert list(data) == ["name", "description", "created", "updated", "tasks", "nextTaskId", "archivedTasks"]
        assert data["nextTaskId"] == 10
        assert list(data["tasks"][0]) == [
            "id",
            "title",
            "description",
            "status",
            "dependencies",
            "created",
            "updated",
            "size",
            "priority",
            "tags",
        ]
        assert data["tasks"][4]["status"] == "in-progress"

    def test_loads_legacy_document(self):
        raw = {
            "name": "Old",
            "description": "From an older version",
            "created": "2024-01-01T00:00:00.000Z",
            "updated": "2024-01-02T00:00:00.000Z",
            "tasks": [
                {
                    "id": "task-1",
                    "title": "Legacy",
                    "description": "",
                    "status": "done",
                    "dependencies": [],
                    "created": "2024-01-01T00:00:00.000Z",
                    "updated": "2024-01-01T00:00:00.000Z",
                    "size": "xl",
                }
            ],
            "nextTaskId": 2,
            "someOldField": True,
        }
        project = Project.model_validate(raw)
        assert project.archived_tasks == []
        assert project.tasks[0].priority == Priority.MEDIUM
        assert project.tasks[0].size == TaskSize.XL
        assert project.created == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert "someOldField" not in project.to_document()

    def test_populate_by_name(self):
        project = Project(name="p", next_task_id=5, archived_tasks=[make_task(1)])
        assert project.next_task_id == 5
        assert len(project.archived_tasks) == 1

    def test_highest_issued_number(self):
        project = Project(
            name="p",
            tasks=[make_task(3), Task(id="custom", title="x")],
            archived_tasks=[make_task(7)],
            next_task_id=8,
        )
        assert project.highest_issued_number() == 7
        assert Project(name="empty").highest_issued_number() == 0


class TestTaskFilter:
    """Tests for conjunctive task filtering."""

    def test_empty_filter_matches_everything(self):
        assert TaskFilter().matches(make_task(1))

    def test_all_criteria_must_match(self):
        task = make_task(1, status=TaskStatus.DONE, priority=Priority.HIGH, size=TaskSize.S, tags=["api"])
        assert TaskFilter(status=TaskStatus.DONE, priority=Priority.HIGH, size=TaskSize.S, tag="api").matches(task)
        assert not TaskFilter(status=TaskStatus.DONE, tag="ui").matches(task)
        assert not TaskFilter(priority=Priority.LOW).matches(task)

    def test_describe(self):
        criteria = TaskFilter(status=TaskStatus.IN_PROGRESS, tag="api")
        assert criteria.describe() == "status:in-progress tag:api"
        assert TaskFilter().describe() == ""


class TestTaskUpdate:
    def test_is_empty(self):
        assert TaskUpdate().is_empty()
        assert not TaskUpdate(size=TaskSize.L).is_empty()
        assert not TaskUpdate(tags=[]).is_empty()


class TestInputModels:
    """Tests for tool input models."""

    def test_create_task_defaults(self):
        params = CreateTaskInput(title="  Build API  ", description="REST")
        assert params.title == "Build API"
        assert params.size == TaskSize.M
        assert params.priority == Priority.MEDIUM
        assert params.dependencies == []
        assert params.tags == []

    def test_create_task_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            CreateTaskInput(title="   ", description="x")

    def test_create_task_cleans_lists(self):
        params = CreateTaskInput(title="t", description="d", dependencies=[" task-1 ", ""], tags=["a", "  "])
        assert params.dependencies == ["task-1"]
        assert params.tags == ["a"]

    def test_create_task_invalid_size(self):
        with pytest.raises(ValidationError):
            CreateTaskInput(title="t", description="d", size="xxl")

    def test_update_status_accepts_hyphenated_value(self):
        params = UpdateTaskStatusInput(task_id="task-1", status="in-review")
        assert params.status == TaskStatus.IN_REVIEW

    def test_update_task_all_optional(self):
        params = UpdateTaskInput(task_id="task-1")
        assert params.title is None
        assert params.tags is None

    def test_list_tasks_defaults(self):
        params = ListTasksInput()
        assert params.status is None
        assert params.format == ResponseFormat.MARKDOWN

    def test_list_tasks_simple_format(self):
        assert ListTasksInput(format="simple").format == ResponseFormat.SIMPLE

    def test_archive_days_bounds(self):
        assert ArchiveCompletedInput().days_old is None
        assert ArchiveCompletedInput(days_old=7).days_old == 7
        with pytest.raises(ValidationError):
            ArchiveCompletedInput(days_old=-1)
