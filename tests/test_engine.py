"""Tests for the task dependency and lifecycle engine."""

from datetime import timedelta

import pytest

from conftest import FIXED_NOW, make_task
from taskito_mcp import (
    MissingDependencyError,
    Priority,
    Project,
    TaskFilter,
    TaskNotFoundError,
    TaskSize,
    TaskStatus,
    TaskUpdate,
)
from taskito_mcp.engine import (
    TaskRepository,
    apply_update,
    archive_completed,
    available_tasks,
    blocking_dependencies,
    can_start,
    create_task,
    delete_task,
    dependency_status,
    dependents,
    is_available,
    repair_and_compact,
    transition,
    validate_dependencies_exist,
)


@pytest.fixture
def repo(sample_project):
    return TaskRepository(sample_project)


# ============================================================================
# TaskRepository
# ============================================================================


class TestTaskRepository:
    def test_find_by_id(self, repo):
        assert repo.find_by_id("task-3").title == "Task 3"
        assert repo.find_by_id("task-99") is None

    def test_get_raises(self, repo):
        with pytest.raises(TaskNotFoundError) as exc_info:
            repo.get("task-99")
        assert exc_info.value.task_id == "task-99"

    def test_filter_preserves_insertion_order(self, repo):
        result = repo.filter(TaskFilter(status=TaskStatus.TODO))
        assert [t.id for t in result] == ["task-2", "task-3", "task-4"]

    def test_filter_by_tag(self, repo):
        assert [t.id for t in repo.filter(TaskFilter(tag="backend"))] == ["task-2", "task-3"]

    def test_filter_conjunctive(self, repo):
        criteria = TaskFilter(tag="backend", priority=Priority.HIGH, size=TaskSize.XS)
        assert [t.id for t in repo.filter(criteria)] == ["task-3"]

    def test_filter_none_returns_copy(self, repo):
        result = repo.filter()
        assert len(result) == 5
        result.pop()
        assert len(repo) == 5

    def test_remove(self, repo):
        removed = repo.remove("task-3")
        assert removed.id == "task-3"
        assert repo.find_by_id("task-3") is None
        with pytest.raises(TaskNotFoundError):
            repo.remove("task-3")

    def test_mint_id(self, repo):
        assert repo.mint_id() == "task-10"
        assert repo.mint_id() == "task-11"
        assert repo.project.next_task_id == 12

    def test_overview(self, repo):
        overview = repo.overview()
        assert overview.total_active == 5
        assert overview.archived == 0
        assert overview.status_counts == {"todo": 3, "in-progress": 1, "in-review": 0, "done": 1}
        assert overview.size_counts == {"xs": 1, "s": 1, "m": 3, "l": 0, "xl": 0}
        assert overview.completion_rate == 20.0

    def test_overview_empty_project(self):
        overview = TaskRepository(Project(name="empty")).overview()
        assert overview.total_active == 0
        assert overview.completion_rate == 0.0


# ============================================================================
# DependencyResolver
# ============================================================================


class TestDependencyResolver:
    def test_dependency_status_completed(self, repo):
        status = dependency_status(repo.get("task-2"), repo)
        assert [d.id for d in status.completed] == ["task-1"]
        assert status.pending == []
        assert status.can_start

    def test_dependency_status_pending(self, repo):
        status = dependency_status(repo.get("task-4"), repo)
        assert [d.id for d in status.pending] == ["task-2"]
        assert status.pending[0].status == TaskStatus.TODO
        assert not status.can_start

    def test_missing_dependency_is_pending(self, repo):
        status = dependency_status(repo.get("task-5"), repo)
        assert [d.id for d in status.pending] == ["task-9"]
        assert status.pending[0].missing
        assert status.pending[0].title is None
        assert not can_start(repo.get("task-5"), repo)

    def test_no_dependencies_can_start(self, repo):
        assert can_start(repo.get("task-3"), repo)
        assert blocking_dependencies(repo.get("task-3"), repo) == []

    def test_blocking_dependencies_order(self, repo):
        repo.insert(make_task(6, dependencies=["task-4", "task-1", "task-9"]))
        assert blocking_dependencies(repo.get("task-6"), repo) == ["task-4", "task-9"]

    def test_is_available(self, repo):
        assert is_available(repo.get("task-2"), repo)
        assert is_available(repo.get("task-3"), repo)
        # dependency not done
        assert not is_available(repo.get("task-4"), repo)
        # status is not todo
        assert not is_available(repo.get("task-1"), repo)
        assert not is_available(repo.get("task-5"), repo)

    def test_is_available_missing_dependency(self, repo):
        repo.insert(make_task(6, dependencies=["task-42"]))
        assert not is_available(repo.get("task-6"), repo)

    def test_archived_dependency_counts_as_missing(self, sample_project):
        done = sample_project.tasks.pop(0)
        sample_project.archived_tasks.append(done)
        repo = TaskRepository(sample_project)
        assert not is_available(repo.get("task-2"), repo)
        assert dependency_status(repo.get("task-2"), repo).pending[0].missing

    def test_available_tasks_grouped_by_priority(self, repo):
        repo.insert(make_task(6, priority=Priority.LOW))
        repo.insert(make_task(7, priority=Priority.HIGH))
        repo.insert(make_task(8))
        ids = [t.id for t in available_tasks(repo)]
        assert ids == ["task-3", "task-7", "task-2", "task-8", "task-6"]

    def test_dependents(self, repo):
        assert [t.id for t in dependents("task-1", repo)] == ["task-2"]
        assert dependents("task-4", repo) == []

    def test_validate_dependencies_exist(self, repo):
        validate_dependencies_exist(["task-1", "task-3"], repo)
        with pytest.raises(MissingDependencyError) as exc_info:
            validate_dependencies_exist(["task-1", "task-9", "task-77"], repo)
        assert exc_info.value.task_id == "task-9"


# ============================================================================
# LifecycleEngine
# ============================================================================


class TestCreateTask:
    def test_create(self, repo):
        task = create_task(repo, title="New", description="d", dependencies=["task-1"], now=FIXED_NOW)
        assert task.id == "task-10"
        assert task.status == TaskStatus.TODO
        assert task.created == task.updated == FIXED_NOW
        assert repo.tasks[-1] is task
        assert repo.project.next_task_id == 11

    def test_missing_dependency_leaves_project_unchanged(self, repo):
        before = repo.project.model_copy(deep=True)
        with pytest.raises(MissingDependencyError):
            create_task(repo, title="New", description="d", dependencies=["task-1", "task-404"])
        assert repo.project == before

    def test_ids_not_reused_after_delete(self):
        repo = TaskRepository(Project(name="p"))
        first = create_task(repo, title="a", description="")
        second = create_task(repo, title="b", description="")
        delete_task(repo, second.id)
        third = create_task(repo, title="c", description="")
        assert [first.id, second.id, third.id] == ["task-1", "task-2", "task-3"]
        assert repo.project.next_task_id > max(t.number for t in repo.tasks)

    def test_tags_and_options(self, repo):
        task = create_task(
            repo,
            title="Tagged",
            description="",
            size=TaskSize.XL,
            priority=Priority.LOW,
            tags=["ui", "design"],
        )
        assert task.size == TaskSize.XL
        assert task.priority == Priority.LOW
        assert task.tags == ["ui", "design"]


class TestTransition:
    def test_start_refused_while_dependency_pending(self, repo):
        task = repo.get("task-4")
        before = task.updated
        result = transition(repo, "task-4", TaskStatus.IN_PROGRESS, now=FIXED_NOW)
        assert not result.accepted
        assert result.blocked_by == ["task-2"]
        assert task.status == TaskStatus.TODO
        assert task.updated == before

    def test_start_refused_for_missing_dependency(self, repo):
        repo.get("task-5").status = TaskStatus.TODO
        result = transition(repo, "task-5", TaskStatus.IN_PROGRESS)
        assert not result.accepted
        assert result.blocked_by == ["task-9"]

    def test_start_allowed_when_dependencies_done(self, repo):
        result = transition(repo, "task-2", TaskStatus.IN_PROGRESS, now=FIXED_NOW)
        assert result.accepted
        assert result.old_status == TaskStatus.TODO
        assert repo.get("task-2").status == TaskStatus.IN_PROGRESS
        assert repo.get("task-2").updated == FIXED_NOW

    def test_start_without_dependencies(self, repo):
        assert transition(repo, "task-3", TaskStatus.IN_PROGRESS).accepted

    def test_other_transitions_ungated(self, repo):
        # straight to done despite a pending dependency
        assert transition(repo, "task-4", TaskStatus.DONE).accepted
        # and backwards
        result = transition(repo, "task-1", TaskStatus.TODO, now=FIXED_NOW)
        assert result.accepted
        assert result.old_status == TaskStatus.DONE
        assert repo.get("task-1").status == TaskStatus.TODO

    def test_dependency_cycle_blocks_both_tasks(self):
        repo = TaskRepository(
            Project(
                name="p",
                tasks=[make_task(1, dependencies=["task-2"]), make_task(2, dependencies=["task-1"])],
                next_task_id=3,
            )
        )
        first = transition(repo, "task-1", TaskStatus.IN_PROGRESS)
        second = transition(repo, "task-2", TaskStatus.IN_PROGRESS)
        assert not first.accepted
        assert first.blocked_by == ["task-2"]
        assert not second.accepted
        assert second.blocked_by == ["task-1"]
        assert available_tasks(repo) == []

    def test_self_dependency_never_starts(self, repo):
        repo.insert(make_task(6, dependencies=["task-6"]))
        result = transition(repo, "task-6", TaskStatus.IN_PROGRESS)
        assert not result.accepted
        assert result.blocked_by == ["task-6"]
        assert not is_available(repo.get("task-6"), repo)

    def test_unknown_task(self, repo):
        with pytest.raises(TaskNotFoundError):
            transition(repo, "task-99", TaskStatus.DONE)


class TestApplyUpdate:
    def test_only_provided_fields_change(self, repo):
        task = apply_update(repo, "task-3", TaskUpdate(size=TaskSize.L, tags=["infra"]), now=FIXED_NOW)
        assert task.size == TaskSize.L
        assert task.tags == ["infra"]
        assert task.title == "Task 3"
        assert task.priority == Priority.HIGH
        assert task.status == TaskStatus.TODO
        assert task.updated == FIXED_NOW

    def test_empty_update_refreshes_timestamp(self, repo):
        task = apply_update(repo, "task-1", TaskUpdate(), now=FIXED_NOW)
        assert task.updated == FIXED_NOW
        assert task.status == TaskStatus.DONE

    def test_unknown_task(self, repo):
        with pytest.raises(TaskNotFoundError):
            apply_update(repo, "task-99", TaskUpdate(title="x"))


class TestDeleteTask:
    def test_refused_with_dependents(self, repo):
        before = [t.id for t in repo.tasks]
        result = delete_task(repo, "task-2")
        assert not result.accepted
        assert result.dependents == ["task-4"]
        assert [t.id for t in repo.tasks] == before

    def test_delete_unreferenced(self, repo):
        result = delete_task(repo, "task-4")
        assert result.accepted
        assert result.task.id == "task-4"
        assert len(repo) == 4
        assert repo.find_by_id("task-4") is None

    def test_self_dependent_task_refused(self, repo):
        repo.insert(make_task(6, dependencies=["task-6"]))
        result = delete_task(repo, "task-6")
        assert not result.accepted
        assert result.dependents == ["task-6"]
        assert repo.find_by_id("task-6") is not None

    def test_unknown_task(self, repo):
        with pytest.raises(TaskNotFoundError):
            delete_task(repo, "task-99")


# ============================================================================
# ArchivalPolicy
# ============================================================================


class TestArchiveCompleted:
    def test_archives_old_done_tasks(self):
        project = Project(
            name="p",
            tasks=[
                make_task(1, status=TaskStatus.DONE, updated=FIXED_NOW - timedelta(days=31)),
                make_task(2, status=TaskStatus.DONE, updated=FIXED_NOW - timedelta(days=29)),
                make_task(3, status=TaskStatus.TODO, updated=FIXED_NOW - timedelta(days=90)),
                make_task(4, status=TaskStatus.DONE, updated=FIXED_NOW - timedelta(days=45)),
            ],
            archived_tasks=[make_task(0, status=TaskStatus.DONE)],
            next_task_id=5,
        )
        original = project.tasks[0].model_copy()

        archived = archive_completed(project, 30, now=FIXED_NOW)

        assert [t.id for t in archived] == ["task-1", "task-4"]
        assert [t.id for t in project.tasks] == ["task-2", "task-3"]
        assert [t.id for t in project.archived_tasks] == ["task-0", "task-1", "task-4"]
        assert project.archived_tasks[1] == original
        assert project.next_task_id == 5

    def test_nothing_to_archive(self, sample_project):
        before = sample_project.model_copy(deep=True)
        assert archive_completed(sample_project, 30, now=FIXED_NOW) == []
        assert sample_project == before

    def test_zero_days_archives_all_done(self, sample_project):
        archived = archive_completed(sample_project, 0, now=FIXED_NOW)
        assert [t.id for t in archived] == ["task-1"]


class TestRepairAndCompact:
    def test_removes_dangling_references(self, sample_project):
        sample_project.tasks[3].dependencies = ["task-2", "task-9", "task-2"]
        report = repair_and_compact(sample_project, now=FIXED_NOW)
        assert sample_project.tasks[3].dependencies == ["task-2"]
        assert sample_project.tasks[4].dependencies == []
        assert report.removed_references == {"task-4": ["task-9", "task-2"], "task-5": ["task-9"]}
        assert report.removed_count == 3
        assert sample_project.updated == FIXED_NOW

    def test_archived_dependency_is_dangling(self, sample_project):
        sample_project.archived_tasks.append(sample_project.tasks.pop(0))
        repair_and_compact(sample_project, now=FIXED_NOW)
        assert sample_project.tasks[0].dependencies == []

    def test_repairs_id_counter(self, sample_project):
        sample_project.next_task_id = 3
        sample_project.archived_tasks.append(make_task(12, status=TaskStatus.DONE))
        report = repair_and_compact(sample_project, now=FIXED_NOW)
        assert report.next_task_id_repaired
        assert sample_project.next_task_id == 13

    def test_keeps_self_reference_and_cycles(self, sample_project):
        sample_project.tasks[2].dependencies = ["task-3"]
        sample_project.tasks[0].dependencies = ["task-2"]
        report = repair_and_compact(sample_project, now=FIXED_NOW)
        assert sample_project.tasks[2].dependencies == ["task-3"]
        assert sample_project.tasks[0].dependencies == ["task-2"]
        assert sample_project.tasks[1].dependencies == ["task-1"]
        assert "task-1" not in report.removed_references
        assert "task-3" not in report.removed_references

    def test_idempotent_byte_identical(self, store, sample_project):
        sample_project.tasks[1].dependencies.append("task-404")
        sample_project.next_task_id = 2

        repair_and_compact(sample_project, now=FIXED_NOW)
        store.save(sample_project)
        first = store.path.read_bytes()

        project = store.load()
        report = repair_and_compact(project, now=FIXED_NOW)
        store.save(project)
        second = store.path.read_bytes()

        assert first == second
        assert report.removed_references == {}
        assert not report.next_task_id_repaired
