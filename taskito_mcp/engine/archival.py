"""Archival of old completed tasks and repair of the project document."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from taskito_mcp.enums import TaskStatus
from taskito_mcp.models.results import CompactionReport
from taskito_mcp.models.task import Project, Task, utc_now

logger = logging.getLogger(__name__)


def select_archivable(project: Project, threshold_days: int, now: datetime | None = None) -> list[Task]:
    """Done tasks whose last update is older than ``threshold_days``."""
    cutoff = (now or utc_now()) - timedelta(days=threshold_days)
    return [t for t in project.tasks if t.status == TaskStatus.DONE and t.updated < cutoff]


def archive_completed(project: Project, threshold_days: int, now: datetime | None = None) -> list[Task]:
    """
    Move old completed tasks from the active list to the end of the archive.

    Task records are moved unmodified and keep their relative order. Returns
    the archived tasks; an empty list means nothing changed.
    """
    to_archive = select_archivable(project, threshold_days, now)
    if not to_archive:
        return []

    archived_ids = {t.id for t in to_archive}
    project.archived_tasks.extend(to_archive)
    project.tasks = [t for t in project.tasks if t.id not in archived_ids]
    logger.info(
        "Archived %d task(s) older than %d day(s): %s",
        len(to_archive),
        threshold_days,
        ", ".join(sorted(archived_ids)),
    )
    return to_archive


def repair_and_compact(project: Project, now: datetime | None = None) -> CompactionReport:
    """
    Restore referential integrity of the document.

    - drops dependency ids that do not name an active task
    - drops repeated dependency ids, keeping the first occurrence
    - raises ``next_task_id`` above every issued id if a hand edit broke it

    Running it twice gives the same document as running it once.
    """
    report = CompactionReport()
    active_ids = {t.id for t in project.tasks}

    for task in project.tasks:
        kept: list[str] = []
        removed: list[str] = []
        for dep_id in task.dependencies:
            if dep_id in active_ids and dep_id not in kept:
                kept.append(dep_id)
            else:
                removed.append(dep_id)
        if removed:
            task.dependencies = kept
            report.removed_references[task.id] = removed

    floor = project.highest_issued_number() + 1
    if project.next_task_id < floor:
        logger.warning("nextTaskId %d reused issued ids; raising to %d", project.next_task_id, floor)
        project.next_task_id = floor
        report.next_task_id_repaired = True

    project.updated = now or utc_now()
    report.active_count = len(project.tasks)
    report.archived_count = len(project.archived_tasks)

    if report.removed_references:
        logger.info("Removed %d invalid dependency reference(s)", report.removed_count)
    return report
