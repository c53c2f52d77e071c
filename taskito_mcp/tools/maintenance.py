"""Maintenance tools: archiving completed work and repairing the project file."""

from mcp.types import ToolAnnotations

from taskito_mcp.config import load_settings
from taskito_mcp.engine.archival import archive_completed, repair_and_compact
from taskito_mcp.errors import TaskitoError
from taskito_mcp.models.inputs import ArchiveCompletedInput, CleanProjectInput
from taskito_mcp.server import mcp
from taskito_mcp.utils.formatters import _format_archive, _format_clean, _format_error
from taskito_mcp.utils.storage import ProjectStore, _get_store


@mcp.tool(
    name="archive_completed_tasks",
    annotations=ToolAnnotations(
        title="Archive Completed Tasks",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def archive_completed_tasks(params: ArchiveCompletedInput) -> str:
    """
    Move completed tasks not updated for `days_old` days into the archive.

    Archived tasks stay in the project file but no longer appear in listings
    or dependency checks. Tasks that depended on an archived task will see
    that dependency as missing.

    `days_old=0` is not the same as omitting it: it archives every "done"
    task regardless of age. Omit `days_old` to use the default of 30 days
    (or TASKITO_ARCHIVE_DAYS when set).

    Args:
        params: ArchiveCompletedInput with days_old (default 30)

    Returns:
        How many tasks were archived and the new active/archived counts
    """
    settings = load_settings()
    days_old = params.days_old if params.days_old is not None else settings.archive_days
    try:
        store = ProjectStore.from_settings(settings)
        project = store.load()
        archived = archive_completed(project, days_old, now=store.clock())
        if archived:
            store.save(project)
    except TaskitoError as e:
        return _format_error(e)

    return _format_archive(archived, days_old, project)


@mcp.tool(
    name="clean_project",
    annotations=ToolAnnotations(
        title="Clean Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def clean_project(params: CleanProjectInput) -> str:
    """
    Repair and compact the project file.

    Removes dependency references to tasks that no longer exist, drops
    duplicate references, repairs the task ID counter if needed and rewrites
    the file in canonical form.

    Args:
        params: CleanProjectInput (no options)

    Returns:
        A report of what was repaired and the resulting file size
    """
    try:
        store = _get_store()
        project = store.load()
        report = repair_and_compact(project, now=store.clock())
        store.save(project)
    except TaskitoError as e:
        return _format_error(e)

    return _format_clean(report, store.size_bytes())
