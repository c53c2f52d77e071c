"""Formatting utilities for tool output."""

from __future__ import annotations

from taskito_mcp.enums import Priority, TaskSize, TaskStatus
from taskito_mcp.errors import TaskitoError
from taskito_mcp.models.results import (
    CompactionReport,
    DeleteResult,
    DependencyRef,
    DependencyStatus,
    ProjectOverview,
    TransitionResult,
)
from taskito_mcp.models.task import Project, Task

STATUS_ICONS = {
    TaskStatus.TODO: "📋",
    TaskStatus.IN_PROGRESS: "🔄",
    TaskStatus.IN_REVIEW: "👀",
    TaskStatus.DONE: "✅",
}

SIZE_ICONS = {
    TaskSize.XS: "🟢",
    TaskSize.S: "🔵",
    TaskSize.M: "🟡",
    TaskSize.L: "🟠",
    TaskSize.XL: "🔴",
}

SIZE_TIMES = {
    TaskSize.XS: "< 1h",
    TaskSize.S: "1-4h",
    TaskSize.M: "4-8h",
    TaskSize.L: "1-2 days",
    TaskSize.XL: "2+ days",
}

PRIORITY_ICONS = {
    Priority.HIGH: "🔥",
    Priority.MEDIUM: "➡️",
    Priority.LOW: "❄️",
}


def _status_icon(status: TaskStatus | None) -> str:
    return STATUS_ICONS.get(status, "❓") if status is not None else "❓"


def _status_label(status: TaskStatus) -> str:
    """'in-progress' -> 'In progress'."""
    return status.value.replace("-", " ").capitalize()


def _code_ids(ids: list[str]) -> str:
    return ", ".join(f"`{i}`" for i in ids)


# ============================================================================
# Single task
# ============================================================================


def _format_task_simple(task: Task) -> str:
    """
    Format a task on one line.

    Output: "• task-3: Write docs [todo] (deps: task-1, task-2)"
    """
    deps = f" (deps: {', '.join(task.dependencies)})" if task.dependencies else ""
    return f"• {task.id}: {task.title} [{task.status.value}]{deps}"


def _format_task_entry(task: Task) -> str:
    """Format a task as a markdown list entry (used in grouped listings)."""
    tags = " " + "  ".join(f"`{tag}`" for tag in task.tags) if task.tags else ""
    deps = f"\n   *Dependencies: {', '.join(task.dependencies)}*" if task.dependencies else ""
    lines = [
        f"### {SIZE_ICONS[task.size]} `{task.id}` {task.title}",
        f"{PRIORITY_ICONS[task.priority]} **{task.priority.value}**{tags}{deps}",
        "",
        task.description,
        "",
        "---",
        "",
    ]
    return "\n".join(lines)


def _format_task_markdown(task: Task, deps: list[DependencyRef] | None = None) -> str:
    """Format the full details of a single task as markdown."""
    tags = "  ".join(f"`{tag}`" for tag in task.tags) if task.tags else "*None*"

    lines = [
        f"# {_status_icon(task.status)} Task Details",
        "",
        f"## `{task.id}` {task.title}",
        "",
        f"**Status:** {_status_icon(task.status)} {task.status.value}",
        f"**Size:** {SIZE_ICONS[task.size]} {task.size.value.upper()}",
        f"**Priority:** {PRIORITY_ICONS[task.priority]} {task.priority.value}",
        f"**Tags:** {tags}",
        "",
        "## Description",
        "",
        task.description or "*No description*",
        "",
        "## Dependencies",
        "",
    ]

    if not deps:
        lines.append("*None*")
    else:
        for ref in deps:
            lines.append(f"- `{ref.id}`: {ref.title or 'Task not found'} {_status_icon(ref.status)}")

    lines.extend(
        [
            "",
            "## Timeline",
            "",
            f"**Created:** {task.created.date().isoformat()}",
            f"**Updated:** {task.updated.date().isoformat()}",
        ]
    )
    return "\n".join(lines)


# ============================================================================
# Task lists
# ============================================================================


def _format_tasks_simple(tasks: list[Task]) -> str:
    """
    Format tasks one per line.

    Output:
    Found 2 task(s):

    • task-1: Setup [done]
    • task-2: Build [todo] (deps: task-1)
    """
    body = "\n".join(_format_task_simple(t) for t in tasks) or "No tasks match the criteria"
    return f"Found {len(tasks)} task(s):\n\n{body}"


def _format_tasks_markdown(tasks: list[Task], title: str = "Task List") -> str:
    """Format tasks as markdown grouped by status (todo first, done last)."""
    lines = [f"# 📋 {title}", ""]

    if not tasks:
        lines.append("*No tasks match the criteria*")
        return "\n".join(lines) + "\n"

    for status in TaskStatus:
        group = [t for t in tasks if t.status == status]
        if not group:
            continue
        lines.append(f"## {_status_icon(status)} {_status_label(status)} ({len(group)})")
        lines.append("")
        for task in group:
            lines.append(_format_task_entry(task))

    return "\n".join(lines)


def _format_available_markdown(tasks: list[Task]) -> str:
    """Format startable tasks grouped by priority."""
    lines = ["# 🚀 Available Tasks", ""]

    if not tasks:
        lines.append("*No tasks are currently available to start*")
        lines.append("")
        lines.append("Check if there are tasks waiting for dependencies to be completed.")
        return "\n".join(lines)

    lines.append(f"Found **{len(tasks)}** task(s) ready to start:")
    lines.append("")

    for priority in Priority:
        group = [t for t in tasks if t.priority == priority]
        if not group:
            continue
        lines.append(f"## {PRIORITY_ICONS[priority]} {priority.value.capitalize()} Priority")
        lines.append("")
        for task in group:
            tags = ", ".join(task.tags) or "None"
            lines.append(f"### {SIZE_ICONS[task.size]} `{task.id}` {task.title}")
            lines.append(f"**Size:** {task.size.value.upper()} • **Tags:** {tags}")
            lines.append("")
            lines.append(task.description)
            lines.append("")
            lines.append("---")
            lines.append("")

    return "\n".join(lines)


# ============================================================================
# Operation results
# ============================================================================


def _format_created(task: Task) -> str:
    lines = [
        "# ✨ Task Created",
        "",
        f"**ID:** `{task.id}`",
        f"**Title:** {task.title}",
        f"**Size:** {SIZE_ICONS[task.size]} {task.size.value.upper()}",
        f"**Priority:** {PRIORITY_ICONS[task.priority]} {task.priority.value}",
        f"**Status:** {_status_icon(task.status)} {task.status.value}",
    ]
    if task.dependencies:
        lines.append(f"**Dependencies:** {', '.join(task.dependencies)}")
    return "\n".join(lines)


def _format_updated(task: Task) -> str:
    return "\n".join(
        [
            "# ✏️ Task Updated",
            "",
            f"**ID:** `{task.id}`",
            f"**Title:** {task.title}",
            f"**Size:** {SIZE_ICONS[task.size]} {task.size.value.upper()}",
            f"**Priority:** {PRIORITY_ICONS[task.priority]} {task.priority.value}",
        ]
    )


def _format_transition(result: TransitionResult) -> str:
    if not result.accepted:
        return (
            f"# ⏳ Cannot Start Task\n\n"
            f"**Task:** `{result.task.id}`\n\n"
            f"**Blocked by:** {_code_ids(result.blocked_by)}\n\n"
            f"*Complete dependencies first before starting this task.*"
        )
    old, new = result.old_status, result.new_status
    return (
        f"# 🔄 Status Updated\n\n"
        f"**Task:** `{result.task.id}` - {result.task.title}\n\n"
        f"**Changed:** {_status_icon(old)} {old.value} → {_status_icon(new)} {new.value}"
    )


def _format_delete(result: DeleteResult) -> str:
    if not result.accepted:
        return (
            f"# ⚠️ Cannot Delete Task\n\n"
            f"**Task:** `{result.task.id}`\n\n"
            f"**Blocked by dependencies in:** {_code_ids(result.dependents)}\n\n"
            f"*Remove dependencies first or delete dependent tasks.*"
        )
    return f"# 🗑️ Task Deleted\n\n**Removed:** `{result.task.id}` - {result.task.title}"


def _format_dependency_check(status: DependencyStatus) -> str:
    task = status.task
    if not task.dependencies:
        return (
            f"# ✅ Dependencies Clear\n\n"
            f"**Task:** `{task.id}` - {task.title}\n\n"
            f"*No dependencies - ready to start anytime!*"
        )

    ready = status.can_start
    lines = [
        f"# {'✅' if ready else '⏳'} Dependency Check",
        "",
        f"**Task:** `{task.id}` - {task.title}",
        "",
        f"**Status:** {'Ready to start!' if ready else 'Waiting for dependencies'}",
        "",
    ]

    if status.completed:
        lines.append("## ✅ Completed Dependencies")
        lines.append("")
        for ref in status.completed:
            lines.append(f"- `{ref.id}`: {ref.title}")
        lines.append("")

    if status.pending:
        lines.append("## ⏳ Pending Dependencies")
        lines.append("")
        for ref in status.pending:
            state = ref.status.value if ref.status is not None else "unknown"
            lines.append(f"- `{ref.id}`: {ref.title or 'Task not found'} ({state})")

    return "\n".join(lines)


def _format_overview_markdown(overview: ProjectOverview, project: Project) -> str:
    sc = overview.status_counts
    lines = [
        f"# 🎯 {overview.name}",
        "",
        "## 📊 Overview",
        "",
        f"**Total Active Tasks:** {overview.total_active}",
        f"**Archived Tasks:** {overview.archived}",
        f"**Ready to Start:** {overview.available}",
        f"**Completion Rate:** {overview.completion_rate:.1f}%",
        "",
        "## 📋 Status Breakdown",
        "",
        "| Status | Count | Icon |",
        "|--------|-------|------|",
    ]
    for status in TaskStatus:
        lines.append(f"| {_status_label(status)} | {sc[status.value]} | {STATUS_ICONS[status]} |")

    lines.extend(
        [
            "",
            "## 📏 Size Distribution",
            "",
            "| Size | Count | Time | Icon |",
            "|------|-------|------|------|",
        ]
    )
    for size in TaskSize:
        lines.append(
            f"| {size.value.upper()} | {overview.size_counts[size.value]} | {SIZE_TIMES[size]} | {SIZE_ICONS[size]} |"
        )

    lines.append("")
    lines.append(f"**Last Updated:** {project.updated.strftime('%Y-%m-%d %H:%M:%S')} UTC")
    return "\n".join(lines)


def _format_archive(archived: list[Task], days_old: int, project: Project) -> str:
    if not archived:
        return f"# 📦 Archive Complete\n\n*No completed tasks older than {days_old} days found.*"
    return (
        f"# 📦 Tasks Archived\n\n"
        f"**Archived:** {len(archived)} completed tasks older than {days_old} days\n\n"
        f"**Active Tasks:** {len(project.tasks)}\n"
        f"**Archived Tasks:** {len(project.archived_tasks)}\n\n"
        f"*Archived tasks are still stored but don't appear in regular listings.*"
    )


def _format_clean(report: CompactionReport, size_bytes: int) -> str:
    lines = [
        "# 🧹 Project Cleaned",
        "",
        f"**Active Tasks:** {report.active_count}",
        f"**Archived Tasks:** {report.archived_count}",
        f"**File Size:** {size_bytes / 1024:.2f} KB",
        "",
    ]
    if report.removed_references:
        lines.append(f"✅ Removed {report.removed_count} invalid dependency reference(s):")
        for task_id, removed in report.removed_references.items():
            lines.append(f"   - `{task_id}`: {', '.join(removed)}")
    else:
        lines.append("✅ No invalid dependency references found")
    if report.next_task_id_repaired:
        lines.append("✅ Repaired task id counter")
    lines.append("✅ Optimized file structure")
    lines.append("✅ Updated timestamps")
    return "\n".join(lines)


def _format_error(error: TaskitoError) -> str:
    """Render a failure as the 'Error: ...' text returned by tools."""
    text = f"Error: {error}"
    if error.tip:
        text += f"\nTip: {error.tip}"
    return text
