"""Enums for Taskito MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    MARKDOWN = "markdown"  # Human-readable (default)
    SIMPLE = "simple"  # One line per task
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Task lifecycle states."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    IN_REVIEW = "in-review"
    DONE = "done"


class TaskSize(str, Enum):
    """Estimated effort class for a task."""

    XS = "xs"  # < 1h
    S = "s"  # 1-4h
    M = "m"  # 4-8h
    L = "l"  # 1-2 days
    XL = "xl"  # 2+ days


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
