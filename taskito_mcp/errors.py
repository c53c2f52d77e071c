"""Exceptions raised by the Taskito engine and project store."""


class TaskitoError(Exception):
    """Base class for all failures reported back to the caller."""

    tip: str | None = None

    def __init__(self, message: str, tip: str | None = None):
        super().__init__(message)
        if tip is not None:
            self.tip = tip


class ProjectNotFoundError(TaskitoError):
    """No project document exists yet."""

    tip = "Use initialize_project to create a project first."

    def __init__(self, path: str | None = None):
        message = "Project not found. Please initialize a project first using initialize_project."
        super().__init__(message)
        self.path = path


class TaskNotFoundError(TaskitoError):
    """The referenced task id is not among the active tasks."""

    tip = "Use list_tasks to find valid task IDs. Archived tasks cannot be modified."

    def __init__(self, task_id: str):
        super().__init__(f'Task "{task_id}" not found')
        self.task_id = task_id


class MissingDependencyError(TaskitoError):
    """A new task references a dependency that does not exist."""

    tip = "Dependencies must reference existing active tasks."

    def __init__(self, task_id: str):
        super().__init__(f'Dependency task "{task_id}" not found')
        self.task_id = task_id


class PrdUnreadableError(TaskitoError):
    """The PRD file given to initialize_project could not be read."""

    def __init__(self, prd_file: str):
        super().__init__(f"Could not read PRD file: {prd_file}")
        self.prd_file = prd_file


class StorageError(TaskitoError):
    """The project document could not be read or written."""
