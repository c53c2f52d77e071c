"""Project document persistence (load / save / initialize)."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from taskito_mcp.config import Settings, load_settings
from taskito_mcp.errors import PrdUnreadableError, ProjectNotFoundError, StorageError
from taskito_mcp.models.task import Project, utc_now

logger = logging.getLogger(__name__)


class ProjectStore:
    """Reads and writes the single ``tasks.json`` project document.

    Writes go to a temporary file in the same directory which then replaces
    the document, so a reader never observes a partially written file.
    """

    def __init__(self, path: str | Path, clock: Callable[[], datetime] = utc_now):
        self.path = Path(path)
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ProjectStore:
        settings = settings or load_settings()
        return cls(settings.tasks_file)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Project:
        """
        Load the project document.

        Raises:
            ProjectNotFoundError: no document exists yet
            StorageError: the document cannot be read or is not a valid project
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ProjectNotFoundError(str(self.path)) from None
        except OSError as e:
            logger.error("Failed to read %s: %s", self.path, e)
            raise StorageError(f"Could not read project file {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            logger.error("Project document %s is not valid UTF-8: %s", self.path, e)
            raise StorageError(
                f"Project file {self.path} is corrupted: not valid UTF-8 text",
                tip="Fix the JSON by hand or re-run initialize_project.",
            ) from e

        try:
            project = Project.model_validate_json(raw)
        except ValidationError as e:
            logger.error("Invalid project document %s: %s", self.path, e)
            raise StorageError(
                f"Project file {self.path} is corrupted: {e.error_count()} validation error(s)",
                tip="Fix the JSON by hand or re-run initialize_project.",
            ) from e

        logger.debug("Loaded project %r (%d active tasks)", project.name, len(project.tasks))
        return project

    def save(self, project: Project) -> None:
        """Stamp ``updated`` and atomically persist the whole document."""
        project.updated = self.clock()
        document = project.to_document()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".tasks-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(document)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to write %s: %s", self.path, e)
            raise StorageError(f"Could not write project file {self.path}: {e}") from e

        logger.debug("Saved project %r to %s", project.name, self.path)

    def initialize(self, name: str, description: str) -> Project:
        """Create and persist a fresh project, replacing any existing document."""
        if self.exists():
            logger.warning("Overwriting existing project document at %s", self.path)

        now = self.clock()
        project = Project(
            name=name,
            description=description,
            created=now,
            updated=now,
            tasks=[],
            next_task_id=1,
            archived_tasks=[],
        )
        self.save(project)
        logger.info("Initialized project %r at %s", name, self.path)
        return project

    def size_bytes(self) -> int:
        try:
            return self.path.stat().st_size
        except OSError:
            return 0


def read_prd_file(prd_file: str | Path) -> str:
    """Read a PRD file used as a project description."""
    try:
        return Path(prd_file).expanduser().read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read PRD file %s: %s", prd_file, e)
        raise PrdUnreadableError(str(prd_file)) from e


def _get_store() -> ProjectStore:
    """Store for the project in the current working context."""
    return ProjectStore.from_settings()
