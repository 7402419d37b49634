"""View state for the projects dashboard."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from saasapp.models.project import Project, ProjectForm

if TYPE_CHECKING:
    from saasapp.services.api import ProjectsClient
    from saasapp.services.tasks import TaskRunner

logger = logging.getLogger(__name__)


class ProjectDashboard(QObject):
    """
    Local mirror of the backend's project list, plus the create form.

    The list is the server's list as of the last successful fetch, updated
    locally after a successful create (prepend) or delete (remove).  It is not
    reconciled with changes made elsewhere until the next refresh.

    All network calls go through ``runner``; state is only touched in the
    runner's callbacks, which arrive on the GUI thread.  Failures are logged
    and otherwise leave the state as it was.

    Args:
        client: API client
        runner: Task runner used for every request

    Keyword Args:
        parent: Parent QObject

    """

    #: Emitted whenever :attr:`projects` changes.
    projects_changed = Signal()
    #: Emitted with the new value of :attr:`loading`.
    loading_changed = Signal(bool)
    #: Emitted with the new value of :attr:`saving`.
    saving_changed = Signal(bool)
    #: Emitted after a successful create has cleared :attr:`form`.
    form_cleared = Signal()

    def __init__(
        self,
        client: ProjectsClient,
        runner: TaskRunner,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        #: API client
        self.client = client
        #: Task runner
        self.runner = runner
        #: Projects currently displayed, newest creations first
        self.projects: list[Project] = []
        #: Whether a list request is in flight
        self.loading = False
        #: Whether a create request is in flight
        self.saving = False
        #: Create form contents
        self.form = ProjectForm()

    def _set_loading(self, value: bool) -> None:
        self.loading = value
        self.loading_changed.emit(value)

    def _set_saving(self, value: bool) -> None:
        self.saving = value
        self.saving_changed.emit(value)

    def _log_failure(self, error: Exception) -> None:
        logger.error("Projects request failed: %s", error, exc_info=error)

    def set_client(self, client: ProjectsClient) -> None:
        """
        Switch to a different API client, e.g. after the backend URL changed.
        Requests already in flight still complete against the old client.

        Args:
            client: New API client

        """
        self.client = client

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """
        Fetch the project list and replace the local list with it.  On
        failure the current list is kept.
        """
        self._set_loading(True)
        self.runner.submit(
            self.client.list_projects,
            on_success=self._on_projects_loaded,
            on_error=self._log_failure,
            on_finished=lambda: self._set_loading(False),
        )

    def _on_projects_loaded(self, projects: list[Project]) -> None:
        logger.info("Loaded %d project(s)", len(projects))
        self.projects = list(projects)
        self.projects_changed.emit()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def submit(self) -> bool:
        """
        Submit the create form.

        Nothing is sent if the name is blank or a create request is already in
        flight.  The name and description are sent exactly as typed.  On
        success the returned project is put first in the list and the form is
        cleared; on failure the form is left as it was.

        Returns:
            ``True`` if a request was sent

        """
        if self.form.is_blank() or self.saving:
            return False
        client = self.client
        payload = self.form.payload()
        self._set_saving(True)
        self.runner.submit(
            lambda: client.create_project(payload["name"], payload["description"]),
            on_success=self._on_project_created,
            on_error=self._log_failure,
            on_finished=lambda: self._set_saving(False),
        )
        return True

    def _on_project_created(self, project: Project) -> None:
        logger.info("Created project %r", project.id)
        self.projects = [project, *self.projects]
        self.projects_changed.emit()
        self.form.clear()
        self.form_cleared.emit()

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self, project_id: int | str) -> None:
        """
        Delete a project.  On success every local entry with that ID is
        removed and the others keep their order; on failure nothing changes.

        Args:
            project_id: ID of the project to delete

        """
        client = self.client
        self.runner.submit(
            lambda: client.delete_project(project_id),
            on_success=lambda _: self._on_project_deleted(project_id),
            on_error=self._log_failure,
        )

    def _on_project_deleted(self, project_id: int | str) -> None:
        logger.info("Deleted project %r", project_id)
        self.projects = [p for p in self.projects if p.id != project_id]
        self.projects_changed.emit()
