"""HTTP client for the projects REST API."""

import logging
from typing import Any

import requests
from pydantic import ValidationError

from saasapp.exc import RequestFailed
from saasapp.models.project import Project

logger = logging.getLogger(__name__)


class ProjectsClient:
    """
    Thin client for the backend's ``/api/projects`` endpoints.

    Every failure (connection errors, non-success statuses, bodies that are not
    JSON or are not project records) is raised as
    :class:`~saasapp.exc.RequestFailed`.  No timeout is applied and nothing is
    retried.

    Args:
        base_url: Backend base URL, e.g. ``http://localhost:8000``

    Keyword Args:
        session: ``requests`` session to use (default: a new one)

    """

    def __init__(
        self, base_url: str, session: requests.Session | None = None
    ) -> None:
        #: Backend base URL, without a trailing slash.
        self.base_url = base_url.rstrip("/")
        #: HTTP session shared by all requests.
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def url(self, path: str = "") -> str:
        """
        Build the URL of a projects endpoint.

        Args:
            path: Path below ``/api/projects`` (e.g. the project ID)

        Returns:
            The full URL

        """
        url = f"{self.base_url}/api/projects"
        if path:
            url = f"{url}/{path}"
        return url

    def _send(
        self, action: str, method: str, url: str, **kwargs: Any
    ) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise RequestFailed(action, str(e), status_code=status) from e
        except requests.RequestException as e:
            raise RequestFailed(action, str(e)) from e
        return response

    @staticmethod
    def _json(action: str, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            msg = "response body is not valid JSON"
            raise RequestFailed(action, msg, status_code=response.status_code) from e

    def list_projects(self) -> list[Project]:
        """
        Fetch every project.

        Raises:
            RequestFailed: If the request fails or the response is malformed

        Returns:
            The projects, in the order the backend returned them

        """
        action = "list projects"
        response = self._send(action, "GET", self.url())
        data = self._json(action, response)
        try:
            return Project.list_from_api(data)
        except ValidationError as e:
            raise RequestFailed(action, str(e), status_code=response.status_code) from e

    def create_project(self, name: str, description: str) -> Project:
        """
        Create a project.  The values are sent exactly as given.

        Args:
            name: Project name
            description: Project description, possibly empty

        Raises:
            RequestFailed: If the request fails or the response is malformed

        Returns:
            The created project, carrying its server-assigned ID

        """
        action = "create project"
        response = self._send(
            action,
            "POST",
            self.url(),
            json={"name": name, "description": description},
        )
        data = self._json(action, response)
        try:
            return Project.from_api(data)
        except ValidationError as e:
            raise RequestFailed(action, str(e), status_code=response.status_code) from e

    def delete_project(self, project_id: int | str) -> None:
        """
        Delete a project.  The response body is ignored.

        Args:
            project_id: ID of the project to delete

        Raises:
            RequestFailed: If the request fails

        """
        self._send("delete project", "DELETE", self.url(str(project_id)))

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
