"""Shared pytest fixtures and test helpers for SaaS Starter tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from unittest.mock import Mock

import pytest
from PySide6.QtWidgets import QApplication

from saasapp.exc import RequestFailed
from saasapp.models.project import Project
from saasapp.services.api import ProjectsClient
from saasapp.services.dashboard import ProjectDashboard
from saasapp.services.tasks import Task


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for testing PySide6 widgets."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


class ImmediateRunner:
    """
    Task runner that runs each task and delivers its callbacks before
    ``submit`` returns.
    """

    def __init__(self):
        self.tasks: list[Task] = []

    def submit(self, func, on_success=None, on_error=None, on_finished=None):
        task = Task(func, on_success, on_error, on_finished)
        self.tasks.append(task)
        task.run()
        task.deliver()
        return task


class DeferredRunner(ImmediateRunner):
    """
    Task runner that holds every task until :meth:`complete` is called, so
    in-flight state can be inspected.
    """

    def submit(self, func, on_success=None, on_error=None, on_finished=None):
        task = Task(func, on_success, on_error, on_finished)
        self.tasks.append(task)
        return task

    def complete(self, index=0):
        task = self.tasks.pop(index)
        task.run()
        task.deliver()
        return task


@pytest.fixture
def runner():
    """Runner that completes tasks synchronously."""
    return ImmediateRunner()


@pytest.fixture
def deferred_runner():
    """Runner that completes tasks on demand."""
    return DeferredRunner()


@pytest.fixture
def client():
    """API client double; every call succeeds with empty results by default."""
    client = Mock(spec=ProjectsClient)
    client.base_url = "http://backend.test"
    client.list_projects.return_value = []
    client.delete_project.return_value = None
    return client


@pytest.fixture
def dashboard(qapp, client, runner):
    """Dashboard wired to the client double and the synchronous runner."""
    return ProjectDashboard(client, runner)


# Test helper functions (not fixtures, but available for import)


def make_project(project_id=1, name=None, description=None):
    """
    Helper to build a project with defaults.

    Args:
        project_id: Project ID
        name: Project name (if None, derived from the ID)
        description: Optional description

    Returns:
        Project instance
    """
    if name is None:
        name = f"Project {project_id}"
    return Project(id=project_id, name=name, description=description)


def request_failure(action="list projects"):
    """Helper returning the exception the API client raises on failure."""
    return RequestFailed(action, "connection refused")
