"""Services package initialization."""

from saasapp.services.api import ProjectsClient
from saasapp.services.dashboard import ProjectDashboard
from saasapp.services.tasks import Task, TaskRunner

__all__ = [
    "ProjectDashboard",
    "ProjectsClient",
    "Task",
    "TaskRunner",
]
