"""Data models for SaaS Starter."""

from saasapp.models.project import Project, ProjectForm

__all__ = ["Project", "ProjectForm"]
