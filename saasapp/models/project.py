"""Project model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter


class Project(BaseModel):
    """
    Represents a project as returned by the backend.

    The client never owns a project: it only mirrors records that were
    created and are destroyed server-side.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    #: The server-assigned project ID.  Opaque; only compared for equality.
    id: int | str
    #: The project name.
    name: str
    #: The optional project description.
    description: str | None = None

    @property
    def has_description(self) -> bool:
        """
        Whether the project has a description worth displaying.
        """
        return bool(self.description)

    @classmethod
    def from_api(cls, data: Any) -> Project:
        """
        Build a project from a decoded JSON object.

        Args:
            data: Decoded JSON object

        Raises:
            pydantic.ValidationError: If the object is not a valid project

        Returns:
            The new :class:`~saasapp.models.project.Project` object

        """
        return cls.model_validate(data)

    @classmethod
    def list_from_api(cls, data: Any) -> list[Project]:
        """
        Build a list of projects from a decoded JSON array.

        Args:
            data: Decoded JSON array

        Raises:
            pydantic.ValidationError: If the array or any item in it is invalid

        Returns:
            List of :class:`~saasapp.models.project.Project` objects, in the
            order the backend returned them

        """
        return _PROJECT_LIST.validate_python(data)


_PROJECT_LIST: TypeAdapter[list[Project]] = TypeAdapter(list[Project])


class ProjectForm(BaseModel):
    """
    Contents of the "Create project" form.
    """

    #: The name as typed by the user.
    name: str = ""
    #: The description as typed by the user.
    description: str = ""

    def is_blank(self) -> bool:
        """
        Whether the name is empty or whitespace-only.  Blank forms are never
        submitted.
        """
        return not self.name.strip()

    def payload(self) -> dict[str, str]:
        """
        Return the JSON body for a create request.  Values are sent exactly as
        typed.
        """
        return {"name": self.name, "description": self.description}

    def clear(self) -> None:
        """
        Reset both fields to empty strings.
        """
        self.name = ""
        self.description = ""
