"""Project list widgets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

if TYPE_CHECKING:
    from saasapp.models.project import Project
    from saasapp.services.dashboard import ProjectDashboard


class ProjectRow(QWidget):
    """
    One entry of the project list: name, description (when there is one) and a
    "Delete" button.

    Args:
        project: Project to display
        parent: Parent widget

    """

    #: Emitted with the project ID when "Delete" is clicked.
    delete_requested = Signal(object)

    def __init__(self, project: Project, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.project = project
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 8)

        text_layout = QVBoxLayout()
        self.name_label = QLabel(self.project.name)
        self.name_label.setFont(QFont("Arial", 12, QFont.Weight.Medium))
        self.name_label.setStyleSheet("color: #1e293b;")
        self.name_label.setWordWrap(True)
        text_layout.addWidget(self.name_label)

        self.description_label: QLabel | None = None
        if self.project.has_description:
            self.description_label = QLabel(self.project.description)
            self.description_label.setStyleSheet("color: #475569;")
            self.description_label.setWordWrap(True)
            text_layout.addWidget(self.description_label)
        layout.addLayout(text_layout, stretch=1)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setFlat(True)
        self.delete_button.setStyleSheet("color: #dc2626;")
        self.delete_button.clicked.connect(
            lambda: self.delete_requested.emit(self.project.id)
        )
        layout.addWidget(self.delete_button, alignment=Qt.AlignmentFlag.AlignTop)


class ProjectListView(QFrame):
    """
    "Projects" card.  Shows a loading indicator while the list is being
    fetched, an empty-state message when there are no projects, and one
    :class:`ProjectRow` per project otherwise.

    Args:
        dashboard: Dashboard state to render
        parent: Parent widget

    """

    #: Shown while a list request is in flight
    LOADING_TEXT: Final[str] = "Loading..."
    #: Shown when there are no projects
    EMPTY_TEXT: Final[str] = "No projects yet. Create your first project above."

    def __init__(self, dashboard: ProjectDashboard, parent: QWidget | None = None):
        super().__init__(parent)
        self.dashboard = dashboard
        #: Rows currently displayed, in list order
        self.rows: list[ProjectRow] = []
        self._setup_ui()
        self.dashboard.projects_changed.connect(self.render)
        self.dashboard.loading_changed.connect(self.render)
        self.render()

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)

        header = QHBoxLayout()
        title = QLabel("Projects")
        title.setFont(QFont("Arial", 14, QFont.Weight.Medium))
        title.setStyleSheet("color: #1e293b;")
        header.addWidget(title)
        header.addStretch()
        self.refresh_button = QPushButton("Refresh")
        self.refresh_button.setFlat(True)
        self.refresh_button.clicked.connect(self.dashboard.refresh)
        header.addWidget(self.refresh_button)
        layout.addLayout(header)

        self.status_label = QLabel()
        self.status_label.setStyleSheet("color: #64748b;")
        layout.addWidget(self.status_label)

        self.rows_widget = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_widget)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        layout.addWidget(self.rows_widget)

    def _clear_rows(self) -> None:
        """Remove every row widget."""
        while self.rows_layout.count():
            item = self.rows_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.rows = []

    def render(self, *_args) -> None:
        """
        Rebuild the card from the dashboard's current state.
        """
        self._clear_rows()
        if self.dashboard.loading:
            self.status_label.setText(self.LOADING_TEXT)
            self.status_label.setVisible(True)
            self.rows_widget.setVisible(False)
            return
        if not self.dashboard.projects:
            self.status_label.setText(self.EMPTY_TEXT)
            self.status_label.setVisible(True)
            self.rows_widget.setVisible(False)
            return

        self.status_label.setVisible(False)
        self.rows_widget.setVisible(True)
        for index, project in enumerate(self.dashboard.projects):
            if index:
                divider = QFrame()
                divider.setFrameShape(QFrame.Shape.HLine)
                divider.setStyleSheet("color: #e2e8f0;")
                self.rows_layout.addWidget(divider)
            row = ProjectRow(project)
            row.delete_requested.connect(self.dashboard.delete)
            self.rows.append(row)
            self.rows_layout.addWidget(row)
