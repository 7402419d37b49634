"""Create project form widget."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

if TYPE_CHECKING:
    from saasapp.services.dashboard import ProjectDashboard


class CreateProjectForm(QFrame):
    """
    "Create project" card: a name field, an optional description field and an
    "Add project" button.

    The fields write straight through to the dashboard's form state.  The
    button is disabled and reads "Adding..." while a create request is in
    flight.

    Args:
        dashboard: Dashboard state to bind to
        parent: Parent widget

    """

    #: Button label when idle
    ADD_LABEL: Final[str] = "Add project"
    #: Button label while a create request is in flight
    BUSY_LABEL: Final[str] = "Adding..."

    #: Emitted when the user submits a blank name.
    rejected = Signal()

    def __init__(self, dashboard: ProjectDashboard, parent: QWidget | None = None):
        super().__init__(parent)
        self.dashboard = dashboard
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)

        title = QLabel("Create project")
        title.setFont(QFont("Arial", 14, QFont.Weight.Medium))
        title.setStyleSheet("color: #1e293b;")
        layout.addWidget(title)

        row = QHBoxLayout()
        self.name_edit = QLineEdit(self)
        self.name_edit.setPlaceholderText("Project name")
        row.addWidget(self.name_edit, stretch=1)

        self.description_edit = QLineEdit(self)
        self.description_edit.setPlaceholderText("Description (optional)")
        row.addWidget(self.description_edit, stretch=1)

        self.add_button = QPushButton(self.ADD_LABEL, self)
        self.add_button.setDefault(True)
        row.addWidget(self.add_button)
        layout.addLayout(row)

    def _connect_signals(self) -> None:
        self.name_edit.textChanged.connect(self._on_name_changed)
        self.description_edit.textChanged.connect(self._on_description_changed)
        self.name_edit.returnPressed.connect(self.submit)
        self.description_edit.returnPressed.connect(self.submit)
        self.add_button.clicked.connect(self.submit)
        self.dashboard.saving_changed.connect(self.set_busy)
        self.dashboard.form_cleared.connect(self._on_form_cleared)

    def _on_name_changed(self, text: str) -> None:
        self.dashboard.form.name = text

    def _on_description_changed(self, text: str) -> None:
        self.dashboard.form.description = text

    def _on_form_cleared(self) -> None:
        self.name_edit.clear()
        self.description_edit.clear()

    def set_busy(self, busy: bool) -> None:
        """
        Show or hide the busy state of the "Add project" button.

        Args:
            busy: Whether a create request is in flight

        """
        self.add_button.setEnabled(not busy)
        self.add_button.setText(self.BUSY_LABEL if busy else self.ADD_LABEL)

    def submit(self) -> None:
        """
        Submit the form.  A blank name sends nothing and emits :attr:`rejected`.
        """
        if self.dashboard.form.is_blank():
            self.rejected.emit()
            return
        self.dashboard.submit()
