from __future__ import annotations

from typing import TYPE_CHECKING, Final

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QLineEdit,
    QVBoxLayout,
)

from saasapp.config import BACKEND_URL_KEY, saved_backend_url

if TYPE_CHECKING:
    from saasapp.ui.main_window import MainWindow


class SettingsDialog:
    """
    Settings dialog for the backend connection.
    """

    #: Dialog width
    DIALOG_WIDTH: Final[int] = 450
    #: Dialog height
    DIALOG_HEIGHT: Final[int] = 150

    def __init__(self, main_window: MainWindow) -> None:
        """
        Initialize settings dialog.
        """
        self.main_window = main_window
        self.settings = QSettings()

    def build(self) -> None:
        """
        Build the settings dialog.
        """
        self.dialog = QDialog(self.main_window)
        self.dialog.setWindowTitle("Preferences")
        self.dialog.setMinimumSize(self.DIALOG_WIDTH, self.DIALOG_HEIGHT)
        self.layout = QVBoxLayout(self.dialog)

        # Backend URL
        url_label = QLabel("Backend URL (leave empty to use BACKEND_URL):")
        self.url_edit = QLineEdit(self.dialog)
        self.url_edit.setPlaceholderText(self.main_window.backend_url)
        self.url_edit.setText(saved_backend_url(self.settings))
        self.layout.addWidget(url_label)
        self.layout.addWidget(self.url_edit)

        # Button box
        self.button_box = QDialogButtonBox(self.dialog)
        self.button_box.addButton(QDialogButtonBox.StandardButton.Ok)
        self.button_box.addButton(QDialogButtonBox.StandardButton.Cancel)
        self.button_box.accepted.connect(self.save_settings)
        self.button_box.rejected.connect(self.dialog.reject)
        self.layout.addWidget(self.button_box)

    def save_settings(self) -> None:
        """Save settings to QSettings and reconnect the main window."""
        self.settings.setValue(BACKEND_URL_KEY, self.url_edit.text().strip())
        self.dialog.accept()
        self.main_window.reconnect()

    def execute(self) -> None:
        """
        Execute the settings dialog.
        """
        self.build()
        self.dialog.exec()
