"""Main application window."""

import logging
from typing import Final

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from saasapp.config import resolve_backend_url
from saasapp.services.api import ProjectsClient
from saasapp.services.dashboard import ProjectDashboard
from saasapp.services.tasks import TaskRunner
from saasapp.ui.create_form import CreateProjectForm
from saasapp.ui.dialogs import SettingsDialog
from saasapp.ui.menus import MainMenu
from saasapp.ui.project_list import ProjectListView

logger = logging.getLogger(__name__)

#: Style sheet shared by the two cards
CARD_STYLE: Final[str] = (
    "QFrame#card { background-color: white; border: 1px solid #e2e8f0;"
    " border-radius: 12px; }"
)


class MainWindow(QMainWindow):
    """
    Main application window: a header, the "Create project" card, the
    "Projects" card and a footer.

    Keyword Args:
        client: API client (default: one for the configured backend URL)
        runner: Task runner (default: a new :class:`TaskRunner`)

    """

    #: Main window geometry
    MAIN_WINDOW_GEOMETRY: Final[tuple[int, int, int, int]] = (100, 100, 900, 700)

    def __init__(
        self,
        client: ProjectsClient | None = None,
        runner: TaskRunner | None = None,
    ) -> None:
        super().__init__()
        if client is None:
            client = ProjectsClient(resolve_backend_url())
        #: Task runner for network calls
        self.runner = runner if runner is not None else TaskRunner(self)
        #: Dashboard state
        self.dashboard = ProjectDashboard(client, self.runner, self)

        # Build the main window
        self.build()

    @property
    def backend_url(self) -> str:
        """Base URL of the backend currently in use."""
        return self.dashboard.client.base_url

    def _setup_main_window(self) -> None:
        """
        Set up the main window.
        """
        self.setWindowTitle("SaaS Starter")
        app = QApplication.instance()
        if isinstance(app, QApplication) and not app.windowIcon().isNull():
            self.setWindowIcon(app.windowIcon())
        self.setGeometry(*self.MAIN_WINDOW_GEOMETRY)

        central_widget = QWidget()
        central_widget.setStyleSheet(CARD_STYLE)
        central_layout = QVBoxLayout(central_widget)
        central_layout.setContentsMargins(0, 0, 0, 0)
        central_layout.setSpacing(0)
        central_layout.addWidget(self._build_header())

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.scroll_area = scroll_area
        content_widget = QWidget()
        self.content_layout = QVBoxLayout(content_widget)
        self.content_layout.setContentsMargins(24, 24, 24, 24)
        self.content_layout.setSpacing(24)
        self.content_layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.create_form = CreateProjectForm(self.dashboard)
        self.create_form.rejected.connect(
            lambda: self.show_message("Please enter a project name.")
        )
        self.content_layout.addWidget(self.create_form)

        self.project_list = ProjectListView(self.dashboard)
        self.content_layout.addWidget(self.project_list)

        footer = QLabel("Built with FastAPI + PySide6")
        footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        footer.setStyleSheet("color: #64748b; padding: 12px;")
        self.content_layout.addWidget(footer)

        scroll_area.setWidget(content_widget)
        central_layout.addWidget(scroll_area, stretch=1)

        self.setCentralWidget(central_widget)
        self.show_message("Ready")

    def _build_header(self) -> QWidget:
        """
        Build the header bar with the application name and subtitle.
        """
        header = QWidget()
        header.setStyleSheet(
            "background-color: rgba(255, 255, 255, 0.6);"
            " border-bottom: 1px solid #e2e8f0;"
        )
        layout = QHBoxLayout(header)
        layout.setContentsMargins(24, 16, 24, 16)
        title = QLabel("SaaS Starter")
        title.setFont(QFont("Arial", 18, QFont.Weight.DemiBold))
        title.setStyleSheet("color: #1e293b; border: none;")
        layout.addWidget(title)
        layout.addStretch()
        subtitle = QLabel("Simple projects dashboard")
        subtitle.setStyleSheet("color: #64748b; border: none;")
        layout.addWidget(subtitle)
        return header

    def _setup_main_menu(self) -> None:
        """Set up the main menu."""
        self.main_menu = MainMenu(self)
        self.main_menu.build()

    def build(self) -> None:
        """
        Build the main window.

        - Setup the main window.
        - Setup the main menu.

        """
        self._setup_main_window()
        self._setup_main_menu()

    def refresh(self) -> None:
        """
        Reload the project list from the backend.
        """
        self.dashboard.refresh()

    def reconnect(self) -> None:
        """
        Point the dashboard at the currently configured backend URL and reload
        the project list.
        """
        url = resolve_backend_url()
        if url.rstrip("/") != self.backend_url:
            logger.info("Switching backend to %s", url)
            self.dashboard.set_client(ProjectsClient(url))
            self.show_message(f"Using backend {url}", duration=3000)
        self.refresh()

    def show_settings_dialog(self) -> None:
        """
        Show the Preferences dialog.
        """
        SettingsDialog(self).execute()

    def show_message(self, message: str, duration: int = 2000) -> None:
        """
        Show a message in the status bar.

        Args:
            message: Message to show

        Keyword Args:
            duration: Duration of the message in milliseconds (default: 2000)

        """
        self.statusBar().showMessage(message, duration)
