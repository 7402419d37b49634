from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMenu

if TYPE_CHECKING:
    from saasapp.ui.main_window import MainWindow


class MainMenu:
    """Main application menu."""

    def __init__(self, main_window: MainWindow) -> None:
        """
        Initialize main menu.

        Args:
            main_window: Main window instance

        """
        #: Main window instance
        self.main_window = main_window
        #: Menu bar
        self.menu = self.main_window.menuBar()

    def add_menu(self, menu: str) -> QMenu:
        """
        Add a menu to the main menu bar.

        Args:
            menu: title of the menu

        Returns:
            The added menu instance

        """
        return self.menu.addMenu(menu)

    def build(self) -> None:
        """Build the main menu."""
        self.file_menu = FileMenu(self, self.main_window).file_menu


class FileMenu:
    """
    A "File" menu to be added to the main menu bar with the following actions:

    - Refresh
    - Preferences...
    - Quit

    On macOS Qt moves "Preferences..." and "Quit" into the application menu.

    Args:
        main_menu: Main menu instance
        main_window: Main window instance

    """

    def __init__(self, main_menu: MainMenu, main_window: MainWindow) -> None:
        """
        Initialize file menu.
        """
        #: Main window instance
        self.main_window = main_window
        #: Main menu instance
        self.main_menu = main_menu
        self.populate()

    def populate(self) -> None:
        """
        Add the "File" menu to the main menu bar and fill it in.
        """
        self.file_menu = self.main_menu.add_menu("&File")

        self.refresh_action = QAction("&Refresh", self.file_menu)
        self.refresh_action.setShortcuts(
            [QKeySequence(QKeySequence.StandardKey.Refresh), QKeySequence("Ctrl+R")]
        )
        self.refresh_action.triggered.connect(self.main_window.refresh)
        self.file_menu.addAction(self.refresh_action)

        self.file_menu.addSeparator()

        preferences_action = QAction("&Preferences...", self.file_menu)
        preferences_action.setShortcut(QKeySequence("Ctrl+,"))
        preferences_action.setMenuRole(QAction.MenuRole.PreferencesRole)
        preferences_action.triggered.connect(self.main_window.show_settings_dialog)
        self.file_menu.addAction(preferences_action)

        self.file_menu.addSeparator()

        quit_action = QAction("&Quit", self.file_menu)
        quit_action.setShortcut(QKeySequence(QKeySequence.StandardKey.Quit))
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.triggered.connect(self.main_window.close)
        self.file_menu.addAction(quit_action)
