import sys

from PySide6.QtCore import QCoreApplication, QTimer
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from saasapp import __version__

from .main_window import MainWindow


def create_application() -> tuple[QApplication, MainWindow]:
    """
    Create the application and its main window.  The first project list
    request is issued once the event loop starts.
    """
    QCoreApplication.setOrganizationName("SaaS Starter")
    QCoreApplication.setApplicationName("SaaS Starter")

    app = QApplication(sys.argv)
    app.setApplicationVersion(__version__)
    QGuiApplication.setApplicationDisplayName("SaaS Starter")

    window = MainWindow()
    window.show()

    # Load the project list after the window is displayed
    QTimer.singleShot(0, window.refresh)
    return app, window
