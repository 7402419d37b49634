from .settings import SettingsDialog

__all__ = [
    "SettingsDialog",
]
