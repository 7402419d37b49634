"""Backend connection settings."""

from typing import Final, cast

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from PySide6.QtCore import QSettings

#: Backend used when nothing else is configured.
DEFAULT_BACKEND_URL: Final[str] = "http://localhost:8000"
#: QSettings key holding the backend URL chosen in the Preferences dialog.
BACKEND_URL_KEY: Final[str] = "api/backend_url"


class ApiSettings(BaseSettings):
    """
    Settings read from the environment, or from a ``.env`` file in the working
    directory.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BACKEND_URL: str = DEFAULT_BACKEND_URL

    @field_validator("BACKEND_URL", mode="before")
    @classmethod
    def strip_url(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return DEFAULT_BACKEND_URL
        return v


def saved_backend_url(settings: QSettings | None = None) -> str:
    """
    Return the backend URL saved in the Preferences dialog.

    Keyword Args:
        settings: QSettings instance to read from (default: a new one)

    Returns:
        The saved URL, or an empty string if none was saved

    """
    settings = settings if settings is not None else QSettings()
    value = cast("str | None", settings.value(BACKEND_URL_KEY, "", type=str))
    return (value or "").strip()


def resolve_backend_url(
    settings: QSettings | None = None, api_settings: ApiSettings | None = None
) -> str:
    """
    Work out which backend to talk to.  The saved preference wins, then the
    ``BACKEND_URL`` environment variable (or ``.env``), then
    :data:`DEFAULT_BACKEND_URL`.

    Keyword Args:
        settings: QSettings instance to read the preference from
        api_settings: Environment settings (default: loaded now)

    Returns:
        The backend base URL

    """
    saved = saved_backend_url(settings)
    if saved:
        return saved
    if api_settings is None:
        api_settings = ApiSettings()
    return api_settings.BACKEND_URL
