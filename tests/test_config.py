"""Unit tests for backend connection settings."""

import os
from unittest.mock import Mock, patch

import pytest

from saasapp.config import (
    BACKEND_URL_KEY,
    DEFAULT_BACKEND_URL,
    ApiSettings,
    resolve_backend_url,
    saved_backend_url,
)


def make_qsettings(saved=""):
    """QSettings double returning ``saved`` for the backend URL key."""
    settings = Mock()
    settings.value.return_value = saved
    return settings


class TestApiSettings:
    """Test cases for ApiSettings."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_backend_url(self):
        """Test the local development backend is the default."""
        settings = ApiSettings(_env_file=None)
        assert settings.BACKEND_URL == DEFAULT_BACKEND_URL == "http://localhost:8000"

    @patch.dict(os.environ, {"BACKEND_URL": "https://api.example.com"}, clear=True)
    def test_backend_url_from_env(self):
        """Test BACKEND_URL is read from the environment."""
        settings = ApiSettings(_env_file=None)
        assert settings.BACKEND_URL == "https://api.example.com"

    @patch.dict(os.environ, {"BACKEND_URL": "  https://api.example.com \n"}, clear=True)
    def test_backend_url_is_stripped(self):
        """Test whitespace around the URL is removed."""
        settings = ApiSettings(_env_file=None)
        assert settings.BACKEND_URL == "https://api.example.com"

    @patch.dict(os.environ, {"BACKEND_URL": "   "}, clear=True)
    def test_blank_backend_url_falls_back_to_default(self):
        """Test a blank variable means the default."""
        settings = ApiSettings(_env_file=None)
        assert settings.BACKEND_URL == DEFAULT_BACKEND_URL

    @patch.dict(os.environ, {}, clear=True)
    def test_backend_url_from_env_file(self, tmp_path):
        """Test BACKEND_URL is read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("BACKEND_URL=http://from-dotenv:9000\n")
        settings = ApiSettings(_env_file=env_file)
        assert settings.BACKEND_URL == "http://from-dotenv:9000"


class TestSavedBackendUrl:
    """Test cases for saved_backend_url()."""

    def test_reads_preference(self):
        """Test the saved preference is returned stripped."""
        settings = make_qsettings(" http://saved:1 ")
        assert saved_backend_url(settings) == "http://saved:1"
        settings.value.assert_called_once_with(BACKEND_URL_KEY, "", type=str)

    @pytest.mark.parametrize("saved", ["", None])
    def test_nothing_saved(self, saved):
        """Test an unset preference gives an empty string."""
        assert saved_backend_url(make_qsettings(saved)) == ""


class TestResolveBackendUrl:
    """Test cases for resolve_backend_url()."""

    def test_preference_wins(self):
        """Test the saved preference overrides the environment."""
        api_settings = ApiSettings(_env_file=None, BACKEND_URL="http://env:1")
        url = resolve_backend_url(make_qsettings("http://saved:2"), api_settings)
        assert url == "http://saved:2"

    def test_environment_when_no_preference(self):
        """Test the environment is used when nothing is saved."""
        api_settings = ApiSettings(_env_file=None, BACKEND_URL="http://env:1")
        assert resolve_backend_url(make_qsettings(""), api_settings) == "http://env:1"

    @patch.dict(os.environ, {}, clear=True)
    def test_default_when_nothing_configured(self, tmp_path, monkeypatch):
        """Test the default is used when nothing is configured."""
        monkeypatch.chdir(tmp_path)
        assert resolve_backend_url(make_qsettings("")) == DEFAULT_BACKEND_URL
