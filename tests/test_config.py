"""
Tests for settings and build identity.

Tests cover:
- AppSettings defaults, env overrides and validation
- .env loading from the working directory
- BuildInfo derivation and release-build detection
- configure_logging() handler setup
"""

import io
import logging

import pytest
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings, get_user_config_dir, get_user_env_file
from core.domain.models import BuildInfo
from core.logging_config import configure_logging


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.http_timeout_seconds == 10.0
        assert settings.log_level == "WARNING"
        assert settings.build_tag is None
        assert settings.build_branch is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MODMAIL_VIEWER_HTTP_TIMEOUT_SECONDS", "3.5")
        monkeypatch.setenv("MODMAIL_VIEWER_BUILD_TAG", "1.4.0")
        settings = AppSettings()
        assert settings.http_timeout_seconds == 3.5
        assert settings.build_tag == "1.4.0"

    def test_env_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("modmail_viewer_build_branch", "develop")
        assert AppSettings().build_branch == "develop"

    def test_rejects_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("MODMAIL_VIEWER_HTTP_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("MODMAIL_VIEWER_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_dotenv_in_working_directory(self, isolated_env):
        (isolated_env / ".env").write_text(
            "MODMAIL_VIEWER_BUILD_TAG=2.1.0\nMODMAIL_VIEWER_LOG_LEVEL=debug\n",
            encoding="utf-8",
        )
        settings = AppSettings()
        assert settings.build_tag == "2.1.0"
        assert settings.log_level == "debug"

    def test_user_config_dir_honours_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_config_dir() == tmp_path / "modmail-viewer"
        assert get_user_env_file() == tmp_path / "modmail-viewer" / ".env"


class TestBuildInfo:
    """Tests for BuildInfo."""

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("MODMAIL_VIEWER_BUILD_TAG", "1.4.0")
        monkeypatch.setenv("MODMAIL_VIEWER_BUILD_BRANCH", "main")
        assert BuildInfo.from_settings(AppSettings()) == BuildInfo(tag="1.4.0", branch="main")

    @pytest.mark.parametrize("tag", ["1.0.0", "2.3.4-rc.1", "1.0.0+exp.sha1"])
    def test_semver_release(self, tag):
        assert BuildInfo(tag=tag).is_semver_release

    @pytest.mark.parametrize("tag", [None, "", "latest", "v1.0.0", "1.0", "1.0.0+001"])
    def test_not_a_release(self, tag):
        assert not BuildInfo(tag=tag).is_semver_release

    def test_development_branch(self):
        assert BuildInfo(branch="develop").is_development
        assert BuildInfo(branch="Develop").is_development
        assert not BuildInfo(branch="main").is_development
        assert not BuildInfo().is_development


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        httpx_level = logging.getLogger("httpx").level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("httpx").setLevel(httpx_level)

    def test_installs_rich_handler(self):
        stream = io.StringIO()
        configure_logging("info", console=Console(file=stream, width=200))

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in root.handlers)

        logging.getLogger("core.services.update_checker").warning("An update is available!")
        assert "An update is available!" in stream.getvalue()

    def test_httpx_request_logs_stay_quiet(self):
        configure_logging(logging.DEBUG, console=Console(file=io.StringIO()))
        assert logging.getLogger("httpx").level == logging.WARNING
