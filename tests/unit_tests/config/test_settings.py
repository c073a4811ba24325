"""
Settings tests: environment detection, logging options and derived flags.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jbits.config import ConsoleStream, EnvironmentSettings, LoggingSettings, OSFacility, Settings


class TestEnvironmentSettings:
    def test_defaults_to_development(self) -> None:
        env = EnvironmentSettings()
        assert env.env == "development"
        assert env.debug

    def test_production_is_not_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JB_ENV", "production")
        env = EnvironmentSettings()
        assert env.is_production
        assert not env.debug

    def test_unknown_environment_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JB_ENV", "qa")
        with pytest.raises(ValidationError):
            EnvironmentSettings()


class TestLoggingSettings:
    def test_defaults(self) -> None:
        log = LoggingSettings()
        assert log.debug_console is None
        assert log.console_stream is ConsoleStream.STDOUT
        assert log.subsystem == "jbits"
        assert log.os_facility is OSFacility.SYSLOG
        assert log.syslog_address is None
        assert log.reveal_private is False
        assert not log.activity_disabled

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JB_LOG_DEBUG_CONSOLE", "false")
        monkeypatch.setenv("JB_LOG_CONSOLE_STREAM", "stderr")
        monkeypatch.setenv("JB_LOG_SUBSYSTEM", "com.example.app")
        monkeypatch.setenv("JB_LOG_OS_FACILITY", "none")
        log = LoggingSettings()
        assert log.debug_console is False
        assert log.console_stream is ConsoleStream.STDERR
        assert log.subsystem == "com.example.app"
        assert log.os_facility is OSFacility.NONE

    def test_os_activity_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OS_ACTIVITY_MODE", "disable")
        assert LoggingSettings().activity_disabled

    def test_prefixed_activity_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JB_LOG_ACTIVITY_MODE", "Disable")
        assert LoggingSettings().activity_disabled

    def test_other_activity_modes_keep_output(self) -> None:
        assert not LoggingSettings(activity_mode="default").activity_disabled

    def test_frozen(self) -> None:
        log = LoggingSettings()
        with pytest.raises(ValidationError):
            log.subsystem = "other"

    def test_invalid_facility(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JB_LOG_OS_FACILITY", "journald")
        with pytest.raises(ValidationError):
            LoggingSettings()


class TestDerivedFlags:
    def test_debug_console_follows_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert Settings().debug_console_enabled == __debug__
        monkeypatch.setenv("JB_ENV", "production")
        assert not Settings().debug_console_enabled

    def test_explicit_debug_console_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JB_ENV", "production")
        monkeypatch.setenv("JB_LOG_DEBUG_CONSOLE", "true")
        assert Settings().debug_console_enabled

    def test_reveal_private_requires_opt_in(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert Settings().environment.debug
        assert not Settings().logging.reveal_private
        monkeypatch.setenv("JB_LOG_REVEAL_PRIVATE", "true")
        assert Settings().logging.reveal_private


class TestEnvFiles:
    def test_environment_file_feeds_logging_settings(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env.production").write_text("JB_LOG_SUBSYSTEM=from-prod-file\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("JB_ENV", "production")
        assert Settings().logging.subsystem == "from-prod-file"

    def test_later_files_override_earlier(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("JB_ENV=staging\nJB_LOG_SUBSYSTEM=base\nJB_LOG_OS_FACILITY=none\n")
        (tmp_path / ".env.staging").write_text("JB_LOG_SUBSYSTEM=staging\n")
        (tmp_path / ".env.staging.local").write_text("JB_LOG_SUBSYSTEM=staging-local\n")
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.environment.env == "staging"
        assert settings.logging.subsystem == "staging-local"
        assert settings.logging.os_facility is OSFacility.NONE

    def test_other_environments_files_are_ignored(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env.production").write_text("JB_LOG_SUBSYSTEM=from-prod-file\n")
        monkeypatch.chdir(tmp_path)
        assert Settings().logging.subsystem == "jbits"

    def test_process_environment_wins(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env.development").write_text("JB_LOG_SUBSYSTEM=from-file\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("JB_LOG_SUBSYSTEM", "from-env")
        assert Settings().logging.subsystem == "from-env"
