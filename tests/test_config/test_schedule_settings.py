"""Testes de ScheduleSettings e BaseSettings carregadas de env."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from config.settings import ScheduleSettings, get_base_settings, get_schedule_settings


class TestScheduleSettingsDefaults:
    """Defaults publicados do serviço."""

    def test_defaults(self) -> None:
        settings = ScheduleSettings()

        assert settings.allowed_versions == ("f-39", "f-40", "f-41", "f-42", "f-43")
        assert settings.default_version == "f-41"
        assert settings.version_policy == "lenient"
        assert settings.target_summary == "Current Final Target date"
        assert settings.allowed_methods == ("GET", "OPTIONS")
        assert settings.config_errors() == []

    def test_build_upstream_url(self) -> None:
        url = ScheduleSettings().build_upstream_url("f-41")

        assert url == "https://fedorapeople.org/groups/schedule/f-41/f-41-key.ics"

    def test_upstream_origin_drops_path(self) -> None:
        settings = ScheduleSettings(upstream_base_url="https://mirror.example.org/base/")

        assert settings.upstream_origin == "https://mirror.example.org"
        assert settings.build_upstream_url("f-40").startswith(
            "https://mirror.example.org/base/groups/schedule/f-40/"
        )

    def test_is_immutable(self) -> None:
        settings = ScheduleSettings()

        with pytest.raises(ValidationError):
            settings.default_version = "f-40"  # type: ignore[misc]

    @pytest.mark.parametrize("timeout", [0, -1, 31])
    def test_timeout_bounds(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            ScheduleSettings(request_timeout_seconds=timeout)


class TestScheduleSettingsValidate:
    """Testes para ScheduleSettings.validate."""

    def test_default_outside_allow_list(self) -> None:
        errors = ScheduleSettings(default_version="f-50").config_errors()

        assert any("DEFAULT_VERSION" in error for error in errors)

    def test_template_without_placeholder(self) -> None:
        errors = ScheduleSettings(upstream_path_template="/static.ics").config_errors()

        assert any("{version}" in error for error in errors)

    def test_plain_http_upstream(self) -> None:
        errors = ScheduleSettings(upstream_base_url="http://fedorapeople.org").config_errors()

        assert any("https" in error for error in errors)

    def test_empty_allow_list(self) -> None:
        errors = ScheduleSettings(allowed_versions=()).config_errors()

        assert any("ALLOWED_VERSIONS" in error for error in errors)


class TestScheduleSettingsFromEnv:
    """Carregamento via variáveis de ambiente."""

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_VERSIONS", "f-42, f-43,,")
        monkeypatch.setenv("DEFAULT_VERSION", "f-43")
        monkeypatch.setenv("VERSION_POLICY", "STRICT")
        monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("UPSTREAM_REWRITE_ORIGIN", "false")
        monkeypatch.setenv("CACHE_MAX_AGE_SECONDS", "0")

        settings = get_schedule_settings()

        assert settings.allowed_versions == ("f-42", "f-43")
        assert settings.default_version == "f-43"
        assert settings.version_policy == "strict"
        assert settings.request_timeout_seconds == 2.5
        assert settings.rewrite_origin is False
        assert settings.cache_max_age_seconds == 0

    def test_unknown_policy_is_lenient(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERSION_POLICY", "whatever")

        assert get_schedule_settings().version_policy == "lenient"

    def test_getter_is_cached(self) -> None:
        assert get_schedule_settings() is get_schedule_settings()


class TestBaseSettings:
    """Testes para BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("stage", "staging"), ("local", "development")],
    )
    def test_environment_parsing(
        self,
        monkeypatch: pytest.MonkeyPatch,
        raw: str,
        expected: str,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert get_base_settings().environment == expected

    def test_invalid_log_level_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert any("LOG_LEVEL" in error for error in get_base_settings().validate())
