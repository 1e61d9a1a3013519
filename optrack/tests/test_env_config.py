"""Configuration merge order: defaults -> file -> env -> overrides."""
from __future__ import annotations

import json

import pytest

from optrack.base.dto import RejectionPolicy, TrackingSettings
from optrack.base.errors import ErrorCode, TrackingError
from optrack.config import DEFAULTS, get_tracking_settings, reset_config_cache


def test_defaults(clean_env):
    settings = get_tracking_settings()

    assert settings == TrackingSettings()  # nosec B101
    assert settings.ignore_superseded is False  # nosec B101
    assert settings.rejection_policy is RejectionPolicy.RETHROW  # nosec B101
    assert DEFAULTS["rejection_policy"] == "rethrow"  # nosec B101


def test_json_file_section(clean_env, monkeypatch, tmp_path):
    path = tmp_path / "optrack.json"
    path.write_text(json.dumps({"tracking": {"ignore_superseded": True, "log_events": False}}), encoding="utf-8")
    monkeypatch.setenv("OPTRACK_CONFIG_FILE", str(path))

    settings = get_tracking_settings()

    assert settings.ignore_superseded is True and settings.log_events is False  # nosec B101


def test_yaml_file_then_env_then_overrides(clean_env, monkeypatch, tmp_path):
    path = tmp_path / "optrack.yaml"
    path.write_text("tracking:\n  rejection_policy: absorb\n  ignore_superseded: true\n", encoding="utf-8")
    monkeypatch.setenv("OPTRACK_CONFIG_FILE", str(path))

    assert get_tracking_settings().rejection_policy is RejectionPolicy.ABSORB  # nosec B101

    monkeypatch.setenv("OPTRACK_REJECTION_POLICY", "Rethrow")
    monkeypatch.setenv("OPTRACK_IGNORE_SUPERSEDED", "0")
    settings = get_tracking_settings()
    assert settings.rejection_policy is RejectionPolicy.RETHROW  # nosec B101
    assert settings.ignore_superseded is False  # nosec B101

    overridden = get_tracking_settings({"ignore_superseded": True, "rejection_policy": None})
    assert overridden.ignore_superseded is True  # nosec B101
    assert overridden.rejection_policy is RejectionPolicy.RETHROW  # nosec B101


def test_file_is_cached_until_reset(clean_env, monkeypatch, tmp_path):
    path = tmp_path / "optrack.json"
    path.write_text('{"tracking": {"ignore_superseded": true}}', encoding="utf-8")
    monkeypatch.setenv("OPTRACK_CONFIG_FILE", str(path))
    assert get_tracking_settings().ignore_superseded is True  # nosec B101

    path.write_text('{"tracking": {"ignore_superseded": false}}', encoding="utf-8")
    assert get_tracking_settings().ignore_superseded is True  # nosec B101

    reset_config_cache()
    assert get_tracking_settings().ignore_superseded is False  # nosec B101


@pytest.mark.parametrize("content", ["tracking: [unclosed", "just a string", "[1, 2, 3]"])
def test_malformed_or_unexpected_files_are_ignored(clean_env, monkeypatch, tmp_path, content):
    path = tmp_path / "broken.yaml"
    path.write_text(content, encoding="utf-8")
    monkeypatch.setenv("OPTRACK_CONFIG_FILE", str(path))

    assert get_tracking_settings() == TrackingSettings()  # nosec B101


def test_missing_file_is_ignored(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("OPTRACK_CONFIG_FILE", str(tmp_path / "absent.json"))
    assert get_tracking_settings() == TrackingSettings()  # nosec B101


def test_blank_env_values_are_unset(clean_env, monkeypatch):
    monkeypatch.setenv("OPTRACK_REJECTION_POLICY", "   ")
    assert get_tracking_settings().rejection_policy is RejectionPolicy.RETHROW  # nosec B101


def test_invalid_values_raise_configuration_error(clean_env, monkeypatch):
    monkeypatch.setenv("OPTRACK_REJECTION_POLICY", "explode")

    with pytest.raises(TrackingError) as info:
        get_tracking_settings()

    assert info.value.code is ErrorCode.CONFIGURATION  # nosec B101
