"""Tests for Settings parsing and validation."""

import pytest
from pydantic import ValidationError

from tracklane.core.config import Settings
from tracklane.core.config.enums import Environment, FailureMode, PolicyKind


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_defaults(monkeypatch):
    for var in ("ENVIRONMENT", "LOG_LEVEL", "TRACKING_POLICY", "TRACKING_PROVIDERS"):
        monkeypatch.delenv(var, raising=False)

    settings = _settings()

    assert settings.ENVIRONMENT == Environment.LOCAL
    assert settings.TRACKING_POLICY == PolicyKind.SINGLE
    assert settings.TRACKING_FAILURE_MODE == FailureMode.BEST_EFFORT
    assert settings.tracking_providers == ["internal"]
    assert settings.logged_providers == set()


def test_provider_lists_parsed_from_csv():
    settings = _settings(
        TRACKING_POLICY="broadcast",
        TRACKING_PROVIDERS=" Google_Analytics, mixpanel ,,internal",
        TRACKING_LOGGED_PROVIDERS="mixpanel",
        TRACKING_BUFFERED_PROVIDERS="internal,mixpanel",
    )

    assert settings.tracking_providers == ["google_analytics", "mixpanel", "internal"]
    assert settings.logged_providers == {"mixpanel"}
    assert settings.buffered_providers == {"internal", "mixpanel"}


def test_env_vars_are_loaded(monkeypatch):
    monkeypatch.setenv("TRACKING_POLICY", "broadcast")
    monkeypatch.setenv("TRACKING_PROVIDERS", "mixpanel,internal")
    monkeypatch.setenv("TRACKING_FAILURE_MODE", "fail_fast")

    settings = _settings()

    assert settings.TRACKING_POLICY == PolicyKind.BROADCAST
    assert settings.TRACKING_FAILURE_MODE == FailureMode.FAIL_FAST
    assert settings.tracking_providers == ["mixpanel", "internal"]


def test_single_policy_requires_exactly_one_provider():
    with pytest.raises(ValidationError, match="exactly one provider"):
        _settings(TRACKING_POLICY="single", TRACKING_PROVIDERS="mixpanel,internal")


def test_provider_list_must_not_be_empty():
    with pytest.raises(ValidationError, match="at least one provider"):
        _settings(TRACKING_POLICY="broadcast", TRACKING_PROVIDERS=" , ")


def test_buffer_size_must_be_positive():
    with pytest.raises(ValidationError):
        _settings(TRACKING_BUFFER_SIZE=0)
