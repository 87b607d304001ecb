"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from strokesense.config import Settings
from strokesense.errors import InvalidConfigError


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RECOGNIZER_EPSILON", "7.5")
    monkeypatch.setenv("RECOGNIZER_AREA_STRIDE", "3")
    cfg = Settings().recognizer_config()
    assert cfg.epsilon == 7.5
    assert cfg.area_stride == 3
    assert cfg.perimeter_stride == 1


def test_request_overrides_ignore_none():
    cfg = Settings().recognizer_config(epsilon=None, area_stride=4)
    assert cfg.epsilon == 15.0
    assert cfg.area_stride == 4


def test_invalid_settings_surface_config_error():
    with pytest.raises(InvalidConfigError):
        Settings(recognizer_max_points=1).recognizer_config()
