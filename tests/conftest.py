"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from polyline_codec.core.settings import settings


@pytest.fixture
def precision_settings(monkeypatch: pytest.MonkeyPatch):
    """Override codec settings for one test without touching the environment."""

    def apply(default_precision: int | None = None, max_precision: int | None = None):
        if default_precision is not None:
            monkeypatch.setattr(settings, "default_precision", default_precision)
        if max_precision is not None:
            monkeypatch.setattr(settings, "max_precision", max_precision)
        return settings

    return apply
