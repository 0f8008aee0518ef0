from __future__ import annotations

import pytest

from review_api import main
from review_api.core.config import ConfigurationError, check_settings, settings


def test_missing_jwt_secret_is_fatal(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", "")

    with pytest.raises(ConfigurationError):
        check_settings(settings)
    with pytest.raises(ConfigurationError):
        main.create_app()


@pytest.mark.parametrize("field, value", [("ACCESS_TOKEN_EXPIRES_HOURS", 0), ("BCRYPT_ROUNDS", 3)])
def test_out_of_range_settings_are_fatal(monkeypatch, field, value):
    monkeypatch.setattr(settings, field, value)
    with pytest.raises(ConfigurationError):
        check_settings(settings)


def test_test_settings_are_valid():
    check_settings(settings)
