import logging

import pytest

from seo_analyzer import config


def test_timeout_defaults_to_none():
    assert config._timeout_from_env(None) is None
    assert config._timeout_from_env("") is None


def test_timeout_parses_seconds():
    assert config._timeout_from_env("7.5") == 7.5


@pytest.mark.parametrize("value", ["ten", "-3", "0"])
def test_unusable_timeout_is_logged(caplog, value):
    with caplog.at_level(logging.WARNING, logger="seo_analyzer.config"):
        assert config._timeout_from_env(value) is None

    assert config.TIMEOUT_ENV_VAR in caplog.text
    assert "will not time out" in caplog.text
