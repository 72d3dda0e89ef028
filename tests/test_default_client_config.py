"""
Unit tests for DefaultClientConfig and get_config.

This module tests:
- Defaults when no environment variables are set
- Values read from environment variables
- Validation of page size and timeout
- Overriding the config implementation
"""

from dataclasses import dataclass

import pytest

from ghvars.config.client_config import ClientConfig, get_config
from ghvars.config.default_client_config import DefaultClientConfig
from ghvars.constants import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GHVARS_ACCESS_TOKEN,
    GHVARS_API_ENDPOINT,
    GHVARS_AUTO_PAGINATE,
    GHVARS_CONFIG,
    GHVARS_PER_PAGE,
    GHVARS_TIMEOUT,
    GHVARS_USER_AGENT,
)

ALL_KEYS = [
    GHVARS_ACCESS_TOKEN,
    GHVARS_API_ENDPOINT,
    GHVARS_AUTO_PAGINATE,
    GHVARS_CONFIG,
    GHVARS_PER_PAGE,
    GHVARS_TIMEOUT,
    GHVARS_USER_AGENT,
]


@dataclass
class FixedConfig(DefaultClientConfig):
    """Config used to test overriding the implementation"""

    api_endpoint: str = "https://ghe.example.com/api/v3"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ALL_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestDefaultClientConfig:
    def test_defaults(self):
        config = DefaultClientConfig()

        assert isinstance(config, ClientConfig)
        assert config.get_api_endpoint() == DEFAULT_API_ENDPOINT
        assert config.get_access_token() is None
        assert config.get_per_page() is None
        assert config.get_auto_paginate() is False
        assert config.get_user_agent() == DEFAULT_USER_AGENT
        assert config.get_timeout() == DEFAULT_TIMEOUT

    def test_values_from_environment(self, monkeypatch):
        monkeypatch.setenv(GHVARS_API_ENDPOINT, "https://ghe.example.com/api/v3")
        monkeypatch.setenv(GHVARS_ACCESS_TOKEN, "abc123")
        monkeypatch.setenv(GHVARS_PER_PAGE, "50")
        monkeypatch.setenv(GHVARS_AUTO_PAGINATE, "true")
        monkeypatch.setenv(GHVARS_USER_AGENT, "tests/1.0")
        monkeypatch.setenv(GHVARS_TIMEOUT, "2.5")

        config = DefaultClientConfig()

        assert config.get_api_endpoint() == "https://ghe.example.com/api/v3"
        assert config.get_access_token() == "abc123"
        assert config.get_per_page() == 50
        assert config.get_auto_paginate() is True
        assert config.get_user_agent() == "tests/1.0"
        assert config.get_timeout() == 2.5

    def test_explicit_values_win_over_environment(self, monkeypatch):
        monkeypatch.setenv(GHVARS_AUTO_PAGINATE, "1")

        config = DefaultClientConfig(auto_paginate=False, per_page=10)

        assert config.get_auto_paginate() is False
        assert config.get_per_page() == 10

    @pytest.mark.parametrize("value", ["0", "101", "-1"])
    def test_per_page_out_of_range_raises(self, value, monkeypatch):
        monkeypatch.setenv(GHVARS_PER_PAGE, value)

        with pytest.raises(ValueError):
            DefaultClientConfig()

    def test_non_integer_per_page_raises(self, monkeypatch):
        monkeypatch.setenv(GHVARS_PER_PAGE, "many")

        with pytest.raises(ValueError):
            DefaultClientConfig()

    def test_invalid_boolean_raises(self, monkeypatch):
        monkeypatch.setenv(GHVARS_AUTO_PAGINATE, "sometimes")

        with pytest.raises(ValueError):
            DefaultClientConfig()

    def test_non_positive_timeout_raises(self):
        with pytest.raises(ValueError):
            DefaultClientConfig(timeout=0)


class TestGetConfig:
    def test_default_implementation(self):
        assert type(get_config()) is DefaultClientConfig

    def test_override_implementation(self, monkeypatch):
        monkeypatch.setenv(GHVARS_CONFIG, "tests.test_default_client_config.FixedConfig")

        config = get_config()

        assert isinstance(config, FixedConfig)
        assert config.get_api_endpoint() == "https://ghe.example.com/api/v3"

    def test_override_with_wrong_type_raises(self, monkeypatch):
        monkeypatch.setenv(GHVARS_CONFIG, "collections.OrderedDict")

        with pytest.raises(AssertionError):
            get_config()
