import os
from dataclasses import dataclass, field

from ghvars.config.client_config import ClientConfig
from ghvars.constants import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GHVARS_ACCESS_TOKEN,
    GHVARS_API_ENDPOINT,
    GHVARS_AUTO_PAGINATE,
    GHVARS_PER_PAGE,
    GHVARS_TIMEOUT,
    GHVARS_USER_AGENT,
)
from ghvars.util import check_per_page, parse_bool


def _per_page_from_env() -> int | None:
    value = os.getenv(GHVARS_PER_PAGE)
    if not value:
        return None
    return int(value)


def _timeout_from_env() -> float:
    value = os.getenv(GHVARS_TIMEOUT)
    if not value:
        return DEFAULT_TIMEOUT
    return float(value)


@dataclass
class DefaultClientConfig(ClientConfig):
    """Configuration object for a ghvars client. Unspecified fields are read from the environment"""

    api_endpoint: str = field(
        default_factory=lambda: os.getenv(GHVARS_API_ENDPOINT) or DEFAULT_API_ENDPOINT
    )
    access_token: str | None = field(
        default_factory=lambda: os.getenv(GHVARS_ACCESS_TOKEN) or None
    )
    per_page: int | None = field(default_factory=_per_page_from_env)
    auto_paginate: bool = field(
        default_factory=lambda: parse_bool(os.getenv(GHVARS_AUTO_PAGINATE))
    )
    user_agent: str = field(
        default_factory=lambda: os.getenv(GHVARS_USER_AGENT) or DEFAULT_USER_AGENT
    )
    timeout: float = field(default_factory=_timeout_from_env)

    def __post_init__(self):
        check_per_page(self.per_page)
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def get_api_endpoint(self) -> str:
        return self.api_endpoint

    def get_access_token(self) -> str | None:
        return self.access_token

    def get_per_page(self) -> int | None:
        return self.per_page

    def get_auto_paginate(self) -> bool:
        return self.auto_paginate

    def get_user_agent(self) -> str:
        return self.user_agent

    def get_timeout(self) -> float:
        return self.timeout
