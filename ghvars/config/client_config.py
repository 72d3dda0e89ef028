from abc import ABC, abstractmethod

from ghvars.constants import GHVARS_CONFIG
from ghvars.util import get_impl


class ClientConfig(ABC):
    """Configuration object for a ghvars client"""

    @abstractmethod
    def get_api_endpoint(self) -> str:
        """Get the root url of the API"""

    @abstractmethod
    def get_access_token(self) -> str | None:
        """Get the token used to authenticate requests (None for anonymous access)"""

    @abstractmethod
    def get_per_page(self) -> int | None:
        """Get the page size sent with list requests (None for the server default)"""

    @abstractmethod
    def get_auto_paginate(self) -> bool:
        """Get whether list requests follow every next link before returning"""

    @abstractmethod
    def get_user_agent(self) -> str:
        """Get the User-Agent header"""

    @abstractmethod
    def get_timeout(self) -> float:
        """Get the per request timeout in seconds"""


def get_config() -> ClientConfig:
    from ghvars.config.default_client_config import DefaultClientConfig

    config_type = get_impl(GHVARS_CONFIG, ClientConfig, DefaultClientConfig)
    return config_type()
