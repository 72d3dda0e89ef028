from ghvars.config.client_config import ClientConfig, get_config
from ghvars.config.default_client_config import DefaultClientConfig

__all__ = ["ClientConfig", "DefaultClientConfig", "get_config"]
