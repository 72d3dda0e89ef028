"""Environment variable constants for the ghvars library.

This module centralizes all environment variable keys and defaults used throughout
the library to avoid hardcoded strings.
"""

VERSION = "0.1.0"

# Authentication
GHVARS_ACCESS_TOKEN = "GHVARS_ACCESS_TOKEN"
"""Environment variable holding the token sent as a Bearer Authorization header.
Default: unset (requests are anonymous)
"""

# Endpoint
GHVARS_API_ENDPOINT = "GHVARS_API_ENDPOINT"
"""Environment variable to override the API root (e.g. for GitHub Enterprise Server).
Default: https://api.github.com
"""
DEFAULT_API_ENDPOINT = "https://api.github.com"

# Pagination
GHVARS_PER_PAGE = "GHVARS_PER_PAGE"
"""Environment variable to set the page size sent with list requests.
Default: unset (the server default is used, unless auto pagination is on)
"""

GHVARS_AUTO_PAGINATE = "GHVARS_AUTO_PAGINATE"
"""Environment variable to enable following every next link of list requests.
Accepts true / 1 / yes. Default: false
"""

MAX_PER_PAGE = 100

# Transport
GHVARS_USER_AGENT = "GHVARS_USER_AGENT"
"""Environment variable to override the User-Agent header.
Default: ghvars/<version>
"""
DEFAULT_USER_AGENT = f"ghvars/{VERSION}"

GHVARS_TIMEOUT = "GHVARS_TIMEOUT"
"""Environment variable to set the per request timeout in seconds.
Default: 30
"""
DEFAULT_TIMEOUT = 30.0

DEFAULT_MEDIA_TYPE = "application/vnd.github+json"
API_VERSION = "2022-11-28"

# Implementations
GHVARS_CONFIG = "GHVARS_CONFIG"
"""Environment variable to specify the ClientConfig implementation.
Set this to a fully qualified class name to use a custom ClientConfig implementation.
Default: ghvars.config.default_client_config.DefaultClientConfig
"""

GHVARS_REQUEST_EXECUTOR = "GHVARS_REQUEST_EXECUTOR"
"""Environment variable to override the RequestExecutor implementation.
Default: ghvars.httpx_request_executor.HttpxRequestExecutor
"""
