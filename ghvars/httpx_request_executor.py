import logging
from typing import Any, Mapping

import httpx

from ghvars.config.client_config import ClientConfig
from ghvars.constants import API_VERSION, DEFAULT_MEDIA_TYPE
from ghvars.ghvars_error import error_from_response
from ghvars.request_executor import RequestExecutor, parse_body

_LOGGER = logging.getLogger(__name__)


class HttpxRequestExecutor(RequestExecutor):
    """
    Request executor backed by a synchronous httpx.Client.

    An http_client may be supplied (for example with a custom transport), in which
    case it is left open when the executor is closed.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.Client | None = None):
        self.config = config
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=config.get_timeout())
        self._last_response: httpx.Response | None = None

    @property
    def last_response(self) -> httpx.Response | None:
        return self._last_response

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
    ) -> Any:
        method = method.upper()
        url = self.build_url(path)
        request_data = {
            "method": method,
            "url": url,
            "headers": self.build_headers(),
            "timeout": self.config.get_timeout(),
        }
        if params:
            request_data["params"] = dict(params)
        if data is not None:
            request_data["json"] = data

        _LOGGER.debug(f"{method} {url}")
        response = self.http_client.request(**request_data)
        self._last_response = response
        _LOGGER.debug(f"{method} {response.url} -> {response.status_code}")

        error = error_from_response(response)
        if error:
            _LOGGER.warning(f"Request failed: {error}")
            raise error
        return parse_body(response)

    def build_url(self, path: str) -> str:
        """Resolve a path against the API root. Absolute urls are returned unchanged"""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.config.get_api_endpoint().rstrip('/')}/{path.lstrip('/')}"

    def build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": DEFAULT_MEDIA_TYPE,
            "User-Agent": self.config.get_user_agent(),
            "X-GitHub-Api-Version": API_VERSION,
        }
        token = self.config.get_access_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    def __repr__(self) -> str:
        return f"HttpxRequestExecutor(api_endpoint='{self.config.get_api_endpoint()}')"
