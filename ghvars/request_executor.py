from abc import ABC, abstractmethod
from typing import Any, Mapping

import httpx

SUCCESS_STATUS_CODES = (201, 202, 204)


class RequestExecutor(ABC):
    """Performs authenticated requests against the API and keeps the last response.
    Unsuccessful responses are raised as HttpError subclasses"""

    @abstractmethod
    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
    ) -> Any:
        """Send a request and get the parsed body of the response

        Args:
            method: The HTTP method
            path: A path relative to the API root, or an absolute url (e.g. a next link)
            params: Query parameters
            data: A JSON serializable request body

        Returns:
            The decoded JSON body, or None if the response has no body

        Raises:
            HttpError: If the response status is 4xx or 5xx
            httpx.TransportError: If no response was received
        """

    @property
    @abstractmethod
    def last_response(self) -> httpx.Response | None:
        """The response to the most recent request"""

    def close(self) -> None:
        """Release any resources held by this executor"""

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def head(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("HEAD", path, params=params)

    def post(self, path: str, data: Any = None) -> Any:
        return self.request("POST", path, data=data)

    def put(self, path: str, data: Any = None) -> Any:
        return self.request("PUT", path, data=data)

    def patch(self, path: str, data: Any = None) -> Any:
        return self.request("PATCH", path, data=data)

    def delete(self, path: str, data: Any = None) -> Any:
        return self.request("DELETE", path, data=data)

    def boolean_from_response(self, method: str, path: str, data: Any = None) -> bool:
        """Send a request and get whether it succeeded with 201, 202 or 204"""
        self.request(method, path, data=data)
        return self.last_response.status_code in SUCCESS_STATUS_CODES


def parse_body(response: httpx.Response) -> Any:
    """Get the decoded JSON body of the response, or None if it has no body"""
    if response.status_code == 204 or not response.content:
        return None
    return response.json()


def next_page_url(response: httpx.Response | None) -> str | None:
    """Get the url of the next page from the Link header of the response given"""
    if response is None:
        return None
    link = response.links.get("next")
    if not link:
        return None
    return link.get("url")
