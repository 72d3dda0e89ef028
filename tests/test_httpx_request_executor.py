"""
Unit tests for HttpxRequestExecutor.

This module tests request construction and response handling, including:
- Url resolution against the API root
- Default headers and token authentication
- Body parsing for empty and JSON responses
- Error mapping and the boolean_from_response helper
"""

import json

import httpx
import pytest

from ghvars.config.default_client_config import DefaultClientConfig
from ghvars.ghvars_error import NotFoundError, ServiceUnavailableError
from ghvars.httpx_request_executor import HttpxRequestExecutor


class RecordingHandler:
    """Handler for httpx.MockTransport answering every request with the same response"""

    def __init__(self, status_code: int = 200, body=None, headers=None):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is None:
            return httpx.Response(self.status_code, headers=self.headers)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)


def create_executor(handler: RecordingHandler, **config_kwargs) -> HttpxRequestExecutor:
    config_kwargs.setdefault("api_endpoint", "https://api.github.test")
    config_kwargs.setdefault("access_token", None)
    config = DefaultClientConfig(**config_kwargs)
    return HttpxRequestExecutor(config, http_client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestHttpxRequestExecutor:
    def test_relative_path_is_resolved_against_endpoint(self):
        handler = RecordingHandler(body={"ok": True})
        executor = create_executor(handler, api_endpoint="https://ghe.example.com/api/v3/")

        assert executor.get("/repos/octocat/hello/actions/variables") == {"ok": True}
        assert str(handler.requests[0].url) == "https://ghe.example.com/api/v3/repos/octocat/hello/actions/variables"

    def test_absolute_url_is_used_unchanged(self):
        handler = RecordingHandler(body=[])
        executor = create_executor(handler)

        executor.get("https://api.github.test/repositories/1/actions/variables?page=2")

        assert str(handler.requests[0].url) == "https://api.github.test/repositories/1/actions/variables?page=2"

    def test_default_headers(self):
        handler = RecordingHandler(body={})
        executor = create_executor(handler, user_agent="tests/1.0")

        executor.get("rate_limit")

        headers = handler.requests[0].headers
        assert headers["Accept"] == "application/vnd.github+json"
        assert headers["User-Agent"] == "tests/1.0"
        assert headers["X-GitHub-Api-Version"] == "2022-11-28"
        assert "Authorization" not in headers

    def test_token_is_sent_as_bearer(self):
        handler = RecordingHandler(body={})
        executor = create_executor(handler, access_token="abc123")

        executor.get("rate_limit")

        assert handler.requests[0].headers["Authorization"] == "Bearer abc123"

    def test_query_params_and_json_body(self):
        handler = RecordingHandler(status_code=201, body={})
        executor = create_executor(handler)

        executor.get("items", params={"per_page": 5})
        executor.post("items", {"name": "A", "value": "1"})

        assert handler.requests[0].url.params["per_page"] == "5"
        assert json.loads(handler.requests[1].content) == {"name": "A", "value": "1"}
        assert handler.requests[1].method == "POST"

    def test_no_content_returns_none(self):
        handler = RecordingHandler(status_code=204)
        executor = create_executor(handler)

        assert executor.patch("items/A", {"value": "2"}) is None
        assert executor.last_response.status_code == 204

    def test_last_response_exposes_links(self):
        handler = RecordingHandler(
            body={"total_count": 2, "variables": []},
            headers={"Link": '<https://api.github.test/items?page=2>; rel="next"'},
        )
        executor = create_executor(handler)
        assert executor.last_response is None

        executor.get("items")

        assert executor.last_response.links["next"]["url"] == "https://api.github.test/items?page=2"

    def test_error_status_raises(self):
        handler = RecordingHandler(status_code=404, body={"message": "Not Found"})
        executor = create_executor(handler)

        with pytest.raises(NotFoundError):
            executor.get("items/missing")
        assert executor.last_response.status_code == 404

    def test_server_error_raises(self):
        handler = RecordingHandler(status_code=503)
        executor = create_executor(handler)

        with pytest.raises(ServiceUnavailableError):
            executor.delete("items/A")

    def test_boolean_from_response(self):
        handler = RecordingHandler(status_code=204)
        executor = create_executor(handler)

        assert executor.boolean_from_response("DELETE", "items/A") is True
        assert handler.requests[0].method == "DELETE"

    def test_boolean_from_response_false_for_other_success(self):
        handler = RecordingHandler(status_code=200, body={})
        executor = create_executor(handler)

        assert executor.boolean_from_response("delete", "items/A") is False

    def test_boolean_from_response_raises_not_found(self):
        handler = RecordingHandler(status_code=404, body={"message": "Not Found"})
        executor = create_executor(handler)

        with pytest.raises(NotFoundError):
            executor.boolean_from_response("DELETE", "items/missing")

    def test_injected_client_is_not_closed(self):
        http_client = httpx.Client(transport=httpx.MockTransport(RecordingHandler()))
        executor = HttpxRequestExecutor(
            DefaultClientConfig(api_endpoint="https://api.github.test"), http_client=http_client
        )

        executor.close()

        assert not http_client.is_closed

    def test_owned_client_is_closed(self):
        executor = HttpxRequestExecutor(DefaultClientConfig(api_endpoint="https://api.github.test"))

        executor.close()

        assert executor.http_client.is_closed

    def test_transport_errors_propagate(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        executor = HttpxRequestExecutor(
            DefaultClientConfig(api_endpoint="https://api.github.test"),
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

        with pytest.raises(httpx.ConnectError):
            executor.get("items")
