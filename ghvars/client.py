import logging
from typing import Any, Mapping, Optional

import httpx

from ghvars.actions_variables import ActionsVariables
from ghvars.config.client_config import ClientConfig, get_config
from ghvars.constants import GHVARS_REQUEST_EXECUTOR
from ghvars.httpx_request_executor import HttpxRequestExecutor
from ghvars.paginator import Fold, Paginator
from ghvars.request_executor import RequestExecutor
from ghvars.util import get_impl

_LOGGER = logging.getLogger(__name__)


class Client(ActionsVariables):
    """Client for the GitHub REST API.

    The auto_paginate and per_page switches default to the values of the config. When
    auto_paginate is off, list methods return only the first page; use fetch_next_page
    to follow on explicitly.

    Example:
        >>> with Client(config=DefaultClientConfig(access_token="...")) as client:
        ...     client.create_actions_variable("owner/repo", "COLOR", "blue")
        ...     variables = client.list_actions_variables("owner/repo")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        executor: RequestExecutor | None = None,
        auto_paginate: Optional[bool] = None,
        per_page: int | None = None,
    ):
        self.config = config or get_config()
        self.executor = executor or HttpxRequestExecutor(self.config)
        self.paginator = Paginator(
            executor=self.executor,
            auto_paginate=(
                self.config.get_auto_paginate() if auto_paginate is None else auto_paginate
            ),
            per_page=per_page if per_page is not None else self.config.get_per_page(),
        )

    @property
    def auto_paginate(self) -> bool:
        return self.paginator.auto_paginate

    @auto_paginate.setter
    def auto_paginate(self, value: bool):
        self.paginator.auto_paginate = value

    @property
    def per_page(self) -> int | None:
        return self.paginator.per_page

    @per_page.setter
    def per_page(self, value: int | None):
        self.paginator.per_page = value

    @property
    def last_response(self) -> httpx.Response | None:
        """The response to the most recent request"""
        return self.executor.last_response

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.executor.get(path, params=params)

    def post(self, path: str, data: Any = None) -> Any:
        return self.executor.post(path, data)

    def put(self, path: str, data: Any = None) -> Any:
        return self.executor.put(path, data)

    def patch(self, path: str, data: Any = None) -> Any:
        return self.executor.patch(path, data)

    def delete(self, path: str, data: Any = None) -> Any:
        return self.executor.delete(path, data)

    def boolean_from_response(self, method: str, path: str, data: Any = None) -> bool:
        return self.executor.boolean_from_response(method, path, data)

    def paginate(
        self,
        path: str,
        fold: Optional[Fold] = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.paginator.paginate(path, fold, params)

    def fetch_next_page(self) -> Any:
        """Get the body of the page after the last response, or None if there is none"""
        return self.paginator.fetch_next_page()

    def close(self) -> None:
        self.executor.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self) -> str:
        return (
            f"Client(executor={self.executor!r}, auto_paginate={self.auto_paginate}, "
            f"per_page={self.per_page})"
        )


def get_default_client() -> Client:
    """Create a client from the environment.

    The executor implementation can be overridden by setting the GHVARS_REQUEST_EXECUTOR
    environment variable to a fully qualified class name. It is constructed with the config.
    """
    config = get_config()
    executor_class = get_impl(GHVARS_REQUEST_EXECUTOR, RequestExecutor, HttpxRequestExecutor)
    _LOGGER.info(f"Using Request Executor: {executor_class.__name__}")
    return Client(config=config, executor=executor_class(config))
