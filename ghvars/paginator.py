import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Optional

import httpx

from ghvars.constants import MAX_PER_PAGE
from ghvars.page import Page
from ghvars.request_executor import RequestExecutor, next_page_url, parse_body
from ghvars.util import check_per_page

_LOGGER = logging.getLogger(__name__)

Fold = Callable[[Any, httpx.Response], None]


@dataclass
class Paginator:
    """Follows the next links of list endpoints.

    By default only the first page is fetched. With auto_paginate, every next link is
    followed and each page is folded into the body of the first page.
    """

    executor: RequestExecutor
    auto_paginate: bool = False
    per_page: int | None = None

    def __setattr__(self, name: str, value: Any):
        if name == "per_page":
            check_per_page(value)
        super().__setattr__(name, value)

    def iter_responses(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        auto_paginate: Optional[bool] = None,
    ) -> Iterator[httpx.Response]:
        """Lazily fetch the pages of a list endpoint, yielding each response as it arrives.

        Args:
            path: The path of the list endpoint
            params: Additional query parameters for the first request
            auto_paginate: Override of the paginator's policy. When false only the
                first page is yielded

        Yields:
            httpx.Response: The response for each page, in server order
        """
        if auto_paginate is None:
            auto_paginate = self.auto_paginate
        query = dict(params or {})
        per_page = self.per_page or (MAX_PER_PAGE if auto_paginate else None)
        if per_page and "per_page" not in query:
            query["per_page"] = per_page

        self.executor.get(path, params=query)
        response = self.executor.last_response
        yield response

        while auto_paginate:
            url = next_page_url(response)
            if url is None:
                break
            _LOGGER.debug(f"Following next link {url}")
            self.executor.get(url)
            response = self.executor.last_response
            yield response

    def iter_pages(
        self,
        path: str,
        items_key: str | None = None,
        params: Mapping[str, Any] | None = None,
        auto_paginate: Optional[bool] = None,
    ) -> Iterator[Page[Any]]:
        """Lazily fetch the pages of a list endpoint as Page objects.

        Args:
            items_key: The field of the body holding the items. When None the body
                itself must be a list
        """
        for response in self.iter_responses(path, params, auto_paginate):
            body = parse_body(response)
            if items_key is not None:
                items = (body or {}).get(items_key) or []
            else:
                items = body or []
            yield Page(items=list(items), next_page_id=next_page_url(response))

    def paginate(
        self,
        path: str,
        fold: Optional[Fold] = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Fetch a list endpoint, folding any further pages into the body of the first.

        Args:
            path: The path of the list endpoint
            fold: Called as fold(data, last_response) for each page after the first.
                It is expected to append the items of last_response to data. When
                omitted and the body is a list, the pages are concatenated
            params: Additional query parameters for the first request

        Returns:
            The body of the first page, with the items of later pages folded in
        """
        responses = self.iter_responses(path, params)
        data = parse_body(next(responses))
        for response in responses:
            if fold is not None:
                fold(data, response)
            elif isinstance(data, list):
                data.extend(parse_body(response) or [])
        return data

    def fetch_next_page(self) -> Any:
        """Follow the next link of the last response.

        Returns:
            The body of the next page, or None if the last response had no next link
        """
        url = next_page_url(self.executor.last_response)
        if url is None:
            return None
        _LOGGER.debug(f"Fetching next page {url}")
        return self.executor.get(url)


def concat_items(items_key: str) -> Fold:
    """Get a fold appending the items_key field of each page to the same field of the data"""

    def fold(data: Any, last_response: httpx.Response) -> None:
        body = parse_body(last_response) or {}
        data[items_key].extend(body.get(items_key) or [])

    return fold
