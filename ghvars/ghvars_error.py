from typing import Any

import httpx


class GhvarsError(Exception):
    pass


class InvalidRepositoryError(GhvarsError, ValueError):
    """Raised when a value cannot be resolved to a repository"""


class HttpError(GhvarsError):
    """Error raised for an unsuccessful response from the API.

    The server's error payload (message, documentation_url and errors) is
    parsed when present and folded into the exception message.
    """

    def __init__(self, response: httpx.Response):
        self.response = response
        self.status_code = response.status_code
        self.method = response.request.method
        self.url = str(response.request.url)
        body = _parse_error_body(response)
        self.message: str | None = body.get("message")
        self.documentation_url: str | None = body.get("documentation_url")
        self.errors: list[Any] = body.get("errors") or []
        super().__init__(self._build_error_message())

    def _build_error_message(self) -> str:
        message = f"{self.method} {self.url}: {self.status_code}"
        if self.message:
            message += f" - {self.message}"
        if self.errors:
            summary = "\n".join(f"  {_format_error(error)}" for error in self.errors)
            message += f"\nError summary:\n{summary}"
        if self.documentation_url:
            message += f" // See: {self.documentation_url}"
        return message


class ClientError(HttpError):
    """Raised on 4xx responses"""


class BadRequestError(ClientError):
    pass


class UnauthorizedError(ClientError):
    pass


class ForbiddenError(ClientError):
    pass


class NotFoundError(ClientError):
    pass


class MethodNotAllowedError(ClientError):
    pass


class NotAcceptableError(ClientError):
    pass


class ConflictError(ClientError):
    pass


class UnsupportedMediaTypeError(ClientError):
    pass


class UnprocessableEntityError(ClientError):
    pass


class TooManyRequestsError(ClientError):
    """Raised on 429 responses, and on 403 responses reporting an exhausted rate limit"""


class UnavailableForLegalReasonsError(ClientError):
    pass


class ServerError(HttpError):
    """Raised on 5xx responses"""


class InternalServerError(ServerError):
    pass


class NotImplementedServerError(ServerError):
    pass


class BadGatewayError(ServerError):
    pass


class ServiceUnavailableError(ServerError):
    pass


_ERRORS_BY_STATUS: dict[int, type[HttpError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    406: NotAcceptableError,
    409: ConflictError,
    415: UnsupportedMediaTypeError,
    422: UnprocessableEntityError,
    429: TooManyRequestsError,
    451: UnavailableForLegalReasonsError,
    500: InternalServerError,
    501: NotImplementedServerError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
}


def error_from_response(response: httpx.Response) -> HttpError | None:
    """Get the error for the response given, or None if the response was successful"""
    status_code = response.status_code
    if status_code < 400:
        return None
    error_type = _ERRORS_BY_STATUS.get(status_code)
    if status_code == 403 and _is_rate_limited(response):
        error_type = TooManyRequestsError
    if error_type is None:
        error_type = ClientError if status_code < 500 else ServerError
    return error_type(response)


def _is_rate_limited(response: httpx.Response) -> bool:
    if response.headers.get("x-ratelimit-remaining") == "0":
        return True
    message = _parse_error_body(response).get("message") or ""
    return "rate limit" in message.lower()


def _parse_error_body(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text}
    if isinstance(body, dict):
        return body
    return {}


def _format_error(error: Any) -> str:
    if isinstance(error, dict):
        return ", ".join(f"{key}: {value}" for key, value in error.items())
    return str(error)
