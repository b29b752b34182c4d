"""Error values for known error status codes returned by the APIs."""

from __future__ import annotations

from http import HTTPStatus


class ApiError(Exception):
    """Raised when an API answers with an error status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, status_code={self.status_code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.message, self.status_code) == (other.message, other.status_code)

    def __hash__(self) -> int:
        return hash((self.message, self.status_code))


ERR_BAD_REQUEST = ApiError("bad request", HTTPStatus.BAD_REQUEST)
ERR_UNAUTHORIZED = ApiError("unauthorized", HTTPStatus.UNAUTHORIZED)
ERR_FORBIDDEN = ApiError("forbidden", HTTPStatus.FORBIDDEN)
ERR_NOT_FOUND = ApiError("not found", HTTPStatus.NOT_FOUND)
ERR_METHOD_NOT_ALLOWED = ApiError("method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)
ERR_UNSUPPORTED_MEDIA_TYPE = ApiError(
    "unsupported media type", HTTPStatus.UNSUPPORTED_MEDIA_TYPE
)
ERR_RATE_LIMIT_EXCEEDED = ApiError("rate limit exceeded", HTTPStatus.TOO_MANY_REQUESTS)
ERR_INTERNAL_SERVER_ERROR = ApiError(
    "internal server error", HTTPStatus.INTERNAL_SERVER_ERROR
)
ERR_BAD_GATEWAY = ApiError("bad gateway", HTTPStatus.BAD_GATEWAY)
ERR_SERVICE_UNAVAILABLE = ApiError("service unavailable", HTTPStatus.SERVICE_UNAVAILABLE)
ERR_GATEWAY_TIMEOUT = ApiError("gateway timeout", HTTPStatus.GATEWAY_TIMEOUT)

STATUS_TO_ERROR: dict[int, ApiError] = {
    int(error.status_code): error
    for error in (
        ERR_BAD_REQUEST,
        ERR_UNAUTHORIZED,
        ERR_FORBIDDEN,
        ERR_NOT_FOUND,
        ERR_METHOD_NOT_ALLOWED,
        ERR_UNSUPPORTED_MEDIA_TYPE,
        ERR_RATE_LIMIT_EXCEEDED,
        ERR_INTERNAL_SERVER_ERROR,
        ERR_BAD_GATEWAY,
        ERR_SERVICE_UNAVAILABLE,
        ERR_GATEWAY_TIMEOUT,
    )
}

UNKNOWN_ERROR_MESSAGE = "unknown error reason"


def error_for_status(status_code: int) -> ApiError:
    """Return a fresh error describing the given HTTP status code."""
    known = STATUS_TO_ERROR.get(status_code)
    if known is not None:
        return ApiError(known.message, int(known.status_code))
    return ApiError(UNKNOWN_ERROR_MESSAGE, status_code)