"""
Exception classes for the auth0mgmt SDK.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

__all__ = [
    "ManagementError",
    "InvalidArgumentError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "InvalidResponseError",
    "create_error_from_response",
]


class ManagementError(Exception):
    """Base exception for auth0mgmt SDK errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code


class InvalidArgumentError(ManagementError, ValueError):
    """Raised when a required argument is missing before any request is sent."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message, "INVALID_ARGUMENT")
        self.argument = argument


class TransportError(ManagementError):
    """Raised when the HTTP call could not complete."""


class NetworkError(TransportError):
    """Raised when a network error occurs."""

    def __init__(
        self, message: str = "Network error", details: Any | None = None
    ) -> None:
        super().__init__(message, "NETWORK_ERROR", details)


class TimeoutError(TransportError):  # noqa: A001
    """Raised when a request times out."""

    def __init__(
        self, message: str = "Request timeout", details: Any | None = None
    ) -> None:
        super().__init__(message, "TIMEOUT_ERROR", details)


class APIError(ManagementError):
    """Raised when the Management API answers with an error.

    Attributes:
        error: Short error name from the response body (``"Bad Request"``,
            ``"invalid_token"``...)
        description: Human readable description from the response body
        error_code: Machine readable ``errorCode`` when the API sends one

    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error: str | None = None,
        description: str | None = None,
        error_code: str | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message, error_code or "API_ERROR", details, status_code)
        self.error = error
        self.description = description
        self.error_code = error_code

    def __str__(self) -> str:
        return f"Request failed with status code {self.status_code}: {self.message}"


class ValidationError(APIError):
    """Raised when the API rejects the request payload (400)."""


class AuthenticationError(APIError):
    """Raised when the token is missing, expired or invalid (401)."""


class AuthorizationError(APIError):
    """Raised when the token lacks the required scope (403)."""


class NotFoundError(APIError):
    """Raised when a resource is not found (404)."""


class ConflictError(APIError):
    """Raised when a resource conflict occurs (409)."""


class RateLimitError(APIError):
    """Raised when rate limit is exceeded (429).

    ``limit``, ``remaining`` and ``reset`` mirror the ``X-RateLimit-*``
    response headers and are ``-1`` when a header is absent.
    """

    def __init__(
        self,
        message: str,
        limit: int = -1,
        remaining: int = -1,
        reset: int = -1,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, 429, **kwargs)
        self.limit = limit
        self.remaining = remaining
        self.reset = reset


class ServerError(APIError):
    """Raised when a server error occurs (5xx)."""


class InvalidResponseError(APIError):
    """Raised when a successful response body cannot be parsed."""


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
}


def _parse_error_body(response: httpx.Response) -> dict[str, Any]:
    """Parse the error payload, falling back to the raw text."""
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text} if response.text else {}
    if isinstance(body, dict):
        return body
    return {"message": str(body)}


def _header_int(response: httpx.Response, name: str) -> int:
    try:
        return int(response.headers.get(name, -1))
    except ValueError:
        return -1


def create_error_from_response(response: httpx.Response) -> APIError:
    """Create an appropriate error instance based on HTTP status code and error body."""
    status_code = response.status_code
    body = _parse_error_body(response)

    error = body.get("error")
    description = (
        body.get("error_description") or body.get("description") or body.get("message")
    )
    error_code = body.get("errorCode")

    # Some endpoints send a nested {"error": {"code": ..., "message": ...}}
    if isinstance(error, dict):
        description = description or error.get("message")
        error_code = error_code or error.get("code")
        error = error.get("code")

    message = str(description or error or response.reason_phrase or "An error occurred")
    kwargs: dict[str, Any] = {
        "error": str(error) if error is not None else None,
        "description": str(description) if description is not None else None,
        "error_code": str(error_code) if error_code is not None else None,
        "details": body or None,
    }

    if status_code == 429:
        error = RateLimitError(
            message,
            limit=_header_int(response, "X-RateLimit-Limit"),
            remaining=_header_int(response, "X-RateLimit-Remaining"),
            reset=_header_int(response, "X-RateLimit-Reset"),
            **kwargs,
        )
        logger.warning("Rate limit exceeded, resets at %s", error.reset)
        return error
    if status_code >= 500:
        return ServerError(message, status_code, **kwargs)

    error_cls = _STATUS_ERRORS.get(status_code, APIError)
    return error_cls(message, status_code, **kwargs)
