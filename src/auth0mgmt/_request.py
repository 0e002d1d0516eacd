"""Unexecuted HTTP requests against the Management API.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    InvalidResponseError,
    NetworkError,
    TimeoutError as MgmtTimeoutError,
    create_error_from_response,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

HttpClient = httpx.Client | httpx.AsyncClient


class Request(Generic[T]):
    """A single HTTP call that yields a ``T`` once executed.

    Building a request never touches the network; ``execute()`` (for an
    ``httpx.Client``) or ``execute_async()`` (for an ``httpx.AsyncClient``)
    sends it. Instances are not safe for concurrent mutation, and each
    execution sends a new HTTP call.
    """

    def __init__(
        self,
        client: HttpClient,
        url: str,
        method: str,
        response_type: Any,
    ) -> None:
        """Initialize request.

        Args:
            client: The shared HTTP client used to send the request
            url: Absolute target URL, query string included
            method: HTTP method (GET, POST, etc.)
            response_type: Type the JSON response body is validated into

        """
        self._client = client
        self._url = url
        self._method = method.upper()
        self._response_type = response_type
        self._headers: dict[str, str] = {}
        self._body: Any | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def method(self) -> str:
        return self._method

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def body(self) -> Any | None:
        return self._body

    def add_header(self, name: str, value: str) -> Request[T]:
        """Set a header, replacing any previous value for the same name."""
        for existing in list(self._headers):
            if existing.lower() == name.lower():
                del self._headers[existing]
        self._headers[name] = value
        return self

    def set_body(self, body: Any) -> Request[T]:
        """Set the JSON body sent with the request."""
        self._body = body
        return self

    def execute(self) -> T:
        """Send the request and parse the response.

        Returns:
            The parsed response body.

        Raises:
            TypeError: If the held client is an ``httpx.AsyncClient``
            NetworkError: For network-related errors
            TimeoutError: For timeout errors
            APIError: For error responses or unparseable bodies

        """
        if not isinstance(self._client, httpx.Client):
            msg = "execute() needs an httpx.Client, use execute_async() instead"
            raise TypeError(msg)

        request = self._build_request()
        logger.debug("Sending %s %s", self._method, self._url)
        try:
            response = self._client.send(request)
        except httpx.TimeoutException as e:
            raise MgmtTimeoutError("Request timeout") from e
        except httpx.TransportError as e:
            raise NetworkError("Network error") from e

        try:
            return self._handle_response(response)
        finally:
            response.close()

    async def execute_async(self) -> T:
        """Send the request on an ``httpx.AsyncClient`` and parse the response.

        Returns:
            The parsed response body.

        Raises:
            TypeError: If the held client is an ``httpx.Client``
            NetworkError: For network-related errors
            TimeoutError: For timeout errors
            APIError: For error responses or unparseable bodies

        """
        if not isinstance(self._client, httpx.AsyncClient):
            msg = "execute_async() needs an httpx.AsyncClient, use execute() instead"
            raise TypeError(msg)

        request = self._build_request()
        logger.debug("Sending %s %s", self._method, self._url)
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as e:
            raise MgmtTimeoutError("Request timeout") from e
        except httpx.TransportError as e:
            raise NetworkError("Network error") from e

        try:
            return self._handle_response(response)
        finally:
            await response.aclose()

    def _build_request(self) -> httpx.Request:
        payload = self._serialize_body()
        return self._client.build_request(
            self._method,
            self._url,
            headers=self._headers,
            json=payload,
        )

    def _serialize_body(self) -> Any | None:
        if isinstance(self._body, BaseModel):
            return self._body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return self._body

    def _handle_response(self, response: httpx.Response) -> T:
        logger.debug(
            "Received %s for %s %s", response.status_code, self._method, self._url
        )
        if not response.is_success:
            raise create_error_from_response(response)
        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> T:
        """Validate the response body into the expected type.

        Raises:
            InvalidResponseError: When the body is not valid JSON or does
                not match the expected shape.

        """
        try:
            return TypeAdapter(self._response_type).validate_json(response.content)
        except PydanticValidationError as e:
            msg = "Failed to parse the response body"
            raise InvalidResponseError(
                msg, response.status_code, details=response.text
            ) from e


class VoidRequest(Request[None]):
    """Request whose response payload is ignored (delete-style calls)."""

    def __init__(self, client: HttpClient, url: str, method: str) -> None:
        super().__init__(client, url, method, type(None))

    def _parse_response(self, response: httpx.Response) -> None:
        return None
