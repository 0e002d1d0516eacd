"""Base entity shared by every Management API resource.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Any
from urllib.parse import quote

import httpx

from ._request import HttpClient, Request, VoidRequest
from .exceptions import InvalidArgumentError
from .filters import BaseFilter


def assert_not_null(value: Any, name: str) -> None:
    """Fail fast when a required argument is missing.

    Raises:
        InvalidArgumentError: If ``value`` is ``None`` or an empty string.

    """
    if value is None or (isinstance(value, str) and not value):
        msg = f"'{name}' cannot be null!"
        raise InvalidArgumentError(msg, name)


def query_value(value: Any) -> str:
    """Render a filter value the way the API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class BaseManagementEntity:
    """Holds the dependencies shared by every resource entity.

    The token is captured once and stamped on every request the entity
    builds. Callers that need to refresh credentials either rebuild the
    entity or give the client an ``auth`` that overrides the header at send
    time (see ``BearerTokenAuth``). Not safe for concurrent mutation.
    """

    def __init__(
        self,
        client: HttpClient,
        base_url: httpx.URL | str,
        api_token: str,
    ) -> None:
        """Initialize entity.

        Args:
            client: The shared HTTP client
            base_url: Base URL of the tenant, e.g. ``https://tenant.auth0.com/``
            api_token: Management API token used in the Authorization header

        """
        assert_not_null(client, "client")
        assert_not_null(base_url, "base url")
        assert_not_null(api_token, "api token")
        self._client = client
        self._base_url = httpx.URL(str(base_url))
        self._api_token = api_token

    @property
    def client(self) -> HttpClient:
        return self._client

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def api_token(self) -> str:
        return self._api_token

    def _build_url(
        self,
        path: str,
        *segments: str,
        params: Iterable[tuple[str, str]] = (),
    ) -> str:
        """Compose an absolute URL below the base URL.

        ``path`` is appended verbatim, each of ``segments`` is
        percent-encoded as a single path segment.
        """
        url = str(self._base_url).rstrip("/")
        url += "/" + path.strip("/")
        for segment in segments:
            url += "/" + quote(segment, safe="")

        pairs = list(params)
        if not pairs:
            return url
        return str(httpx.URL(url, params=pairs))

    @staticmethod
    def _filter_params(
        filter: BaseFilter | None,
        *,
        exclude: Collection[str] = (),
    ) -> list[tuple[str, str]]:
        """Turn a filter into query pairs, skipping names in ``exclude``.

        Parameters set to ``None`` are left out of the query string.

        ``exclude`` is matched case-insensitively.
        """
        if filter is None:
            return []
        excluded = {name.lower() for name in exclude}
        return [
            (name, query_value(value))
            for name, value in filter.as_dict().items()
            if value is not None and name.lower() not in excluded
        ]

    def _new_request(
        self,
        url: str,
        method: str,
        response_type: Any,
        body: Any | None = None,
    ) -> Request[Any]:
        request: Request[Any] = Request(self._client, url, method, response_type)
        request.add_header("Authorization", f"Bearer {self._api_token}")
        if body is not None:
            request.set_body(body)
        return request

    def _new_void_request(self, url: str, method: str) -> VoidRequest:
        request = VoidRequest(self._client, url, method)
        request.add_header("Authorization", f"Bearer {self._api_token}")
        return request
