"""Management API client composing one entity per resource.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Self

import httpx

from ._base import assert_not_null
from ._request import HttpClient
from ._rules import RulesEntity
from ._stats import StatsEntity
from ._users import UsersEntity
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

USER_AGENT = "auth0mgmt-python/1.0.0"
DOMAIN_ENV = "AUTH0_DOMAIN"
API_TOKEN_ENV = "AUTH0_API_TOKEN"


def create_base_url(domain: str) -> httpx.URL:
    """Build the tenant base URL from a bare domain or a URL.

    Raises:
        InvalidArgumentError: If the domain cannot be parsed as a URL.

    """
    assert_not_null(domain, "domain")

    url = domain.strip()
    if not url.lower().startswith(("https://", "http://")):
        url = "https://" + url
    if not url.endswith("/"):
        url += "/"

    try:
        base_url = httpx.URL(url)
    except httpx.InvalidURL as e:
        msg = "The domain had an invalid format and couldn't be parsed as an URL."
        raise InvalidArgumentError(msg, "domain") from e
    if not base_url.host:
        msg = "The domain had an invalid format and couldn't be parsed as an URL."
        raise InvalidArgumentError(msg, "domain")
    return base_url


class ManagementAPI:
    """Client for the Auth0 Management API v2.

    Entities are built eagerly and share one HTTP client. Pass your own
    ``client`` to control transport behaviour: an ``httpx.Client`` for
    ``Request.execute()`` or an ``httpx.AsyncClient`` for
    ``Request.execute_async()``. A client built with
    ``auth=BearerTokenAuth(provider)`` refreshes the token on every request,
    in which case ``api_token`` may be a placeholder.
    """

    def __init__(
        self,
        domain: str,
        api_token: str,
        *,
        client: HttpClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Management API client.

        Args:
            domain: Tenant domain (``tenant.auth0.com``) or base URL
            api_token: Management API token
            client: Optional preconfigured HTTP client, closed by the caller
            timeout: Request timeout in seconds for the default client

        """
        assert_not_null(api_token, "api token")
        self._base_url = create_base_url(domain)
        self._api_token = api_token

        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=timeout,
                headers={"User-Agent": USER_AGENT},
            )
        self._client: HttpClient = client

        self._build_entities()

    @classmethod
    def from_env(cls, **kwargs: Any) -> Self:
        """Build a client from ``AUTH0_DOMAIN`` and ``AUTH0_API_TOKEN``.

        Args:
            **kwargs: Extra keyword arguments for the constructor

        Returns:
            The configured client.

        Raises:
            InvalidArgumentError: If a variable is missing.

        """
        domain = os.environ.get(DOMAIN_ENV)
        api_token = os.environ.get(API_TOKEN_ENV)
        if not domain:
            msg = f"{DOMAIN_ENV} is not set"
            raise InvalidArgumentError(msg, "domain")
        if not api_token:
            msg = f"{API_TOKEN_ENV} is not set"
            raise InvalidArgumentError(msg, "api token")
        return cls(domain, api_token, **kwargs)

    def _build_entities(self) -> None:
        self.rules = RulesEntity(self._client, self._base_url, self._api_token)
        self.stats = StatsEntity(self._client, self._base_url, self._api_token)
        self.users = UsersEntity(self._client, self._base_url, self._api_token)

    @property
    def client(self) -> HttpClient:
        """The shared HTTP client, for wrapping layers that rebuild entities."""
        return self._client

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def api_token(self) -> str:
        return self._api_token

    def set_api_token(self, api_token: str) -> None:
        """Replace the token and rebuild every entity with it.

        Requests built before the call keep the previous token.

        Args:
            api_token: New Management API token

        """
        assert_not_null(api_token, "api token")
        self._api_token = api_token
        self._build_entities()
        logger.debug("Management API token replaced, entities rebuilt")

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.aclose()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and isinstance(self._client, httpx.Client):
            self._client.close()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if not self._owns_client:
            return
        if isinstance(self._client, httpx.AsyncClient):
            await self._client.aclose()
        else:
            self._client.close()
