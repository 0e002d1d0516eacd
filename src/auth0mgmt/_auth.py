"""Credential providers for the Management API transport.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Generator
from typing import Protocol, runtime_checkable

import httpx

from .exceptions import InvalidArgumentError


@runtime_checkable
class TokenProvider(Protocol):
    """Anything able to hand out the current Management API token."""

    def get_token(self) -> str: ...


class StaticTokenProvider:
    """Token provider holding a token that can be swapped at runtime."""

    def __init__(self, token: str) -> None:
        if not token:
            msg = "'token' cannot be null or empty!"
            raise InvalidArgumentError(msg, "token")
        self._token = token
        self._lock = threading.Lock()

    def get_token(self) -> str:
        with self._lock:
            return self._token

    def set_token(self, token: str) -> None:
        """Replace the token handed out to subsequent requests."""
        if not token:
            msg = "'token' cannot be null or empty!"
            raise InvalidArgumentError(msg, "token")
        with self._lock:
            self._token = token


class CallableTokenProvider:
    """Token provider delegating to a callable, e.g. a refresh routine."""

    def __init__(self, fetch: Callable[[], str]) -> None:
        self._fetch = fetch

    def get_token(self) -> str:
        return self._fetch()


class BearerTokenAuth(httpx.Auth):
    """httpx auth flow that stamps a fresh bearer token on every request.

    The header written by the entities carries the token captured when they
    were built. A client configured with this auth replaces it at send time,
    so a provider can refresh credentials without rebuilding any entity.
    """

    def __init__(self, provider: TokenProvider) -> None:
        self._provider = provider

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._provider.get_token()}"
        yield request
