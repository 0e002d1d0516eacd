"""Users entity for the Management API.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseManagementEntity, assert_not_null
from ._request import Request, VoidRequest
from .filters import UserFilter
from .models import User, UsersPage

USERS_PATH = "api/v2/users"


class UsersEntity(BaseManagementEntity):
    """Users operations, see https://auth0.com/docs/api/management/v2#!/Users."""

    def list(self, filter: UserFilter | None = None) -> Request[UsersPage]:
        """Request a page of users. Needs the ``read:users`` scope.

        Args:
            filter: Optional filter

        Returns:
            A request to execute.

        """
        url = self._build_url(USERS_PATH, params=self._filter_params(filter))
        return self._new_request(url, "GET", UsersPage)

    def list_by_email(
        self, email: str, filter: UserFilter | None = None
    ) -> Request[list[User]]:
        """Request the users registered with an email address.

        The endpoint is not paginated, so only ``fields`` and
        ``include_fields`` are taken from the filter.

        Args:
            email: Email address to look up
            filter: Optional filter

        Returns:
            A request to execute.

        """
        assert_not_null(email, "email")

        params = [("email", email)]
        if filter is not None:
            params.extend(
                (name, value)
                for name, value in self._filter_params(filter)
                if name in ("fields", "include_fields")
            )
        url = self._build_url("api/v2/users-by-email", params=params)
        return self._new_request(url, "GET", list[User])

    def get(self, user_id: str, filter: UserFilter | None = None) -> Request[User]:
        """Request a user. Needs the ``read:users`` scope.

        Args:
            user_id: User ID, e.g. ``auth0|5e1f...``
            filter: Optional filter

        Returns:
            A request to execute.

        """
        assert_not_null(user_id, "user id")

        url = self._build_url(USERS_PATH, user_id, params=self._filter_params(filter))
        return self._new_request(url, "GET", User)

    def create(self, user: User) -> Request[User]:
        """Create a user. Needs the ``create:users`` scope.

        Args:
            user: User data, ``connection`` is required by the API

        Returns:
            A request to execute.

        """
        assert_not_null(user, "user")

        url = self._build_url(USERS_PATH)
        return self._new_request(url, "POST", User, body=user)

    def update(self, user_id: str, user: User) -> Request[User]:
        """Update an existing user. Needs the ``update:users`` scope.

        Args:
            user_id: User ID
            user: User data to set

        Returns:
            A request to execute.

        """
        assert_not_null(user_id, "user id")
        assert_not_null(user, "user")

        url = self._build_url(USERS_PATH, user_id)
        return self._new_request(url, "PATCH", User, body=user)

    def delete(self, user_id: str) -> VoidRequest:
        """Delete an existing user. Needs the ``delete:users`` scope.

        Args:
            user_id: User ID

        Returns:
            A request to execute.

        """
        assert_not_null(user_id, "user id")

        url = self._build_url(USERS_PATH, user_id)
        return self._new_void_request(url, "DELETE")
