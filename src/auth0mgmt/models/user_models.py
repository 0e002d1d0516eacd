"""User management models for the Management API.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .page_models import Page


class Identity(BaseModel):
    """Identity provider account linked to a user."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    connection: str | None = None
    user_id: str | None = None
    provider: str | None = None
    is_social: bool | None = Field(default=None, alias="isSocial")


class User(BaseModel):
    """User model, used both for responses and create/update bodies."""

    model_config = ConfigDict(extra="allow")

    user_id: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    username: str | None = None
    phone_number: str | None = None
    phone_verified: bool | None = None
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    nickname: str | None = None
    picture: str | None = None
    blocked: bool | None = None
    connection: str | None = None
    password: str | None = None
    verify_email: bool | None = None
    user_metadata: dict[str, Any] | None = None
    app_metadata: dict[str, Any] | None = None
    identities: list[Identity] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_login: datetime | None = None
    logins_count: int | None = None


class UsersPage(Page):
    """Page of users."""

    items_key: ClassVar[str] = "users"

    items: list[User] = Field(default_factory=list, alias="users")
