"""Tenant statistics models.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from datetime import datetime

from pydantic import BaseModel


class DailyStats(BaseModel):
    """Login and signup counts for a single day."""

    date: datetime | None = None
    logins: int | None = None
    signups: int | None = None
    leaked_passwords: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
