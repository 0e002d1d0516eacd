"""Stats entity for the Management API.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

from datetime import date

from ._base import BaseManagementEntity, assert_not_null
from ._request import Request
from .models import DailyStats

DATE_FORMAT = "%Y%m%d"


class StatsEntity(BaseManagementEntity):
    """Stats operations, see https://auth0.com/docs/api/management/v2#!/Stats.

    Not safe for concurrent mutation.
    """

    def get_active_users_count(self) -> Request[int]:
        """Request the number of users that logged in during the last 30 days.

        Needs the ``read:stats`` scope.

        Returns:
            A request to execute.

        """
        url = self._build_url("api/v2/stats/active-users")
        return self._new_request(url, "GET", int)

    def get_daily_stats(self, from_: date, to: date) -> Request[list[DailyStats]]:
        """Request the daily stats for a period. Needs the ``read:stats`` scope.

        Args:
            from_: First day of the period (inclusive), time is ignored
            to: Last day of the period (inclusive), time is ignored

        Returns:
            A request to execute.

        """
        assert_not_null(from_, "date from")
        assert_not_null(to, "date to")

        params = [("from", format_date(from_)), ("to", format_date(to))]
        url = self._build_url("api/v2/stats/daily", params=params)
        return self._new_request(url, "GET", list[DailyStats])


def format_date(value: date) -> str:
    """Format a date or datetime as ``YYYYMMDD``."""
    return value.strftime(DATE_FORMAT)
