"""auth0mgmt models package.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from .page_models import Page
from .rule_models import Rule, RulesPage
from .stats_models import DailyStats
from .user_models import Identity, User, UsersPage

__all__ = [
    "Page",
    "Rule",
    "RulesPage",
    "DailyStats",
    "Identity",
    "User",
    "UsersPage",
]
