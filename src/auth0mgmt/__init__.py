"""
auth0mgmt Python SDK

Client library for the Auth0 Management API v2. Entity methods build
unexecuted requests; the HTTP client handle and base URL stay public so a
wrapping layer can inject token refresh and rate limiting.
"""

from ._auth import (
    BearerTokenAuth,
    CallableTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)
from ._base import BaseManagementEntity
from ._request import Request, VoidRequest
from ._rules import RulesEntity
from ._stats import StatsEntity
from ._users import UsersEntity
from .client import ManagementAPI
from .exceptions import *
from .filters import BaseFilter, FieldsFilter, RulesFilter, UserFilter
from .models import *

__version__ = "1.0.0"

__all__ = [
    "ManagementAPI",
    # Entities
    "BaseManagementEntity",
    "RulesEntity",
    "StatsEntity",
    "UsersEntity",
    # Requests
    "Request",
    "VoidRequest",
    # Credentials
    "TokenProvider",
    "StaticTokenProvider",
    "CallableTokenProvider",
    "BearerTokenAuth",
    # Filters
    "BaseFilter",
    "FieldsFilter",
    "RulesFilter",
    "UserFilter",
    # Exceptions
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
    # Models
    "Page",
    "Rule",
    "RulesPage",
    "DailyStats",
    "Identity",
    "User",
    "UsersPage",
]
