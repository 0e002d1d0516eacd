"""Rules entity for the Management API.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

import warnings

from ._base import BaseManagementEntity, assert_not_null
from ._request import Request, VoidRequest
from .filters import RulesFilter
from .models import Rule, RulesPage

RULES_PATH = "api/v2/rules"


class RulesEntity(BaseManagementEntity):
    """Rules operations, see https://auth0.com/docs/api/management/v2#!/Rules.

    Not safe for concurrent mutation.
    """

    def list_all(self, filter: RulesFilter | None = None) -> Request[RulesPage]:
        """Request all the rules. Needs the ``read:rules`` scope.

        Args:
            filter: Optional filter

        Returns:
            A request to execute.

        """
        url = self._build_url(RULES_PATH, params=self._filter_params(filter))
        return self._new_request(url, "GET", RulesPage)

    def list(self, filter: RulesFilter | None = None) -> Request[list[Rule]]:
        """Request all the rules as a plain list. Needs the ``read:rules`` scope.

        Deprecated: the API will soon limit this call to the first page of
        results, use ``list_all`` instead. ``include_totals`` is never sent
        because the summary object would not parse as a list.

        Args:
            filter: Optional filter

        Returns:
            A request to execute.

        """
        warnings.warn(
            "RulesEntity.list() is deprecated, use RulesEntity.list_all()",
            DeprecationWarning,
            stacklevel=2,
        )
        params = self._filter_params(filter, exclude={"include_totals"})
        url = self._build_url(RULES_PATH, params=params)
        return self._new_request(url, "GET", list[Rule])

    def get(self, rule_id: str, filter: RulesFilter | None = None) -> Request[Rule]:
        """Request a rule. Needs the ``read:rules`` scope.

        Args:
            rule_id: Rule ID
            filter: Optional filter

        Returns:
            A request to execute.

        """
        assert_not_null(rule_id, "rule id")

        url = self._build_url(RULES_PATH, rule_id, params=self._filter_params(filter))
        return self._new_request(url, "GET", Rule)

    def create(self, rule: Rule) -> Request[Rule]:
        """Create a rule. Needs the ``create:rules`` scope.

        Args:
            rule: Rule data

        Returns:
            A request to execute.

        """
        assert_not_null(rule, "rule")

        url = self._build_url(RULES_PATH)
        return self._new_request(url, "POST", Rule, body=rule)

    def delete(self, rule_id: str) -> VoidRequest:
        """Delete an existing rule. Needs the ``delete:rules`` scope.

        Args:
            rule_id: Rule ID

        Returns:
            A request to execute.

        """
        assert_not_null(rule_id, "rule id")

        url = self._build_url(RULES_PATH, rule_id)
        return self._new_void_request(url, "DELETE")

    def update(self, rule_id: str, rule: Rule) -> Request[Rule]:
        """Update an existing rule. Needs the ``update:rules`` scope.

        Args:
            rule_id: Rule ID
            rule: Rule data to set, without ``id``

        Returns:
            A request to execute.

        """
        assert_not_null(rule_id, "rule id")
        assert_not_null(rule, "rule")

        url = self._build_url(RULES_PATH, rule_id)
        return self._new_request(url, "PATCH", Rule, body=rule)
