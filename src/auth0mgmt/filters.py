"""Query-parameter builders for Management API list and get calls.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Self


class BaseFilter:
    """Ordered collection of optional query parameters.

    Setters return the filter itself so calls can be chained. Setting the
    same parameter twice keeps the last value. Not safe for concurrent
    mutation.
    """

    def __init__(self) -> None:
        self._parameters: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> Self:
        self._parameters[name] = value
        return self

    def as_dict(self) -> dict[str, Any]:
        """Return a copy of the accumulated parameters, in insertion order."""
        return dict(self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseFilter):
            return NotImplemented
        return type(self) is type(other) and self._parameters == other._parameters

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"


class FieldsFilter(BaseFilter):
    """Filter able to select which fields the API returns."""

    def with_fields(self, fields: str, include_fields: bool = True) -> Self:
        """Only retrieve certain fields from the item.

        Args:
            fields: Comma-separated list of fields
            include_fields: Whether the listed fields are included or excluded

        """
        self._set("fields", fields)
        return self._set("include_fields", include_fields)


class RulesFilter(FieldsFilter):
    """Filter for the Rules endpoints."""

    def with_enabled(self, enabled: bool) -> Self:
        """Only retrieve rules that are enabled or disabled."""
        return self._set("enabled", enabled)

    def with_page(self, page_number: int, amount_per_page: int) -> Self:
        """Filter by page, page numbers start at 0."""
        self._set("page", page_number)
        return self._set("per_page", amount_per_page)

    def with_totals(self, include_totals: bool) -> Self:
        """Include the query summary (start, limit, total) in the response."""
        return self._set("include_totals", include_totals)


class UserFilter(FieldsFilter):
    """Filter for the Users endpoints."""

    def with_page(self, page_number: int, amount_per_page: int) -> Self:
        """Filter by page, page numbers start at 0."""
        self._set("page", page_number)
        return self._set("per_page", amount_per_page)

    def with_totals(self, include_totals: bool) -> Self:
        """Include the query summary (start, limit, total) in the response."""
        return self._set("include_totals", include_totals)

    def with_sort(self, sort: str) -> Self:
        """Sort the results, e.g. ``"created_at:1"``."""
        return self._set("sort", sort)

    def with_query(self, query: str) -> Self:
        """Filter users with a Lucene query string (search engine v3)."""
        self._set("search_engine", "v3")
        return self._set("q", query)

    def with_search_engine(self, search_engine: str) -> Self:
        """Select the search engine version used for ``q``."""
        return self._set("search_engine", search_engine)
