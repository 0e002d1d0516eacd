"""Tests for the Rules entity.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
import respx
from auth0mgmt import (
    InvalidArgumentError,
    ManagementAPI,
    Rule,
    RulesEntity,
    RulesFilter,
    RulesPage,
)

RULES_URL = "https://tenant.example.com/api/v2/rules"


@pytest.fixture
def offline_rules(api_token: str) -> tuple[RulesEntity, MagicMock]:
    """Rules entity on top of a transport double.

    Returns:
        The entity and the double, which records every call made on it.

    """
    transport = MagicMock(spec=httpx.Client)
    return RulesEntity(transport, "https://tenant.example.com/", api_token), transport


def test_list_all_forwards_every_filter_parameter(api: ManagementAPI) -> None:
    rules_filter = RulesFilter().with_enabled(True).with_totals(True).with_page(2, 10)

    request = api.rules.list_all(rules_filter)

    assert request.method == "GET"
    assert request.url == (
        f"{RULES_URL}?enabled=true&include_totals=true&page=2&per_page=10"
    )


def test_list_all_without_filter(api: ManagementAPI) -> None:
    assert api.rules.list_all().url == RULES_URL


def test_deprecated_list_drops_include_totals(api: ManagementAPI) -> None:
    rules_filter = RulesFilter().with_totals(True).with_fields("name,id", True)

    with pytest.warns(DeprecationWarning):
        legacy = api.rules.list(rules_filter)
    paged = api.rules.list_all(rules_filter)

    assert "include_totals" not in legacy.url
    assert dict(httpx.URL(legacy.url).params) == {
        "fields": "name,id",
        "include_fields": "true",
    }
    assert "include_totals=true" in paged.url


def test_get_adds_id_and_filter(api: ManagementAPI) -> None:
    request = api.rules.get("rul_123", RulesFilter().with_fields("name", False))

    assert request.method == "GET"
    assert request.url == f"{RULES_URL}/rul_123?fields=name&include_fields=false"


def test_create_sets_body(api: ManagementAPI) -> None:
    rule = Rule(name="my-rule", script="function (u, c, cb) { cb(null, u, c); }")

    request = api.rules.create(rule)

    assert request.method == "POST"
    assert request.url == RULES_URL
    assert request.body is rule


def test_update_uses_patch(api: ManagementAPI) -> None:
    request = api.rules.update("rul_123", Rule(enabled=False))

    assert request.method == "PATCH"
    assert request.url == f"{RULES_URL}/rul_123"


def test_ids_are_encoded_as_one_segment(api: ManagementAPI) -> None:
    assert api.rules.delete("a/b c").url == f"{RULES_URL}/a%2Fb%20c"


def test_every_request_carries_the_captured_token(
    api: ManagementAPI, api_token: str
) -> None:
    requests = [
        api.rules.list_all(),
        api.rules.get("rul_123"),
        api.rules.create(Rule(name="r")),
        api.rules.update("rul_123", Rule(name="r")),
        api.rules.delete("rul_123"),
        api.rules.get("rul_123"),
    ]

    for request in requests:
        assert request.headers["Authorization"] == f"Bearer {api_token}"


@pytest.mark.parametrize(
    "build",
    [
        lambda rules: rules.get(None),
        lambda rules: rules.get(""),
        lambda rules: rules.create(None),
        lambda rules: rules.update(None, Rule()),
        lambda rules: rules.update("rul_123", None),
        lambda rules: rules.delete(None),
    ],
)
def test_missing_arguments_fail_before_any_call(
    offline_rules: tuple[RulesEntity, MagicMock], build: Any
) -> None:
    rules, transport = offline_rules

    with pytest.raises(InvalidArgumentError):
        build(rules)

    assert transport.mock_calls == []


def test_missing_rule_id_names_the_argument(
    offline_rules: tuple[RulesEntity, MagicMock],
) -> None:
    rules, _ = offline_rules

    with pytest.raises(InvalidArgumentError, match="'rule id' cannot be null!"):
        rules.delete(None)


def test_delete_end_to_end(
    mock_api: respx.MockRouter, api: ManagementAPI, api_token: str
) -> None:
    route = mock_api.delete("/api/v2/rules/rule-id-1").mock(
        return_value=httpx.Response(204)
    )

    request = api.rules.delete("rule-id-1")

    assert request.method == "DELETE"
    assert request.url == "https://tenant.example.com/api/v2/rules/rule-id-1"
    assert request.headers == {"Authorization": f"Bearer {api_token}"}
    assert request.body is None
    assert request.execute() is None

    sent = route.calls.last.request
    assert sent.headers["Authorization"] == f"Bearer {api_token}"
    assert sent.content == b""


def test_list_all_parses_paged_response(
    mock_api: respx.MockRouter,
    api: ManagementAPI,
    sample_rule_data: dict[str, Any],
) -> None:
    mock_api.route(method="GET", path="/api/v2/rules").mock(
        return_value=httpx.Response(
            200,
            json={"start": 0, "limit": 50, "length": 1, "total": 1, "rules": [sample_rule_data]},
        )
    )

    page = api.rules.list_all(RulesFilter().with_totals(True)).execute()

    assert isinstance(page, RulesPage)
    assert page.total == 1
    assert page.limit == 50
    assert [rule.id for rule in page.items] == ["rul_123"]


def test_list_all_parses_bare_list(
    mock_api: respx.MockRouter,
    api: ManagementAPI,
    sample_rule_data: dict[str, Any],
) -> None:
    mock_api.route(method="GET", path="/api/v2/rules").mock(
        return_value=httpx.Response(200, json=[sample_rule_data, sample_rule_data])
    )

    page = api.rules.list_all().execute()

    assert page.total is None
    assert len(page.items) == 2


def test_deprecated_list_parses_list(
    mock_api: respx.MockRouter,
    api: ManagementAPI,
    sample_rule_data: dict[str, Any],
) -> None:
    route = mock_api.route(method="GET", path="/api/v2/rules").mock(
        return_value=httpx.Response(200, json=[sample_rule_data])
    )

    with pytest.warns(DeprecationWarning):
        request = api.rules.list(RulesFilter().with_totals(True))
    rules = request.execute()

    assert [rule.name for rule in rules] == ["add-roles"]
    assert "include_totals" not in route.calls.last.request.url.params


def test_create_sends_only_set_fields(
    mock_api: respx.MockRouter,
    api: ManagementAPI,
    sample_rule_data: dict[str, Any],
) -> None:
    route = mock_api.post("/api/v2/rules").mock(
        return_value=httpx.Response(201, json=sample_rule_data)
    )

    created = api.rules.create(Rule(name="add-roles", script="x", enabled=True)).execute()

    assert created.id == "rul_123"
    assert json.loads(route.calls.last.request.content) == {
        "name": "add-roles",
        "script": "x",
        "enabled": True,
    }
