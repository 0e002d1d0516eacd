"""Example usage of the auth0mgmt SDK with a refreshing token."""

import logging
import os
import time
from datetime import date, timedelta

import httpx

from auth0mgmt import (
    BearerTokenAuth,
    CallableTokenProvider,
    ManagementAPI,
    RateLimitError,
    Rule,
    RulesFilter,
)
from auth0mgmt.exceptions import APIError


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DOMAIN = os.environ.get("AUTH0_DOMAIN", "tenant.auth0.com")


class ClientCredentialsTokens:
    """Fetches Management API tokens with the client credentials grant."""

    def __init__(self, client_id: str, client_secret: str) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._token: str | None = None
        self._expires_at = 0.0

    def __call__(self) -> str:
        if self._token is None or time.monotonic() > self._expires_at - 60:
            response = httpx.post(
                f"https://{DOMAIN}/oauth/token",
                json={
                    "grant_type": "client_credentials",
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "audience": f"https://{DOMAIN}/api/v2/",
                },
            )
            response.raise_for_status()
            body = response.json()
            self._token = body["access_token"]
            self._expires_at = time.monotonic() + body["expires_in"]
        return self._token


def main() -> None:
    """Execute main example function."""
    tokens = ClientCredentialsTokens(
        os.environ["AUTH0_CLIENT_ID"], os.environ["AUTH0_CLIENT_SECRET"]
    )
    client = httpx.Client(auth=BearerTokenAuth(CallableTokenProvider(tokens)), timeout=10.0)

    # The token passed here is a placeholder, the client auth stamps the real one
    with client, ManagementAPI(DOMAIN, "placeholder", client=client) as api:
        logger.info("=== Stats Example ===")
        logger.info("Active users: %s", api.stats.get_active_users_count().execute())

        today = date.today()
        for day in api.stats.get_daily_stats(today - timedelta(days=7), today).execute():
            logger.info("%s: %s logins", day.date, day.logins)

        logger.info("=== Rules Example ===")
        created = api.rules.create(
            Rule(
                name="example-rule",
                script="function (user, context, callback) { callback(null, user, context); }",
                enabled=False,
            )
        ).execute()
        logger.info("Created rule %s", created.id)

        try:
            page = api.rules.list_all(RulesFilter().with_totals(True).with_page(0, 20)).execute()
            logger.info("Tenant has %s rules", page.total)
        except RateLimitError as e:
            logger.warning("Rate limited, retry after %s", e.reset)
        except APIError as e:
            logger.error("Listing rules failed: %s", e)
        finally:
            api.rules.delete(created.id).execute()
            logger.info("Deleted rule %s", created.id)


if __name__ == "__main__":
    main()
