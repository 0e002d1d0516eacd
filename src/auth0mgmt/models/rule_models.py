"""Rule models for the Management API.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .page_models import Page


class Rule(BaseModel):
    """Rule model.

    Every field is optional so the same model serves as a partial update
    body. ``id`` must be left unset when updating.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None
    script: str | None = None
    order: int | None = None
    enabled: bool | None = None
    stage: str | None = None


class RulesPage(Page):
    """Page of rules."""

    items_key: ClassVar[str] = "rules"

    items: list[Rule] = Field(default_factory=list, alias="rules")
