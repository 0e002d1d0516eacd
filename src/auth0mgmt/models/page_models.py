"""Paged list responses of the Management API.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class Page(BaseModel):
    """One page of results.

    When ``include_totals`` is not requested the API answers with a bare JSON
    array; it is accepted here as a page with no summary. Subclasses declare
    ``items`` under the JSON key of their resource.
    """

    model_config = ConfigDict(populate_by_name=True)

    items_key: ClassVar[str] = "items"

    start: int | None = None
    length: int | None = None
    total: int | None = None
    limit: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {cls.items_key: data}
        return data
