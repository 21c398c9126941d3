# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Search request helper for the invoice listing endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from ..config import DEFAULT_SEARCH_LIMIT


@dataclass
class SearchRequest:
    """Paging and filters for an invoice search."""

    limit: int = 0  # max items returned; 0 means DEFAULT_SEARCH_LIMIT
    offset: int = 0  # first item to return
    filters: dict[str, str] = field(default_factory=dict)

    def get_params(self) -> dict[str, str]:
        """
        Build query parameters for the search.

        Filter keys are lower-cased. An unset limit is defaulted on the request
        itself, so ``self.limit`` reads 30 afterwards.
        """
        params: dict[str, str] = {}
        for key, value in self.filters.items():
            params[key.lower()] = value

        if self.limit == 0:
            self.limit = DEFAULT_SEARCH_LIMIT
        params["limit"] = str(self.limit)
        params["offset"] = str(self.offset)
        return params

    def to_query_params(self) -> httpx.QueryParams:
        return httpx.QueryParams(self.get_params())
