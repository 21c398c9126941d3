# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Invoice API request helpers."""

from .search import SearchRequest

__all__ = ["SearchRequest"]
