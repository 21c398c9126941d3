# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Invoicing API client utilities.

Provides query-parameter building for invoice searches and an httpx client
factory with plain and retrying variants configured through functional
options.
"""

from .config import DEFAULT_SEARCH_LIMIT, DEFAULT_TIMEOUT, HttpSettings, load_http_settings
from .errors import ErrorCategory, categorize_exception
from .http import (
    RetryableClient,
    new,
    new_retryable,
    new_retryable_from_settings,
    with_backoff_strategy,
    with_retry_policy,
    with_timeout,
)
from .invoice import SearchRequest
from .log import setup_logging
from .version import __version__

__all__ = [
    "DEFAULT_SEARCH_LIMIT",
    "DEFAULT_TIMEOUT",
    "ErrorCategory",
    "HttpSettings",
    "RetryableClient",
    "SearchRequest",
    "categorize_exception",
    "load_http_settings",
    "new",
    "new_retryable",
    "new_retryable_from_settings",
    "setup_logging",
    "with_backoff_strategy",
    "with_retry_policy",
    "with_timeout",
    "__version__",
]
