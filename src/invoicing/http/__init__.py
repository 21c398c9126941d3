# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .backoff import BackoffFunc, constant_backoff, exponential_backoff
from .client import Requester
from .factory import new, new_retryable, new_retryable_from_settings
from .options import (
    ClientOptions,
    Option,
    RetryableOption,
    RetryOptions,
    with_backoff_strategy,
    with_retry_policy,
    with_timeout,
)
from .policy import CheckRetryFunc, server_errors_retry_policy
from .retryable import RetryableClient

__all__ = [
    "BackoffFunc",
    "CheckRetryFunc",
    "ClientOptions",
    "Option",
    "Requester",
    "RetryOptions",
    "RetryableClient",
    "RetryableOption",
    "constant_backoff",
    "exponential_backoff",
    "new",
    "new_retryable",
    "new_retryable_from_settings",
    "server_errors_retry_policy",
    "with_backoff_strategy",
    "with_retry_policy",
    "with_timeout",
]
