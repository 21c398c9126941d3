# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Environment-backed configuration for the invoicing client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .http.options import RetryableOption

DEFAULT_TIMEOUT = 10.0
DEFAULT_RETRY_MAX = 3
DEFAULT_SEARCH_LIMIT = 30


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = DEFAULT_TIMEOUT
    retry_max: int = DEFAULT_RETRY_MAX
    backoff_wait: float = 0.0

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        retry_max = _int_env("INVOICING_HTTP_RETRIES", cls.retry_max)
        if retry_max < 0:
            retry_max = cls.retry_max
        return cls(
            timeout=_float_env("INVOICING_HTTP_TIMEOUT", cls.timeout),
            retry_max=retry_max,
            backoff_wait=max(0.0, _float_env("INVOICING_HTTP_BACKOFF", cls.backoff_wait)),
        )

    def retryable_options(self) -> list[RetryableOption]:
        """Translate these settings into options for ``new_retryable``."""
        from .http.backoff import constant_backoff
        from .http.options import with_backoff_strategy, with_timeout

        # with_timeout drops negative values, so a bad env timeout keeps the default.
        return [
            with_timeout(self.timeout),
            with_backoff_strategy(constant_backoff(self.backoff_wait)),
        ]


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
