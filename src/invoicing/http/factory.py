# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client factories assembled from defaults plus functional options."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from .options import ClientOptions, Option, RetryableOption, RetryOptions
from .retryable import RetryableClient

logger = logging.getLogger(__name__)


def _build_client(timeout: float) -> httpx.Client:
    # httpx spells "no timeout" as None.
    return httpx.Client(timeout=timeout if timeout > 0 else None)


def new(*options: Option) -> httpx.Client:
    """
    Build an ``httpx.Client`` that keeps connections to destination servers.

    Only ``Option`` values are accepted; retry-specific options raise TypeError.
    """
    config = ClientOptions()
    for option in options:
        if not isinstance(option, Option):
            raise TypeError(f"{type(option).__name__} cannot configure a plain client; use new_retryable()")
        option.apply_client(config)

    logger.debug("Building HTTP client timeout=%s", config.timeout)
    return _build_client(config.timeout)


def new_retryable(retry_max: int, *options: RetryableOption) -> RetryableClient:
    """
    Build a RetryableClient that retries failed requests.

    ``retry_max`` is the number of retries after the original request. Any
    ``Option`` accepted by ``new`` is also accepted here.
    """
    config = RetryOptions()
    for option in options:
        option.apply_retryable(config)

    logger.debug("Building retryable HTTP client retry_max=%d timeout=%s", retry_max, config.timeout)
    return RetryableClient(
        retry_max=retry_max,
        backoff_strategy=config.backoff_strategy,
        check_retry=config.check_retry,
        client=_build_client(config.timeout),
    )


def new_retryable_from_settings(settings: HttpSettings | None = None) -> RetryableClient:
    """Build a RetryableClient from environment-backed HttpSettings."""
    settings = settings or load_http_settings()
    return new_retryable(settings.retry_max, *settings.retryable_options())


__all__ = ["new", "new_retryable", "new_retryable_from_settings"]
