# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Functional options for the client factory.

Two capability levels exist. ``RetryableOption`` configures a retryable
client only. ``Option`` subclasses it and can also configure a plain client,
so any ``Option`` is accepted wherever a ``RetryableOption`` is expected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

from ..config import DEFAULT_TIMEOUT
from .backoff import BackoffFunc, constant_backoff
from .policy import CheckRetryFunc, server_errors_retry_policy


@dataclass
class ClientOptions:
    """Staged configuration for a plain client."""

    timeout: float = DEFAULT_TIMEOUT


@dataclass
class RetryOptions(ClientOptions):
    """Staged configuration for a retryable client."""

    backoff_strategy: BackoffFunc = field(default_factory=lambda: constant_backoff(0))
    check_retry: CheckRetryFunc = field(default_factory=server_errors_retry_policy)


class RetryableOption(ABC):
    """Option accepted by ``new_retryable``."""

    @abstractmethod
    def apply_retryable(self, options: RetryOptions) -> None: ...


class Option(RetryableOption):
    """Option accepted by both ``new`` and ``new_retryable``."""

    @abstractmethod
    def apply_client(self, options: ClientOptions) -> None: ...

    def apply_retryable(self, options: RetryOptions) -> None:
        self.apply_client(options)


class _ClientOptionFunc(Option):
    def __init__(self, func: Callable[[ClientOptions], None]):
        self._func = func

    def apply_client(self, options: ClientOptions) -> None:
        self._func(options)


class _RetryableOptionFunc(RetryableOption):
    def __init__(self, func: Callable[[RetryOptions], None]):
        self._func = func

    def apply_retryable(self, options: RetryOptions) -> None:
        self._func(options)


def with_timeout(timeout: float) -> Option:
    """
    Set the per-request timeout in seconds.

    When retrying, each attempt counts from zero towards this timeout. A value
    of 0 disables timeouts; negative values are ignored.
    """

    def apply(options: ClientOptions) -> None:
        if timeout >= 0:
            options.timeout = timeout

    return _ClientOptionFunc(apply)


def with_backoff_strategy(strategy: BackoffFunc) -> RetryableOption:
    """Set the wait time between retries."""

    def apply(options: RetryOptions) -> None:
        options.backoff_strategy = strategy

    return _RetryableOptionFunc(apply)


def with_retry_policy(check_retry: CheckRetryFunc) -> RetryableOption:
    """Set the predicate that decides whether an attempt is retried."""

    def apply(options: RetryOptions) -> None:
        options.check_retry = check_retry

    return _RetryableOptionFunc(apply)


__all__ = [
    "ClientOptions",
    "Option",
    "RetryOptions",
    "RetryableOption",
    "with_backoff_strategy",
    "with_retry_policy",
    "with_timeout",
]
