# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Backoff strategies: map a retry attempt number to seconds to wait."""

from __future__ import annotations

from collections.abc import Callable

BackoffFunc = Callable[[int], float]


def constant_backoff(wait: float) -> BackoffFunc:
    """Wait the same amount before every retry."""
    wait = max(0.0, wait)

    def strategy(attempt: int) -> float:  # noqa: ARG001
        return wait

    return strategy


def exponential_backoff(initial: float, factor: float = 2.0, maximum: float | None = None) -> BackoffFunc:
    """Wait ``initial * factor ** (attempt - 1)`` seconds, optionally capped at ``maximum``."""

    def strategy(attempt: int) -> float:
        delay = max(0.0, initial * factor ** max(0, attempt - 1))
        if maximum is not None:
            delay = min(delay, maximum)
        return delay

    return strategy


__all__ = ["BackoffFunc", "constant_backoff", "exponential_backoff"]
