# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry policies: decide whether a finished attempt should be retried."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from ..errors import is_transient

CheckRetryFunc = Callable[[httpx.Request, httpx.Response | None, Exception | None], bool]


def server_errors_retry_policy() -> CheckRetryFunc:
    """Retry on connection-level failures and 5xx responses only."""

    def check_retry(request: httpx.Request, response: httpx.Response | None, error: Exception | None) -> bool:  # noqa: ARG001
        if error is not None:
            return is_transient(error)
        if response is None:
            return False
        return 500 <= response.status_code <= 599

    return check_retry


__all__ = ["CheckRetryFunc", "server_errors_retry_policy"]
