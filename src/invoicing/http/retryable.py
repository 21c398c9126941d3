# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx client wrapper that retries according to pluggable strategies."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, cast

import httpx

from .backoff import BackoffFunc
from .policy import CheckRetryFunc

logger = logging.getLogger(__name__)


@dataclass
class RetryableClient:
    """
    Retrying client built by ``new_retryable``.

    ``retry_max`` counts retries beyond the first attempt: 3 means up to four
    requests in total, 0 behaves like the plain client.
    """

    retry_max: int
    backoff_strategy: BackoffFunc
    check_retry: CheckRetryFunc
    client: httpx.Client

    def send(self, request: httpx.Request, **kwargs: Any) -> httpx.Response:
        """Send ``request``, retrying while ``check_retry`` allows and retries remain."""
        attempt = 0
        while True:
            response: httpx.Response | None = None
            error: Exception | None = None
            try:
                response = self.client.send(request, **kwargs)
            except Exception as exc:  # noqa: BLE001
                error = exc

            if attempt >= self.retry_max or not self.check_retry(request, response, error):
                if error is not None:
                    raise error
                return cast(httpx.Response, response)

            attempt += 1
            if response is not None:
                reason = f"status {response.status_code}"
                response.close()
            else:
                reason = type(error).__name__
            wait = self.backoff_strategy(attempt)
            logger.warning(
                "Retrying %s %s after %s (retry %d/%d, waiting %.2fs)",
                request.method,
                request.url,
                reason,
                attempt,
                self.retry_max,
                wait,
            )
            if wait > 0:
                time.sleep(wait)

    def request(
        self,
        method: str,
        url: httpx.URL | str,
        *,
        auth: Any = httpx.USE_CLIENT_DEFAULT,
        follow_redirects: Any = httpx.USE_CLIENT_DEFAULT,
        **kwargs: Any,
    ) -> httpx.Response:
        """Build a request on the inner client and send it with retries."""
        request = self.client.build_request(method, url, **kwargs)
        return self.send(request, auth=auth, follow_redirects=follow_redirects)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> RetryableClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["RetryableClient"]
