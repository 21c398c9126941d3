# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy for transport failures."""

from __future__ import annotations

import socket
import ssl
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    SSL_ERROR = "SSL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


# Failures worth another attempt; TLS and unknown errors will not fix themselves.
TRANSIENT_CATEGORIES = frozenset(
    {
        ErrorCategory.TIMEOUT,
        ErrorCategory.CONNECTION_ERROR,
        ErrorCategory.DNS_ERROR,
    }
)


def _root_cause(exc: BaseException) -> BaseException:
    seen = {id(exc)}
    current = exc
    while current.__cause__ is not None and id(current.__cause__) not in seen:
        current = current.__cause__
        seen.add(id(current))
    return current


def categorize_exception(exc: BaseException | None) -> ErrorCategory:
    """
    Map httpx/socket/ssl exceptions to ErrorCategory.

    httpx wraps low-level errors, so the cause chain is inspected for TLS and
    name resolution failures before falling back to the httpx class.
    """
    if exc is None:
        return ErrorCategory.NONE

    cause = _root_cause(exc)
    if isinstance(cause, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR
    if isinstance(cause, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def is_transient(exc: BaseException | None) -> bool:
    """Return True when the exception is a connection-level failure worth retrying."""
    return categorize_exception(exc) in TRANSIENT_CATEGORIES


__all__ = ["ErrorCategory", "TRANSIENT_CATEGORIES", "categorize_exception", "is_transient"]
