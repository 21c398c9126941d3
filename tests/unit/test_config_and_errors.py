# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx

from invoicing import config
from invoicing.errors import ErrorCategory, categorize_exception, is_transient
from invoicing.http import server_errors_retry_policy
from invoicing.log import DEFAULT_LOG_LEVEL, setup_logging


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("INVOICING_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("INVOICING_HTTP_RETRIES", "0")
    monkeypatch.setenv("INVOICING_HTTP_BACKOFF", "1.5")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.retry_max == 0
    assert settings.backoff_wait == 1.5


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("INVOICING_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("INVOICING_HTTP_RETRIES", "-2")
    monkeypatch.setenv("INVOICING_HTTP_BACKOFF", "")

    settings = config.load_http_settings()

    assert settings.timeout == config.DEFAULT_TIMEOUT
    assert settings.retry_max == config.DEFAULT_RETRY_MAX
    assert settings.backoff_wait == 0.0


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("INVOICING_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("INVOICING_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_categorize_exception_maps_httpx_errors():
    assert categorize_exception(httpx.ConnectTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ReadTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.RemoteProtocolError("eof")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ConnectionResetError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("nope")) == ErrorCategory.UNKNOWN_ERROR
    assert categorize_exception(None) == ErrorCategory.NONE


def test_categorize_exception_follows_cause_chain():
    tls = httpx.ConnectError("handshake failed")
    tls.__cause__ = ssl.SSLError("certificate verify failed")
    assert categorize_exception(tls) == ErrorCategory.SSL_ERROR

    dns = httpx.ConnectError("lookup failed")
    dns.__cause__ = socket.gaierror(-2, "Name or service not known")
    assert categorize_exception(dns) == ErrorCategory.DNS_ERROR


def test_is_transient():
    assert is_transient(httpx.ConnectError("refused"))
    assert is_transient(httpx.PoolTimeout("busy"))
    assert not is_transient(ssl.SSLError("bad cert"))
    assert not is_transient(None)


def test_default_policy_retries_connection_errors_and_5xx():
    policy = server_errors_retry_policy()
    request = httpx.Request("GET", "https://api.example.test/")
    assert policy(request, None, httpx.ConnectError("refused"))
    assert policy(request, httpx.Response(500), None)
    assert policy(request, httpx.Response(599), None)
    assert not policy(request, httpx.Response(200), None)
    assert not policy(request, httpx.Response(429), None)
    assert not policy(request, None, ValueError("bad"))
    assert not policy(request, None, None)


def test_setup_logging_honours_env_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("INVOICING_LOG_LEVEL", "debug")
    setup_logging()
    assert captured["level"] == logging.DEBUG

    setup_logging("nonsense")
    assert captured["level"] == logging.WARNING


def test_setup_logging_defaults_to_warning(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.delenv("INVOICING_LOG_LEVEL", raising=False)
    setup_logging()
    assert DEFAULT_LOG_LEVEL == "WARNING"
    assert captured["level"] == logging.WARNING
