# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Minimal request-execution protocol."""

from typing import Protocol

import httpx


class Requester(Protocol):
    """Anything that can execute a prepared request; ``httpx.Client`` qualifies."""

    def send(self, request: httpx.Request) -> httpx.Response: ...
