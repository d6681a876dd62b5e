"""aiohttp mocks that simulate SteelSeries Engine and Sonar responses.

Sessions are ``MagicMock`` objects whose ``request`` coroutine returns
responses usable as ``async with resp``, matching how ``SonarClient._request``
drives a real ``aiohttp.ClientSession``.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from tests.const import WEB_SERVER_ADDRESS


def make_response(status: int = 200, text: str = "") -> MagicMock:
    """Build an aiohttp-like response."""
    resp = MagicMock()
    resp.status = status
    resp.text = AsyncMock(return_value=text)
    resp.__aenter__.return_value = resp
    resp.__aexit__.return_value = None
    return resp


def make_json_response(payload: Any, status: int = 200) -> MagicMock:
    """Build a response whose body is *payload* serialised as JSON."""
    return make_response(status=status, text=json.dumps(payload))


def make_session(*responses: Any) -> MagicMock:
    """Build a session whose ``request`` yields *responses* in order.

    Exceptions among *responses* are raised instead of returned.
    """
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.request = AsyncMock(side_effect=list(responses))
    return session


def requested_urls(session: MagicMock) -> list[tuple[str, str]]:
    """Return ``(method, url)`` for every request issued through *session*."""
    return [(c.args[0], c.args[1]) for c in session.request.call_args_list]


def sub_apps_payload(
    is_enabled: bool = True,
    is_ready: bool = True,
    is_running: bool = True,
    address: str | None = WEB_SERVER_ADDRESS,
) -> dict[str, Any]:
    """Return a ``/subApps`` payload shaped like SteelSeries GG's."""
    return {
        "subApps": {
            "engine": {"isEnabled": True, "isReady": True, "isRunning": True, "metadata": {}},
            "sonar": {
                "isEnabled": is_enabled,
                "isReady": is_ready,
                "isRunning": is_running,
                "metadata": {"webServerAddress": address},
            },
        }
    }
