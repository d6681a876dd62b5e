"""Service discovery for the Sonar web server.

Discovery is a two-hop lookup:

1. SteelSeries Engine writes ``coreProps.json`` with the ``host:port`` of its
   HTTPS control plane.
2. The control plane's ``/subApps`` endpoint lists every sub-application and,
   once Sonar is enabled, ready and running, the address of its web server.

All networking is provided by the base client (``api_base.SonarClient``).
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .api_base import (
    ConfigurationNotFoundError,
    ServerNotReadyError,
    ServerNotRunningError,
    SonarInvalidDataError,
    SonarNotEnabledError,
    WebServerAddressNotFoundError,
)
from .const import (
    API_ENDPOINT_SUB_APPS,
    CORE_PROPS_FILENAME,
    ENGINE_DIRECTORY,
    WINDOWS_PROGRAM_DATA_DEFAULT,
    WINDOWS_PROGRAM_DATA_ENV,
)
from .models import CoreProps, SonarSubApp

_LOGGER = logging.getLogger(__name__)


def default_app_data_path() -> Path:
    """Return where SteelSeries Engine keeps ``coreProps.json`` on this platform."""
    if sys.platform == "win32":
        program_data = os.environ.get(WINDOWS_PROGRAM_DATA_ENV) or WINDOWS_PROGRAM_DATA_DEFAULT
        return Path(program_data) / "SteelSeries" / ENGINE_DIRECTORY / CORE_PROPS_FILENAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / ENGINE_DIRECTORY / CORE_PROPS_FILENAME
    return Path.home() / ".local" / "share" / ENGINE_DIRECTORY / CORE_PROPS_FILENAME


def read_core_props(path: Path) -> CoreProps:
    """Read and validate ``coreProps.json`` (blocking).

    Missing and corrupt files are reported the same way, as the remedy is the
    same: locate or reinstall SteelSeries Engine.
    """
    try:
        if not path.is_file():
            raise ConfigurationNotFoundError(str(path))
        return CoreProps.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as err:
        _LOGGER.debug("Unusable SteelSeries Engine config %s: %s", path, err)
        raise ConfigurationNotFoundError(str(path)) from err


def parse_sub_app(payload: Any) -> SonarSubApp:
    """Validate a ``/subApps`` payload and return the Sonar entry."""
    try:
        return SonarSubApp.from_sub_apps(payload)
    except (KeyError, TypeError, ValidationError) as err:
        raise SonarInvalidDataError(f"Unexpected /subApps payload: {err}") from err


def check_sub_app(sub_app: SonarSubApp) -> str:
    """Return the web-server address once Sonar reports itself usable.

    Flags are checked in a fixed order (enabled, ready, running) so the first
    unmet precondition is the one reported. A disabled entry is not inspected
    any further.
    """
    if not sub_app.is_enabled:
        raise SonarNotEnabledError()
    if sub_app.is_ready is None or sub_app.is_running is None:
        raise SonarInvalidDataError("Sonar entry in /subApps lacks isReady/isRunning")
    if not sub_app.is_ready:
        raise ServerNotReadyError()
    if not sub_app.is_running:
        raise ServerNotRunningError()

    address = sub_app.web_server_address
    if not address or address == "null":
        raise WebServerAddressNotFoundError()
    return address


class DiscoveryAPI:  # mixin – must appear *before* the base client in MRO
    """Resolve the control plane and the Sonar web server."""

    # The mixin relies on the base client providing `_request`.

    _base_url: str = ""
    _web_server_address: str = ""

    async def _load_base_url(self, app_data_path: Path) -> str:
        """Read ``coreProps.json`` off the event loop and build the control-plane URL."""
        core_props = await asyncio.to_thread(read_core_props, app_data_path)
        self._base_url = f"https://{core_props.address}"
        _LOGGER.debug("SteelSeries Engine control plane at %s", self._base_url)
        return self._base_url

    async def _load_server_address(self) -> str:
        """Ask the control plane where the Sonar web server lives."""
        payload = await self._request(f"{self._base_url}{API_ENDPOINT_SUB_APPS}")  # type: ignore[attr-defined]
        self._web_server_address = check_sub_app(parse_sub_app(payload))
        _LOGGER.debug("Sonar web server at %s", self._web_server_address)
        return self._web_server_address

    async def resolve(self, app_data_path: Path | str | None = None) -> str:
        """Run both discovery hops and return the Sonar web-server address."""
        path = Path(app_data_path) if app_data_path is not None else default_app_data_path()
        await self._load_base_url(path)
        return await self._load_server_address()

    @property
    def base_url(self) -> str:
        """Control-plane URL (``https://host:port``)."""
        return self._base_url

    @property
    def web_server_address(self) -> str:
        """Resolved Sonar web-server address."""
        return self._web_server_address
