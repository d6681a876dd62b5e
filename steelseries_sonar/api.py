"""SteelSeries Sonar API façade.

Composes the feature mixins with the transport client from ``api_base.py``
and provides the asynchronous factory, :meth:`Sonar.create`, which is the
supported way to obtain a client.
"""

from __future__ import annotations

import logging
import ssl
from pathlib import Path

from aiohttp import ClientSession

from .api_base import (
    ChannelNotFoundError,
    ConfigurationNotFoundError,
    InvalidMixVolumeError,
    InvalidVolumeError,
    ServerNotAccessibleError,
    ServerNotReadyError,
    ServerNotRunningError,
    SliderNotFoundError,
    SonarClient,
    SonarConnectionError,
    SonarError,
    SonarInvalidDataError,
    SonarNotEnabledError,
    SonarTimeoutError,
    WebServerAddressNotFoundError,
)
from .api_chat_mix import ChatMixAPI
from .api_discovery import DiscoveryAPI
from .api_mode import ModeAPI
from .api_volume import VolumeAPI
from .const import DEFAULT_TIMEOUT

_LOGGER = logging.getLogger(__name__)


# Order is important: mixins first, base client last so its `__init__` is
# called exactly once via Python's MRO.
class Sonar(VolumeAPI, ChatMixAPI, ModeAPI, DiscoveryAPI, SonarClient):
    """Client for the SteelSeries Sonar audio mixer.

    Do not instantiate directly; ``await Sonar.create()`` returns a client
    whose addresses are already resolved.

    Example:
        async with await Sonar.create() as sonar:
            await sonar.set_volume("game", 0.5)
    """

    def __init__(
        self,
        streamer_mode: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        ssl_context: ssl.SSLContext | None = None,
        session: ClientSession | None = None,
    ) -> None:
        super().__init__(timeout=timeout, ssl_context=ssl_context, session=session)
        self._streamer_mode = streamer_mode
        self._base_url = ""
        self._web_server_address = ""

    @classmethod
    async def create(
        cls,
        app_data_path: Path | str | None = None,
        streamer_mode: bool | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        ssl_context: ssl.SSLContext | None = None,
        session: ClientSession | None = None,
    ) -> Sonar:
        """Discover the Sonar web server and return a ready client.

        Args:
            app_data_path: Location of ``coreProps.json``; the platform default
                is used when omitted.
            streamer_mode: Initial mode. When omitted the server is asked, and
                classic mode is assumed if that fails.
            timeout: Total per-request timeout (seconds).
            ssl_context: Custom SSL context for the control plane.
            session: Optional shared *aiohttp* session.

        Raises:
            ConfigurationNotFoundError: ``coreProps.json`` missing or corrupt.
            ServerNotAccessibleError: The control plane answered non-200.
            SonarNotEnabledError: Sonar is disabled.
            ServerNotReadyError: Sonar is not ready yet.
            ServerNotRunningError: Sonar is not running.
            WebServerAddressNotFoundError: No web-server address published.
            SonarConnectionError: The control plane could not be reached.
        """
        sonar = cls(
            streamer_mode=bool(streamer_mode),
            timeout=timeout,
            ssl_context=ssl_context,
            session=session,
        )
        try:
            await sonar.resolve(app_data_path)
        except BaseException:
            await sonar.close()
            raise

        if streamer_mode is None:
            try:
                sonar._streamer_mode = await sonar.is_streamer_mode()
            except Exception as err:  # noqa: BLE001
                _LOGGER.debug("Could not detect Sonar mode, assuming classic: %s", err)
                sonar._streamer_mode = False

        _LOGGER.debug(
            "Connected to Sonar at %s (%s mode)",
            sonar.web_server_address,
            "streamer" if sonar.streamer_mode else "classic",
        )
        return sonar

    async def __aenter__(self) -> Sonar:
        return self


__all__ = [
    "Sonar",
    "SonarError",
    "ConfigurationNotFoundError",
    "ServerNotAccessibleError",
    "SonarNotEnabledError",
    "ServerNotReadyError",
    "ServerNotRunningError",
    "WebServerAddressNotFoundError",
    "ChannelNotFoundError",
    "SliderNotFoundError",
    "InvalidVolumeError",
    "InvalidMixVolumeError",
    "SonarConnectionError",
    "SonarTimeoutError",
    "SonarInvalidDataError",
]
