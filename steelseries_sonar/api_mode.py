"""Classic / streamer mode helpers for the Sonar HTTP client.

The mode flag is the only mutable client state.  The volume path is derived
from it on every access so the two can never disagree.  Changing the mode
concurrently with volume or mute calls may build either path.
"""

from __future__ import annotations

import logging

from .const import (
    API_ENDPOINT_MODE,
    API_ENDPOINT_MODE_SET,
    API_ENDPOINT_VOLUME_CLASSIC,
    API_ENDPOINT_VOLUME_STREAMER,
    MODE_CLASSIC,
    MODE_STREAM,
)

_LOGGER = logging.getLogger(__name__)


class ModeAPI:  # mix-in – must be left of base client in MRO
    """Query and switch between classic and streamer mode."""

    # pylint: disable=no-member

    _streamer_mode: bool = False

    @property
    def streamer_mode(self) -> bool:
        """Return the locally tracked mode (True when streamer mode is active)."""
        return self._streamer_mode

    @property
    def volume_path(self) -> str:
        """Volume-settings path for the current mode."""
        return API_ENDPOINT_VOLUME_STREAMER if self._streamer_mode else API_ENDPOINT_VOLUME_CLASSIC

    async def is_streamer_mode(self) -> bool:
        """Ask the server whether streamer mode is active.

        Does not update the locally tracked flag.
        """
        mode = await self._request(f"{self._web_server_address}{API_ENDPOINT_MODE}")  # type: ignore[attr-defined]
        return mode == MODE_STREAM

    async def set_streamer_mode(self, streamer_mode: bool) -> bool:
        """Switch mode and return the mode the server reports afterwards."""
        mode = MODE_STREAM if streamer_mode else MODE_CLASSIC
        url = f"{self._web_server_address}{API_ENDPOINT_MODE_SET.format(mode=mode)}"  # type: ignore[attr-defined]
        result = await self._request(url, method="PUT")  # type: ignore[attr-defined]

        self._streamer_mode = result == MODE_STREAM
        if self._streamer_mode != streamer_mode:
            _LOGGER.debug("Requested %s mode but server reports %r", mode, result)
        return self._streamer_mode
