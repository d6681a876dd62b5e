"""Volume and mute helpers for the Sonar HTTP client.

All networking (`_request`) is supplied by ``api_base.SonarClient`` and the
mode-dependent path by ``api_mode.ModeAPI``.  This mix-in must therefore be
inherited **before** the base client in the final MRO.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .api_base import (
    ChannelNotFoundError,
    InvalidVolumeError,
    SliderNotFoundError,
    format_number,
)
from .const import (
    CHANNEL_NAMES,
    DEFAULT_STREAMER_SLIDER,
    MUTE_SEGMENT_CLASSIC,
    MUTE_SEGMENT_STREAMER,
    STREAMER_SLIDER_NAMES,
    VOLUME_MAX,
    VOLUME_MIN,
    VOLUME_SEGMENT,
    ChannelName,
    StreamerSliderName,
)

_LOGGER = logging.getLogger(__name__)


class VolumeAPI:  # mix-in – must be left of base client in MRO
    """Per-channel volume and mute controls."""

    # pylint: disable=no-member

    def _channel_path(self, channel: ChannelName, streamer_slider: StreamerSliderName) -> str:
        """Validate *channel* (and *streamer_slider* in streamer mode) and build the URL prefix."""
        if channel not in CHANNEL_NAMES:
            raise ChannelNotFoundError(channel)

        path = self.volume_path  # type: ignore[attr-defined]
        if self.streamer_mode:  # type: ignore[attr-defined]
            if streamer_slider not in STREAMER_SLIDER_NAMES:
                raise SliderNotFoundError(streamer_slider)
            path = f"{path}/{streamer_slider}"

        return f"{self._web_server_address}{path}/{channel}"  # type: ignore[attr-defined]

    async def get_volume_data(self) -> dict[str, Any]:
        """Return the raw volume tree for the current mode."""
        url = f"{self._web_server_address}{self.volume_path}"  # type: ignore[attr-defined]
        return await self._request(url)  # type: ignore[attr-defined]

    async def set_volume(
        self,
        channel: ChannelName,
        volume: float,
        streamer_slider: StreamerSliderName = DEFAULT_STREAMER_SLIDER,
    ) -> Any:
        """Set *channel* to *volume* (0..1).

        *streamer_slider* picks the streaming or monitoring mix and is ignored
        in classic mode.
        """
        channel_url = self._channel_path(channel, streamer_slider)
        if isinstance(volume, bool) or not VOLUME_MIN <= volume <= VOLUME_MAX:
            raise InvalidVolumeError(volume)

        url = f"{channel_url}/{VOLUME_SEGMENT}/{format_number(volume)}"
        _LOGGER.debug("Setting %s volume to %s", channel, volume)
        return await self._request(url, method="PUT")  # type: ignore[attr-defined]

    async def mute_channel(
        self,
        channel: ChannelName,
        muted: bool,
        streamer_slider: StreamerSliderName = DEFAULT_STREAMER_SLIDER,
    ) -> Any:
        """Mute or unmute *channel*."""
        channel_url = self._channel_path(channel, streamer_slider)
        segment = MUTE_SEGMENT_STREAMER if self.streamer_mode else MUTE_SEGMENT_CLASSIC  # type: ignore[attr-defined]

        url = f"{channel_url}/{segment}/{json.dumps(bool(muted))}"
        _LOGGER.debug("Setting %s mute to %s", channel, muted)
        return await self._request(url, method="PUT")  # type: ignore[attr-defined]
