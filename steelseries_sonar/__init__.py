"""Async client for the SteelSeries Sonar audio mixer."""

from __future__ import annotations

from .api import (
    ChannelNotFoundError,
    ConfigurationNotFoundError,
    InvalidMixVolumeError,
    InvalidVolumeError,
    ServerNotAccessibleError,
    ServerNotReadyError,
    ServerNotRunningError,
    SliderNotFoundError,
    Sonar,
    SonarConnectionError,
    SonarError,
    SonarInvalidDataError,
    SonarNotEnabledError,
    SonarTimeoutError,
    WebServerAddressNotFoundError,
)
from .api_discovery import default_app_data_path
from .const import (
    CHANNEL_NAMES,
    STREAMER_SLIDER_NAMES,
    VERSION,
    ChannelName,
    StreamerSliderName,
)
from .models import ChatMixData

__version__ = VERSION

__all__ = [
    "Sonar",
    "ChatMixData",
    "ChannelName",
    "StreamerSliderName",
    "CHANNEL_NAMES",
    "STREAMER_SLIDER_NAMES",
    "default_app_data_path",
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
