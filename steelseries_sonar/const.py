"""Constants for the SteelSeries Sonar client.

This module defines all constants used throughout the client, including
default values, configuration-file locations, channel names and API
endpoints.

Configuration:
    - Default request timeout
    - Per-platform location of SteelSeries Engine's ``coreProps.json``

Audio routing:
    - Channel names accepted by the volume and mute endpoints
    - Streamer-mode slider names

API Endpoints:
    - Control-plane discovery endpoint
    - Mode, volume and chat-mix endpoints on the Sonar web server
"""

from __future__ import annotations

from typing import Literal

VERSION = "0.1.0"

# Defaults
DEFAULT_TIMEOUT = 5  # seconds - applied uniformly to every request

# SteelSeries Engine configuration file
CORE_PROPS_FILENAME = "coreProps.json"
ENGINE_DIRECTORY = "SteelSeries Engine 3"
WINDOWS_PROGRAM_DATA_ENV = "ProgramData"
WINDOWS_PROGRAM_DATA_DEFAULT = "C:\\ProgramData"

# Channels (chatCapture is the microphone)
ChannelName = Literal["master", "game", "chatRender", "media", "aux", "chatCapture"]
CHANNEL_NAMES: tuple[str, ...] = (
    "master",
    "game",
    "chatRender",
    "media",
    "aux",
    "chatCapture",
)

# Streamer-mode sliders
StreamerSliderName = Literal["streaming", "monitoring"]
STREAMER_SLIDER_NAMES: tuple[str, ...] = ("streaming", "monitoring")
DEFAULT_STREAMER_SLIDER: StreamerSliderName = "streaming"

# Value ranges
VOLUME_MIN = 0.0
VOLUME_MAX = 1.0
CHAT_MIX_MIN = -1.0
CHAT_MIX_MAX = 1.0

# Modes
MODE_STREAM = "stream"
MODE_CLASSIC = "classic"

# Mute path segments
MUTE_SEGMENT_CLASSIC = "Mute"
MUTE_SEGMENT_STREAMER = "isMuted"
VOLUME_SEGMENT = "Volume"

# Control-plane endpoints
API_ENDPOINT_SUB_APPS = "/subApps"
SUB_APP_NAME = "sonar"

# Sonar web-server endpoints
API_ENDPOINT_MODE = "/mode/"
API_ENDPOINT_MODE_SET = "/mode/{mode}"
API_ENDPOINT_VOLUME_CLASSIC = "/volumeSettings/classic"
API_ENDPOINT_VOLUME_STREAMER = "/volumeSettings/streamer"
API_ENDPOINT_CHAT_MIX = "/chatMix"
API_ENDPOINT_CHAT_MIX_SET = "/chatMix?balance={balance}"
