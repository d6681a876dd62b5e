"""Typed Pydantic models for SteelSeries Engine and Sonar payloads.

- Only fields used by the client are included.
- Field aliases match the server payload keys for seamless parsing.
- Unknown keys are kept (``extra="allow"``) since the server schema is not ours.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .const import SUB_APP_NAME

__all__ = [
    "CoreProps",
    "SonarSubApp",
    "ChatMixData",
]


class _SonarBase(BaseModel):
    """Base class with permissive extra handling for future-proofing."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CoreProps(BaseModel):
    """Subset of SteelSeries Engine's ``coreProps.json``.

    ``ggEncryptedAddress`` holds the ``host:port`` of the HTTPS control plane.
    The file also carries a plain ``address`` key (the GameSense endpoint), so
    only the alias may populate the field.
    """

    model_config = ConfigDict(extra="allow")

    address: str = Field(alias="ggEncryptedAddress", min_length=1)


class SonarSubApp(_SonarBase):
    """The ``subApps.sonar`` entry reported by the control plane."""

    is_enabled: bool = Field(alias="isEnabled")
    is_ready: bool | None = Field(default=None, alias="isReady")
    is_running: bool | None = Field(default=None, alias="isRunning")
    metadata: dict[str, Any] | None = None

    @property
    def web_server_address(self) -> str | None:
        """Address of the Sonar web server, when the control plane knows it."""
        if not self.metadata:
            return None
        address = self.metadata.get("webServerAddress")
        return None if address is None else str(address)

    @classmethod
    def from_sub_apps(cls, payload: dict[str, Any]) -> SonarSubApp:
        """Extract and validate the Sonar entry from a ``/subApps`` response."""
        return cls.model_validate(payload["subApps"][SUB_APP_NAME])


class ChatMixData(_SonarBase):
    """``/chatMix`` payload; ``balance`` ranges from -1 (game) to 1 (chat)."""

    balance: float
