"""Chat-mix helpers for the Sonar HTTP client.

The chat mix blends game audio (-1) and voice chat (1) on a single scalar.
"""

from __future__ import annotations

from typing import Any

from .api_base import InvalidMixVolumeError, format_number
from .const import API_ENDPOINT_CHAT_MIX, API_ENDPOINT_CHAT_MIX_SET, CHAT_MIX_MAX, CHAT_MIX_MIN
from .models import ChatMixData


class ChatMixAPI:  # mixin – must appear *before* the base client in MRO
    """Read and set the chat-mix balance."""

    async def get_chat_mix_data(self) -> dict[str, Any]:
        """Return the raw ``/chatMix`` payload (``balance`` plus server extras)."""
        return await self._request(f"{self._web_server_address}{API_ENDPOINT_CHAT_MIX}")  # type: ignore[attr-defined]

    async def get_chat_mix_model(self) -> ChatMixData:
        """Return :class:`ChatMixData` parsed by *pydantic*."""
        return ChatMixData.model_validate(await self.get_chat_mix_data())

    async def set_chat_mix(self, mix_volume: float) -> Any:
        """Set the chat-mix balance (-1..1)."""
        if isinstance(mix_volume, bool) or not CHAT_MIX_MIN <= mix_volume <= CHAT_MIX_MAX:
            raise InvalidMixVolumeError(mix_volume)

        endpoint = API_ENDPOINT_CHAT_MIX_SET.format(balance=format_number(mix_volume))
        return await self._request(f"{self._web_server_address}{endpoint}", method="PUT")  # type: ignore[attr-defined]
