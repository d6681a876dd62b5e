"""Tests for Sonar classic / streamer mode handling."""

from unittest.mock import AsyncMock, patch

import pytest

from steelseries_sonar.api_base import ServerNotAccessibleError
from tests.const import WEB_SERVER_ADDRESS


class TestModeAPI:
    """Test cases for mode probing and switching."""

    def test_volume_path_follows_flag(self, sonar):
        """The volume path is derived from the flag."""
        assert sonar.streamer_mode is False
        assert sonar.volume_path == "/volumeSettings/classic"

        sonar._streamer_mode = True

        assert sonar.volume_path == "/volumeSettings/streamer"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("body", "expected"), [("stream", True), ("classic", False), ("", False)])
    async def test_is_streamer_mode(self, sonar, body, expected):
        """Only the literal "stream" means streamer mode."""
        with patch.object(sonar, "_request", new_callable=AsyncMock, return_value=body) as mock_request:
            assert await sonar.is_streamer_mode() is expected
            mock_request.assert_called_once_with(f"{WEB_SERVER_ADDRESS}/mode/")

    @pytest.mark.asyncio
    async def test_is_streamer_mode_leaves_flag(self, sonar):
        """Probing does not change the tracked mode."""
        with patch.object(sonar, "_request", new_callable=AsyncMock, return_value="stream"):
            await sonar.is_streamer_mode()

        assert sonar.streamer_mode is False

    @pytest.mark.asyncio
    async def test_is_streamer_mode_error(self, sonar):
        """Errors from the server surface to the caller."""
        with patch.object(sonar, "_request", new_callable=AsyncMock, side_effect=ServerNotAccessibleError(500)):
            with pytest.raises(ServerNotAccessibleError):
                await sonar.is_streamer_mode()

    @pytest.mark.asyncio
    async def test_enable_streamer_mode(self, sonar):
        """Switching on PUTs /mode/stream and adopts the server answer."""
        with patch.object(sonar, "_request", new_callable=AsyncMock, return_value="stream") as mock_request:
            assert await sonar.set_streamer_mode(True) is True
            mock_request.assert_called_once_with(f"{WEB_SERVER_ADDRESS}/mode/stream", method="PUT")

        assert sonar.streamer_mode is True
        assert sonar.volume_path == "/volumeSettings/streamer"

    @pytest.mark.asyncio
    async def test_disable_streamer_mode(self, streamer_sonar):
        """Switching off PUTs /mode/classic."""
        with patch.object(streamer_sonar, "_request", new_callable=AsyncMock, return_value="classic") as mock_request:
            assert await streamer_sonar.set_streamer_mode(False) is False
            mock_request.assert_called_once_with(f"{WEB_SERVER_ADDRESS}/mode/classic", method="PUT")

        assert streamer_sonar.volume_path == "/volumeSettings/classic"

    @pytest.mark.asyncio
    async def test_server_answer_is_authoritative(self, sonar):
        """If the server stays in classic mode, so does the client."""
        with patch.object(sonar, "_request", new_callable=AsyncMock, return_value="classic"):
            assert await sonar.set_streamer_mode(True) is False

        assert sonar.streamer_mode is False
        assert sonar.volume_path == "/volumeSettings/classic"

    @pytest.mark.asyncio
    async def test_failed_switch_keeps_mode(self, sonar):
        """A failed PUT leaves the tracked mode untouched."""
        with patch.object(sonar, "_request", new_callable=AsyncMock, side_effect=ServerNotAccessibleError(500)):
            with pytest.raises(ServerNotAccessibleError):
                await sonar.set_streamer_mode(True)

        assert sonar.streamer_mode is False

    @pytest.mark.asyncio
    async def test_switch_then_get_volume_data(self, sonar):
        """The next volume read uses the path of the new mode."""
        with patch.object(sonar, "_request", new_callable=AsyncMock, side_effect=["stream", {}]) as mock_request:
            await sonar.set_streamer_mode(True)
            await sonar.get_volume_data()

        assert mock_request.call_args_list[-1].args == (f"{WEB_SERVER_ADDRESS}/volumeSettings/streamer",)
