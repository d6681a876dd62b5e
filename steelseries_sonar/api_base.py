"""SteelSeries Sonar HTTP API core client.

Contains the exception hierarchy and the networking/transport layer shared by
all API mixins.  Every request goes through :meth:`SonarClient._request`, which
applies the one failure-translation rule of the client:

* a non-200 response, or a transport error carrying an HTTP status, raises
  :class:`ServerNotAccessibleError` with that status;
* a transport error without a status (connection refused, DNS failure,
  timeout) raises :class:`SonarConnectionError` / :class:`SonarTimeoutError`.
"""

from __future__ import annotations

import json
import logging
import ssl
from decimal import Decimal
from typing import Any

import aiohttp
import async_timeout
from aiohttp import ClientSession

from .const import DEFAULT_TIMEOUT

_LOGGER = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------


class SonarError(Exception):
    """Base exception for all SteelSeries Sonar errors."""


class ConfigurationNotFoundError(SonarError):
    """SteelSeries Engine's ``coreProps.json`` is missing, unreadable or corrupt."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        message = "SteelSeries Engine 3 not installed or not in the default location!"
        if path:
            message = f"{message} (looked for {path})"
        super().__init__(message)


class ServerNotAccessibleError(SonarError):
    """The server answered with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"SteelSeries server not accessible! Status code: {status_code}")


class SonarNotEnabledError(SonarError):
    """The control plane reports Sonar as disabled."""

    def __init__(self) -> None:
        super().__init__("SteelSeries Sonar is not enabled!")


class ServerNotReadyError(SonarError):
    """The control plane reports Sonar as not ready yet."""

    def __init__(self) -> None:
        super().__init__("SteelSeries Sonar is not ready yet!")


class ServerNotRunningError(SonarError):
    """The control plane reports Sonar as not running."""

    def __init__(self) -> None:
        super().__init__("SteelSeries Sonar is not running!")


class WebServerAddressNotFoundError(SonarError):
    """The control plane did not publish a usable Sonar web-server address."""

    def __init__(self) -> None:
        super().__init__("Web server address not found")


class ChannelNotFoundError(SonarError):
    """Unknown audio channel name."""

    def __init__(self, channel: str) -> None:
        self.channel = channel
        super().__init__(f"Channel '{channel}' not found")


class SliderNotFoundError(SonarError):
    """Unknown streamer slider name (only checked in streamer mode)."""

    def __init__(self, slider: str) -> None:
        self.slider = slider
        super().__init__(f"Slider '{slider}' not found")


class InvalidVolumeError(SonarError):
    """Volume outside the 0..1 range."""

    def __init__(self, volume: float) -> None:
        self.volume = volume
        super().__init__(f"Invalid volume '{volume}'! Value must be between 0 and 1!")


class InvalidMixVolumeError(SonarError):
    """Chat-mix balance outside the -1..1 range."""

    def __init__(self, mix_volume: float) -> None:
        self.mix_volume = mix_volume
        super().__init__(f"Invalid mix volume '{mix_volume}'! Value must be between -1 and 1!")


class SonarConnectionError(SonarError):
    """Raised on network-level problems where no HTTP status is available.

    Carries the URL that failed and the underlying transport exception.
    """

    def __init__(self, message: str, url: str | None = None, last_error: Exception | None = None) -> None:
        self.url = url
        self.last_error = last_error
        super().__init__(message)


class SonarTimeoutError(SonarConnectionError):
    """Raised when a request to the server times out."""


class SonarInvalidDataError(SonarError):
    """The server responded 200 with a payload of the wrong shape."""


# -----------------------------------------------------------------------------
# HTTP client (transport only)
# -----------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Render *value* as a plain decimal literal (``1``, ``0``, ``0.5``, ``0.00001``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    # shortest round-trip digits, never in exponent form
    return format(Decimal(repr(value)), "f")


def decode_body(text: str) -> Any:
    """Decode a response body as JSON, falling back to the stripped text.

    Mode endpoints answer with a bare JSON string (``"stream"``); unquoted
    text is accepted as well.
    """
    if not text or not text.strip():
        return ""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text.strip()


class SonarClient:
    """Minimal Sonar HTTP client: session, SSL and request helper only."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        ssl_context: ssl.SSLContext | None = None,
        session: ClientSession | None = None,
    ) -> None:
        """Instantiate the transport.

        Args:
            timeout: Total per-request timeout (seconds).
            ssl_context: Custom SSL context (tests/advanced use-cases only).
            session: Optional shared *aiohttp* session. A shared session is
                never closed by :meth:`close`.
        """
        self.timeout = timeout
        self.ssl_context = ssl_context
        self._session = session
        self._owns_session = session is None

    # ------------------------------------------------------------------
    # SSL helpers -------------------------------------------------------
    # ------------------------------------------------------------------

    def _get_ssl_context(self) -> ssl.SSLContext:
        """Return a permissive SSL context.

        SteelSeries Engine serves its control plane with a locally issued
        certificate that no CA signs, so verification is disabled.
        """
        if self.ssl_context is not None:
            return self.ssl_context

        ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE

        self.ssl_context = ctx
        return ctx

    # ------------------------------------------------------------------
    # Low-level request helper -----------------------------------------
    # ------------------------------------------------------------------

    async def _request(self, url: str, method: str = "GET", **kwargs: Any) -> Any:
        """Perform one HTTP(S) request and return the decoded body.

        Raises:
            ServerNotAccessibleError: Non-200 status, or transport error with a status.
            SonarTimeoutError: The request did not finish within ``timeout``.
            SonarConnectionError: Any other transport failure.
        """
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
            self._owns_session = True

        if url.startswith("https://"):
            kwargs["ssl"] = self._get_ssl_context()
        else:
            kwargs.pop("ssl", None)

        _LOGGER.debug("%s %s", method, url)
        try:
            async with async_timeout.timeout(self.timeout):
                resp = await self._session.request(method, url, **kwargs)
                async with resp:
                    if resp.status != 200:
                        _LOGGER.debug("%s %s answered %s", method, url, resp.status)
                        raise ServerNotAccessibleError(resp.status)
                    text = await resp.text()
        except aiohttp.ClientResponseError as err:
            raise ServerNotAccessibleError(err.status) from err
        except TimeoutError as err:
            raise SonarTimeoutError(
                f"Request to {url} timed out after {self.timeout}s",
                url=url,
                last_error=err,
            ) from err
        except aiohttp.ClientError as err:
            raise SonarConnectionError(f"Request to {url} failed: {err}", url=url, last_error=err) from err

        return decode_body(text)

    # ------------------------------------------------------------------
    # Lifecycle ---------------------------------------------------------
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying *aiohttp* session if this client opened it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> SonarClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
