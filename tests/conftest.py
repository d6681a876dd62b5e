"""Global fixtures for SteelSeries Sonar tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from steelseries_sonar.api import Sonar

from .const import CONTROL_PLANE_ADDRESS, WEB_SERVER_ADDRESS


@pytest.fixture
def core_props_file(tmp_path: Path) -> Path:
    """Write a valid ``coreProps.json`` and return its path."""
    path = tmp_path / "coreProps.json"
    path.write_text(
        json.dumps({"ggEncryptedAddress": CONTROL_PLANE_ADDRESS, "encryptedAddress": "127.0.0.1:6328"}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sonar() -> Sonar:
    """Return a classic-mode client with an already resolved address."""
    client = Sonar(streamer_mode=False)
    client._base_url = f"https://{CONTROL_PLANE_ADDRESS}"
    client._web_server_address = WEB_SERVER_ADDRESS
    return client


@pytest.fixture
def streamer_sonar(sonar: Sonar) -> Sonar:
    """Return the resolved client switched to streamer mode."""
    sonar._streamer_mode = True
    return sonar
