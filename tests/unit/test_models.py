"""Tests for Sonar payload models."""

import pytest
from pydantic import ValidationError

from steelseries_sonar.models import ChatMixData, CoreProps, SonarSubApp
from tests.fixtures.sonar_http import sub_apps_payload


def test_core_props_alias_and_extras():
    props = CoreProps.model_validate({"ggEncryptedAddress": "127.0.0.1:6327", "encryptedAddress": "127.0.0.1:6328"})
    assert props.address == "127.0.0.1:6327"


def test_core_props_requires_address():
    with pytest.raises(ValidationError):
        CoreProps.model_validate({})


def test_core_props_ignores_gamesense_address():
    with pytest.raises(ValidationError):
        CoreProps.model_validate({"address": "127.0.0.1:51000", "encryptedAddress": "127.0.0.1:6328"})


def test_sub_app_from_payload():
    sub_app = SonarSubApp.from_sub_apps(sub_apps_payload(is_running=False))

    assert sub_app.is_enabled is True
    assert sub_app.is_ready is True
    assert sub_app.is_running is False
    assert sub_app.web_server_address == "http://127.0.0.1:51234"


def test_sub_app_without_metadata():
    sub_app = SonarSubApp.model_validate({"isEnabled": True, "isReady": True, "isRunning": True})
    assert sub_app.web_server_address is None


def test_chat_mix_keeps_server_fields():
    data = ChatMixData.model_validate({"balance": -0.5, "state": "enabled"})
    assert data.balance == -0.5
    assert data.model_dump()["state"] == "enabled"


def test_disabled_sub_app_needs_only_enabled_flag():
    sub_app = SonarSubApp.model_validate({"isEnabled": False, "metadata": None})

    assert sub_app.is_enabled is False
    assert sub_app.is_ready is None
    assert sub_app.web_server_address is None
