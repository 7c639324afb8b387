"""
Unit tests for infobip_omni.models module.

Tests credential resolution, ClientConfig normalization and the payloads
rendered by the message models.
"""

import dataclasses
import pytest
import sys
import os

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from infobip_omni.models import (
    BasicAuth,
    BearerToken,
    ClientConfig,
    Destination,
    ScenarioDefinition,
    TextMessage,
    ImageMessage,
    TemplateMessage,
    MediaTemplateMessage,
    ContactMessage,
    build_advanced_payload,
    normalize_base_url,
    resolve_credentials
)
from infobip_omni.exceptions import AuthenticationError


class TestCredentials:
    """Test credential resolution."""

    def test_token_only(self):
        assert resolve_credentials(token="abc") == BearerToken("abc")

    def test_basic_only(self):
        assert resolve_credentials("user", "pass") == BasicAuth("user", "pass")

    def test_token_precedence(self, caplog):
        """Test that a token wins and a warning is logged."""
        with caplog.at_level("WARNING"):
            credentials = resolve_credentials("user", "pass", "abc")

        assert credentials == BearerToken("abc")
        assert "using token authentication" in caplog.text

    def test_missing(self):
        with pytest.raises(AuthenticationError):
            resolve_credentials()

        with pytest.raises(AuthenticationError):
            resolve_credentials(password="pass")

    def test_secrets_not_in_repr(self):
        assert "pass" not in repr(BasicAuth("user", "pass"))
        assert "abc" not in repr(BearerToken("abc"))


class TestClientConfig:
    """Test ClientConfig."""

    def test_normalizes_base_url(self):
        config = ClientConfig("xyz.api.infobip.com/", BearerToken("abc"))
        assert config.base_url == "https://xyz.api.infobip.com"

    def test_keeps_http_scheme(self):
        assert normalize_base_url("http://localhost:8080/") == "http://localhost:8080"

    def test_is_immutable(self):
        config = ClientConfig("https://xyz.api.infobip.com", BearerToken("abc"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_url = "https://other.example.com"

    def test_auth_mode(self):
        assert ClientConfig("h", BasicAuth("u", "p")).auth_mode == "basic"
        assert ClientConfig("h", BearerToken("t")).auth_mode == "token"


class TestPayloads:
    """Test rendered request bodies."""

    def test_scenario_payload(self):
        payload = ScenarioDefinition("promo", "4477000000").to_payload()

        assert payload == {
            "name": "promo",
            "flow": [{"from": "4477000000", "channel": "WHATSAPP"}],
            "default": True
        }

    def test_advanced_payload_wrapper(self):
        payload = build_advanced_payload("KEY", Destination("447700900000"), TextMessage("Hi"))

        assert payload == {
            "scenarioKey": "KEY",
            "destinations": [{"to": {"phoneNumber": "447700900000"}}],
            "whatsApp": {"text": "Hi"}
        }

    def test_advanced_payload_without_scenario(self):
        payload = build_advanced_payload(None, Destination("447700900000"), TextMessage("Hi"))
        assert payload["scenarioKey"] is None

    def test_empty_caption_omitted(self):
        assert ImageMessage("https://example.com/a.jpg", "").to_whatsapp() == {
            "imageUrl": "https://example.com/a.jpg"
        }

    def test_template_namespace(self):
        assert "templateNamespace" not in TemplateMessage("t", "en", namespace="").to_whatsapp()
        assert TemplateMessage("t", "en", namespace="ns").to_whatsapp()["templateNamespace"] == "ns"

    def test_template_placeholders_are_copied(self):
        """Test that rendering does not alias the caller's list."""
        placeholders = ["a"]
        rendered = TemplateMessage("t", "en", placeholders=placeholders).to_whatsapp()
        rendered["templateData"].append("b")

        assert placeholders == ["a"]

    def test_media_template_header_only(self):
        data = MediaTemplateMessage(
            "t", "en", header={"textPlaceholder": "Hi"}
        ).to_whatsapp()["mediaTemplateData"]

        assert data == {"header": {"textPlaceholder": "Hi"}, "body": {"placeholders": []}}

    def test_contact_card(self):
        assert ContactMessage("Anna", "447700900111").to_whatsapp() == {
            "contacts": [{
                "name": {"firstName": "Anna", "formattedName": "Anna"},
                "phones": [{"phone": "447700900111", "type": "MAIN"}]
            }]
        }


if __name__ == "__main__":
    pytest.main([__file__])
