"""
Infobip OMNI WhatsApp client

A small client for the Infobip omnichannel API: create WhatsApp routing
scenarios and send text, media, template, location and contact messages.

Usage:
    from infobip_omni import OmniClient

    client = OmniClient("https://xyz.api.infobip.com", token="your_api_key")
    client.set_scenario("your_scenario_key")

    client.send_text("447700900000", "Hello!")
    client.send_image("447700900000", "https://example.com/image.jpg", "Caption")
    client.send_location("447700900000", -0.1276, 51.5072)
"""

__version__ = "1.0.0"
__description__ = "Client for the Infobip OMNI WhatsApp API"

from .models import (
    BasicAuth,
    BearerToken,
    ClientConfig,
    Destination,
    ScenarioDefinition,
    TextMessage,
    ImageMessage,
    AudioMessage,
    FileMessage,
    VideoMessage,
    TemplateMessage,
    MediaTemplateMessage,
    LocationMessage,
    ContactMessage
)
from .exceptions import (
    OmniError,
    ValidationError,
    NetworkError,
    TransportError,
    DecodeError,
    HTTPStatusError,
    AuthenticationError,
    RateLimitError,
    APIError
)
from .config import load_config_from_env, configure_logging

# Import client
from .client import OmniClient

__all__ = [
    "OmniClient",
    "ClientConfig",
    "BasicAuth",
    "BearerToken",
    "Destination",
    "ScenarioDefinition",
    "TextMessage",
    "ImageMessage",
    "AudioMessage",
    "FileMessage",
    "VideoMessage",
    "TemplateMessage",
    "MediaTemplateMessage",
    "LocationMessage",
    "ContactMessage",
    "OmniError",
    "ValidationError",
    "NetworkError",
    "TransportError",
    "DecodeError",
    "HTTPStatusError",
    "AuthenticationError",
    "RateLimitError",
    "APIError",
    "load_config_from_env",
    "configure_logging"
]
