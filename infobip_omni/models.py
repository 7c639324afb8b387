"""
Request models for the Infobip OMNI WhatsApp client.

This module defines the credential variants, the immutable client
configuration and one dataclass per outbound WhatsApp content kind. Each
message model knows how to render its own ``whatsApp`` block; optional
fields that are empty are left out of the rendered payload.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Union

from .constants import DEFAULT_CHANNEL, DEFAULT_TIMEOUT, ContactPhoneTypes, ErrorMessages
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BasicAuth:
    """HTTP Basic credentials."""
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class BearerToken:
    """API key sent as ``Authorization: App <token>``."""
    token: str = field(repr=False)


Credentials = Union[BasicAuth, BearerToken]


def resolve_credentials(
    username: Optional[str] = None,
    password: Optional[str] = None,
    token: Optional[str] = None
) -> Credentials:
    """
    Pick the single authentication mode for a client.

    A token takes precedence over username/password when both are given.

    Raises:
        AuthenticationError: If neither a token nor a username is supplied
    """
    if token:
        if username or password:
            logger.warning("Both token and basic credentials supplied, using token authentication")
        return BearerToken(token=token)

    if username:
        return BasicAuth(username=username, password=password or "")

    raise AuthenticationError(ErrorMessages.MISSING_CREDENTIALS)


def normalize_base_url(url: str) -> str:
    """Normalize base URL to include https:// if missing and drop trailing slashes."""
    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        url = f"https://{url}"
    return url.rstrip('/')


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection configuration for ``OmniClient``.

    Attributes:
        base_url: Account specific Infobip host, e.g. ``https://xyz.api.infobip.com``
        credentials: ``BasicAuth`` or ``BearerToken``
        timeout: Request timeout in seconds, ``None`` keeps the transport default
    """
    base_url: str
    credentials: Credentials
    timeout: Optional[float] = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.base_url:
            raise AuthenticationError("Missing required parameter: base_url")
        # frozen dataclass, so bypass __setattr__ for the normalized value
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    @property
    def auth_mode(self) -> str:
        return "basic" if isinstance(self.credentials, BasicAuth) else "token"


@dataclass(frozen=True)
class Destination:
    """A single message recipient."""
    phone_number: str

    def to_dict(self) -> Dict[str, Any]:
        return {"to": {"phoneNumber": self.phone_number}}


@dataclass
class ScenarioDefinition:
    """
    A scenario binding a WhatsApp sender to a routing key.

    Attributes:
        name: Human readable scenario name
        from_address: Sender number registered for the channel
        channel: Channel of the single flow step
        default: Whether the provider should treat it as the default scenario
    """
    name: str
    from_address: str
    channel: str = DEFAULT_CHANNEL
    default: bool = True

    def to_payload(self) -> Dict[str, Any]:
        """Convert to Infobip API payload format."""
        return {
            "name": self.name,
            "flow": [
                {
                    "from": self.from_address,
                    "channel": self.channel
                }
            ],
            "default": self.default
        }


@dataclass
class TextMessage:
    text: str

    def to_whatsapp(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass
class ImageMessage:
    image_url: str
    caption: Optional[str] = None

    def to_whatsapp(self) -> Dict[str, Any]:
        data = {"imageUrl": self.image_url}
        if self.caption:
            data["text"] = self.caption
        return data


@dataclass
class AudioMessage:
    audio_url: str

    def to_whatsapp(self) -> Dict[str, Any]:
        return {"audioUrl": self.audio_url}


@dataclass
class FileMessage:
    file_url: str
    caption: Optional[str] = None

    def to_whatsapp(self) -> Dict[str, Any]:
        data = {"fileUrl": self.file_url}
        if self.caption:
            data["text"] = self.caption
        return data


@dataclass
class VideoMessage:
    video_url: str
    caption: Optional[str] = None

    def to_whatsapp(self) -> Dict[str, Any]:
        data = {"videoUrl": self.video_url}
        if self.caption:
            data["text"] = self.caption
        return data


@dataclass
class TemplateMessage:
    """
    Pre-approved template with positional placeholders.

    Attributes:
        template_name: Name of the registered template
        language: Template language code, e.g. ``en``
        namespace: Template namespace, sent only when non-empty
        placeholders: Values substituted into the template body
    """
    template_name: str
    language: str
    namespace: Optional[str] = None
    placeholders: List[str] = field(default_factory=list)

    def to_whatsapp(self) -> Dict[str, Any]:
        data = {
            "templateName": self.template_name,
            "templateData": list(self.placeholders),
            "language": self.language
        }
        if self.namespace:
            data["templateNamespace"] = self.namespace
        return data


@dataclass
class MediaTemplateMessage:
    """
    Template with a structured header, body and buttons.

    Attributes:
        template_name: Name of the registered template
        language: Template language code
        header: Header object, e.g. ``{"imageUrl": "https://..."}``
        placeholders: Values for the body placeholders
        buttons: Button objects, e.g. ``[{"quickReplyPayload": "yes"}]``
    """
    template_name: str
    language: str
    header: Optional[Dict[str, Any]] = None
    placeholders: List[str] = field(default_factory=list)
    buttons: List[Dict[str, Any]] = field(default_factory=list)

    def to_whatsapp(self) -> Dict[str, Any]:
        # body.placeholders is mandatory, even if empty
        media_template_data = {
            "body": {
                "placeholders": list(self.placeholders)
            }
        }
        if self.header:
            media_template_data["header"] = self.header
        if self.buttons:
            media_template_data["buttons"] = list(self.buttons)

        return {
            "templateName": self.template_name,
            "mediaTemplateData": media_template_data,
            "language": self.language
        }


@dataclass
class LocationMessage:
    longitude: float
    latitude: float

    def to_whatsapp(self) -> Dict[str, Any]:
        return {
            "longitude": self.longitude,
            "latitude": self.latitude
        }


@dataclass
class ContactMessage:
    """A single contact card with one main phone number."""
    name: str
    contact_phone: str

    def to_whatsapp(self) -> Dict[str, Any]:
        return {
            "contacts": [
                {
                    "name": {
                        "firstName": self.name,
                        "formattedName": self.name
                    },
                    "phones": [
                        {
                            "phone": self.contact_phone,
                            "type": ContactPhoneTypes.MAIN
                        }
                    ]
                }
            ]
        }


OutboundMessage = Union[
    TextMessage,
    ImageMessage,
    AudioMessage,
    FileMessage,
    VideoMessage,
    TemplateMessage,
    MediaTemplateMessage,
    LocationMessage,
    ContactMessage
]


def build_advanced_payload(
    scenario_key: Optional[str],
    destination: Destination,
    message: OutboundMessage
) -> Dict[str, Any]:
    """
    Wrap a message into the body of ``/omni/1/advanced``.

    ``scenarioKey`` is always present and is ``None`` when no scenario was set.
    """
    return {
        "scenarioKey": scenario_key,
        "destinations": [destination.to_dict()],
        "whatsApp": message.to_whatsapp()
    }
