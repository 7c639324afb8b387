"""
Input validation functions for the Infobip OMNI WhatsApp client.

Validation is opt-in (``OmniClient(enable_validation=True)``). Each function
returns a bool, or raises ``ValidationError`` when called with ``strict=True``.
"""

import re
import logging
from typing import List, Optional
from urllib.parse import urlparse

from .constants import ValidationPatterns, MessageLimits, ErrorMessages
from .exceptions import ValidationError
from .models import (
    OutboundMessage,
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

# Set up logging
logger = logging.getLogger(__name__)


def validate_phone_number(phone_number: str, field: str = "phone_number", strict: bool = False) -> bool:
    """
    Validate phone number against E.164 (digits only, optional leading +).

    Args:
        phone_number: Phone number to validate
        field: Field name reported in the error
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise

    Raises:
        ValidationError: If phone number is invalid and strict validation
    """
    is_valid = (
        isinstance(phone_number, str)
        and bool(re.match(ValidationPatterns.PHONE_NUMBER_PATTERN, phone_number.strip()))
    )

    if not is_valid and strict:
        raise ValidationError(
            ErrorMessages.INVALID_PHONE_NUMBER,
            field=field,
            value=phone_number
        )

    return is_valid


def validate_coordinates(latitude: float, longitude: float, strict: bool = False) -> bool:
    """
    Validate GPS coordinates.

    Raises:
        ValidationError: If coordinates are invalid and strict validation
    """
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError):
        if strict:
            raise ValidationError(
                "Coordinates must be numeric values",
                field="coordinates",
                value=f"lat={latitude}, lon={longitude}"
            )
        return False

    lat_valid = -90 <= lat <= 90
    lon_valid = -180 <= lon <= 180

    is_valid = lat_valid and lon_valid

    if not is_valid and strict:
        error_details = []
        if not lat_valid:
            error_details.append(f"latitude {lat} not in range -90 to +90")
        if not lon_valid:
            error_details.append(f"longitude {lon} not in range -180 to +180")

        raise ValidationError(
            f"Invalid coordinates: {', '.join(error_details)}",
            field="coordinates",
            value=f"lat={latitude}, lon={longitude}"
        )

    return is_valid


def validate_url(url: str, field: str = "url", strict: bool = False) -> bool:
    """
    Validate that a media URL is an absolute http(s) URL.

    Raises:
        ValidationError: If URL is invalid and strict validation
    """
    is_valid = False
    if url and isinstance(url, str):
        parsed = urlparse(url.strip())
        is_valid = parsed.scheme.lower() in ('http', 'https') and bool(parsed.netloc)

    if not is_valid and strict:
        raise ValidationError(ErrorMessages.INVALID_URL, field=field, value=url)

    return is_valid


def validate_message_text(
    text: str,
    max_length: Optional[int] = None,
    field: str = "text",
    strict: bool = False
) -> bool:
    """
    Validate message text content.

    Args:
        text: Message text to validate
        max_length: Maximum allowed length (defaults to MessageLimits.MAX_TEXT_LENGTH)
        field: Field name reported in the error
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise

    Raises:
        ValidationError: If text is invalid and strict validation
    """
    if not isinstance(text, str) or not text.strip():
        if strict:
            raise ValidationError(
                "Message text cannot be empty",
                field=field,
                value=text
            )
        return False

    max_len = max_length or MessageLimits.MAX_TEXT_LENGTH
    if len(text) > max_len:
        if strict:
            raise ValidationError(
                ErrorMessages.MESSAGE_TOO_LONG.format(max_length=max_len),
                field=field,
                value=text
            )
        return False

    return True


def validate_caption(caption: Optional[str], strict: bool = False) -> bool:
    """Validate an optional media caption. Empty captions are allowed."""
    if not caption:
        return True

    if len(caption) > MessageLimits.MAX_CAPTION_LENGTH:
        if strict:
            raise ValidationError(
                ErrorMessages.CAPTION_TOO_LONG.format(max_length=MessageLimits.MAX_CAPTION_LENGTH),
                field="caption",
                value=caption
            )
        return False

    return True


def validate_template_name(template_name: str, strict: bool = False) -> bool:
    """
    Validate template name (letters, numbers, underscores and hyphens).

    Raises:
        ValidationError: If template name is invalid and strict validation
    """
    is_valid = (
        isinstance(template_name, str)
        and bool(re.match(ValidationPatterns.TEMPLATE_NAME_PATTERN, template_name.strip()))
    )

    if not is_valid and strict:
        raise ValidationError(
            "Template name can only contain letters, numbers, underscores, and hyphens",
            field="template_name",
            value=template_name
        )

    return is_valid


def validate_placeholders(placeholders: Optional[List[str]], strict: bool = False) -> bool:
    """Validate that template placeholders are a list of strings."""
    if placeholders is None:
        return True

    is_valid = isinstance(placeholders, list) and all(isinstance(p, str) for p in placeholders)

    if not is_valid and strict:
        raise ValidationError(
            "Template placeholders must be a list of strings",
            field="placeholders",
            value=placeholders
        )

    return is_valid


def validate_outbound_message(phone_number: str, message: OutboundMessage) -> None:
    """
    Validate a recipient and message before sending.

    Raises:
        ValidationError: On the first invalid field
    """
    validate_phone_number(phone_number, strict=True)

    if isinstance(message, TextMessage):
        validate_message_text(message.text, strict=True)
    elif isinstance(message, ImageMessage):
        validate_url(message.image_url, strict=True)
        validate_caption(message.caption, strict=True)
    elif isinstance(message, FileMessage):
        validate_url(message.file_url, strict=True)
        validate_caption(message.caption, strict=True)
    elif isinstance(message, VideoMessage):
        validate_url(message.video_url, strict=True)
        validate_caption(message.caption, strict=True)
    elif isinstance(message, AudioMessage):
        validate_url(message.audio_url, strict=True)
    elif isinstance(message, (TemplateMessage, MediaTemplateMessage)):
        validate_template_name(message.template_name, strict=True)
        validate_placeholders(message.placeholders, strict=True)
    elif isinstance(message, LocationMessage):
        validate_coordinates(message.latitude, message.longitude, strict=True)
    elif isinstance(message, ContactMessage):
        validate_message_text(message.name, field="name", strict=True)
        validate_phone_number(message.contact_phone, field="contact_phone", strict=True)
    else:
        raise ValidationError(
            f"Unsupported message type: {type(message).__name__}",
            field="message",
            value=message
        )

    logger.debug(f"Validated {type(message).__name__} for {phone_number}")
