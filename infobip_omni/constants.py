"""
Constants and configuration for the Infobip OMNI WhatsApp client.

This module contains the API endpoints, header names, channel identifiers and
environment variable names used throughout the package.
"""

# API Configuration
DEFAULT_TIMEOUT = None  # transport default, requests waits indefinitely
DEFAULT_CHANNEL = "WHATSAPP"


# API Endpoints
class Endpoints:
    """Infobip OMNI API endpoints."""

    BASE_PATH = "/omni/1"

    SCENARIOS = f"{BASE_PATH}/scenarios"
    ADVANCED = f"{BASE_PATH}/advanced"


# Contact card phone types
class ContactPhoneTypes:
    """Phone number types accepted in WhatsApp contact cards."""

    MAIN = "MAIN"


# HTTP Headers
class Headers:
    """Standard HTTP headers used by the client."""

    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"
    USER_AGENT = "User-Agent"

    JSON_CONTENT_TYPE = "application/json"

    # Scheme used for API key authentication
    API_KEY_SCHEME = "App"

    DEFAULT_HEADERS = {
        CONTENT_TYPE: JSON_CONTENT_TYPE,
        ACCEPT: JSON_CONTENT_TYPE,
        USER_AGENT: "infobip-omni-whatsapp/1.0.0"
    }


# Environment Variable Names
class EnvVars:
    """Environment variable names read by ``load_config_from_env``."""

    BASE_URL = "INFOBIP_BASE_URL"
    API_KEY = "INFOBIP_API_KEY"
    USERNAME = "INFOBIP_USERNAME"
    PASSWORD = "INFOBIP_PASSWORD"
    SCENARIO_KEY = "INFOBIP_SCENARIO_KEY"
    TIMEOUT = "INFOBIP_TIMEOUT"
    LOG_LEVEL = "INFOBIP_LOG_LEVEL"


# Logging Configuration
class LogConfig:
    """Logging configuration constants."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

    MAIN_LOGGER = "infobip_omni"


# Validation
class ValidationPatterns:
    """Regular expression patterns for validation."""

    PHONE_NUMBER_PATTERN = r'^\+?[1-9]\d{1,14}$'  # E.164 format
    TEMPLATE_NAME_PATTERN = r'^[a-zA-Z0-9_-]+$'


class MessageLimits:
    """Limits for message content."""

    MAX_TEXT_LENGTH = 4096
    MAX_CAPTION_LENGTH = 1024


class ErrorMessages:
    """Common error messages."""

    INVALID_PHONE_NUMBER = "Invalid phone number format. Use international format (e.g., 447700900000)."
    INVALID_URL = "Invalid URL. Must be an absolute HTTP or HTTPS URL."
    MESSAGE_TOO_LONG = "Message exceeds maximum length of {max_length} characters."
    CAPTION_TOO_LONG = "Caption exceeds maximum length of {max_length} characters."
    MISSING_CREDENTIALS = "Either a token or a username and password must be provided."


# Status Codes
class StatusCodes:
    """HTTP status codes mapped to dedicated exceptions."""

    UNAUTHORIZED = 401
    FORBIDDEN = 403
    TOO_MANY_REQUESTS = 429
