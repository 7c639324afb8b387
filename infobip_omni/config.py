"""
Environment based configuration for the Infobip OMNI WhatsApp client.

The client never reads the environment on its own; applications that keep
their credentials in a ``.env`` file call ``load_config_from_env`` and pass
the result to ``OmniClient.from_config``.
"""

import os
import logging
from typing import Optional

from dotenv import load_dotenv

from .constants import EnvVars, LogConfig
from .exceptions import AuthenticationError, ValidationError
from .models import ClientConfig, resolve_credentials


def load_config_from_env(dotenv_path: Optional[str] = None) -> ClientConfig:
    """
    Build a ``ClientConfig`` from environment variables.

    Reads ``INFOBIP_BASE_URL`` plus either ``INFOBIP_API_KEY`` or
    ``INFOBIP_USERNAME``/``INFOBIP_PASSWORD``. ``INFOBIP_TIMEOUT`` is optional.
    Values already present in the environment win over the ``.env`` file.

    Raises:
        AuthenticationError: If the base URL or credentials are missing
        ValidationError: If INFOBIP_TIMEOUT is not a number
    """
    load_dotenv(dotenv_path)

    base_url = os.getenv(EnvVars.BASE_URL)
    api_key = os.getenv(EnvVars.API_KEY)
    username = os.getenv(EnvVars.USERNAME)
    password = os.getenv(EnvVars.PASSWORD)

    missing = []
    if not base_url:
        missing.append(EnvVars.BASE_URL)
    if not api_key and not username:
        missing.append(f"{EnvVars.API_KEY} (or {EnvVars.USERNAME}/{EnvVars.PASSWORD})")

    if missing:
        raise AuthenticationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    timeout = os.getenv(EnvVars.TIMEOUT)
    try:
        timeout = float(timeout) if timeout else None
    except ValueError:
        raise ValidationError(
            f"{EnvVars.TIMEOUT} must be a number of seconds",
            field=EnvVars.TIMEOUT,
            value=timeout
        ) from None

    return ClientConfig(
        base_url=base_url,
        credentials=resolve_credentials(username, password, api_key),
        timeout=timeout
    )


def scenario_key_from_env() -> Optional[str]:
    """Get the default scenario key from environment (optional)."""
    return os.getenv(EnvVars.SCENARIO_KEY) or None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Setup logging for the package based on ``INFOBIP_LOG_LEVEL``.

    Raises:
        ValidationError: If the level is not a standard logging level name
    """
    level = level or os.getenv(EnvVars.LOG_LEVEL, LogConfig.DEFAULT_LOG_LEVEL)
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValidationError(
            f"Unknown log level for {EnvVars.LOG_LEVEL}: {level}",
            field=EnvVars.LOG_LEVEL,
            value=level
        )

    logging.basicConfig(
        level=numeric_level,
        format=LogConfig.DEFAULT_LOG_FORMAT
    )
    logging.getLogger(LogConfig.MAIN_LOGGER).setLevel(numeric_level)
