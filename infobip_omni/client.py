"""
Main client for the Infobip OMNI WhatsApp API.

This module contains the OmniClient class which creates WhatsApp routing
scenarios and sends WhatsApp messages through the omnichannel advanced
endpoint. Every operation is a single blocking POST; failures are raised,
never retried.
"""

import logging
from typing import Optional, Dict, Any, List, Union

import requests

from .config import load_config_from_env, scenario_key_from_env
from .constants import Endpoints, Headers, DEFAULT_CHANNEL, DEFAULT_TIMEOUT
from .models import (
    BasicAuth,
    BearerToken,
    ClientConfig,
    Destination,
    ScenarioDefinition,
    OutboundMessage,
    TextMessage,
    ImageMessage,
    AudioMessage,
    FileMessage,
    VideoMessage,
    TemplateMessage,
    MediaTemplateMessage,
    LocationMessage,
    ContactMessage,
    build_advanced_payload,
    resolve_credentials
)
from .exceptions import (
    NetworkError,
    DecodeError,
    create_exception_from_response
)
from .validators import validate_outbound_message

# Set up logging
logger = logging.getLogger(__name__)

JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

# Sentinel so that an explicit scenario_key=None can still override the stored key
_STORED = object()


class OmniClient:
    """
    Client for the Infobip omnichannel API, WhatsApp channel.

    Example:
        client = OmniClient("https://xyz.api.infobip.com", token="your_api_key")

        scenario = client.create_scenario("promo", "447860099299")
        client.set_scenario(scenario["key"])

        client.send_text("447700900000", "Hello!")
        client.send_image("447700900000", "https://example.com/a.jpg", "Look")

    The scenario key set with ``set_scenario`` is attached to every send. Code
    sharing one client across threads should pass ``scenario_key=`` on each
    call instead.
    """

    def __init__(
        self,
        host: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        scenario_key: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        enable_validation: bool = False,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            host: Infobip base URL (``https://`` is added when missing)
            username: Basic auth username
            password: Basic auth password
            token: API key, takes precedence over username/password
            scenario_key: Initial scenario key
            timeout: Request timeout in seconds, ``None`` for the transport default
            enable_validation: Validate phone numbers, URLs and other inputs before sending
            session: Preconfigured ``requests.Session`` to reuse

        Raises:
            AuthenticationError: If no credentials or no host are given
        """
        self.config = ClientConfig(
            base_url=host,
            credentials=resolve_credentials(username, password, token),
            timeout=timeout
        )
        self.scenario_key = scenario_key
        self.enable_validation = enable_validation

        # a caller supplied session stays open when this client is closed
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(Headers.DEFAULT_HEADERS)
        self._apply_credentials()

        logger.info(
            f"OMNI client initialized - Host: {self.config.base_url}, auth: {self.config.auth_mode}"
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        scenario_key: Optional[str] = None,
        **kwargs
    ) -> "OmniClient":
        """Create a client from an existing ``ClientConfig``."""
        credentials = config.credentials
        if isinstance(credentials, BearerToken):
            auth_kwargs = {"token": credentials.token}
        else:
            auth_kwargs = {"username": credentials.username, "password": credentials.password}

        kwargs.setdefault("timeout", config.timeout)
        for key, value in auth_kwargs.items():
            kwargs.setdefault(key, value)

        return cls(config.base_url, scenario_key=scenario_key, **kwargs)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **kwargs) -> "OmniClient":
        """
        Create a client from ``INFOBIP_*`` environment variables or a ``.env`` file.

        Raises:
            AuthenticationError: If the base URL or credentials are missing
        """
        config = load_config_from_env(dotenv_path)
        kwargs.setdefault("scenario_key", scenario_key_from_env())
        return cls.from_config(config, **kwargs)

    def _apply_credentials(self) -> None:
        credentials = self.config.credentials
        if isinstance(credentials, BasicAuth):
            self.session.auth = (credentials.username, credentials.password)
            self.session.headers.pop(Headers.AUTHORIZATION, None)
        else:
            self.session.auth = None
            self.session.headers[Headers.AUTHORIZATION] = (
                f"{Headers.API_KEY_SCHEME} {credentials.token}"
            )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> Optional[float]:
        return self.config.timeout

    def _exec(self, path: str, payload: Dict[str, Any]) -> JSONValue:
        """
        POST a JSON payload and return the decoded JSON response.

        Args:
            path: API path, appended to the base URL
            payload: Request body

        Returns:
            The decoded response body, unmodified

        Raises:
            NetworkError: If no response was received
            HTTPStatusError: On a non-2xx response
            DecodeError: If a 2xx response body is not JSON
        """
        url = f"{self.config.base_url}{path}"

        logger.info(f"Making POST request to {path}")
        logger.debug(f"Request payload: {payload}")

        try:
            response = self.session.post(url, json=payload, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {path} failed: {e}")
            raise NetworkError(f"Request error: {str(e)}") from e

        logger.info(f"Response status: {response.status_code}")

        if not 200 <= response.status_code < 300:
            try:
                response_data = response.json()
            except ValueError:
                response_data = response.text
            error = create_exception_from_response(response.status_code, response_data)
            logger.error(f"API error from {path}: {error}")
            raise error

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Could not decode response from {path}: {e}")
            raise DecodeError(
                f"Response from {path} is not valid JSON",
                status_code=response.status_code,
                body=response.text
            ) from e

    def create_scenario(
        self,
        name: str,
        from_address: str,
        channel: str = DEFAULT_CHANNEL
    ) -> JSONValue:
        """
        Create a default scenario with a single flow step.

        Args:
            name: Scenario name
            from_address: Registered sender number
            channel: Flow channel, WHATSAPP unless specified

        Returns:
            Decoded response, containing the scenario ``key``

        Example:
            scenario = client.create_scenario("promo", "447860099299")
            client.set_scenario(scenario["key"])
        """
        scenario = ScenarioDefinition(name=name, from_address=from_address, channel=channel)
        return self._exec(Endpoints.SCENARIOS, scenario.to_payload())

    def set_scenario(self, scenario_key: str) -> "OmniClient":
        """Store the scenario key attached to subsequent sends."""
        self.scenario_key = scenario_key
        return self

    def get_scenario(self) -> Optional[str]:
        return self.scenario_key

    def send_message(
        self,
        phone: str,
        message: OutboundMessage,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """
        Send any supported message kind to one recipient.

        Args:
            phone: Recipient phone number
            message: One of the message models from ``infobip_omni.models``
            scenario_key: Scenario for this call only, defaults to the stored key

        Returns:
            Decoded response from the advanced endpoint

        Raises:
            ValidationError: If validation is enabled and an input is invalid
        """
        if self.enable_validation:
            validate_outbound_message(phone, message)

        if scenario_key is _STORED:
            scenario_key = self.scenario_key

        payload = build_advanced_payload(scenario_key, Destination(phone), message)
        return self._exec(Endpoints.ADVANCED, payload)

    def send_text(self, phone: str, message: str, scenario_key: Any = _STORED) -> JSONValue:
        """Send a text message."""
        return self.send_message(phone, TextMessage(text=message), scenario_key)

    def send_template(
        self,
        phone: str,
        template_name: str,
        language: str,
        namespace: Optional[str] = None,
        placeholders: Optional[List[str]] = None,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """
        Send a registered template message.

        Args:
            phone: Recipient phone number
            template_name: Name of the approved template
            language: Template language code
            namespace: Template namespace, omitted when empty
            placeholders: Values for the template placeholders

        Example:
            client.send_template("447700900000", "order_ready", "en", placeholders=["Anna", "42"])
        """
        message = TemplateMessage(
            template_name=template_name,
            language=language,
            namespace=namespace,
            placeholders=placeholders or []
        )
        return self.send_message(phone, message, scenario_key)

    def send_media_template(
        self,
        phone: str,
        template_name: str,
        language: str,
        header: Optional[Dict[str, Any]] = None,
        placeholders: Optional[List[str]] = None,
        buttons: Optional[List[Dict[str, Any]]] = None,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """
        Send a media template with header, body placeholders and buttons.

        Example:
            client.send_media_template(
                "447700900000",
                "new_collection",
                "en",
                header={"imageUrl": "https://example.com/banner.jpg"},
                placeholders=["Anna"],
                buttons=[{"quickReplyPayload": "show_more"}]
            )
        """
        message = MediaTemplateMessage(
            template_name=template_name,
            language=language,
            header=header,
            placeholders=placeholders or [],
            buttons=buttons or []
        )
        return self.send_message(phone, message, scenario_key)

    def send_image(
        self,
        phone: str,
        image_url: str,
        caption: Optional[str] = None,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """Send an image, with an optional caption."""
        return self.send_message(phone, ImageMessage(image_url=image_url, caption=caption), scenario_key)

    def send_audio(self, phone: str, audio_url: str, scenario_key: Any = _STORED) -> JSONValue:
        """Send an audio file."""
        return self.send_message(phone, AudioMessage(audio_url=audio_url), scenario_key)

    def send_file(
        self,
        phone: str,
        file_url: str,
        caption: Optional[str] = None,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """Send a document, with an optional caption."""
        return self.send_message(phone, FileMessage(file_url=file_url, caption=caption), scenario_key)

    def send_video(
        self,
        phone: str,
        video_url: str,
        caption: Optional[str] = None,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """Send a video, with an optional caption."""
        return self.send_message(phone, VideoMessage(video_url=video_url, caption=caption), scenario_key)

    def send_location(
        self,
        phone: str,
        longitude: float,
        latitude: float,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """Send a location pin. Note the longitude-first argument order."""
        return self.send_message(
            phone,
            LocationMessage(longitude=longitude, latitude=latitude),
            scenario_key
        )

    def send_contact(
        self,
        phone: str,
        name: str,
        contact_phone: str,
        scenario_key: Any = _STORED
    ) -> JSONValue:
        """Send a contact card with one main phone number."""
        return self.send_message(
            phone,
            ContactMessage(name=name, contact_phone=contact_phone),
            scenario_key
        )

    def get_client_info(self) -> Dict[str, Any]:
        """
        Get client configuration information. Credentials are not included.

        Returns:
            Dictionary with client configuration
        """
        return {
            "base_url": self.config.base_url,
            "auth_mode": self.config.auth_mode,
            "scenario_key": self.scenario_key,
            "timeout": self.config.timeout,
            "validation_enabled": self.enable_validation
        }

    def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "OmniClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
