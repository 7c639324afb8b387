"""
Custom exceptions for the Infobip OMNI WhatsApp client.

Every failure the client can hit is surfaced as a subclass of ``OmniError``.
Nothing is retried or recovered locally.
"""

from typing import Optional, Dict, Any, List, Union

from .constants import StatusCodes


class OmniError(Exception):
    """
    Base exception class for all client errors.

    Attributes:
        message (str): Error message
        status_code (Optional[int]): HTTP status code if applicable
        error_code (Optional[str]): API specific error code
        details (Dict[str, Any]): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self):
        error_parts = [f"{self.__class__.__name__}: {self.message}"]

        if self.status_code:
            error_parts.append(f"Status Code: {self.status_code}")

        if self.error_code:
            error_parts.append(f"Error Code: {self.error_code}")

        if self.details:
            error_parts.append(f"Details: {self.details}")

        return " | ".join(error_parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "details": self.details
        }


class ValidationError(OmniError):
    """
    Raised when client-side input validation fails.

    Attributes:
        field (Optional[str]): The field that failed validation
        value (Any): The invalid value
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def __str__(self):
        base_str = super().__str__()
        if self.field:
            base_str += f" | Field: {self.field}"
        if self.value is not None:
            base_str += f" | Value: {self.value}"
        return base_str


class NetworkError(OmniError):
    """
    Raised when the request never produced an HTTP response.

    This includes:
    - Connection refused or reset
    - DNS resolution failures
    - SSL/TLS errors
    - Timeouts configured on the client
    """

    def __init__(self, message: str = "Network error occurred", **kwargs):
        super().__init__(message, **kwargs)


TransportError = NetworkError


class DecodeError(OmniError):
    """
    Raised when a successful response body is not valid JSON.

    Attributes:
        body (str): The raw response text
    """

    def __init__(self, message: str = "Response body is not valid JSON", body: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.body = body


class HTTPStatusError(OmniError):
    """
    Raised when the provider answers with a non-2xx status.

    Attributes:
        response_body: Decoded JSON body, or the raw text when it is not JSON
        user_errors (List[str]): Validation messages extracted from the body
    """

    def __init__(
        self,
        message: str,
        response_body: Union[Dict[str, Any], List[Any], str, None] = None,
        user_errors: Optional[List[str]] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.response_body = response_body
        self.user_errors = user_errors or []

    def __str__(self):
        base_str = super().__str__()
        if self.user_errors:
            base_str += f" | User Errors: {', '.join(self.user_errors)}"
        return base_str


class AuthenticationError(HTTPStatusError):
    """
    Raised when credentials are missing or rejected.

    This typically occurs when:
    - No token and no username/password were supplied
    - The API key or password is invalid or expired (401)
    - The account lacks permission for the endpoint (403)
    """

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, **kwargs)


class RateLimitError(HTTPStatusError):
    """Raised on HTTP 429. The client does not wait or retry."""

    def __init__(self, message: str = "Rate limit exceeded", **kwargs):
        super().__init__(message, **kwargs)


class APIError(HTTPStatusError):
    """Raised for any other non-2xx response (4xx payload errors, 5xx provider failures)."""


HTTP_STATUS_TO_EXCEPTION = {
    StatusCodes.UNAUTHORIZED: AuthenticationError,
    StatusCodes.FORBIDDEN: AuthenticationError,
    StatusCodes.TOO_MANY_REQUESTS: RateLimitError,
}


def _extract_user_errors(validation_errors: Any) -> List[str]:
    """Flatten Infobip validationErrors, either {field: [messages]} or [{field, message}]."""
    user_errors = []

    if isinstance(validation_errors, dict):
        for field_name, messages in validation_errors.items():
            if not isinstance(messages, list):
                messages = [messages]
            for text in messages:
                user_errors.append(f"{field_name}: {text}")

    elif isinstance(validation_errors, list):
        for err in validation_errors:
            if isinstance(err, dict):
                user_errors.append(
                    f"{err.get('field', 'unknown')}: {err.get('message', 'validation failed')}"
                )
            else:
                user_errors.append(str(err))

    return user_errors


def create_exception_from_response(
    status_code: int,
    response_data: Union[Dict[str, Any], List[Any], str, None] = None,
    default_message: str = "API request failed"
) -> HTTPStatusError:
    """
    Create appropriate exception based on HTTP status code and response data.

    Args:
        status_code: HTTP status code
        response_data: Decoded response body, or raw text
        default_message: Message used when the body carries none

    Returns:
        HTTPStatusError subclass instance
    """
    message = f"{default_message} (HTTP {status_code})"
    error_code = None
    user_errors = []

    if isinstance(response_data, dict):
        if "requestError" in response_data:
            request_error = response_data["requestError"]
            service_error = None
            if isinstance(request_error, dict):
                service_error = request_error.get("serviceException")

            if isinstance(service_error, dict):
                message = str(service_error.get("text") or message)
                error_code = service_error.get("messageId")
                user_errors = _extract_user_errors(service_error.get("validationErrors"))

        elif "error" in response_data:
            message = str(response_data["error"])

    exception_class = HTTP_STATUS_TO_EXCEPTION.get(status_code, APIError)

    return exception_class(
        message=message,
        status_code=status_code,
        error_code=error_code,
        response_body=response_data,
        user_errors=user_errors
    )
