"""
Exceptions
==========
Error hierarchy for http2sms delivery, validation and response handling.
"""

from typing import Optional, Any


class Http2SmsError(Exception):
    """Base exception for all http2sms errors."""
    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None, raw_response: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.raw_response = raw_response
        super().__init__(message)


class ConfigurationError(Http2SmsError):
    """Raised when credentials are missing or settings are invalid."""
    pass


class ValidationError(Http2SmsError):
    """Raised when request parameters fail validation before sending."""
    pass


class PhoneNumberError(Http2SmsError):
    """Raised when a phone number cannot be normalized."""
    def __init__(self, message: str = "Invalid phone number", phone_number: Any = None, **kwargs):
        self.phone_number = phone_number
        super().__init__(message, **kwargs)


class MessageLengthError(Http2SmsError):
    """Raised when a message needs more segments than allowed."""
    def __init__(
        self,
        message: str = "Message length error",
        encoding: Optional[str] = None,
        length: Optional[int] = None,
        max_length: Optional[int] = None,
        segment_count: Optional[int] = None,
        **kwargs,
    ):
        self.encoding = encoding
        self.length = length
        self.max_length = max_length
        self.segment_count = segment_count
        super().__init__(message, **kwargs)


class AuthenticationError(Http2SmsError):
    """Raised when the API rejects the caller (status 401)."""
    def __init__(self, message: str = "Authentication failed: IP not authorized", raw_response: Optional[str] = None):
        super().__init__(message, status_code=401, raw_response=raw_response)


class MissingParameterError(Http2SmsError):
    """Raised when the API reports a missing parameter (status 201)."""
    def __init__(self, message: str = "Missing required parameter", parameter: Optional[str] = None, raw_response: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message, status_code=201, raw_response=raw_response)


class InvalidParameterError(Http2SmsError):
    """Raised when the API reports an invalid parameter (status 202)."""
    def __init__(self, message: str = "Invalid parameter", parameter: Optional[str] = None, raw_response: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message, status_code=202, raw_response=raw_response)


class SenderNotFoundError(Http2SmsError):
    """Raised when the sender is unknown to the account (status 241)."""
    def __init__(self, message: str = "Sender not found", sender: Optional[str] = None, raw_response: Optional[str] = None):
        self.sender = sender
        super().__init__(message, status_code=241, raw_response=raw_response)


class NetworkError(Http2SmsError):
    """Raised on transport failures (timeouts, refused connections, ...)."""
    def __init__(self, message: str = "Network error occurred", original_error: Optional[Exception] = None, **kwargs):
        self.original_error = original_error
        super().__init__(message, **kwargs)


class ResponseParseError(Http2SmsError):
    """Raised when a response body cannot be decoded."""
    def __init__(self, message: str = "Failed to parse API response", content_type: Optional[str] = None, **kwargs):
        self.content_type = content_type
        super().__init__(message, **kwargs)
