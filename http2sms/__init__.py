"""
http2sms
========
Client for the OVH http2sms API: send SMS with a single HTTP GET and
decode the reply.

Usage:
    import http2sms

    http2sms.configure(account="sms-xx11111-1", login="user", password="secret")
    result = http2sms.deliver(to="0601020304", message="Hello!")
    result.success      # True
    result.message_ids  # ("123456789",)

    http2sms.message_info("Hello!")
    # SegmentInfo(character_count=6, encoding=<EncodingType.GSM: 'gsm'>, segment_count=1, ...)
"""

from typing import Optional

__version__ = "0.1.0"

# Configuration
from http2sms.config import Settings, get_settings, configure, reset_settings

# Hooks
from http2sms.hooks import HookPoint, LifecycleHooks

# Exceptions
from http2sms.exceptions import (
    Http2SmsError,
    ConfigurationError,
    ValidationError,
    PhoneNumberError,
    MessageLengthError,
    AuthenticationError,
    MissingParameterError,
    InvalidParameterError,
    SenderNotFoundError,
    NetworkError,
    ResponseParseError,
)

# Messaging
from http2sms.messaging import (
    EncodingType,
    SegmentInfo,
    analyze,
    detect_encoding,
    is_gsm_compatible,
    normalize,
    normalize_many,
)

# Response
from http2sms.response import DeliveryResult, ResponseFormat, decode

# Client
from http2sms.http import DeliveryRequest, Http2SmsClient


def reset_configuration() -> Settings:
    """Reset the global settings to defaults and environment values."""
    return reset_settings()


def client(**overrides) -> Http2SmsClient:
    """Get a new client, optionally overriding global settings."""
    return Http2SmsClient(**overrides)


def deliver(**options) -> DeliveryResult:
    """Send an SMS with the global settings. See Http2SmsClient.deliver."""
    return Http2SmsClient().deliver(**options)


def message_info(message: str, commercial: bool = True) -> SegmentInfo:
    """Character count, encoding and segment usage of a message."""
    return analyze(message, commercial=commercial)


def gsm_compatible(message: str) -> bool:
    """True if the message only uses GSM 03.38 characters."""
    return is_gsm_compatible(message)


def format_phone(phone: str, country_code: Optional[str] = None) -> str:
    """Format a phone number with the 00 prefix, using the configured country code by default."""
    return normalize(phone, country_code or get_settings().default_country_code)


__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "configure",
    "reset_settings",
    "reset_configuration",
    # Hooks
    "HookPoint",
    "LifecycleHooks",
    # Exceptions
    "Http2SmsError",
    "ConfigurationError",
    "ValidationError",
    "PhoneNumberError",
    "MessageLengthError",
    "AuthenticationError",
    "MissingParameterError",
    "InvalidParameterError",
    "SenderNotFoundError",
    "NetworkError",
    "ResponseParseError",
    # Messaging
    "EncodingType",
    "SegmentInfo",
    "analyze",
    "detect_encoding",
    "is_gsm_compatible",
    "normalize",
    "normalize_many",
    # Response
    "DeliveryResult",
    "ResponseFormat",
    "decode",
    # Client
    "DeliveryRequest",
    "Http2SmsClient",
    "client",
    "deliver",
    "message_info",
    "gsm_compatible",
    "format_phone",
]
