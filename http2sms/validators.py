"""
Validators
==========
Checks run on a delivery request before any network call.
"""

import re
from datetime import datetime
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

import structlog

from .config import Settings
from .exceptions import MessageLengthError, ValidationError
from .messaging import SegmentInfo, EncodingType, analyze, normalize_many

if TYPE_CHECKING:
    from .http.request import DeliveryRequest

logger = structlog.get_logger(__name__)

MAX_TAG_LENGTH = 20
MAX_SEGMENTS = 10
VALID_SMS_CLASSES = (0, 1, 2, 3)
VALID_SMS_CODINGS = (1, 2)
DEFERRED_PATTERN = re.compile(r"^\d{12}$")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    try:
        return len(value) == 0
    except TypeError:
        return False


def validate_required(request: "DeliveryRequest") -> None:
    missing = [name for name in ("to", "message") if _is_blank(getattr(request, name))]
    if missing:
        raise ValidationError(f"Missing required parameters: {', '.join(missing)}")


def validate_message(message: str, commercial: bool = True, raise_on_length_error: bool = True) -> SegmentInfo:
    """
    Analyze a message and enforce the segment limit.

    Raises:
        MessageLengthError: If more than MAX_SEGMENTS segments are needed
            and raise_on_length_error is set
    """
    info = analyze(message, commercial=commercial)

    if info.encoding == EncodingType.UNICODE:
        logger.warning(
            "unicode_encoding_required",
            characters=list(info.non_gsm_characters),
            max_single_segment=info.max_single_segment,
        )

    if info.segment_count > MAX_SEGMENTS:
        if raise_on_length_error:
            raise MessageLengthError(
                f"Message is very long and will be sent as {info.segment_count} SMS segments. "
                f"Current length: {info.character_count} characters ({info.encoding.value} encoding).",
                encoding=info.encoding.value,
                length=info.character_count,
                max_length=info.max_single_segment,
                segment_count=info.segment_count,
            )
        logger.warning(
            "message_length_exceeded",
            segments=info.segment_count,
            characters=info.character_count,
            encoding=info.encoding.value,
        )
    return info


def validate_tag(tag: Optional[str]) -> None:
    if tag is not None and len(str(tag)) > MAX_TAG_LENGTH:
        raise ValidationError(
            f"Tag exceeds maximum length of {MAX_TAG_LENGTH} characters (got {len(str(tag))})"
        )


def validate_deferred(deferred: Any) -> None:
    if deferred is None or isinstance(deferred, datetime):
        return
    if isinstance(deferred, str) and DEFERRED_PATTERN.match(deferred):
        return
    raise ValidationError(
        f"Invalid deferred format: '{deferred}'. "
        "Expected hhmmddMMYYYY (e.g., 125025112024 for 25/11/2024 at 12:50) or a datetime."
    )


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def validate_sms_class(sms_class: Any) -> None:
    if sms_class is not None and _as_int(sms_class) not in VALID_SMS_CLASSES:
        raise ValidationError(f"Invalid SMS class: {sms_class}. Must be 0, 1, 2, or 3.")


def validate_sms_coding(sms_coding: Any) -> None:
    if sms_coding is not None and _as_int(sms_coding) not in VALID_SMS_CODINGS:
        raise ValidationError(f"Invalid SMS coding: {sms_coding}. Must be 1 (7-bit) or 2 (Unicode).")


def validate_request(request: "DeliveryRequest", settings: Settings) -> Tuple[List[str], SegmentInfo]:
    """
    Validate a delivery request.

    Args:
        request: Request to validate
        settings: Effective settings (country code, length policy)

    Returns:
        Tuple of (normalized recipients, message SegmentInfo)

    Raises:
        ValidationError, PhoneNumberError, MessageLengthError
    """
    validate_required(request)
    recipients = normalize_many(request.to, settings.default_country_code)
    info = validate_message(
        request.message,
        commercial=request.commercial,
        raise_on_length_error=settings.raise_on_length_error,
    )
    validate_tag(request.tag)
    validate_deferred(request.deferred)
    validate_sms_class(request.sms_class)
    validate_sms_coding(request.sms_coding)
    return recipients, info
