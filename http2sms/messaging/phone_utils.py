"""
Phone Utilities
===============
Functions for phone number validation and normalization.

The http2sms API expects numbers in international format with a
``00`` prefix, e.g. ``0033601020304``.
"""

import re
from typing import Iterable, List, Union

from ..exceptions import PhoneNumberError

DEFAULT_COUNTRY_CODE = "33"

VALID_PHONE_PATTERN = re.compile(r"^00\d{7,15}$")
_SEPARATORS = re.compile(r"[\s\-.()\[\]]")


def is_valid(phone: str) -> bool:
    """
    Validate a phone number in canonical format.

    Args:
        phone: Phone number

    Returns:
        True if the number matches ``00`` followed by 7 to 15 digits
    """
    if not isinstance(phone, str) or not phone:
        return False
    return bool(VALID_PHONE_PATTERN.match(phone))


def _to_canonical(cleaned: str, country_code: str) -> str:
    if cleaned.startswith("+"):
        return "00" + cleaned[1:]
    if cleaned.startswith("00"):
        return cleaned
    if cleaned.startswith("0"):
        return f"00{country_code}{cleaned[1:]}"
    # Assume the country code is already there, without prefix
    return "00" + cleaned


def normalize(phone: str, default_country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """
    Normalize a phone number to canonical ``00`` format.

    Accepts local numbers (``0601020304``), ``+`` prefixed numbers,
    raw country code numbers (``33601020304``) and numbers that are
    already canonical.

    Args:
        phone: Raw phone number
        default_country_code: Country code applied to local numbers

    Returns:
        Canonical phone number

    Raises:
        PhoneNumberError: If the result is not a valid number
    """
    if not isinstance(phone, str):
        raise PhoneNumberError(f"Invalid phone number: {phone!r}", phone_number=phone)

    cleaned = _SEPARATORS.sub("", phone)
    formatted = _to_canonical(cleaned, default_country_code)

    if not is_valid(formatted):
        raise PhoneNumberError(
            f"Invalid phone number format: '{phone}'. "
            "Expected international format with 00 prefix (e.g., 0033601020304)",
            phone_number=phone,
        )
    return formatted


def normalize_many(
    phones: Union[str, Iterable[str]],
    default_country_code: str = DEFAULT_COUNTRY_CODE,
) -> List[str]:
    """
    Normalize several phone numbers, keeping their order.

    Args:
        phones: Sequence of numbers or a comma-separated string
        default_country_code: Country code applied to local numbers

    Returns:
        List of canonical numbers

    Raises:
        PhoneNumberError: On the first invalid number
    """
    if isinstance(phones, str):
        phones = phones.split(",")
    return [
        normalize(phone.strip() if isinstance(phone, str) else phone, default_country_code)
        for phone in phones
    ]
