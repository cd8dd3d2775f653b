"""
Encoding Detection
==================
Functions for SMS encoding detection and character counting.
"""

from typing import List

from .models import EncodingType, GSM7_BASIC, GSM7_EXTENDED


def is_gsm_character(char: str) -> bool:
    return char in GSM7_BASIC or char in GSM7_EXTENDED


def is_gsm_compatible(text: str) -> bool:
    """Return True if every character of ``text`` is in the GSM 03.38 repertoire."""
    return all(is_gsm_character(char) for char in text)


def detect_encoding(text: str) -> EncodingType:
    """
    Detect the required encoding for a message.

    Args:
        text: Message content

    Returns:
        EncodingType.GSM or EncodingType.UNICODE
    """
    for char in text:
        if not is_gsm_character(char):
            return EncodingType.UNICODE
    return EncodingType.GSM


def count_gsm7_characters(text: str) -> int:
    """
    Count the number of GSM-7 character units (extended chars count as 2).

    Args:
        text: Message content

    Returns:
        Character count for segmentation
    """
    count = 0
    for char in text:
        if char in GSM7_EXTENDED:
            count += 2
        else:
            count += 1
    return count


def count_characters(text: str, encoding: EncodingType) -> int:
    """Count character units of ``text`` under ``encoding``."""
    if encoding == EncodingType.GSM:
        return count_gsm7_characters(text)
    return len(text)


def find_non_gsm_characters(text: str) -> List[str]:
    """
    Find characters outside the GSM repertoire.

    Each character is reported once, in order of first occurrence.
    """
    found: List[str] = []
    for char in text:
        if not is_gsm_character(char) and char not in found:
            found.append(char)
    return found
