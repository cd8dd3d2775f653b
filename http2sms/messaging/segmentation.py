"""
Message Segmentation
====================
Functions for SMS segment calculation.
"""

import math
from typing import Tuple

from .models import EncodingType, SegmentInfo, SegmentLimits, SEGMENT_LIMITS
from .encoding import detect_encoding, count_characters, find_non_gsm_characters


def segment_limits(encoding: EncodingType, commercial: bool = True) -> SegmentLimits:
    """Return the first/continuation segment limits for an encoding."""
    return SEGMENT_LIMITS[(EncodingType(encoding), bool(commercial))]


def calculate_segments(char_count: int, limits: SegmentLimits) -> Tuple[int, int]:
    """
    Calculate the number of SMS segments required.

    Args:
        char_count: Message length in character units
        limits: Segment limits for the message encoding

    Returns:
        Tuple of (segments, remaining characters in the last segment)
    """
    if char_count <= limits.first:
        return 1, limits.first - char_count

    additional = math.ceil((char_count - limits.first) / limits.continuation)
    capacity = limits.first + additional * limits.continuation
    return 1 + additional, capacity - char_count


def analyze(text: str, commercial: bool = True) -> SegmentInfo:
    """
    Analyze a message: encoding, length and segment usage.

    Commercial messages carry a STOP clause which shortens the first
    segment (see SEGMENT_LIMITS).

    Args:
        text: Message content
        commercial: Whether the STOP clause is appended

    Returns:
        SegmentInfo for the message
    """
    encoding = detect_encoding(text)
    char_count = count_characters(text, encoding)
    limits = segment_limits(encoding, commercial)
    segments, remaining = calculate_segments(char_count, limits)

    non_gsm: Tuple[str, ...] = ()
    if encoding == EncodingType.UNICODE:
        non_gsm = tuple(find_non_gsm_characters(text))

    return SegmentInfo(
        character_count=char_count,
        encoding=encoding,
        segment_count=segments,
        remaining_in_last_segment=remaining,
        max_single_segment=limits.first,
        non_gsm_characters=non_gsm,
    )
