"""
Message Segmentation and Phone Numbers
======================================
Encoding detection, segment accounting and phone number normalization.
"""

from .models import EncodingType, SegmentInfo, SegmentLimits, SEGMENT_LIMITS, GSM7_BASIC, GSM7_EXTENDED
from .encoding import (
    detect_encoding,
    count_characters,
    count_gsm7_characters,
    find_non_gsm_characters,
    is_gsm_compatible,
)
from .segmentation import analyze, calculate_segments, segment_limits
from .phone_utils import DEFAULT_COUNTRY_CODE, is_valid, normalize, normalize_many

__all__ = [
    # Models
    "EncodingType",
    "SegmentInfo",
    "SegmentLimits",
    "SEGMENT_LIMITS",
    "GSM7_BASIC",
    "GSM7_EXTENDED",
    # Encoding
    "detect_encoding",
    "count_characters",
    "count_gsm7_characters",
    "find_non_gsm_characters",
    "is_gsm_compatible",
    # Segmentation
    "analyze",
    "calculate_segments",
    "segment_limits",
    # Phone
    "DEFAULT_COUNTRY_CODE",
    "is_valid",
    "normalize",
    "normalize_many",
]
