"""
Messaging Models
================
Data models for message encoding and segmentation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Tuple


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM = "gsm"
    UNICODE = "unicode"


# GSM 03.38 character set (basic)
GSM7_BASIC = frozenset(
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

# GSM 03.38 extension characters (count as 2)
GSM7_EXTENDED = frozenset("€|^{}[]~\\")


class SegmentLimits(NamedTuple):
    """Usable characters in the first and in each continuation segment."""
    first: int
    continuation: int


# Commercial messages lose 11 characters of the first segment to the STOP clause.
SEGMENT_LIMITS: Dict[Tuple[EncodingType, bool], SegmentLimits] = {
    (EncodingType.GSM, True): SegmentLimits(149, 153),
    (EncodingType.GSM, False): SegmentLimits(160, 153),
    (EncodingType.UNICODE, True): SegmentLimits(59, 70),
    (EncodingType.UNICODE, False): SegmentLimits(70, 67),
}


@dataclass(frozen=True)
class SegmentInfo:
    """Length accounting for a single message."""
    character_count: int
    encoding: EncodingType
    segment_count: int
    remaining_in_last_segment: int
    max_single_segment: int
    non_gsm_characters: Tuple[str, ...] = ()

    @property
    def is_multipart(self) -> bool:
        return self.segment_count > 1
