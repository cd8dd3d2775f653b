"""
Response Models
===============
Uniform result of an http2sms API exchange.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

SUCCESS_CODES = frozenset({100, 101})

ERROR_TYPES = {
    201: "missing_parameter",
    202: "invalid_parameter",
    241: "sender_not_found",
    401: "authentication_error",
}


class ResponseFormat(str, Enum):
    """Wire formats understood by the decoder."""
    JSON = "json"
    XML = "xml"
    HTML = "html"
    TEXT = "text"


def classify_content_type(content_type: Optional[str]) -> ResponseFormat:
    """Pick the response format for a declared content type."""
    lowered = (content_type or "").lower()
    for fmt in (ResponseFormat.JSON, ResponseFormat.XML, ResponseFormat.HTML):
        if fmt.value in lowered:
            return fmt
    return ResponseFormat.TEXT


@dataclass(frozen=True)
class DeliveryResult:
    """Decoded API response."""
    status_code: int
    credits_remaining: Optional[float] = None
    message_ids: Tuple[str, ...] = ()
    error_message: Optional[str] = None
    raw_body: str = ""
    content_type: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status_code in SUCCESS_CODES

    @property
    def failure(self) -> bool:
        return not self.success

    @property
    def error_type(self) -> Optional[str]:
        """Error category for known failure codes, None otherwise."""
        return ERROR_TYPES.get(self.status_code)
