from .models import DeliveryResult, ResponseFormat, classify_content_type, SUCCESS_CODES, ERROR_TYPES
from .decoder import ResponseDecoder, decode, parse_credits

__all__ = [
    "DeliveryResult",
    "ResponseFormat",
    "classify_content_type",
    "SUCCESS_CODES",
    "ERROR_TYPES",
    "ResponseDecoder",
    "decode",
    "parse_credits",
]
