from .request import DeliveryRequest, build_query_params, encode_message, format_deferred, redact
from .client import Http2SmsClient, ERROR_HANDLERS

__all__ = [
    "DeliveryRequest",
    "build_query_params",
    "encode_message",
    "format_deferred",
    "redact",
    "Http2SmsClient",
    "ERROR_HANDLERS",
]
