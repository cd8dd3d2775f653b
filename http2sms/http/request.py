"""
Delivery Request
================
Request model and query parameter assembly for the http2sms GET call.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Sequence, Union

import structlog

from ..config import Settings

logger = structlog.get_logger(__name__)

FILTERED = "[FILTERED]"
DEFERRED_FORMAT = "%H%M%d%m%Y"  # hhmmddMMYYYY


@dataclass(frozen=True)
class DeliveryRequest:
    """One SMS delivery: recipients, text and optional API parameters."""
    to: Union[str, Sequence[str]]
    message: str
    sender: Optional[str] = None
    deferred: Union[datetime, str, None] = None
    tag: Optional[str] = None
    sms_class: Optional[int] = None
    sms_coding: Optional[int] = None
    no_stop: bool = False
    sender_for_response: bool = False
    content_type: Optional[str] = None

    @property
    def commercial(self) -> bool:
        """Commercial messages carry the STOP clause."""
        return not self.no_stop


def encode_message(message: str) -> str:
    # Line breaks must reach the API as the literal "%0d"
    return str(message).replace("\n", "%0d").replace("\r", "")


def format_deferred(deferred: Union[datetime, str]) -> str:
    if isinstance(deferred, datetime):
        return deferred.strftime(DEFERRED_FORMAT)
    return str(deferred)


def build_query_params(
    request: DeliveryRequest,
    recipients: Sequence[str],
    settings: Settings,
) -> Dict[str, str]:
    """
    Build the ordered query parameters for a delivery.

    Args:
        request: Validated delivery request
        recipients: Normalized phone numbers
        settings: Effective settings snapshot

    Returns:
        Query parameters, optional values only when present
    """
    params: Dict[str, str] = {
        "account": settings.account,
        "login": settings.login,
        "password": settings.password,
        "to": ",".join(recipients),
        "message": encode_message(request.message),
    }

    if request.sender_for_response:
        if request.sender:
            logger.warning(
                "sender_ignored_for_reply",
                sender=request.sender,
                detail="senderForResponse is enabled, the 'from' parameter is sent empty",
            )
        params["from"] = ""
        params["senderForResponse"] = "1"
    else:
        sender = request.sender or settings.default_sender
        if sender:
            params["from"] = sender

    if request.deferred is not None:
        params["deferred"] = format_deferred(request.deferred)
    if request.tag is not None:
        params["tag"] = request.tag
    if request.sms_class is not None:
        params["class"] = str(int(request.sms_class))
    if request.sms_coding is not None:
        params["smsCoding"] = str(int(request.sms_coding))
    if request.no_stop:
        params["noStop"] = "1"

    params["contentType"] = request.content_type or settings.default_content_type
    return params


def redact(params: Dict[str, str]) -> Dict[str, str]:
    """Copy of the parameters with the password hidden."""
    safe = dict(params)
    if "password" in safe:
        safe["password"] = FILTERED
    return safe
