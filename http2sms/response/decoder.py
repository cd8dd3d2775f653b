"""
Response Decoder
================
Decodes http2sms API replies in JSON, XML, HTML or plain text.

Plain text replies look like::

    OK
    1987
    10867690

or::

    KO
    Missing message

HTML replies carry the same lines inside ``<BODY>``, separated by ``<br>``.
"""

import json
import math
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..exceptions import ResponseParseError
from .models import DeliveryResult, ResponseFormat, classify_content_type

EMPTY_RESPONSE_MESSAGE = "Empty response"
UNKNOWN_ERROR_MESSAGE = "Unknown error"

_LINE_BREAK = re.compile(r"\r?\n")
_HTML_BODY = re.compile(r"<body>(.*?)</body>", re.IGNORECASE | re.DOTALL)
_HTML_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_XML_SMS_ID = re.compile(r"<smsId>(.*?)</smsId>", re.IGNORECASE | re.DOTALL)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)
_BARE_INT = re.compile(r"^[+-]?\d+$", re.ASCII)
_STATUS_PREFIX = re.compile(r"^(\d{3})\s", re.ASCII)
_STATUS_PREFIX_STRIP = re.compile(r"^\d{3}\s*", re.ASCII)


def parse_credits(value: Any) -> Optional[float]:
    """Parse a credits value, returning None when it is not numeric."""
    if value is None or isinstance(value, bool) or value == "":
        return None
    try:
        credits = float(value)
    except (TypeError, ValueError):
        return None
    return credits if math.isfinite(credits) else None


def _coerce_status(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def _coerce_ids(value: Any) -> tuple:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    return (str(value),)


class ResponseDecoder:
    """Decodes one response body under one declared content type."""

    def __init__(self, body: Optional[str], content_type: Optional[str] = None):
        self.body = body or ""
        self.content_type = content_type
        self.format = classify_content_type(content_type)

    def decode(self) -> DeliveryResult:
        if not self.body.strip():
            return self._empty()

        handlers: Dict[ResponseFormat, Callable[[], DeliveryResult]] = {
            ResponseFormat.JSON: self._decode_json,
            ResponseFormat.XML: self._decode_xml,
            ResponseFormat.HTML: self._decode_html,
            ResponseFormat.TEXT: self._decode_text,
        }
        try:
            return handlers[self.format]()
        except ResponseParseError:
            raise
        except (ValueError, TypeError, AttributeError, OverflowError) as e:
            raise ResponseParseError(
                f"Failed to parse API response: {e}",
                content_type=self.content_type,
                raw_response=self.body,
            ) from e

    def _result(self, status: int, **kwargs) -> DeliveryResult:
        return DeliveryResult(
            status_code=status,
            raw_body=self.body,
            content_type=self.content_type,
            **kwargs,
        )

    def _empty(self) -> DeliveryResult:
        return self._result(0, error_message=EMPTY_RESPONSE_MESSAGE)

    # JSON

    def _decode_json(self) -> DeliveryResult:
        data = json.loads(self.body)
        if not isinstance(data, dict):
            raise ResponseParseError(
                f"Failed to parse API response: expected a JSON object, got {type(data).__name__}",
                content_type=self.content_type,
                raw_response=self.body,
            )

        ids = data.get("SmsIds")
        if ids is None:
            ids = data.get("smsIds")

        message = data.get("message")
        return self._result(
            _coerce_status(data.get("status")),
            credits_remaining=parse_credits(data.get("creditLeft")),
            message_ids=_coerce_ids(ids),
            error_message=None if message is None else str(message),
        )

    # XML

    def _xml_value(self, tag: str) -> Optional[str]:
        match = re.search(rf"<{tag}>(.*?)</{tag}>", self.body, re.IGNORECASE | re.DOTALL)
        return match.group(1) if match else None

    def _decode_xml(self) -> DeliveryResult:
        return self._result(
            _coerce_status(self._xml_value("status")),
            credits_remaining=parse_credits(self._xml_value("creditLeft")),
            message_ids=tuple(_XML_SMS_ID.findall(self.body)),
            error_message=self._xml_value("message"),
        )

    # HTML / plain text

    def _decode_html(self) -> DeliveryResult:
        match = _HTML_BODY.search(self.body)
        if not match:
            return self._decode_lines([])
        parts = (part.strip() for part in _HTML_BREAK.split(match.group(1)))
        return self._decode_lines([part for part in parts if part])

    def _decode_text(self) -> DeliveryResult:
        return self._decode_lines(_LINE_BREAK.split(self.body.strip()))

    def _decode_lines(self, lines: Sequence[str]) -> DeliveryResult:
        if not lines:
            return self._empty()

        status_line = lines[0].strip().upper()
        if status_line == "OK":
            return self._decode_success_lines(lines)
        return self._decode_error_lines(lines, status_line)

    def _decode_success_lines(self, lines: Sequence[str]) -> DeliveryResult:
        credits = parse_credits(lines[1].strip()) if len(lines) > 1 else None
        ids: List[str] = [line.strip() for line in lines[2:] if line.strip()]
        return self._result(100, credits_remaining=credits, message_ids=tuple(ids))

    def _decode_error_lines(self, lines: Sequence[str], status_line: str) -> DeliveryResult:
        if status_line == "KO":
            status = 0
        elif _BARE_INT.match(status_line):
            status = int(status_line)
        else:
            status = 0

        message = "\n".join(lines[1:]).strip()

        # Some errors carry their status code at the start of the message
        match = _STATUS_PREFIX.match(message)
        if match:
            status = int(match.group(1))
            message = _STATUS_PREFIX_STRIP.sub("", message, count=1)

        return self._result(status, error_message=message or UNKNOWN_ERROR_MESSAGE)


def decode(body: Optional[str], content_type: Optional[str] = None) -> DeliveryResult:
    """
    Decode an API response body.

    Args:
        body: Raw response body
        content_type: Declared content type (format chosen by substring)

    Returns:
        DeliveryResult

    Raises:
        ResponseParseError: If the body is not valid for the declared format
    """
    return ResponseDecoder(body, content_type).decode()
