"""
Unit Tests for Response Decoding
================================
JSON, XML, HTML and plain-text replies.
"""

import pytest

from http2sms.exceptions import ResponseParseError
from http2sms.response import DeliveryResult, ResponseFormat, classify_content_type, decode, parse_credits


class TestDeliveryResult:
    """Tests for the result model."""

    @pytest.mark.parametrize("status", [100, 101])
    def test_success_codes(self, status):
        result = DeliveryResult(status_code=status)
        assert result.success is True
        assert result.failure is False

    @pytest.mark.parametrize("status", [0, 201, 202, 241, 401, 999])
    def test_failure_codes(self, status):
        assert DeliveryResult(status_code=status).failure is True

    def test_error_type(self):
        assert DeliveryResult(status_code=201).error_type == "missing_parameter"
        assert DeliveryResult(status_code=202).error_type == "invalid_parameter"
        assert DeliveryResult(status_code=241).error_type == "sender_not_found"
        assert DeliveryResult(status_code=401).error_type == "authentication_error"
        assert DeliveryResult(status_code=100).error_type is None

    def test_is_immutable(self):
        result = DeliveryResult(status_code=100)
        with pytest.raises(AttributeError):
            result.status_code = 201


class TestContentTypeClassification:

    @pytest.mark.parametrize(
        "content_type,expected",
        [
            ("application/json", ResponseFormat.JSON),
            ("text/json", ResponseFormat.JSON),
            ("APPLICATION/JSON; charset=utf-8", ResponseFormat.JSON),
            ("text/xml", ResponseFormat.XML),
            ("application/xhtml+xml", ResponseFormat.XML),
            ("text/html", ResponseFormat.HTML),
            ("text/plain", ResponseFormat.TEXT),
            ("", ResponseFormat.TEXT),
            (None, ResponseFormat.TEXT),
        ],
    )
    def test_classification(self, content_type, expected):
        assert classify_content_type(content_type) == expected


class TestJsonDecoding:

    def test_success(self):
        result = decode('{"status":100,"creditLeft":"1987","SmsIds":["10867690"]}', "application/json")

        assert result.success is True
        assert result.status_code == 100
        assert result.credits_remaining == 1987.0
        assert result.message_ids == ("10867690",)
        assert result.content_type == "application/json"

    def test_lowercase_ids_key_and_numeric_values(self):
        result = decode('{"status":"101","creditLeft":12.5,"smsIds":[123,456]}', "text/json")

        assert result.status_code == 101
        assert result.credits_remaining == 12.5
        assert result.message_ids == ("123", "456")

    def test_error(self):
        result = decode('{"status":201,"message":"Missing message"}', "application/json")

        assert result.failure is True
        assert result.status_code == 201
        assert result.error_message == "Missing message"
        assert result.credits_remaining is None
        assert result.message_ids == ()

    def test_malformed_json(self):
        with pytest.raises(ResponseParseError, match="Failed to parse") as exc_info:
            decode("not json", "application/json")

        assert exc_info.value.content_type == "application/json"
        assert exc_info.value.raw_response == "not json"

    def test_non_object_document(self):
        with pytest.raises(ResponseParseError):
            decode("[1, 2]", "application/json")

    @pytest.mark.parametrize("status", ["1e400", "Infinity", "-Infinity", "NaN"])
    def test_non_finite_status(self, status):
        """Should reject a status that cannot be an integer."""
        body = '{"status": ' + status + '}'
        with pytest.raises(ResponseParseError) as exc_info:
            decode(body, "application/json")

        assert exc_info.value.raw_response == body


class TestXmlDecoding:

    def test_success(self):
        body = (
            '<?xml version="1.0" encoding="UTF-8" ?>'
            "<response><status>100</status><creditLeft>1987</creditLeft>"
            "<smsIds><smsId>10867690</smsId></smsIds></response>"
        )
        result = decode(body, "text/xml")

        assert result.success is True
        assert result.credits_remaining == 1987.0
        assert result.message_ids == ("10867690",)

    def test_error(self):
        body = "<response><status>201</status><message>Missing message</message></response>"
        result = decode(body, "application/xml")

        assert result.failure is True
        assert result.status_code == 201
        assert result.error_message == "Missing message"

    def test_multiple_ids_in_document_order(self):
        body = (
            "<response><status>100</status><creditLeft>1987</creditLeft>"
            "<smsIds><smsId>123</smsId><smsId>456</smsId><SMSID>789</SMSID></smsIds></response>"
        )
        assert decode(body, "text/xml").message_ids == ("123", "456", "789")

    def test_case_insensitive_tags(self):
        result = decode("<RESPONSE><STATUS>101</STATUS></RESPONSE>", "text/xml")
        assert result.status_code == 101
        assert result.success is True


class TestHtmlDecoding:

    def test_success(self):
        body = "<!DOCTYPE html><HTML><HEAD></HEAD><BODY>OK<br>1987<br>10867690<br></BODY></HTML>"
        result = decode(body, "text/html")

        assert result.success is True
        assert result.credits_remaining == 1987.0
        assert result.message_ids == ("10867690",)

    def test_error(self):
        body = "<!DOCTYPE html><HTML><HEAD></HEAD><BODY>KO<br>Missing message<br></BODY></HTML>"
        result = decode(body, "text/html")

        assert result.failure is True
        assert result.error_message == "Missing message"

    def test_break_variants(self):
        body = "<html><body>\nOK<BR/>1987<br />123<br>\n456<br></body></html>"
        result = decode(body, "text/html")

        assert result.message_ids == ("123", "456")

    def test_missing_body_tag(self):
        result = decode("<html>OK<br>1987</html>", "text/html")

        assert result.failure is True
        assert result.error_message == "Empty response"


class TestPlainTextDecoding:

    def test_success(self):
        result = decode("OK\n1987\n10867690", "text/plain")

        assert result.success is True
        assert result.credits_remaining == 1987.0
        assert result.message_ids == ("10867690",)

    def test_multiple_ids(self):
        assert decode("OK\n1987\n123\n456", "text/plain").message_ids == ("123", "456")

    def test_windows_line_endings(self):
        assert decode("OK\r\n1987\r\n123", "text/plain").message_ids == ("123",)

    def test_ok_without_credits(self):
        result = decode("ok", "text/plain")

        assert result.success is True
        assert result.credits_remaining is None
        assert result.message_ids == ()

    def test_non_numeric_credits(self):
        assert decode("OK\nabc\n123", "text/plain").credits_remaining is None

    def test_ko(self):
        result = decode("KO\nMissing message", "text/plain")

        assert result.failure is True
        assert result.status_code == 0
        assert result.error_message == "Missing message"

    def test_status_prefix_in_message(self):
        result = decode("KO\n201 Missing message", "text/plain")

        assert result.status_code == 201
        assert result.error_message == "Missing message"

    def test_numeric_status_line(self):
        result = decode("401\nIP not authorized", "text/plain")

        assert result.status_code == 401
        assert result.error_message == "IP not authorized"

    def test_full_width_digits_are_not_a_status(self):
        """Only ASCII digits count as a status code."""
        result = decode("KO\n\uff12\uff10\uff11 Missing message", "text/plain")

        assert result.status_code == 0
        assert result.error_message == "\uff12\uff10\uff11 Missing message"

        assert decode("\uff14\uff10\uff11\nDenied", "text/plain").status_code == 0

    def test_multiline_error_message(self):
        result = decode("KO\nfirst line\nsecond line", "text/plain")
        assert result.error_message == "first line\nsecond line"

    def test_unknown_error(self):
        result = decode("KO", "text/plain")

        assert result.status_code == 0
        assert result.error_message == "Unknown error"

    def test_unrecognized_status_line(self):
        result = decode("ERROR\nsomething failed", "text/plain")

        assert result.status_code == 0
        assert result.error_message == "something failed"

    def test_default_content_type_is_plain_text(self):
        assert decode("OK\n10\n1").message_ids == ("1",)


class TestEmptyResponse:

    @pytest.mark.parametrize("content_type", ["application/json", "text/xml", "text/html", "text/plain", None])
    @pytest.mark.parametrize("body", ["", "   \n", None])
    def test_empty_body(self, content_type, body):
        result = decode(body, content_type)

        assert result.success is False
        assert result.status_code == 0
        assert result.error_message == "Empty response"


class TestParseCredits:

    @pytest.mark.parametrize(
        "value,expected",
        [("1987", 1987.0), (" 12.5 ", 12.5), (3, 3.0), ("", None), (None, None), ("abc", None), ("nan", None)],
    )
    def test_parse_credits(self, value, expected):
        assert parse_credits(value) == expected
