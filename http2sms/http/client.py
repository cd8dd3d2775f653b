import httpx
import structlog
from typing import Optional, Dict, Type

from ..config import Settings, get_settings
from ..exceptions import (
    Http2SmsError,
    NetworkError,
    AuthenticationError,
    MissingParameterError,
    InvalidParameterError,
    SenderNotFoundError,
)
from ..hooks import HookPoint
from ..response import DeliveryResult, decode
from ..validators import validate_request
from .request import DeliveryRequest, build_query_params, redact

logger = structlog.get_logger(__name__)

# API status codes with a dedicated exception
ERROR_HANDLERS: Dict[int, Type[Http2SmsError]] = {
    401: AuthenticationError,
    201: MissingParameterError,
    202: InvalidParameterError,
    241: SenderNotFoundError,
}


class Http2SmsClient:
    """
    Blocking client for the OVH http2sms API.

    Features:
    - Per-call settings snapshot (process defaults + client overrides).
    - Validation and phone normalization before any network I/O.
    - Lifecycle hooks around the exchange.
    - Standardized exception mapping for API and transport errors.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
        **overrides,
    ):
        self._settings = settings
        self._transport = transport
        self._overrides = overrides
        self._validate_overrides()

    def _validate_overrides(self) -> None:
        """Fail at construction on unknown or invalid option values."""
        (self._settings or get_settings()).with_overrides(**self._overrides)

    @property
    def config(self) -> Settings:
        """Effective settings for the next call."""
        base = self._settings or get_settings()
        return base.with_overrides(**self._overrides)

    def deliver(
        self,
        to,
        message: str,
        sender: Optional[str] = None,
        deferred=None,
        tag: Optional[str] = None,
        sms_class: Optional[int] = None,
        sms_coding: Optional[int] = None,
        no_stop: bool = False,
        sender_for_response: bool = False,
        content_type: Optional[str] = None,
    ) -> DeliveryResult:
        """
        Send an SMS.

        Args:
            to: Recipient number, list of numbers or comma-separated string
            message: SMS content
            sender: Sender name (default sender from settings if None)
            deferred: datetime or hhmmddMMYYYY string for scheduled sending
            tag: Tracking tag (max 20 characters)
            sms_class: SMS class 0-3
            sms_coding: 1 (7-bit) or 2 (Unicode)
            no_stop: Non-commercial SMS, no STOP clause
            sender_for_response: Allow recipients to reply
            content_type: Response format (default from settings)

        Returns:
            DeliveryResult

        Raises:
            ConfigurationError, ValidationError, PhoneNumberError,
            MessageLengthError, NetworkError, ResponseParseError,
            AuthenticationError, MissingParameterError,
            InvalidParameterError, SenderNotFoundError
        """
        return self.send(DeliveryRequest(
            to=to,
            message=message,
            sender=sender,
            deferred=deferred,
            tag=tag,
            sms_class=sms_class,
            sms_coding=sms_coding,
            no_stop=no_stop,
            sender_for_response=sender_for_response,
            content_type=content_type,
        ))

    def send(self, request: DeliveryRequest) -> DeliveryResult:
        """Validate, send and decode a single DeliveryRequest."""
        settings = self.config
        settings.validate_credentials()

        recipients, _ = validate_request(request, settings)
        params = build_query_params(request, recipients, settings)
        return self._execute(settings, params)

    def _map_exception(self, exc: httpx.HTTPError) -> NetworkError:
        """Map httpx exceptions to NetworkError."""
        if isinstance(exc, httpx.TimeoutException):
            return NetworkError(f"HTTP request timed out: {exc}", original_error=exc)
        return NetworkError(f"HTTP request failed: {exc}", original_error=exc)

    def _request(self, settings: Settings, params: Dict[str, str]) -> httpx.Response:
        with httpx.Client(timeout=httpx.Timeout(settings.timeout), transport=self._transport) as client:
            try:
                return client.get(settings.api_endpoint, params=params)
            except httpx.HTTPError as e:
                logger.error("sms_network_error", endpoint=settings.api_endpoint, error=str(e))
                raise self._map_exception(e) from e

    def _execute(self, settings: Settings, params: Dict[str, str]) -> DeliveryResult:
        hooks = settings.hooks
        safe_params = redact(params)

        logger.debug("sms_request", params=safe_params)
        hooks.dispatch(HookPoint.BEFORE_REQUEST, safe_params)

        response = self._request(settings, params)
        result = decode(response.text, params["contentType"])

        logger.debug("sms_response", status=result.status_code, success=result.success)
        hooks.dispatch(HookPoint.AFTER_REQUEST, result)

        if result.failure:
            hooks.dispatch(HookPoint.ON_FAILURE, result)
            self._raise_for_status(result)
        else:
            hooks.dispatch(HookPoint.ON_SUCCESS, result)
        return result

    def _raise_for_status(self, result: DeliveryResult) -> None:
        error_class = ERROR_HANDLERS.get(result.status_code)
        if error_class is None:
            return

        message = result.error_message
        if message is None and result.status_code == 401:
            message = "IP not authorized"
        if message is None:
            raise error_class(raw_response=result.raw_body)
        raise error_class(message, raw_response=result.raw_body)
