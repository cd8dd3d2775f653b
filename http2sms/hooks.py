"""
Lifecycle Hooks
===============
Notification handlers invoked around each API exchange.

Usage:
    hooks = get_settings().hooks

    @hooks.on_failure
    def report(result):
        ...
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

Handler = Callable[[Any], None]


class HookPoint(str, Enum):
    """Points of the exchange where handlers are called."""
    BEFORE_REQUEST = "before_request"  # receives redacted query parameters
    AFTER_REQUEST = "after_request"    # receives the DeliveryResult
    ON_SUCCESS = "on_success"
    ON_FAILURE = "on_failure"


class LifecycleHooks:
    """Ordered handler registry, one list per hook point."""

    def __init__(self):
        self._handlers: Dict[HookPoint, List[Handler]] = {point: [] for point in HookPoint}

    def register(self, point: HookPoint, handler: Handler) -> Handler:
        if not callable(handler):
            raise TypeError(f"Hook handler for {HookPoint(point).value} must be callable")
        self._handlers[HookPoint(point)].append(handler)
        return handler

    def before_request(self, handler: Handler) -> Handler:
        return self.register(HookPoint.BEFORE_REQUEST, handler)

    def after_request(self, handler: Handler) -> Handler:
        return self.register(HookPoint.AFTER_REQUEST, handler)

    def on_success(self, handler: Handler) -> Handler:
        return self.register(HookPoint.ON_SUCCESS, handler)

    def on_failure(self, handler: Handler) -> Handler:
        return self.register(HookPoint.ON_FAILURE, handler)

    def handlers(self, point: HookPoint) -> Tuple[Handler, ...]:
        return tuple(self._handlers[HookPoint(point)])

    def dispatch(self, point: HookPoint, payload: Any) -> None:
        """Call every handler of ``point`` in registration order."""
        for handler in self.handlers(point):
            handler(payload)

    def clear(self) -> None:
        for handlers in self._handlers.values():
            handlers.clear()

    def __len__(self) -> int:
        return sum(len(handlers) for handlers in self._handlers.values())
