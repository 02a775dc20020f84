"""Resolution events over a pyee emitter.

A Resolver given a bridge announces what it selected, when it fell back,
when a token went unsupported and when a target failed. Subscribers are
plain callables receiving the payloads listed on ``EventBridge``.

Example:
    >>> from chain_resolver import EventBridge, EventNames, Resolver
    >>>
    >>> bridge = EventBridge()
    >>> bridge.start()
    >>> bridge.subscribe(EventNames.FALLBACK_USED, lambda name, token: print(name, token))
    >>> resolver = Resolver(bridge=bridge).set_fallback(lambda *a: None)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyee.base import EventEmitter

from .logging import log_debug, log_info, log_warn


class EventNames:
    """Names of the events a Resolver publishes.

    Attributes:
        TARGET_RESOLVED: ``resolve`` selected a registered target.
        FALLBACK_USED: Nothing matched and the fallback was substituted.
        TYPE_UNSUPPORTED: ``resolve`` found neither a target nor a fallback.
        HANDLER_FAILED: A target raised inside an execution helper.
    """

    TARGET_RESOLVED = "target.resolved"
    FALLBACK_USED = "fallback.used"
    TYPE_UNSUPPORTED = "type.unsupported"
    HANDLER_FAILED = "handler.failed"


_PAYLOADS: dict[str, str] = {
    EventNames.TARGET_RESOLVED: "(resolver_name, token, target)",
    EventNames.FALLBACK_USED: "(resolver_name, token)",
    EventNames.TYPE_UNSUPPORTED: "(resolver_name, token)",
    EventNames.HANDLER_FAILED: "(resolver_name, token, target, exception)",
}


class EventBridge:
    """Event bus a Resolver publishes to.

    The bridge delivers nothing until ``start()`` is called; ``stop()``
    drops every subscriber.

    Payloads:
        target.resolved: (resolver_name, token, target)
        fallback.used: (resolver_name, token)
        type.unsupported: (resolver_name, token)
        handler.failed: (resolver_name, token, target, exception)
    """

    def __init__(self) -> None:
        self._emitter = EventEmitter()
        self._active = False

    def start(self) -> None:
        """Begin delivering events. Idempotent."""
        if not self._active:
            self._active = True
            log_info("EventBridge: started")

    def stop(self) -> None:
        """Stop delivering events and drop all subscribers. Idempotent."""
        if self._active:
            self._active = False
            self._emitter.remove_all_listeners()
            log_info("EventBridge: stopped")

    def subscribe(self, event: str, handler: Callable[..., Any]) -> None:
        """Register ``handler`` for ``event``."""
        self._emitter.on(event, handler)
        log_debug(f"EventBridge: {_describe(handler)} subscribed to {event}")

    def unsubscribe(self, event: str, handler: Callable[..., Any]) -> None:
        """Remove a handler previously passed to ``subscribe``."""
        self._emitter.remove_listener(event, handler)
        log_debug(f"EventBridge: {_describe(handler)} unsubscribed from {event}")

    def publish(self, event: str, *args: Any) -> None:
        """Deliver ``args`` to every subscriber of ``event``.

        Subscribers run synchronously, in subscription order. Their
        exceptions propagate to the caller.

        Args:
            event: Event name.
            *args: Payload passed positionally to subscribers.
        """
        if not self._active:
            log_warn(f"EventBridge: not started, dropping {event}")
            return
        self._emitter.emit(event, *args)

    def listener_count(self, event: str) -> int:
        """Number of subscribers for ``event``."""
        return len(self._emitter.listeners(event))

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def event_schema(self) -> dict[str, str]:
        """Payload shape of each resolution event."""
        return dict(_PAYLOADS)


def _describe(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


__all__ = ["EventBridge", "EventNames"]
