"""Fallback adapter for resolve targets.

When no registered target supports a token and a fallback action is
installed, the Resolver wraps the action in a FallbackTarget so that
callers get the same ``supports``/``handle`` shape they get from a real
match. A fresh wrapper is built for each resolution; it is never added
to the Resolver's target list.

Example:
    >>> def fallback(event):
    ...     return f"Unhandled event type {event['type']}"
    ...
    >>> target = FallbackTarget(fallback)
    >>> target.supports("anything")
    True
    >>> target.handle({"type": "customer.created"})
    'Unhandled event type customer.created'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class FallbackTarget:
    """Target-shaped wrapper around a fallback action.

    ``supports`` always returns True and ``handle`` delegates to the
    wrapped action with the same positional arguments. If the action is
    a coroutine function, ``handle`` returns its coroutine.

    Attributes:
        action: The wrapped fallback callable.
        priority: Always 0.
    """

    priority = 0

    def __init__(self, action: Callable[..., Any]) -> None:
        """Initialize the wrapper.

        Args:
            action: The fallback callable.

        Raises:
            TypeError: If action is not callable.
        """
        if not callable(action):
            raise TypeError(f"Fallback must be callable, got {type(action).__name__}")
        self._action = action

    @property
    def action(self) -> Callable[..., Any]:
        """Get the wrapped fallback action."""
        return self._action

    def supports(self, _token: Any) -> bool:
        """Claim every token."""
        return True

    def handle(self, *args: Any) -> Any:
        """Invoke the fallback action.

        Args:
            *args: Arguments forwarded unchanged to the action.

        Returns:
            The action's result (awaitable if the action is async).
        """
        return self._action(*args)

    def unwrap(self) -> Callable[..., Any]:
        """Get the original fallback action.

        Useful for testing and debugging.
        """
        return self._action

    def __repr__(self) -> str:
        action_name = getattr(self._action, "__qualname__", repr(self._action))
        return f"FallbackTarget({action_name})"


__all__ = ["FallbackTarget"]
