"""Resolve target contract.

This module defines what a Resolver needs from a registered target.
The Resolver is duck-typed: any object with ``supports`` and ``handle``
can be registered. ``ResolveTarget`` is a convenience base class for
targets that want the contract spelled out.

Resolution Contract:
1. supports(token) - Quick check whether this target claims the token
2. handle(*args) - Process the request; may be ``async def``
3. priority - Optional integer, higher = selected first (default 0)

Example Implementation:
    class RefundTarget(ResolveTarget):
        priority = 50

        def supports(self, token: Any) -> bool:
            return token == "charge.refunded"

        async def handle(self, event: dict) -> str:
            return f"Refund processed: {event['amount']}"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsResolve(Protocol):
    """Structural type for anything a Resolver can register."""

    def supports(self, token: Any) -> bool: ...

    def handle(self, *args: Any) -> Any: ...


class ResolveTarget(ABC):
    """Abstract base class for resolve targets.

    Subclasses implement ``supports`` and ``handle``. Set the ``priority``
    class attribute to order this target among other matches; targets
    with equal priority keep their registration order.

    Class Attributes:
        priority: Selection priority, higher = first (default: 0).
    """

    priority: int = 0

    @abstractmethod
    def supports(self, token: Any) -> bool:
        """Return True if this target claims the token.

        Args:
            token: The type discriminator passed to ``Resolver.resolve``.
                Usually a string, but may be any value.

        Returns:
            True if this target should handle the token.
        """
        ...

    @abstractmethod
    def handle(self, *args: Any) -> Any:
        """Process the request.

        May be declared ``async def``; the execution helpers await
        coroutine results.

        Args:
            *args: Arguments forwarded from ``Resolver.handle_all`` or the caller.

        Returns:
            The handling result.
        """
        ...

    @property
    def name(self) -> str:
        """Return the target name (the class name)."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(priority={self.priority})"


def target_priority(target: Any) -> int:
    """Return a target's effective priority.

    A missing or ``None`` priority counts as 0.
    """
    priority = getattr(target, "priority", None)
    return 0 if priority is None else int(priority)


def target_name(target: Any) -> str:
    """Return a readable name for logs and introspection."""
    return target.__class__.__name__


__all__ = [
    "ResolveTarget",
    "SupportsResolve",
    "target_name",
    "target_priority",
]
