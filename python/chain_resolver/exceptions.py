"""Custom exceptions for chain-resolver.

This module provides the exceptions raised when a Resolver is misused.
Both conditions are caller-correctable: register a target, or pass a
supported token / install a fallback. Errors raised by a target's own
``handle`` are never wrapped in these types.
"""

from __future__ import annotations

from typing import Any


class ResolverError(Exception):
    """Base exception for all chain-resolver errors.

    Example:
        >>> try:
        ...     target = resolver.resolve("payment.created")
        ... except ResolverError as e:
        ...     print(f"Resolver error: {e}")
    """

    pass


class UnassignedTargetError(ResolverError):
    """Raised when resolution is attempted with no targets registered.

    An installed fallback does not exempt this check.

    Example:
        >>> try:
        ...     Resolver().resolve("anything")
        ... except UnassignedTargetError:
        ...     print("Register a target first")
    """

    def __init__(self, message: str = "Unassigned resolve target.") -> None:
        super().__init__(message)


class UnsupportedTypeError(ResolverError):
    """Raised by ``Resolver.resolve`` when no target supports the token.

    Never raised when a fallback is installed, and never raised by
    ``resolve_all``.

    Attributes:
        token: The token that no target claimed.

    Example:
        >>> try:
        ...     resolver.resolve({"type": "customer.created"})
        ... except UnsupportedTypeError as e:
        ...     print(e.token)
    """

    def __init__(self, token: Any, rendered: str) -> None:
        super().__init__(f"Unsupported type: {rendered}")
        self.token = token


__all__ = [
    "ResolverError",
    "UnassignedTargetError",
    "UnsupportedTypeError",
]
