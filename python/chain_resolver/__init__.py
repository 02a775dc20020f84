"""chain-resolver: priority-ordered Chain of Responsibility dispatch.

Register targets that each claim some tokens, then resolve a token to
the best target, to every matching target, or run them all.

Example:
    >>> from chain_resolver import Resolver, ResolveTarget
    >>>
    >>> class RefundTarget(ResolveTarget):
    ...     def supports(self, token):
    ...         return token == "charge.refunded"
    ...
    ...     def handle(self, amount):
    ...         return f"Refund processed: {amount}"
    ...
    >>> resolver = Resolver(RefundTarget())
    >>> resolver.resolve("charge.refunded").handle(500)
    'Refund processed: 500'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .event_bridge import EventBridge, EventNames
from .exceptions import ResolverError, UnassignedTargetError, UnsupportedTypeError
from .fallback import FallbackTarget
from .logging import (
    configure_logging,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from .registry_target import RegistryTarget
from .rendering import render_token
from .resolver import Resolver
from .target import ResolveTarget, SupportsResolve, target_priority
from .types import LogContext, ResolverConfig, TargetInfo

__all__ = [
    "__version__",
    # Resolver
    "Resolver",
    # Targets
    "ResolveTarget",
    "SupportsResolve",
    "RegistryTarget",
    "FallbackTarget",
    "target_priority",
    # Exceptions
    "ResolverError",
    "UnassignedTargetError",
    "UnsupportedTypeError",
    # Events
    "EventBridge",
    "EventNames",
    # Configuration and types
    "ResolverConfig",
    "LogContext",
    "TargetInfo",
    # Logging
    "configure_logging",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
    # Rendering
    "render_token",
]
