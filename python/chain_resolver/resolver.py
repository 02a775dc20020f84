"""Resolver - Priority-Ordered Target Resolution.

The Resolver holds an ordered list of targets and selects the ones that
support a given token, highest priority first.

Resolution Contract:
1. No targets registered -> UnassignedTargetError (even with a fallback)
2. Keep targets whose supports(token) is True, in registration order
3. Stable sort by descending priority (missing priority = 0)
4. resolve() returns the first match; resolve_all() returns them all
5. No match -> FallbackTarget if a fallback is installed, else
   resolve() raises UnsupportedTypeError and resolve_all() returns []

Execution Helpers:
- handle_all(): call every match; awaitable if any handle() is async,
  in which case all invocations run concurrently
- handle_all_async(): same, always awaitable
- handle_all_sequential(): await each match before starting the next,
  stop at the first failure

Usage:
    resolver = Resolver(AccountingTarget(), EmailTarget())
    resolver.add(RefundTarget()).set_fallback(log_unhandled)

    target = resolver.resolve("payment_intent.succeeded")
    results = resolver.handle_all(event["type"], event)
    results = await resolver.handle_all_sequential(event["type"], event)
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
from collections.abc import Callable, Iterable
from typing import Any

from .event_bridge import EventBridge, EventNames
from .exceptions import UnassignedTargetError, UnsupportedTypeError
from .fallback import FallbackTarget
from .logging import is_enabled_for, log_debug, log_error, log_warn
from .rendering import render_token
from .target import SupportsResolve, target_name, target_priority
from .types import LogContext, ResolverConfig, TargetInfo


class Resolver:
    """Chain of Responsibility resolver.

    Targets are shared by reference; the caller keeps ownership of them.
    There is no removal operation: targets are only replaced wholesale
    or appended.

    Attributes:
        targets: Copy of the registered targets in registration order.
        fallback: The installed fallback action, if any.
        config: Resolver configuration.
    """

    def __init__(
        self,
        *targets: SupportsResolve,
        config: ResolverConfig | None = None,
        bridge: EventBridge | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            *targets: Initial targets, in registration order.
            config: Optional configuration (defaults to ResolverConfig()).
            bridge: Optional event bridge to publish resolution events on.
        """
        self._targets: list[SupportsResolve] = []
        self._fallback: Callable[..., Any] | None = None
        self._config = config or ResolverConfig()
        self._bridge = bridge
        if targets:
            self.replace_all(targets)

    # =========================================================================
    # Registration
    # =========================================================================

    def replace_all(self, targets: Iterable[SupportsResolve]) -> None:
        """Replace every registered target.

        Args:
            targets: New targets, in registration order. May be empty.
        """
        self._targets = list(targets)
        log_debug(
            f"Resolver: Replaced targets ({len(self._targets)} registered)",
            LogContext(resolver=self.name, operation="replace_all"),
        )

    def set_targets(self, *targets: SupportsResolve) -> None:
        """Replace every registered target (variadic form of replace_all)."""
        self.replace_all(targets)

    def append(self, *targets: SupportsResolve) -> None:
        """Add targets after the existing ones, keeping their order."""
        self._targets.extend(targets)
        log_debug(
            f"Resolver: Appended {len(targets)} target(s) ({len(self._targets)} registered)",
            LogContext(resolver=self.name, operation="append"),
        )

    def add(self, target: SupportsResolve) -> Resolver:
        """Add a single target.

        Args:
            target: Target to register.

        Returns:
            Self for method chaining.
        """
        self._targets.append(target)
        log_debug(
            f"Resolver: Added {target_name(target)} (priority {target_priority(target)})",
            LogContext(resolver=self.name, target=target_name(target), operation="add"),
        )
        return self

    def set_fallback(self, action: Callable[..., Any] | None) -> Resolver:
        """Install or replace the fallback action.

        The fallback receives the same positional arguments as ``handle``.
        Passing None removes it.

        Args:
            action: Fallback callable, sync or async.

        Returns:
            Self for method chaining.

        Raises:
            TypeError: If action is neither callable nor None.
        """
        if action is not None and not callable(action):
            raise TypeError(f"Fallback must be callable, got {type(action).__name__}")
        self._fallback = action
        log_debug(
            "Resolver: Fallback " + ("installed" if action is not None else "removed"),
            LogContext(resolver=self.name, operation="set_fallback"),
        )
        return self

    # =========================================================================
    # Resolution
    # =========================================================================

    def resolve(self, token: Any) -> SupportsResolve:
        """Resolve the highest-priority target for a token.

        Args:
            token: Type discriminator (usually a string, may be any value).

        Returns:
            The first matching target, or a FallbackTarget.

        Raises:
            UnassignedTargetError: If no targets are registered.
            UnsupportedTypeError: If nothing matches and no fallback is installed.
        """
        matches = self._matching(token)

        if matches:
            target = matches[0]
            if is_enabled_for("debug"):
                log_debug(
                    f"Resolver: Resolved {target_name(target)}",
                    self._log_context(token, target, "resolve"),
                )
            self._publish(EventNames.TARGET_RESOLVED, token, target)
            return target

        if self._fallback is not None:
            return self._fallback_target(token, "resolve")

        rendered = render_token(token)
        log_warn(
            "Resolver: Unsupported type",
            LogContext(resolver=self.name, token=rendered, operation="resolve"),
        )
        self._publish(EventNames.TYPE_UNSUPPORTED, token)
        raise UnsupportedTypeError(token, rendered)

    def resolve_all(self, token: Any) -> list[SupportsResolve]:
        """Resolve every target that supports a token.

        Args:
            token: Type discriminator.

        Returns:
            Matching targets by descending priority, registration order
            breaking ties. ``[FallbackTarget]`` if nothing matches and a
            fallback is installed, otherwise an empty list.

        Raises:
            UnassignedTargetError: If no targets are registered.
        """
        matches = self._matching(token)

        if matches:
            if is_enabled_for("debug"):
                log_debug(
                    f"Resolver: Resolved {len(matches)} target(s)",
                    self._log_context(token, None, "resolve_all"),
                )
            return matches

        if self._fallback is not None:
            return [self._fallback_target(token, "resolve_all")]

        return []

    def can_resolve(self, token: Any) -> bool:
        """Check whether resolve() would succeed, without raising.

        Args:
            token: Type discriminator.

        Returns:
            True if at least one target is registered and either a target
            supports the token or a fallback is installed.
        """
        if not self._targets:
            return False
        if self._fallback is not None:
            return True
        return any(target.supports(token) for target in self._targets)

    # =========================================================================
    # Execution helpers
    # =========================================================================

    def handle_all(self, token: Any, *args: Any) -> Any:
        """Invoke ``handle(*args)`` on every target resolved for a token.

        Targets are called in priority order. If every result is a plain
        value, the results are returned as a list. If any result is
        awaitable, an awaitable is returned instead: awaiting it runs all
        pending invocations concurrently and yields the results in
        priority order, or raises the first failure. Other invocations
        are not cancelled on failure.

        Args:
            token: Type discriminator.
            *args: Arguments forwarded to each ``handle``.

        Returns:
            A list of results, or an awaitable resolving to one.

        Raises:
            UnassignedTargetError: If no targets are registered.
        """
        targets = self.resolve_all(token)
        results: list[Any] = []

        for target in targets:
            try:
                results.append(target.handle(*args))
            except Exception as exc:
                # Earlier async targets will never be awaited now
                for pending in results:
                    if inspect.iscoroutine(pending):
                        pending.close()
                self._handler_failed(token, target, exc)
                raise

        if not any(inspect.isawaitable(result) for result in results):
            return results

        return self._gather(token, targets, results)

    async def handle_all_async(self, token: Any, *args: Any) -> list[Any]:
        """Invoke every resolved target concurrently and await the results.

        Like ``handle_all`` but always awaitable, whether the targets are
        sync or async.

        Args:
            token: Type discriminator.
            *args: Arguments forwarded to each ``handle``.

        Returns:
            Results in priority order.
        """
        results = self.handle_all(token, *args)
        if inspect.isawaitable(results):
            return await results
        return results

    async def handle_all_sequential(self, token: Any, *args: Any) -> list[Any]:
        """Invoke every resolved target one at a time.

        Each invocation is awaited before the next one starts. On the
        first failure the remaining targets are never called; the
        target's exception propagates unchanged, with the results
        produced so far attached as ``partial_results``.

        Args:
            token: Type discriminator.
            *args: Arguments forwarded to each ``handle``.

        Returns:
            Results in priority order.

        Raises:
            UnassignedTargetError: If no targets are registered.
        """
        targets = self.resolve_all(token)
        results: list[Any] = []

        for target in targets:
            try:
                result = target.handle(*args)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:
                with contextlib.suppress(AttributeError):
                    exc.partial_results = list(results)  # type: ignore[attr-defined]
                self._handler_failed(token, target, exc)
                raise
            results.append(result)

        return results

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def name(self) -> str:
        """Get the resolver name from its config."""
        return self._config.name

    @property
    def config(self) -> ResolverConfig:
        """Get the resolver configuration."""
        return self._config

    @property
    def bridge(self) -> EventBridge | None:
        """Get the attached event bridge, if any."""
        return self._bridge

    @property
    def targets(self) -> list[SupportsResolve]:
        """Get a copy of the registered targets in registration order."""
        return list(self._targets)

    @property
    def fallback(self) -> Callable[..., Any] | None:
        """Get the installed fallback action."""
        return self._fallback

    @property
    def has_fallback(self) -> bool:
        """Check if a fallback action is installed."""
        return self._fallback is not None

    def list_targets(self) -> list[TargetInfo]:
        """List registered targets with their effective priorities.

        Returns:
            One TargetInfo per target, in registration order.
        """
        return [
            TargetInfo(index=index, name=target_name(target), priority=target_priority(target))
            for index, target in enumerate(self._targets)
        ]

    def __len__(self) -> int:
        """Return number of registered targets."""
        return len(self._targets)

    def __repr__(self) -> str:
        return (
            f"Resolver(name={self.name!r}, targets={len(self._targets)}, "
            f"fallback={self.has_fallback})"
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _matching(self, token: Any) -> list[SupportsResolve]:
        if not self._targets:
            raise UnassignedTargetError()

        matches = [target for target in self._targets if target.supports(token)]
        # sorted() is stable, reverse=True included
        return sorted(matches, key=target_priority, reverse=True)

    def _fallback_target(self, token: Any, operation: str) -> FallbackTarget:
        if is_enabled_for("debug"):
            log_debug(
                "Resolver: No target matched, using fallback",
                self._log_context(token, None, operation),
            )
        self._publish(EventNames.FALLBACK_USED, token)
        return FallbackTarget(self._fallback)  # type: ignore[arg-type]

    async def _gather(
        self,
        token: Any,
        targets: list[SupportsResolve],
        results: list[Any],
    ) -> list[Any]:
        outcomes = await asyncio.gather(
            *(
                self._settle(token, target, result)
                for target, result in zip(targets, results)
            )
        )
        return list(outcomes)

    async def _settle(self, token: Any, target: SupportsResolve, result: Any) -> Any:
        if not inspect.isawaitable(result):
            return result
        try:
            return await result
        except Exception as exc:
            self._handler_failed(token, target, exc)
            raise

    def _handler_failed(self, token: Any, target: SupportsResolve, exc: Exception) -> None:
        log_error(
            f"Resolver: {target_name(target)} failed: {exc}",
            self._log_context(token, target, "handle"),
        )
        self._publish(EventNames.HANDLER_FAILED, token, target, exc)

    def _publish(self, event: str, *args: Any) -> None:
        if self._bridge is None or not self._config.publish_events:
            return
        if not self._bridge.is_active:
            return
        try:
            self._bridge.publish(event, self.name, *args)
        except Exception as exc:
            # Subscriber errors never replace the resolver's own outcome
            log_error(
                f"Resolver: Subscriber to {event} failed: {exc}",
                LogContext(resolver=self.name, operation="publish"),
            )

    def _log_context(
        self,
        token: Any,
        target: SupportsResolve | None,
        operation: str,
    ) -> LogContext:
        return LogContext(
            resolver=self.name,
            token=render_token(token),
            target=target_name(target) if target is not None else None,
            operation=operation,
        )


__all__ = ["Resolver"]
