"""Tests for the FallbackTarget adapter."""

from __future__ import annotations

import asyncio
import inspect

import pytest

from chain_resolver import FallbackTarget


def describe(kind: str, count: int) -> str:
    return f"{kind}:{count}"


class TestFallbackTarget:
    """Tests for FallbackTarget."""

    def test_supports_everything(self):
        target = FallbackTarget(describe)

        assert target.supports("x") is True
        assert target.supports(None) is True
        assert target.supports({"type": "anything"}) is True

    def test_handle_delegates_arguments(self):
        target = FallbackTarget(describe)

        assert target.handle("refund", 2) == "refund:2"

    def test_priority_is_zero(self):
        assert FallbackTarget(describe).priority == 0

    def test_unwrap_returns_original(self):
        target = FallbackTarget(describe)

        assert target.unwrap() is describe
        assert target.action is describe

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError, match="Fallback must be callable"):
            FallbackTarget(42)  # type: ignore[arg-type]

    def test_repr(self):
        assert repr(FallbackTarget(describe)) == "FallbackTarget(describe)"

    @pytest.mark.asyncio
    async def test_async_action_returns_coroutine(self):
        async def action(value: int) -> int:
            await asyncio.sleep(0)
            return value * 2

        pending = FallbackTarget(action).handle(21)

        assert inspect.iscoroutine(pending)
        assert await pending == 42

    def test_handle_errors_propagate(self):
        def action() -> None:
            raise LookupError("no handler")

        with pytest.raises(LookupError, match="no handler"):
            FallbackTarget(action).handle()
