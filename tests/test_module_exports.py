"""Module export tests.

These tests verify:
- All expected symbols are exported from chain_resolver
- __all__ list is comprehensive
"""

from __future__ import annotations

import chain_resolver


def test_version():
    """Test that version is accessible."""
    assert isinstance(chain_resolver.__version__, str)
    assert "." in chain_resolver.__version__


def test_all_exports_resolvable():
    """Test every name in __all__ exists on the package."""
    for name in chain_resolver.__all__:
        assert hasattr(chain_resolver, name), name


def test_core_exports_present():
    """Test the public operations are exported."""
    expected = {
        "Resolver",
        "ResolveTarget",
        "SupportsResolve",
        "RegistryTarget",
        "FallbackTarget",
        "ResolverError",
        "UnassignedTargetError",
        "UnsupportedTypeError",
        "EventBridge",
        "EventNames",
        "ResolverConfig",
        "LogContext",
        "configure_logging",
        "render_token",
    }
    assert expected <= set(chain_resolver.__all__)


def test_resolver_operations():
    """Test the Resolver exposes every registration and resolution operation."""
    for operation in (
        "replace_all",
        "set_targets",
        "append",
        "add",
        "set_fallback",
        "resolve",
        "resolve_all",
        "handle_all",
        "handle_all_async",
        "handle_all_sequential",
    ):
        assert callable(getattr(chain_resolver.Resolver, operation)), operation


def test_duck_typed_targets_satisfy_protocol():
    """Test plain objects with supports/handle satisfy SupportsResolve."""

    class Plain:
        def supports(self, token):
            return True

        def handle(self, *args):
            return args

    assert isinstance(Plain(), chain_resolver.SupportsResolve)
    assert isinstance(chain_resolver.FallbackTarget(print), chain_resolver.SupportsResolve)
