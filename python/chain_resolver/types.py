"""Pydantic models for chain-resolver.

This module provides the configuration and introspection models,
using Pydantic v2 for validation and serialization.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("trace", "debug", "info", "warning", "error")


class ResolverConfig(BaseModel):
    """Configuration for a Resolver.

    Example:
        >>> config = ResolverConfig(name="stripe_webhooks", log_level="debug")
        >>> resolver = Resolver(config=config)
    """

    name: str = Field(
        default="resolver",
        description="Resolver name used in log fields and event payloads.",
    )
    log_level: str = Field(
        default="warning",
        description="Log level used by configure_logging().",
    )
    publish_events: bool = Field(
        default=True,
        description="Publish resolution events when an EventBridge is attached.",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level == "warn":
            level = "warning"
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @classmethod
    def from_env(cls) -> ResolverConfig:
        """Build a config from ``CHAIN_RESOLVER_*`` environment variables.

        Unset variables fall back to the field defaults.

        Returns:
            The resolved configuration.
        """
        values: dict[str, object] = {}

        name = os.environ.get("CHAIN_RESOLVER_NAME")
        if name:
            values["name"] = name

        log_level = os.environ.get("CHAIN_RESOLVER_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level

        publish = os.environ.get("CHAIN_RESOLVER_PUBLISH_EVENTS")
        if publish:
            values["publish_events"] = publish.strip().lower() not in ("0", "false", "no", "off")

        return cls.model_validate(values)


class LogContext(BaseModel):
    """Context fields for structured logging.

    Example:
        >>> context = LogContext(resolver="webhooks", token="payment.created")
        >>> log_debug("Resolved target", context)
    """

    correlation_id: str | None = Field(
        default=None,
        description="Correlation ID for request tracing.",
    )
    resolver: str | None = Field(
        default=None,
        description="Name of the resolver emitting the log line.",
    )
    token: str | None = Field(
        default=None,
        description="Rendered token being resolved.",
    )
    target: str | None = Field(
        default=None,
        description="Class name of the selected target.",
    )
    operation: str | None = Field(
        default=None,
        description="Current operation name.",
    )


class TargetInfo(BaseModel):
    """Introspection record for a registered target.

    Returned by ``Resolver.list_targets()`` in registration order.
    """

    index: int = Field(description="Position in the registration order.")
    name: str = Field(description="Target class name.")
    priority: int = Field(default=0, description="Effective priority (0 when absent).")


__all__ = [
    "LOG_LEVELS",
    "LogContext",
    "ResolverConfig",
    "TargetInfo",
]
