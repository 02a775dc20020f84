r"""Declarative base class for resolve targets.

RegistryTarget implements ``supports`` from class attributes so that a
target only needs to declare what it claims and implement ``handle``.

The discriminator is taken from the token itself when it is a string,
from ``token["type"]`` when it is a mapping, and from ``token.type``
otherwise. Matching is tried in order: exact ``types``, then ``prefix``,
then ``pattern``.

Example:
    from chain_resolver import RegistryTarget

    class PaymentTarget(RegistryTarget):
        priority = 20
        pattern = r"^payment_intent\.(?P<status>\w+)$"

        def handle(self, event):
            match = self.match_pattern(self.discriminator(event))
            return f"payment {match.group('status')}: {event['data']['amount']}"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, ClassVar

from .target import ResolveTarget


class RegistryTarget(ResolveTarget):
    """Target that claims tokens by type name, prefix or regex.

    Subclasses should override:
    - types, prefix or pattern: Matching criteria
    - priority: Selection priority (higher = first)
    - type_field: Field read from structured tokens (default "type")
    - handle(): Actual handling logic

    Class Attributes:
        types: Exact discriminators this target claims.
        prefix: Discriminator prefix to claim (optional).
        pattern: Regex matched from the start of the discriminator (optional).
        type_field: Key or attribute holding the discriminator on structured tokens.
    """

    types: ClassVar[tuple[str, ...]] = ()
    prefix: ClassVar[str | None] = None
    pattern: ClassVar[str | None] = None
    type_field: ClassVar[str] = "type"

    def __init__(self) -> None:
        """Initialize the target and compile its pattern."""
        self._compiled_pattern: re.Pattern[str] | None = None
        if self.pattern:
            self._compiled_pattern = re.compile(self.pattern)

    def discriminator(self, token: Any) -> str | None:
        """Extract the string discriminator from a token.

        Args:
            token: A string, mapping, or object with a ``type_field`` attribute.

        Returns:
            The discriminator, or None if the token carries none.
        """
        if isinstance(token, str):
            return token
        if isinstance(token, Mapping):
            value = token.get(self.type_field)
        else:
            value = getattr(token, self.type_field, None)
        return value if isinstance(value, str) else None

    def supports(self, token: Any) -> bool:
        """Check if this target claims the token.

        Args:
            token: The token being resolved.

        Returns:
            True if the discriminator matches types, prefix or pattern.
        """
        discriminator = self.discriminator(token)
        if discriminator is None:
            return False

        if discriminator in self.types:
            return True

        if self.prefix and discriminator.startswith(self.prefix):
            return True

        if self._compiled_pattern:
            return bool(self._compiled_pattern.match(discriminator))

        return False

    def match_pattern(self, discriminator: str) -> re.Match[str] | None:
        """Match a discriminator against the configured pattern.

        Convenience method for subclasses that need named groups.

        Args:
            discriminator: The discriminator string to match.

        Returns:
            Match object or None.
        """
        if self._compiled_pattern:
            return self._compiled_pattern.match(discriminator)
        return None


__all__ = ["RegistryTarget"]
