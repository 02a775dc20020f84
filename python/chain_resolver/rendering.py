"""Token rendering for error messages and log fields.

Structured tokens (mappings, sequences, sets, pydantic models, dataclass
instances and plain objects without their own ``__str__``) render as
compact JSON with key order preserved,
e.g. ``{"id":"evt_1","type":"customer.created"}``. Everything else,
including ``None``, renders with ``str()``.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_json


def is_structured(token: Any) -> bool:
    """Return True if the token should render as JSON."""
    if token is None or isinstance(token, (str, bytes, bytearray)):
        return False
    if isinstance(token, (Mapping, list, tuple, set, frozenset, BaseModel)):
        return True
    if isinstance(token, type) or inspect.ismodule(token) or inspect.isroutine(token):
        return False
    return dataclasses.is_dataclass(token) or _is_plain_object(token)


def _is_plain_object(token: Any) -> bool:
    # Instances that carry attributes but no readable str() of their own
    return hasattr(token, "__dict__") and type(token).__str__ is object.__str__


def render_token(token: Any) -> str:
    """Render a token for an ``UnsupportedTypeError`` message.

    Args:
        token: Any token value.

    Returns:
        Compact JSON for structured tokens, ``str(token)`` otherwise.

    Example:
        >>> render_token("fuga")
        'fuga'
        >>> render_token({"type": "charge.refunded", "amount": 500})
        '{"type":"charge.refunded","amount":500}'
    """
    if not is_structured(token):
        return str(token)

    if isinstance(token, (set, frozenset)):
        # Sets have no stable order; sort by rendered element for a canonical form
        token = sorted(token, key=lambda item: to_json(item, fallback=str))
    elif _is_plain_object(token) and not isinstance(token, (Mapping, list, tuple)):
        token = vars(token)

    return to_json(token, fallback=str).decode("utf-8")


__all__ = ["is_structured", "render_token"]
