"""Shape checks shared by dispatch and the action-creator binder."""

from __future__ import annotations


def is_plain_object(value: object) -> bool:
    """True for a plain ``dict``: not a subclass, not None, not a list."""
    return type(value) is dict
