"""Right-to-left function composition."""

from __future__ import annotations

import functools
from typing import Any, Callable


def _identity(arg: Any) -> Any:
    return arg


def compose(*funcs: Callable) -> Callable:
    """Compose single-argument functions from right to left.

    The rightmost function may take any arguments; the result of each call
    is passed to the function on its left.

    Usage:
        compose(f, g, h)(x) == f(g(h(x)))
        compose()(x) == x
        compose(f) is f
    """
    if not funcs:
        return _identity
    if len(funcs) == 1:
        return funcs[0]

    def _pair(outer: Callable, inner: Callable) -> Callable:
        return lambda *args, **kwargs: outer(inner(*args, **kwargs))

    return functools.reduce(_pair, funcs)
