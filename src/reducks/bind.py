"""bind_action_creators: action creators that dispatch what they build."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any, Callable, ParamSpec

from reducks.errors import ConfigError
from reducks.store import Action

P = ParamSpec("P")


def _bind_action_creator(
    action_creator: Callable[P, Action], dispatch: Callable[[Action], Any]
) -> Callable[P, Any]:
    @functools.wraps(action_creator)
    def bound(*args: P.args, **kwargs: P.kwargs) -> Any:
        return dispatch(action_creator(*args, **kwargs))

    return bound


def bind_action_creators(action_creators, dispatch: Callable[[Action], Any]):
    """Wrap action creators so calling one dispatches its action.

    Accepts a single creator (returns a single bound function) or a mapping
    of creators (returns a dict with the same keys; non-callable values are
    skipped).

    Usage:
        def add_todo(text):
            return {"type": "ADD_TODO", "text": text}

        actions = bind_action_creators({"add_todo": add_todo}, store.dispatch)
        actions["add_todo"]("buy milk")  # dispatched
    """
    if callable(action_creators):
        return _bind_action_creator(action_creators, dispatch)

    if not isinstance(action_creators, Mapping):
        received = "None" if action_creators is None else type(action_creators).__name__
        raise ConfigError(
            f"bind_action_creators expected a dict or a function, instead received {received}."
        )

    return {
        key: _bind_action_creator(creator, dispatch)
        for key, creator in action_creators.items()
        if callable(creator)
    }
