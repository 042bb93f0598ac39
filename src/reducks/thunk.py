"""Ready-made middleware: thunks and action logging."""

from __future__ import annotations

import logging
from typing import Any

from reducks.middleware import Dispatch, Middleware, MiddlewareAPI


def thunk(api: MiddlewareAPI):
    """Let dispatch() accept functions.

    A callable action is called with (dispatch, get_state) instead of
    reaching the reducer, and its return value is what dispatch() returns.
    dispatch here is the full chain, so thunks can dispatch other thunks.

    Usage:
        def load(dispatch, get_state):
            dispatch({"type": "loading"})
            return 42

        store = create_store(reducer, apply_middleware(thunk))
        store.dispatch(load)  # 42
    """

    def wrap(next_dispatch: Dispatch) -> Dispatch:
        def handle(action: Any) -> Any:
            if callable(action):
                return action(api.dispatch, api.get_state)
            return next_dispatch(action)

        return handle

    return wrap


def log_actions(logger: logging.Logger | None = None, level: int = logging.DEBUG) -> Middleware:
    """Middleware that logs each action's type and the state after it."""
    log = logger or logging.getLogger("reducks.actions")

    def middleware(api: MiddlewareAPI):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def handle(action: Any) -> Any:
                action_type = action.get("type") if isinstance(action, dict) else action
                log.log(level, "dispatching %r", action_type)
                result = next_dispatch(action)
                log.log(level, "next state %r", api.get_state())
                return result

            return handle

        return wrap

    return middleware
