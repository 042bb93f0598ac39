"""combine_reducers: one reducer per top-level key of a dict state."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from reducks.action_types import ActionTypes, probe_unknown_action
from reducks.errors import ReducerError
from reducks.store import Action, Reducer

logger = logging.getLogger("reducks.combine")


def _assert_reducer_shape(reducers: dict[str, Reducer]) -> None:
    for key, reducer in reducers.items():
        if reducer(None, {"type": ActionTypes.INIT}) is None:
            raise ReducerError(
                f'Reducer "{key}" returned None during initialization. '
                "If the state passed to the reducer is None, you must explicitly "
                "return the initial state."
            )
        probe = probe_unknown_action()
        if reducer(None, {"type": probe}) is None:
            raise ReducerError(
                f'Reducer "{key}" returned None when probed with a random type. '
                f'Don\'t try to handle {ActionTypes.INIT} or other actions in the "@@reducks/*" '
                "namespace. They are considered private. Instead, you must return the "
                "current state for any unknown actions, unless it is None, in which case "
                "you must return the initial state."
            )


def _warn_unexpected_state_shape(
    state: Any, reducers: dict[str, Reducer], action: Action, seen: set[str]
) -> None:
    if not reducers:
        logger.warning(
            "Store does not have a valid reducer. Make sure the argument passed "
            "to combine_reducers is a dict whose values are reducers."
        )
        return

    if not isinstance(state, Mapping):
        logger.warning(
            "The previous state received by the reducer has unexpected type %s. "
            "Expected a dict with the following keys: %s",
            type(state).__name__, ", ".join(reducers),
        )
        return

    if action["type"] == ActionTypes.REPLACE:
        return
    unexpected = [key for key in state if key not in reducers and key not in seen]
    seen.update(unexpected)
    if unexpected:
        logger.warning(
            "Unexpected keys %s found in previous state received by the reducer. "
            "Expected to find one of the known reducer keys instead: %s. "
            "Unexpected keys will be ignored.",
            ", ".join(repr(k) for k in unexpected), ", ".join(reducers),
        )


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """Merge a dict of reducers into one reducer over a dict state.

    Each reducer manages the slice of state under its own key. The combined
    reducer returns the same state object when no slice changed.

    Usage:
        root = combine_reducers({"todos": todos, "filter": visibility})
        store = create_store(root)
        store.get_state()  # {"todos": [...], "filter": "all"}
    """
    final: dict[str, Reducer] = {}
    for key, reducer in reducers.items():
        if callable(reducer):
            final[key] = reducer
        else:
            logger.warning('No reducer provided for key "%s"', key)

    try:
        _assert_reducer_shape(final)
        shape_error = None
    except ReducerError as exc:
        shape_error = exc

    seen_unexpected: set[str] = set()

    def combination(state: Any, action: Action) -> dict[str, Any]:
        if shape_error is not None:
            raise shape_error

        if state is None:
            state = {}

        _warn_unexpected_state_shape(state, final, action, seen_unexpected)
        if not isinstance(state, Mapping):
            state = {}

        has_changed = False
        next_state: dict[str, Any] = {}
        for key, reducer in final.items():
            previous = state.get(key)
            next_slice = reducer(previous, action)
            if next_slice is None:
                raise ReducerError(
                    f'Given action "{action["type"]}", reducer "{key}" returned None. '
                    "To ignore an action, you must explicitly return the previous state."
                )
            next_state[key] = next_slice
            has_changed = has_changed or next_slice is not previous
        # Keys without a reducer are dropped.
        has_changed = has_changed or len(final) != len(state)
        return next_state if has_changed else state

    return combination
