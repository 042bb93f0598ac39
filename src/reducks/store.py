"""Store: the single-writer state container.

A Store holds the state tree, the active reducer and the listener registry.
The only way to change the state is dispatch(): the reducer computes the
next state from the current one and the action, then every listener that
was subscribed when dispatch() started is called.

Listener bookkeeping uses two references. _current_listeners is the list an
in-flight dispatch iterates; _next_listeners is the list subscribe() and
unsubscribe() mutate. After each dispatch they are the same list, and any
mutation copies _next_listeners first, so a dispatch never sees its
snapshot change mid-iteration.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from reducks._validate import is_plain_object
from reducks.action_types import ActionTypes
from reducks.errors import ConfigError, ReentrancyError, ValidationError
from reducks.observable import StateObservable

logger = logging.getLogger("reducks.store")

S = TypeVar("S")

Action = dict[str, Any]
Reducer = Callable[[Any, Action], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
Enhancer = Callable[[Callable[..., Any]], Callable[..., Any]]


class Store(Generic[S]):
    """Holds the state tree. Mutated only through dispatch()."""

    def __init__(self, reducer: Reducer, preloaded_state: S | None = None) -> None:
        if not callable(reducer):
            raise ConfigError("Expected the reducer to be a function.")

        self._reducer = reducer
        self._state = preloaded_state
        self._current_listeners: list[Listener] = []
        self._next_listeners = self._current_listeners
        self._is_dispatching = False

        # Every reducer returns its initial state for an unknown action,
        # which fills in the state tree before anyone can read it.
        self.dispatch({"type": ActionTypes.INIT})

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = list(self._current_listeners)

    def get_state(self) -> S:
        """Read the current state tree."""
        if self._is_dispatching:
            raise ReentrancyError(
                "You may not call store.get_state() while the reducer is executing. "
                "The reducer has already received the state as an argument. "
                "Pass it down from the top reducer instead of reading it from the store."
            )
        return self._state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register listener to be called after every dispatch.

        Subscriptions are snapshotted when each dispatch starts notifying.
        Subscribing or unsubscribing from inside a listener does not affect
        the dispatch in progress, only the next one.

        Returns a function that removes the listener. Calling it twice is
        a no-op.
        """
        if not callable(listener):
            raise ValidationError("Expected the listener to be a function.")
        if self._is_dispatching:
            raise ReentrancyError(
                "You may not call store.subscribe() while the reducer is executing. "
                "If you would like to be notified after the store has been updated, "
                "subscribe from a component and read store.get_state() in the callback."
            )

        is_subscribed = True
        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed
            if not is_subscribed:
                return
            if self._is_dispatching:
                raise ReentrancyError(
                    "You may not unsubscribe from a store listener while the reducer is executing."
                )

            is_subscribed = False
            self._ensure_can_mutate_next_listeners()
            for index, registered in enumerate(self._next_listeners):
                if registered is listener:
                    del self._next_listeners[index]
                    break

        return unsubscribe

    def dispatch(self, action: Action) -> Action:
        """Run the reducer on action, then notify listeners.

        Only plain dicts with a "type" key are accepted. Dispatching
        functions or other objects needs a middleware (see reducks.thunk).

        Returns the action unchanged.
        """
        if not is_plain_object(action):
            raise ValidationError(
                "Actions must be plain dicts. Use custom middleware for async actions."
            )
        if action.get("type") is None:
            raise ValidationError(
                'Actions may not have an unset "type" key. Have you misspelled a constant?'
            )
        self._reduce(action)
        self._notify_listeners()
        return action

    def _reduce(self, action: Action) -> None:
        if self._is_dispatching:
            raise ReentrancyError("Reducers may not dispatch actions.")

        try:
            self._is_dispatching = True
            self._state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

    def _notify_listeners(self) -> None:
        listeners = self._current_listeners = self._next_listeners
        for listener in listeners:
            listener()

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Swap the active reducer, then let it fill in its initial slices."""
        if not callable(next_reducer):
            raise ConfigError("Expected the next_reducer to be a function.")

        logger.debug("Replacing reducer %r with %r", self._reducer, next_reducer)
        self._reducer = next_reducer
        self.dispatch({"type": ActionTypes.REPLACE})

    def observable(self) -> StateObservable:
        """Interop point for push-based observers of the state."""
        return StateObservable(self.get_state, self.subscribe)

    def __repr__(self) -> str:
        state = "dispatching" if self._is_dispatching else f"state={self._state!r}"
        return f"Store({state}, listeners={len(self._next_listeners)})"


def create_store(
    reducer: Reducer,
    preloaded_state: Any = None,
    enhancer: Enhancer | None = None,
) -> Any:
    """Create a store, optionally built through an enhancer.

    If preloaded_state is a function and no enhancer is given, it is taken
    as the enhancer. With an enhancer, construction is handed over to it:
    enhancer(create_store)(reducer, preloaded_state).

    Usage:
        def counter(state, action):
            if state is None:
                state = 0
            return state + 1 if action["type"] == "inc" else state

        store = create_store(counter)
        store.dispatch({"type": "inc"})
        store.get_state()  # 1
    """
    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise ConfigError("Expected the enhancer to be a function.")
        return enhancer(create_store)(reducer, preloaded_state)

    return Store(reducer, preloaded_state)
