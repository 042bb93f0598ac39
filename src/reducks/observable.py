"""Minimal push-based observable over a store's state.

Lets observer-style libraries follow a store without knowing its API: an
observer with an on_next (or next) method receives the current state once
on subscribe, then again after every dispatch.
"""

from __future__ import annotations

from typing import Any, Callable

from reducks.errors import ValidationError


class Subscription:
    """Handle returned by StateObservable.subscribe()."""

    __slots__ = ("_unsubscribe", "_closed")

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        self._unsubscribe()
        self._closed = True


class StateObservable:
    """Observable view of a store, built on its get_state and subscribe."""

    __slots__ = ("_get_state", "_subscribe")

    def __init__(
        self,
        get_state: Callable[[], Any],
        subscribe: Callable[[Callable[[], None]], Callable[[], None]],
    ) -> None:
        self._get_state = get_state
        self._subscribe = subscribe

    def subscribe(self, observer: Any) -> Subscription:
        """Push the current state to observer now and after every dispatch."""
        if observer is None:
            raise ValidationError("Expected the observer to be an object.")

        on_next = getattr(observer, "on_next", None) or getattr(observer, "next", None)

        def _observe_state() -> None:
            if on_next is not None:
                on_next(self._get_state())

        _observe_state()
        return Subscription(self._subscribe(_observe_state))

    def observable(self) -> StateObservable:
        return self
