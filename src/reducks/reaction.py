"""reaction(): run a side effect when a selected part of the state changes.

Built on Store.subscribe(). select() runs after every dispatch; effect()
only runs when its result differs from the previous one.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from reducks.store import Unsubscribe

T = TypeVar("T")


def reaction(
    store: Any,
    select: Callable[[Any], T],
    effect: Callable[[T], None],
    *,
    fire_immediately: bool = False,
) -> Unsubscribe:
    """Call effect(select(state)) whenever the selected value changes.

    Returns the unsubscribe function.

    Usage:
        effects = []
        stop = reaction(store, lambda s: s["user"], effects.append)
        store.dispatch({"type": "login", "user": "bob"})
        # effects == ["bob"]
        stop()
    """
    last = [select(store.get_state())]
    if fire_immediately:
        effect(last[0])

    def _on_change() -> None:
        new_value = select(store.get_state())
        if new_value != last[0]:
            last[0] = new_value
            effect(new_value)

    return store.subscribe(_on_change)
