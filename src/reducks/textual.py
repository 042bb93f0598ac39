"""Textual integration for reducks. Opt-in: requires textual.

Store listeners run on whichever thread called dispatch(). guard() wraps an
effect so it only reaches widgets when the app can take it: skipped while
the app is paused or not running, NoMatches from widget queries ignored,
and calls from other threads marshaled with call_from_thread.
"""

import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

from reducks.reaction import reaction as _reaction

# id(app) -> pause depth. Keyed by id so multiple apps work in tests.
_pause_depth: dict[int, int] = {}


@contextmanager
def pause(app):
    """Suspend guarded effects during widget replacement. Pauses nest."""
    key = id(app)
    _pause_depth[key] = _pause_depth.get(key, 0) + 1
    try:
        yield
    finally:
        remaining = _pause_depth.pop(key) - 1
        if remaining:
            _pause_depth[key] = remaining


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and not _pause_depth.get(id(app))


def guard(app, effect):
    """Wrap a one-argument effect so it only runs when app is safe."""
    main = threading.get_ident()

    def _run(value):
        try:
            effect(value)
        except NoMatches:
            pass

    def guarded(value):
        if not is_safe(app):
            return
        if threading.get_ident() == main:
            _run(value)
        else:
            app.call_from_thread(_run, value)

    return guarded


def reaction(app, store, select, effect, *, fire_immediately=False):
    """reducks.reaction() with its effect wrapped by guard().

    Returns the unsubscribe function.
    """
    return _reaction(store, select, guard(app, effect), fire_immediately=fire_immediately)
