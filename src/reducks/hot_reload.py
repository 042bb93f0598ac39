"""Hot-reload-aware store. Opt-in: import only if you need hot-reload support."""

import logging

from reducks.action_types import ActionTypes
from reducks.errors import ConfigError
from reducks.store import Store

logger = logging.getLogger("reducks.hot_reload")


class HotReloadStore(Store):
    """Store whose reducer can be swapped by a module reloader without crashing.

    Same API as Store and the same constructor, so it also works as the
    `create` argument of an enhancer:

        apply_middleware(thunk)(HotReloadStore)(reducer)

    replace_reducer() changes:
    - Exception safety: a reducer that is not callable, or raises on the
      REPLACE action, is logged and rolled back
    - Degraded operation: the previous reducer and the state stay in place
    - Returns True when the new reducer is active

    Listeners are notified only after a successful swap, and their errors
    propagate as they do from dispatch().
    """

    def replace_reducer(self, next_reducer) -> bool:
        previous = self._reducer
        try:
            if not callable(next_reducer):
                raise ConfigError("Expected the next_reducer to be a function.")
            self._reducer = next_reducer
            self._reduce({"type": ActionTypes.REPLACE})
        except Exception:
            logger.exception("Failed to replace reducer, keeping %r", previous)
            self._reducer = previous
            return False

        logger.info(
            "Replaced reducer: %s -> %s",
            getattr(previous, "__name__", previous),
            getattr(next_reducer, "__name__", next_reducer),
        )
        self._notify_listeners()
        return True
