"""Middleware: an enhancer that wraps dispatch in a chain of handlers.

A middleware has the shape

    def middleware(api):
        def wrap(next_dispatch):
            def handle(action):
                ...
                return next_dispatch(action)
            return handle
        return wrap

The first middleware given to apply_middleware() is outermost: it sees each
action first and decides whether and how to call next_dispatch. The last one
sits directly in front of the store's own dispatch.
"""

from __future__ import annotations

from typing import Any, Callable

from reducks.compose import compose
from reducks.errors import ReentrancyError
from reducks.observable import StateObservable
from reducks.store import Action, Enhancer, Listener, Reducer, Unsubscribe

Dispatch = Callable[[Action], Any]
Middleware = Callable[["MiddlewareAPI"], Callable[[Dispatch], Dispatch]]


class MiddlewareAPI:
    """What each middleware gets: dispatch and get_state.

    dispatch always goes through the fully composed chain, including when a
    middleware calls it from a later action.
    """

    __slots__ = ("dispatch", "get_state")

    def __init__(self, dispatch: Dispatch, get_state: Callable[[], Any]) -> None:
        self.dispatch = dispatch
        self.get_state = get_state


class MiddlewareStore:
    """A store whose dispatch runs through a middleware chain.

    Everything except dispatch is forwarded to the wrapped store.
    """

    __slots__ = ("_store", "dispatch")

    def __init__(self, store: Any, dispatch: Dispatch) -> None:
        self._store = store
        self.dispatch = dispatch

    def get_state(self) -> Any:
        return self._store.get_state()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._store.subscribe(listener)

    def replace_reducer(self, next_reducer: Reducer) -> Any:
        return self._store.replace_reducer(next_reducer)

    def observable(self) -> StateObservable:
        return self._store.observable()

    def __repr__(self) -> str:
        return f"MiddlewareStore({self._store!r})"


def apply_middleware(*middlewares: Middleware) -> Enhancer:
    """Build an enhancer that applies middlewares to the store's dispatch.

    Usage:
        store = create_store(reducer, apply_middleware(thunk, log_actions()))
    """

    def enhancer(create: Callable[..., Any]) -> Callable[..., MiddlewareStore]:
        def create_with_middleware(reducer: Reducer, preloaded_state: Any = None) -> MiddlewareStore:
            store = create(reducer, preloaded_state)

            def _dispatch_while_constructing(action: Action) -> Any:
                raise ReentrancyError(
                    "Dispatching while constructing your middleware is not allowed. "
                    "Other middleware would not be applied to this dispatch."
                )

            # Read at call time: middlewares capture the api before the
            # composed dispatch exists.
            dispatch_ref: list[Dispatch] = [_dispatch_while_constructing]

            def _dispatch(action: Action) -> Any:
                return dispatch_ref[0](action)

            api = MiddlewareAPI(dispatch=_dispatch, get_state=store.get_state)
            chain = [middleware(api) for middleware in middlewares]
            dispatch_ref[0] = compose(*chain)(store.dispatch)

            return MiddlewareStore(store, dispatch_ref[0])

        return create_with_middleware

    return enhancer
