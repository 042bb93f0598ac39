"""reducks: a predictable state container with middleware for Python."""

from importlib.metadata import version as _version

__version__ = _version("reducks")

from reducks.errors import (
    ReducksError,
    ConfigError,
    ValidationError,
    ReentrancyError,
    ReducerError,
)
from reducks._validate import is_plain_object
from reducks.action_types import ActionTypes
from reducks.compose import compose
from reducks.observable import StateObservable, Subscription
from reducks.store import Store, create_store
from reducks.middleware import MiddlewareAPI, MiddlewareStore, apply_middleware
from reducks.combine import combine_reducers
from reducks.bind import bind_action_creators
from reducks.reaction import reaction
from reducks.thunk import thunk, log_actions
# hot_reload and textual NOT auto-imported, opt-in only

__all__ = [
    "ReducksError",
    "ConfigError",
    "ValidationError",
    "ReentrancyError",
    "ReducerError",
    "is_plain_object",
    "ActionTypes",
    "compose",
    "StateObservable",
    "Subscription",
    "Store",
    "create_store",
    "MiddlewareAPI",
    "MiddlewareStore",
    "apply_middleware",
    "combine_reducers",
    "bind_action_creators",
    "reaction",
    "thunk",
    "log_actions",
]
