"""Tests for the thunk and log_actions middleware."""

import logging

from reducks import apply_middleware, create_store, log_actions, thunk


def counter(state, action):
    if state is None:
        state = 0
    if action["type"] == "inc":
        return state + 1
    return state


class TestThunk:
    def test_plain_actions_pass_through(self):
        store = create_store(counter, apply_middleware(thunk))
        assert store.dispatch({"type": "inc"}) == {"type": "inc"}
        assert store.get_state() == 1

    def test_function_actions_are_called(self):
        store = create_store(counter, apply_middleware(thunk))

        def inc_twice(dispatch, get_state):
            dispatch({"type": "inc"})
            dispatch({"type": "inc"})
            return get_state()

        assert store.dispatch(inc_twice) == 2

    def test_nested_thunks(self):
        store = create_store(counter, apply_middleware(thunk))

        def inner(dispatch, get_state):
            return dispatch({"type": "inc"})

        def outer(dispatch, get_state):
            dispatch(inner)
            return "done"

        assert store.dispatch(outer) == "done"
        assert store.get_state() == 1


class TestLogActions:
    def test_logs_type_and_state(self, caplog):
        store = create_store(counter, apply_middleware(log_actions()))
        with caplog.at_level(logging.DEBUG, logger="reducks.actions"):
            store.dispatch({"type": "inc"})
        assert "dispatching 'inc'" in caplog.text
        assert "next state 1" in caplog.text

    def test_custom_logger_and_level(self, caplog):
        custom = logging.getLogger("myapp.store")
        store = create_store(counter, apply_middleware(log_actions(custom, logging.INFO)))
        with caplog.at_level(logging.INFO, logger="myapp.store"):
            store.dispatch({"type": "inc"})
        assert [r.levelno for r in caplog.records if r.name == "myapp.store"] == [
            logging.INFO,
            logging.INFO,
        ]

    def test_with_thunk(self, caplog):
        store = create_store(counter, apply_middleware(thunk, log_actions()))

        def inc(dispatch, get_state):
            return dispatch({"type": "inc"})

        with caplog.at_level(logging.DEBUG, logger="reducks.actions"):
            store.dispatch(inc)
        assert "dispatching 'inc'" in caplog.text
