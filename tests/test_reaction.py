"""Tests for reaction."""

from reducks import create_store, reaction


def profile(state, action):
    if state is None:
        state = {"name": "Alice", "visits": 0}
    if action["type"] == "rename":
        return {**state, "name": action["name"]}
    if action["type"] == "visit":
        return {**state, "visits": state["visits"] + 1}
    return state


class TestReaction:
    def test_no_initial_effect(self):
        """Without fire_immediately, effect doesn't run on setup."""
        store = create_store(profile)
        effects = []
        reaction(store, lambda s: s["name"], effects.append)
        assert effects == []

    def test_fire_immediately(self):
        store = create_store(profile)
        effects = []
        reaction(store, lambda s: s["name"], effects.append, fire_immediately=True)
        assert effects == ["Alice"]

    def test_fires_on_change(self):
        store = create_store(profile)
        effects = []
        reaction(store, lambda s: s["name"], effects.append)
        store.dispatch({"type": "rename", "name": "Bob"})
        assert effects == ["Bob"]

    def test_skips_unrelated_changes(self):
        store = create_store(profile)
        effects = []
        reaction(store, lambda s: s["name"], effects.append)
        store.dispatch({"type": "visit"})
        store.dispatch({"type": "rename", "name": "Alice"})
        assert effects == []

    def test_unsubscribe_stops(self):
        store = create_store(profile)
        effects = []
        stop = reaction(store, lambda s: s["name"], effects.append)
        stop()
        store.dispatch({"type": "rename", "name": "Bob"})
        assert effects == []
