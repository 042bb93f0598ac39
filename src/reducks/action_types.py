"""Reserved action types dispatched by the store itself.

Every reducer must treat these as unknown actions and return its current
state (or its initial state when given None). They carry a random suffix
generated at import time so they never match an application's own types.
"""

from __future__ import annotations

import random
import string

_ALPHABET = string.digits + string.ascii_lowercase


def _random_suffix() -> str:
    return ".".join(random.choices(_ALPHABET, k=6))


class ActionTypes:
    INIT = f"@@reducks/INIT{_random_suffix()}"
    REPLACE = f"@@reducks/REPLACE{_random_suffix()}"


def probe_unknown_action() -> str:
    """A fresh action type no reducer can know about."""
    return f"@@reducks/PROBE_UNKNOWN_ACTION{_random_suffix()}"
