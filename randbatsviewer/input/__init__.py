"""Input-layer public API for key decoding and dispatch.

Low-level terminal decoding (``read_key``) is kept apart from the dispatch
that maps key tokens onto selector intents (``handle_key``).
"""

from .keys import KEY_INTENTS, KeyCallbacks, handle_key, parse_mouse_col_row
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KEY_INTENTS",
    "KeyCallbacks",
    "handle_key",
    "parse_mouse_col_row",
    "read_key",
]
