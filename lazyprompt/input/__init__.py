"""Input-layer public API for key decoding, sources, and dispatch tables.

Low-level decoding (`read_key_event`) is kept apart from the key sources
prompts actually consume and from the combo registry they dispatch through.
"""

from .events import KeyEvent, key, keys
from .key_registry import KeyComboBinding, KeyComboRegistry, bind
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key_event
from .source import KeySource, ScriptedKeySource, TerminalKeySource

__all__ = [
    "KeyEvent",
    "key",
    "keys",
    "KeyComboBinding",
    "KeyComboRegistry",
    "bind",
    "read_key_event",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeySource",
    "ScriptedKeySource",
    "TerminalKeySource",
]
