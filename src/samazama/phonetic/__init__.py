"""Phonetic encoding for shorthand matching.

Provides a Soundex variant that skips silent English digraphs, plus the
digraph scanner and lookup tables it is built on.
"""

from samazama.phonetic.digraph import DigraphStep, remove_digraphs, scan_digraph
from samazama.phonetic.soundex import (
    CodedForm,
    encode,
    keep_coded,
    normalize_input,
    soundex_equal,
)
from samazama.phonetic.tables import (
    DigraphResponse,
    DigraphTable,
    SoundGroupTable,
)

__all__ = [
    "CodedForm",
    "DigraphResponse",
    "DigraphStep",
    "DigraphTable",
    "SoundGroupTable",
    "encode",
    "keep_coded",
    "normalize_input",
    "remove_digraphs",
    "scan_digraph",
    "soundex_equal",
]
