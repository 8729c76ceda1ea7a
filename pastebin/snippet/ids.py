from __future__ import annotations

import uuid

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def new_snippet_id(now_ms: int, *, suffix_length: int = 12) -> str:
    """Return a timestamp-prefixed id with a random hex suffix."""
    return to_base36(now_ms) + uuid.uuid4().hex[:suffix_length]


__all__ = ["new_snippet_id", "to_base36"]
