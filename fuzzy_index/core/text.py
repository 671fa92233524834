# text.py
# Input coercion shared by the index and the distance functions.
# Everything is compared by code point, so the only job here is turning
# raw bytes into str without ever raising.

from typing import Union

Text = Union[str, bytes, bytearray]


def to_text(value: Text) -> str:
    """
    Return `value` as str.
    Bytes are decoded as UTF-8; each invalid byte span becomes one U+FFFD.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return value
