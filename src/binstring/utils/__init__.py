"""Utility exports."""
from .text import (
    BytesLike,
    ENCODING,
    decode_checked,
    from_text,
    is_valid_text,
    to_bytes,
    to_text,
)

__all__ = [
    "BytesLike",
    "ENCODING",
    "decode_checked",
    "from_text",
    "is_valid_text",
    "to_bytes",
    "to_text",
]
