"""Byte and text coercion helpers shared across modules."""
from __future__ import annotations

import codecs
from typing import Sequence, Union

import structlog

from ..errors import InvalidTextError

logger = structlog.get_logger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

ENCODING = "utf-8"
SURROGATE_HANDLER = "binstring.surrogates"

_ESCAPE_LOW = 0xDC80
_ESCAPE_HIGH = 0xDCFF


def _encode_surrogates(exc: UnicodeError) -> tuple[bytes, int]:
    # U+DC80..U+DCFF come from surrogateescape and map back to the raw byte,
    # any other lone surrogate is written out as surrogatepass would.
    if not isinstance(exc, UnicodeEncodeError):
        raise exc
    chunk = exc.object[exc.start : exc.end]
    out = bytearray()
    for char in chunk:
        point = ord(char)
        if _ESCAPE_LOW <= point <= _ESCAPE_HIGH:
            out.append(point - 0xDC00)
        elif 0xD800 <= point <= 0xDFFF:
            out += char.encode(ENCODING, errors="surrogatepass")
        else:
            raise exc
    logger.debug("text.surrogates_encoded", start=exc.start, end=exc.end)
    return bytes(out), exc.end


codecs.register_error(SURROGATE_HANDLER, _encode_surrogates)


def from_text(text: str) -> bytes:
    """Return the UTF-8 bytes of ``text`` without rejecting any code point."""
    return text.encode(ENCODING, errors=SURROGATE_HANDLER)


def to_text(data: BytesLike, errors: str = "surrogateescape") -> str:
    return bytes(data).decode(ENCODING, errors=errors)


def decode_checked(data: bytes) -> str:
    """Decode ``data`` as strict UTF-8.

    Raises
    ------
    InvalidTextError
        If ``data`` is not well-formed UTF-8. The error carries the byte offset
        of the first offending byte.
    """

    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as exc:
        logger.debug("text.decode_failed", offset=exc.start, reason=exc.reason)
        raise InvalidTextError(exc.start, exc.reason) from None


def is_valid_text(data: bytes) -> bool:
    try:
        data.decode(ENCODING)
    except UnicodeDecodeError:
        return False
    return True


def to_bytes(value: BytesLike | str | Sequence[int]) -> bytes:
    """Coerce a pattern argument to ``bytes``.

    Accepts ``bytes``, ``bytearray``, ``memoryview``, ``str`` and a list or tuple
    of byte values. Text is turned into bytes with :func:`from_text`; byte values
    outside 0..255 raise ``ValueError``.
    """

    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return from_text(value)
    if isinstance(value, (bytearray, memoryview, list, tuple)):
        return bytes(value)
    raise TypeError(f"expected bytes-like object, byte values or str, got {type(value).__name__}")


__all__ = [
    "BytesLike",
    "ENCODING",
    "decode_checked",
    "from_text",
    "is_valid_text",
    "to_bytes",
    "to_text",
]
