"""Byte-backed text container.

:class:`BinString` owns a single immutable buffer of bytes and offers two
interpretations of it: a byte view that is always valid, and a text view that is
only meaningful when the bytes happen to be well-formed UTF-8.

Text view caveat
----------------
Storing bytes that are not valid UTF-8 is always allowed. ``as_text``,
``into_text``, ``str()`` and ``trim`` reinterpret the bytes without validating
them. Undecodable bytes come back as ``surrogateescape`` code points
(``U+DC80``..``U+DCFF``), so no information is lost and nothing is raised, but
the resulting ``str`` is garbled for display and cannot be written through a
strict UTF-8 codec. Callers that need a guarantee should use :meth:`decode`,
which raises :class:`~binstring.errors.InvalidTextError` instead.

Example
-------
>>> value = BinString.from_bytes([104, 101, 108, 108, 111])
>>> value.as_text()
'hello'
>>> value.find(b"ll")
2
"""
from __future__ import annotations

import operator
from functools import total_ordering
from typing import Iterable, Iterator, Optional, Sequence, Union

from .errors import OutOfRangeError
from .utils.text import BytesLike, decode_checked, from_text, is_valid_text, to_bytes, to_text

Pattern = Union["BinString", BytesLike, str, Sequence[int]]


def _coerce(value: Pattern) -> bytes:
    if isinstance(value, BinString):
        return value._data
    return to_bytes(value)


def _byte_value(value: int) -> int:
    number = operator.index(value)
    if not 0 <= number <= 0xFF:
        raise ValueError(f"byte value must be in range 0..255, got {number}")
    return number


@total_ordering
class BinString:
    """Bytes that may or may not be valid UTF-8, usable where text is expected.

    ``BinString(value)`` accepts ``str``, ``bytes``, ``bytearray``,
    ``memoryview``, a list or tuple of byte values, or another ``BinString``
    and never rejects content. Pattern arguments accept the same types. Mutable
    inputs are copied so the stored buffer is never shared with the caller.
    Every transformation returns a new instance.
    """

    __slots__ = ("_data",)

    def __init__(self, value: Pattern = b"") -> None:
        self._data = _coerce(value)

    @classmethod
    def _wrap(cls, data: bytes) -> "BinString":
        instance = cls.__new__(cls)
        instance._data = data
        return instance

    @classmethod
    def from_text(cls, text: str) -> "BinString":
        """Wrap the UTF-8 bytes of ``text``.

        Code points produced by the unchecked text view map back to the raw
        bytes they stand for, so ``from_text(b.as_text())`` reproduces ``b``.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return cls._wrap(from_text(text))

    @classmethod
    def from_bytes(cls, data: BytesLike | Iterable[int]) -> "BinString":
        """Take an arbitrary byte sequence. Empty and non-UTF-8 input is accepted."""
        if isinstance(data, (str, int)):
            raise TypeError(f"from_bytes() expects a byte sequence, got {type(data).__name__}")
        if isinstance(data, (bytes, bytearray, memoryview)):
            return cls._wrap(to_bytes(data))
        return cls._wrap(bytes(data))

    # -- conversions -----------------------------------------------------

    def into_text(self) -> str:
        """Return the bytes reinterpreted as ``str`` without validation.

        Lossless for every input; see the module docstring for what happens
        when the bytes are not valid UTF-8.
        """
        return to_text(self._data)

    def as_text(self, errors: str = "surrogateescape") -> str:
        """Text view of the bytes, unchecked unless ``errors`` is ``"strict"``.

        ``errors`` names the codec error handler. The default view is lossless,
        the same as ``into_text()``; other handlers must be asked for explicitly.
        """
        if errors == "strict":
            return self.decode()
        return to_text(self._data, errors=errors)

    def decode(self) -> str:
        """Checked text conversion. Raises ``InvalidTextError`` on malformed UTF-8."""
        return decode_checked(self._data)

    def is_valid_text(self) -> bool:
        return is_valid_text(self._data)

    def as_bytes(self) -> bytes:
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self.into_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __reduce__(self):
        return (type(self), (self._data,))

    # -- accessors -------------------------------------------------------

    def length(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, key: int | slice):
        length = len(self._data)
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("BinString slicing does not support a step")
            start = 0 if key.start is None else operator.index(key.start)
            end = length if key.stop is None else operator.index(key.stop)
            if start < 0:
                start += length
            if end < 0:
                end += length
            return self.slice(start, end)
        index = operator.index(key)
        if not -length <= index < length:
            raise OutOfRangeError(index, None, length)
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinString):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BinString):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(self._data)

    # -- byte-level queries ----------------------------------------------

    def startswith(self, pattern: Pattern) -> bool:
        return self._data.startswith(_coerce(pattern))

    def endswith(self, pattern: Pattern) -> bool:
        return self._data.endswith(_coerce(pattern))

    def contains(self, pattern: Pattern) -> bool:
        return _coerce(pattern) in self._data

    def __contains__(self, pattern: Pattern) -> bool:
        return self.contains(pattern)

    def find(self, pattern: Pattern) -> Optional[int]:
        """Byte offset of the first occurrence of ``pattern`` or ``None``.

        An empty pattern matches at offset 0.
        """
        index = self._data.find(_coerce(pattern))
        return None if index < 0 else index

    def rfind(self, pattern: Pattern) -> Optional[int]:
        """Byte offset of the last occurrence of ``pattern`` or ``None``.

        An empty pattern matches at ``len(self)``.
        """
        index = self._data.rfind(_coerce(pattern))
        return None if index < 0 else index

    def count(self, pattern: Pattern) -> int:
        return self._data.count(_coerce(pattern))

    # -- transformations -------------------------------------------------

    def concat(self, other: Pattern) -> "BinString":
        return self._wrap(self._data + _coerce(other))

    def __add__(self, other: object) -> "BinString":
        try:
            tail = _coerce(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented
        return self._wrap(self._data + tail)

    def __radd__(self, other: object) -> "BinString":
        try:
            head = _coerce(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented
        return self._wrap(head + self._data)

    def slice(self, start: int, end: int) -> "BinString":
        """Return the bytes in ``[start, end)`` as a new instance.

        Raises
        ------
        OutOfRangeError
            If ``start`` is negative, ``start > end`` or ``end`` exceeds the
            length. Bounds are never clamped.
        """

        start = operator.index(start)
        end = operator.index(end)
        length = len(self._data)
        if start < 0 or end < start or end > length:
            raise OutOfRangeError(start, end, length)
        return self._wrap(self._data[start:end])

    def replace(self, old: int, new: int) -> "BinString":
        """Substitute every byte equal to ``old`` with ``new``. Length is unchanged."""
        old = _byte_value(old)
        new = _byte_value(new)
        return self._wrap(self._data.replace(bytes((old,)), bytes((new,))))

    def trim(self) -> "BinString":
        """Strip leading and trailing whitespace as ``str.strip`` defines it.

        Only meaningful for valid UTF-8 content; on other bytes the result is
        unspecified.
        """
        return self._wrap(from_text(self.into_text().strip()))


__all__ = ["BinString", "Pattern"]
