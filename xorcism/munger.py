"""Repeating-key XOR munging over byte sequences and binary streams."""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from typing import BinaryIO, Union

KeyLike = Union[str, bytes, bytearray, memoryview, Iterable[int]]
DataLike = Union[str, bytes, bytearray, memoryview, Iterable[int]]


def _as_bytes(value: KeyLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class Xorcism:
    """A munger which XORs a repeating key with some data.

    The munger is stateful: the key position carries over from one call to
    the next, so equal inputs usually give different outputs until the key
    has come full circle.
    """

    def __init__(self, key: KeyLike) -> None:
        self._key = _as_bytes(key)
        if not self._key:
            raise ValueError("key must not be empty")
        self._position = 0

    def __copy__(self) -> Xorcism:
        clone = Xorcism.__new__(Xorcism)
        clone._key = self._key
        clone._position = self._position
        return clone

    def __repr__(self) -> str:
        return f"Xorcism(key_length={len(self._key)}, position={self._position})"

    def _next_key_byte(self) -> int:
        byte = self._key[self._position]
        self._position = (self._position + 1) % len(self._key)
        return byte

    def munge_in_place(self, data: bytearray | memoryview) -> None:
        """XOR every byte of a writable buffer with the key, in place."""
        view = memoryview(data).cast("B")
        if view.readonly:
            raise TypeError("munge_in_place needs a writable buffer")
        view[:] = bytes(self.munge(view))

    def munge(self, data: DataLike) -> Iterator[int]:
        """Yield each byte of ``data`` XORed with the next key byte.

        The key advances lazily, one byte for each value consumed.
        """
        source = data.encode("utf-8") if isinstance(data, str) else data
        for byte in source:
            yield byte ^ self._next_key_byte()

    def reader(self, stream: BinaryIO) -> XorcismReader:
        """Wrap a readable binary stream so that reads come out munged."""
        return XorcismReader(stream, self)

    def writer(self, stream: BinaryIO) -> XorcismWriter:
        """Wrap a writable binary stream so that writes go out munged."""
        return XorcismWriter(stream, self)


class XorcismReader(io.RawIOBase):
    """A raw binary reader that munges everything read from another stream."""

    def __init__(self, stream: BinaryIO, xorcism: Xorcism) -> None:
        super().__init__()
        self._stream = stream
        self._xorcism = xorcism

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:
        view = memoryview(buffer).cast("B")
        readinto = getattr(self._stream, "readinto", None)
        if readinto is not None:
            count = readinto(view)
        else:
            chunk = self._stream.read(len(view))
            if chunk is None:
                return None
            count = len(chunk)
            view[:count] = chunk
        if count:
            self._xorcism.munge_in_place(view[:count])
        return count


class XorcismWriter(io.RawIOBase):
    """A raw binary writer that munges everything before passing it on."""

    def __init__(self, stream: BinaryIO, xorcism: Xorcism) -> None:
        super().__init__()
        self._stream = stream
        self._xorcism = xorcism

    def writable(self) -> bool:
        return True

    def write(self, data) -> int | None:
        if isinstance(data, str):
            raise TypeError("write needs a bytes-like object, not str")
        munged = bytes(self._xorcism.munge(memoryview(data).cast("B")))
        return self._stream.write(munged)

    def flush(self) -> None:
        if not self.closed and not getattr(self._stream, "closed", False):
            self._stream.flush()
        super().flush()