"""A byte buffer with reserved space at the front for prefixes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class FrontVec:
    """Byte buffer whose front space can later be filled without copying the body.

    Each call to :meth:`set_in_front` places its bytes before everything set
    earlier, so several prefixes end up in reverse order of the calls.
    """

    def __init__(self, reserve: int, capacity: int = 0) -> None:
        if reserve < 0 or capacity < 0:
            raise ValueError("reserve and capacity must not be negative")
        self._buf = bytearray(reserve)
        self._front = reserve

    @property
    def front_space(self) -> int:
        """How many reserved bytes are still free at the front."""
        return self._front

    def __len__(self) -> int:
        return len(self._buf) - self._front

    def push(self, value: int) -> None:
        self._buf.append(value)

    def extend(self, data: Iterable[int]) -> None:
        self._buf.extend(data)

    def write(self, data: bytes) -> int:
        """Append data and return how many bytes were written."""
        self._buf.extend(data)
        return len(data)

    def set_in_front(self, data: bytes) -> None:
        """Place data directly before the current content, using reserved space."""
        if self._front < len(data):
            raise ValueError("Not enough reserved space")
        start = self._front - len(data)
        self._buf[start : self._front] = data
        self._front = start

    def __bytes__(self) -> bytes:
        return bytes(self._buf[self._front :])

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self))

    def _positions(self, index: int | slice) -> int | range:
        return range(self._front, len(self._buf))[index]

    def __getitem__(self, index: int | slice) -> int | bytes:
        positions = self._positions(index)
        if isinstance(positions, range):
            return bytes(self._buf[i] for i in positions)
        return self._buf[positions]

    def __setitem__(self, index: int | slice, value: int | bytes) -> None:
        positions = self._positions(index)
        if isinstance(positions, range):
            data = bytes(value)
            if len(data) != len(positions):
                raise ValueError("slice assignment cannot change the buffer length")
            for position, byte in zip(positions, data):
                self._buf[position] = byte
        else:
            self._buf[positions] = value

    def __repr__(self) -> str:
        return f"FrontVec(front_space={self._front}, data={bytes(self)!r})"