"""Chunk sections and the paletted block storage inside them."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from steelmc.types import BlockStateId

logger = logging.getLogger(__name__)

BLOCK_PALETTE_SIZE = 16


class PalettedContainer:
    """A cube of values indexed by (x, y, z).

    The cube is stored as a single value while every cell holds the same
    value. Once cells differ it keeps the full cube together with a palette
    counting how often each value occurs.
    """

    def __init__(self, size: int, value: Hashable) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self._size = size
        self._value: Any = value
        self._cube: Optional[list[Any]] = None
        self._palette: list[list[Any]] = []

    @classmethod
    def from_cube(cls, size: int, cube: Sequence[Sequence[Sequence[Hashable]]]) -> PalettedContainer:
        """Build a container from nested sequences indexed ``cube[y][z][x]``."""
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        if len(cube) != size or any(
            len(layer) != size or any(len(row) != size for row in layer) for layer in cube
        ):
            raise ValueError(f"cube must be {size}x{size}x{size}")
        container = cls(size, None)
        container._load([value for layer in cube for row in layer for value in row])
        return container

    def _load(self, flat: list[Any]) -> None:
        palette: list[list[Any]] = []
        for value in flat:
            entry = next((e for e in palette if e[0] == value), None)
            if entry is None:
                palette.append([value, 1])
            else:
                entry[1] += 1
        if len(palette) == 1:
            self._become_homogeneous(palette[0][0])
        else:
            self._value = None
            self._cube = flat
            self._palette = palette

    def _become_homogeneous(self, value: Any) -> None:
        self._value = value
        self._cube = None
        self._palette = []

    @property
    def size(self) -> int:
        """Edge length of the cube."""
        return self._size

    @property
    def volume(self) -> int:
        """Number of cells in the cube."""
        return self._size**3

    @property
    def is_homogeneous(self) -> bool:
        """Whether every cell holds the same value."""
        return self._cube is None

    @property
    def palette(self) -> tuple[tuple[Any, int], ...]:
        """Each distinct value with how many cells hold it."""
        if self._cube is None:
            return ((self._value, self.volume),)
        return tuple((value, count) for value, count in self._palette)

    def _index(self, x: int, y: int, z: int) -> int:
        for name, coord in (("x", x), ("y", y), ("z", z)):
            if not 0 <= coord < self._size:
                raise IndexError(f"{name} coordinate {coord} outside 0..{self._size}")
        return (y * self._size + z) * self._size + x

    def get(self, x: int, y: int, z: int) -> Any:
        index = self._index(x, y, z)
        if self._cube is None:
            return self._value
        return self._cube[index]

    def set(self, x: int, y: int, z: int, value: Hashable) -> Any:
        """Store a value and return the one it replaced."""
        index = self._index(x, y, z)
        if self._cube is None:
            original = self._value
            if value != original:
                flat = [original] * self.volume
                flat[index] = value
                self._load(flat)
            return original

        old = self._cube[index]
        entry = next((e for e in self._palette if e[0] == value), None)
        if entry is None:
            self._palette.append([value, 1])
        else:
            entry[1] += 1

        position = next(
            (i for i, e in enumerate(self._palette) if e[0] == old), None
        )
        if position is not None:
            self._palette[position][1] -= 1
            if self._palette[position][1] == 0:
                last = self._palette.pop()
                if position < len(self._palette):
                    self._palette[position] = last

        self._cube[index] = value
        if len(self._palette) == 1:
            self._become_homogeneous(self._palette[0][0])
        return old

    def __repr__(self) -> str:
        if self._cube is None:
            return f"PalettedContainer(size={self._size}, value={self._value!r})"
        return f"PalettedContainer(size={self._size}, palette={self.palette!r})"


def block_palette(value: int) -> PalettedContainer:
    """A 16x16x16 block-state container filled with one state id."""
    return PalettedContainer(BLOCK_PALETTE_SIZE, value)


@dataclass
class SubChunk:
    """One 16-block-tall slice of a chunk."""

    block_states: PalettedContainer


@dataclass
class ChunkSections:
    """The stacked sub-chunks of a chunk, the lowest starting at ``min_y``."""

    sections: list[SubChunk]
    min_y: int

    @staticmethod
    def _locate(relative_x: int, relative_y: int, relative_z: int) -> tuple[int, int]:
        if not 0 <= relative_x < BLOCK_PALETTE_SIZE:
            raise IndexError(f"relative x {relative_x} outside the chunk")
        if not 0 <= relative_z < BLOCK_PALETTE_SIZE:
            raise IndexError(f"relative z {relative_z} outside the chunk")
        if relative_y < 0:
            raise IndexError(f"relative y {relative_y} must not be negative")
        return divmod(relative_y, BLOCK_PALETTE_SIZE)

    def get_relative_block(
        self, relative_x: int, relative_y: int, relative_z: int
    ) -> Optional[BlockStateId]:
        """The block state at chunk-relative coordinates, or None above the top."""
        section_index, y = self._locate(relative_x, relative_y, relative_z)
        if section_index >= len(self.sections):
            return None
        value = self.sections[section_index].block_states.get(relative_x, y, relative_z)
        return BlockStateId(value)

    def set_relative_block(
        self, relative_x: int, relative_y: int, relative_z: int, value: BlockStateId
    ) -> None:
        """Store a block state at chunk-relative coordinates."""
        section_index, y = self._locate(relative_x, relative_y, relative_z)
        if section_index >= len(self.sections):
            raise IndexError(f"section {section_index} does not exist")
        logger.debug(
            "setting block at %d, %d, %d to %d", relative_x, y, relative_z, value.value
        )
        self.sections[section_index].block_states.set(relative_x, y, relative_z, value.value)