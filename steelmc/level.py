"""A world level holding its loaded chunks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from steelmc.locks import SteelRwLock
from steelmc.section import ChunkSections
from steelmc.types import ChunkPos


@dataclass
class ChunkData:
    """The block data of one chunk."""

    sections: ChunkSections


class Level:
    """Loaded chunks keyed by position, each behind its own lock."""

    def __init__(self) -> None:
        self.chunks: dict[ChunkPos, SteelRwLock[ChunkData]] = {}

    def insert_chunk(self, pos: ChunkPos, data: ChunkData) -> SteelRwLock[ChunkData]:
        """Add a chunk; raises KeyError if one is already loaded at ``pos``."""
        if pos in self.chunks:
            raise KeyError(f"chunk already loaded at {pos}")
        lock = SteelRwLock(data)
        self.chunks[pos] = lock
        return lock

    def get_chunk(self, pos: ChunkPos) -> Optional[SteelRwLock[ChunkData]]:
        """The lock guarding the chunk at ``pos``, or None if it is not loaded."""
        return self.chunks.get(pos)

    def __len__(self) -> int:
        return len(self.chunks)

    def __contains__(self, pos: object) -> bool:
        return pos in self.chunks