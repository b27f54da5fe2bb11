"""Small wrapper types that keep ids and positions from being mixed up."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from steelmc.vector import Vector2, Vector3


@dataclass(frozen=True)
class BlockStateId:
    """A raw block state id (an unsigned 16-bit value)."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"Block state id out of range: {self.value}")


@dataclass(frozen=True)
class ChunkPos:
    """A chunk position."""

    pos: Vector2


@dataclass(frozen=True)
class BlockPos:
    """A block position."""

    pos: Vector3


def to_block_pos(vector: Vector3) -> BlockPos:
    """The block position nearest to a vector."""
    return BlockPos(vector.to_i32())


@dataclass(frozen=True)
class ResourceLocation:
    """A namespaced identifier such as ``minecraft:stone``."""

    namespace: str
    path: str

    VANILLA_NAMESPACE: ClassVar[str] = "minecraft"

    @classmethod
    def vanilla(cls, path: str) -> ResourceLocation:
        return cls(cls.VANILLA_NAMESPACE, path)

    @staticmethod
    def valid_namespace_char(char: str) -> bool:
        return char in "_-." or "a" <= char <= "z" or "0" <= char <= "9"

    @staticmethod
    def valid_path_char(char: str) -> bool:
        return char in "_-/." or "a" <= char <= "z" or "0" <= char <= "9"

    @staticmethod
    def validate_namespace(namespace: str) -> bool:
        return all(ResourceLocation.valid_namespace_char(c) for c in namespace)

    @staticmethod
    def validate_path(path: str) -> bool:
        return all(ResourceLocation.valid_path_char(c) for c in path)

    @staticmethod
    def validate(namespace: str, path: str) -> bool:
        return ResourceLocation.validate_namespace(
            namespace
        ) and ResourceLocation.validate_path(path)

    @classmethod
    def parse(cls, text: str) -> ResourceLocation:
        """Parse ``namespace:path``; raises ValueError if it is malformed."""
        parts = text.split(":")
        if len(parts) != 2:
            raise ValueError(f"Invalid resource location: {text}")
        namespace, path = parts
        if not cls.validate_namespace(namespace):
            raise ValueError(f"Invalid namespace: {namespace}")
        if not cls.validate_path(path):
            raise ValueError(f"Invalid path: {path}")
        return cls(namespace, path)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"