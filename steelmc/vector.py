"""Two- and three-component vectors used for positions and directions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _ieee_div(a: float, b: float) -> float:
    """Divide like IEEE floats do: division by zero gives inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _round_to_i32(value: float) -> int:
    """Round half away from zero and saturate into the i32 range (nan is 0)."""
    value = float(value)
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _sign(value: Any) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


@dataclass(frozen=True)
class Vector2:
    """A two-component vector."""

    x: Any = 0
    y: Any = 0

    def length_squared(self) -> Any:
        return self.x * self.x + self.y * self.y

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def add_raw(self, x: Any, y: Any) -> Vector2:
        return Vector2(self.x + x, self.y + y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, x: Any, y: Any) -> Vector2:
        return Vector2(self.x * x, self.y * y)


class Axis(Enum):
    """One of the three coordinate axes."""

    X = "x"
    Y = "y"
    Z = "z"

    def as_str(self) -> str:
        return self.value


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: Any = 0
    y: Any = 0
    z: Any = 0

    def length_squared(self) -> Any:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def horizontal_length_squared(self) -> Any:
        return self.x * self.x + self.z * self.z

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def add_raw(self, x: Any, y: Any, z: Any) -> Vector3:
        return Vector3(self.x + x, self.y + y, self.z + z)

    def sub(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def sub_raw(self, x: Any, y: Any, z: Any) -> Vector3:
        return Vector3(self.x - x, self.y - y, self.z - z)

    def multiply(self, x: Any, y: Any, z: Any) -> Vector3:
        return Vector3(self.x * x, self.y * y, self.z * z)

    def lerp(self, other: Vector3, t: Any) -> Vector3:
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def sign(self) -> Vector3:
        """Per-component sign as -1, 0 or 1."""
        return Vector3(_sign(self.x), _sign(self.y), _sign(self.z))

    def squared_distance_to_vec(self, other: Vector3) -> Any:
        return self.squared_distance_to(other.x, other.y, other.z)

    def squared_distance_to(self, x: Any, y: Any, z: Any) -> Any:
        dx = self.x - x
        dy = self.y - y
        dz = self.z - z
        return dx * dx + dy * dy + dz * dz

    def is_within_bounds(self, block_pos: Vector3, x: Any, y: Any, z: Any) -> bool:
        """Whether this vector lies in the box of half-extents x, y, z around block_pos."""
        return (
            block_pos.x - x <= self.x <= block_pos.x + x
            and block_pos.y - y <= self.y <= block_pos.y + y
            and block_pos.z - z <= self.z <= block_pos.z + z
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def horizontal_length(self) -> float:
        return math.sqrt(self.horizontal_length_squared())

    def normalize(self) -> Vector3:
        length = self.length()
        return Vector3(
            _ieee_div(self.x, length),
            _ieee_div(self.y, length),
            _ieee_div(self.z, length),
        )

    @classmethod
    def rotation_vector(cls, pitch: float, yaw: float) -> Vector3:
        """The unit direction a view with the given pitch and yaw (degrees) faces."""
        h = math.radians(pitch)
        i = math.radians(-yaw)
        horizontal = math.cos(h)
        return cls(math.sin(i) * horizontal, -math.sin(h), math.cos(i) * horizontal)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: Any) -> Vector3:
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    @classmethod
    def from_tuple(cls, values: tuple[Any, Any, Any]) -> Vector3:
        x, y, z = values
        return cls(x, y, z)

    def to_tuple(self) -> tuple[Any, Any, Any]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_sequence(cls, values: Iterable[Any]) -> Vector3:
        """Read a vector from a sequence of exactly three numbers."""
        items = tuple(values)
        if len(items) != 3 or not all(
            isinstance(v, Real) and not isinstance(v, bool) for v in items
        ):
            raise ValueError("Failed to read Vector3")
        return cls(*items)

    def to_f64(self) -> Vector3:
        return Vector3(float(self.x), float(self.y), float(self.z))

    def to_i32(self) -> Vector3:
        """Round each component to the nearest integer, halves away from zero."""
        return Vector3(
            _round_to_i32(self.x), _round_to_i32(self.y), _round_to_i32(self.z)
        )

    def to_vec2_i32(self) -> Vector2:
        """Round x and z into a two-component integer vector."""
        return Vector2(_round_to_i32(self.x), _round_to_i32(self.z))