"""Text colours: RGB, ARGB, the sixteen named colours and the reset colour."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Union

_HEX_BYTE = re.compile(r"\+?[0-9A-Fa-f]+")


def _check_u8(label: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{label} must be an integer in 0..=255, got {value!r}")


@dataclass(frozen=True)
class RGBColor:
    """A 24-bit colour, written as ``#RRGGBB``."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8("red", self.red)
        _check_u8("green", self.green)
        _check_u8("blue", self.blue)

    def to_json(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


@dataclass(frozen=True)
class ARGBColor:
    """A colour with alpha, written as the four bytes alpha, red, green, blue."""

    alpha: int
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8("alpha", self.alpha)
        _check_u8("red", self.red)
        _check_u8("green", self.green)
        _check_u8("blue", self.blue)

    def to_json(self) -> list[int]:
        return [self.alpha, self.red, self.green, self.blue]

    @classmethod
    def from_json(cls, data: Any) -> ARGBColor:
        """Read from a four-element sequence or a mapping of the channel names."""
        if isinstance(data, Mapping):
            try:
                return cls(data["alpha"], data["red"], data["green"], data["blue"])
            except KeyError as missing:
                raise ValueError(f"missing field {missing.args[0]!r}") from None
        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            if len(data) != 4:
                raise ValueError("ARGB colour needs exactly 4 components")
            return cls(*data)
        raise ValueError(f"Invalid ARGB colour: {data!r}")


class NamedColor(IntEnum):
    """One of the sixteen named colours."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_AQUA = 3
    DARK_RED = 4
    DARK_PURPLE = 5
    GOLD = 6
    GRAY = 7
    DARK_GRAY = 8
    BLUE = 9
    GREEN = 10
    AQUA = 11
    RED = 12
    LIGHT_PURPLE = 13
    YELLOW = 14
    WHITE = 15

    @property
    def key(self) -> str:
        """The snake_case name used on the wire."""
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> NamedColor:
        """Look a colour up by its exact lower-case name."""
        member = cls.__members__.get(name.upper()) if isinstance(name, str) else None
        if member is None or name != member.key:
            raise ValueError("Invalid named color")
        return member


class ResetColor(Enum):
    """The context-dependent default colour."""

    RESET = "reset"


Color = Union[ResetColor, RGBColor, NamedColor]


def color_to_json(color: Color) -> str | None:
    """Serialize a colour; the reset colour is written as null."""
    if isinstance(color, ResetColor):
        return None
    if isinstance(color, NamedColor):
        return color.key
    if isinstance(color, RGBColor):
        return color.to_json()
    raise TypeError(f"Not a colour: {color!r}")


def _parse_hex_byte(chunk: bytes, label: str) -> int:
    try:
        text = chunk.decode("ascii")
    except UnicodeDecodeError:
        text = ""
    if not _HEX_BYTE.fullmatch(text):
        raise ValueError(f"Invalid {label} component in hex color")
    return int(text, 16)


def color_from_json(value: Any) -> Color:
    """Read ``reset``, ``#RRGGBB`` or a colour name."""
    if not isinstance(value, str):
        raise ValueError(f"Colour must be a string, got {value!r}")
    if value == "reset":
        return ResetColor.RESET
    if value.startswith("#"):
        raw = value.encode("utf-8")
        if len(raw) != 7:
            raise ValueError("Hex color must be in the format '#RRGGBB'")
        digits = raw[1:]
        return RGBColor(
            _parse_hex_byte(digits[0:2], "red"),
            _parse_hex_byte(digits[2:4], "green"),
            _parse_hex_byte(digits[4:6], "blue"),
        )
    return NamedColor.from_name(value)