"""Rich chat text: components, their content, style and hover events."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from steelmc.text.click import ClickEvent, click_event_from_json, click_event_to_json
from steelmc.text.color import ARGBColor, Color, color_from_json, color_to_json
from steelmc.text.locale import Locale

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _as_i32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"expected a 32-bit integer, got {value!r}")
    return value


def _optional(data: Mapping[str, Any], key: str, parse: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else parse(value)


def _components_from_json(value: Any) -> tuple[TextComponentBase, ...]:
    if not isinstance(value, list):
        raise ValueError("expected a list of text components")
    return tuple(TextComponentBase.from_json(item) for item in value)


def _components_to_json(components: Iterable[TextComponentBase]) -> list[dict[str, Any]]:
    return [component.to_json() for component in components]


# Hover events


@dataclass(frozen=True)
class ShowText:
    """Displays a tooltip with the given text."""

    value: tuple[TextComponentBase, ...]


@dataclass(frozen=True)
class ShowItem:
    """Shows an item by its resource id and optional stack size."""

    id: str
    count: Optional[int] = None


@dataclass(frozen=True)
class ShowEntity:
    """Shows an entity by type, UUID string and optional custom name."""

    id: str
    uuid: str
    name: Optional[tuple[TextComponentBase, ...]] = None


HoverEvent = Union[ShowText, ShowItem, ShowEntity]


def hover_event_to_json(event: HoverEvent) -> dict[str, Any]:
    """Serialize as an object tagged by ``action``."""
    if isinstance(event, ShowText):
        return {"action": "show_text", "value": _components_to_json(event.value)}
    if isinstance(event, ShowItem):
        out: dict[str, Any] = {"action": "show_item", "id": event.id}
        if event.count is not None:
            out["count"] = event.count
        return out
    if isinstance(event, ShowEntity):
        out = {"action": "show_entity", "id": event.id, "uuid": event.uuid}
        if event.name is not None:
            out["name"] = _components_to_json(event.name)
        return out
    raise TypeError(f"Not a hover event: {event!r}")


def _required(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    return data[key]


def hover_event_from_json(data: Any) -> HoverEvent:
    """Read an object tagged by ``action``; raises ValueError if it is malformed."""
    data = _require_mapping(data, "Hover event")
    action = data.get("action")
    if action == "show_text":
        return ShowText(_components_from_json(_required(data, "value")))
    if action == "show_item":
        return ShowItem(
            _as_str(_required(data, "id")), _optional(data, "count", _as_i32)
        )
    if action == "show_entity":
        return ShowEntity(
            _as_str(_required(data, "id")),
            _as_str(_required(data, "uuid")),
            _optional(data, "name", _components_from_json),
        )
    raise ValueError(f"Unknown hover action: {action!r}")


def show_text(text: TextComponent) -> ShowText:
    """A tooltip showing one component."""
    return ShowText((text.base,))


def show_entity(uuid: str, kind: str, name: Optional[TextComponent]) -> ShowEntity:
    """Show an entity of type ``kind``, optionally with a custom name."""
    return ShowEntity(id=kind, uuid=uuid, name=None if name is None else (name.base,))


# Style


@dataclass(frozen=True)
class Style:
    """Colour, decorations, font and interaction events of a component."""

    color: Optional[Color] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underlined: Optional[bool] = None
    strikethrough: Optional[bool] = None
    obfuscated: Optional[bool] = None
    insertion: Optional[str] = None
    click_event: Optional[ClickEvent] = None
    hover_event: Optional[HoverEvent] = None
    font: Optional[str] = None
    shadow_color: Optional[ARGBColor] = None

    def to_json(self) -> dict[str, Any]:
        """The set fields only; the reset colour is written as null."""
        out: dict[str, Any] = {}
        if self.color is not None:
            out["color"] = color_to_json(self.color)
        for key in ("bold", "italic", "underlined", "strikethrough", "obfuscated", "insertion"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.click_event is not None:
            out["click_event"] = click_event_to_json(self.click_event)
        if self.hover_event is not None:
            out["hover_event"] = hover_event_to_json(self.hover_event)
        if self.font is not None:
            out["font"] = self.font
        if self.shadow_color is not None:
            out["shadow_color"] = self.shadow_color.to_json()
        return out

    @classmethod
    def from_json(cls, data: Any) -> Style:
        """Read the style keys of an object, ignoring all others."""
        data = _require_mapping(data, "Style")
        return cls(
            color=_optional(data, "color", color_from_json),
            bold=_optional(data, "bold", _as_bool),
            italic=_optional(data, "italic", _as_bool),
            underlined=_optional(data, "underlined", _as_bool),
            strikethrough=_optional(data, "strikethrough", _as_bool),
            obfuscated=_optional(data, "obfuscated", _as_bool),
            insertion=_optional(data, "insertion", _as_str),
            click_event=_optional(data, "click_event", click_event_from_json),
            hover_event=_optional(data, "hover_event", hover_event_from_json),
            font=_optional(data, "font", _as_str),
            shadow_color=_optional(data, "shadow_color", ARGBColor.from_json),
        )


# Content


@dataclass(frozen=True)
class Text:
    """Raw text."""

    text: str


@dataclass(frozen=True)
class Translate:
    """A translation key with its arguments."""

    translate: str
    with_: tuple[TextComponentBase, ...] = ()


@dataclass(frozen=True)
class EntityNames:
    """The names of the entities a selector finds."""

    selector: str
    separator: Optional[str] = None


@dataclass(frozen=True)
class Keybind:
    """A keybind identifier."""

    keybind: str


@dataclass(frozen=True)
class Custom:
    """A server-side translation key; it is never sent to clients."""

    key: str
    locale: Locale
    with_: tuple[TextComponentBase, ...] = ()


TextContent = Union[Text, Translate, EntityNames, Keybind, Custom]


def _content_to_json(content: TextContent) -> dict[str, Any]:
    if isinstance(content, Text):
        return {"text": content.text}
    if isinstance(content, Translate):
        out: dict[str, Any] = {"translate": content.translate}
        if content.with_:
            out["with"] = _components_to_json(content.with_)
        return out
    if isinstance(content, EntityNames):
        out = {"selector": content.selector}
        if content.separator is not None:
            out["separator"] = content.separator
        return out
    if isinstance(content, Keybind):
        return {"keybind": content.keybind}
    if isinstance(content, Custom):
        raise ValueError("Custom text content cannot be serialized")
    raise TypeError(f"Not text content: {content!r}")


def _content_from_json(data: Mapping[str, Any]) -> TextContent:
    """Try each kind of content in turn, as an untagged union."""
    if isinstance(data.get("text"), str):
        return Text(data["text"])
    if isinstance(data.get("translate"), str):
        try:
            args = _components_from_json(data["with"]) if "with" in data else ()
        except ValueError:
            pass
        else:
            return Translate(data["translate"], args)
    if isinstance(data.get("selector"), str):
        separator = data.get("separator")
        if separator is None or isinstance(separator, str):
            return EntityNames(data["selector"], separator)
    if isinstance(data.get("keybind"), str):
        return Keybind(data["keybind"])
    raise ValueError("data did not match any variant of text content")


@dataclass(frozen=True)
class TextComponentBase:
    """Content, style and child components, serialized as one flat object."""

    content: TextContent
    style: Style = field(default_factory=Style)
    extra: tuple[TextComponentBase, ...] = ()

    def to_json(self) -> dict[str, Any]:
        out = _content_to_json(self.content)
        out.update(self.style.to_json())
        if self.extra:
            out["extra"] = _components_to_json(self.extra)
        return out

    @classmethod
    def from_json(cls, data: Any) -> TextComponentBase:
        data = _require_mapping(data, "Text component")
        return cls(
            content=_content_from_json(data),
            style=Style.from_json(data),
            extra=_components_from_json(data["extra"]) if "extra" in data else (),
        )


@dataclass(frozen=True)
class TextComponent:
    """A complete piece of chat text."""

    base: TextComponentBase

    @classmethod
    def text(cls, plain: str) -> TextComponent:
        return cls(TextComponentBase(Text(plain)))

    @classmethod
    def translate(cls, key: str, with_: Iterable[TextComponent] = ()) -> TextComponent:
        return cls(TextComponentBase(Translate(key, tuple(c.base for c in with_))))

    def to_json(self) -> dict[str, Any]:
        return self.base.to_json()

    @classmethod
    def from_json(cls, data: Any) -> TextComponent:
        return cls(TextComponentBase.from_json(data))