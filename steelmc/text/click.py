"""Actions run when a player clicks a piece of text."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class OpenUrl:
    """Opens a URL."""

    url: str


@dataclass(frozen=True)
class OpenFile:
    """Opens a file."""

    path: str


@dataclass(frozen=True)
class RunCommand:
    """Runs a command; in signs only on the root component."""

    command: str


@dataclass(frozen=True)
class SuggestCommand:
    """Replaces the contents of the chat box with the text."""

    command: str


@dataclass(frozen=True)
class ChangePage:
    """Changes the page of a written book; pages start at 1."""

    page: int

    def __post_init__(self) -> None:
        if isinstance(self.page, bool) or not isinstance(self.page, int):
            raise ValueError(f"page must be an integer, got {self.page!r}")
        if not 0 <= self.page <= _U32_MAX:
            raise ValueError(f"page out of range: {self.page}")


@dataclass(frozen=True)
class CopyToClipboard:
    """Copies the given text to the system clipboard."""

    value: str


ClickEvent = Union[OpenUrl, OpenFile, RunCommand, SuggestCommand, ChangePage, CopyToClipboard]

_ACTIONS: dict[type, tuple[str, str]] = {
    OpenUrl: ("open_url", "url"),
    OpenFile: ("open_file", "path"),
    RunCommand: ("run_command", "command"),
    SuggestCommand: ("suggest_command", "command"),
    ChangePage: ("change_page", "page"),
    CopyToClipboard: ("copy_to_clipboard", "value"),
}
_BY_ACTION = {action: (cls, field) for cls, (action, field) in _ACTIONS.items()}


def click_event_to_json(event: ClickEvent) -> dict[str, Any]:
    """Serialize as an object tagged by ``action``."""
    try:
        action, field = _ACTIONS[type(event)]
    except KeyError:
        raise TypeError(f"Not a click event: {event!r}") from None
    return {"action": action, field: getattr(event, field)}


def click_event_from_json(data: Any) -> ClickEvent:
    """Read an object tagged by ``action``; raises ValueError if it is malformed."""
    if not isinstance(data, Mapping):
        raise ValueError("Click event must be an object")
    action = data.get("action")
    if action not in _BY_ACTION:
        raise ValueError(f"Unknown click action: {action!r}")
    cls, field = _BY_ACTION[action]
    if field not in data:
        raise ValueError(f"missing field {field!r}")
    value = data[field]
    if cls is not ChangePage and not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return cls(value)