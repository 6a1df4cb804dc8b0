"""
yabai State Objects

Read-only Python records for the windows, displays and spaces that
yabai reports through `yabai -m query`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class YabaiError(Exception):
    """Base class for failures talking to yabai."""


class ReportError(YabaiError):
    """A yabai report could not be decoded."""


class SpaceType(Enum):
    """Layout of a space."""

    BSP = "bsp"
    STACK = "stack"
    FLOAT = "float"


def _require(record: Dict[str, Any], key: str, kind, what: str):
    """Fetch a required field and check its type."""
    if key not in record:
        raise ReportError(f"{what} report is missing field '{key}'")
    value = record[key]
    # bool is a subclass of int
    wrong_bool = kind is not bool and isinstance(value, bool)
    if wrong_bool or not isinstance(value, kind):
        raise ReportError(f"{what} field '{key}' has unexpected value {value!r}")
    return value


def _optional(record: Dict[str, Any], key: str, default):
    return record.get(key, default)


def _expect_object(record: Any, what: str) -> Dict[str, Any]:
    if not isinstance(record, dict):
        raise ReportError(f"expected a {what} object, got {type(record).__name__}")
    return record


@dataclass(frozen=True)
class Frame:
    """On-screen rectangle of a window or display."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_json(cls, record: Any) -> "Frame":
        record = _expect_object(record, "frame")
        number = (int, float)
        return cls(
            x=float(_require(record, "x", number, "frame")),
            y=float(_require(record, "y", number, "frame")),
            w=float(_require(record, "w", number, "frame")),
            h=float(_require(record, "h", number, "frame")),
        )


@dataclass(frozen=True)
class Window:
    """A window on the current space."""

    id: int
    display: int
    frame: Frame
    is_visible: bool
    has_focus: bool

    # Descriptive fields, not used when choosing focus
    pid: int = 0
    app: str = ""
    title: str = ""
    space: int = 0
    role: str = ""
    subrole: str = ""
    stack_index: int = 0
    is_minimized: bool = False
    is_hidden: bool = False
    is_floating: bool = False
    is_sticky: bool = False

    @property
    def sort_key(self) -> Tuple[int, int, int, int]:
        """Traversal order: display, then top to bottom, left to right."""
        return (self.display, int(self.frame.y), int(self.frame.x), self.id)

    @classmethod
    def from_json(cls, record: Any) -> "Window":
        record = _expect_object(record, "window")
        return cls(
            id=_require(record, "id", int, "window"),
            display=_require(record, "display", int, "window"),
            frame=Frame.from_json(_require(record, "frame", dict, "window")),
            is_visible=_require(record, "is-visible", bool, "window"),
            has_focus=_require(record, "has-focus", bool, "window"),
            pid=_optional(record, "pid", 0),
            app=_optional(record, "app", ""),
            title=_optional(record, "title", ""),
            space=_optional(record, "space", 0),
            role=_optional(record, "role", ""),
            subrole=_optional(record, "subrole", ""),
            stack_index=_optional(record, "stack-index", 0),
            is_minimized=_optional(record, "is-minimized", False),
            is_hidden=_optional(record, "is-hidden", False),
            is_floating=_optional(record, "is-floating", False),
            is_sticky=_optional(record, "is-sticky", False),
        )

    def __str__(self):
        return f"Window({self.id}, app={self.app!r}, display={self.display})"


@dataclass(frozen=True)
class Display:
    """A physical or virtual screen."""

    id: int
    has_focus: bool
    uuid: str = ""
    index: int = 0
    frame: Optional[Frame] = None
    spaces: Tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, record: Any) -> "Display":
        record = _expect_object(record, "display")
        frame = record.get("frame")
        return cls(
            id=_require(record, "id", int, "display"),
            has_focus=_require(record, "has-focus", bool, "display"),
            uuid=_optional(record, "uuid", ""),
            index=_optional(record, "index", 0),
            frame=Frame.from_json(frame) if frame is not None else None,
            spaces=tuple(_optional(record, "spaces", ())),
        )


@dataclass(frozen=True)
class Space:
    """A virtual desktop."""

    id: int
    type: SpaceType
    has_focus: bool
    uuid: str = ""
    index: int = 0
    label: str = ""
    display: int = 0
    windows: Tuple[int, ...] = field(default_factory=tuple)
    first_window: int = 0
    last_window: int = 0
    is_visible: bool = False
    is_native_fullscreen: bool = False

    @classmethod
    def from_json(cls, record: Any) -> "Space":
        record = _expect_object(record, "space")
        raw_type = _require(record, "type", str, "space")
        try:
            space_type = SpaceType(raw_type)
        except ValueError:
            raise ReportError(f"space has unknown layout type {raw_type!r}") from None
        return cls(
            id=_require(record, "id", int, "space"),
            type=space_type,
            has_focus=_require(record, "has-focus", bool, "space"),
            uuid=_optional(record, "uuid", ""),
            index=_optional(record, "index", 0),
            label=_optional(record, "label", ""),
            display=_optional(record, "display", 0),
            windows=tuple(_optional(record, "windows", ())),
            first_window=_optional(record, "first-window", 0),
            last_window=_optional(record, "last-window", 0),
            is_visible=_optional(record, "is-visible", False),
            is_native_fullscreen=_optional(record, "is-native-fullscreen", False),
        )


def windows_from_json(report: Any) -> List[Window]:
    """Decode the report of `query --windows`."""
    if not isinstance(report, list):
        raise ReportError(f"expected a list of windows, got {type(report).__name__}")
    return [Window.from_json(record) for record in report]


def displays_from_json(report: Any) -> List[Display]:
    """Decode the report of `query --displays`."""
    if not isinstance(report, list):
        raise ReportError(f"expected a list of displays, got {type(report).__name__}")
    return [Display.from_json(record) for record in report]
