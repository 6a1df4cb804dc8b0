"""
Focus and Layout Selection

Pure functions that pick the next window, display or layout from a
snapshot of yabai state. Nothing here talks to yabai.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .objects import Display, SpaceType, Window


class Direction(Enum):
    """Traversal direction for window focus."""

    FORWARD = "forward"
    BACKWARD = "backward"


LAYOUT_TOGGLE = {
    SpaceType.BSP: SpaceType.STACK,
    SpaceType.STACK: SpaceType.BSP,
    SpaceType.FLOAT: None,
}


def sort_windows(windows: Iterable[Window]) -> List[Window]:
    """Visible windows in traversal order."""
    return sorted((w for w in windows if w.is_visible), key=lambda w: w.sort_key)


def _after_focused(items: Sequence, has_focus) -> Optional[object]:
    """Item following the focused one, wrapping around.

    When nothing is focused the first item counts as focused.
    """
    if not items:
        return None
    idx = next((i for i, item in enumerate(items) if has_focus(item)), 0)
    return items[(idx + 1) % len(items)]


def next_window(
    windows: Iterable[Window], direction: Direction = Direction.FORWARD
) -> Optional[int]:
    """Pick the window to focus next.

    Args:
        windows: Windows of the current space, in any order
        direction: FORWARD, or BACKWARD to walk the reversed order

    Returns:
        Window id to focus, or None if no window is visible
    """
    ordered = sort_windows(windows)
    if direction is Direction.BACKWARD:
        ordered.reverse()
    target = _after_focused(ordered, lambda w: w.has_focus)
    return target.id if target is not None else None


def next_display(displays: Sequence[Display]) -> Optional[int]:
    """Pick the display to focus next, in the order yabai reports them."""
    target = _after_focused(list(displays), lambda d: d.has_focus)
    return target.id if target is not None else None


def toggle_layout(space_type: SpaceType) -> Optional[SpaceType]:
    """Switch between bsp and stack. Floating spaces are left alone."""
    return LAYOUT_TOGGLE[space_type]
