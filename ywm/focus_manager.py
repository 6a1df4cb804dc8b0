"""
Focus Manager

Handles window and display focus commands.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .selector import Direction, next_display, next_window

if TYPE_CHECKING:
    from .connection import YabaiConnection


class FocusManager:
    """Moves focus between windows and displays.

    This component subscribes to focus command events. For each command it
    queries yabai once, picks the target and asks yabai to focus it. It
    publishes WINDOW_FOCUSED and DISPLAY_FOCUSED after a focus change was
    issued.

    Responsibilities:
    - CMD_FOCUS_NEXT: Focus next window on the current space
    - CMD_FOCUS_PREV: Focus previous window on the current space
    - CMD_FOCUS_NEXT_DISPLAY: Focus next display
    """

    def __init__(self, bus, connection: "YabaiConnection"):
        """Initialize focus manager.

        Args:
            bus: Event bus instance (Pypubsub)
            connection: Connection used to query and command yabai
        """
        self.bus = bus
        self.connection = connection
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to focus command events."""
        from . import topics

        self.bus.subscribe(self._on_focus_next, topics.CMD_FOCUS_NEXT)
        self.bus.subscribe(self._on_focus_prev, topics.CMD_FOCUS_PREV)
        self.bus.subscribe(self._on_focus_next_display, topics.CMD_FOCUS_NEXT_DISPLAY)

    def focus_window_after(self, direction: Direction) -> Optional[int]:
        """Focus the window following the focused one.

        Args:
            direction: Traversal direction

        Returns:
            The focused window id, or None when no window is visible
        """
        from . import topics

        windows = self.connection.query_windows()
        window_id = next_window(windows, direction)
        if window_id is None:
            return None

        self.connection.focus_window(window_id)
        self.bus.sendMessage(topics.WINDOW_FOCUSED, window_id=window_id)
        return window_id

    def focus_next_display(self) -> Optional[int]:
        """Focus the display following the focused one.

        Returns:
            The focused display id, or None when yabai reports no displays
        """
        from . import topics

        displays = self.connection.query_displays()
        display_id = next_display(displays)
        if display_id is None:
            return None

        self.connection.focus_display(display_id)
        self.bus.sendMessage(topics.DISPLAY_FOCUSED, display_id=display_id)
        return display_id

    def _on_focus_next(self):
        """Handle CMD_FOCUS_NEXT command."""
        self.focus_window_after(Direction.FORWARD)

    def _on_focus_prev(self):
        """Handle CMD_FOCUS_PREV command."""
        self.focus_window_after(Direction.BACKWARD)

    def _on_focus_next_display(self):
        """Handle CMD_FOCUS_NEXT_DISPLAY command."""
        self.focus_next_display()
