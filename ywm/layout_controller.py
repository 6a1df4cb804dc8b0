"""
Layout Controller

Handles space layout commands.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .objects import SpaceType
from .selector import toggle_layout

if TYPE_CHECKING:
    from .connection import YabaiConnection


class LayoutController:
    """Changes the layout of the current space.

    Responsibilities:
    - CMD_TOGGLE_SPACE_LAYOUT: Switch between bsp and stack
    """

    def __init__(self, bus, connection: "YabaiConnection"):
        """Initialize layout controller.

        Args:
            bus: Event bus instance (Pypubsub)
            connection: Connection used to query and command yabai
        """
        self.bus = bus
        self.connection = connection
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to layout command events."""
        from . import topics

        self.bus.subscribe(self._on_toggle_space_layout, topics.CMD_TOGGLE_SPACE_LAYOUT)

    def toggle_space_layout(self) -> Optional[SpaceType]:
        """Toggle the current space between bsp and stack.

        Returns:
            The new layout, or None for a floating space
        """
        from . import topics

        space = self.connection.query_space()
        new_layout = toggle_layout(space.type)
        if new_layout is None:
            return None

        self.connection.set_space_layout(new_layout)
        self.bus.sendMessage(topics.LAYOUT_CHANGED, layout=new_layout.value)
        return new_layout

    def _on_toggle_space_layout(self):
        """Handle CMD_TOGGLE_SPACE_LAYOUT command."""
        self.toggle_space_layout()
