"""
Event Topics for ywm

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Command events (imperative - tell components to do something)
# These are published by the command line front end

CMD_FOCUS_NEXT = "cmd.focus_next"
"""Command: Focus the next visible window on the current space."""

CMD_FOCUS_PREV = "cmd.focus_prev"
"""Command: Focus the previous visible window on the current space."""

CMD_FOCUS_NEXT_DISPLAY = "cmd.focus_next_display"
"""Command: Focus the next display, wrapping around."""

CMD_TOGGLE_SPACE_LAYOUT = "cmd.toggle_space_layout"
"""Command: Toggle the current space between bsp and stack."""

# Notifications (published after yabai accepted an action)

WINDOW_FOCUSED = "window.focused"
"""Published when a window was focused. Params: window_id"""

DISPLAY_FOCUSED = "display.focused"
"""Published when a display was focused. Params: display_id"""

LAYOUT_CHANGED = "layout.changed"
"""Published when the space layout was changed. Params: layout (e.g. "stack")"""
