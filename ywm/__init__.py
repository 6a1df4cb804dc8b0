"""
ywm - yabai helper

Small commands that augment the yabai window manager on macOS.

This package provides:
- Records for the windows, displays and spaces yabai reports
- Selection of the next window, display or layout
- A connection that runs `yabai -m` messages
- Command line subcommands wired through an event bus

Example usage:
    from ywm import YabaiHelper, HelperConfig

    helper = YabaiHelper(HelperConfig(yabai="/opt/homebrew/bin/yabai"))
    helper.dispatch("focus-next")

Or run directly:
    python -m ywm focus-next
"""

__version__ = "0.1.0"

from .objects import (
    Frame,
    Window,
    Display,
    Space,
    SpaceType,
)

from .selector import (
    Direction,
    sort_windows,
    next_window,
    next_display,
    toggle_layout,
)

from .connection import (
    YabaiConnection,
    YabaiError,
    CommandError,
    ReportError,
)

from .focus_manager import FocusManager
from .layout_controller import LayoutController

from .helper import (
    YabaiHelper,
    HelperConfig,
    main,
)

from . import topics

__all__ = [
    # Version
    "__version__",
    # Objects
    "Frame",
    "Window",
    "Display",
    "Space",
    "SpaceType",
    # Selection
    "Direction",
    "sort_windows",
    "next_window",
    "next_display",
    "toggle_layout",
    # Connection
    "YabaiConnection",
    "YabaiError",
    "CommandError",
    "ReportError",
    # Components
    "FocusManager",
    "LayoutController",
    # Helper
    "YabaiHelper",
    "HelperConfig",
    "main",
    # Event topics
    "topics",
]
