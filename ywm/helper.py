"""
yabai Helper Implementation

Wires the focus and layout components to the event bus and exposes
them as command line subcommands.
"""

from __future__ import annotations
import argparse
import os
import sys
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from pubsub import pub

from . import topics
from .connection import YabaiConnection, YabaiError
from .focus_manager import FocusManager
from .layout_controller import LayoutController


# Subcommand name -> command topic
COMMANDS: Dict[str, str] = {
    "focus-next": topics.CMD_FOCUS_NEXT,
    "focus-prev": topics.CMD_FOCUS_PREV,
    "toggle-space-layout": topics.CMD_TOGGLE_SPACE_LAYOUT,
    "focus-next-display": topics.CMD_FOCUS_NEXT_DISPLAY,
}

HELP = {
    "focus-next": "Focus the next window",
    "focus-prev": "Focus the previous window",
    "toggle-space-layout": "Toggle on the current space between BSP and Stack.",
    "focus-next-display": "Focus the next display, rotating through",
}


@dataclass
class HelperConfig:
    """Helper configuration."""

    # yabai executable, looked up on PATH unless a path is given
    yabai: str = "yabai"

    # Print bus events and yabai invocations to stderr
    debug: bool = False

    @classmethod
    def from_env(cls) -> "HelperConfig":
        """Build a configuration from YWM_* environment variables."""
        return cls(
            yabai=os.getenv("YWM_YABAI") or "yabai",
            debug=bool(os.getenv("YWM_DEBUG")),
        )


class YabaiHelper:
    """
    yabai Helper

    Runs one query-decide-act cycle per command.
    """

    def __init__(
        self,
        config: Optional[HelperConfig] = None,
        connection: Optional[YabaiConnection] = None,
    ):
        """Initialize the helper.

        Architecture:
        1. Use the Pypubsub event bus
        2. Create components - they self-subscribe to command events
        3. Dispatch publishes one command
        """
        self.config = config or HelperConfig()
        self.connection = connection or YabaiConnection(
            self.config.yabai, debug=self.config.debug
        )

        if self.config.debug:
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self.focus_manager = FocusManager(bus=pub, connection=self.connection)
        self.layout_controller = LayoutController(bus=pub, connection=self.connection)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}", file=sys.stderr)

    def dispatch(self, command: str):
        """Run a subcommand by name.

        Raises:
            KeyError: Unknown command name
            YabaiError: yabai failed or returned an unreadable report
        """
        pub.sendMessage(COMMANDS[command])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ywm", description="Helper tool to augment yabai."
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    for name in COMMANDS:
        subparsers.add_parser(name, help=HELP[name], description=HELP[name])
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    helper = YabaiHelper(HelperConfig.from_env())
    try:
        helper.dispatch(args.command)
    except YabaiError as e:
        print(f"ywm: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
