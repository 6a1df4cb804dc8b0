"""
yabai Connection Module

Runs the yabai command-line tool and decodes its JSON reports.
"""

from __future__ import annotations
import json
import subprocess
import sys
from typing import Any, List, Optional, Sequence

from .objects import (
    Display,
    ReportError,
    Space,
    SpaceType,
    Window,
    YabaiError,
    displays_from_json,
    windows_from_json,
)

__all__ = [
    "YabaiConnection",
    "YabaiError",
    "CommandError",
    "ReportError",
]


class CommandError(YabaiError):
    """yabai could not be run or exited with an error."""

    def __init__(
        self,
        args: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
        reason: str = "",
    ):
        self.command_args = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()

        command = " ".join(self.command_args)
        if reason:
            message = f"could not run '{command}': {reason}"
        else:
            message = f"'{command}' exited with status {returncode}"
            if self.stderr:
                message += f": {self.stderr}"
        super().__init__(message)


class YabaiConnection:
    """Issues `yabai -m` messages.

    Every call starts one yabai process and waits for it to exit.
    Nothing is cached between calls.
    """

    def __init__(self, binary: str = "yabai", debug: bool = False):
        """Initialize the connection.

        Args:
            binary: Name or path of the yabai executable
            debug: Print every yabai invocation to stderr
        """
        self.binary = binary
        self.debug = debug

    def send_message(self, *args: str) -> str:
        """Run `yabai -m <args>` and return its standard output.

        Raises:
            CommandError: yabai is missing or exited non-zero
        """
        command = [self.binary, "-m", *args]
        if self.debug:
            print(f"yabai: {' '.join(command[1:])}", file=sys.stderr)

        try:
            result = subprocess.run(command, capture_output=True)
        except OSError as e:
            raise CommandError(command, reason=str(e)) from e

        stdout = result.stdout.decode("utf-8", errors="replace")
        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace")
            raise CommandError(command, result.returncode, stderr)
        return stdout

    def query(self, *args: str) -> Any:
        """Run `yabai -m query <args>` and parse the JSON report."""
        output = self.send_message("query", *args)
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise ReportError(f"yabai returned malformed JSON: {e}") from e

    # Queries

    def query_windows(self) -> List[Window]:
        """Windows on the current space."""
        return windows_from_json(self.query("--windows", "--space"))

    def query_displays(self) -> List[Display]:
        """All displays, in the order yabai reports them."""
        return displays_from_json(self.query("--displays"))

    def query_space(self) -> Space:
        """The current space."""
        return Space.from_json(self.query("--spaces", "--space"))

    # Actions

    def focus_window(self, window_id: int):
        self.send_message("window", "--focus", str(window_id))

    def focus_display(self, display_id: int):
        self.send_message("display", "--focus", str(display_id))

    def set_space_layout(self, space_type: SpaceType):
        """Change the layout of the current space."""
        self.send_message("space", "--layout", space_type.value)
