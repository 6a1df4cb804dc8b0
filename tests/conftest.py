"""
Shared pytest fixtures for ywm tests.
"""

import json
import subprocess

import pytest
from pubsub import pub

from ywm.objects import Frame, Window


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a running yabai")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop bus subscriptions made by a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def make_window():
    """Factory fixture for creating Window records."""

    def factory(id, display=1, x=0, y=0, visible=True, focus=False):
        return Window(
            id=id,
            display=display,
            frame=Frame(x, y, 800, 600),
            is_visible=visible,
            has_focus=focus,
        )

    return factory


def window_report(id, display=1, x=0.0, y=0.0, visible=True, focus=False, app="Terminal"):
    """A window entry as printed by `yabai -m query --windows`."""
    return {
        "id": id,
        "pid": 1000 + id,
        "app": app,
        "title": f"window {id}",
        "scratchpad": "",
        "frame": {"x": x, "y": y, "w": 800.0, "h": 600.0},
        "role": "AXWindow",
        "subrole": "AXStandardWindow",
        "root-window": True,
        "display": display,
        "space": 1,
        "level": 0,
        "sub-level": 0,
        "layer": "normal",
        "sub-layer": "normal",
        "opacity": 1.0,
        "split-type": "none",
        "split-child": "none",
        "stack-index": 0,
        "can-move": True,
        "can-resize": True,
        "has-focus": focus,
        "has-shadow": True,
        "has-parent-zoom": False,
        "has-fullscreen-zoom": False,
        "has-ax-reference": True,
        "is-native-fullscreen": False,
        "is-visible": visible,
        "is-minimized": False,
        "is-hidden": False,
        "is-floating": False,
        "is-sticky": False,
        "is-grabbed": False,
    }


def display_report(id, focus=False):
    """A display entry as printed by `yabai -m query --displays`."""
    return {
        "id": id,
        "uuid": f"UUID-{id}",
        "index": id,
        "label": "",
        "frame": {"x": 0.0, "y": 0.0, "w": 1920.0, "h": 1080.0},
        "spaces": [id],
        "has-focus": focus,
    }


def space_report(type="bsp", id=1):
    """A space entry as printed by `yabai -m query --spaces --space`."""
    return {
        "id": id,
        "uuid": "",
        "index": 1,
        "label": "",
        "type": type,
        "display": 1,
        "windows": [101, 102],
        "first-window": 101,
        "last-window": 102,
        "has-focus": True,
        "is-visible": True,
        "is-native-fullscreen": False,
    }


class FakeYabai:
    """Stands in for subprocess.run, answering yabai messages from a script."""

    def __init__(self):
        self.commands = []
        self._responses = {}

    def respond(self, *args, stdout="", returncode=0, stderr=""):
        self._responses[args] = (stdout, returncode, stderr)

    def report(self, *args, data):
        self.respond(*args, stdout=json.dumps(data))

    def missing(self):
        """Make every invocation fail as if yabai was not installed."""
        self._responses = None

    @property
    def calls(self):
        """Messages sent, without the binary and `-m`."""
        return [tuple(command[2:]) for command in self.commands]

    @property
    def actions(self):
        return [call for call in self.calls if call[0] != "query"]

    def __call__(self, command, **kwargs):
        self.commands.append(list(command))
        if self._responses is None:
            raise FileNotFoundError(2, "No such file or directory", command[0])
        stdout, returncode, stderr = self._responses.get(tuple(command[2:]), ("", 0, ""))
        return subprocess.CompletedProcess(
            command, returncode, stdout.encode("utf-8"), stderr.encode("utf-8")
        )


@pytest.fixture
def fake_yabai(monkeypatch):
    """Replace subprocess.run with a scripted yabai."""
    fake = FakeYabai()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def reports():
    """Builders for yabai report entries."""

    class Reports:
        window = staticmethod(window_report)
        display = staticmethod(display_report)
        space = staticmethod(space_report)

    return Reports
