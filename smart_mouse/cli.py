"""Command line interface: one-shot commands and the interactive loop."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, TextIO

from .automation.controller import ActionResult, SmartMouse
from .automation.pointer import PyAutoGUIPointer
from .core.config import Config, config
from .core.exceptions import SmartMouseError, StartupError
from .core.logger import log
from .vision.engine import VisionEngine
from .vision.ocr import TesseractEngine
from .vision.screencap import MSSScreenCapture

# Commands that take the rest of the line as their query
QUERY_COMMANDS: dict[str, Callable[[SmartMouse, str], ActionResult]] = {
    "click": lambda mouse, query: mouse.click_on(query),
    "right": lambda mouse, query: mouse.click_on(query, right_button=True),
    "double": lambda mouse, query: mouse.double_click_on(query),
    "move": lambda mouse, query: mouse.move_to(query),
}

BANNER = """
=== Smart Mouse Control ===
Commands:
  click <text>       - Click on element containing text
  right <text>       - Right-click on element
  double <text>      - Double-click on element
  move <text>        - Move mouse to element
  show               - Show detected elements
  refresh            - Refresh screen analysis
  quit               - Exit
"""


def build_controller(settings: Config) -> SmartMouse:
    """Wire the real collaborators; raises StartupError when one is missing."""
    ocr = TesseractEngine(settings)
    capture = MSSScreenCapture()
    capture.open()
    return SmartMouse(
        capture=capture,
        vision=VisionEngine(ocr, settings=settings),
        pointer=PyAutoGUIPointer(settings),
        settings=settings,
    )


def run_interactive(mouse: SmartMouse, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    """Read commands until ``quit`` or end of input."""
    print(BANNER, file=stdout)
    while True:
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break

        parts = line.strip().split(maxsplit=1)
        if not parts:
            continue
        command = parts[0].lower()
        argument = parts[1].strip() if len(parts) > 1 else ""

        if command == "quit":
            break
        try:
            _dispatch(mouse, command, argument, stdout)
        except StartupError:
            raise
        except SmartMouseError as exc:
            log.error(f"Command {command!r} failed: {exc}")
            print(f"Error: {exc}", file=stdout)


def _dispatch(mouse: SmartMouse, command: str, argument: str, stdout: TextIO) -> None:
    if command == "show":
        path = mouse.show()
        print(f"Overlay saved to {path}", file=stdout)
    elif command == "refresh":
        count = mouse.refresh()
        print(f"Detected {count} UI elements", file=stdout)
    elif command in QUERY_COMMANDS:
        if not argument:
            print(f"Usage: {command} <text>", file=stdout)
            return
        result = QUERY_COMMANDS[command](mouse, argument)
        print(result.message, file=stdout)
    else:
        print(f"Unknown command: {command}", file=stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-mouse",
        description="Find on-screen elements by their text and drive the mouse to them.",
    )
    parser.add_argument("--log-level", default=None, help="Console log level (default from SMART_MOUSE_LOG_LEVEL)")
    parser.add_argument("--debug-dir", default=None, help="Directory for detection overlays")
    parser.add_argument("--parallel", action="store_true", help="Run region and text detection concurrently")
    parser.add_argument("--show-window", action="store_true", help="Also display overlays in an OpenCV window (off by default; overlays are always saved as PNG)")

    subparsers = parser.add_subparsers(dest="command")
    for name, help_text in (
        ("click", "Click the element matching TEXT"),
        ("right", "Right-click the element matching TEXT"),
        ("double", "Double-click the element matching TEXT"),
        ("move", "Move the mouse to the element matching TEXT"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("text", nargs="+")
    subparsers.add_parser(
        "show",
        help="Save an overlay of the detected elements as a PNG in the debug directory; "
        "add --show-window to also open it in a window",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> Config:
    overrides: dict[str, object] = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.debug_dir:
        overrides["vision_debug_dir"] = args.debug_dir
    if args.parallel:
        overrides["parallel_detection"] = True
    if args.show_window:
        overrides["show_window"] = True
    return config.model_copy(update=overrides)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = _settings_from_args(args)

    try:
        settings.validate_config()
        log.configure(settings)
        mouse = build_controller(settings)

        if args.command is None:
            run_interactive(mouse)
        elif args.command == "show":
            print(f"Overlay saved to {mouse.show()}")
        else:
            result = QUERY_COMMANDS[args.command](mouse, " ".join(args.text))
            print(result.message)
    except (StartupError, ValueError) as exc:
        log.critical(f"Error: {exc}")
        return 1

    return 0
