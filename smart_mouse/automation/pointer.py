"""Pointer injection for desktop automation."""

from __future__ import annotations

import time
from enum import Enum
from typing import Any, Optional, Protocol

from ..core.config import Config, config
from ..core.exceptions import PointerUnavailableError
from ..core.logger import log
from ..vision.models import Point


class MouseButton(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class PointerInjector(Protocol):
    """Moves the cursor and, when *button* is given, clicks it once."""

    def move_and_click(self, point: Point, button: Optional[MouseButton] = None) -> None: ...


class PyAutoGUIPointer:
    """Inject pointer events through ``pyautogui``.

    Button presses are split into down/up with a short hold in between, and
    the cursor is given time to settle after moving; some window systems drop
    events that arrive faster than that.
    """

    def __init__(self, settings: Config | None = None, backend: Any = None) -> None:
        """Initialize the pointer.

        Args:
            settings: Timing configuration; defaults to the global config.
            backend: Object with the ``pyautogui`` mouse API. Imported lazily
                when omitted, because ``pyautogui`` connects to the display at
                import time.
        """
        settings = settings or config
        self.move_settle_delay = settings.move_settle_delay
        self.button_hold_delay = settings.button_hold_delay
        self._pg = backend

    def open(self) -> None:
        """Load ``pyautogui``.

        Raises:
            PointerUnavailableError: If no display is reachable.
        """
        if self._pg is not None:
            return
        try:
            import pyautogui
        except Exception as exc:
            raise PointerUnavailableError(
                f"PyAutoGUI unavailable. Ensure a display is accessible: {exc}"
            ) from exc
        pyautogui.FAILSAFE = False
        # Dwell times are handled here, not by pyautogui's global pause
        pyautogui.PAUSE = 0
        self._pg = pyautogui
        log.info("Pointer injector ready (pyautogui)")

    def move_and_click(self, point: Point, button: Optional[MouseButton] = None) -> None:
        """Move to *point*; press and release *button* there if given."""
        self.open()
        self._pg.moveTo(point.x, point.y)
        if button is None:
            return

        time.sleep(self.move_settle_delay)
        self._pg.mouseDown(button=button.value)
        time.sleep(self.button_hold_delay)
        self._pg.mouseUp(button=button.value)
