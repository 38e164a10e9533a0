"""Desktop screen capture.

Frames are grabbed from the primary monitor with ``mss`` and converted from
BGRA to the BGR layout the rest of the vision pipeline expects.
"""

from __future__ import annotations

from typing import Any, Protocol

import mss
import numpy as np
from mss.exception import ScreenShotError

from ..core.exceptions import CaptureUnavailableError
from ..core.logger import log
from .models import Frame


class ScreenCapture(Protocol):
    """Display capture service."""

    def capture_frame(self) -> Frame: ...


class MSSScreenCapture:
    """Grab the primary monitor through ``mss``."""

    def __init__(self, monitor: int = 1) -> None:
        self.monitor_index = monitor
        self._sct: Any = None

    def open(self) -> None:
        """Connect to the display.

        Raises:
            CaptureUnavailableError: If no display can be opened.

        """
        try:
            self._sct = mss.mss()
            monitor = self._sct.monitors[self.monitor_index]
        except (ScreenShotError, IndexError) as exc:
            raise CaptureUnavailableError(f"Cannot open display: {exc}") from exc
        log.info(f"Screen capture ready: {monitor['width']}x{monitor['height']}")

    def capture_frame(self) -> Frame:
        """Capture the monitor as an immutable BGR Frame."""
        if self._sct is None:
            self.open()
        try:
            shot = self._sct.grab(self._sct.monitors[self.monitor_index])
        except ScreenShotError as exc:
            raise CaptureUnavailableError(f"Screen grab failed: {exc}") from exc
        image = np.ascontiguousarray(np.array(shot)[:, :, :3])
        return Frame(image)

    def close(self) -> None:
        if self._sct is not None:
            self._sct.close()
            self._sct = None
