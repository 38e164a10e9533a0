"""Automation controller: capture, analyze, match and act."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..core.config import Config, config
from ..core.logger import log
from ..vision.debug import save_debug_overlay, show_overlay
from ..vision.engine import VisionEngine
from ..vision.matcher import find_best_match
from ..vision.models import Candidate, Frame, Point
from ..vision.screencap import ScreenCapture
from .pointer import MouseButton, PointerInjector


class ControllerState(str, Enum):
    IDLE = "idle"
    CAPTURING = "capturing"
    ANALYZING = "analyzing"
    MATCHED = "matched"
    UNMATCHED = "unmatched"


@dataclass(slots=True)
class ActionResult:
    """Outcome of a pointer operation."""

    action: str
    query: str
    success: bool
    candidate: Optional[Candidate] = None
    point: Optional[Point] = None

    @property
    def message(self) -> str:
        if not self.success or self.candidate is None or self.point is None:
            return f"Could not find element matching: {self.query}"
        return f"{self.action}: {self.candidate.text!r} at ({self.point.x}, {self.point.y})"


class SmartMouse:
    """Drive the pointer by finding on-screen elements that match a query.

    Every public operation starts from a fresh capture; nothing is cached
    between calls. The last frame and candidate set are kept only so that
    :meth:`show` can render them.
    """

    def __init__(
        self,
        capture: ScreenCapture,
        vision: VisionEngine,
        pointer: PointerInjector,
        settings: Config | None = None,
    ) -> None:
        settings = settings or config
        self.capture = capture
        self.vision = vision
        self.pointer = pointer
        self.double_click_interval = settings.double_click_interval
        self.debug_dir = settings.vision_debug_dir
        self.show_window = settings.show_window

        self.state = ControllerState.IDLE
        self.last_frame: Optional[Frame] = None
        self.last_candidates: list[Candidate] = []

    def _set_state(self, state: ControllerState) -> None:
        log.debug(f"State {self.state.value} -> {state.value}")
        self.state = state

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------
    def _analyze(self) -> Frame:
        """Capture and synthesize; leaves the state at ANALYZING on success."""
        start = time.perf_counter()
        self._set_state(ControllerState.CAPTURING)
        frame = self.capture.capture_frame()

        self._set_state(ControllerState.ANALYZING)
        candidates = self.vision.synthesize(frame)

        self.last_frame = frame
        self.last_candidates = candidates
        log.log_performance("capture+analyze", (time.perf_counter() - start) * 1000.0)
        log.info(f"Detected {len(candidates)} UI elements")
        return frame

    def refresh(self) -> int:
        """Capture the screen, rebuild the candidate set and return its size."""
        try:
            self._analyze()
        finally:
            self._set_state(ControllerState.IDLE)
        return len(self.last_candidates)

    def _locate(self, query: str) -> Optional[Candidate]:
        self._analyze()
        match = find_best_match(self.last_candidates, query)
        self._set_state(ControllerState.MATCHED if match else ControllerState.UNMATCHED)
        if match:
            center = match.center()
            log.log_vision_detection(match.kind.value, match.confidence, (center.x, center.y))
        return match

    def _act(self, action: str, query: str, button: Optional[MouseButton], clicks: int) -> ActionResult:
        try:
            match = self._locate(query)
            if match is None:
                result = ActionResult(action=action, query=query, success=False)
                log.warning(result.message)
                return result

            point = match.center()
            log.log_automation_step(action, {"text": match.text, "point": tuple(point)})
            for i in range(clicks):
                if i:
                    time.sleep(self.double_click_interval)
                self.pointer.move_and_click(point, button)
            result = ActionResult(action=action, query=query, success=True, candidate=match, point=point)
            log.success(result.message)
            return result
        finally:
            self._set_state(ControllerState.IDLE)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def click_on(self, query: str, right_button: bool = False) -> ActionResult:
        """Click the best match for *query* with the left or right button."""
        button = MouseButton.RIGHT if right_button else MouseButton.LEFT
        return self._act("Right-clicking on" if right_button else "Clicking on", query, button, clicks=1)

    def double_click_on(self, query: str) -> ActionResult:
        """Double-click the best match for *query*."""
        return self._act("Double-clicking on", query, MouseButton.LEFT, clicks=2)

    def move_to(self, query: str) -> ActionResult:
        """Move the pointer to the best match for *query* without clicking."""
        return self._act("Moving to", query, None, clicks=1)

    def show(self) -> Path:
        """Refresh, then render the detections to the debug directory."""
        try:
            frame = self._analyze()
        finally:
            self._set_state(ControllerState.IDLE)
        candidates = self.last_candidates

        path = save_debug_overlay(frame, candidates, self.debug_dir)
        log.info(f"Detection overlay saved to {path}")
        if self.show_window:
            show_overlay(frame, candidates)
        return path
