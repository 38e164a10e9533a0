"""Clickable region detection for VisionEngine."""

from __future__ import annotations

from typing import Protocol

import cv2
import numpy as np
from loguru import logger

from ..core.config import Config, config
from .models import Frame, Rectangle


class ContourDetector(Protocol):
    """Vision primitive: bounding boxes of the outer edge contours of a frame."""

    def detect_edges_and_contours(self, frame: Frame) -> list[Rectangle]: ...


class OpenCVContourDetector:
    """Canny + dilation + external contours, backed by OpenCV."""

    def __init__(self, settings: Config | None = None) -> None:
        settings = settings or config
        self.canny_low = settings.canny_low
        self.canny_high = settings.canny_high
        self.iterations = settings.dilate_iterations
        self.kernel = np.ones((settings.dilate_kernel_size, settings.dilate_kernel_size), np.uint8)

    def detect_edges_and_contours(self, frame: Frame) -> list[Rectangle]:
        image = frame.image
        gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY) if image.ndim == 3 else image

        # Edge detection, then dilate to close gaps in control borders
        edges = cv2.Canny(gray, self.canny_low, self.canny_high)
        dilated = cv2.dilate(edges, self.kernel, iterations=self.iterations)

        # Outer contours only; holes are ignored
        contours, _ = cv2.findContours(dilated, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

        rects: list[Rectangle] = []
        for contour in contours:
            x, y, w, h = cv2.boundingRect(contour)
            rects.append(Rectangle(int(x), int(y), int(w), int(h)))
        return rects


class ClickableDetector:
    """Detect button-shaped regions from edge contours.

    A region qualifies when it is wider than tall and both sides fall strictly
    inside the configured ranges (defaults: width in (40, 400), height in
    (20, 100)). Icons, full-width banners and single text lines are rejected.
    """

    def __init__(self, primitives: ContourDetector | None = None, settings: Config | None = None) -> None:
        settings = settings or config
        self.primitives = primitives or OpenCVContourDetector(settings)
        self.min_width = settings.button_min_width
        self.max_width = settings.button_max_width
        self.min_height = settings.button_min_height
        self.max_height = settings.button_max_height

    def is_button_shaped(self, rect: Rectangle) -> bool:
        return (
            self.min_width < rect.width < self.max_width
            and self.min_height < rect.height < self.max_height
            and rect.width > rect.height
        )

    def detect(self, frame: Frame) -> list[Rectangle]:
        """Return bounding rectangles of button-like regions in *frame*.

        Parameters
        ----------
        frame : Frame
            Captured screen image; it is only read.

        Returns
        -------
        list[Rectangle]
            Qualifying regions in contour order, possibly empty.

        """
        raw = self.primitives.detect_edges_and_contours(frame)
        buttons = [rect for rect in raw if self.is_button_shaped(rect)]
        logger.debug(f"ClickableDetector kept {len(buttons)} of {len(raw)} contour boxes")
        return buttons
