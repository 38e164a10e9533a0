"""Vision debugging helpers: draw candidate boxes onto frames."""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path

import cv2  # type: ignore
import numpy as np

from .models import Candidate, CandidateKind, Frame

# BGR
COLORS = {
    CandidateKind.TEXT: (0, 255, 0),
    CandidateKind.BUTTON: (0, 0, 255),
}


def render_overlay(frame: Frame, candidates: Sequence[Candidate]) -> np.ndarray:
    """Return a copy of the frame with every candidate outlined and labelled."""
    img = frame.image.copy()
    if img.ndim == 2:
        img = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)

    font = cv2.FONT_HERSHEY_SIMPLEX
    font_scale = 0.5
    for el in candidates:
        color = COLORS[el.kind]
        b = el.bounds
        cv2.rectangle(img, (b.x, b.y), (b.right, b.bottom), color, thickness=2)

        label = f"{el.text} ({el.kind.value})"
        (text_w, text_h), _ = cv2.getTextSize(label, font, font_scale, 1)

        # Background rectangle (white) behind text for legibility
        text_bg_tl = (b.x, max(0, b.y - text_h - 4))
        text_bg_br = (b.x + text_w + 4, max(0, b.y))
        cv2.rectangle(img, text_bg_tl, text_bg_br, (255, 255, 255), thickness=cv2.FILLED)

        cv2.putText(
            img,
            label,
            (b.x + 2, max(10, b.y - 2)),
            font,
            font_scale,
            color,
            thickness=1,
            lineType=cv2.LINE_AA,
        )
    return img


def save_debug_overlay(frame: Frame, candidates: Sequence[Candidate], debug_dir: str | Path) -> Path:
    """Render the overlay and write it as a PNG under *debug_dir*."""
    directory = Path(debug_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"detections_{time.strftime('%Y%m%d_%H%M%S')}.png"
    cv2.imwrite(str(path), render_overlay(frame, candidates))
    return path


def show_overlay(frame: Frame, candidates: Sequence[Candidate]) -> None:
    """Display the overlay in an OpenCV window until a key is pressed."""
    cv2.imshow("Detected Elements", render_overlay(frame, candidates))
    cv2.waitKey(0)
    cv2.destroyAllWindows()
