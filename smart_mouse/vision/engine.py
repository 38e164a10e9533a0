"""Vision engine: merge geometric and textual detections into candidates."""

from __future__ import annotations

import concurrent.futures

from loguru import logger

from ..core.config import Config, config
from ..core.exceptions import OCRError
from .clickable_detector import ClickableDetector
from .models import Candidate, CandidateKind, Frame, Rectangle
from .ocr import OCREngine
from .text_extractor import TextExtractor


class VisionEngine:
    """Analyze frames and return the unified candidate set."""

    def __init__(
        self,
        ocr: OCREngine,
        detector: ClickableDetector | None = None,
        settings: Config | None = None,
    ) -> None:
        """Initialize VisionEngine.

        Parameters
        ----------
        ocr : OCREngine
            Engine used for both the word pass and the per-button crop pass.
        detector : ClickableDetector, optional
            Region detector; an OpenCV-backed one is built when omitted.
        settings : Config, optional
            Defaults to the global configuration.

        """
        settings = settings or config
        self.ocr = ocr
        self.text_extractor = TextExtractor(ocr)
        self.detector = detector or ClickableDetector(settings=settings)
        self.button_confidence = float(settings.button_confidence)
        self.parallel = settings.parallel_detection

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def synthesize(self, frame: Frame) -> list[Candidate]:
        """Return TEXT candidates followed by BUTTON candidates for *frame*."""
        if self.parallel:
            # Both producers only read the frame; join before combining.
            with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
                text_future = executor.submit(self.text_extractor.extract_words, frame)
                rect_future = executor.submit(self.detector.detect, frame)
                text_candidates = text_future.result()
                button_rects = rect_future.result()
        else:
            text_candidates = self.text_extractor.extract_words(frame)
            button_rects = self.detector.detect(frame)

        button_candidates = [
            self._label_button(frame, rect) for rect in button_rects if not rect.is_empty
        ]

        candidates = text_candidates + button_candidates
        logger.debug(
            f"VisionEngine synthesized {len(candidates)} candidates "
            f"({len(text_candidates)} text, {len(button_candidates)} button)"
        )
        return candidates

    def _label_button(self, frame: Frame, rect: Rectangle) -> Candidate:
        """OCR the button's crop once and wrap it as a BUTTON candidate."""
        try:
            text = self.ocr.recognize_text(frame.crop(rect))
        except OCRError as exc:
            logger.debug(f"Crop OCR failed for {rect.as_tuple()}: {exc}")
            text = ""
        return Candidate(
            bounds=rect,
            text=text or "",
            kind=CandidateKind.BUTTON,
            confidence=self.button_confidence,
        )
