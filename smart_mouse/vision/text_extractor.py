"""Text candidate extraction via the OCR engine."""

from __future__ import annotations

from loguru import logger

from ..core.exceptions import OCRError
from .models import Candidate, CandidateKind, Frame
from .ocr import OCREngine


class TextExtractor:
    """Turn word-level OCR output into TEXT candidates."""

    def __init__(self, ocr: OCREngine) -> None:
        self.ocr = ocr

    def extract_words(self, frame: Frame) -> list[Candidate]:
        """Return one TEXT candidate per recognized word.

        The engine's word stream is drained completely before returning.
        Words without text or with a zero-area box are skipped. If the word
        pass fails, no text candidates are produced for this frame.
        """
        candidates: list[Candidate] = []
        skipped = 0
        try:
            for word in self.ocr.recognize_words(frame):
                if word.text is None or word.bounds.is_empty:
                    skipped += 1
                    continue
                candidates.append(
                    Candidate(
                        bounds=word.bounds,
                        text=word.text,
                        kind=CandidateKind.TEXT,
                        confidence=min(100.0, max(0.0, float(word.confidence))),
                    )
                )
        except OCRError as exc:
            logger.warning(f"Word OCR failed, dropping {len(candidates)} partial words: {exc}")
            return []

        logger.debug(f"TextExtractor found {len(candidates)} words ({skipped} skipped)")
        return candidates
