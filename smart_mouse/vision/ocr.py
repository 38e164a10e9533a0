"""OCR engine adapter (Tesseract via pytesseract)."""

from __future__ import annotations

import shutil
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Protocol

import cv2  # type: ignore
import numpy as np
import pytesseract  # type: ignore
from loguru import logger

from ..core.config import Config, config
from ..core.exceptions import OCREngineUnavailableError, OCRError
from .models import Frame, Rectangle

# Tesseract page-iterator level for individual words
WORD_LEVEL = 5


@dataclass(slots=True)
class OCRWord:
    """A single recognized word as reported by the engine."""

    text: Optional[str]
    bounds: Rectangle
    confidence: float


class OCREngine(Protocol):
    """Word-level and whole-region text recognition."""

    def recognize_words(self, frame: Frame) -> Iterator[OCRWord]: ...

    def recognize_text(self, frame: Frame) -> str: ...


class TesseractEngine:
    """Recognize text with the Tesseract binary."""

    def __init__(self, settings: Config | None = None) -> None:
        """Initialize TesseractEngine.

        Raises
        ------
        OCREngineUnavailableError
            If the Tesseract binary cannot be located or executed.

        """
        settings = settings or config
        self.lang = settings.tesseract_lang

        # If the user provided a custom tesseract cmd path, set it.
        tesseract_cmd = settings.tesseract_cmd or shutil.which("tesseract")
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

        try:
            version = pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError) as exc:
            raise OCREngineUnavailableError(f"Tesseract is not available: {exc}") from exc
        logger.info(f"TesseractEngine: using Tesseract {version} (lang={self.lang})")

    @staticmethod
    def _to_rgb(frame: Frame) -> np.ndarray:
        image = frame.image
        if image.ndim == 2:
            return image
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def recognize_words(self, frame: Frame) -> Iterator[OCRWord]:
        """Yield word-level results one at a time."""
        try:
            data = pytesseract.image_to_data(
                self._to_rgb(frame),
                lang=self.lang,
                output_type=pytesseract.Output.DICT,
            )
        except pytesseract.TesseractError as exc:
            raise OCRError(f"Word recognition failed: {exc}") from exc

        for i in range(len(data["level"])):
            if int(data["level"][i]) != WORD_LEVEL:
                continue
            raw = data["text"][i]
            text = raw.strip() if isinstance(raw, str) else None
            yield OCRWord(
                text=text or None,
                bounds=Rectangle(
                    int(data["left"][i]),
                    int(data["top"][i]),
                    max(0, int(data["width"][i])),
                    max(0, int(data["height"][i])),
                ),
                confidence=max(0.0, float(data["conf"][i])),
            )

    def recognize_text(self, frame: Frame) -> str:
        """Return the text of the whole region, stripped."""
        if frame.width == 0 or frame.height == 0:
            return ""
        try:
            text = pytesseract.image_to_string(self._to_rgb(frame), lang=self.lang)
        except pytesseract.TesseractError as exc:
            raise OCRError(f"Region recognition failed: {exc}") from exc
        return text.strip()
