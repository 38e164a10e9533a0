"""Computer vision for smart-mouse.

This sub-package turns captured screen frames into scored candidates: edge
based button detection, OCR text extraction, candidate synthesis and query
matching.
"""

from .clickable_detector import ClickableDetector, OpenCVContourDetector
from .engine import VisionEngine
from .matcher import find_best_match, score_candidate, text_similarity
from .models import Candidate, CandidateKind, Frame, Point, Rectangle
from .ocr import OCRWord, TesseractEngine
from .text_extractor import TextExtractor

__all__ = [
    "Candidate",
    "CandidateKind",
    "ClickableDetector",
    "Frame",
    "OCRWord",
    "OpenCVContourDetector",
    "Point",
    "Rectangle",
    "TesseractEngine",
    "TextExtractor",
    "VisionEngine",
    "find_best_match",
    "score_candidate",
    "text_similarity",
]
