"""smart-mouse: point and click on screen elements found by their text."""

from .automation.controller import ActionResult, SmartMouse
from .vision.models import Candidate, CandidateKind, Frame, Rectangle

__all__ = [
    "ActionResult",
    "Candidate",
    "CandidateKind",
    "Frame",
    "Rectangle",
    "SmartMouse",
]

__version__ = "0.1.0"
