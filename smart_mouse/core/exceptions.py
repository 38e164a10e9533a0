"""Exception hierarchy for smart-mouse."""

from __future__ import annotations


class SmartMouseError(RuntimeError):
    """Base class for every error raised by the pipeline."""


class StartupError(SmartMouseError):
    """A collaborator the controller cannot run without is unavailable."""


class CaptureUnavailableError(StartupError):
    """Raised when the display cannot be opened or grabbed."""


class OCREngineUnavailableError(StartupError):
    """Raised when the Tesseract binary is missing or cannot be initialized."""


class PointerUnavailableError(StartupError):
    """Raised when the pointer injector cannot reach a display."""


class OCRError(SmartMouseError):
    """A single OCR call failed; callers may tolerate it per word or crop."""
