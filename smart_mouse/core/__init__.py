"""Core components of smart-mouse: configuration, logging and errors."""

from .config import Config, config
from .exceptions import (
    CaptureUnavailableError,
    OCREngineUnavailableError,
    OCRError,
    PointerUnavailableError,
    SmartMouseError,
    StartupError,
)
from .logger import Logger, log

__all__ = [
    "CaptureUnavailableError",
    "Config",
    "Logger",
    "OCREngineUnavailableError",
    "OCRError",
    "PointerUnavailableError",
    "SmartMouseError",
    "StartupError",
    "config",
    "log",
]
