"""Structured logging for smart-mouse."""

from __future__ import annotations

import os
import sys
from typing import Any

from loguru import logger

from .config import Config, config


class Logger:
    """Structured logging front-end over *Loguru*."""

    def __init__(self, name: str = "SmartMouse", settings: Config | None = None) -> None:
        """Initialize and configure a *Loguru* logger instance."""
        self.name = name
        self.configure(settings or config)

    def configure(self, settings: Config) -> None:
        """(Re)install the console and optional file handlers."""
        # Remove default handler
        logger.remove()

        # ------------------------------------------------------------------
        # Console handler
        # ------------------------------------------------------------------
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level:<8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

        logger.add(
            sys.stderr,
            format=console_format,
            level=settings.log_level.upper(),
            colorize=True,
        )

        # ------------------------------------------------------------------
        # File handler
        # ------------------------------------------------------------------
        if not settings.log_dir:
            return

        os.makedirs(settings.log_dir, exist_ok=True)
        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | "
            "{name}:{function}:{line} | {message}"
        )

        logger.add(
            os.path.join(settings.log_dir, "smart_mouse_{time:YYYY-MM-DD}.log"),
            format=file_format,
            level="DEBUG",
            rotation="1 day",
            retention="30 days",
            compression="zip",
        )

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        logger.info(f"[{self.name}] {message}", **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        logger.debug(f"[{self.name}] {message}", **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        logger.warning(f"[{self.name}] {message}", **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        logger.error(f"[{self.name}] {message}", **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log critical message."""
        logger.critical(f"[{self.name}] {message}", **kwargs)

    def success(self, message: str, **kwargs: Any) -> None:
        """Log success message."""
        logger.success(f"[{self.name}] {message}", **kwargs)

    def log_automation_step(self, step: str, details: dict[str, Any] | None = None) -> None:
        """Log automation step with details."""
        message = f"AUTOMATION STEP: {step}"
        if details:
            message += f" | Details: {details}"
        self.info(message)

    def log_vision_detection(
        self,
        element_type: str,
        confidence: float,
        coordinates: tuple[int, int],
    ) -> None:
        """Log computer vision detection results."""
        msg = (
            f"VISION DETECTION: {element_type} at {coordinates} "
            f"(confidence: {confidence:.2f})"
        )
        self.debug(msg)

    def log_performance(self, operation: str, duration_ms: float) -> None:
        """Log performance metrics."""
        self.debug(f"PERFORMANCE: {operation} took {duration_ms:.2f}ms")


# Global logger instance
log = Logger()
