"""Configuration management for smart-mouse."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()


class Config(BaseSettings):
    """Configuration class for the smart-mouse pipeline.

    Every field can be overridden through an environment variable prefixed with
    ``SMART_MOUSE_`` (for example ``SMART_MOUSE_LOG_LEVEL=DEBUG``).
    """

    model_config = SettingsConfigDict(
        env_prefix="SMART_MOUSE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars rather than raising errors
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default=None, description="Directory for rotated log files (disabled when unset)")

    # OCR Engine
    tesseract_cmd: Optional[str] = Field(default=None, description="Path to Tesseract executable")
    tesseract_lang: str = Field(default="eng")

    # Region detection
    canny_low: int = Field(default=50)
    canny_high: int = Field(default=150)
    dilate_kernel_size: int = Field(default=3)
    dilate_iterations: int = Field(default=2)
    button_min_width: int = Field(default=40, description="Exclusive lower bound on button width")
    button_max_width: int = Field(default=400, description="Exclusive upper bound on button width")
    button_min_height: int = Field(default=20, description="Exclusive lower bound on button height")
    button_max_height: int = Field(default=100, description="Exclusive upper bound on button height")

    # Synthesis
    button_confidence: float = Field(
        default=0.7,
        description="Nominal confidence stamped on shape-only button candidates (0-100 scale)",
    )
    parallel_detection: bool = Field(default=False)

    # Pointer timing (seconds)
    move_settle_delay: float = Field(default=0.1)
    button_hold_delay: float = Field(default=0.05)
    double_click_interval: float = Field(default=0.1)

    # Debug rendering
    vision_debug_dir: str = Field(default="vision_debug")
    show_window: bool = Field(default=False)

    def validate_config(self) -> bool:
        """Validate configuration values."""
        if self.canny_low < 0 or self.canny_high <= self.canny_low:
            raise ValueError("Canny thresholds must satisfy 0 <= canny_low < canny_high")

        if self.dilate_kernel_size < 1 or self.dilate_iterations < 0:
            raise ValueError("Dilation kernel must be >= 1 and iterations >= 0")

        if self.button_min_width >= self.button_max_width:
            raise ValueError("button_min_width must be below button_max_width")

        if self.button_min_height >= self.button_max_height:
            raise ValueError("button_min_height must be below button_max_height")

        if not 0 <= self.button_confidence <= 100:
            raise ValueError("Button confidence must be between 0 and 100")

        if min(self.move_settle_delay, self.button_hold_delay, self.double_click_interval) < 0:
            raise ValueError("Pointer delays must not be negative")

        return True


# Global configuration instance
config = Config()
