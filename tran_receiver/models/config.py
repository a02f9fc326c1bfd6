"""
Pydantic model for the receiver display configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.color import Color, ColorParseError

DEFAULT_QUIT_KEYS = ["ctrl+c", "q", "esc"]


class UIConfig(BaseModel):
    """A validated configuration model for the receiver display."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Layout
    padding: int = 2
    max_width: int = 80
    default_width: int = 40

    # Key bindings
    quit_keys: list[str] = Field(default_factory=lambda: list(DEFAULT_QUIT_KEYS))

    # Styling
    color: bool = True
    primary_color: str = "#1E90FF"
    info_color: str = "#83BDCF"
    help_color: str = "#626262"
    show_percentage: bool = False

    # Animation
    spinner_fps: float = 10.0
    progress_fps: float = 60.0
    easing: float = 0.25

    @field_validator("padding")
    @classmethod
    def validate_padding(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Padding cannot be negative.")
        return v

    @field_validator("max_width", "default_width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        """Ensures a reasonable progress bar width."""
        if v < 1 or v > 500:
            raise ValueError("Widths must be between 1 and 500 columns.")
        return v

    @field_validator("quit_keys")
    @classmethod
    def validate_quit_keys(cls, v: list[str]) -> list[str]:
        """Normalizes quit keys to lower case; at least one is required."""
        keys = [k.strip().lower() for k in v if k.strip()]
        if not keys:
            raise ValueError("At least one quit key must be configured.")
        return keys

    @field_validator("primary_color", "info_color", "help_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        try:
            Color.parse(v)
        except ColorParseError as e:
            raise ValueError(f"Invalid color '{v}': {e}") from e
        return v

    @field_validator("spinner_fps", "progress_fps")
    @classmethod
    def validate_fps(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Frame rates must be positive.")
        return v

    @field_validator("easing")
    @classmethod
    def validate_easing(cls, v: float) -> float:
        """Easing is the share of the remaining distance covered per frame."""
        if not 0 < v <= 1:
            raise ValueError("Easing must be in the range (0, 1].")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
