from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_QUIET_ZONE = 2
DEFAULT_ERROR_CORRECTION = "M"


class Color(IntEnum):
    """ANSI color, valued by its foreground SGR code"""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    @property
    def fg(self) -> int:
        return self.value

    @property
    def bg(self) -> int:
        return self.value + 10


class RenderOptions(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    # Should be 4 per the QR standard, 2 keeps codes usable in small terminals
    quiet_zone: int = Field(default=DEFAULT_QUIET_ZONE, ge=0, le=16)
    error_correction: Literal["L", "M", "Q", "H"] = DEFAULT_ERROR_CORRECTION
    dark: Color = Color.BLACK
    light: Color = Color.WHITE

    @model_validator(mode="after")
    def distinct_colors(self) -> "RenderOptions":
        if self.dark == self.light:
            raise ValueError("dark and light colors must differ")
        return self
