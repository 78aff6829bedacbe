"""Error state and timing of the render pass."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class GpuStatus:
    """The first error seen since the last clear, with where it happened."""

    error: bool = False
    error_code: int = 0
    message: str = ""

    def record(self, location: str, code: int, message: str) -> bool:
        """Remember an error unless one is already held; return True if stored."""
        if self.error:
            return False
        self.error = True
        self.error_code = int(code)
        self.message = f"Error with {location}: {message}"
        return True

    def clear(self) -> None:
        """Forget any held error."""
        self.error = False
        self.error_code = 0
        self.message = ""


@dataclass
class RenderTimer:
    """Duration of the last render in milliseconds and the matching frame rate."""

    render_time: float = 0.0
    fps: float = 0.0

    def record(self, milliseconds: float) -> None:
        """Store a render duration and derive frames per second from it."""
        milliseconds = float(milliseconds)
        if milliseconds < 0 or math.isnan(milliseconds):
            raise ValueError(f"render time must not be negative, got {milliseconds}")
        self.render_time = milliseconds
        self.fps = math.inf if milliseconds == 0 else 1000.0 / milliseconds