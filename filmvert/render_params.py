"""Per-image parameters handed to the grading pipeline."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_DIM = 16
MINLOG = 0.0001

Vec4 = tuple[float, float, float, float]

_VECTOR_FIELDS = (
    "base_color",
    "black_point",
    "white_point",
    "g_blackpoint",
    "g_whitepoint",
    "g_lift",
    "g_gain",
    "g_mult",
    "g_offset",
    "g_gamma",
)

_UNSIGNED_FIELDS = ("width", "height", "align")


@dataclass
class RenderParams:
    """Image size, bypass flags, base colour, points and grade controls."""

    width: int = 0
    height: int = 0
    bypass: bool = False
    grade_bypass: bool = False
    align: int = 0

    sigma_filter: float = 0.0
    temp: float = 0.0
    tint: float = 0.0

    base_color: Vec4 = (1.0, 1.0, 1.0, 1.0)

    black_point: Vec4 = (0.0, 0.0, 0.0, 0.0)
    white_point: Vec4 = (1.0, 1.0, 1.0, 1.0)

    g_blackpoint: Vec4 = (0.0, 0.0, 0.0, 0.0)
    g_whitepoint: Vec4 = (1.0, 1.0, 1.0, 1.0)
    g_lift: Vec4 = (0.0, 0.0, 0.0, 0.0)
    g_gain: Vec4 = (1.0, 1.0, 1.0, 1.0)
    g_mult: Vec4 = (1.0, 1.0, 1.0, 1.0)
    g_offset: Vec4 = (0.0, 0.0, 0.0, 0.0)
    g_gamma: Vec4 = (1.0, 1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        for name in _UNSIGNED_FIELDS:
            value = int(getattr(self, name))
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
            setattr(self, name, value)
        self.bypass = bool(self.bypass)
        self.grade_bypass = bool(self.grade_bypass)
        for name in ("sigma_filter", "temp", "tint"):
            setattr(self, name, float(getattr(self, name)))
        for name in _VECTOR_FIELDS:
            values = tuple(float(v) for v in getattr(self, name))
            if len(values) != 4:
                raise ValueError(f"{name} needs 4 components, got {len(values)}")
            setattr(self, name, values)