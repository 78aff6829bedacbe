"""Lanczos image resizer working on numpy arrays of 1 to 4 channels."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .lancir_filters import ResizeFilters
from .lancir_scanline import ResizeScanline

LANCZOS_A = 3.0

_SUPPORTED_DTYPES = (
    np.dtype(np.uint8),
    np.dtype(np.uint16),
    np.dtype(np.uint32),
    np.dtype(np.float32),
    np.dtype(np.float64),
)


def _check_dtype(dtype, role: str) -> np.dtype:
    resolved = np.dtype(dtype)
    if resolved not in _SUPPORTED_DTYPES:
        raise TypeError(
            f"{role} type {resolved} is not supported; use uint8, uint16, uint32, "
            "float32 or float64"
        )
    return resolved


def _integer_range(dtype: np.dtype) -> int:
    """Full-scale value of an integer type; wider types are treated as 16-bit."""
    return 255 if dtype.itemsize == 1 else 65535


def _step_and_offset(step: float, src_len: int, dst_len: int, offset: float) -> tuple[float, float]:
    """Resolve the resizing step and centre the offset the way the step asks."""
    if step == 0.0:
        resolved = src_len / dst_len
        return resolved, offset + (resolved - 1.0) * 0.5
    if step > 0.0:
        return step, offset + (step - 1.0) * 0.5
    return -step, offset


def _resample_axis(
    data: np.ndarray, scanline: ResizeScanline, kernel_len: int, axis: int
) -> np.ndarray:
    """Filter ``data`` along ``axis`` at the scanline's positions."""
    moved = np.moveaxis(data, axis, 0)
    pad_width = [(scanline.padl, scanline.padr)] + [(0, 0)] * (moved.ndim - 1)
    padded = np.pad(moved, pad_width, mode="edge")

    offsets = np.array([p.so for p in scanline.positions], dtype=np.int64)
    taps = np.stack(
        [np.asarray(p.filter, dtype=np.float32)[:kernel_len] for p in scanline.positions]
    )
    tap_shape = (len(offsets),) + (1,) * (moved.ndim - 1)

    result = np.zeros((len(offsets),) + moved.shape[1:], dtype=np.float32)
    for shift, weights in enumerate(taps.T):
        result += weights.reshape(tap_shape) * padded[offsets + shift]
    return np.moveaxis(result, 0, axis)


def _to_output(values: np.ndarray, in_dtype: np.dtype, out_dtype: np.dtype) -> np.ndarray:
    """Scale resized values into the output type, rounding and clamping integers."""
    out_is_float = out_dtype.kind == "f"
    clamp = _integer_range(out_dtype)
    multiplier = np.float32(1.0 if out_is_float else clamp)
    if in_dtype.kind != "f":
        multiplier = np.float32(multiplier / _integer_range(in_dtype))

    if out_is_float:
        if multiplier == 1.0:
            return values.astype(out_dtype)
        return (values * multiplier).astype(out_dtype)

    scaled = values if multiplier == 1.0 else values * multiplier
    rounded = np.floor(scaled + np.float32(0.5))
    rounded = np.where(scaled < np.float32(0.5), 0.0, np.minimum(rounded, clamp))
    return rounded.astype(out_dtype)


class LancirResizer:
    """Lanczos-3 resizer that keeps its filter banks between calls.

    Reusing one object for many images of the same geometry avoids
    rebuilding filters. An object is not safe to share between threads.
    """

    def __init__(self) -> None:
        self._vertical_filters = ResizeFilters()
        self._horizontal_filters = ResizeFilters()
        self._vertical = ResizeScanline()
        self._horizontal = ResizeScanline()

    def resize_image(
        self,
        src,
        new_width: int,
        new_height: int,
        kx: float = 0.0,
        ky: float = 0.0,
        ox: float = 0.0,
        oy: float = 0.0,
        output_dtype=None,
    ) -> np.ndarray:
        """Resize ``src`` (height x width, or height x width x channels).

        ``kx`` and ``ky`` are the steps (source pixels per output pixel);
        0 picks them from the sizes, a negative value skips centring.
        ``ox`` and ``oy`` shift the start within the source. Integer inputs
        and outputs are scaled by their full range, float ones use 0 to 1;
        integer output is rounded and clamped, float output is not.
        """
        image = np.asarray(src)
        in_dtype = _check_dtype(image.dtype, "input")
        out_dtype = in_dtype if output_dtype is None else _check_dtype(output_dtype, "output")

        if image.ndim == 2:
            planar = True
            pixels = image[:, :, np.newaxis]
        elif image.ndim == 3:
            planar = False
            pixels = image
        else:
            raise ValueError(f"image must have 2 or 3 dimensions, got {image.ndim}")

        src_height, src_width, channels = pixels.shape
        if not 1 <= channels <= 4:
            raise ValueError(f"image must have 1 to 4 channels, got {channels}")

        new_width = int(new_width)
        new_height = int(new_height)

        def shaped(result: np.ndarray) -> np.ndarray:
            return result[:, :, 0] if planar else result

        if new_width <= 0 or new_height <= 0:
            empty = np.zeros((max(new_height, 0), max(new_width, 0), channels), dtype=out_dtype)
            return shaped(empty)

        if src_width == 0 or src_height == 0:
            return shaped(np.zeros((new_height, new_width, channels), dtype=out_dtype))

        step_x, offset_x = _step_and_offset(float(kx), src_width, new_width, float(ox))
        step_y, offset_y = _step_and_offset(float(ky), src_height, new_height, float(oy))

        if self._vertical_filters.update(LANCZOS_A, step_y, channels):
            self._vertical.reset()
            self._horizontal.reset()

        if step_x == step_y:
            horizontal_filters = self._vertical_filters
        else:
            horizontal_filters = self._horizontal_filters
            if horizontal_filters.update(LANCZOS_A, step_x, channels):
                self._horizontal.reset()

        self._vertical.update(src_height, new_height, offset_y, self._vertical_filters)
        self._horizontal.update(src_width, new_width, offset_x, horizontal_filters)

        values = pixels.astype(np.float32)
        values = _resample_axis(values, self._vertical, self._vertical_filters.kernel_len, 0)
        values = _resample_axis(values, self._horizontal, horizontal_filters.kernel_len, 1)

        return shaped(_to_output(values, in_dtype, out_dtype))


def resize(src, new_width: int, new_height: int, output_dtype=None) -> np.ndarray:
    """Resize ``src`` to the given size with automatic, centred steps."""
    return LancirResizer().resize_image(src, new_width, new_height, output_dtype=output_dtype)