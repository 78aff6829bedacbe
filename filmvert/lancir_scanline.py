"""Scanline resampling positions, edge padding and filtering for the resizer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .lancir_filters import ResizeFilters

_MAX_CHANNELS = 4


@dataclass(frozen=True, eq=False)
class ResizePosition:
    """Source pixel offset and fractional-delay filter for one output pixel."""

    so: int
    filter: np.ndarray = field(repr=False)


def _check_channels(channels: int) -> None:
    if not 1 <= channels <= _MAX_CHANNELS:
        raise ValueError(f"channels must be between 1 and {_MAX_CHANNELS}, got {channels}")


class ResizeScanline:
    """Resampling positions for one axis, with the padding the source needs.

    After ``update`` the attributes ``padl`` and ``padr`` give how many
    pixels must be replicated on each side of a source scanline, and
    ``positions`` holds one ``ResizePosition`` per destination pixel.
    """

    def __init__(self) -> None:
        self.padl = 0
        self.padr = 0
        self.positions: list[ResizePosition] = []
        self._src_len = 0
        self._dst_len = 0
        self._offset = 0.0

    def reset(self) -> None:
        """Force the next ``update`` to recompute, e.g. after the filters changed."""
        self._src_len = 0

    def update(self, src_len: int, dst_len: int, offset: float, filters: ResizeFilters) -> None:
        """Compute padding and per-pixel positions unless nothing has changed."""
        if src_len == self._src_len and dst_len == self._dst_len and offset == self._offset:
            return
        if src_len < 1:
            raise ValueError(f"source length must be positive, got {src_len}")
        if dst_len < 1:
            raise ValueError(f"destination length must be positive, got {dst_len}")
        if filters.kernel_len <= 0:
            raise ValueError("filters must be updated before computing positions")

        self._src_len = src_len
        self._dst_len = dst_len
        self._offset = offset

        fl2m1 = filters.fl2 - 1
        self.padl = max(0, fl2m1 - math.floor(offset))

        k = filters.k
        last_offset = offset + k * (dst_len - 1)
        last_index = math.floor(last_offset)
        self.padr = max(0, last_index + filters.fl2 + 1 - src_len)

        base = self.padl - fl2m1
        positions = []
        for i in range(dst_len - 1):
            ox = offset + k * i
            ix = math.floor(ox)
            positions.append(ResizePosition(base + ix, filters.get_filter(ox - ix)))
        # The last position reuses the pre-computed end offset so padding stays in sync.
        positions.append(
            ResizePosition(base + last_index, filters.get_filter(last_offset - last_index))
        )
        self.positions = positions


def pad_scanline(buffer: np.ndarray, scanline: ResizeScanline, length: int, channels: int) -> np.ndarray:
    """Replicate the first and last pixels of ``buffer`` into its padding, in place.

    ``buffer`` is a flat interleaved array laid out as ``padl`` pad pixels,
    ``length`` source pixels and ``padr`` pad pixels. The same array is
    returned.
    """
    _check_channels(channels)
    if not isinstance(buffer, np.ndarray):
        raise TypeError("buffer must be a numpy array")
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    needed = (scanline.padl + length + scanline.padr) * channels
    if buffer.size < needed:
        raise ValueError(f"buffer holds {buffer.size} values, {needed} needed")

    pixels = buffer.reshape(-1)[:needed].reshape(-1, channels)
    start = scanline.padl
    end = start + length
    pixels[:start] = pixels[start]
    pixels[end:] = pixels[end - 1]
    return buffer


def resize_scanline(
    source: np.ndarray,
    positions: list[ResizePosition],
    kernel_len: int,
    channels: int,
) -> np.ndarray:
    """Filter a padded scanline at each position; return the interleaved result."""
    _check_channels(channels)
    values = np.asarray(source, dtype=np.float32).reshape(-1)
    if values.size % channels:
        raise ValueError("source length is not a multiple of the channel count")
    if kernel_len < 1:
        raise ValueError(f"kernel length must be positive, got {kernel_len}")
    if not positions:
        return np.zeros(0, dtype=np.float32)

    pixels = values.reshape(-1, channels)
    offsets = np.array([p.so for p in positions], dtype=np.int64)
    if offsets.min() < 0 or offsets.max() + kernel_len > len(pixels):
        raise ValueError("filter window reaches outside the padded scanline")

    taps = np.stack(
        [np.asarray(p.filter, dtype=np.float32)[:kernel_len] for p in positions]
    )
    if taps.shape[1] != kernel_len:
        raise ValueError("a filter is shorter than the kernel length")

    windows = pixels[offsets[:, None] + np.arange(kernel_len)]
    result = np.einsum("nk,nkc->nc", taps, windows).astype(np.float32)
    return result.reshape(-1)