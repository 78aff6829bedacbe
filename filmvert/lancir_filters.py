"""Fractional-delay Lanczos filter bank used by the image resizer."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

FRACTION_COUNT = 1000
_ZERO_TOLERANCE = 2.0 ** -42


class SineGenerator:
    """Sine-wave oscillator that steps by a fixed increment without calling sin."""

    def __init__(self, increment: float, phase: float) -> None:
        self._current = math.sin(phase)
        self._previous = math.sin(phase - increment)
        self._factor = 2.0 * math.cos(increment)

    def generate(self) -> float:
        """Return the current sine value and advance by one increment."""
        result = self._current
        self._current = self._factor * result - self._previous
        self._previous = result
        return result


class ResizeFilters:
    """Bank of normalised Lanczos filters for every fractional delay.

    ``update`` sets the Lanczos ``a`` parameter and the resizing step;
    ``get_filter`` then builds filters on demand and caches them.
    """

    def __init__(self) -> None:
        self.la = 0.0
        self.k = 0.0
        self.el_count = 0
        self.norm_freq = 0.0
        self.freq = 0.0
        self.freq_a = 0.0
        self.len2 = 0.0
        self.fl2 = 0
        self.kernel_len = 0
        self.frac_count = FRACTION_COUNT
        self._filters: Optional[list[Optional[np.ndarray]]] = None

    def update(self, la: float, k: float, el_count: int) -> bool:
        """Set up the bank; return True if anything changed and caches were reset."""
        if la == self.la and k == self.k and el_count == self.el_count:
            return False

        self.la = la
        self.k = k
        self.el_count = el_count

        self.norm_freq = 1.0 if k <= 1.0 else 1.0 / k
        self.freq = math.pi * self.norm_freq
        self.freq_a = math.pi * self.norm_freq / la

        self.len2 = la / self.norm_freq
        self.fl2 = int(math.ceil(self.len2))
        self.kernel_len = self.fl2 + self.fl2

        # One extra slot covers a fractional delay of exactly 1.0 after rounding.
        self._filters = [None] * (self.frac_count + 1)
        return True

    def get_filter(self, x: float) -> np.ndarray:
        """Return the filter for fractional offset ``x`` in [0, 1]."""
        if self._filters is None:
            raise RuntimeError("update() must be called before get_filter()")
        frac = int(x * self.frac_count + 0.5)
        if not 0 <= frac <= self.frac_count:
            raise ValueError(f"fractional offset must lie in [0, 1], got {x}")

        cached = self._filters[frac]
        if cached is not None:
            return cached

        taps = self._make_filter_norm(1.0 - frac / self.frac_count)
        taps.setflags(write=False)
        self._filters[frac] = taps
        return taps

    def _make_filter_norm(self, frac_delay: float) -> np.ndarray:
        """Build a DC-normalised windowed-sinc filter for the given delay."""
        fl2 = self.fl2
        sine = SineGenerator(self.freq, self.freq * (frac_delay - fl2))
        window = SineGenerator(self.freq_a, self.freq_a * (frac_delay - fl2))

        taps: list[float] = []
        total = 0.0

        def tap(offset: float) -> float:
            return float(np.float32(sine.generate() * window.generate() / (offset * offset)))

        t = -fl2
        if t + frac_delay < -self.len2:
            sine.generate()
            window.generate()
            taps.append(0.0)
            t += 1

        at_one = abs(frac_delay - 1.0) < _ZERO_TOLERANCE
        stop = -1 if at_one else 0
        zero_crossing = at_one or abs(frac_delay) < _ZERO_TOLERANCE

        while t < stop:
            value = tap(t + frac_delay)
            total += value
            taps.append(value)
            t += 1

        if zero_crossing:
            value = float(np.float32(self.freq * self.freq_a))
            total += value
            taps.append(value)
            sine.generate()
            window.generate()
        else:
            value = tap(frac_delay)
            total += value
            taps.append(value)

        stop = fl2 - 2
        while t < stop:
            t += 1
            value = tap(t + frac_delay)
            total += value
            taps.append(value)

        last = t + 1 + frac_delay
        if last > self.len2:
            taps.append(0.0)
        else:
            value = tap(last)
            total += value
            taps.append(value)

        scale = 1.0 / total
        return np.array([v * scale for v in taps], dtype=np.float32)