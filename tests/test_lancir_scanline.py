import numpy as np
import pytest

from filmvert.lancir_filters import ResizeFilters
from filmvert.lancir_scanline import (
    ResizePosition,
    ResizeScanline,
    pad_scanline,
    resize_scanline,
)


def _filters(k, channels=1):
    bank = ResizeFilters()
    bank.update(3.0, k, channels)
    return bank


def _padded(values, scanline, channels):
    values = np.asarray(values, dtype=np.float32).reshape(-1)
    buffer = np.zeros((scanline.padl + scanline.padr) * channels + values.size, dtype=np.float32)
    start = scanline.padl * channels
    buffer[start:start + values.size] = values
    return pad_scanline(buffer, scanline, values.size // channels, channels)


def _resize(values, src_len, dst_len, channels=1):
    k = src_len / dst_len
    bank = _filters(k, channels)
    scan = ResizeScanline()
    scan.update(src_len, dst_len, (k - 1.0) * 0.5, bank)
    buffer = _padded(values, scan, channels)
    return resize_scanline(buffer, scan.positions, bank.kernel_len, channels)


def test_positions_one_per_destination_pixel():
    scan = ResizeScanline()
    scan.update(10, 7, 0.2, _filters(10 / 7))
    assert len(scan.positions) == 7
    assert all(isinstance(p, ResizePosition) for p in scan.positions)


@pytest.mark.parametrize("src_len,dst_len,offset", [(10, 10, 0.0), (20, 7, 0.9), (5, 17, -0.3), (8, 1, 3.5)])
def test_windows_stay_inside_padded_scanline(src_len, dst_len, offset):
    k = src_len / dst_len
    bank = _filters(k)
    scan = ResizeScanline()
    scan.update(src_len, dst_len, offset, bank)
    total = scan.padl + src_len + scan.padr
    assert scan.padl >= 0 and scan.padr >= 0
    for pos in scan.positions:
        assert pos.so >= 0
        assert pos.so + bank.kernel_len <= total
        assert len(pos.filter) == bank.kernel_len


def test_positions_are_non_decreasing():
    scan = ResizeScanline()
    scan.update(30, 11, 0.0, _filters(30 / 11))
    offsets = [p.so for p in scan.positions]
    assert offsets == sorted(offsets)


def test_update_is_skipped_when_unchanged_and_reset_forces_it():
    bank = _filters(2.0)
    scan = ResizeScanline()
    scan.update(12, 6, 0.5, bank)
    first = scan.positions
    scan.update(12, 6, 0.5, bank)
    assert scan.positions is first
    scan.reset()
    scan.update(12, 6, 0.5, bank)
    assert scan.positions is not first
    assert [p.so for p in scan.positions] == [p.so for p in first]
    assert all(np.array_equal(a.filter, b.filter) for a, b in zip(scan.positions, first))


def test_update_rejects_bad_lengths():
    scan = ResizeScanline()
    with pytest.raises(ValueError):
        scan.update(0, 5, 0.0, _filters(1.0))
    with pytest.raises(ValueError):
        scan.update(5, 0, 0.0, _filters(1.0))


def test_update_requires_prepared_filters():
    with pytest.raises(ValueError):
        ResizeScanline().update(5, 5, 0.0, ResizeFilters())


def test_pad_scanline_replicates_edges():
    scan = ResizeScanline()
    scan.update(4, 4, 0.0, _filters(1.0, 2))
    values = np.array([1, 2, 3, 4, 5, 6, 7, 8], dtype=np.float32)
    buffer = _padded(values, scan, 2)
    pixels = buffer.reshape(-1, 2)
    assert np.array_equal(pixels[:scan.padl], np.tile([1, 2], (scan.padl, 1)))
    assert np.array_equal(pixels[scan.padl:scan.padl + 4].reshape(-1), values)
    assert np.array_equal(pixels[scan.padl + 4:], np.tile([7, 8], (scan.padr, 1)))


def test_pad_scanline_rejects_short_buffer_and_lists():
    scan = ResizeScanline()
    scan.update(4, 4, 0.0, _filters(1.0))
    with pytest.raises(ValueError):
        pad_scanline(np.zeros(3, dtype=np.float32), scan, 4, 1)
    with pytest.raises(TypeError):
        pad_scanline([0.0] * 20, scan, 4, 1)


@pytest.mark.parametrize("channels", [1, 2, 3, 4])
def test_unit_step_reproduces_source(channels):
    rng = np.random.default_rng(7)
    values = rng.random(9 * channels).astype(np.float32)
    result = _resize(values, 9, 9, channels)
    assert np.allclose(result, values, atol=1e-4)


@pytest.mark.parametrize("src_len,dst_len", [(16, 5), (5, 13)])
def test_constant_scanline_is_preserved(src_len, dst_len):
    values = np.full(src_len * 3, 0.5, dtype=np.float32)
    result = _resize(values, src_len, dst_len, 3)
    assert result.shape == (dst_len * 3,)
    assert np.allclose(result, 0.5, atol=1e-5)


def test_resize_scanline_rejects_bad_channels():
    with pytest.raises(ValueError):
        resize_scanline(np.zeros(10, dtype=np.float32), [], 6, 5)


def test_resize_scanline_rejects_window_outside_buffer():
    bank = _filters(1.0)
    position = ResizePosition(8, bank.get_filter(0.0))
    with pytest.raises(ValueError):
        resize_scanline(np.zeros(10, dtype=np.float32), [position], bank.kernel_len, 1)