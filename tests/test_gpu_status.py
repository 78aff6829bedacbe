import math

import pytest

from filmvert.gpu_status import GpuStatus, RenderTimer


def test_fresh_status_has_no_error():
    status = GpuStatus()
    assert status.error is False
    assert status.error_code == 0
    assert status.message == ""


def test_record_stores_message_with_location():
    status = GpuStatus()
    assert status.record("Render", 1282, "invalid operation") is True
    assert status.error is True
    assert status.error_code == 1282
    assert status.message == "Error with Render: invalid operation"


def test_only_first_error_is_kept():
    status = GpuStatus()
    status.record("Setting Viewport", 1281, "invalid value")
    assert status.record("Unbind", 1282, "invalid operation") is False
    assert status.error_code == 1281
    assert "Setting Viewport" in status.message


def test_clear_allows_new_error():
    status = GpuStatus()
    status.record("Render", 1282, "invalid operation")
    status.clear()
    assert status == GpuStatus()
    assert status.record("Unbind", 1281, "invalid value") is True
    assert status.error_code == 1281


def test_timer_records_fps():
    timer = RenderTimer()
    timer.record(20)
    assert timer.render_time == 20.0
    assert timer.fps == pytest.approx(1000.0 / 20.0)


def test_timer_zero_duration_is_infinite_rate():
    timer = RenderTimer()
    timer.record(0)
    assert timer.render_time == 0.0
    assert math.isinf(timer.fps)


def test_timer_rejects_negative():
    timer = RenderTimer()
    with pytest.raises(ValueError):
        timer.record(-1)