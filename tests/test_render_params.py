import pytest

from filmvert.render_params import RenderParams


def test_defaults_are_neutral():
    params = RenderParams()
    assert params.black_point == (0.0, 0.0, 0.0, 0.0)
    assert params.white_point == (1.0, 1.0, 1.0, 1.0)
    assert params.g_gamma == (1.0, 1.0, 1.0, 1.0)
    assert params.bypass is False
    assert params.grade_bypass is False


def test_vectors_become_float_tuples():
    params = RenderParams(base_color=[1, 2, 3, 4])
    assert params.base_color == (1.0, 2.0, 3.0, 4.0)
    assert all(isinstance(v, float) for v in params.base_color)


def test_wrong_vector_length_raises():
    with pytest.raises(ValueError):
        RenderParams(g_lift=(0.0, 0.0, 0.0))


def test_negative_size_raises():
    with pytest.raises(ValueError):
        RenderParams(width=-1)


def test_flags_are_booleans():
    params = RenderParams(bypass=1, grade_bypass=0)
    assert params.bypass is True
    assert params.grade_bypass is False


def test_size_and_scalars_are_kept():
    params = RenderParams(width=64, height=32, temp=1, tint=-1)
    assert (params.width, params.height) == (64, 32)
    assert params.temp == 1.0
    assert params.tint == -1.0