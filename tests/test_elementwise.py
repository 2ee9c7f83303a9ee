from __future__ import annotations

import numpy as np
import pytest

from raster_ops import (RasterShapeError, RasterValueError, accumulate, create_image,
                        from_array, normalize, step, sweep)


def test_step_thresholds_inclusive() -> None:
    img = from_array([[0.2, 0.6], [0.5, 0.9]])
    out = step(img, 0.5)
    assert out.shape == (2, 2, 1)
    np.testing.assert_array_equal(out.data, [0, 1, 1, 1])
    assert out is not img
    np.testing.assert_allclose(img.data, [0.2, 0.6, 0.5, 0.9], rtol=1e-6)


def test_step_output_is_binary() -> None:
    rng = np.random.default_rng(7)
    img = from_array(rng.normal(size=(9, 11)))
    out = step(img, 0.1)
    assert set(np.unique(out.data)) <= {0.0, 1.0}
    np.testing.assert_array_equal(out.data == 1, img.data >= np.float32(0.1))


def test_step_requires_single_band() -> None:
    with pytest.raises(RasterShapeError):
        step(create_image(2, 2, 3), 0.5)


def test_sweep_averages_rows() -> None:
    out = sweep(from_array([[1.0, 3.0], [5.0, 7.0]]))
    assert (out.width, out.height, out.nbands) == (1, 2, 1)
    np.testing.assert_array_equal(out.data, [2.0, 6.0])


def test_sweep_requires_single_band() -> None:
    with pytest.raises(RasterShapeError):
        sweep(create_image(4, 4, 2))


def test_normalize_maps_and_clamps() -> None:
    img = from_array([[-1.0, 0.0, 0.5, 1.0, 2.0]])
    out = normalize(img, 0.0, 1.0)
    np.testing.assert_allclose(out.data, [0.0, 0.0, 0.5, 1.0, 1.0])


def test_normalize_any_band_count_and_monotonic() -> None:
    values = np.linspace(10.0, 20.0, 24).reshape(2, 4, 3)
    out = normalize(from_array(values), 10.0, 20.0)
    assert out.shape == (4, 2, 3)
    assert out.data.min() >= 0.0 and out.data.max() <= 1.0
    assert np.all(np.diff(out.data) >= 0)
    assert out.data[0] == 0.0 and out.data[-1] == 1.0


def test_normalize_rejects_empty_range() -> None:
    with pytest.raises(RasterValueError):
        normalize(create_image(2, 2, 1), 1.0, 1.0)


def test_accumulate_adds_every_band_in_place() -> None:
    dst = from_array(np.ones((2, 3, 3)))
    src = from_array(np.arange(18, dtype=np.float64).reshape(2, 3, 3))
    buffer = dst.data
    assert accumulate(dst, src) is None
    assert dst.data is buffer
    np.testing.assert_array_equal(dst.data, np.arange(18) + 1)
    np.testing.assert_array_equal(src.data, np.arange(18))


def test_accumulate_sequential_calls_match_precomputed_sum() -> None:
    rng = np.random.default_rng(3)
    base, a, b = (rng.integers(-8, 8, size=(4, 5)).astype(np.float32) for _ in range(3))

    seq = from_array(base)
    accumulate(seq, from_array(a))
    accumulate(seq, from_array(b))

    once = from_array(base)
    accumulate(once, from_array(a + b))
    np.testing.assert_array_equal(seq.data, once.data)


@pytest.mark.parametrize("shape", [(3, 2, 1), (2, 3, 1), (2, 2, 3)])
def test_accumulate_mismatch_leaves_destination_untouched(shape) -> None:
    dst = from_array(np.ones((2, 2)))
    with pytest.raises(RasterShapeError):
        accumulate(dst, create_image(*shape))
    np.testing.assert_array_equal(dst.data, np.ones(4))
