import math

import numpy as np
import pytest

from astroforge.interp import LinearInterpolator, Side, search_sorted


def test_search_sorted_default_side_is_left():
    assert search_sorted([1, 2, 3, 4, 5], [3]) == [2]


def test_search_sorted_left():
    assert search_sorted([1, 2, 3, 4, 5], [3], Side.LEFT) == [2]


def test_search_sorted_right():
    assert search_sorted([1, 2, 3, 4, 5], [3], Side.RIGHT) == [3]


def test_search_sorted_out_of_range_values():
    assert search_sorted([1, 2, 3, 4, 5], [-10, 10, 2, 3]) == [0, 5, 1, 2]


def test_search_sorted_floats():
    a = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
    v = [-1.0, 1.4, 4.2, 10.2, 5.4, 6.5, 4.0, 6.0, 11.0]
    assert search_sorted(a, v) == [0, 2, 5, 11, 6, 7, 4, 6, 11]


def test_search_sorted_right_with_duplicates():
    assert search_sorted([1, 2, 2, 2, 3], [2], Side.RIGHT) == [4]
    assert search_sorted([1, 2, 2, 2, 3], [2], Side.LEFT) == [1]


def test_search_sorted_empty_array_gives_nothing():
    assert search_sorted([], [1, 2]) == []


def test_search_sorted_nan_is_skipped():
    assert search_sorted([1.0, 2.0], [math.nan, 1.5]) == [1]


@pytest.fixture
def interpolator():
    x = [1.0, 2.0, 3.0, 4.0]
    y = [
        [1.0, 2.0, 3.0, 4.0],
        [1.0, 2.0, 3.0, 4.0],
        [1.0, 2.0, 3.0, 4.0],
        [1.0, 2.0, 3.0, 4.0],
    ]
    return LinearInterpolator(x, y)


def test_interp_value(interpolator):
    np.testing.assert_allclose(interpolator.interp_value(2.5), [2.5] * 4)


def test_interp_array(interpolator):
    result = interpolator.interp_array([2.5, 2.9])
    np.testing.assert_allclose(result, [[2.5] * 4, [2.9] * 4])


def test_interp_endpoints(interpolator):
    np.testing.assert_allclose(interpolator.interp_value(1.0), [1.0] * 4)
    np.testing.assert_allclose(interpolator.interp_value(4.0), [4.0] * 4)


def test_interp_sample_points_are_reproduced():
    interp = LinearInterpolator([0.0, 1.0, 3.0], [[0.0, 10.0, 30.0], [5.0, 5.0, -1.0]])
    np.testing.assert_allclose(interp.interp_value(1.0), [10.0, 5.0])
    np.testing.assert_allclose(interp.interp_value(2.0), [20.0, 2.0])


def test_interp_out_of_range(interpolator):
    with pytest.raises(ValueError):
        interpolator.interp_value(0.5)
    with pytest.raises(ValueError):
        interpolator.interp_array([2.0, 5.0])


def test_interp_rejects_unsorted_axis():
    with pytest.raises(ValueError):
        LinearInterpolator([1.0, 3.0, 2.0], [[1.0, 2.0, 3.0]])


def test_interp_rejects_mismatched_shape():
    with pytest.raises(ValueError):
        LinearInterpolator([1.0, 2.0, 3.0], [[1.0, 2.0]])