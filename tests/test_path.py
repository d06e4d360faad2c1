import pytest
from swipe.path import SwipePath, SwipeSample


def test_empty_path_is_invalid_and_zero():
    path = SwipePath()
    assert len(path) == 0
    assert path.length() == 0.0
    assert path.duration_ms() == 0
    assert path.is_valid(50.0) is False


def test_two_samples_never_valid():
    path = SwipePath()
    path.start(0, 0, 0)
    path.add(500, 0, 10)
    assert path.is_valid(50.0) is False


def test_three_samples_too_short():
    path = SwipePath()
    path.start(25, 25, 0)
    path.add(30, 25, 10)
    path.add(35, 25, 20)
    assert path.length() == pytest.approx(10.0)
    assert path.is_valid(50.0) is False


def test_three_samples_exactly_min_distance():
    path = SwipePath()
    path.start(0, 0, 0)
    path.add(30, 40, 10)  # 3-4-5 triangle, 50 units
    path.add(30, 40, 20)
    assert path.length() == pytest.approx(50.0)
    assert path.is_valid(50.0) is True


def test_duration_uses_first_and_last_sample():
    path = SwipePath()
    path.start(0, 0, 100)
    assert path.duration_ms() == 0
    path.add(10, 0, 130)
    path.add(20, 0, 175)
    assert path.duration_ms() == 75


def test_start_discards_previous_samples():
    path = SwipePath()
    path.start(0, 0, 0)
    path.add(100, 0, 10)
    path.start(5, 5, 20)
    assert path.samples == [SwipeSample(5.0, 5.0, 20)]


def test_samples_are_immutable():
    sample = SwipeSample(1.0, 2.0, 3)
    with pytest.raises(AttributeError):
        sample.x = 5.0
