import pytest

from aclib.divisors import divisors, divisors_pair


def test_divisors_pair():
    assert divisors_pair(12) == [(1, 12), (2, 6), (3, 4)]
    assert divisors_pair(25) == [(1, 25), (5, 5)]
    assert divisors_pair(720) == [
        (1, 720), (2, 360), (3, 240), (4, 180), (5, 144), (6, 120), (8, 90), (9, 80),
        (10, 72), (12, 60), (15, 48), (16, 45), (18, 40), (20, 36), (24, 30),
    ]


def test_divisors_pair_bound():
    assert divisors_pair(0) == []
    assert divisors_pair(1) == [(1, 1)]
    assert divisors_pair(2) == [(1, 2)]


def test_divisors():
    assert divisors(12) == [1, 2, 3, 4, 6, 12]
    assert divisors(25) == [1, 5, 25]
    assert divisors(720) == [
        1, 2, 3, 4, 5, 6, 8, 9, 10, 12, 15, 16, 18, 20, 24, 30, 36, 40, 45, 48, 60, 72, 80,
        90, 120, 144, 180, 240, 360, 720,
    ]


def test_divisors_bound():
    assert divisors(0) == []
    assert divisors(1) == [1]
    assert divisors(2) == [1, 2]


def test_negative_rejected():
    with pytest.raises(ValueError):
        divisors(-4)