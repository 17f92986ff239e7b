import pytest

from aclib.cumsum import CumSum

EXPECTED = [0, 1, 3, 6, 10, 15, 21, 28, 36, 45, 55]


def test_from_list_leaves_data_untouched():
    data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    cum = CumSum(data)
    assert cum.prefix_sums == EXPECTED
    assert data == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_from_tuple():
    data = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
    assert CumSum(data).prefix_sums == EXPECTED


def test_from_generator():
    assert CumSum(x for x in range(1, 11)).prefix_sums == EXPECTED


def test_from_range():
    cum = CumSum(range(1, 11))
    assert cum.prefix_sums == EXPECTED
    assert len(cum) == 10


def test_interval_sum():
    cum = CumSum([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    assert cum.interval_sum(0, 3) == 3
    assert cum.interval_sum(3, 6) == 12
    assert cum.interval_sum(6, 9) == 21
    assert cum.interval_sum(6, 10) == 30
    assert cum.interval_sum(5) == 45
    assert cum.interval_sum(None, 10) == 45
    assert cum.interval_sum(None, 11) == 55
    assert cum.interval_sum() == 55
    assert cum.interval_sum(stop=11) == 55


def test_interval_sum_bound():
    cum = CumSum(range(11))
    assert cum.interval_sum(0, 0) == 0
    assert cum.interval_sum(1, 2) == 1
    assert cum.interval_sum(3, 0) == -3
    assert cum.interval_sum(6, 2) == -14
    assert cum.interval_sum(11) == 0
    assert cum.interval_sum(11, 0) == -55


def test_interval_sum_empty():
    cum = CumSum([])
    assert cum.interval_sum() == 0
    assert cum.interval_sum(0, 1) == 0
    assert cum.interval_sum(0, 100) == 0


def test_indices_clamps_stop():
    cum = CumSum(range(5))
    assert cum.indices() == (0, 5)
    assert cum.indices(2, 100) == (2, 5)
    assert cum.indices(1, 3) == (1, 3)


def test_start_out_of_range():
    cum = CumSum(range(5))
    with pytest.raises(IndexError):
        cum.interval_sum(6)


def test_negative_bound_rejected():
    cum = CumSum(range(5))
    with pytest.raises(IndexError):
        cum.indices(-1, 2)