from aclib.gcd import gcd_recursive, lcm_recursive


def test_gcd_pairs():
    assert gcd_recursive([30, 45]) == 15
    assert gcd_recursive([16, 0]) == 16
    assert gcd_recursive([0, 16]) == 16
    assert gcd_recursive([0, 0]) == 0
    assert gcd_recursive([16, 1]) == 1
    assert gcd_recursive([1, 16]) == 1
    assert gcd_recursive([1, 1]) == 1


def test_lcm_pairs():
    assert lcm_recursive([30, 45]) == 90
    assert lcm_recursive([32, 1]) == 32
    assert lcm_recursive([1, 32]) == 32
    assert lcm_recursive([1, 1]) == 1
    assert lcm_recursive([0, 2]) == 0
    assert lcm_recursive([2, 0]) == 0
    assert lcm_recursive([0, 0]) == 0


def test_gcd_recursive():
    assert gcd_recursive([12, 20, 32]) == 4
    assert gcd_recursive([12, 20, 14, 32]) == 2


def test_gcd_recursive_b():
    assert gcd_recursive([12, 20, 32, 91]) == 1
    assert gcd_recursive([12]) == 12
    assert gcd_recursive([]) == 0
    assert gcd_recursive([12, 24]) == 12
    assert gcd_recursive([12, 24, 32]) == 4


def test_lcm_recursive():
    assert lcm_recursive([2, 3, 4]) == 12
    assert lcm_recursive([12, 20, 32]) == 480
    assert lcm_recursive([12, 20, 14, 32]) == 3360
    assert lcm_recursive([12]) == 12
    assert lcm_recursive([]) == 1


def test_gcd_divides_all():
    values = [84, 126, 210, 462, 1050]
    g = gcd_recursive(values)
    assert g == 42
    assert all(v % g == 0 for v in values)