import pytest

from advent_solver.maths import gcd, lcm


def test_gcd_pinned_value():
    assert gcd(12, 18) == 6


def test_lcm_pinned_value():
    assert lcm(4, 6) == 12


@pytest.mark.parametrize("a", [0, 1, 7, 100, 2**40])
def test_gcd_with_zero_is_identity(a):
    assert gcd(a, 0) == a


@pytest.mark.parametrize("a, b", [(35, 49), (17, 5), (1024, 96), (81, 27), (1, 1)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0
    assert b % g == 0
    assert gcd(a // g, b // g) == 1


@pytest.mark.parametrize("a, b", [(35, 49), (17, 5), (1024, 96), (81, 27), (1, 1)])
def test_lcm_times_gcd_is_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b


@pytest.mark.parametrize("a, b", [(35, 49), (17, 5), (1024, 96)])
def test_gcd_and_lcm_are_symmetric(a, b):
    assert gcd(a, b) == gcd(b, a)
    assert lcm(a, b) == lcm(b, a)


def test_lcm_of_zeroes_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)