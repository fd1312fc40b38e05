"""Unit tests for the numeric helpers."""

import pytest

from bfhl.numeric import (
    as_integer,
    fibonacci,
    filter_primes,
    gcd,
    hcf_of,
    is_integer,
    is_prime,
    lcm,
    lcm_of,
)


class TestIsInteger:
    """Tests for JSON integer detection."""
    
    @pytest.mark.parametrize("value", [0, 7, -3, 5.0, 10 ** 30])
    def test_integers(self, value):
        assert is_integer(value)
    
    @pytest.mark.parametrize("value", [True, False, 2.5, "3", None, [1], float("nan"), float("inf")])
    def test_non_integers(self, value):
        assert not is_integer(value)
    
    def test_as_integer_normalizes_float(self):
        """Test integral floats come back as int."""
        result = as_integer(5.0)
        
        assert result == 5
        assert type(result) is int
    
    def test_as_integer_rejects_fraction(self):
        with pytest.raises(ValueError):
            as_integer(1.5)


class TestIsPrime:
    """Tests for the primality test."""
    
    def test_small_primes(self):
        primes = [n for n in range(30) if is_prime(n)]
        
        assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    
    def test_below_two_is_not_prime(self):
        """Test 0, 1 and negatives are never prime."""
        assert not is_prime(1)
        assert not is_prime(0)
        assert not is_prime(-7)
    
    def test_perfect_square(self):
        """Test the divisor range includes floor(sqrt(n))."""
        assert not is_prime(49)
        assert not is_prime(121)


class TestGcdLcm:
    """Tests for gcd and lcm."""
    
    def test_gcd(self):
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
    
    def test_gcd_with_zero(self):
        assert gcd(9, 0) == 9
        assert gcd(0, 9) == 9
    
    def test_gcd_keeps_sign(self):
        """Test signed operands give the signed Euclid result."""
        assert gcd(-4, 0) == -4
        assert gcd(12, -18) == -6
        assert gcd(-18, 12) == -6
        assert gcd(-4, 6) == 2

    def test_gcd_large_neighbouring_fibonacci(self):
        """Test ~270-digit inputs needing ~1300 Euclid steps."""
        seq = fibonacci(1300)

        assert gcd(seq[-1], seq[-2]) == 1
        assert hcf_of([seq[-1], seq[-2]]) == 1
        assert lcm(seq[-1], seq[-2]) == seq[-1] * seq[-2]

    def test_lcm_signed(self):
        assert lcm(-4, 6) == -12
        assert lcm(4, -6) == 12

    def test_lcm(self):
        assert lcm(4, 6) == 12
        assert lcm(3, 7) == 21
    
    def test_lcm_both_zero_divides_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            lcm(0, 0)


class TestFibonacci:
    """Tests for Fibonacci sequence generation."""
    
    def test_zero_terms(self):
        assert fibonacci(0) == []
    
    def test_first_terms(self):
        assert fibonacci(1) == [0]
        assert fibonacci(7) == [0, 1, 1, 2, 3, 5, 8]
    
    @pytest.mark.parametrize("n", [2, 10, 50, 200])
    def test_recurrence(self, n):
        """Test length and the seq[i] = seq[i-1] + seq[i-2] recurrence."""
        seq = fibonacci(n)
        
        assert len(seq) == n
        assert seq[0] == 0
        for i in range(2, n):
            assert seq[i] == seq[i - 1] + seq[i - 2]
    
    def test_large_terms_are_exact(self):
        """Test big terms don't lose precision."""
        assert fibonacci(101)[100] == 354224848179261915075


class TestListFolds:
    """Tests for prime filtering and the lcm/hcf folds."""
    
    def test_filter_primes_drops_non_integers(self):
        assert filter_primes([1, 2, "x", 3, 4]) == [2, 3]
    
    def test_filter_primes_preserves_order(self):
        assert filter_primes([13, 4, 2, 11, 2]) == [13, 2, 11, 2]
    
    def test_filter_primes_mixed_types(self):
        """Test bools, fractions and nested values are dropped."""
        assert filter_primes([True, 2.5, 7.0, None, [3], 5]) == [7, 5]
    
    def test_filter_primes_empty(self):
        assert filter_primes([]) == []
    
    def test_hcf_of(self):
        assert hcf_of([12, 18, 24]) == 6
        assert hcf_of([7]) == 7
    
    def test_lcm_of(self):
        assert lcm_of([4, 6]) == 12
        assert lcm_of([2, 3, 4]) == 12
        assert lcm_of([5]) == 5
    
    def test_folds_start_from_first_element(self):
        """Test a negative first element is kept as the initial accumulator."""
        assert hcf_of([-4]) == -4
        assert hcf_of([12, -18]) == -6
        assert lcm_of([-4]) == -4

    def test_lcm_of_with_zero(self):
        """Test a zero makes the lcm zero instead of dividing by zero."""
        assert lcm_of([0, 0]) == 0
        assert lcm_of([4, 0, 6]) == 0
    
    def test_lcm_of_divisible_by_every_element(self):
        values = [4, 6, 10, 15]
        result = lcm_of(values)
        
        assert result == 60
        assert all(result % v == 0 for v in values)
