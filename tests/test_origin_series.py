"""Tests for the expansion of Eν(z) about the origin."""

import numpy as np
import pytest

from expint.origin_series import (is_integer_order, origin_series,
                                  origin_series_general, origin_series_integer)


class TestIntegerOrderPredicate:
    """Test is_integer_order."""

    def test_integers(self):
        assert is_integer_order(1)
        assert is_integer_order(3.0)
        assert is_integer_order(-2 + 0j)
        assert is_integer_order(0)

    def test_non_integers(self):
        assert not is_integer_order(1.5)
        assert not is_integer_order(2 + 1e-12j)
        assert not is_integer_order(1 + 1e-10)


class TestGeneralOrder:
    """Origin series for non-integer ν."""

    @pytest.mark.parametrize("nu,z", [
        (0.5, 1.0),
        (0.5, 1.0 + 1.0j),
        (2.5, -2.5 + 0.5j),
        (-1.5, 2.0j),
        (1.3 - 0.4j, 0.7 - 1.1j),
        (7.25, 2.9),
        (0.001, 0.05),
    ])
    def test_against_reference(self, nu, z, reference_en):
        """Matches mpmath for |z| < 3."""
        result = origin_series_general(nu, z)
        assert np.isclose(result.value, reference_en(nu, z), rtol=1e-11, atol=0)
        assert result.terms < 100

    def test_non_positive_integer_order(self, reference_en):
        """Non-positive integers use the general form without division by zero."""
        for nu in (-1, -2, -5):
            value = origin_series(nu, 1.5 - 0.5j).value
            assert np.isclose(value, reference_en(nu, 1.5 - 0.5j), rtol=1e-12, atol=0)

    def test_term_cap(self):
        """max_terms bounds the number of terms."""
        result = origin_series_general(0.5, 2.5, max_terms=5)
        assert result.terms == 5


class TestIntegerOrder:
    """Origin series for positive integer n."""

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 10])
    @pytest.mark.parametrize("z", [0.5, 2.0, 1.0 + 2.0j, -2.0 + 0.3j, 0.1 - 2.5j])
    def test_against_reference(self, n, z, reference_en):
        """Matches mpmath, including complex z where (-z)^(n-1) is complex."""
        result = origin_series_integer(n, z)
        assert np.isclose(result.value, reference_en(n, z), rtol=1e-11, atol=0)

    def test_uses_argument_in_power_term(self, reference_en):
        """The (-z)^(n-1)/(n-1)! factor is built from z itself."""
        z = 1.2 + 1.7j
        # for n = 3 the log term is z^2/2 (ψ(3) - log z); its imaginary
        # part depends on Im z, which a real-only factor would lose
        value = origin_series_integer(3, z).value
        assert np.isclose(value, reference_en(3, z), rtol=1e-12, atol=0)
        assert np.isclose(origin_series_integer(3, z.conjugate()).value,
                          np.conj(value), rtol=1e-14)

    def test_dispatch_to_integer_form(self):
        """origin_series routes positive integers to the log-singular form."""
        z = 0.8 + 0.2j
        assert origin_series(2, z) == origin_series_integer(2, z)
        assert origin_series(2.0 + 0j, z) == origin_series_integer(2, z)

    def test_rejects_non_positive(self):
        """The integer form is defined for n ≥ 1."""
        with pytest.raises(ValueError):
            origin_series_integer(0, 1.0)
