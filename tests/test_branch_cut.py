"""Tests for the closed-form imaginary part on the negative real axis."""

import numpy as np
import pytest
from scipy import special

from expint.branch_cut import branch_cut_imag


class TestBranchCutImag:
    """Test branch_cut_imag."""

    @pytest.mark.parametrize("nu", [0.5, 1.0, 1.5, 2.5, 3.0, 7.25])
    @pytest.mark.parametrize("x", [-3.0, -5.0, -12.5])
    def test_real_order(self, nu, x):
        """For real ν, Im Eν(x) = -π |x|^(ν-1) / Γ(ν)."""
        expected = -np.pi * abs(x) ** (nu - 1) / special.gamma(nu)
        value = branch_cut_imag(nu, x)
        assert value.real == 0.0
        assert np.isclose(value.imag, expected, rtol=1e-13, atol=0)

    def test_e1(self):
        """Im E1(x) = -π on the negative real axis."""
        assert np.isclose(branch_cut_imag(1, -4.0).imag, -np.pi, rtol=1e-15)

    @pytest.mark.parametrize("nu", [0, -1, -3])
    def test_non_positive_integer(self, nu):
        """Eν is real on the axis when 1/Γ(ν) vanishes."""
        assert branch_cut_imag(nu, -6.0) == 0j

    def test_negative_zero_imaginary(self):
        """A -0.0 imaginary part of the input does not flip the side."""
        assert branch_cut_imag(2.5, complex(-5.0, -0.0)) == branch_cut_imag(2.5, -5.0)

    def test_complex_order_rejected(self):
        """The closed form only holds for real ν."""
        with pytest.raises(ValueError, match="real order"):
            branch_cut_imag(1.5 + 0.5j, -4.0)

    def test_real_valued_complex_order(self):
        """A complex ν with zero imaginary part is accepted."""
        assert branch_cut_imag(2.5 + 0j, -5.0) == branch_cut_imag(2.5, -5.0)
