"""
Tests for the helper module.

Checks:
1. Scalar detection
2. Horner evaluation order
3. Chunked batch evaluation on a thread pool
"""

import numpy as np
import pytest

import aux
from adiabat import potential_temperature
from eos80 import density


class TestIsScalar:
    """Tests for isscalar"""

    def test_floats(self) -> None:
        assert aux.isscalar(1.0, 2.0, 3)

    def test_zero_dim_array(self) -> None:
        """0-d arrays behave as scalars"""
        assert aux.isscalar(np.float64(1.0), np.array(2.0))

    def test_any_array(self) -> None:
        assert not aux.isscalar(1.0, np.zeros(3))
        assert not aux.isscalar([1.0, 2.0])


class TestPoly1d:
    """Tests for poly1d"""

    def test_horner_order(self) -> None:
        """Highest coefficient is multiplied first"""
        coefs = (999.842594, 6.793952e-2, -9.095290e-3)
        t = 12.3
        expected = (coefs[2] * t + coefs[1]) * t + coefs[0]
        assert float(aux.poly1d(t, coefs)) == expected

    def test_constant(self) -> None:
        assert float(aux.poly1d(5.0, (2.5,))) == 2.5

    def test_array(self) -> None:
        z = np.array([0.0, 1.0, 2.0])
        np.testing.assert_array_equal(aux.poly1d(z, (1.0, 1.0, 1.0)), [1.0, 3.0, 7.0])


class TestBatchApply:
    """Tests for batch_apply"""

    def test_matches_direct_evaluation(self) -> None:
        salt = np.linspace(30.0, 38.0, 101)
        temp = np.linspace(25.0, 1.0, 101)
        pres = np.linspace(0.0, 5000.0, 101)
        out = aux.batch_apply(density, salt, temp, pres, nchunks=7, maxworkers=3)
        np.testing.assert_allclose(out, density(salt, temp, pres), rtol=1e-14)

    def test_keeps_shape(self) -> None:
        salt = np.full((4, 5), 35.0)
        pres = np.linspace(0.0, 4000.0, 5)
        out = aux.batch_apply(potential_temperature, salt, 10.0, pres, 0.0)
        assert out.shape == (4, 5)
        np.testing.assert_allclose(
            out, potential_temperature(salt, 10.0, pres, 0.0), rtol=1e-14
        )

    def test_more_chunks_than_elements(self) -> None:
        out = aux.batch_apply(density, [35.0, 36.0], 10.0, 0.0, nchunks=50)
        assert out.shape == (2,)

    def test_empty_input(self) -> None:
        out = aux.batch_apply(density, np.array([]), 10.0, 0.0)
        assert out.shape == (0,)

    def test_scalar_input(self) -> None:
        out = aux.batch_apply(density, 35.0, 10.0, 0.0)
        assert isinstance(out, float)
        assert out == density(35.0, 10.0, 0.0)

    def test_invalid_chunks(self) -> None:
        with pytest.raises(ValueError):
            aux.batch_apply(density, [35.0], 10.0, 0.0, nchunks=0)
