"""
Tests for the buoyancy frequency of profiles.
"""

import warnings

import numpy as np
import pytest

from adiabat import potential_temperature
from const import GRAV
from stratif import nsquared


class TestNSquared:
    """Tests for nsquared"""

    def test_stable_profile(self) -> None:
        """Cold water under warm water is stable"""
        nsq, pmid = nsquared([35.0, 35.0], [10.0, 5.0], [0.0, 100.0])
        assert nsq[0] == pytest.approx(7.0216767e-05, rel=1e-6)
        assert pmid[0] == 50.0

    def test_unstable_profile(self) -> None:
        """Fresher water under saltier water at equal temperature is unstable"""
        nsq, __ = nsquared([35.0, 34.0], [10.0, 10.0], [0.0, 100.0])
        assert nsq[0] < 0

    def test_homogeneous_profile_is_neutral(self) -> None:
        """Uniform potential temperature and salinity has (nearly) no stratification"""
        pres = np.linspace(0.0, 2000.0, 11)
        salt = np.full(pres.shape, 35.0)
        temp = potential_temperature(salt, 2.0, 0.0, pres)
        nsq, __ = nsquared(salt, temp, pres)
        assert np.all(np.abs(nsq) < 1e-8)

    def test_profiles_along_last_axis(self) -> None:
        """Several profiles at once"""
        pres = np.linspace(0.0, 1000.0, 6)
        temp = np.vstack([20.0 - pres / 100.0, 15.0 - pres / 200.0, 10.0 - pres / 500.0])
        nsq, pmid = nsquared(35.0, temp, pres)
        assert nsq.shape == (3, 5)
        assert pmid.shape == (3, 5)
        np.testing.assert_allclose(pmid[0], (pres[:-1] + pres[1:]) / 2)
        assert np.all(nsq > 0)

    def test_gravity_scales_squared(self) -> None:
        """nsq is proportional to g**2"""
        args = ([35.0, 35.0], [10.0, 5.0], [0.0, 100.0])
        nsq0, __ = nsquared(*args)
        nsq1, __ = nsquared(*args, grav=2 * GRAV)
        assert nsq1[0] == pytest.approx(4 * nsq0[0], rel=1e-12)

    def test_gravity_per_profile(self) -> None:
        """One gravity per profile applies along the profile axis"""
        pres = np.linspace(0.0, 400.0, 5)
        temp = np.vstack([12.0 - pres / 100.0] * 3)
        grav = np.array([[GRAV], [2 * GRAV], [3 * GRAV]])
        nsq, __ = nsquared(35.0, temp, pres, grav=grav)
        assert nsq.shape == (3, 4)
        np.testing.assert_allclose(nsq[1], 4 * nsq[0], rtol=1e-12)
        np.testing.assert_allclose(nsq[2], 9 * nsq[0], rtol=1e-12)

    def test_single_level(self) -> None:
        with pytest.raises(ValueError):
            nsquared([35.0], [10.0], [0.0])

    def test_scalar_input(self) -> None:
        with pytest.raises(ValueError):
            nsquared(35.0, 10.0, 0.0)

    def test_mismatched_shapes(self) -> None:
        with pytest.raises(ValueError):
            nsquared([35.0, 35.0, 35.0], [10.0, 5.0], [0.0, 100.0])

    def test_repeated_levels_warn(self) -> None:
        with pytest.warns(RuntimeWarning):
            nsq, __ = nsquared([35.0, 35.0, 35.0], [10.0, 5.0, 4.0], [0.0, 100.0, 100.0])
        assert not np.isfinite(nsq[1])

    def test_no_warning_for_regular_profile(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            nsquared([35.0, 35.0], [10.0, 5.0], [0.0, 100.0])
