#!/usr/bin/env python3
"""Adiabatic lapse rate and potential quantities.

This module provides the UNESCO 1983 adiabatic temperature gradient and the
potential temperature and density derived from it. The potential temperature
is obtained by integrating the adiabatic gradient from the in-situ pressure to
the reference pressure with the four-stage Runge-Kutta scheme of Fofonoff and
Millard (1983). The stage coefficients of that scheme (built from 1/sqrt(2))
differ from the textbook 1/6, 1/3, 1/3, 1/6 weights and are reproduced exactly
here; a generic integrator does not match the published check values.

As with `eos80`, temperatures are given on the ITS-90 scale and converted to
IPTS-68 internally, and out-of-range inputs propagate as NaN or inf.
"""

# Import statements
import numpy as np
import aux
from eos80 import temp68, density
from const import T68FACTOR, SALREF

# Adiabatic gradient coefficients, page 44. Each tuple is a polynomial in
# IPTS-68 temperature; the suffix gives the power of pressure and whether the
# term multiplies the salinity anomaly (S).
CATG2 = (-4.6206e-13, 1.8676e-14, -2.1687e-16)
CATG1S = (-1.1351e-10, 2.7759e-12)
CATG1 = (-6.7795e-10, 8.733e-12, -5.4481e-14)
CATG10 = 1.8741e-8
CATG0S = (1.8932e-6, -4.2393e-8)
CATG0 = (8.5258e-6, -6.836e-8, 6.6228e-10)
CATG00 = 3.5803e-5

# Runge-Kutta stage coefficients, page 43
SQRT2 = np.sqrt(2.)
RKTH2 = 1 - 1/SQRT2
RKQ2D, RKQ2Q = 2 - SQRT2, -2 + 3/SQRT2
RKTH3 = 1 + 1/SQRT2
RKQ3D, RKQ3Q = 2 + SQRT2, -2 - 3/SQRT2


def _atg68(salt, t68, pres):
    dsal = salt - SALREF
    xp2 = aux.poly1d(t68, CATG2)
    xp1 = (aux.poly1d(t68, CATG1S)*dsal + aux.poly1d(t68, CATG1)*t68
           + CATG10)
    atg = ((xp2*pres + xp1)*pres + aux.poly1d(t68, CATG0S)*dsal
           + aux.poly1d(t68, CATG0)*t68 + CATG00)
    return atg


# Adiabatic gradient
def atg68(salt, t68, pres):
    """Calculate the adiabatic temperature gradient (IPTS-68).

    Calculate the adiabatic lapse rate from the practical salinity, IPTS-68
    temperature, and seawater pressure. The polynomial is written in the
    salinity anomaly S-35, so the salinity terms vanish at S = 35.

    The points can be given as numpy arrays as long as they are broadcastable
    against each other; all outputs will have this shape and type.

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        t68 (float or array): Temperature in degrees Celsius (IPTS-68).
        pres (float or array): Seawater pressure in dbar.

    Returns:
        atg (float or array): Adiabatic temperature gradient in K dbar-1.

    Examples
    --------
    >>> f'{atg68(40., 40., 1e4):.6e}'
    '3.255976e-04'
    """
    scalar = aux.isscalar(salt, t68, pres)
    salt, t68, pres = aux.asfloats(salt, t68, pres)
    atg = _atg68(salt, t68, pres)
    if scalar:
        atg = float(atg)
    return atg


def adiabatic_temperature_gradient(salt, temp, pres):
    """Calculate the adiabatic temperature gradient.

    Calculate the adiabatic lapse rate from the practical salinity, ITS-90
    temperature, and seawater pressure, using the UNESCO 1983 polynomial
    (Fofonoff and Millard, 1983, page 44).

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        temp (float or array): In-situ temperature in degrees Celsius
            (ITS-90).
        pres (float or array): Seawater pressure in dbar.

    Returns:
        atg (float or array): Adiabatic temperature gradient in K dbar-1.

    Examples
    --------
    >>> f'{adiabatic_temperature_gradient(40., 40., 1e4):.6e}'
    '3.256349e-04'
    """
    return atg68(salt, temp68(temp), pres)


# Potential quantities
def potential_temperature(salt, temp, pres, pref):
    """Calculate potential temperature.

    Calculate the potential temperature relative to a reference pressure from
    the practical salinity, in-situ temperature, and seawater pressure. The
    adiabatic gradient is integrated over the pressure step pref-pres with
    the four-stage Runge-Kutta scheme of Fofonoff and Millard (1983). When
    pres == pref, the in-situ temperature is returned (to rounding).

    The points can be given as numpy arrays as long as they are broadcastable
    against each other; all outputs will have this shape and type.

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        temp (float or array): In-situ temperature in degrees Celsius
            (ITS-90).
        pres (float or array): Seawater pressure in dbar.
        pref (float or array): Reference pressure in dbar.

    Returns:
        tpot (float or array): Potential temperature in degrees Celsius
            (ITS-90).

    Examples
    --------
    >>> round(potential_temperature(40., 40., 1e4, 0.), 5)
    36.89101
    >>> round(potential_temperature(35., 2., 0., 4e3), 5)
    2.34455
    """
    scalar = aux.isscalar(salt, temp, pres, pref)
    salt, temp, pres, pref = aux.asfloats(salt, temp, pres, pref)
    th = temp68(temp)
    dp = pref - pres

    with np.errstate(invalid='ignore'):
        dth = dp * _atg68(salt, th, pres)
        th = th + dth/2
        q = dth

        dth = dp * _atg68(salt, th, pres + dp/2)
        th = th + RKTH2*(dth - q)
        q = RKQ2D*dth + RKQ2Q*q

        dth = dp * _atg68(salt, th, pres + dp/2)
        th = th + RKTH3*(dth - q)
        q = RKQ3D*dth + RKQ3Q*q

        dth = dp * _atg68(salt, th, pres + dp)
        th = th + (dth - 2*q)/6

    tpot = th / T68FACTOR
    if scalar:
        tpot = float(tpot)
    return tpot


def potential_density(salt, temp, pres, pref):
    """Calculate potential density.

    Calculate the density a water parcel would have when moved adiabatically
    from its in-situ pressure to the reference pressure: the density at the
    reference pressure of the potential temperature.

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        temp (float or array): In-situ temperature in degrees Celsius
            (ITS-90).
        pres (float or array): Seawater pressure in dbar.
        pref (float or array): Reference pressure in dbar.

    Returns:
        rhopot (float or array): Potential density in kg m-3.

    Examples
    --------
    >>> round(potential_density(35., 20., 2e3, 0.), 5)
    1024.86186
    """
    tpot = potential_temperature(salt, temp, pres, pref)
    rhopot = density(salt, tpot, pref)
    return rhopot


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
