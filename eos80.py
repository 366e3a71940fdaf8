#!/usr/bin/env python3
"""UNESCO 1983 equation of state.

This module contains the UNESCO 1983 (EOS-80) polynomial equation of state of
seawater. The functions here calculate the density of seawater and its secant
bulk modulus from the practical salinity, in-situ temperature, and seawater
(gauge) pressure. The freezing temperature of seawater at atmospheric pressure
is provided as well.

The polynomials were fitted on the IPTS-68 temperature scale; all functions
take ITS-90 temperatures and convert them with `temp68`. Each polynomial is
kept as an ordered tuple of coefficients and evaluated with `aux.poly1d`, so
the order of operations matches the published algorithms and the check values
are reproduced to the last printed digit.

For details on the equation of state, see:
    Fofonoff, N. P., Millard, R. C., 1983: Algorithms for computation of
    fundamental properties of seawater. UNESCO Technical Papers in Marine
    Science, No. 44. UNESCO: Paris. 53 pp.
For details on the temperature scales, see:
    Saunders, P. M., 1990: The International Temperature Scale of 1990,
    ITS-90. WOCE Newsletter, No. 10, p. 10.

Out-of-range inputs (e.g. negative salinity) are not checked; they produce
NaN or inf, which propagate silently.
"""

# Import statements
import numpy as np
import aux
from const import T68FACTOR, BAR2DBAR

# Density of pure water, equation 14 (a0..a5)
CWAT = (999.842594, 6.793952e-2, -9.095290e-3, 1.001685e-4, -1.120083e-6,
        6.536332e-9)
# Salinity terms of the density at zero pressure, equation 13
CSALB = (8.24493e-1, -4.0899e-3, 7.6438e-5, -8.2467e-7, 5.3875e-9)
CSALC = (-5.72466e-3, 1.0227e-4, -1.6546e-6)
CSALD = 4.8314e-4

# Secant bulk modulus of pure water, equation 19 (e0..e4)
CKW = (19652.21, 148.4206, -2.327105, 1.360477e-2, -5.155288e-5)
# Salinity terms at zero pressure, equation 16 (f0..f3, g0..g2)
CKF = (54.6746, -0.603459, 1.09987e-2, -6.1670e-5)
CKG = (7.944e-2, 1.6483e-2, -5.3009e-4)
# Linear pressure terms, equation 17 (h0..h3, i0..i2, j0)
CAW = (3.239908, 1.43713e-3, 1.16092e-4, -5.77905e-7)
CAI = (2.2838e-3, -1.0981e-5, -1.6078e-6)
CAJ = 1.91075e-4
# Quadratic pressure terms, equation 18 (k0..k2, m0..m2)
CBW = (8.50935e-5, -6.12293e-6, 5.2787e-8)
CBM = (-9.9348e-7, 2.0816e-8, 9.1697e-10)

# Freezing temperature at atmospheric pressure
CFRZ = (-0.0575, 1.710523e-3, -2.154996e-4)


# Temperature scales
def temp68(temp):
    """Convert ITS-90 temperature to IPTS-68 temperature.

    Arguments:
        temp (float or array): Temperature in degrees Celsius (ITS-90).

    Returns:
        t68 (float or array): Temperature in degrees Celsius (IPTS-68).

    Examples
    --------
    >>> temp68(10.)
    10.0024
    """
    t68 = T68FACTOR * temp
    return t68


# Array implementations; t is the IPTS-68 temperature, p the pressure in bar
def _dens_wat(t):
    return aux.poly1d(t, CWAT)


def _dens0(salt, t):
    bsal = aux.poly1d(t, CSALB)
    csal = aux.poly1d(t, CSALC)
    rho0 = _dens_wat(t) + ((bsal + csal*np.sqrt(salt)) + CSALD*salt)*salt
    return rho0


def _kbulk0(salt, t):
    # Pure water, then salinity correction
    kw = aux.poly1d(t, CKW)
    k0 = kw + (aux.poly1d(t, CKF) + aux.poly1d(t, CKG)*np.sqrt(salt))*salt
    return k0


def _kbulk(salt, t, p):
    k0 = _kbulk0(salt, t)

    # Pressure correction
    aw = aux.poly1d(t, CAW)
    acoef = aw + (aux.poly1d(t, CAI) + CAJ*np.sqrt(salt))*salt
    bw = aux.poly1d(t, CBW)
    bcoef = bw + aux.poly1d(t, CBM)*salt
    k = k0 + (acoef + bcoef*p)*p

    # At zero pressure the modulus is exactly k0
    k = np.where(p == 0, k0, k)
    return k


# Density
def dens_wat(temp):
    """Calculate the density of pure water at atmospheric pressure.

    Calculate the density of Standard Mean Ocean Water (salt-free) at zero
    seawater pressure from the temperature. Equation 14 of Fofonoff and
    Millard (1983).

    Arguments:
        temp (float or array): Temperature in degrees Celsius (ITS-90).

    Returns:
        rhow (float or array): Density in kg m-3.

    Examples
    --------
    >>> round(dens_wat(5.), 5)
    999.96673
    """
    scalar = aux.isscalar(temp)
    (temp,) = aux.asfloats(temp)
    rhow = _dens_wat(temp68(temp))
    if scalar:
        rhow = float(rhow)
    return rhow


def dens0(salt, temp):
    """Calculate the density of seawater at atmospheric pressure.

    Calculate the density of seawater at zero seawater pressure from the
    practical salinity and temperature. Equation 13 of Fofonoff and Millard
    (1983).

    The points can be given as numpy arrays as long as they are broadcastable
    against each other; all outputs will have this shape and type.

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        temp (float or array): Temperature in degrees Celsius (ITS-90).

    Returns:
        rho0 (float or array): Density in kg m-3. NaN for negative salinity.

    Examples
    --------
    >>> round(dens0(35., 5.), 5)
    1027.67533
    """
    scalar = aux.isscalar(salt, temp)
    salt, temp = aux.asfloats(salt, temp)
    with np.errstate(invalid='ignore'):
        rho0 = _dens0(salt, temp68(temp))
    if scalar:
        rho0 = float(rho0)
    return rho0


def secant_bulk_modulus0(salt, temp):
    """Calculate the secant bulk modulus at atmospheric pressure.

    Calculate the secant bulk modulus of seawater at zero seawater pressure:
    the pure water modulus (equation 19) with its salinity correction
    (equation 16) of Fofonoff and Millard (1983).

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        temp (float or array): Temperature in degrees Celsius (ITS-90).

    Returns:
        k0 (float or array): Secant bulk modulus in bar.
    """
    scalar = aux.isscalar(salt, temp)
    salt, temp = aux.asfloats(salt, temp)
    with np.errstate(invalid='ignore'):
        k0 = _kbulk0(salt, temp68(temp))
    if scalar:
        k0 = float(k0)
    return k0


def secant_bulk_modulus(salt, temp, pres):
    """Calculate the secant bulk modulus of seawater.

    Calculate the secant bulk modulus from the practical salinity,
    temperature, and seawater pressure. The modulus is built in three tiers:
    pure water (equation 19), salinity correction (equation 16) and pressure
    correction (equations 15, 17, 18) of Fofonoff and Millard (1983). At zero
    pressure only the first two tiers are used.

    The points can be given as numpy arrays as long as they are broadcastable
    against each other; all outputs will have this shape and type.

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        temp (float or array): Temperature in degrees Celsius (ITS-90).
        pres (float or array): Seawater pressure in dbar (absolute pressure
            minus 1 atm).

    Returns:
        k (float or array): Secant bulk modulus in bar.

    Examples
    --------
    >>> round(secant_bulk_modulus(35., 5., 0.), 4)
    22186.0668
    """
    scalar = aux.isscalar(salt, temp, pres)
    salt, temp, pres = aux.asfloats(salt, temp, pres)
    with np.errstate(invalid='ignore'):
        k = _kbulk(salt, temp68(temp), pres/BAR2DBAR)
    if scalar:
        k = float(k)
    return k


def density(salt, temp, pres):
    """Calculate the density of seawater.

    Calculate the in-situ density of seawater from the practical salinity,
    temperature, and seawater pressure, using the density at zero pressure
    corrected by the secant bulk modulus. Equation 7 of Fofonoff and Millard
    (1983):
        rho = rho0 / (1 - p/K)
    with the pressure p in bar.

    The points can be given as numpy arrays as long as they are broadcastable
    against each other; all outputs will have this shape and type.

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).
        temp (float or array): Temperature in degrees Celsius (ITS-90).
        pres (float or array): Seawater pressure in dbar (absolute pressure
            minus 1 atm).

    Returns:
        rho (float or array): Density in kg m-3.

    Examples
    --------
    >>> round(density(35., 5., 0.), 5)
    1027.67533
    >>> round(density(35., 25., 1e4), 5)
    1062.53584
    >>> density([0., 35.], 5., 0.).round(5)
    array([ 999.96673, 1027.67533])
    """
    scalar = aux.isscalar(salt, temp, pres)
    salt, temp, pres = aux.asfloats(salt, temp, pres)
    t = temp68(temp)
    p = pres / BAR2DBAR
    with np.errstate(divide='ignore', invalid='ignore'):
        rho0 = _dens0(salt, t)
        k = _kbulk(salt, t, p)
        rho = np.where(pres == 0, rho0, rho0 / (1 - p/k))
    if scalar:
        rho = float(rho)
    return rho


# Freezing point
def freezing_temperature(salt):
    """Calculate the freezing temperature of seawater.

    Calculate the freezing temperature of seawater at atmospheric pressure
    from the practical salinity.

    Arguments:
        salt (float or array): Practical salinity in psu (PSS-78).

    Returns:
        tfrz (float or array): Freezing temperature in degrees Celsius.

    Examples
    --------
    >>> round(freezing_temperature(35.), 4)
    -1.9223
    """
    scalar = aux.isscalar(salt)
    (salt,) = aux.asfloats(salt)
    a0, a1, a2 = CFRZ
    with np.errstate(invalid='ignore'):
        tfrz = (a0 + a1*np.sqrt(salt) + a2*salt)*salt
    if scalar:
        tfrz = float(tfrz)
    return tfrz


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
