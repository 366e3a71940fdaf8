#!/usr/bin/env python3
"""Stratification of seawater profiles.

This module calculates the squared buoyancy frequency of vertical profiles of
practical salinity, in-situ temperature and pressure. Neighbouring samples are
brought adiabatically to their mid pressure before their densities are
compared, so that compressibility does not show up as stratification.
"""

# Import statements
import warnings
import numpy as np
import aux
from adiabat import potential_density
from const import GRAV, DBAR2PA


def nsquared(salt, temp, pres, grav=GRAV):
    """Calculate the squared buoyancy frequency.

    Calculate the squared buoyancy (Brunt-Vaisala) frequency at the mid
    pressures of a profile. With hydrostatic balance, dp = -rho*g*dz, the
    usual definition
        nsq = -g/rho * drho/dz
    becomes
        nsq = g**2 * drho/dp
    where drho is the difference of potential density referenced to the mid
    pressure between consecutive samples. Positive values mean stable
    stratification.

    The profiles run along the last axis and must be ordered by pressure.
    The inputs can be numpy arrays as long as they are broadcastable against
    each other.

    Arguments:
        salt (array): Practical salinity in psu (PSS-78).
        temp (array): In-situ temperature in degrees Celsius (ITS-90).
        pres (array): Seawater pressure in dbar.
        grav (float or array, optional): Gravitational acceleration in m s-2
            (default `GRAV`). Latitude-dependent values are supplied by the
            caller and must broadcast against `nsq`; one value per profile
            needs a trailing axis of length 1, e.g. shape (nprof, 1).

    Returns:
        nsq (array): Squared buoyancy frequency in s-2, with one fewer sample
            along the last axis.
        pmid (array): Mid pressures in dbar where `nsq` is given.

    Raises:
        ValueError: If the inputs cannot be broadcast against each other or
            have fewer than two samples along the last axis.
        RuntimeWarning: If two consecutive samples have the same pressure.

    Examples
    --------
    >>> nsq, pmid = nsquared([35., 35.], [10., 5.], [0., 100.])
    >>> f'{nsq[0]:.6e}', float(pmid[0])
    ('7.021677e-05', 50.0)
    """
    salt, temp, pres = np.broadcast_arrays(*aux.asfloats(salt, temp, pres))
    if salt.ndim == 0 or salt.shape[-1] < 2:
        raise ValueError(
            'The profiles must have at least two samples along the last axis')

    # Bring both neighbours to the mid pressure
    pmid = (pres[..., :-1] + pres[..., 1:]) / 2
    rhoup = potential_density(
        salt[..., :-1], temp[..., :-1], pres[..., :-1], pmid)
    rhodn = potential_density(
        salt[..., 1:], temp[..., 1:], pres[..., 1:], pmid)

    # Difference in pressure
    dpres = pres[..., 1:] - pres[..., :-1]
    if np.any(dpres == 0):
        msg = 'Repeated pressure levels in the profile.\n'
        msg += f'\tNumber of repeated levels: {np.count_nonzero(dpres == 0)}\n'
        warnings.warn(msg, category=RuntimeWarning)
    with np.errstate(divide='ignore', invalid='ignore'):
        nsq = grav**2 * (rhodn - rhoup) / (dpres*DBAR2PA)
    return (nsq, pmid)


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
