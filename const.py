#!/usr/bin/env python3
"""Constants in the UNESCO 1983 equation of state routines.
"""

# Physical constants
GRAV = 9.80665  # Standard gravity, m s-2
DBAR2PA = 1e4  # Conversion factor, Pa/dbar
BAR2DBAR = 10.  # Conversion factor, dbar/bar

# Reference values
T68FACTOR = 1.00024  # IPTS-68 temperature per ITS-90 temperature
SALREF = 35.  # Reference salinity of the adiabatic gradient, psu

# Numerical constants
NCHUNKS = 8  # Default number of chunks in batch evaluation
