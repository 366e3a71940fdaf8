#!/usr/bin/env python3
"""Module for mathematical functions.

This module isolates some of the mathematical functions used by the various
equation of state routines. In particular, it provides the bookkeeping needed
to accept either floats or numpy arrays, a Horner-scheme polynomial evaluator
whose order of operations is fixed, and a helper that splits large batches of
independent observations into chunks evaluated on a thread pool.
"""

# Import statements
from concurrent.futures import ThreadPoolExecutor
import numpy as np
from const import NCHUNKS


# Scalar functions
def isscalar(*args):
    """Determine whether a collection of objects does not need broadcasting.

    Determine whether a number of objects (each either a float or an array)
    need to be broadcast against each other. If not, the return type should be
    a scalar (float) instead of an array. This function returns whether or not
    the result is scalar.

    Arguments:
        arg0, arg1, ... (float or array): The elements to be tested.

    Returns:
        scalar (bool): True if all elements of the sequence are 0-dimensional.

    Examples
    --------
    >>> isscalar(35., 10., 0.)
    True
    >>> isscalar(35., np.array([5., 10.]))
    False
    """
    scalar = all(np.ndim(arg) == 0 for arg in args)
    return scalar


def asfloats(*args):
    """Convert each argument to a numpy array of floats.

    Arrays are returned as they are when they already hold floats; scalars
    become 0-d arrays so that all subsequent arithmetic follows numpy rules
    (in particular, division by zero gives inf instead of raising).

    Arguments:
        arg0, arg1, ... (float or array-like): The elements to convert.

    Returns:
        arrs (list of array): The converted elements, in order.
    """
    arrs = [np.asarray(arg, dtype=float) for arg in args]
    return arrs


# Polynomials
def poly1d(z, coefs):
    """Evaluate a 1d polynomial.

    Evaluate a polynomial in one variable with the given coefficients at the
    given point. Uses Horner's method, starting from the highest-degree
    coefficient, so that
        poly1d(t, (a0, a1, a2)) == (a2*t + a1)*t + a0
    holds bit for bit. The published UNESCO check values depend on this
    order of operations.

    Arguments:
        z (float or array): Point(s) to evaluate the polynomial at.
        coefs (iterable of float): Coefficients of the polynomial, from lowest
            degree to highest.

    Returns:
        p (array): Value of the polynomial at the point(s) `z`, with the shape
            of `z` (0-d for a scalar `z`).

    Examples
    --------
    >>> float(poly1d(2., (1., -3., 2.)))
    3.0
    """
    z = np.asarray(z, dtype=float)
    p = np.zeros(z.shape)

    # Iterate backwards over the coefficients
    for coef in coefs[-1::-1]:
        p *= z
        p += coef
    return p


# Batch evaluation
def batch_apply(fun, *args, nchunks=NCHUNKS, maxworkers=None):
    """Evaluate an elementwise function over chunks of the inputs.

    Broadcast the inputs against each other, split the flattened values into
    `nchunks` contiguous pieces and evaluate `fun` on every piece in a thread
    pool. Since each observation is independent of the others, the chunks can
    run in any order; the results are put back together in input order.

    Arguments:
        fun (callable): Elementwise function of the inputs with a single
            output, e.g. `eos80.density`.
        arg0, arg1, ... (float or array): Inputs to `fun`, broadcastable
            against each other.
        nchunks (int, optional): Number of chunks to split the inputs into
            (default `NCHUNKS`). Reduced to the number of elements if larger.
        maxworkers (int, optional): Maximum number of threads. If None
            (default) the `concurrent.futures` default is used.

    Returns:
        out (float or array): Output of `fun` with the broadcast shape of the
            inputs; a float if all inputs are scalar.

    Raises:
        ValueError: If `nchunks` is smaller than 1.

    Examples
    --------
    >>> batch_apply(np.hypot, [3., 5.], [4., 12.], nchunks=2)
    array([ 5., 13.])
    """
    if nchunks < 1:
        raise ValueError(f'The number of chunks must be positive: {nchunks}')
    if isscalar(*args):
        return float(fun(*args))

    # Flatten the broadcast inputs and cut them into pieces
    arrs = np.broadcast_arrays(*asfloats(*args))
    shape = arrs[0].shape
    size = arrs[0].size
    nchunks = max(min(nchunks, size), 1)
    pieces = [np.array_split(arr.ravel(), nchunks) for arr in arrs]

    # Evaluate each piece on the pool
    with ThreadPoolExecutor(max_workers=maxworkers) as executor:
        results = list(executor.map(fun, *pieces))
    out = np.concatenate([np.atleast_1d(res) for res in results])
    return out.reshape(shape)


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
