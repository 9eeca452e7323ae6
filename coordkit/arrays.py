# Copyright European Space Agency, 2013

"""
This module contains fast and memory-efficient versions of the
conversions in :mod:`coordkit.sequence` operating on numpy arrays.

Vectors are stored with shape (3,...) instead of (...,3) which has better
memory access performance: x, y, and z are then each a contiguous block
of memory. Angle pairs are stored with shape (2,...) as (lon, lat) or
(ra, dec), in radians.

All functions accept an `out` array. If it has the right shape and is a
contiguous float64 array it is written in place and returned, otherwise
a new array is allocated.
"""

import logging

import numpy as np
from numexpr import evaluate as ne

from coordkit.angle import TWO_PI
from coordkit.matrix import Matrix3

def _output(out, shape):
    if out is not None:
        if (isinstance(out, np.ndarray) and out.shape == shape and
                out.dtype == np.float64 and out.flags.c_contiguous):
            return out
        logging.debug('output ' + type(out).__name__ + ' with shape ' +
                      str(np.shape(out)) + ' cannot be reused, allocating ' + str(shape))
    return np.empty(shape, np.float64)

def normalizeRA(angles, out=None):
    """
    Normalize right ascensions or longitudes into [0, 2pi).

    :param angles: array of angles in radians
    :rtype: ndarray with shape as input
    """
    angles = np.asarray(angles, dtype=np.float64)
    res = _output(out, angles.shape)
    with np.errstate(invalid='ignore'): # inf -> nan
        np.fmod(angles, TWO_PI, res)
        res[res < 0] += TWO_PI
        # tiny negatives round up to 2pi
        res[res == TWO_PI] = 0
    res += 0.0 # -0.0 -> 0.0
    return res

def sphericalToCartesian(lon, lat, out=None):
    """
    Convert spherical coordinates to cartesian unit vectors.
    Inputs must be arrays or scalars of the same shape.

    :param lon: longitudes or right ascensions in radians
    :param lat: latitudes or declinations in radians
    :param out: may share memory with lon and lat
    :rtype: ndarray of shape (3,) + lon.shape
    """
    lon = np.asarray(lon, dtype=np.float64)
    lat = np.asarray(lat, dtype=np.float64)
    assert lon.shape == lat.shape
    res = _output(out, (3,) + lat.shape)
    # x and y are written before lon and lat are read for the last time
    if np.shares_memory(res, lon):
        lon = lon.copy()
    if np.shares_memory(res, lat):
        lat = lat.copy()
    n = lat.size
    # 1d views, numexpr needs an array for out=
    lon = lon.reshape(n)
    lat = lat.reshape(n)
    x, y, z = res.reshape(3, n)
    ne('cos(lat)', out=x)
    y[:] = x
    ne('x * cos(lon)', out=x)
    ne('y * sin(lon)', out=y)
    ne('sin(lat)', out=z)
    return res

def cartesianToSpherical(xyz, out=None):
    """
    Convert cartesian unit vectors to spherical coordinates.

    The longitude is normalized to [0, 2pi). Where |z| > 1 the latitude
    is NaN.

    :param xyz: array of shape (3,...)
    :param out: may be a view of xyz, e.g. xyz[:2]
    :rtype: ndarray of shape (2,) + xyz.shape[1:] with (lon, lat) in radians
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    assert xyz.shape[0] == 3
    res = _output(out, (2,) + xyz.shape[1:])
    n = res[0].size
    x, y, z = xyz.reshape(3, n)
    lon, lat = res.reshape(2, n)
    # lon first, out may be a view of xyz
    ne('arctan2(y, x)', out=lon)
    normalizeRA(lon, lon)
    ne('arcsin(z)', out=lat)
    return res

def multiplyMatrix(m, xyz, out=None):
    """
    Multiply each vector by m. If m is a rotation matrix then
    this rotates the vectors.

    :param m: :class:`~coordkit.matrix.Matrix3` or array of shape (3,3)
    :param xyz: array of shape (3,...)
    :param out: may be xyz
    :rtype: ndarray with shape as xyz
    """
    if isinstance(m, Matrix3):
        mat = m.asArray()
    else:
        mat = np.asarray(m, dtype=np.float64)
    assert mat.shape == (3,3)
    xyz = np.asarray(xyz, dtype=np.float64)
    assert xyz.shape[0] == 3
    res = _output(out, xyz.shape)
    res[...] = np.tensordot(mat, xyz, axes=1)
    return res
