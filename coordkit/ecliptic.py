# Copyright European Space Agency, 2013

"""
Conversion between equatorial and ecliptic cartesian coordinates.

Both frames share the X axis (the direction of the vernal equinox), so the
conversion is a rotation around X by the obliquity of the ecliptic.
"""

import numpy as np

from coordkit.angle import sincos
from coordkit.matrix import Matrix3

# IAU 1976 mean obliquity of the ecliptic at J2000 (84381.448 arcsec)
OBLIQUITY_J2000 = float(np.deg2rad(84381.448 / 3600))

def equatorialToEcliptic(dst, v, obliquity=OBLIQUITY_J2000):
    """
    Sets dst = v rotated from the equatorial into the ecliptic frame,
    returns dst. dst may be v.

    :type dst, v: :class:`~coordkit.vector.Vector3`
    :param obliquity: in radians
    """
    sin, cos = sincos(obliquity)
    return dst.rotateAroundX(v, sin, cos)

def eclipticToEquatorial(dst, v, obliquity=OBLIQUITY_J2000):
    """
    Inverse of :func:`equatorialToEcliptic`.
    """
    sin, cos = sincos(obliquity)
    return dst.rotateAroundX(v, -sin, cos)

def eclipticMatrix(obliquity=OBLIQUITY_J2000):
    """
    Return the matrix converting equatorial to ecliptic vectors.
    Its transpose converts ecliptic to equatorial vectors.

    Use it with :meth:`coordkit.sequence.Vector3Seq.multiplyMatrix` or
    :func:`coordkit.arrays.multiplyMatrix` to convert many vectors at once.

    :rtype: :class:`~coordkit.matrix.Matrix3`
    """
    return Matrix3.rotationX(*sincos(obliquity))
