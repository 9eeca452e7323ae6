# Copyright European Space Agency, 2013

"""
The coordkit package converts between 3D cartesian unit vectors and
angular coordinates on the celestial sphere and contains the vector and
3x3 matrix arithmetic needed to rotate and combine directions.

The :mod:`coordkit.vector`, :mod:`coordkit.spherical` and :mod:`coordkit.matrix`
modules contain the value types. Their methods write into the receiver and
return it, e.g. ``Vector3().fromSpherical(s)``.

The :mod:`coordkit.sequence` module broadcasts these conversions over
lists of coordinates, :mod:`coordkit.arrays` does the same with
vectorized numpy code for large amounts of data.

The :mod:`coordkit.ecliptic` module converts between the equatorial and
the ecliptic frame.

No operation raises for invalid numbers. Out-of-domain values, like the
latitude of a vector longer than 1, turn into NaN.
"""

from ._version import __version__, __version_info__

from coordkit.angle import TWO_PI, normalizeRA
from coordkit.vector import Vector3
from coordkit.spherical import Spherical, Equatorial
from coordkit.matrix import Matrix3
from coordkit.sequence import Vector3Seq, SphericalSeq, EquatorialSeq
