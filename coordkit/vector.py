# Copyright European Space Agency, 2013

"""
This module contains the :class:`Vector3` type, a general purpose
3D cartesian coordinate.

All producing methods write their result into the receiver and return it,
so that calls can be chained and buffers reused::

    volume = Vector3().cross(a, b).dot(c)

The receiver may be one of the arguments, e.g. ``a.add(a, b)``.
"""

from coordkit.angle import sincos
from coordkit.spherical import Spherical

class Vector3:
    """
    A 3D cartesian vector (x, y, z).

    No invariant is enforced, it can represent a unit vector on the
    celestial sphere as well as an arbitrary vector.
    """
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = x
        self.y = y
        self.z = z

    def negate(self, a):
        """ Sets self = -a, returns self. """
        self.x = -a.x
        self.y = -a.y
        self.z = -a.z
        return self

    def add(self, a, b):
        """ Sets self = a + b, returns self. """
        self.x = a.x + b.x
        self.y = a.y + b.y
        self.z = a.z + b.z
        return self

    def subtract(self, a, b):
        """ Sets self = a - b, returns self. """
        self.x = a.x - b.x
        self.y = a.y - b.y
        self.z = a.z - b.z
        return self

    def scale(self, a, k):
        """ Sets self = a * k (element-wise), returns self. """
        self.x = a.x * k
        self.y = a.y * k
        self.z = a.z * k
        return self

    def dot(self, b):
        """ Return the dot product of self and b. """
        return self.x*b.x + self.y*b.y + self.z*b.z

    def normSquared(self):
        return self.x*self.x + self.y*self.y + self.z*self.z

    def cross(self, a, b):
        """ Sets self = a x b, returns self. """
        self.x, self.y, self.z = (a.y*b.z - a.z*b.y,
                                  a.z*b.x - a.x*b.z,
                                  a.x*b.y - a.y*b.x)
        return self

    def rotateAroundX(self, a, sin, cos):
        """
        Rotates the coordinate system around the X axis using the sine
        and cosine of the rotation angle. Pass -sin for the inverse rotation.

        This is useful for converting between equatorial and ecliptic
        coordinates, see :mod:`coordkit.ecliptic`.

        Sets self = a rotated by (sin, cos), returns self.
        """
        self.x, self.y, self.z = a.x, a.z*sin + a.y*cos, a.z*cos - a.y*sin
        return self

    def multiplyMatrix(self, m, a):
        """
        Sets self = m x a, returns self.

        If m is a rotation matrix then this rotates a by m.

        :type m: :class:`coordkit.matrix.Matrix3`
        """
        self.x, self.y, self.z = (m[0]*a.x + m[1]*a.y + m[2]*a.z,
                                  m[3]*a.x + m[4]*a.y + m[5]*a.z,
                                  m[6]*a.x + m[7]*a.y + m[8]*a.z)
        return self

    def fromSpherical(self, s):
        """
        Converts spherical coordinates (lon, lat) to a cartesian unit vector.

        :type s: :class:`coordkit.spherical.Spherical`
        """
        sinLon, cosLon = sincos(s.lon)
        sinLat, cosLat = sincos(s.lat)
        self.x = cosLat * cosLon
        self.y = cosLat * sinLon
        self.z = sinLat
        return self

    def fromEquatorial(self, e):
        """
        Converts equatorial coordinates (ra, dec) to a cartesian unit vector.

        :type e: :class:`coordkit.spherical.Equatorial`
        """
        return self.fromSpherical(Spherical().fromEquatorial(e))

    def copy(self):
        return Vector3(self.x, self.y, self.z)

    def __neg__(self):
        return Vector3().negate(self)

    def __add__(self, other):
        return Vector3().add(self, other)

    def __sub__(self, other):
        return Vector3().subtract(self, other)

    def __mul__(self, k):
        return Vector3().scale(self, k)

    __rmul__ = __mul__

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __repr__(self):
        return 'Vector3(x={!r}, y={!r}, z={!r})'.format(self.x, self.y, self.z)
