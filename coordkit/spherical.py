# Copyright European Space Agency, 2013

"""
Angular coordinates on the unit sphere.

:class:`Spherical` is a general purpose (lon, lat) pair, :class:`Equatorial`
is referenced to the Earth's rotational axis and keeps its right ascension
normalized to [0, 2pi). Both store plain radians and share
:func:`coordkit.angle.normalizeRA`.
"""

import numpy as np
from astropy.coordinates import Angle, Longitude
import astropy.units as u

from coordkit.angle import normalizeRA, atan2, asin

class Spherical:
    """
    Spherical coordinates (lon, lat) in radians.

    The longitude is stored as given, only conversions from cartesian
    vectors normalize it.
    """
    def __init__(self, lon=0.0, lat=0.0):
        self.lon = lon
        self.lat = lat

    def fromVector3(self, v):
        """
        Converts a cartesian unit vector to spherical coordinates.

        The longitude is normalized to [0, 2pi). If |v.z| > 1 the latitude
        is NaN. At the poles the longitude is 0.

        :type v: :class:`coordkit.vector.Vector3`
        """
        self.lon = normalizeRA(atan2(v.y, v.x))
        self.lat = asin(v.z)
        return self

    def fromEquatorial(self, e):
        self.lon = e.ra
        self.lat = e.dec
        return self

    def copy(self):
        return Spherical(self.lon, self.lat)

    def __eq__(self, other):
        if not isinstance(other, Spherical):
            return NotImplemented
        return self.lon == other.lon and self.lat == other.lat

    __hash__ = None

    def __repr__(self):
        return 'Spherical(lon={!r}, lat={!r})'.format(self.lon, self.lat)

class Equatorial:
    """
    Equatorial coordinates (ra, dec) in radians.

    Any value assigned to `ra` is normalized to [0, 2pi).
    The declination is not normalized.
    """
    def __init__(self, ra=0.0, dec=0.0):
        self.ra = ra
        self.dec = dec

    @property
    def ra(self):
        return self._ra

    @ra.setter
    def ra(self, rad):
        self._ra = normalizeRA(rad)

    @classmethod
    def fromDegrees(cls, raDeg, decDeg):
        return cls(float(np.deg2rad(raDeg)), float(np.deg2rad(decDeg)))

    @classmethod
    def fromAstropy(cls, ra, dec):
        """
        :param ra, dec: astropy angle quantities, e.g. Longitude and Latitude
        """
        return cls(float(Angle(ra).to_value(u.rad)), float(Angle(dec).to_value(u.rad)))

    def toAstropy(self):
        """
        The declination is returned as a plain Angle since it is not
        range checked here, unlike astropy's Latitude.

        :rtype: tuple (Longitude, Angle)
        """
        return Longitude(self.ra * u.rad), Angle(self.dec * u.rad)

    def fromVector3(self, v):
        """
        Converts a cartesian unit vector to equatorial coordinates.

        :type v: :class:`coordkit.vector.Vector3`
        """
        self.ra = atan2(v.y, v.x)
        self.dec = asin(v.z)
        return self

    def fromSpherical(self, s):
        self.ra = s.lon
        self.dec = s.lat
        return self

    def copy(self):
        return Equatorial(self.ra, self.dec)

    def __eq__(self, other):
        if not isinstance(other, Equatorial):
            return NotImplemented
        return self.ra == other.ra and self.dec == other.dec

    __hash__ = None

    def __repr__(self):
        return 'Equatorial(ra={!r}, dec={!r})'.format(self.ra, self.dec)

    def __str__(self):
        ra = Angle(self.ra * u.rad).to_string(unit=u.hourangle, sep=':', precision=2)
        dec = Angle(self.dec * u.rad).to_string(unit=u.deg, sep=':', precision=1,
                                                alwayssign=True)
        return 'RA ' + ra + ', Dec ' + dec
