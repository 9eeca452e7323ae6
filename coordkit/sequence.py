# Copyright European Space Agency, 2013

"""
Ordered sequences of vectors and angular coordinates.

Each sequence type is a list of its element type and broadcasts the
element conversions over another sequence, index for index.
The receiver is the output: its length is adjusted to the length of the
input, existing element objects are reused and only missing ones are
created. The receiver is returned.

The receiver's elements must be distinct objects, which is always the case
for the elements created here. A receiver holding the same object at
several indices, e.g. ``Vector3Seq([v]*3)``, or holding objects of the
input at other indices, ends up with one shared result. The receiver may
be the input sequence itself.

For large numbers of coordinates see the vectorized functions in
:mod:`coordkit.arrays`.
"""

import logging

from coordkit.vector import Vector3
from coordkit.spherical import Spherical, Equatorial

def _resize(seq, n, factory):
    missing = n - len(seq)
    if missing < 0:
        del seq[n:]
    elif missing > 0:
        logging.debug('growing ' + type(seq).__name__ + ' from ' +
                      str(len(seq)) + ' to ' + str(n) + ' elements')
        seq.extend(factory() for _ in range(missing))

class Vector3Seq(list):
    """ A list of :class:`~coordkit.vector.Vector3`. """

    def fromSpherical(self, s):
        """
        Converts spherical coordinates to cartesian unit vectors.

        :param s: sequence of :class:`~coordkit.spherical.Spherical`
        """
        _resize(self, len(s), Vector3)
        for c, s1 in zip(self, s):
            c.fromSpherical(s1)
        return self

    def fromEquatorial(self, e):
        """
        Converts equatorial coordinates to cartesian unit vectors.

        :param e: sequence of :class:`~coordkit.spherical.Equatorial`
        """
        _resize(self, len(e), Vector3)
        for c, e1 in zip(self, e):
            c.fromEquatorial(e1)
        return self

    def multiplyMatrix(self, m, a):
        """
        Broadcasts :meth:`Vector3.multiplyMatrix <coordkit.vector.Vector3.multiplyMatrix>`
        to a sequence, i.e. sets self[i] = m x a[i].

        :type m: :class:`coordkit.matrix.Matrix3`
        :param a: sequence of :class:`~coordkit.vector.Vector3`, may be self
        """
        _resize(self, len(a), Vector3)
        for z, a1 in zip(self, a):
            z.multiplyMatrix(m, a1)
        return self

class SphericalSeq(list):
    """ A list of :class:`~coordkit.spherical.Spherical`. """

    def fromVector3(self, c):
        """
        Converts cartesian unit vectors to spherical coordinates.

        :param c: sequence of :class:`~coordkit.vector.Vector3`
        """
        _resize(self, len(c), Spherical)
        for s, c1 in zip(self, c):
            s.fromVector3(c1)
        return self

    def fromEquatorial(self, e):
        _resize(self, len(e), Spherical)
        for s, e1 in zip(self, e):
            s.fromEquatorial(e1)
        return self

class EquatorialSeq(list):
    """ A list of :class:`~coordkit.spherical.Equatorial`. """

    def fromVector3(self, c):
        """
        Converts cartesian unit vectors to equatorial coordinates.

        :param c: sequence of :class:`~coordkit.vector.Vector3`
        """
        _resize(self, len(c), Equatorial)
        for e, c1 in zip(self, c):
            e.fromVector3(c1)
        return self

    def toSpherical(self):
        """
        Return a new :class:`SphericalSeq` with the same coordinates.
        """
        return SphericalSeq().fromEquatorial(self)
