# Copyright European Space Agency, 2013

"""
This module contains the :class:`Matrix3` type, a 3x3 matrix stored
as nine floats in row-major order.

It is used as a transform for :class:`coordkit.vector.Vector3`, see
:meth:`coordkit.vector.Vector3.multiplyMatrix` and
:func:`coordkit.arrays.multiplyMatrix`.
"""

import numpy as np

class Matrix3:
    """
    A 3x3 matrix as a flat list of nine values.

    Indices 0-2 are row 0, 3-5 row 1 and 6-8 row 2.
    Orthonormality is not checked, rotation use cases need orthonormal rows.
    """
    def __init__(self, *values):
        """
        :param values: nothing for a zero matrix, nine scalars, or a single
                       iterable of nine scalars
        """
        if not values:
            values = [0.0]*9
        elif len(values) == 1:
            values = list(values[0])
        if len(values) != 9:
            raise ValueError('Matrix3 needs 9 values, got ' + str(len(values)))
        self._m = list(values)

    @classmethod
    def fromArray(cls, arr):
        """
        :param arr: array-like of shape (3,3)
        """
        arr = np.asarray(arr, dtype=np.float64)
        assert arr.shape == (3,3)
        return cls(arr.ravel().tolist())

    @classmethod
    def rotationX(cls, sin, cos):
        """
        Return the matrix which rotates the coordinate system around the X axis,
        same as :meth:`coordkit.vector.Vector3.rotateAroundX`.
        """
        return cls(1.0, 0.0, 0.0,
                   0.0, cos, sin,
                   0.0, -sin, cos)

    def transpose(self, m):
        """
        Sets self = transpose(m), returns self.

        m may be self, in which case the matrix is transposed in place.
        """
        a = m._m
        z = self._m
        z[0], z[1], z[3] = a[0], a[3], a[1]
        z[2], z[4], z[6] = a[6], a[4], a[2]
        z[5], z[7], z[8] = a[7], a[5], a[8]
        return self

    def rows(self):
        m = self._m
        return [m[0:3], m[3:6], m[6:9]]

    def asArray(self):
        """
        :rtype: ndarray of shape (3,3)
        """
        return np.array(self._m, dtype=np.float64).reshape(3,3)

    def copy(self):
        return Matrix3(self._m)

    def __getitem__(self, i):
        return self._m[i]

    def __setitem__(self, i, value):
        self._m[i] = value

    def __len__(self):
        return 9

    def __iter__(self):
        return iter(self._m)

    def __eq__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._m == other._m

    __hash__ = None

    def __repr__(self):
        return 'Matrix3(' + ', '.join(repr(v) for v in self._m) + ')'
