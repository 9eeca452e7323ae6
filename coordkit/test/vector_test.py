# Copyright European Space Agency, 2013

import unittest
import numpy as np
from numpy.testing import assert_array_almost_equal, assert_equal

from coordkit.vector import Vector3
from coordkit.spherical import Spherical, Equatorial
from coordkit.matrix import Matrix3

def randomVectors(n=20, seed=42):
    rng = np.random.RandomState(seed)
    return [Vector3(*xyz) for xyz in rng.uniform(-10, 10, (n,3)).tolist()]

class Test(unittest.TestCase):

    def testAdd(self):
        v = Vector3().add(Vector3(1,2,3), Vector3(7,2,0))
        assert_equal(tuple(v), (8,4,3))

    def testSubtract(self):
        v = Vector3().subtract(Vector3(8,4,3), Vector3(1,2,3))
        assert_equal(tuple(v), (7,2,0))

    def testScale(self):
        v = Vector3().scale(Vector3(4,1,0), 3.)
        assert_equal(tuple(v), (12,3,0))

    def testNegate(self):
        v = Vector3().negate(Vector3(1,-2,3))
        assert_equal(tuple(v), (-1,2,-3))

    def testDot(self):
        self.assertEqual(Vector3(1,2,3).dot(Vector3(7,2,0)), 11)

    def testNormSquared(self):
        a = Vector3(1,2,3)
        self.assertEqual(a.normSquared(), 14)
        self.assertEqual(a.normSquared(), a.dot(a))

    def testCross(self):
        v = Vector3().cross(Vector3(1,0,0), Vector3(0,1,0))
        assert_equal(tuple(v), (0,0,1))

    def testAddCommutative(self):
        vecs = randomVectors()
        for a, b in zip(vecs, vecs[1:]):
            self.assertEqual(Vector3().add(a, b), Vector3().add(b, a))
            zero = Vector3().add(a, Vector3().negate(a))
            assert_equal(tuple(zero), (0,0,0))

    def testCrossAntisymmetry(self):
        vecs = randomVectors()
        for a, b in zip(vecs, vecs[1:]):
            ab = Vector3().cross(a, b)
            ba = Vector3().cross(b, a)
            assert_array_almost_equal(tuple(ab), tuple(Vector3().negate(ba)))
            assert_equal(tuple(Vector3().cross(a, a)), (0,0,0))

    def testCrossOrthogonal(self):
        vecs = randomVectors()
        for a, b in zip(vecs, vecs[1:]):
            c = Vector3().cross(a, b)
            self.assertAlmostEqual(a.dot(c), 0, 10)
            self.assertAlmostEqual(b.dot(c), 0, 10)

    def testRotateAroundX(self):
        s, c = np.sin(np.deg2rad(30)), np.cos(np.deg2rad(30))
        v = Vector3().rotateAroundX(Vector3(0,1,0), s, c)
        assert_array_almost_equal(tuple(v), (0, 0.866, -0.5), 3)

    def testRotateAroundXRoundTrip(self):
        s, c = np.sin(0.4), np.cos(0.4)
        for a in randomVectors():
            v = Vector3().rotateAroundX(a, s, c)
            self.assertEqual(v.x, a.x)
            v.rotateAroundX(v, -s, c)
            assert_array_almost_equal(tuple(v), tuple(a), 12)

    def testMultiplyMatrix(self):
        s, c = np.sin(np.deg2rad(30)), np.cos(np.deg2rad(30))
        # rotate about X axis
        rm = Matrix3(1, 0, 0,
                     0, c, -s,
                     0, s, c)
        v = Vector3().multiplyMatrix(rm, Vector3(0,1,0))
        assert_array_almost_equal(tuple(v), (0, 0.866, 0.5), 3)

    def testAliasing(self):
        a = Vector3(1,2,3)
        b = Vector3(-4,5,0.5)
        expected = Vector3().cross(a, b)
        a.cross(a, b)
        self.assertEqual(a, expected)

        a = Vector3(1,2,3)
        expected = Vector3().rotateAroundX(a, 0.6, 0.8)
        a.rotateAroundX(a, 0.6, 0.8)
        self.assertEqual(a, expected)

        a = Vector3(1,2,3)
        m = Matrix3(range(1,10))
        expected = Vector3().multiplyMatrix(m, a)
        a.multiplyMatrix(m, a)
        self.assertEqual(a, expected)

        a = Vector3(1,2,3)
        a.add(a, a).subtract(a, Vector3(1,1,1))
        assert_equal(tuple(a), (1,3,5))

    def testChaining(self):
        a, b, c = Vector3(1,0,0), Vector3(0,1,0), Vector3(0,0,2)
        self.assertEqual(Vector3().cross(a, b).dot(c), 2)

    def testOperators(self):
        a = Vector3(1,2,3)
        b = Vector3(7,2,0)
        self.assertEqual(a + b, Vector3(8,4,3))
        self.assertEqual(a - b, Vector3(-6,0,3))
        self.assertEqual(-a, Vector3(-1,-2,-3))
        self.assertEqual(a * 2, Vector3(2,4,6))
        self.assertEqual(2 * a, Vector3(2,4,6))
        # operators don't modify their operands
        self.assertEqual(a, Vector3(1,2,3))

    def testCopy(self):
        a = Vector3(1,2,3)
        b = a.copy()
        b.scale(b, 2)
        self.assertEqual(a, Vector3(1,2,3))
        self.assertEqual(b, Vector3(2,4,6))

    def testNaNPropagation(self):
        v = Vector3().add(Vector3(np.nan,1,2), Vector3(1,1,1))
        self.assertTrue(np.isnan(v.x))
        assert_equal((v.y, v.z), (2,3))
        self.assertTrue(np.isnan(Vector3(np.nan,0,0).dot(Vector3(1,0,0))))

    def testFromSpherical(self):
        v = Vector3().fromSpherical(Spherical(0, np.deg2rad(30)))
        assert_array_almost_equal(tuple(v), (0.866, 0, 0.5), 3)

    def testFromSphericalUnit(self):
        rng = np.random.RandomState(0)
        for lon, lat in zip(rng.uniform(0, 2*np.pi, 50), rng.uniform(-np.pi/2, np.pi/2, 50)):
            v = Vector3().fromSpherical(Spherical(lon, lat))
            self.assertAlmostEqual(v.normSquared(), 1, 12)

    def testFromSphericalInfinite(self):
        v = Vector3().fromSpherical(Spherical(np.inf, 0))
        self.assertTrue(np.isnan(v.x))
        self.assertTrue(np.isnan(v.y))
        self.assertEqual(v.z, 0)

    def testFromEquatorial(self):
        e = Equatorial.fromDegrees(30, 0)
        v = Vector3().fromEquatorial(e)
        assert_array_almost_equal(tuple(v), (0.866, 0.5, 0), 3)
        self.assertEqual(v, Vector3().fromSpherical(Spherical().fromEquatorial(e)))

if __name__ == "__main__":
    unittest.main()
