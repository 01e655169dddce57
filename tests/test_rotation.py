import unittest
import copy
import numpy as np
import simplerotations as sr
from simplerotations import Rotation, AxisAngle


class TestRotationCreation(unittest.TestCase):
    def test_identity(self):
        np.testing.assert_array_equal(Rotation().matrix, np.eye(3))
        np.testing.assert_array_equal(Rotation.identity().matrix, np.eye(3))

    def test_invalid_shape(self):
        with self.assertRaises(ValueError):
            Rotation(np.eye(4))

    def test_matrix_is_copied(self):
        M = np.eye(3)
        r = Rotation(M)
        M[0, 0] = 5.0
        self.assertEqual(r.matrix[0, 0], 1.0)

    def test_from_quaternion(self):
        q = sr.quatnormalize([1.0, 0.2, -0.3, 0.4])
        r = Rotation.from_quaternion(q)
        np.testing.assert_allclose(r.matrix, sr.quat2rotm(q), atol=1e-12)
        np.testing.assert_allclose(r.quaternion, q, atol=1e-9)

    def test_from_axis_angle(self):
        r = Rotation.from_axis_angle([0, 0, 2], np.pi / 3)
        aa = r.axis_angle
        self.assertIsInstance(aa, AxisAngle)
        self.assertFalse(aa.degenerate)
        np.testing.assert_allclose(aa.axis, [0, 0, 1], atol=1e-12)
        self.assertAlmostEqual(aa.angle, np.pi / 3, places=12)

    def test_from_matrix_projects(self):
        M = 2.0 * sr.axang2rotm([1, 0, 0], 0.4)
        M[0, 1] += 0.01
        self.assertFalse(Rotation.from_matrix(M).is_valid())
        self.assertTrue(Rotation.from_matrix(M, project=True).is_valid())

    def test_random(self):
        r = Rotation.random(3)
        self.assertTrue(r.is_valid())
        self.assertEqual(r, Rotation.random(3))


class TestRotationOperations(unittest.TestCase):
    def setUp(self):
        rng = np.random.default_rng(99)
        self.r1 = Rotation.random(rng)
        self.r2 = Rotation.random(rng)

    def test_compose(self):
        r = self.r1 @ self.r2
        self.assertIsInstance(r, Rotation)
        np.testing.assert_allclose(r.matrix, self.r1.matrix @ self.r2.matrix, atol=1e-12)

    def test_apply_to_vector(self):
        v = np.array([1.0, 2.0, 3.0])
        np.testing.assert_allclose(self.r1 @ v, self.r1.matrix @ v, atol=1e-12)

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            self.r1 @ "rotation"

    def test_inverse(self):
        self.assertEqual(self.r1.inverse() @ self.r1, Rotation.identity())
        self.assertEqual(self.r1 @ self.r1.inverse(), Rotation.identity())

    def test_error_to(self):
        self.assertAlmostEqual(self.r1.error_to(self.r1), 0.0, places=5)
        self.assertEqual(self.r1.error_to(self.r2), sr.roterror(self.r1.matrix, self.r2.matrix))

    def test_identity_axis_angle_is_degenerate(self):
        aa = Rotation.identity().axis_angle
        self.assertTrue(aa.degenerate)
        self.assertIsNone(aa.axis)
        self.assertEqual(aa.angle, 0.0)

    def test_equality(self):
        self.assertEqual(self.r1, Rotation(self.r1.matrix))
        self.assertNotEqual(self.r1, self.r2)
        self.assertNotEqual(self.r1, self.r1.matrix)

    def test_copy(self):
        c = copy.copy(self.r1)
        d = copy.deepcopy(self.r1)
        self.assertIsNot(c.matrix, self.r1.matrix)
        self.assertIsNot(d.matrix, self.r1.matrix)
        self.assertEqual(c, self.r1)
        self.assertEqual(d, self.r1)

    def test_repr(self):
        self.assertTrue(repr(Rotation()).startswith("Rotation(matrix="))


if __name__ == "__main__":
    unittest.main()
