import unittest
import numpy as np
import simplerotations as sr


class TestQuaternionProduct(unittest.TestCase):
    def test_basis_units(self):
        one = [1, 0, 0, 0]
        i = [0, 1, 0, 0]
        j = [0, 0, 1, 0]
        k = [0, 0, 0, 1]
        np.testing.assert_array_equal(sr.quatmul(i, j), k)
        np.testing.assert_array_equal(sr.quatmul(j, k), i)
        np.testing.assert_array_equal(sr.quatmul(k, i), j)
        np.testing.assert_array_equal(sr.quatmul(j, i), np.negative(k))
        np.testing.assert_array_equal(sr.quatmul(i, i), [-1, 0, 0, 0])
        np.testing.assert_array_equal(sr.quatmul(one, k), k)

    def test_product_composes_rotations(self):
        rng = np.random.default_rng(8)
        a = sr.randquaternion(rng)
        b = sr.randquaternion(rng)
        np.testing.assert_allclose(
            sr.quat2rotm(sr.quatmul(a, b)),
            sr.quat2rotm(a) @ sr.quat2rotm(b),
            atol=1e-12,
        )

    def test_conjugate_and_inverse(self):
        q = np.array([0.5, -1.0, 2.0, 0.25])
        np.testing.assert_array_equal(sr.quatconj(q), [0.5, 1.0, -2.0, -0.25])
        np.testing.assert_allclose(
            sr.quatmul(q, sr.quatinv(q)), [1, 0, 0, 0], atol=1e-12)
        np.testing.assert_allclose(
            sr.quatmul(sr.quatinv(q), q), [1, 0, 0, 0], atol=1e-12)

        u = sr.quatnormalize(q)
        self.assertAlmostEqual(np.linalg.norm(u), 1.0, places=12)
        np.testing.assert_allclose(sr.quatinv(u), sr.quatconj(u), atol=1e-12)


class TestOmegaOperators(unittest.TestCase):
    def setUp(self):
        rng = np.random.default_rng(12)
        self.a = sr.randquaternion(rng)
        self.b = sr.randquaternion(rng)

    def test_left_multiplication(self):
        np.testing.assert_allclose(
            sr.omega1(self.a) @ self.b, sr.quatmul(self.a, self.b), atol=1e-12)

    def test_right_multiplication(self):
        np.testing.assert_allclose(
            sr.omega2(self.b) @ self.a, sr.quatmul(self.a, self.b), atol=1e-12)

    def test_operators_commute(self):
        # left and right multiplication are associative with each other
        np.testing.assert_allclose(
            sr.omega1(self.a) @ sr.omega2(self.b),
            sr.omega2(self.b) @ sr.omega1(self.a),
            atol=1e-12,
        )

    def test_conjugate_is_transpose(self):
        for omega in (sr.omega1, sr.omega2):
            np.testing.assert_allclose(
                omega(sr.quatconj(self.a)), omega(self.a).T, atol=1e-12)
            np.testing.assert_allclose(
                omega(sr.quatinv(self.a)), omega(self.a).T, atol=1e-12)

    def test_unit_quaternion_gives_orthogonal_matrix(self):
        W = sr.omega1(self.a)
        np.testing.assert_allclose(W.T @ W, np.eye(4), atol=1e-12)

    def test_pure_quaternion_input(self):
        v = [1.0, -2.0, 3.0]
        np.testing.assert_array_equal(sr.omega1(v), sr.omega1([0.0, *v]))
        np.testing.assert_array_equal(sr.omega2(v), sr.omega2([0.0, *v]))
        np.testing.assert_array_equal(sr.omega1_pure(v), sr.omega1_quat([0.0, *v]))
        np.testing.assert_array_equal(sr.omega2_pure(v), sr.omega2_quat([0.0, *v]))

    def test_vector_rotation_sandwich(self):
        # q ⊗ [0, v] ⊗ q* rotates v
        v = np.array([0.2, 1.0, -0.7])
        rotated = sr.omega2(sr.quatconj(self.a)) @ sr.omega1(self.a) @ np.r_[0.0, v]
        self.assertAlmostEqual(rotated[0], 0.0, places=12)
        np.testing.assert_allclose(rotated[1:], sr.quat2rotm(self.a) @ v, atol=1e-12)

    def test_invalid_length(self):
        for omega in (sr.omega1, sr.omega2):
            with self.assertRaises(ValueError):
                omega([1.0, 2.0])
            with self.assertRaises(ValueError):
                omega(np.zeros(5))

    def test_explicit_entry_points_check_length(self):
        with self.assertRaises(ValueError):
            sr.omega1_quat([1.0, 2.0, 3.0])
        with self.assertRaises(ValueError):
            sr.omega2_pure([1.0, 2.0, 3.0, 4.0])


if __name__ == "__main__":
    unittest.main()
