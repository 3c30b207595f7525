from unittest import TestCase

import numpy as np

import pandas as pd

from scipy.spatial.transform import Rotation as SciRotation

from rigidmotion import rotations as rt


SQ2 = np.sqrt(2) / 2


def as_matrix(quaternion):
    """
    The 3x3 [row, column] rotation matrix of a quaternion through the column-major conversion
    """

    return np.reshape(rt.quaternion_to_rotmat(quaternion), (3, 3)).T


def same_rotation(test, quaternion, quaternion_true, atol=1e-12):
    """
    Compare two quaternions allowing for the sign ambiguity
    """

    quaternion = np.asarray(quaternion)
    sign = 1 if quaternion @ np.asarray(quaternion_true) >= 0 else -1

    np.testing.assert_allclose(sign * quaternion, quaternion_true, atol=atol)


class TestQuaternionIdentity(TestCase):

    def test_quaternion_identity(self):

        np.testing.assert_array_equal(rt.quaternion_identity(), [0, 0, 0, 1])

        out = np.ones(4)
        res = rt.quaternion_identity(out=out)

        self.assertIs(res, out)
        np.testing.assert_array_equal(out, [0, 0, 0, 1])

        out = [5.0] * 4
        res = rt.quaternion_identity(out=out)

        self.assertIs(res, out)
        self.assertEqual(out, [0, 0, 0, 1])

        with self.assertRaises(ValueError):
            rt.quaternion_identity(out=np.zeros(3))


class TestQuaternionMultiply(TestCase):

    def test_quaternion_multiply(self):

        q = rt.quaternion_multiply([0, 0, 0, 1], [1, 2, 3, 4])

        np.testing.assert_array_equal(q, [1, 2, 3, 4])

        q = rt.quaternion_multiply([SQ2, 0, 0, SQ2], [SQ2, 0, 0, SQ2])

        np.testing.assert_allclose(q, [1, 0, 0, 0], atol=1e-15)

        # i*j = k for the hamiltonian product
        q = rt.quaternion_multiply([1, 0, 0, 0], [0, 1, 0, 0])

        np.testing.assert_array_equal(q, [0, 0, 1, 0])

        q = rt.quaternion_multiply([0, 1, 0, 0], [1, 0, 0, 0])

        np.testing.assert_array_equal(q, [0, 0, -1, 0])

    def test_matches_matrix_product(self):

        rng = np.random.default_rng(53)

        for _ in range(10):
            q1 = rt.random_quaternion(rng)
            q2 = rt.random_quaternion(rng)

            np.testing.assert_allclose(as_matrix(rt.quaternion_multiply(q1, q2)), as_matrix(q1) @ as_matrix(q2),
                                       atol=1e-12)

            truth = (SciRotation.from_quat(q1) * SciRotation.from_quat(q2)).as_matrix()

            np.testing.assert_allclose(as_matrix(rt.quaternion_multiply(q1, q2)), truth, atol=1e-12)

    def test_alias(self):

        q1 = np.array([0.1, -0.2, 0.3, 0.9])
        q2 = np.array([-0.5, 0.5, 0.5, 0.5])

        fresh = rt.quaternion_multiply(q1, q2)

        q1_copy = q1.copy()
        res = rt.quaternion_multiply(q1_copy, q2, out=q1_copy)

        self.assertIs(res, q1_copy)
        np.testing.assert_array_equal(q1_copy, fresh)

        q2_copy = q2.copy()
        rt.quaternion_multiply(q1, q2_copy, out=q2_copy)

        np.testing.assert_array_equal(q2_copy, fresh)

        q = q1.copy()
        rt.quaternion_multiply(q, q, out=q)

        np.testing.assert_array_equal(q, rt.quaternion_multiply(q1, q1))

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            rt.quaternion_multiply([0, 0, 1], [0, 0, 0, 1])

        with self.assertRaises(ValueError):
            rt.quaternion_multiply(np.eye(2), [0, 0, 0, 1])

        with self.assertRaises(ValueError):
            rt.quaternion_multiply(1, [0, 0, 0, 1])


class TestQuaternionRotateAxes(TestCase):

    def test_rotate(self):

        q = rt.quaternion_rotate_x([0, 0, 0, 1], np.pi / 2)

        np.testing.assert_allclose(q, [SQ2, 0, 0, SQ2])

        q = rt.quaternion_rotate_y([0, 0, 0, 1], np.pi / 2)

        np.testing.assert_allclose(q, [0, SQ2, 0, SQ2])

        q = rt.quaternion_rotate_z([0, 0, 0, 1], np.pi / 2)

        np.testing.assert_allclose(q, [0, 0, SQ2, SQ2])

        np.testing.assert_allclose(as_matrix(rt.quaternion_rotate_z([0, 0, 0, 1], 0.3)), rt.rot_z(0.3), atol=1e-15)

    def test_post_multiplies(self):

        q0 = rt.quaternion_from_axis_angle(np.array([1, 2, 3]) / np.sqrt(14), 0.7)

        np.testing.assert_allclose(as_matrix(rt.quaternion_rotate_x(q0, 0.4)), as_matrix(q0) @ rt.rot_x(0.4),
                                   atol=1e-12)
        np.testing.assert_allclose(as_matrix(rt.quaternion_rotate_y(q0, 0.4)), as_matrix(q0) @ rt.rot_y(0.4),
                                   atol=1e-12)
        np.testing.assert_allclose(as_matrix(rt.quaternion_rotate_z(q0, 0.4)), as_matrix(q0) @ rt.rot_z(0.4),
                                   atol=1e-12)

    def test_alias(self):

        for rotate in [rt.quaternion_rotate_x, rt.quaternion_rotate_y, rt.quaternion_rotate_z]:
            with self.subTest(rotate=rotate.__name__):
                q = np.array([0.5, -0.5, 0.5, 0.5])

                fresh = rotate(q, 1.2)

                res = rotate(q, 1.2, out=q)

                self.assertIs(res, q)
                np.testing.assert_array_equal(q, fresh)


class TestRotMatToQuaternion(TestCase):

    def test_trace_branch(self):

        q = rt.rotmat_to_quaternion(np.eye(3))

        np.testing.assert_allclose(q, [0, 0, 0, 1], atol=1e-16)

        q = rt.rotmat_to_quaternion(np.eye(3).ravel())

        np.testing.assert_allclose(q, [0, 0, 0, 1], atol=1e-16)

        q = rt.rotmat_to_quaternion([[0, -1, 0], [1, 0, 0], [0, 0, 1]])

        np.testing.assert_allclose(q, [0, 0, SQ2, SQ2], atol=1e-15)

    def test_half_turns(self):

        q = rt.rotmat_to_quaternion(np.array([[1., 0, 0], [0, -1, 0], [0, 0, -1]]))

        np.testing.assert_allclose(q, [1, 0, 0, 0], atol=1e-16)

        q = rt.rotmat_to_quaternion(np.array([[-1., 0, 0], [0, 1, 0], [0, 0, -1]]))

        np.testing.assert_allclose(q, [0, 1, 0, 0], atol=1e-16)

        q = rt.rotmat_to_quaternion(np.array([[-1., 0, 0], [0, -1, 0], [0, 0, 1]]))

        np.testing.assert_allclose(q, [0, 0, 1, 0], atol=1e-16)

    def test_axis_dominant_branches(self):

        # large angles about axes dominated by x, y, and z to force each diagonal branch
        axes = {'x': [0.9, 0.3, 0.1], 'y': [0.2, 0.95, -0.1], 'z': [-0.1, 0.3, 0.9]}

        for name, axis in axes.items():
            with self.subTest(axis=name):
                axis = np.array(axis) / np.linalg.norm(axis)
                q_true = rt.quaternion_from_axis_angle(axis, 3.0)

                rmat = as_matrix(q_true)

                self.assertLess(np.trace(rmat), 0)
                self.assertEqual(int(np.argmax(np.diag(rmat))), 'xyz'.index(name))

                same_rotation(self, rt.rotmat_to_quaternion(rmat), q_true)

                # the column-major flat form gives the same answer
                same_rotation(self, rt.rotmat_to_quaternion(rt.quaternion_to_rotmat(q_true)), q_true)

    def test_against_scipy(self):

        rng = np.random.default_rng(7)

        for _ in range(20):
            rot = SciRotation.from_quat(rng.normal(size=4))

            same_rotation(self, rt.rotmat_to_quaternion(rot.as_matrix()), rot.as_quat())

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            rt.rotmat_to_quaternion(np.eye(4))

        with self.assertRaises(ValueError):
            rt.rotmat_to_quaternion([1, 2, 3])


class TestQuaternionToRotMat(TestCase):

    def test_quaternion_to_rotmat(self):

        rmat = rt.quaternion_to_rotmat([0, 0, 0, 1])

        np.testing.assert_array_equal(rmat, np.eye(3).ravel())

        # column-major so the first column comes first
        rmat = rt.quaternion_to_rotmat([0, 0, SQ2, SQ2])

        np.testing.assert_allclose(rmat, [0, 1, 0, -1, 0, 0, 0, 0, 1], atol=1e-15)

        rmat = rt.quaternion_to_rotmat([SQ2, 0, 0, SQ2])

        np.testing.assert_allclose(np.reshape(rmat, (3, 3)).T, [[1, 0, 0], [0, 0, -1], [0, 1, 0]], atol=1e-15)

    def test_against_scipy(self):

        rng = np.random.default_rng(11)

        for _ in range(10):
            q = rt.random_quaternion(rng)

            np.testing.assert_allclose(as_matrix(q), SciRotation.from_quat(q).as_matrix(), atol=1e-12)


class TestEulerToQuaternion(TestCase):

    def test_orders(self):

        x, y, z = 30., -45., 110.

        rmats = {'x': rt.rot_x(np.deg2rad(x)), 'y': rt.rot_y(np.deg2rad(y)), 'z': rt.rot_z(np.deg2rad(z))}

        for order in ['xyz', 'xzy', 'yxz', 'yzx', 'zxy', 'zyx']:
            with self.subTest(order=order):
                q = rt.euler_to_quaternion(x, y, z, order=order)

                rmat_true = rmats[order[0]] @ rmats[order[1]] @ rmats[order[2]]

                np.testing.assert_allclose(as_matrix(q), rmat_true, atol=1e-12)

                self.assertAlmostEqual(np.linalg.norm(q), 1)

    def test_default_order(self):

        q = rt.euler_to_quaternion(10, 20, 30)

        truth = SciRotation.from_euler('ZYX', [30, 20, 10], degrees=True).as_matrix()

        np.testing.assert_allclose(as_matrix(q), truth, atol=1e-12)

        np.testing.assert_allclose(rt.euler_to_quaternion(90, 0, 0), [SQ2, 0, 0, SQ2])

        np.testing.assert_allclose(rt.euler_to_quaternion(0, 0, 0, order='XYZ'), [0, 0, 0, 1])

    def test_bad_order(self):

        with self.assertRaises(ValueError):
            rt.euler_to_quaternion(1, 2, 3, order='xxy')  # type: ignore[arg-type]

        with self.assertRaises(ValueError):
            rt.euler_to_quaternion(1, 2, 3, order='xy')  # type: ignore[arg-type]


class TestAxisAngle(TestCase):

    def test_from_axis_angle(self):

        q = rt.quaternion_from_axis_angle([0, 0, 1], np.pi)

        np.testing.assert_allclose(q, [0, 0, 1, 0], atol=1e-16)

        q = rt.quaternion_from_axis_angle([1, 0, 0], 0)

        np.testing.assert_array_equal(q, [0, 0, 0, 1])

    def test_to_axis_angle(self):

        axis = np.array([1, -2, 2]) / 3

        axis_angle = rt.quaternion_to_axis_angle(rt.quaternion_from_axis_angle(axis, 1.1))

        np.testing.assert_allclose(axis_angle.axis, axis)
        self.assertAlmostEqual(axis_angle.angle, 1.1)

        axis, angle = rt.quaternion_to_axis_angle([0, 0, 0, 1])

        np.testing.assert_array_equal(axis, [1, 0, 0])
        self.assertEqual(angle, 0)


class TestAxesToQuaternion(TestCase):

    def test_axes_to_quaternion(self):

        q = rt.axes_to_quaternion([0, 0, -1], [1, 0, 0], [0, 1, 0])

        np.testing.assert_allclose(q, [0, 0, 0, 1], atol=1e-15)

        q_true = rt.quaternion_from_axis_angle([0, 1, 0], 0.6)
        rmat = as_matrix(q_true)

        # the rows of the rotation matrix are right, up, and -view
        q = rt.axes_to_quaternion(-rmat[2], rmat[0], rmat[1])

        same_rotation(self, q, q_true)
        self.assertAlmostEqual(np.linalg.norm(q), 1)


class TestQuaternionRotationTo(TestCase):

    def test_rotation_to(self):

        q = rt.quaternion_rotation_to([1, 0, 0], [0, 1, 0])

        np.testing.assert_allclose(q, [0, 0, SQ2, SQ2])

        q = rt.quaternion_rotation_to([0, 0, 1], [0, 0, 1])

        np.testing.assert_array_equal(q, [0, 0, 0, 1])

        start = np.array([1, 2, 3]) / np.sqrt(14)
        end = np.array([-3, 0, 1]) / np.sqrt(10)

        q = rt.quaternion_rotation_to(start, end)

        np.testing.assert_allclose(rt.quaternion_rotate_vector(q, start), end, atol=1e-12)

    def test_antiparallel(self):

        for start in [[1, 0, 0], [0, 1, 0], [0, 0, 1]]:
            with self.subTest(start=start):
                end = -np.array(start, dtype=np.float64)

                q = rt.quaternion_rotation_to(start, end)

                self.assertAlmostEqual(np.linalg.norm(q), 1)
                np.testing.assert_allclose(rt.quaternion_rotate_vector(q, start), end, atol=1e-12)


class TestQuaternionRotateVector(TestCase):

    def test_rotate_vector(self):

        v = rt.quaternion_rotate_vector([0, 0, SQ2, SQ2], [1, 0, 0])

        np.testing.assert_allclose(v, [0, 1, 0], atol=1e-15)

        q = rt.quaternion_from_axis_angle(np.array([2, 1, -2]) / 3, 2.2)
        v = np.array([0.3, -4, 2])

        np.testing.assert_allclose(rt.quaternion_rotate_vector(q, v), as_matrix(q) @ v, atol=1e-12)

        res = rt.quaternion_rotate_vector(q, v, out=v)

        self.assertIs(res, v)
        np.testing.assert_allclose(v, as_matrix(q) @ [0.3, -4, 2], atol=1e-12)


class TestExpLnPow(TestCase):

    def test_exp(self):

        np.testing.assert_array_equal(rt.quaternion_exp([0, 0, 0, 0]), [0, 0, 0, 1])

        q = rt.quaternion_exp([0, 0, np.pi / 4, 0])

        np.testing.assert_allclose(q, [0, 0, SQ2, SQ2])

        q = rt.quaternion_exp([0, 0, 0, 1])

        np.testing.assert_allclose(q, [0, 0, 0, np.e])

    def test_ln(self):

        np.testing.assert_array_equal(rt.quaternion_ln([0, 0, 0, 1]), [0, 0, 0, 0])

        np.testing.assert_allclose(rt.quaternion_ln([0, 0, SQ2, SQ2]), [0, 0, np.pi / 4, 0], atol=1e-15)

        p = np.array([0.1, 0.2, 0.3, 0.4])

        np.testing.assert_allclose(rt.quaternion_ln(rt.quaternion_exp(p)), p)

    def test_pow(self):

        q = rt.quaternion_from_axis_angle([1, 0, 0], 1.2)

        np.testing.assert_allclose(rt.quaternion_pow(q, 0.5), rt.quaternion_from_axis_angle([1, 0, 0], 0.6))

        np.testing.assert_allclose(rt.quaternion_pow(q, 2), rt.quaternion_multiply(q, q))

        np.testing.assert_allclose(rt.quaternion_pow(q, 0), [0, 0, 0, 1], atol=1e-15)

        res = rt.quaternion_pow(q, 3, out=q)

        self.assertIs(res, q)
        np.testing.assert_allclose(q, rt.quaternion_from_axis_angle([1, 0, 0], 3.6))


class TestQuaternionInvertConjugate(TestCase):

    def test_invert(self):

        q = np.array([1., 2, 3, 4])

        np.testing.assert_allclose(rt.quaternion_invert(q), [-1 / 30, -2 / 30, -3 / 30, 4 / 30])

        np.testing.assert_allclose(rt.quaternion_multiply(q, rt.quaternion_invert(q)), [0, 0, 0, 1], atol=1e-15)

        np.testing.assert_array_equal(rt.quaternion_invert([0, 0, 0, 0]), [0, 0, 0, 0])

        res = rt.quaternion_invert(q, out=q)

        self.assertIs(res, q)
        np.testing.assert_allclose(q, [-1 / 30, -2 / 30, -3 / 30, 4 / 30])

    def test_conjugate(self):

        np.testing.assert_array_equal(rt.quaternion_conjugate([1, 2, 3, 4]), [-1, -2, -3, 4])

        q = rt.quaternion_from_axis_angle([0, 1, 0], 0.3)

        np.testing.assert_allclose(rt.quaternion_conjugate(q), rt.quaternion_invert(q))


class TestQuaternionMisc(TestCase):

    def test_dot_magnitude_normalize(self):

        self.assertEqual(rt.quaternion_dot([1, 2, 3, 4], [4, 3, 2, 1]), 20)

        self.assertAlmostEqual(rt.quaternion_magnitude([1, 2, 3, 4]), np.sqrt(30))

        np.testing.assert_allclose(rt.quaternion_normalize([1, 2, 3, 4]), np.array([1, 2, 3, 4]) / np.sqrt(30))

        np.testing.assert_array_equal(rt.quaternion_normalize([0, 0, 0, 0]), [0, 0, 0, 0])

    def test_calculate_w(self):

        np.testing.assert_allclose(rt.quaternion_calculate_w([0.5, 0.5, 0.5, -7]), [0.5, 0.5, 0.5, 0.5])

    def test_angle(self):

        q = rt.quaternion_from_axis_angle([0, 0, 1], 1.0)

        self.assertAlmostEqual(rt.quaternion_angle([0, 0, 0, 1], q), 1.0)

        # q and -q are the same rotation
        self.assertAlmostEqual(rt.quaternion_angle(q, -q), 0.0, places=6)

    def test_random(self):

        rng = np.random.default_rng(2)

        for _ in range(10):
            self.assertAlmostEqual(np.linalg.norm(rt.random_quaternion(rng)), 1)

        np.testing.assert_array_equal(rt.random_quaternion(np.random.default_rng(3)),
                                      rt.random_quaternion(np.random.default_rng(3)))

    def test_equals(self):

        self.assertTrue(rt.quaternion_equals([0, 0, 0, 1], [0, 0, 0, 1 + 1e-7]))

        self.assertFalse(rt.quaternion_equals([0, 0, 0, 1], [0, 0, 0, 1.00001]))

        # the tolerance grows with the size of the values
        self.assertTrue(rt.quaternion_equals([1000, 0, 0, 0], [1000.0005, 0, 0, 0]))

        self.assertFalse(rt.quaternion_equals([0, 0, 0, 1], [0, 0, 0, -1]))

        self.assertTrue(rt.quaternion_exact_equals([1, 2, 3, 4], np.array([1., 2., 3., 4.])))

        self.assertFalse(rt.quaternion_exact_equals([1, 2, 3, 4], [1, 2, 3, 4 + 1e-12]))


class TestNLERP(TestCase):

    def test_nlerp(self):

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_allclose(rt.nlerp(q0, q1, 0), q0)
        np.testing.assert_allclose(rt.nlerp(q0, q1, 1), q1)

        qtrue = (np.array(q0) + np.array(q1)) / 2
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_allclose(rt.nlerp(q0, q1, 0.5), qtrue)

        np.testing.assert_allclose(rt.nlerp(q0, q1, 5, time0=0, time1=10), qtrue)

    def test_lerp(self):

        np.testing.assert_allclose(rt.quaternion_lerp([0, 0, 0, 1], [1, 1, 1, 1], 0.25), [0.25, 0.25, 0.25, 1])


class TestSLERP(TestCase):

    def test_slerp(self):

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_allclose(rt.slerp(q0, q1, 0), q0)

        np.testing.assert_allclose(rt.slerp(q0, q1, 1), q1)

        qtrue = (np.array(q0) + np.array(q1)) / 2
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_allclose(rt.slerp(q0, q1, 0.5), qtrue)

        qt = rt.slerp(q0, q1, 0.79)

        # comes from ODTBX matlab function
        qtrue = [0.424985851398278, 0.424985851398278, 0.424985851398278, 0.676875969682661]

        np.testing.assert_allclose(qt, qtrue)

        q0 = np.array([0.23, 0.45, 0.67, 0.2])
        q0 /= np.linalg.norm(q0)
        q1 = np.array([-0.3, 0.2, 0.6, 0.33])
        q1 /= np.linalg.norm(q1)

        qt = rt.slerp(q0, q1, 0.79)

        # comes from ODTBX matlab function
        qtrue = [-0.256224563175732, 0.331694624881600, 0.813762532744541, 0.402639031082742]

        np.testing.assert_allclose(qt, qtrue)

    def test_shortest_arc(self):

        q0 = rt.quaternion_from_axis_angle([0, 0, 1], 0.2)
        q1 = rt.quaternion_from_axis_angle([0, 0, 1], 0.8)

        for t in [0, 0.3, 0.5, 1]:
            with self.subTest(t=t):
                np.testing.assert_allclose(rt.slerp(q0, -q1, t), rt.slerp(q0, q1, t), atol=1e-15)

        np.testing.assert_allclose(rt.slerp(q0, -q1, 0.5), rt.quaternion_from_axis_angle([0, 0, 1], 0.5))

    def test_near_antipodal(self):

        q0 = rt.quaternion_from_axis_angle(np.array([1, 2, 2]) / 3, 0.7)
        q1 = rt.quaternion_normalize(-q0 + 1e-9)

        self.assertLess(rt.quaternion_dot(q0, q1), 0)

        for t in [0.25, 0.5, 0.75]:
            with self.subTest(t=t):
                qt = rt.slerp(q0, q1, t)

                self.assertGreaterEqual(rt.quaternion_dot(qt, q0), 0)
                np.testing.assert_allclose(qt, q0, atol=1e-8)
                self.assertTrue(np.isfinite(qt).all())

    def test_nearly_equal_inputs(self):

        q0 = np.array([0, 0, 0, 1.0])

        np.testing.assert_allclose(rt.slerp(q0, q0, 0.3), q0)

        q1 = rt.quaternion_from_axis_angle([1, 0, 0], 1e-8)

        qt = rt.slerp(q0, q1, 0.5)

        np.testing.assert_allclose(qt, 0.5 * (q0 + q1))
        self.assertTrue(np.isfinite(qt).all())

    def test_times(self):

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_allclose(rt.slerp(q0, q1, 7.9, time0=0, time1=10), rt.slerp(q0, q1, 0.79))

        start = pd.Timestamp('2020-01-01T00:00:00')
        stop = pd.Timestamp('2020-01-01T00:01:00')

        np.testing.assert_allclose(rt.slerp(q0, q1, pd.Timestamp('2020-01-01T00:00:30'), start, stop),
                                   rt.slerp(q0, q1, 0.5))

        with self.assertRaises(TypeError):
            rt.slerp(q0, q1, 'now')  # type: ignore[arg-type]

    def test_alias(self):

        q0 = np.array([0, 0, 0, 1.0])
        q1 = np.array([0.5, 0.5, 0.5, 0.5])

        fresh = rt.slerp(q0, q1, 0.3)

        res = rt.slerp(q0, q1, 0.3, out=q0)

        self.assertIs(res, q0)
        np.testing.assert_array_equal(q0, fresh)


class TestSQLERP(TestCase):

    def test_sqlerp(self):

        a = rt.quaternion_from_axis_angle([0, 0, 1], 0.1)
        b = rt.quaternion_from_axis_angle([0, 0, 1], 0.3)
        c = rt.quaternion_from_axis_angle([0, 0, 1], 0.6)
        d = rt.quaternion_from_axis_angle([0, 0, 1], 0.9)

        np.testing.assert_allclose(rt.sqlerp(a, b, c, d, 0), a)

        np.testing.assert_allclose(rt.sqlerp(a, b, c, d, 1), d)

        # all rotations share an axis so the blend stays on it
        qt = rt.sqlerp(a, b, c, d, 0.5)

        np.testing.assert_allclose(qt[:2], [0, 0], atol=1e-15)
        self.assertAlmostEqual(np.linalg.norm(qt), 1)

        # with outer and control points the same this is slerp
        np.testing.assert_allclose(rt.sqlerp(a, a, d, d, 0.4), rt.slerp(a, d, 0.4))

    def test_alias(self):

        a = rt.quaternion_from_axis_angle([1, 0, 0], 0.1)
        b = rt.quaternion_from_axis_angle([0, 1, 0], 0.3)
        c = rt.quaternion_from_axis_angle([0, 0, 1], 0.6)
        d = rt.quaternion_from_axis_angle([1, 0, 0], 0.9)

        fresh = rt.sqlerp(a, b, c, d, 0.35)

        res = rt.sqlerp(a, b, c, d, 0.35, out=b)

        self.assertIs(res, b)
        np.testing.assert_array_equal(b, fresh)
