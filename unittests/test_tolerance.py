from unittest import TestCase

import numpy as np

from rigidmotion import EPSILON, approx_equal, approx_relative
from rigidmotion.errors import MagnitudeError, SingularMatrixError


class TestApproxRelative(TestCase):

    def test_scalars(self):

        self.assertTrue(approx_relative(1, 1))

        self.assertTrue(approx_relative(1, 1 + 0.5 * EPSILON))

        self.assertFalse(approx_relative(1, 1 + 2 * EPSILON))

        # below 1 the tolerance is absolute
        self.assertTrue(approx_relative(0, 0.5 * EPSILON))

        self.assertFalse(approx_relative(0, 2 * EPSILON))

        # above 1 the tolerance scales with the larger value
        self.assertTrue(approx_relative(1e6, 1e6 + 0.5))

        self.assertFalse(approx_relative(1e6, 1e6 + 2))

        self.assertTrue(approx_relative(1, 1.05, epsilon=0.1))

    def test_arrays(self):

        self.assertTrue(approx_relative([1, 2, 3], np.array([1, 2, 3 + 1e-7])))

        self.assertFalse(approx_relative([1, 2, 3], [1, 2, 3.1]))

        self.assertFalse(approx_relative([1, 2, 3], [1, 2]))


class TestApproxEqual(TestCase):

    def test_approx_equal(self):

        self.assertTrue(approx_equal(1, 1 + 0.5 * EPSILON))

        self.assertFalse(approx_equal(1e6, 1e6 + 0.5))

        self.assertTrue(approx_equal([0, 1], [1e-7, 1]))

        self.assertFalse(approx_equal([0, 1], [0, 1, 2]))

        self.assertTrue(approx_equal(5, 5.5, epsilon=1))


class TestErrors(TestCase):

    def test_errors(self):

        self.assertTrue(issubclass(SingularMatrixError, ValueError))
        self.assertTrue(issubclass(MagnitudeError, ValueError))

        self.assertEqual(str(SingularMatrixError()), "The matrix cannot be inverted.")
        self.assertEqual(str(MagnitudeError('custom')), 'custom')
