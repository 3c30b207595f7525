# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`RigidTransform` class, an object form of a rotation followed by a translation.
"""

import copy
import warnings

from dataclasses import dataclass

import numpy as np

from rigidmotion._typing import ARRAY_LIKE, DOUBLE_ARRAY, OUTPUT
from rigidmotion.tolerance import EPSILON, approx_equal
from rigidmotion.utilities.options import UserOptions
from rigidmotion.utilities.mixin_classes import UserOptionConfigured

from rigidmotion.rotations.dual_quaternion import (dual_quaternion_from_matrix4,
                                                   dual_quaternion_from_rotation_translation,
                                                   dual_quaternion_get_translation, dual_quaternion_identity,
                                                   dual_quaternion_invert, dual_quaternion_multiply,
                                                   dual_quaternion_normalize, dual_quaternion_transform_point)
from rigidmotion.rotations.matrix4 import matrix4_from_dual_quaternion


@dataclass
class RigidTransformOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.RigidTransform` class.

    You can set any of the options on an instance of this dataclass and pass it to the :class:`.RigidTransform` class
    at initialization to set the settings on the instance.
    """

    normalize: bool = True
    """
    A flag specifying whether dual quaternions are normalized when they are stored.

    When this is ``True`` and the data being stored is not already normalized (within :attr:`tolerance`) a warning is
    issued.
    """

    tolerance: float = EPSILON
    """
    The absolute tolerance used when comparing two transforms for equality and when checking whether stored data is
    normalized.
    """


class RigidTransform(UserOptionConfigured[RigidTransformOptions], RigidTransformOptions):
    """
    A class to represent and manipulate rigid transforms (a rotation followed by a translation).

    The transform is stored as a normalized dual quaternion (see :mod:`.dual_quaternion`).  The class can be
    initialized from any of the supported representations and interprets the input by its size:

    ====  ==================================================================================
    Size  Interpretation
    ====  ==================================================================================
    8     a dual quaternion (real part then dual part)
    4     a rotation quaternion with no translation
    3     a translation with no rotation
    16    a 4x4 transform matrix (16 column-major numbers or a 4x4 array), scale is discarded
    ====  ==================================================================================

    The :attr:`matrix`, :attr:`rotation`, and :attr:`translation` properties give the other representations, caching
    the conversion until the transform is changed.  Setting any of them updates the whole transform in place.

    Transforms are composed with the multiplication operator, where ``a * b`` is the transform that applies ``b`` first
    and then ``a``::

        >>> from rigidmotion.rotations import RigidTransform, euler_to_quaternion
        >>> rotate = RigidTransform(euler_to_quaternion(90, 0, 0))
        >>> shift = RigidTransform([1, 0, 0])
        >>> (shift * rotate).transform_point([0, 1, 0])
        array([1., 0., 1.])

    The equality operator compares the dual quaternions within :attr:`tolerance`, treating a dual quaternion and its
    negation as the same transform.
    """

    def __init__(self, data: ARRAY_LIKE | 'RigidTransform | None' = None,
                 options: RigidTransformOptions | None = None):
        """
        :param data: The transform data to initialize the instance with.  ``None`` gives the identity transform
        :param options: A dataclass specifying the options to set for this instance
        """

        super().__init__(RigidTransformOptions, options=options)

        self._dual_quaternion: DOUBLE_ARRAY = dual_quaternion_identity()
        self._matrix: DOUBLE_ARRAY | None = None
        self._rotation: DOUBLE_ARRAY | None = None
        self._translation: DOUBLE_ARRAY | None = None

        if data is None:
            data = dual_quaternion_identity()

        self.interp_transform(data)

    def _clear_cache(self):
        self._matrix = None
        self._rotation = None
        self._translation = None

    def _current_options(self) -> RigidTransformOptions:
        return RigidTransformOptions(normalize=self.normalize, tolerance=self.tolerance)

    @property
    def dual_quaternion(self) -> DOUBLE_ARRAY:
        """
        The dual quaternion representation of the transform as a length 8 numpy array.

        When setting, the input should have 8 elements (or be a :class:`RigidTransform`).  If :attr:`normalize` is set
        the value is normalized before being stored, warning if it was not already normalized.

        :raises ValueError: If the value does not have 8 elements or its real part is zero
        """

        return self._dual_quaternion

    @dual_quaternion.setter
    def dual_quaternion(self, data: ARRAY_LIKE | 'RigidTransform'):

        if isinstance(data, RigidTransform):
            self._dual_quaternion = data.dual_quaternion.copy()
            self._clear_cache()
            return

        numpy_data = np.array(data, dtype=np.float64).ravel()

        if numpy_data.size != 8:
            raise ValueError('The dual quaternion must be length 8')

        if not numpy_data[:4].any():
            raise ValueError('The real part of the dual quaternion must not be zero')

        if self.normalize:
            normalized = dual_quaternion_normalize(numpy_data)

            if not approx_equal(normalized, numpy_data, self.tolerance):
                warnings.warn('The dual quaternion is not normalized.  It has been normalized before being stored')

            numpy_data = normalized

        self._dual_quaternion = numpy_data
        self._clear_cache()

    @property
    def rotation(self) -> DOUBLE_ARRAY:
        """
        The rotation quaternion of the transform (the real part of the dual quaternion).

        Setting this replaces the rotation while keeping the current translation.
        """

        if self._rotation is None:
            self._rotation = self._dual_quaternion[:4].copy()

        return self._rotation

    @rotation.setter
    def rotation(self, val: ARRAY_LIKE):
        self.dual_quaternion = dual_quaternion_from_rotation_translation(val, self.translation)

    @property
    def translation(self) -> DOUBLE_ARRAY:
        """
        The translation of the transform.

        Setting this replaces the translation while keeping the current rotation.
        """

        if self._translation is None:
            self._translation = dual_quaternion_get_translation(self._dual_quaternion)

        return self._translation

    @translation.setter
    def translation(self, val: ARRAY_LIKE):
        self.dual_quaternion = dual_quaternion_from_rotation_translation(self.rotation, val)

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The transform as a 4x4 matrix in column-major order (16 numbers).

        Setting this accepts 16 column-major numbers or a 4x4 array indexed [row, column].  Any scale in the matrix is
        discarded.
        """

        if self._matrix is None:
            self._matrix = matrix4_from_dual_quaternion(self._dual_quaternion)

        return self._matrix

    @matrix.setter
    def matrix(self, val: ARRAY_LIKE):
        self.dual_quaternion = dual_quaternion_from_matrix4(val)

    def interp_transform(self, data: ARRAY_LIKE | 'RigidTransform'):
        """
        This method interprets transform data based on its size and type.

        If the input is a :class:`RigidTransform` its dual quaternion is copied.  Otherwise a total size of 8 is a dual
        quaternion, 4 a rotation quaternion, 3 a translation, and 16 a transform matrix.

        :param data: The transform data to be interpreted
        :raises ValueError: If the size of the input data is not 3, 4, 8, or 16
        """

        if isinstance(data, RigidTransform):
            self.dual_quaternion = data
            return

        numpy_data = np.asanyarray(data, dtype=np.float64)

        if numpy_data.size == 8:
            self.dual_quaternion = numpy_data

        elif numpy_data.size == 4:
            self.dual_quaternion = dual_quaternion_from_rotation_translation(numpy_data.ravel(), [0, 0, 0])

        elif numpy_data.size == 3:
            self.dual_quaternion = dual_quaternion_from_rotation_translation([0, 0, 0, 1], numpy_data.ravel())

        elif numpy_data.size == 16:
            self.matrix = numpy_data

        else:
            raise ValueError('The specified transform data cannot be interpreted.')

    def inv(self) -> 'RigidTransform':
        """
        Returns the inverse transform as a new :class:`RigidTransform`.

        See :func:`.dual_quaternion_invert` for more information.
        """

        return RigidTransform(dual_quaternion_invert(self._dual_quaternion), options=self._current_options())

    def transform_point(self, point: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
        """
        Rotates and then translates a point.

        :param point: The length 3 point to transform
        :param out: An optional length 3 output to store the result in
        :return: The transformed point
        """

        return dual_quaternion_transform_point(self._dual_quaternion, point, out=out)

    def rotate(self, other: ARRAY_LIKE | 'RigidTransform'):
        """
        Performs a left in place composition with other, so that self becomes ``other * self``.

        :param other: The transform (or data interpretable as one) to apply after self
        """

        if not isinstance(other, RigidTransform):
            other = RigidTransform(other, options=self._current_options())

        self.dual_quaternion = other * self

    def __eq__(self, other) -> bool:

        if not isinstance(other, RigidTransform):
            try:
                other = RigidTransform(other, options=self._current_options())
            except ValueError:
                # other isn't something that can be interpreted as a transform
                return False

        return (approx_equal(self._dual_quaternion, other.dual_quaternion, self.tolerance) or
                approx_equal(self._dual_quaternion, -other.dual_quaternion, self.tolerance))

    def __mul__(self, other: 'RigidTransform') -> 'RigidTransform':

        if isinstance(other, RigidTransform):

            return RigidTransform(dual_quaternion_multiply(self._dual_quaternion, other.dual_quaternion),
                                  options=self._current_options())

        else:

            return NotImplemented

    def __repr__(self) -> str:
        return 'RigidTransform({0!r})'.format(self._dual_quaternion)

    def __str__(self) -> str:
        return str(self._dual_quaternion)

    def copy(self) -> 'RigidTransform':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)
