# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module bridges the quaternion and dual quaternion representations with :math:`4\times 4` affine transform
matrices.

Matrices are exchanged as 16 numbers in column-major order (a :math:`4\times 4` array indexed [row, column] is also
accepted as input), so the translation occupies elements 12, 13, and 14.  A matrix built from translation, rotation,
and scale has the form

.. math::
    \mathbf{M} = \left[\begin{array}{cc}\mathbf{R}\mathbf{S} & \mathbf{t} \\ \mathbf{0}^T & 1\end{array}\right]

The decomposition routines (:func:`matrix4_get_scaling`, :func:`matrix4_get_rotation`, :func:`matrix4_decompose`)
assume the upper left :math:`3\times 3` block is a scaled rotation without shear.  This is not checked: a sheared
matrix returns a plausible looking but meaningless rotation.
"""

import logging

import numpy as np

from rigidmotion._typing import ARRAY_LIKE, DOUBLE_ARRAY, OUTPUT
from rigidmotion.errors import MagnitudeError, SingularMatrixError
from rigidmotion.tolerance import EPSILON, approx_relative

from rigidmotion.rotations.core._helpers import (_check_dual_quaternion_array_and_shape,
                                                 _check_matrix4_array_and_shape, _check_quaternion_array_and_shape,
                                                 _check_vector_array_and_shape, _column_major, _fill_output)
from rigidmotion.rotations.core.conversions import _quaternion_rotation_block, _rotmat_to_quaternion_components
from rigidmotion.rotations.core.elementals import rot_x, rot_y, rot_z


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate inputs to the transform routines.
"""


__all__ = ['matrix4_identity', 'matrix4_from_translation', 'matrix4_from_scaling', 'matrix4_from_rotation',
           'matrix4_from_x_rotation', 'matrix4_from_y_rotation', 'matrix4_from_z_rotation',
           'matrix4_from_quaternion', 'matrix4_from_rotation_translation', 'matrix4_from_rotation_translation_scale',
           'matrix4_from_rotation_translation_scale_origin', 'matrix4_from_dual_quaternion',
           'matrix4_multiply', 'matrix4_determinant', 'matrix4_invert',
           'matrix4_rotate', 'matrix4_rotate_x', 'matrix4_rotate_y', 'matrix4_rotate_z',
           'matrix4_translate', 'matrix4_scale',
           'matrix4_get_translation', 'matrix4_set_translation', 'matrix4_get_scaling', 'matrix4_get_rotation',
           'matrix4_decompose', 'matrix4_transform_point', 'matrix4_equals', 'matrix4_exact_equals']


def _affine(block: DOUBLE_ARRAY, translation: ARRAY_LIKE = (0, 0, 0)) -> DOUBLE_ARRAY:
    """
    Embed a 3x3 block and a translation into a 4x4 affine matrix indexed [row, column].
    """

    matrix = np.eye(4)
    matrix[:3, :3] = block
    matrix[:3, 3] = translation

    return matrix


def _unit_axis(axis: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Normalize a rotation axis, raising a MagnitudeError for a zero length axis.
    """

    work_axis = _check_vector_array_and_shape(axis)

    length = np.linalg.norm(work_axis)

    if length == 0:
        raise MagnitudeError('Cannot rotate about a zero length axis.')

    return work_axis / length


def _axis_angle_block(radians: float, axis: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    r"""
    The rotation block :math:`c\mathbf{I}+s\left[\hat{\mathbf{x}}\times\right]+(1-c)\hat{\mathbf{x}}\hat{\mathbf{x}}^T`
    for a unit axis.
    """

    s = np.sin(radians)
    c = np.cos(radians)
    x, y, z = axis

    cross_matrix = np.array([[0, -z, y],
                             [z, 0, -x],
                             [-y, x, 0]])

    return c * np.eye(3) + s * cross_matrix + (1 - c) * np.outer(axis, axis)


def matrix4_identity(out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The 4x4 identity matrix in column-major order.
    """

    return _fill_output(_column_major(np.eye(4)), out)


def matrix4_from_translation(translation: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix that only translates.

    :param translation: The length 3 translation
    :param out: An optional length 16 output to store the result in
    :return: The column-major transform matrix
    """

    return _fill_output(_column_major(_affine(np.eye(3), _check_vector_array_and_shape(translation))), out)


def matrix4_from_scaling(scaling: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix that only scales along each axis.

    :param scaling: The length 3 scale factors
    :param out: An optional length 16 output to store the result in
    :return: The column-major transform matrix
    """

    return _fill_output(_column_major(_affine(np.diag(_check_vector_array_and_shape(scaling)))), out)


def matrix4_from_rotation(radians: float, axis: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix that rotates by ``radians`` about ``axis``.

    The axis is normalized before use.

    :param radians: The angle to rotate by
    :param axis: The axis to rotate about
    :param out: An optional length 16 output to store the result in
    :return: The column-major transform matrix
    :raises MagnitudeError: If the axis has zero length
    """

    return _fill_output(_column_major(_affine(_axis_angle_block(radians, _unit_axis(axis)))), out)


def matrix4_from_x_rotation(radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix that rotates about the x axis.
    """

    return _fill_output(_column_major(_affine(rot_x(radians))), out)


def matrix4_from_y_rotation(radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix that rotates about the y axis.
    """

    return _fill_output(_column_major(_affine(rot_y(radians))), out)


def matrix4_from_z_rotation(radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix that rotates about the z axis.
    """

    return _fill_output(_column_major(_affine(rot_z(radians))), out)


def matrix4_from_quaternion(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix from a rotation quaternion.
    """

    block = _quaternion_rotation_block(_check_quaternion_array_and_shape(quaternion))

    return _fill_output(_column_major(_affine(block)), out)


def matrix4_from_rotation_translation(rotation: ARRAY_LIKE, translation: ARRAY_LIKE,
                                      out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix from a rotation quaternion and a translation.

    The resulting transform rotates first and then translates.

    :param rotation: The unit rotation quaternion
    :param translation: The length 3 translation
    :param out: An optional length 16 output to store the result in
    :return: The column-major transform matrix
    """

    block = _quaternion_rotation_block(_check_quaternion_array_and_shape(rotation))

    return _fill_output(_column_major(_affine(block, _check_vector_array_and_shape(translation))), out)


def matrix4_from_rotation_translation_scale(rotation: ARRAY_LIKE, translation: ARRAY_LIKE, scaling: ARRAY_LIKE,
                                            out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a transform matrix from a rotation quaternion, a translation, and per axis scale factors.

    The resulting transform scales, then rotates, then translates.  Each column of the rotation block is multiplied by
    the corresponding scale factor.

    :param rotation: The unit rotation quaternion
    :param translation: The length 3 translation
    :param scaling: The length 3 scale factors
    :param out: An optional length 16 output to store the result in
    :return: The column-major transform matrix
    """

    block = _quaternion_rotation_block(_check_quaternion_array_and_shape(rotation))
    block *= _check_vector_array_and_shape(scaling)

    return _fill_output(_column_major(_affine(block, _check_vector_array_and_shape(translation))), out)


def matrix4_from_rotation_translation_scale_origin(rotation: ARRAY_LIKE, translation: ARRAY_LIKE,
                                                   scaling: ARRAY_LIKE, origin: ARRAY_LIKE,
                                                   out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    Creates a transform matrix from a rotation, translation, and scale where the scale and rotation happen about
    ``origin`` instead of the coordinate origin.

    The translation column becomes :math:`\mathbf{t}+\mathbf{o}-\mathbf{R}\mathbf{S}\mathbf{o}`.

    :param rotation: The unit rotation quaternion
    :param translation: The length 3 translation
    :param scaling: The length 3 scale factors
    :param origin: The pivot point for the scale and rotation
    :param out: An optional length 16 output to store the result in
    :return: The column-major transform matrix
    """

    block = _quaternion_rotation_block(_check_quaternion_array_and_shape(rotation))
    block *= _check_vector_array_and_shape(scaling)

    pivot = _check_vector_array_and_shape(origin)

    offset = _check_vector_array_and_shape(translation) + pivot - block @ pivot

    return _fill_output(_column_major(_affine(block, offset)), out)


def matrix4_from_dual_quaternion(dual_quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    Creates a transform matrix from a dual quaternion.

    The translation is recovered as :math:`2\mathbf{q}_d\otimes\mathbf{q}_r^*`, divided by the squared magnitude of
    the real part when that is nonzero so that a dual quaternion with a non-unit real part still gives the right
    translation.  The real part is then expanded as the rotation block.

    :param dual_quaternion: The dual quaternion to convert
    :param out: An optional length 16 output to store the result in
    :return: The column-major transform matrix
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    real = work_dq[:4]
    dual = work_dq[4:]

    real_conjugate_v = -real[:3]
    real_s = real[3]

    # vector part of 2 * dual * conjugate(real)
    translation = 2 * (dual[3] * real_conjugate_v + real_s * dual[:3] + np.cross(dual[:3], real_conjugate_v))

    squared_magnitude = real @ real
    if squared_magnitude > 0:
        translation /= squared_magnitude

    return _fill_output(_column_major(_affine(_quaternion_rotation_block(real), translation)), out)


def matrix4_multiply(matrix_1: ARRAY_LIKE, matrix_2: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The matrix product ``matrix_1 @ matrix_2``, the transform that applies matrix_2 first and then matrix_1.
    """

    product = _check_matrix4_array_and_shape(matrix_1) @ _check_matrix4_array_and_shape(matrix_2)

    return _fill_output(_column_major(product), out)


def _cofactor_terms(matrix: DOUBLE_ARRAY) -> tuple[float, ...]:
    """
    The 2x2 minors of the top and bottom row pairs used by the cofactor expansion.
    """

    a = matrix

    return (a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0],
            a[0, 0] * a[1, 2] - a[0, 2] * a[1, 0],
            a[0, 0] * a[1, 3] - a[0, 3] * a[1, 0],
            a[0, 1] * a[1, 2] - a[0, 2] * a[1, 1],
            a[0, 1] * a[1, 3] - a[0, 3] * a[1, 1],
            a[0, 2] * a[1, 3] - a[0, 3] * a[1, 2],
            a[2, 0] * a[3, 1] - a[2, 1] * a[3, 0],
            a[2, 0] * a[3, 2] - a[2, 2] * a[3, 0],
            a[2, 0] * a[3, 3] - a[2, 3] * a[3, 0],
            a[2, 1] * a[3, 2] - a[2, 2] * a[3, 1],
            a[2, 1] * a[3, 3] - a[2, 3] * a[3, 1],
            a[2, 2] * a[3, 3] - a[2, 3] * a[3, 2])


def _determinant_from_terms(terms: tuple[float, ...]) -> float:
    b00, b01, b02, b03, b04, b05, b06, b07, b08, b09, b10, b11 = terms

    return b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06


def matrix4_determinant(matrix: ARRAY_LIKE) -> float:
    """
    The determinant of a 4x4 matrix through a fixed cofactor expansion.

    :param matrix: The matrix
    :return: The determinant
    """

    return float(_determinant_from_terms(_cofactor_terms(_check_matrix4_array_and_shape(matrix))))


def matrix4_invert(matrix: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Inverts a 4x4 matrix through the adjugate and the cofactor expansion of the determinant.

    Only an exactly zero determinant is treated as singular.  A nearly singular matrix is inverted and the result may
    be very large.

    :param matrix: The matrix to invert
    :param out: An optional length 16 output to store the result in (may be the input)
    :return: The column-major inverse
    :raises SingularMatrixError: If the determinant is exactly zero
    """

    a = _check_matrix4_array_and_shape(matrix)

    terms = _cofactor_terms(a)
    b00, b01, b02, b03, b04, b05, b06, b07, b08, b09, b10, b11 = terms

    det = _determinant_from_terms(terms)

    if det == 0:
        raise SingularMatrixError()

    adjugate = np.array([
        [a[1, 1] * b11 - a[1, 2] * b10 + a[1, 3] * b09,
         a[0, 2] * b10 - a[0, 1] * b11 - a[0, 3] * b09,
         a[3, 1] * b05 - a[3, 2] * b04 + a[3, 3] * b03,
         a[2, 2] * b04 - a[2, 1] * b05 - a[2, 3] * b03],
        [a[1, 2] * b08 - a[1, 0] * b11 - a[1, 3] * b07,
         a[0, 0] * b11 - a[0, 2] * b08 + a[0, 3] * b07,
         a[3, 2] * b02 - a[3, 0] * b05 - a[3, 3] * b01,
         a[2, 0] * b05 - a[2, 2] * b02 + a[2, 3] * b01],
        [a[1, 0] * b10 - a[1, 1] * b08 + a[1, 3] * b06,
         a[0, 1] * b08 - a[0, 0] * b10 - a[0, 3] * b06,
         a[3, 0] * b04 - a[3, 1] * b02 + a[3, 3] * b00,
         a[2, 1] * b02 - a[2, 0] * b04 - a[2, 3] * b00],
        [a[1, 1] * b07 - a[1, 0] * b09 - a[1, 2] * b06,
         a[0, 0] * b09 - a[0, 1] * b07 + a[0, 2] * b06,
         a[3, 1] * b01 - a[3, 0] * b03 - a[3, 2] * b00,
         a[2, 0] * b03 - a[2, 1] * b01 + a[2, 2] * b00]])

    return _fill_output(_column_major(adjugate / det), out)


def matrix4_rotate(matrix: ARRAY_LIKE, radians: float, axis: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Post-multiplies a matrix by a rotation of ``radians`` about ``axis`` (the rotation happens in the local frame).

    :param matrix: The matrix to rotate
    :param radians: The angle to rotate by
    :param axis: The axis to rotate about.  It is normalized before use
    :param out: An optional length 16 output to store the result in (may be the input)
    :return: The rotated column-major matrix
    :raises MagnitudeError: If the axis has zero length
    """

    rotation = _affine(_axis_angle_block(radians, _unit_axis(axis)))

    return _fill_output(_column_major(_check_matrix4_array_and_shape(matrix) @ rotation), out)


def matrix4_rotate_x(matrix: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Post-multiplies a matrix by a rotation about the x axis.
    """

    return _fill_output(_column_major(_check_matrix4_array_and_shape(matrix) @ _affine(rot_x(radians))), out)


def matrix4_rotate_y(matrix: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Post-multiplies a matrix by a rotation about the y axis.
    """

    return _fill_output(_column_major(_check_matrix4_array_and_shape(matrix) @ _affine(rot_y(radians))), out)


def matrix4_rotate_z(matrix: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Post-multiplies a matrix by a rotation about the z axis.
    """

    return _fill_output(_column_major(_check_matrix4_array_and_shape(matrix) @ _affine(rot_z(radians))), out)


def matrix4_translate(matrix: ARRAY_LIKE, translation: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Post-multiplies a matrix by a translation (the translation happens in the local frame).
    """

    translation_matrix = _affine(np.eye(3), _check_vector_array_and_shape(translation))

    return _fill_output(_column_major(_check_matrix4_array_and_shape(matrix) @ translation_matrix), out)


def matrix4_scale(matrix: ARRAY_LIKE, scaling: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Post-multiplies a matrix by a per axis scale (scales the first three columns).
    """

    scale_matrix = _affine(np.diag(_check_vector_array_and_shape(scaling)))

    return _fill_output(_column_major(_check_matrix4_array_and_shape(matrix) @ scale_matrix), out)


def matrix4_get_translation(matrix: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The translation column of a transform matrix.
    """

    return _fill_output(_check_matrix4_array_and_shape(matrix)[:3, 3], out)


def matrix4_set_translation(matrix: ARRAY_LIKE, translation: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Replaces the translation column of a transform matrix, keeping every other element.
    """

    work_matrix = _check_matrix4_array_and_shape(matrix)
    work_matrix[:3, 3] = _check_vector_array_and_shape(translation)

    return _fill_output(_column_major(work_matrix), out)


def matrix4_get_scaling(matrix: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The scale along each axis of a transform matrix.

    Each scale factor is the length of the corresponding column of the upper left 3x3 block.  This only recovers the
    correct values when the block has no shear.  Negative scales (reflections) cannot be recovered.

    :param matrix: The transform matrix
    :param out: An optional length 3 output to store the result in
    :return: The scale factors
    """

    return _fill_output(np.linalg.norm(_check_matrix4_array_and_shape(matrix)[:3, :3], axis=0), out)


def matrix4_get_rotation(matrix: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The rotation quaternion of a transform matrix.

    Each column of the upper left 3x3 block is divided by its length (see :func:`matrix4_get_scaling`) and the
    resulting rotation matrix is converted with the same trace based extraction as :func:`.rotmat_to_quaternion`.  A
    column with zero length cannot be unscaled; it is used as is and the condition is logged.

    :param matrix: The transform matrix
    :param out: An optional length 4 output to store the result in
    :return: The rotation quaternion
    """

    block = _check_matrix4_array_and_shape(matrix)[:3, :3]

    scaling = np.linalg.norm(block, axis=0)

    zero_columns = scaling == 0
    if zero_columns.any():
        _LOGGER.warning(f'Columns {np.flatnonzero(zero_columns).tolist()} of the matrix have zero scale, '
                        'the rotation is not well defined')
        scaling[zero_columns] = 1

    return _fill_output(_rotmat_to_quaternion_components(block / scaling), out)


def matrix4_decompose(matrix: ARRAY_LIKE) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY]:
    """
    Splits a transform matrix into its translation, rotation quaternion, and scale factors.

    This is the inverse of :func:`matrix4_from_rotation_translation_scale` for matrices without shear or reflection.

    :param matrix: The transform matrix
    :return: The translation, the rotation quaternion, and the scale factors as new arrays
    """

    work_matrix = _check_matrix4_array_and_shape(matrix)

    return matrix4_get_translation(work_matrix), matrix4_get_rotation(work_matrix), matrix4_get_scaling(work_matrix)


def matrix4_transform_point(matrix: ARRAY_LIKE, point: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Applies a transform matrix to a 3 element point.

    The point is treated as homogeneous with w=1 and the result is divided by the resulting w (when it is nonzero).

    :param matrix: The transform matrix
    :param point: The point to transform
    :param out: An optional length 3 output to store the result in (may be the input point)
    :return: The transformed point
    """

    homogeneous = _check_matrix4_array_and_shape(matrix) @ np.append(_check_vector_array_and_shape(point), 1.0)

    w = homogeneous[3] if homogeneous[3] != 0 else 1.0

    return _fill_output(homogeneous[:3] / w, out)


def matrix4_equals(matrix_1: ARRAY_LIKE, matrix_2: ARRAY_LIKE, epsilon: float = EPSILON) -> bool:
    """
    Element-wise relative-epsilon comparison of two matrices.
    """

    return approx_relative(_check_matrix4_array_and_shape(matrix_1), _check_matrix4_array_and_shape(matrix_2),
                           epsilon)


def matrix4_exact_equals(matrix_1: ARRAY_LIKE, matrix_2: ARRAY_LIKE) -> bool:
    """
    Exact element-wise comparison of two matrices.
    """

    return bool(np.array_equal(_check_matrix4_array_and_shape(matrix_1), _check_matrix4_array_and_shape(matrix_2)))
