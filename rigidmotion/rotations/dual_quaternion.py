# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the dual quaternion algebra for representing rigid transforms (a rotation followed by a
translation).

A dual quaternion is stored as 8 numbers, the real part :math:`\mathbf{q}_r` followed by the dual part
:math:`\mathbf{q}_d`, each in ``(x, y, z, w)`` order.  For a rotation :math:`\mathbf{q}` followed by a translation
:math:`\mathbf{t}`

.. math::
    \mathbf{q}_r = \mathbf{q} \qquad \mathbf{q}_d = \frac{1}{2}\mathbf{t}\otimes\mathbf{q}

where :math:`\mathbf{t}` is treated as a pure quaternion :math:`(t_x, t_y, t_z, 0)`.  The translation is recovered as
the vector part of :math:`2\mathbf{q}_d\otimes\mathbf{q}_r^*`.

Every routine returns a new flat array unless an ``out`` array (or mutable sequence) is given, in which case all 8
values are written into it.  ``out`` may be one of the inputs.
"""

import logging

import numpy as np

from rigidmotion._typing import ARRAY_LIKE, DOUBLE_ARRAY, OUTPUT
from rigidmotion.errors import MagnitudeError
from rigidmotion.tolerance import EPSILON, approx_relative

from rigidmotion.rotations.core._helpers import (_check_dual_quaternion_array_and_shape,
                                                 _check_quaternion_array_and_shape, _check_vector_array_and_shape,
                                                 _fill_output)
from rigidmotion.rotations.core.quaternion_math import (quaternion_conjugate, quaternion_multiply,
                                                        quaternion_rotate_vector, quaternion_rotate_x,
                                                        quaternion_rotate_y, quaternion_rotate_z)
from rigidmotion.rotations.matrix4 import matrix4_get_rotation, matrix4_get_translation


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate dual quaternions.
"""


__all__ = ['dual_quaternion_identity', 'dual_quaternion_from_rotation_translation', 'dual_quaternion_from_translation',
           'dual_quaternion_from_rotation', 'dual_quaternion_from_matrix4',
           'dual_quaternion_get_real', 'dual_quaternion_set_real', 'dual_quaternion_get_dual',
           'dual_quaternion_set_dual', 'dual_quaternion_get_translation', 'dual_quaternion_translate',
           'dual_quaternion_rotate_x', 'dual_quaternion_rotate_y', 'dual_quaternion_rotate_z',
           'dual_quaternion_rotate_by_quaternion_append', 'dual_quaternion_rotate_by_quaternion_prepend',
           'dual_quaternion_rotate_around_axis', 'dual_quaternion_add', 'dual_quaternion_multiply',
           'dual_quaternion_scale', 'dual_quaternion_dot', 'dual_quaternion_magnitude', 'dual_quaternion_lerp',
           'dual_quaternion_invert', 'dual_quaternion_conjugate', 'dual_quaternion_normalize',
           'dual_quaternion_equals', 'dual_quaternion_exact_equals', 'dual_quaternion_transform_point']


def _pure(vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    A 3 vector as a pure quaternion.
    """

    return np.append(vector, 0.0)


def _translation_of(real: DOUBLE_ARRAY, dual: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    return 2 * quaternion_multiply(dual, quaternion_conjugate(real))[:3]


def dual_quaternion_identity(out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The identity dual quaternion, no rotation and no translation.
    """

    return _fill_output([0, 0, 0, 1, 0, 0, 0, 0], out)


def dual_quaternion_from_rotation_translation(rotation: ARRAY_LIKE, translation: ARRAY_LIKE,
                                              out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    Creates a dual quaternion from a rotation quaternion and a translation.

    The resulting transform rotates first and then translates.  The real part is the rotation unchanged and the dual
    part is :math:`\frac{1}{2}\mathbf{t}\otimes\mathbf{q}`.

    :param rotation: The rotation quaternion
    :param translation: The length 3 translation
    :param out: An optional length 8 output to store the result in (may be one of the inputs)
    :return: The dual quaternion
    """

    real = _check_quaternion_array_and_shape(rotation)
    dual = 0.5 * quaternion_multiply(_pure(_check_vector_array_and_shape(translation)), real)

    return _fill_output(np.concatenate([real, dual]), out)


def dual_quaternion_from_translation(translation: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a dual quaternion that only translates.
    """

    return _fill_output(np.concatenate([[0, 0, 0, 1], _pure(_check_vector_array_and_shape(translation) / 2)]), out)


def dual_quaternion_from_rotation(rotation: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a dual quaternion that only rotates.
    """

    return _fill_output(np.concatenate([_check_quaternion_array_and_shape(rotation), np.zeros(4)]), out)


def dual_quaternion_from_matrix4(matrix: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Creates a dual quaternion from the rotation and translation of a transform matrix.

    Any scale in the matrix is discarded (see :func:`.matrix4_get_rotation`).

    :param matrix: The transform matrix as 16 column-major numbers or a 4x4 array
    :param out: An optional length 8 output to store the result in
    :return: The dual quaternion
    """

    return dual_quaternion_from_rotation_translation(matrix4_get_rotation(matrix), matrix4_get_translation(matrix),
                                                     out=out)


def dual_quaternion_get_real(dual_quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The real (rotation) part of a dual quaternion.
    """

    return _fill_output(_check_dual_quaternion_array_and_shape(dual_quaternion)[:4], out)


def dual_quaternion_set_real(dual_quaternion: ARRAY_LIKE, real: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Replaces the real part of a dual quaternion, keeping the dual part.
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    return _fill_output(np.concatenate([_check_quaternion_array_and_shape(real), work_dq[4:]]), out)


def dual_quaternion_get_dual(dual_quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The dual part of a dual quaternion.
    """

    return _fill_output(_check_dual_quaternion_array_and_shape(dual_quaternion)[4:], out)


def dual_quaternion_set_dual(dual_quaternion: ARRAY_LIKE, dual: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Replaces the dual part of a dual quaternion, keeping the real part.
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    return _fill_output(np.concatenate([work_dq[:4], _check_quaternion_array_and_shape(dual)]), out)


def dual_quaternion_get_translation(dual_quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    The translation of a dual quaternion, the vector part of :math:`2\mathbf{q}_d\otimes\mathbf{q}_r^*`.

    This assumes the dual quaternion is normalized.

    :param dual_quaternion: The dual quaternion
    :param out: An optional length 3 output to store the result in
    :return: The translation
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    return _fill_output(_translation_of(work_dq[:4], work_dq[4:]), out)


def dual_quaternion_translate(dual_quaternion: ARRAY_LIKE, translation: ARRAY_LIKE,
                              out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    Translates a dual quaternion in its local frame.

    The real part is unchanged and :math:`\frac{1}{2}\mathbf{q}_r\otimes\mathbf{t}` is added to the dual part.

    :param dual_quaternion: The dual quaternion to translate
    :param translation: The length 3 translation
    :param out: An optional length 8 output to store the result in (may be one of the inputs)
    :return: The translated dual quaternion
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)
    real = work_dq[:4]

    dual = work_dq[4:] + quaternion_multiply(real, _pure(_check_vector_array_and_shape(translation) / 2))

    return _fill_output(np.concatenate([real, dual]), out)


def _rotate_about_coordinate_axis(dual_quaternion: ARRAY_LIKE, radians: float, rotate, out: OUTPUT) -> DOUBLE_ARRAY:
    """
    Rotates the real part with ``rotate`` and rebuilds the dual part so the translation is kept.
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)
    real = work_dq[:4]

    # the dual part relative to the old rotation, re-applied to the new one
    relative = quaternion_multiply(work_dq[4:], quaternion_conjugate(real))

    new_real = rotate(real, radians)

    return _fill_output(np.concatenate([new_real, quaternion_multiply(relative, new_real)]), out)


def dual_quaternion_rotate_x(dual_quaternion: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Rotates a dual quaternion about the x axis.

    The rotation is applied to the real part the same way as :func:`.quaternion_rotate_x` and the translation is
    preserved.

    :param dual_quaternion: The unit dual quaternion to rotate
    :param radians: The angle to rotate by
    :param out: An optional length 8 output to store the result in (may be the input)
    :return: The rotated dual quaternion
    """

    return _rotate_about_coordinate_axis(dual_quaternion, radians, quaternion_rotate_x, out)


def dual_quaternion_rotate_y(dual_quaternion: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Rotates a dual quaternion about the y axis.  See :func:`dual_quaternion_rotate_x`.
    """

    return _rotate_about_coordinate_axis(dual_quaternion, radians, quaternion_rotate_y, out)


def dual_quaternion_rotate_z(dual_quaternion: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Rotates a dual quaternion about the z axis.  See :func:`dual_quaternion_rotate_x`.
    """

    return _rotate_about_coordinate_axis(dual_quaternion, radians, quaternion_rotate_z, out)


def dual_quaternion_rotate_by_quaternion_append(dual_quaternion: ARRAY_LIKE, quaternion: ARRAY_LIKE,
                                                out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Right-multiplies both parts of a dual quaternion by a quaternion.

    :param dual_quaternion: The dual quaternion to rotate
    :param quaternion: The rotation quaternion
    :param out: An optional length 8 output to store the result in (may be the input)
    :return: The rotated dual quaternion
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)
    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    return _fill_output(np.concatenate([quaternion_multiply(work_dq[:4], work_quaternion),
                                        quaternion_multiply(work_dq[4:], work_quaternion)]), out)


def dual_quaternion_rotate_by_quaternion_prepend(quaternion: ARRAY_LIKE, dual_quaternion: ARRAY_LIKE,
                                                 out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Left-multiplies both parts of a dual quaternion by a quaternion.

    :param quaternion: The rotation quaternion
    :param dual_quaternion: The dual quaternion to rotate
    :param out: An optional length 8 output to store the result in (may be the input)
    :return: The rotated dual quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)
    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    return _fill_output(np.concatenate([quaternion_multiply(work_quaternion, work_dq[:4]),
                                        quaternion_multiply(work_quaternion, work_dq[4:])]), out)


def dual_quaternion_rotate_around_axis(dual_quaternion: ARRAY_LIKE, axis: ARRAY_LIKE, radians: float,
                                       out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Rotates a dual quaternion by ``radians`` about ``axis``.

    Both parts are right-multiplied by the rotation quaternion of the (normalized) axis.  A rotation of exactly zero
    radians returns a copy of the input.

    :param dual_quaternion: The dual quaternion to rotate
    :param axis: The axis to rotate about
    :param radians: The angle to rotate by
    :param out: An optional length 8 output to store the result in (may be the input)
    :return: The rotated dual quaternion
    :raises MagnitudeError: If the axis has zero length
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)
    work_axis = _check_vector_array_and_shape(axis)

    axis_length = np.linalg.norm(work_axis)

    if axis_length == 0:
        raise MagnitudeError('Cannot rotate about a zero length axis.')

    if radians == 0:
        return _fill_output(work_dq.copy(), out)

    half = radians / 2
    rotation = np.append(work_axis * np.sin(half) / axis_length, np.cos(half))

    return dual_quaternion_rotate_by_quaternion_append(work_dq, rotation, out=out)


def dual_quaternion_add(dual_quaternion_1: ARRAY_LIKE, dual_quaternion_2: ARRAY_LIKE,
                        out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Component-wise sum of two dual quaternions.
    """

    return _fill_output(_check_dual_quaternion_array_and_shape(dual_quaternion_1) +
                        _check_dual_quaternion_array_and_shape(dual_quaternion_2), out)


def dual_quaternion_multiply(dual_quaternion_1: ARRAY_LIKE, dual_quaternion_2: ARRAY_LIKE,
                             out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    The dual quaternion product, the transform that applies ``dual_quaternion_2`` first and then
    ``dual_quaternion_1``.

    .. math::
        \mathbf{a}\mathbf{b} = \mathbf{a}_r\otimes\mathbf{b}_r +
        \epsilon\left(\mathbf{a}_r\otimes\mathbf{b}_d + \mathbf{a}_d\otimes\mathbf{b}_r\right)

    :param dual_quaternion_1: The first dual quaternion
    :param dual_quaternion_2: The second dual quaternion
    :param out: An optional length 8 output to store the result in (may be one of the inputs)
    :return: The product
    """

    a = _check_dual_quaternion_array_and_shape(dual_quaternion_1)
    b = _check_dual_quaternion_array_and_shape(dual_quaternion_2)

    real = quaternion_multiply(a[:4], b[:4])
    dual = quaternion_multiply(a[:4], b[4:]) + quaternion_multiply(a[4:], b[:4])

    return _fill_output(np.concatenate([real, dual]), out)


def dual_quaternion_scale(dual_quaternion: ARRAY_LIKE, scalar: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Multiplies every component of a dual quaternion by a scalar.
    """

    return _fill_output(_check_dual_quaternion_array_and_shape(dual_quaternion) * scalar, out)


def dual_quaternion_dot(dual_quaternion_1: ARRAY_LIKE, dual_quaternion_2: ARRAY_LIKE) -> float:
    """
    The dot product of the real parts of two dual quaternions.
    """

    return float(_check_dual_quaternion_array_and_shape(dual_quaternion_1)[:4] @
                 _check_dual_quaternion_array_and_shape(dual_quaternion_2)[:4])


def dual_quaternion_magnitude(dual_quaternion: ARRAY_LIKE) -> float:
    """
    The magnitude of the real part of a dual quaternion.
    """

    return float(np.linalg.norm(_check_dual_quaternion_array_and_shape(dual_quaternion)[:4]))


def dual_quaternion_lerp(dual_quaternion_1: ARRAY_LIKE, dual_quaternion_2: ARRAY_LIKE, t: float,
                         out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    Linear interpolation between two dual quaternions.

    The result is :math:`(1-t)\mathbf{a} + t\mathbf{b}`, except when the real parts point into opposite hemispheres
    (their dot product is negative) where the weight on :math:`\mathbf{b}` is negated so that the shorter path is
    taken, the same rule as :func:`.slerp`.  The result is not normalized.

    :param dual_quaternion_1: The dual quaternion at t=0
    :param dual_quaternion_2: The dual quaternion at t=1
    :param t: The interpolation amount, usually in [0, 1]
    :param out: An optional length 8 output to store the result in (may be one of the inputs)
    :return: The interpolated dual quaternion
    """

    a = _check_dual_quaternion_array_and_shape(dual_quaternion_1)
    b = _check_dual_quaternion_array_and_shape(dual_quaternion_2)

    weight_a = 1 - t
    weight_b = -t if a[:4] @ b[:4] < 0 else t

    return _fill_output(a * weight_a + b * weight_b, out)


def dual_quaternion_invert(dual_quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The inverse transform of a dual quaternion.

    Both parts are conjugated and divided by the squared magnitude of the real part.  For a normalized dual quaternion
    :func:`dual_quaternion_conjugate` gives the same result.  A dual quaternion with a zero real part has no inverse
    and all zeros are returned for it, as with :func:`.quaternion_invert`.

    :param dual_quaternion: The dual quaternion to invert
    :param out: An optional length 8 output to store the result in (may be the input)
    :return: The inverse
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    squared_magnitude = work_dq[:4] @ work_dq[:4]

    if squared_magnitude == 0:
        return _fill_output(np.zeros(8), out)

    return _fill_output(np.concatenate([quaternion_conjugate(work_dq[:4]),
                                        quaternion_conjugate(work_dq[4:])]) / squared_magnitude, out)


def dual_quaternion_conjugate(dual_quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Conjugates both the real and the dual parts of a dual quaternion.
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    return _fill_output(np.concatenate([quaternion_conjugate(work_dq[:4]), quaternion_conjugate(work_dq[4:])]), out)


def dual_quaternion_normalize(dual_quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    Normalizes a dual quaternion so that it represents a rigid transform.

    The real part is scaled to unit length and the component of the dual part along the real part is removed so that
    :math:`\mathbf{q}_r^T\mathbf{q}_d = 0`:

    .. math::
        \hat{\mathbf{q}}_r = \frac{\mathbf{q}_r}{\left\|\mathbf{q}_r\right\|} \qquad
        \hat{\mathbf{q}}_d = \frac{\mathbf{q}_d - \hat{\mathbf{q}}_r(\hat{\mathbf{q}}_r^T\mathbf{q}_d)}
        {\left\|\mathbf{q}_r\right\|}

    A dual quaternion with a zero real part cannot be normalized and is returned unchanged.

    :param dual_quaternion: The dual quaternion to normalize
    :param out: An optional length 8 output to store the result in (may be the input)
    :return: The normalized dual quaternion
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)

    magnitude = np.linalg.norm(work_dq[:4])

    if magnitude == 0:
        _LOGGER.debug('Cannot normalize a dual quaternion with a zero real part')
        return _fill_output(work_dq.copy(), out)

    real = work_dq[:4] / magnitude
    dual = work_dq[4:]

    dual = (dual - real * (real @ dual)) / magnitude

    return _fill_output(np.concatenate([real, dual]), out)


def dual_quaternion_equals(dual_quaternion_1: ARRAY_LIKE, dual_quaternion_2: ARRAY_LIKE,
                           epsilon: float = EPSILON) -> bool:
    """
    Component-wise relative-epsilon comparison of two dual quaternions.
    """

    return approx_relative(_check_dual_quaternion_array_and_shape(dual_quaternion_1),
                           _check_dual_quaternion_array_and_shape(dual_quaternion_2), epsilon)


def dual_quaternion_exact_equals(dual_quaternion_1: ARRAY_LIKE, dual_quaternion_2: ARRAY_LIKE) -> bool:
    """
    Exact component-wise comparison of two dual quaternions.
    """

    return bool(np.array_equal(_check_dual_quaternion_array_and_shape(dual_quaternion_1),
                               _check_dual_quaternion_array_and_shape(dual_quaternion_2)))


def dual_quaternion_transform_point(dual_quaternion: ARRAY_LIKE, point: ARRAY_LIKE,
                                    out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Applies the rigid transform of a normalized dual quaternion to a point, rotating it and then translating it.

    :param dual_quaternion: The normalized dual quaternion
    :param point: The length 3 point
    :param out: An optional length 3 output to store the result in (may be the input point)
    :return: The transformed point
    """

    work_dq = _check_dual_quaternion_array_and_shape(dual_quaternion)
    real = work_dq[:4]

    transformed = quaternion_rotate_vector(real, point) + _translation_of(real, work_dq[4:])

    return _fill_output(transformed, out)
