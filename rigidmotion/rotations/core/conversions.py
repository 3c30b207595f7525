# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains the routines for converting between rotation matrices, quaternions, euler angles, axis-angle
pairs, and coordinate bases.  All routines are implemented purely on numpy arrays (or array like objects).
"""

from typing import Literal

import numpy as np

from rigidmotion._typing import ARRAY_LIKE, DOUBLE_ARRAY, OUTPUT, AxisAngle
from rigidmotion.tolerance import EPSILON

from rigidmotion.rotations.core._helpers import (_check_matrix3_array_and_shape, _check_quaternion_array_and_shape,
                                                 _check_vector_array_and_shape, _column_major, _fill_output)
from rigidmotion.rotations.core.quaternion_math import (quaternion_multiply, quaternion_normalize,
                                                        _elemental_quaternion)


__all__ = ['rotmat_to_quaternion', 'quaternion_to_rotmat', 'euler_to_quaternion',
           'quaternion_from_axis_angle', 'quaternion_to_axis_angle', 'axes_to_quaternion',
           'quaternion_rotation_to']


EULER_ORDERS = Literal['xyz', 'xzy', 'yxz', 'yzx', 'zxy', 'zyx']


def _rotmat_to_quaternion_components(rotation_matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Trace based extraction of a quaternion from a :math:`3\times 3` rotation matrix indexed [row, column].

    When the trace is positive the scalar component is the largest and the direct branch is used.  Otherwise the
    largest diagonal element :math:`i` selects the branch, with :math:`j=(i+1)\bmod 3` and :math:`k=(i+2)\bmod 3`, so
    that the square root that is divided by stays away from zero.

    This is the single implementation behind both :func:`rotmat_to_quaternion` and :func:`.matrix4_get_rotation`.
    """

    trace = np.trace(rotation_matrix)

    quaternion = np.empty(4)

    if trace > 0:
        root = np.sqrt(trace + 1)
        quaternion[3] = root / 2
        root = 0.5 / root
        quaternion[0] = (rotation_matrix[2, 1] - rotation_matrix[1, 2]) * root
        quaternion[1] = (rotation_matrix[0, 2] - rotation_matrix[2, 0]) * root
        quaternion[2] = (rotation_matrix[1, 0] - rotation_matrix[0, 1]) * root

        return quaternion

    i = int(np.argmax(np.diag(rotation_matrix)))
    j = (i + 1) % 3
    k = (i + 2) % 3

    root = np.sqrt(rotation_matrix[i, i] - rotation_matrix[j, j] - rotation_matrix[k, k] + 1)
    quaternion[i] = root / 2
    root = 0.5 / root
    quaternion[3] = (rotation_matrix[k, j] - rotation_matrix[j, k]) * root
    quaternion[j] = (rotation_matrix[j, i] + rotation_matrix[i, j]) * root
    quaternion[k] = (rotation_matrix[k, i] + rotation_matrix[i, k]) * root

    return quaternion


def _quaternion_rotation_block(quaternion: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Expand a quaternion into the :math:`3\times 3` rotation block indexed [row, column].

    This uses the :math:`1-2(y^2+z^2)` form of the expansion, which assumes the quaternion is unit length.
    """

    x, y, z, w = quaternion

    x2 = x + x
    y2 = y + y
    z2 = z + z
    xx = x * x2
    xy = x * y2
    xz = x * z2
    yy = y * y2
    yz = y * z2
    zz = z * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    return np.array([[1 - (yy + zz), xy - wz, xz + wy],
                     [xy + wz, 1 - (xx + zz), yz - wx],
                     [xz - wy, yz + wx, 1 - (xx + yy)]])


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a unit quaternion.

    The matrix may be given either as a :math:`3\times 3` array indexed [row, column] or as 9 numbers in column-major
    order.  The conversion uses trace based branch selection: the branch is chosen according to which of
    :math:`q_s, q_x, q_y, q_z` is largest so that the division is always by a number well away from zero.

    The input must be a proper rotation (orthonormal with determinant 1).  This is not checked; anything else returns a
    meaningless quaternion.  Like all quaternion results the sign is not unique, :math:`-\mathbf{q}` is the same
    rotation.

    :param rotation_matrix: The rotation matrix to convert
    :param out: An optional length 4 output to store the result in
    :return: The quaternion representing the same rotation
    """

    work_matrix = _check_matrix3_array_and_shape(rotation_matrix)

    return _fill_output(_rotmat_to_quaternion_components(work_matrix), out)


def quaternion_to_rotmat(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    This function converts a unit quaternion into the equivalent rotation matrix.

    The result is returned as 9 numbers in column-major order, so ``np.reshape(result, (3, 3)).T`` gives the matrix
    indexed [row, column].  The rotation matrix is formed by:

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}1-2(y^2+z^2) & 2(xy-wz) & 2(xz+wy) \\
        2(xy+wz) & 1-2(x^2+z^2) & 2(yz-wx) \\
        2(xz-wy) & 2(yz+wx) & 1-2(x^2+y^2)\end{array}\right]

    :param quaternion: The rotation quaternion to be converted
    :param out: An optional length 9 output to store the result in
    :return: The column-major rotation matrix
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    return _fill_output(_column_major(_quaternion_rotation_block(work_quaternion)), out)


def euler_to_quaternion(x: float, y: float, z: float, order: EULER_ORDERS = 'zyx',
                        out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    This function converts intrinsic Tait-Bryan angles in degrees into a quaternion.

    ``order`` gives the sequence in which the intrinsic rotations are performed.  For the default ``'zyx'`` the
    result is :math:`\\mathbf{q}_z\\otimes\\mathbf{q}_y\\otimes\\mathbf{q}_x`, a rotation about z by ``z`` degrees,
    then about the new y axis by ``y`` degrees, then about the newest x axis by ``x`` degrees.  The angles are always
    passed as (x, y, z) regardless of the order.

    :param x: The rotation about the x axis in degrees
    :param y: The rotation about the y axis in degrees
    :param z: The rotation about the z axis in degrees
    :param order: The order the intrinsic rotations are applied in
    :param out: An optional length 4 output to store the result in
    :return: The quaternion representing the euler angles
    :raises ValueError: If the order is not one of the 6 Tait-Bryan orders
    """

    order = order.lower()  # type: ignore[assignment]

    if sorted(order) != ['x', 'y', 'z']:
        raise ValueError('The order must be a permutation of "xyz"')

    angles = {'x': np.deg2rad(x), 'y': np.deg2rad(y), 'z': np.deg2rad(z)}

    quaternion = _elemental_quaternion('xyz'.index(order[0]), angles[order[0]])

    for axis in order[1:]:
        quaternion = quaternion_multiply(quaternion, _elemental_quaternion('xyz'.index(axis), angles[axis]))

    return _fill_output(quaternion, out)


def quaternion_from_axis_angle(axis: ARRAY_LIKE, angle: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Forms the quaternion for a rotation of ``angle`` radians about ``axis``.

    The axis must already be unit length.

    :param axis: The unit axis of rotation
    :param angle: The angle to rotate by in radians
    :param out: An optional length 4 output to store the result in
    :return: The rotation quaternion
    """

    work_axis = _check_vector_array_and_shape(axis)

    half = angle / 2

    return _fill_output(np.concatenate([work_axis * np.sin(half), [np.cos(half)]]), out)


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> AxisAngle:
    """
    Splits a unit quaternion into the axis and angle of its rotation.

    For a rotation with (nearly) zero angle the axis is undefined and ``(1, 0, 0)`` is returned as the axis.

    :param quaternion: The unit quaternion
    :return: The axis and the angle in radians in [0, 2 pi]
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    angle = 2 * np.arccos(np.clip(work_quaternion[-1], -1, 1))
    s = np.sin(angle / 2)

    if s > EPSILON:
        axis = work_quaternion[:3] / s
    else:
        axis = np.array([1.0, 0.0, 0.0])

    return AxisAngle(axis, float(angle))


def axes_to_quaternion(view: ARRAY_LIKE, right: ARRAY_LIKE, up: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Forms the orientation quaternion from a view direction and the right and up directions.

    The rows of the implied rotation matrix are ``right``, ``up``, and ``-view``; the three vectors should be
    orthonormal.  The result is normalized.

    :param view: The direction being looked along
    :param right: The right direction
    :param up: The up direction
    :param out: An optional length 4 output to store the result in
    :return: The orientation quaternion
    """

    rotation_matrix = np.array([_check_vector_array_and_shape(right),
                                _check_vector_array_and_shape(up),
                                -_check_vector_array_and_shape(view)])

    return quaternion_normalize(_rotmat_to_quaternion_components(rotation_matrix), out=out)


_X_AXIS = np.array([1.0, 0.0, 0.0])
_Y_AXIS = np.array([0.0, 1.0, 0.0])


def quaternion_rotation_to(start: ARRAY_LIKE, end: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The shortest rotation taking one unit vector onto another.

    When the vectors are (nearly) antiparallel the rotation axis is not unique; a half turn about an axis
    perpendicular to ``start`` is returned (built from the x axis, or from the y axis when ``start`` is along x).

    :param start: The unit vector to rotate from
    :param end: The unit vector to rotate to
    :param out: An optional length 4 output to store the result in
    :return: The unit quaternion rotating start onto end
    """

    start_vector = _check_vector_array_and_shape(start)
    end_vector = _check_vector_array_and_shape(end)

    dot = start_vector @ end_vector

    if dot < EPSILON - 1:
        axis = np.cross(_X_AXIS, start_vector)
        if np.linalg.norm(axis) < EPSILON:
            axis = np.cross(_Y_AXIS, start_vector)

        return quaternion_from_axis_angle(axis / np.linalg.norm(axis), np.pi, out=out)

    if dot > 1 - EPSILON:
        return _fill_output([0, 0, 0, 1], out)

    return quaternion_normalize(np.concatenate([np.cross(start_vector, end_vector), [1 + dot]]), out=out)
