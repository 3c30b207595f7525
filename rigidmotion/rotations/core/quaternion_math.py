"""
Quaternion algebra: composition, inversion, the exponential map, and interpolation.

Quaternions are stored as ``(x, y, z, w)`` with the scalar last.  Routines that assume a unit quaternion (for
instance :func:`slerp`) do not re-normalize their inputs; callers working with accumulated products should call
:func:`quaternion_normalize` first.
"""

import numpy as np

from rigidmotion._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike, OUTPUT
from rigidmotion.tolerance import EPSILON, approx_relative

from rigidmotion.rotations.core._helpers import (_check_quaternion_array_and_shape, _check_vector_array_and_shape,
                                                 _fill_output)

__all__ = ["quaternion_identity", "quaternion_dot", "quaternion_magnitude", "quaternion_normalize",
           "quaternion_multiply", "quaternion_rotate_x", "quaternion_rotate_y", "quaternion_rotate_z",
           "quaternion_calculate_w", "quaternion_exp", "quaternion_ln", "quaternion_pow",
           "quaternion_invert", "quaternion_conjugate", "quaternion_angle", "quaternion_rotate_vector",
           "quaternion_equals", "quaternion_exact_equals", "random_quaternion",
           "quaternion_lerp", "nlerp", "slerp", "sqlerp"]


def quaternion_identity(out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The identity quaternion ``(0, 0, 0, 1)`` which represents no rotation.

    :param out: An optional length 4 output to store the result in
    :return: The identity quaternion
    """

    return _fill_output([0, 0, 0, 1], out)


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    """
    The 4 dimensional dot product of two quaternions.
    """

    return float(np.inner(_check_quaternion_array_and_shape(quaternion_1),
                          _check_quaternion_array_and_shape(quaternion_2)))


def quaternion_magnitude(quaternion: ARRAY_LIKE) -> float:
    """
    The Euclidean length of a quaternion.
    """

    return float(np.linalg.norm(_check_quaternion_array_and_shape(quaternion)))


def quaternion_normalize(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Scales a quaternion to unit length.

    A zero quaternion has no direction and is returned as all zeros.

    :param quaternion: The quaternion to normalize
    :param out: An optional length 4 output to store the result in
    :return: The unit quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    magnitude = np.linalg.norm(work_quaternion)

    if magnitude > 0:
        return _fill_output(work_quaternion / magnitude, out)

    return _fill_output(np.zeros(4), out)


def quaternion_multiply(quaternion_1_in: ARRAY_LIKE, quaternion_2_in: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    The product is not commutative.  It follows the same composition convention as the matrices built by
    :func:`.matrix4_from_quaternion`, that is the matrix of :math:`\mathbf{q}_1\otimes\mathbf{q}_2` is the matrix
    product of the matrix of :math:`\mathbf{q}_1` with the matrix of :math:`\mathbf{q}_2`.

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :param out: An optional length 4 output to store the result in (may be one of the inputs)
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    qout = np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2),
                           [qs1 * qs2 - qv1 @ qv2]])

    return _fill_output(qout, out)


def _elemental_quaternion(axis: int, radians: float) -> DOUBLE_ARRAY:
    """
    The quaternion for a rotation of ``radians`` about coordinate axis ``axis`` (0, 1, or 2).
    """

    half = radians / 2

    elemental = np.zeros(4)
    elemental[axis] = np.sin(half)
    elemental[-1] = np.cos(half)

    return elemental


def quaternion_rotate_x(quaternion: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Rotates a quaternion about the x axis by post-multiplying it with the elementary x rotation.

    :param quaternion: The quaternion to rotate
    :param radians: The angle to rotate by
    :param out: An optional length 4 output to store the result in (may be the input)
    :return: The rotated quaternion
    """

    return quaternion_multiply(quaternion, _elemental_quaternion(0, radians), out=out)


def quaternion_rotate_y(quaternion: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Rotates a quaternion about the y axis by post-multiplying it with the elementary y rotation.

    :param quaternion: The quaternion to rotate
    :param radians: The angle to rotate by
    :param out: An optional length 4 output to store the result in (may be the input)
    :return: The rotated quaternion
    """

    return quaternion_multiply(quaternion, _elemental_quaternion(1, radians), out=out)


def quaternion_rotate_z(quaternion: ARRAY_LIKE, radians: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Rotates a quaternion about the z axis by post-multiplying it with the elementary z rotation.

    :param quaternion: The quaternion to rotate
    :param radians: The angle to rotate by
    :param out: An optional length 4 output to store the result in (may be the input)
    :return: The rotated quaternion
    """

    return quaternion_multiply(quaternion, _elemental_quaternion(2, radians), out=out)


def quaternion_calculate_w(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Recomputes the scalar component from the vector components assuming the quaternion is unit length.

    The input scalar component is ignored.  The result always has a non-negative scalar component.
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)
    qv = work_quaternion[:3]

    return _fill_output(np.concatenate([qv, [np.sqrt(np.abs(1 - qv @ qv))]]), out)


def quaternion_exp(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    The quaternion exponential.

    .. math::
        e^{\mathbf{q}} = e^{q_s}\left[\begin{array}{c}\frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|}
        \text{sin}(\left\|\mathbf{q}_v\right\|) \\ \text{cos}(\left\|\mathbf{q}_v\right\|)\end{array}\right]

    When the vector part is zero the sine ratio term is taken as 0.

    :param quaternion: The quaternion to exponentiate
    :param out: An optional length 4 output to store the result in (may be the input)
    :return: The exponential of the quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)
    qv = work_quaternion[:3]

    r = np.sqrt(qv @ qv)
    et = np.exp(work_quaternion[-1])
    s = et * np.sin(r) / r if r > 0 else 0.0

    return _fill_output(np.concatenate([qv * s, [et * np.cos(r)]]), out)


def quaternion_ln(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    The natural logarithm of a quaternion, the inverse of :func:`quaternion_exp`.

    When the vector part is zero its scale term is taken as 0.

    :param quaternion: The quaternion to take the logarithm of
    :param out: An optional length 4 output to store the result in (may be the input)
    :return: The logarithm of the quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)
    qv = work_quaternion[:3]
    qs = work_quaternion[-1]

    vv = qv @ qv
    r = np.sqrt(vv)
    t = np.arctan2(r, qs) / r if r > 0 else 0.0

    return _fill_output(np.concatenate([qv * t, [np.log(vv + qs * qs) / 2]]), out)


def quaternion_pow(quaternion: ARRAY_LIKE, scalar: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Raises a quaternion to a real power through ``exp(scalar * ln(q))``.

    For a unit quaternion this scales the rotation angle by ``scalar``.

    :param quaternion: The base quaternion
    :param scalar: The exponent
    :param out: An optional length 4 output to store the result in (may be the input)
    :return: The quaternion raised to the power
    """

    return quaternion_exp(quaternion_ln(quaternion) * scalar, out=out)


def quaternion_invert(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of a quaternion.

    The inverse is the conjugate divided by the squared magnitude so that
    :math:`\mathbf{q}\otimes\mathbf{q}^{-1}` is the identity quaternion even when :math:`\mathbf{q}` is not unit length.
    The zero quaternion has no inverse; for it the zero quaternion is returned instead of dividing by zero.

    :param quaternion: The quaternion to be inverted
    :param out: An optional length 4 output to store the result in (may be the input)
    :return: The inverse quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    squared_magnitude = work_quaternion @ work_quaternion

    if squared_magnitude == 0:
        return _fill_output(np.zeros(4), out)

    return _fill_output(np.concatenate([-work_quaternion[:3], work_quaternion[-1:]]) / squared_magnitude, out)


def quaternion_conjugate(quaternion: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Negates the vector portion of a quaternion.

    For a unit quaternion this is equal to the inverse and is cheaper to compute.
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    return _fill_output(np.concatenate([-work_quaternion[:3], work_quaternion[-1:]]), out)


def quaternion_angle(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    """
    The angle in radians of the rotation between two unit quaternions.

    :param quaternion_1: The first unit quaternion
    :param quaternion_2: The second unit quaternion
    :return: The angle between them in [0, pi]
    """

    dot = quaternion_dot(quaternion_1, quaternion_2)

    # clip only guards the acos domain against rounding
    return float(np.arccos(np.clip(2 * dot * dot - 1, -1, 1)))


def quaternion_rotate_vector(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    Rotates a 3 element vector by a unit quaternion.

    This evaluates :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^{-1}` through the expanded form

    .. math::
        \mathbf{v}' = \mathbf{v} + 2q_s(\mathbf{q}_v\times\mathbf{v}) +
        2\mathbf{q}_v\times(\mathbf{q}_v\times\mathbf{v})

    :param quaternion: The unit quaternion to rotate by
    :param vector: The vector to rotate
    :param out: An optional length 3 output to store the result in (may be the input vector)
    :return: The rotated vector
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)
    work_vector = _check_vector_array_and_shape(vector)

    qv = work_quaternion[:3]

    uv = np.cross(qv, work_vector)
    uuv = np.cross(qv, uv)

    return _fill_output(work_vector + 2 * work_quaternion[-1] * uv + 2 * uuv, out)


def quaternion_equals(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE, epsilon: float = EPSILON) -> bool:
    """
    Component-wise relative-epsilon comparison of two quaternions.

    Note that ``q`` and ``-q`` represent the same rotation but are not considered equal here.
    """

    return approx_relative(_check_quaternion_array_and_shape(quaternion_1),
                           _check_quaternion_array_and_shape(quaternion_2), epsilon)


def quaternion_exact_equals(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> bool:
    """
    Exact component-wise comparison of two quaternions.
    """

    return bool(np.array_equal(_check_quaternion_array_and_shape(quaternion_1),
                               _check_quaternion_array_and_shape(quaternion_2)))


def random_quaternion(rng: np.random.Generator | None = None, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Draws a unit quaternion uniformly distributed over all rotations.

    :param rng: The random generator to draw from.  If ``None`` a new default generator is used
    :param out: An optional length 4 output to store the result in
    :return: The random unit quaternion
    """

    if rng is None:
        rng = np.random.default_rng()

    u1, u2, u3 = rng.random(3)

    sq_inv = np.sqrt(1 - u1)
    sq = np.sqrt(u1)
    pi2u2 = 2 * np.pi * u2
    pi2u3 = 2 * np.pi * u3

    return _fill_output([sq_inv * np.sin(pi2u2), sq_inv * np.cos(pi2u2), sq * np.sin(pi2u3), sq * np.cos(pi2u3)], out)


def _interpolation_fraction(time: float | DatetimeLike, time0: float | DatetimeLike,
                            time1: float | DatetimeLike) -> float:
    """
    Compute the fractional percent of the way from time0 to time1 that time is.
    """

    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division. Typically this means they should all be floats or all be DatetimeLike objects')


def quaternion_lerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE, t: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Component-wise linear interpolation between two quaternions without normalization.
    """

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    return _fill_output(q0 + (q1 - q0) * t, out)


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of rotation quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors, and then normalizing
    the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    When using this function you can either specify the argument `time` as the fractional percent that you want to
    interpolate at, or specify the keyword arguments `time0` and `time1` to be the times corresponding to the first and
    second quaternion respectively and the function will compute the fractional percent for you.  It is also possible
    to specify all three of `time`, `time0`, and `time1` as datetime objects.

    .. warning::
        NLERP does not perform a constant angular velocity interpolation, therefore it is not well suited to
        interpolating over large angles.  Use :func:`slerp` for that.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion
    :param time1: the time corresponding to the second quaternion
    :param out: An optional length 4 output to store the result in (may be one of the inputs)
    :return: The interpolated quaternion
    """

    dt = _interpolation_fraction(time, time0, time1)

    return quaternion_normalize(quaternion_lerp(quaternion0, quaternion1, dt), out=out)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1, out: OUTPUT = None) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of unit rotation quaternions.

    SLERP interpolates along the great circle arc connecting the two quaternions with constant angular velocity:

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\frac{\text{sin}((1-p)\omega)}{\text{sin}(\omega)}\mathbf{q}_0+
        \frac{\text{sin}(p\omega)}{\text{sin}(\omega)}\mathbf{q}_1

    Because :math:`\mathbf{q}` and :math:`-\mathbf{q}` are the same rotation, when the dot product of the inputs is
    negative the second quaternion is negated so that the shorter arc is taken.  When the inputs are within
    :data:`.EPSILON` of each other :math:`\text{sin}(\omega)` is nearly zero and a plain linear blend is used instead.

    The inputs are assumed to be unit length and are not normalized.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion.  Leave at 0 if `time` is a fractional percent
    :param time1: the time corresponding to the second quaternion.  Leave at 1 if `time` is a fractional percent
    :param out: An optional length 4 output to store the result in (may be one of the inputs)
    :return: The interpolated quaternion
    """

    dt = _interpolation_fraction(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    cos_angle = q0 @ q1

    if cos_angle < 0:
        # take the short way around
        q1 = -q1
        cos_angle = -cos_angle

    if 1 - cos_angle > EPSILON:
        angle = np.arccos(cos_angle)
        sin_angle = np.sin(angle)
        scale0 = np.sin((1 - dt) * angle) / sin_angle
        scale1 = np.sin(dt * angle) / sin_angle
    else:
        scale0 = 1 - dt
        scale1 = dt

    return _fill_output(q0 * scale0 + q1 * scale1, out)


def sqlerp(quaternion_a: ARRAY_LIKE, quaternion_b: ARRAY_LIKE, quaternion_c: ARRAY_LIKE, quaternion_d: ARRAY_LIKE,
           t: float, out: OUTPUT = None) -> DOUBLE_ARRAY:
    """
    Spherical quadrangle interpolation with two control points.

    The outer quaternions ``a`` and ``d`` and the control quaternions ``b`` and ``c`` are each blended with
    :func:`slerp` at ``t`` and the two results are then blended at ``2t(1-t)``.

    :param quaternion_a: The starting quaternion
    :param quaternion_b: The first control point
    :param quaternion_c: The second control point
    :param quaternion_d: The ending quaternion
    :param t: The interpolation amount in [0, 1]
    :param out: An optional length 4 output to store the result in (may be one of the inputs)
    :return: The interpolated quaternion
    """

    outer = slerp(quaternion_a, quaternion_d, t)
    inner = slerp(quaternion_b, quaternion_c, t)

    return slerp(outer, inner, 2 * t * (1 - t), out=out)
