import rigidmotion.rotations.core
import rigidmotion.rotations.dual_quaternion
import rigidmotion.rotations.matrix4
import rigidmotion.rotations.rigid_transform

from rigidmotion.rotations.core import *
from rigidmotion.rotations.dual_quaternion import *
from rigidmotion.rotations.matrix4 import *
from rigidmotion.rotations.rigid_transform import RigidTransform, RigidTransformOptions

__all__ = ['rotmat_to_quaternion', 'quaternion_to_rotmat', 'euler_to_quaternion',
           'quaternion_from_axis_angle', 'quaternion_to_axis_angle', 'axes_to_quaternion', 'quaternion_rotation_to',
           'rot_x', 'rot_y', 'rot_z',
           'quaternion_identity', 'quaternion_dot', 'quaternion_magnitude', 'quaternion_normalize',
           'quaternion_multiply', 'quaternion_rotate_x', 'quaternion_rotate_y', 'quaternion_rotate_z',
           'quaternion_calculate_w', 'quaternion_exp', 'quaternion_ln', 'quaternion_pow',
           'quaternion_invert', 'quaternion_conjugate', 'quaternion_angle', 'quaternion_rotate_vector',
           'quaternion_equals', 'quaternion_exact_equals', 'random_quaternion', 'quaternion_lerp',
           'nlerp', 'slerp', 'sqlerp',
           'dual_quaternion_identity', 'dual_quaternion_from_rotation_translation', 'dual_quaternion_from_translation',
           'dual_quaternion_from_rotation', 'dual_quaternion_from_matrix4',
           'dual_quaternion_get_real', 'dual_quaternion_set_real', 'dual_quaternion_get_dual',
           'dual_quaternion_set_dual', 'dual_quaternion_get_translation', 'dual_quaternion_translate',
           'dual_quaternion_rotate_x', 'dual_quaternion_rotate_y', 'dual_quaternion_rotate_z',
           'dual_quaternion_rotate_by_quaternion_append', 'dual_quaternion_rotate_by_quaternion_prepend',
           'dual_quaternion_rotate_around_axis', 'dual_quaternion_add', 'dual_quaternion_multiply',
           'dual_quaternion_scale', 'dual_quaternion_dot', 'dual_quaternion_magnitude', 'dual_quaternion_lerp',
           'dual_quaternion_invert', 'dual_quaternion_conjugate', 'dual_quaternion_normalize',
           'dual_quaternion_equals', 'dual_quaternion_exact_equals', 'dual_quaternion_transform_point',
           'matrix4_identity', 'matrix4_from_translation', 'matrix4_from_scaling', 'matrix4_from_rotation',
           'matrix4_from_x_rotation', 'matrix4_from_y_rotation', 'matrix4_from_z_rotation',
           'matrix4_from_quaternion', 'matrix4_from_rotation_translation', 'matrix4_from_rotation_translation_scale',
           'matrix4_from_rotation_translation_scale_origin', 'matrix4_from_dual_quaternion',
           'matrix4_multiply', 'matrix4_determinant', 'matrix4_invert',
           'matrix4_rotate', 'matrix4_rotate_x', 'matrix4_rotate_y', 'matrix4_rotate_z',
           'matrix4_translate', 'matrix4_scale',
           'matrix4_get_translation', 'matrix4_set_translation', 'matrix4_get_scaling', 'matrix4_get_rotation',
           'matrix4_decompose', 'matrix4_transform_point', 'matrix4_equals', 'matrix4_exact_equals',
           'RigidTransform', 'RigidTransformOptions']


r"""
This package defines the routines for converting between the representations of orientation and rigid motion, for
composing and interpolating them, and a class which acts as the object form of a rigid transform.

The representations used in this package and their formats are described as follows:

.. _transform-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Products use the hamiltonian
                   convention.  Note that quaternions are not unique in that the rotation represented by
                   :math:`\mathbf{q}` is the same rotation represented by :math:`-\mathbf{q}`.
rotation matrix    A :math:`3\times 3` orthonormal matrix, exchanged as 9 numbers in column-major order or as a
                   :math:`3\times 3` array indexed [row, column].  Rotation matrices uniquely represent a single
                   rotation.
dual quaternion    An 8 element array holding the real part :math:`\mathbf{q}_r` (the rotation quaternion) followed by
                   the dual part :math:`\mathbf{q}_d=\frac{1}{2}\mathbf{t}\otimes\mathbf{q}_r` which encodes the
                   translation :math:`\mathbf{t}` applied after the rotation.
transform matrix   A :math:`4\times 4` affine matrix exchanged as 16 numbers in column-major order (or a
                   :math:`4\times 4` array indexed [row, column]) whose upper left block is the rotation times the
                   per axis scale and whose last column is the translation.
euler angles       A sequence of 3 intrinsic rotations about the x, y, and z axes given in degrees.  The order the
                   rotations are applied in is selected by a string such as ``'zyx'``.
=================  =====================================================================================================

Every routine that produces an array accepts an optional ``out`` keyword.  When it is given every component of the
result is written into it (it may be one of the inputs) and it is returned; otherwise a new array is returned.

The :class:`.RigidTransform` object is the convenient way to work with a transform.  It accepts any of the dual
quaternion, rotation quaternion, translation, or transform matrix representations in its constructor, offers the
other representations as cached properties, and composes with the standard multiplication operator ``*``.
"""
