"""
This module contains fundamental mathematical operations and utilities for rotation
calculations. It has no dependencies on the other rotation modules to avoid circular imports.
All functions here are pure mathematical operations that can be used as building blocks
for the dual quaternion and transform matrix routines.
"""

import rigidmotion.rotations.core.conversions
import rigidmotion.rotations.core.elementals
import rigidmotion.rotations.core.quaternion_math

from rigidmotion.rotations.core.conversions import (rotmat_to_quaternion, quaternion_to_rotmat, euler_to_quaternion,
                                                    quaternion_from_axis_angle, quaternion_to_axis_angle,
                                                    axes_to_quaternion, quaternion_rotation_to)

from rigidmotion.rotations.core.elementals import rot_x, rot_y, rot_z

from rigidmotion.rotations.core.quaternion_math import (quaternion_identity, quaternion_dot, quaternion_magnitude,
                                                        quaternion_normalize, quaternion_multiply,
                                                        quaternion_rotate_x, quaternion_rotate_y, quaternion_rotate_z,
                                                        quaternion_calculate_w, quaternion_exp, quaternion_ln,
                                                        quaternion_pow, quaternion_invert, quaternion_conjugate,
                                                        quaternion_angle, quaternion_rotate_vector, quaternion_equals,
                                                        quaternion_exact_equals, random_quaternion, quaternion_lerp,
                                                        nlerp, slerp, sqlerp)

__all__ = ['rotmat_to_quaternion', 'quaternion_to_rotmat', 'euler_to_quaternion',
           'quaternion_from_axis_angle', 'quaternion_to_axis_angle', 'axes_to_quaternion', 'quaternion_rotation_to',
           'rot_x', 'rot_y', 'rot_z',
           'quaternion_identity', 'quaternion_dot', 'quaternion_magnitude', 'quaternion_normalize',
           'quaternion_multiply', 'quaternion_rotate_x', 'quaternion_rotate_y', 'quaternion_rotate_z',
           'quaternion_calculate_w', 'quaternion_exp', 'quaternion_ln', 'quaternion_pow',
           'quaternion_invert', 'quaternion_conjugate', 'quaternion_angle', 'quaternion_rotate_vector',
           'quaternion_equals', 'quaternion_exact_equals', 'random_quaternion', 'quaternion_lerp',
           'nlerp', 'slerp', 'sqlerp']
