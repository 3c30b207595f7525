# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
rigidmotion

Rotation and rigid-transform algebra built on numpy.  The package converts between the interchangeable
representations of orientation and motion (rotation matrices, unit quaternions, dual quaternions, and
translation/rotation/scale transform matrices) and provides the interpolation and composition routines that
operate on them.

The routines themselves live in :mod:`rigidmotion.rotations`.
"""

from rigidmotion.errors import MagnitudeError, SingularMatrixError
from rigidmotion.tolerance import EPSILON, approx_equal, approx_relative

__all__ = ['MagnitudeError', 'SingularMatrixError', 'EPSILON', 'approx_equal', 'approx_relative']
