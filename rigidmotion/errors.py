# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
The named failures raised by the rotation and transform routines.

Only two conditions are reported as exceptions.  Every other kind of invalid input (a non-unit quaternion passed to
:func:`.slerp`, a sheared matrix passed to :func:`.matrix4_get_rotation`, an unnormalized dual quaternion passed to
:func:`.dual_quaternion_get_translation`) is a contract violation that produces a numerically wrong but finite result.
Both exceptions derive from :class:`ValueError` so they are also caught by generic bad-input handlers.
"""


class SingularMatrixError(ValueError):
    """
    Raised when trying to invert a matrix whose determinant is exactly zero.
    """

    def __init__(self, message: str = "The matrix cannot be inverted."):
        super().__init__(message)


class MagnitudeError(ValueError):
    """
    Raised when a vector is too small for the requested operation (for instance rotating about a zero length axis).
    """

    def __init__(self, message: str = "The vector is too small."):
        super().__init__(message)
