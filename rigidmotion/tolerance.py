# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
The single tolerance policy used by every equivalence test and every numerical stability branch in the package.
"""

import numpy as np

from rigidmotion._typing import SCALAR_OR_ARRAY


EPSILON: float = 1e-6
"""
The tolerance used for approximate comparisons and for choosing the numerically stable branch of an algorithm.
"""


def approx_relative(a: SCALAR_OR_ARRAY, b: SCALAR_OR_ARRAY, epsilon: float = EPSILON) -> bool:
    r"""
    Determine whether two values are approximately equivalent relative to their size.

    Each pair of elements is compared using

    .. math::
        |a-b| \leq \epsilon\max(1, |a|, |b|)

    so the absolute tolerance grows with the magnitude of the operands.  For arrays this is true only when every
    element pair satisfies the check.

    :param a: The first value(s)
    :param b: The second value(s)
    :param epsilon: The relative tolerance
    :return: Whether the values are approximately equivalent
    """

    a = np.asanyarray(a, dtype=np.float64)
    b = np.asanyarray(b, dtype=np.float64)

    if a.shape != b.shape:
        return False

    return bool((np.abs(a - b) <= epsilon * np.maximum(1, np.maximum(np.abs(a), np.abs(b)))).all())


def approx_equal(a: SCALAR_OR_ARRAY, b: SCALAR_OR_ARRAY, epsilon: float = EPSILON) -> bool:
    """
    Determine whether two values are no more than ``epsilon`` apart (element-wise, for arrays).

    :param a: The first value(s)
    :param b: The second value(s)
    :param epsilon: The absolute tolerance
    :return: Whether the values are approximately equivalent
    """

    a = np.asanyarray(a, dtype=np.float64)
    b = np.asanyarray(b, dtype=np.float64)

    if a.shape != b.shape:
        return False

    return bool((np.abs(a - b) <= epsilon).all())
