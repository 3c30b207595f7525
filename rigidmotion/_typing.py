# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import NamedTuple, Union, MutableSequence
from datetime import datetime
from pandas import Timestamp

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = np.typing.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]

OUTPUT = Union[DOUBLE_ARRAY, MutableSequence[float], None]
"""
An optional caller supplied output slot.  When given, every component is written into it and it is returned.
"""

DatetimeLike = Union[datetime, Timestamp]


class AxisAngle(NamedTuple):
    """
    An axis and an angle to rotate about it.
    """

    axis: DOUBLE_ARRAY
    """
    The (unit) axis of rotation as a length 3 array
    """

    angle: float
    """
    The angle to rotate about the axis in radians
    """
