import numpy as np

from rigidmotion._typing import ARRAY_LIKE, DOUBLE_ARRAY, OUTPUT


def _check_array_and_shape(input: ARRAY_LIKE, size: int) -> DOUBLE_ARRAY:
    """
    Ensure the input is a flat array of length ``size``.

    The returned array may share memory with the input, so callers must read every value they need before writing
    into an output slot that could alias the input.
    """

    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if int(np.prod(in_shape)) != size or len(in_shape) != 1:
        raise ValueError(f'The input must be a flat sequence of length {size}')

    return np.asanyarray(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, 4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, 3)


def _check_dual_quaternion_array_and_shape(dual_quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(dual_quaternion, 8)


def _check_square_matrix(matrix: ARRAY_LIKE, order: int) -> DOUBLE_ARRAY:
    """
    Return the matrix as an ``order`` x ``order`` array indexed as [row, column].

    Flat inputs are interpreted as column-major, square inputs as already being indexed [row, column].
    """

    in_shape = np.shape(matrix)

    if in_shape == (order, order):
        return np.array(matrix, dtype=np.float64)

    if in_shape == (order * order,):
        # column-major storage means the flat data reshaped row by row is the transpose
        return np.array(matrix, dtype=np.float64).reshape(order, order).T

    raise ValueError(f'The matrix must be {order}x{order} or a flat column-major sequence of length {order * order}')


def _check_matrix3_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_square_matrix(matrix, 3)


def _check_matrix4_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_square_matrix(matrix, 4)


def _column_major(matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Flatten a matrix indexed [row, column] into column-major storage.
    """

    return np.ascontiguousarray(matrix.T).ravel()


def _fill_output(values: ARRAY_LIKE, out: OUTPUT) -> DOUBLE_ARRAY:
    """
    Write every value into ``out`` and return it, or return the values as a new array when no output was requested.

    The values must be fully computed before this is called, which keeps every routine safe when ``out`` aliases one
    of its inputs.  A new array never shares memory with the inputs.  Output arrays must have a floating point dtype.
    """

    values = np.array(values, dtype=np.float64).ravel()

    if out is None:
        return values

    if len(out) != values.size:
        raise ValueError(f'The output must have length {values.size}')

    if isinstance(out, np.ndarray):
        if not np.issubdtype(out.dtype, np.floating):
            raise ValueError(f'The output must have a floating point dtype, not {out.dtype}')

        out[:] = values
    else:
        out[:] = values.tolist()

    return out  # type: ignore[return-value]
