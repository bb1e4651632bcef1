from ._checks import (
    require_operand,
    require_matrix,
    require_vector,
    require_matrix_shape,
    require_same_shape,
    require_vector_length,
    matrix_shape,
)
from ._copy import copy_block, fill_block, copy_vector
from ._scalar import ieee_divide, almost_equal_in_decimal_places

__all__ = [
    require_operand.__name__,
    require_matrix.__name__,
    require_vector.__name__,
    require_matrix_shape.__name__,
    require_same_shape.__name__,
    require_vector_length.__name__,
    matrix_shape.__name__,
    copy_block.__name__,
    fill_block.__name__,
    copy_vector.__name__,
    ieee_divide.__name__,
    almost_equal_in_decimal_places.__name__,
]
