from ._vector import Vector
from ._dense_vector import DenseVector

__all__ = [
    Vector.__name__,
    DenseVector.__name__,
]
