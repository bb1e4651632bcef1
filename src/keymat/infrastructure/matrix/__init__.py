from ._matrix import Matrix
from ._dense_matrix import DenseMatrix

__all__ = [
    Matrix.__name__,
    DenseMatrix.__name__,
]
