"""
Operation mixins composed into :class:`~keymat.infrastructure.matrix.Matrix`.

Each mixin is written only against the element-accessor contract
(`at`, `set_at`, `row_count`, `column_count`, `create_matrix`,
`create_vector`) plus the container's injected `scheduler`, so every
concrete storage representation inherits the same kernel.
"""

from ._arithmetic import MatrixMixinArithmetic
from ._product import MatrixMixinProduct
from ._pointwise import MatrixMixinPointwise
from ._structural import MatrixMixinStructural
from ._reduction import MatrixMixinReduction
from ._memory import MatrixMixinMemory

__all__ = [
    MatrixMixinArithmetic.__name__,
    MatrixMixinProduct.__name__,
    MatrixMixinPointwise.__name__,
    MatrixMixinStructural.__name__,
    MatrixMixinReduction.__name__,
    MatrixMixinMemory.__name__,
]
