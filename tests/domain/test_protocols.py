import unittest
from unittest import TestCase

from keymat.domain import IMatrix, IParallelScheduler, IVector
from keymat.infrastructure import (
    DenseMatrix,
    DenseVector,
    SequentialScheduler,
    ThreadPoolScheduler,
)


class TestStructuralContracts(TestCase):
    def test_dense_matrix_satisfies_matrix_contract_only(self):
        m = DenseMatrix(2, 2, scheduler=SequentialScheduler())
        self.assertIsInstance(m, IMatrix)
        self.assertNotIsInstance(m, IVector)

    def test_dense_vector_satisfies_vector_contract_only(self):
        v = DenseVector(3, scheduler=SequentialScheduler())
        self.assertIsInstance(v, IVector)
        self.assertNotIsInstance(v, IMatrix)

    def test_schedulers_satisfy_scheduler_contract(self):
        self.assertIsInstance(SequentialScheduler(), IParallelScheduler)
        with ThreadPoolScheduler(2) as s:
            self.assertIsInstance(s, IParallelScheduler)


if __name__ == "__main__":
    unittest.main()
