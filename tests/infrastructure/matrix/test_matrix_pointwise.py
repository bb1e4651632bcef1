import math
import unittest
from unittest import TestCase

import numpy as np

from keymat import (
    DenseMatrix,
    DenseVector,
    DimensionMismatchError,
    NullOperandError,
    SequentialScheduler,
    ThreadPoolScheduler,
)


class TestMatrixPointwise(TestCase):
    def make_scheduler(self):
        return SequentialScheduler()

    def setUp(self) -> None:
        self.s = self.make_scheduler()
        self.a = DenseMatrix.from_array([[1, 2], [3, 4], [5, 6]], scheduler=self.s)
        self.b = DenseMatrix.from_array([[2, 2], [-1, 0.5], [5, 3]], scheduler=self.s)

    def tearDown(self) -> None:
        if hasattr(self.s, "shutdown"):
            self.s.shutdown()

    def test_all_four_operations(self):
        a, b = self.a.to_numpy(), self.b.to_numpy()
        np.testing.assert_allclose(self.a.pointwise_multiply(self.b).to_numpy(), a * b)
        np.testing.assert_allclose(self.a.pointwise_add(self.b).to_numpy(), a + b)
        np.testing.assert_allclose(self.a.pointwise_subtract(self.b).to_numpy(), a - b)
        np.testing.assert_allclose(self.a.pointwise_divide(self.b).to_numpy(), a / b)

    def test_result_allocated_with_same_representation(self):
        out = self.a.pointwise_multiply(self.b)
        self.assertIsInstance(out, DenseMatrix)
        self.assertIsNot(out, self.a)
        self.assertIs(out.scheduler, self.s)

    def test_result_may_be_an_operand(self):
        expected = self.a.to_numpy() * self.b.to_numpy()
        returned = self.a.pointwise_multiply(self.b, self.a)
        self.assertIs(returned, self.a)
        np.testing.assert_allclose(self.a.to_numpy(), expected)

    def test_divide_by_zero_follows_ieee(self):
        num = DenseMatrix.from_array([[1.0, -1.0, 0.0]], scheduler=self.s)
        den = DenseMatrix(1, 3, scheduler=self.s)
        out = num.pointwise_divide(den)
        self.assertEqual(out.at(0, 0), math.inf)
        self.assertEqual(out.at(0, 1), -math.inf)
        self.assertTrue(math.isnan(out.at(0, 2)))

    def test_mismatched_other_raises(self):
        for op in (
            self.a.pointwise_multiply,
            self.a.pointwise_add,
            self.a.pointwise_subtract,
            self.a.pointwise_divide,
        ):
            with self.assertRaises(DimensionMismatchError):
                op(DenseMatrix(2, 3, scheduler=self.s))

    def test_null_other_raises(self):
        with self.assertRaises(NullOperandError):
            self.a.pointwise_multiply(None)

    def test_mismatched_result_raises_without_writing(self):
        result = DenseMatrix(2, 2, scheduler=self.s)
        with self.assertRaises(DimensionMismatchError) as ctx:
            self.a.pointwise_add(self.b, result)
        self.assertEqual(ctx.exception.name, "result")
        np.testing.assert_array_equal(result.to_numpy(), np.zeros((2, 2)))

    def test_other_is_checked_before_result(self):
        with self.assertRaises(DimensionMismatchError) as ctx:
            self.a.pointwise_add(
                DenseMatrix(1, 1, scheduler=self.s), DenseMatrix(1, 1, scheduler=self.s)
            )
        self.assertEqual(ctx.exception.name, "other")

    def test_non_matrix_other_raises_type_error(self):
        with self.assertRaises(TypeError):
            self.a.pointwise_multiply(DenseVector(2, scheduler=self.s))
        with self.assertRaises(TypeError):
            self.a.pointwise_divide(2.0)

    def test_non_matrix_result_raises_type_error(self):
        before = self.a.to_numpy()
        with self.assertRaises(TypeError):
            self.a.pointwise_add(self.b, DenseVector(6, scheduler=self.s))
        np.testing.assert_array_equal(self.a.to_numpy(), before)


class TestMatrixPointwiseThreaded(TestMatrixPointwise):
    def make_scheduler(self):
        return ThreadPoolScheduler(2)


if __name__ == "__main__":
    unittest.main()
