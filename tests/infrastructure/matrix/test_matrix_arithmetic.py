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


class _CountingScheduler(SequentialScheduler):
    """Sequential scheduler that records how many ranges it was handed."""

    def __init__(self):
        self.calls = 0

    def parallel_for(self, start, end, body):
        self.calls += 1
        super().parallel_for(start, end, body)


def _m(rows, scheduler):
    return DenseMatrix.from_array(rows, scheduler=scheduler)


class TestMatrixArithmetic(TestCase):
    def make_scheduler(self):
        return SequentialScheduler()

    def setUp(self) -> None:
        self.s = self.make_scheduler()
        self.a = _m([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], self.s)
        self.b = _m([[0.5, -1.0, 2.0], [10.0, 0.0, -6.0]], self.s)

    def tearDown(self) -> None:
        if hasattr(self.s, "shutdown"):
            self.s.shutdown()

    def test_add_then_subtract_restores_original(self):
        original = self.a.clone()
        self.a.add(self.b)
        np.testing.assert_allclose(
            self.a.to_numpy(), [[1.5, 1.0, 5.0], [14.0, 5.0, 0.0]]
        )
        self.a.subtract(self.b)
        self.assertEqual(self.a, original)

    def test_add_leaves_other_untouched(self):
        before = self.b.to_numpy()
        self.a.add(self.b)
        np.testing.assert_array_equal(self.b.to_numpy(), before)

    def test_add_shape_mismatch_raises_and_does_not_mutate(self):
        other = DenseMatrix(3, 2, scheduler=self.s)
        before = self.a.to_numpy()
        with self.assertRaises(DimensionMismatchError) as ctx:
            self.a.add(other)
        self.assertEqual(ctx.exception.actual, (3, 2))
        np.testing.assert_array_equal(self.a.to_numpy(), before)

    def test_add_none_raises_null_operand(self):
        with self.assertRaises(NullOperandError):
            self.a.add(None)
        with self.assertRaises(NullOperandError):
            self.a.subtract(None)

    def test_scale_by_zero_gives_zeros(self):
        self.a.scale(0.0)
        np.testing.assert_array_equal(self.a.to_numpy(), np.zeros((2, 3)))

    def test_scale_into_result_leaves_source_untouched(self):
        out = DenseMatrix(2, 3, scheduler=self.s)
        returned = self.a.scale(2.0, out)
        self.assertIs(returned, out)
        np.testing.assert_allclose(out.to_numpy(), [[2, 4, 6], [8, 10, 12]])
        np.testing.assert_allclose(self.a.to_numpy(), [[1, 2, 3], [4, 5, 6]])

    def test_scale_into_result_wrong_shape_raises(self):
        with self.assertRaises(DimensionMismatchError):
            self.a.scale(2.0, DenseMatrix(3, 2, scheduler=self.s))
        with self.assertRaises(DimensionMismatchError):
            self.a.negate(DenseMatrix(1, 3, scheduler=self.s))

    def test_negate_in_place_and_into_result(self):
        out = DenseMatrix(2, 3, scheduler=self.s)
        self.a.negate(out)
        np.testing.assert_allclose(out.to_numpy(), -self.a.to_numpy())
        self.a.negate()
        self.assertEqual(self.a, out)

    def test_operators_are_pure(self):
        a_before = self.a.to_numpy()
        b_before = self.b.to_numpy()

        np.testing.assert_allclose((self.a + self.b).to_numpy(), a_before + b_before)
        np.testing.assert_allclose((self.a - self.b).to_numpy(), a_before - b_before)
        np.testing.assert_allclose((-self.a).to_numpy(), -a_before)
        np.testing.assert_allclose((+self.a).to_numpy(), a_before)
        np.testing.assert_allclose((self.a * 3).to_numpy(), a_before * 3)
        np.testing.assert_allclose((0.5 * self.a).to_numpy(), a_before * 0.5)

        np.testing.assert_array_equal(self.a.to_numpy(), a_before)
        np.testing.assert_array_equal(self.b.to_numpy(), b_before)

    def test_operator_results_are_new_objects(self):
        self.assertIsNot(self.a + self.b, self.a)
        self.assertIsNot(+self.a, self.a)
        self.assertIsNot(self.a * 1.0, self.a)

    def test_operator_null_and_shape_errors(self):
        with self.assertRaises(NullOperandError):
            self.a + None
        with self.assertRaises(NullOperandError):
            self.a - None
        with self.assertRaises(DimensionMismatchError):
            self.a + DenseMatrix(2, 2, scheduler=self.s)

    def test_star_between_matrices_is_rejected(self):
        with self.assertRaises(TypeError):
            self.a * self.b

    def test_non_matrix_operand_raises_type_error(self):
        before = self.a.to_numpy()
        with self.assertRaises(TypeError):
            self.a.add(5)
        with self.assertRaises(TypeError):
            self.a.subtract(DenseVector(3, scheduler=self.s))
        np.testing.assert_array_equal(self.a.to_numpy(), before)

    def test_non_matrix_result_raises_type_error(self):
        with self.assertRaises(TypeError):
            self.a.scale(2.0, DenseVector(3, scheduler=self.s))
        with self.assertRaises(TypeError):
            self.a.negate([[0, 0, 0], [0, 0, 0]])
        np.testing.assert_allclose(self.a.to_numpy(), [[1, 2, 3], [4, 5, 6]])

    def test_numpy_scalar_times_matrix_stays_a_matrix(self):
        out = np.float64(2.0) * self.a
        self.assertIsInstance(out, DenseMatrix)
        np.testing.assert_allclose(out.to_numpy(), [[2, 4, 6], [8, 10, 12]])


class TestMatrixArithmeticThreaded(TestMatrixArithmetic):
    def make_scheduler(self):
        return ThreadPoolScheduler(3)


class TestScaleIdentityShortCircuit(TestCase):
    def test_scale_by_one_does_no_work(self):
        s = _CountingScheduler()
        m = _m([[1.0, 2.0], [3.0, 4.0]], s)
        m.scale(1.0)
        self.assertEqual(s.calls, 0)
        np.testing.assert_array_equal(m.to_numpy(), [[1.0, 2.0], [3.0, 4.0]])

    def test_scale_within_fifteen_decimals_of_one_is_noop(self):
        s = _CountingScheduler()
        m = _m([[1.0, 2.0], [3.0, 4.0]], s)
        m.scale(1.0 + 4e-16)
        self.assertEqual(s.calls, 0)

    def test_scale_just_outside_tolerance_does_work(self):
        s = _CountingScheduler()
        m = _m([[1.0, 2.0], [3.0, 4.0]], s)
        m.scale(1.0 + 1e-14)
        self.assertEqual(s.calls, 1)


if __name__ == "__main__":
    unittest.main()
