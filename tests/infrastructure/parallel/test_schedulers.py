import threading
import unittest
from unittest import TestCase

from keymat.domain import InvalidArgumentError
from keymat.infrastructure.parallel import (
    ParallelConfig,
    SequentialScheduler,
    ThreadPoolScheduler,
    build_scheduler,
    get_default_scheduler,
    set_default_scheduler,
)
from keymat.infrastructure.parallel._schedulers import _partition


class TestPartition(TestCase):
    def test_chunks_cover_range_exactly_once(self):
        chunks = _partition(3, 13, 4)
        self.assertEqual(len(chunks), 4)
        covered = [i for lo, hi in chunks for i in range(lo, hi)]
        self.assertEqual(covered, list(range(3, 13)))

    def test_never_more_chunks_than_indices(self):
        self.assertEqual(_partition(0, 2, 8), [(0, 1), (1, 2)])


class TestSequentialScheduler(TestCase):
    def test_parallel_for_visits_indices_in_order(self):
        seen = []
        SequentialScheduler().parallel_for(2, 6, seen.append)
        self.assertEqual(seen, [2, 3, 4, 5])

    def test_empty_range_is_noop(self):
        seen = []
        SequentialScheduler().parallel_for(5, 5, seen.append)
        SequentialScheduler().parallel_for(5, 1, seen.append)
        self.assertEqual(seen, [])

    def test_parallel_invoke_runs_every_action(self):
        seen = []
        SequentialScheduler().parallel_invoke(
            lambda: seen.append("a"), lambda: seen.append("b")
        )
        self.assertEqual(seen, ["a", "b"])


class TestThreadPoolScheduler(TestCase):
    def setUp(self) -> None:
        self.scheduler = ThreadPoolScheduler(4)

    def tearDown(self) -> None:
        self.scheduler.shutdown()

    def test_parallel_for_visits_each_index_once(self):
        lock = threading.Lock()
        counts = {}

        def body(i):
            with lock:
                counts[i] = counts.get(i, 0) + 1

        self.scheduler.parallel_for(0, 100, body)
        self.assertEqual(counts, {i: 1 for i in range(100)})

    def test_parallel_for_uses_worker_threads(self):
        names = set()
        lock = threading.Lock()

        def body(i):
            with lock:
                names.add(threading.current_thread().name)

        self.scheduler.parallel_for(0, 16, body)
        self.assertTrue(all(n.startswith("keymat") for n in names))

    def test_short_range_runs_inline(self):
        s = ThreadPoolScheduler(4, min_parallel_work=10)
        names = []
        s.parallel_for(0, 3, lambda i: names.append(threading.current_thread().name))
        self.assertEqual(set(names), {threading.current_thread().name})
        s.shutdown()

    def test_failure_is_reraised_after_all_units_finish(self):
        done = []
        lock = threading.Lock()

        def body(i):
            if i == 0:
                raise RuntimeError("boom")
            with lock:
                done.append(i)

        with self.assertRaises(RuntimeError):
            self.scheduler.parallel_for(0, 8, body)
        # units in the other chunks still ran to completion
        self.assertTrue(set(done) >= {2, 4, 6, 7})

    def test_nested_dispatch_does_not_deadlock_single_worker_pool(self):
        s = ThreadPoolScheduler(1)
        seen = []
        s.parallel_invoke(
            lambda: s.parallel_for(0, 3, seen.append),
            lambda: s.parallel_for(3, 6, seen.append),
        )
        self.assertEqual(sorted(seen), list(range(6)))
        s.shutdown()

    def test_nested_dispatch_in_saturated_pool(self):
        s = ThreadPoolScheduler(2)
        lock = threading.Lock()
        seen = []

        def inner(i):
            with lock:
                seen.append(i)

        s.parallel_invoke(
            lambda: s.parallel_for(0, 50, inner),
            lambda: s.parallel_for(50, 100, inner),
            lambda: s.parallel_for(100, 150, inner),
        )
        self.assertEqual(sorted(seen), list(range(150)))
        s.shutdown()

    def test_pool_is_recreated_after_shutdown(self):
        seen = []
        self.scheduler.shutdown()
        self.scheduler.parallel_invoke(lambda: seen.append(1), lambda: seen.append(2))
        self.assertEqual(sorted(seen), [1, 2])

    def test_rejects_non_positive_workers(self):
        with self.assertRaises(InvalidArgumentError):
            ThreadPoolScheduler(0)
        with self.assertRaises(InvalidArgumentError):
            ThreadPoolScheduler(2, min_parallel_work=0)


class TestParallelConfig(TestCase):
    def test_from_env_reads_variables(self):
        cfg = ParallelConfig.from_env(
            {"KEYMAT_NUM_THREADS": "3", "KEYMAT_MIN_PARALLEL_WORK": "16"}
        )
        self.assertTrue(cfg.enabled)
        self.assertEqual(cfg.max_workers, 3)
        self.assertEqual(cfg.min_parallel_work, 16)

    def test_from_env_disable_flag(self):
        cfg = ParallelConfig.from_env({"KEYMAT_PARALLEL": "off"})
        self.assertFalse(cfg.enabled)
        self.assertTrue(cfg.is_sequential)
        self.assertIsInstance(build_scheduler(cfg), SequentialScheduler)

    def test_single_thread_builds_sequential_scheduler(self):
        cfg = ParallelConfig.from_env({"KEYMAT_NUM_THREADS": "1"})
        self.assertIsInstance(build_scheduler(cfg), SequentialScheduler)

    def test_multi_thread_builds_pool(self):
        s = build_scheduler(ParallelConfig(max_workers=2))
        self.assertIsInstance(s, ThreadPoolScheduler)
        self.assertEqual(s.max_workers, 2)

    def test_invalid_values_raise(self):
        with self.assertRaises(InvalidArgumentError):
            ParallelConfig.from_env({"KEYMAT_NUM_THREADS": "many"})
        with self.assertRaises(InvalidArgumentError):
            ParallelConfig.from_env({"KEYMAT_MIN_PARALLEL_WORK": "0"})


class TestDefaultScheduler(TestCase):
    def tearDown(self) -> None:
        set_default_scheduler(None)

    def test_set_and_get_default(self):
        s = SequentialScheduler()
        set_default_scheduler(s)
        self.assertIs(get_default_scheduler(), s)

    def test_default_is_built_lazily_and_cached(self):
        set_default_scheduler(None)
        first = get_default_scheduler()
        self.assertIs(get_default_scheduler(), first)

    def test_rejects_objects_without_scheduler_methods(self):
        with self.assertRaises(InvalidArgumentError):
            set_default_scheduler(object())


if __name__ == "__main__":
    unittest.main()
