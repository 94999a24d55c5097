import itertools
import pathlib
import sys
import unittest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from perf_trace import NullTrace, PerfTrace, compute_indent


class PerfTraceTests(unittest.TestCase):
    def test_nested_report(self):
        ticks = itertools.count(0, 10)
        t = PerfTrace(clock=lambda: next(ticks))
        with t.timer("Compute checksums"):
            with t.timer("a"):
                pass
            with t.timer("b"):
                pass
        with t.timer("Final reduction"):
            pass
        self.assertEqual(
            t.records(),
            [("Compute checksums", 0, 50), ("a", 1, 10), ("b", 1, 10), ("Final reduction", 0, 10)],
        )
        self.assertEqual(
            t.report(),
            "Compute checksums: 50\n···· a: 10\n···· b: 10\nFinal reduction: 10\n",
        )

    def test_timer_closes_on_error(self):
        t = PerfTrace()
        with self.assertRaises(RuntimeError):
            with t.timer("boom"):
                raise RuntimeError("x")
        self.assertEqual(t.depth, 0)
        self.assertEqual([r[0] for r in t.records()], ["boom"])

    def test_indent(self):
        self.assertEqual(compute_indent(0), "")
        self.assertEqual(compute_indent(2), "········ ")

    def test_null_trace(self):
        t = NullTrace()
        with t.timer("x") as info:
            self.assertIsNone(info)
        self.assertEqual(t.report(), "")


if __name__ == "__main__":
    unittest.main()
