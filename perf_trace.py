import logging  # per-timer debug lines
import time  # monotonic nanosecond clock
from contextlib import contextmanager  # timer() scope

logger = logging.getLogger(__name__)

PAD_CHAR = "····"  # one indentation level in report()


class TimerInfo:  # Open timer handle returned by start_timer.
    def __init__(self, msg, depth, start_ns, order):
        self.msg = msg
        self.order = order
        self.depth = depth
        self.start_ns = start_ns


class PerfTrace:  # Hierarchical stage timer; nested timers render under their parent.
    def __init__(self, clock=time.perf_counter_ns):
        self.clock = clock
        self.depth = 0
        self.reports = []  # (msg, depth, elapsed_ns) in start order

    def start_timer(self, msg):
        info = TimerInfo(msg, self.depth, self.clock(), len(self.reports))
        self.reports.append(None)  # reserve the slot so parents precede children
        self.depth += 1
        return info

    def end_timer(self, info):
        elapsed = self.clock() - info.start_ns
        self.depth -= 1
        self.reports[info.order] = (info.msg, info.depth, elapsed)
        logger.debug("%s%s: %d ns", compute_indent(info.depth), info.msg, elapsed)
        return elapsed

    @contextmanager
    def timer(self, msg):  # `with trace.timer("stage"):` scope.
        info = self.start_timer(msg)
        try:
            yield info
        finally:
            self.end_timer(info)

    def records(self):  # Finished (msg, depth, elapsed_ns) tuples, parents before children.
        return [r for r in self.reports if r is not None]

    def report(self):  # Indented multi-line report.
        return "".join(f"{compute_indent(d)}{msg}: {elapsed}\n" for msg, d, elapsed in self.records())


class NullTrace:  # Drop-in tracer that records nothing.
    @contextmanager
    def timer(self, msg):
        yield None

    def records(self):
        return []

    def report(self):
        return ""


def compute_indent(depth):
    return PAD_CHAR * depth + (" " if depth else "")
