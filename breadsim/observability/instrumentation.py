#!filepath: breadsim/observability/instrumentation.py
from __future__ import annotations

import time
from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict

from breadsim.observability.metrics import MetricRecorder
from breadsim.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Instrumentation（模拟运行的耗时 / 指标记录）

    约定：
    1. timeline 只记录 step 级叶子 timer（record=True）
    2. record=False 的 timer 只划定范围，不写 timeline
    3. 同名 timer 重复进入时累加耗时
    4. 不影响模拟结果
    """

    enabled: bool = True

    def __post_init__(self):
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[step_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    @contextmanager
    def timer(self, name: str, *, record: bool = True):
        if not self.enabled:
            yield
            return

        start = time.perf_counter()
        try:
            yield
        finally:
            if record:
                elapsed = time.perf_counter() - start
                self.timeline[name] = self.timeline.get(name, 0.0) + elapsed

    def generate_timeline_report(self, label: str):
        TimelineReporter(self.timeline, label).print()


class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    @contextmanager
    def timer(self, name: str, *, record: bool = True):
        yield

    def generate_timeline_report(self, label: str):
        pass
