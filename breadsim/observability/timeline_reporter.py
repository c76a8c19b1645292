#!filepath: breadsim/observability/timeline_reporter.py
from typing import Dict
from breadsim import logs


class TimelineReporter:
    """
    一次模拟运行的 step 耗时表（写日志，不写 stdout）

        step → 秒数 + 占比，末行 Total，并标出最慢的 step
    """

    def __init__(self, timeline: Dict[str, float], label: str):
        self.timeline = timeline
        self.label = label

    def rows(self) -> list[tuple[str, float, float]]:
        total = sum(self.timeline.values())
        return [
            (name, sec, sec / total if total > 0 else 0.0)
            for name, sec in self.timeline.items()
        ]

    def print(self):
        logs.info(f"[Timeline] ===== Simulation timeline [{self.label}] =====")

        for name, sec, share in self.rows():
            logs.info(f"[Timeline] {name:<24} {sec:>8.3f}s {share:>6.1%}")

        total = sum(self.timeline.values())
        logs.info(f"[Timeline] {'Total':<24} {total:>8.3f}s")

        if self.timeline:
            slowest = max(self.timeline, key=self.timeline.get)
            logs.info(f"[Timeline] slowest step: {slowest}")
