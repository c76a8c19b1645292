#!filepath: breadsim/observability/metrics.py
from dataclasses import dataclass, field
from typing import Dict, Any
from breadsim import logs


@dataclass
class MetricRecorder:
    """运行期指标（n_deliveries、各项计数等），只用于日志 / 测试观察"""

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")

    def record_many(self, values: Dict[str, Any]):
        # 一次写入，日志合并成一行
        if not self.enabled or not values:
            return
        self.metrics.update(values)
        logs.debug("[Metric] " + ", ".join(f"{k}={v}" for k, v in values.items()))
