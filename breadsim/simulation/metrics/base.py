# breadsim/simulation/metrics/base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict

import numpy as np

from breadsim.simulation.result import SimulationResult


class MetricsCollector(ABC):
    """
    MetricsCollector (FINAL)

    SimulationResult -> metrics dict

    Contract:
      - Metrics are pure functions of SimulationResult.
      - Metrics must not affect simulation execution.
    """

    @abstractmethod
    def compute(self, result: SimulationResult) -> Dict[str, float]:
        ...


class BasicMetrics(MetricsCollector):
    """累积计数，原样取出（整数，精确可复现）"""

    def compute(self, result: SimulationResult) -> Dict[str, float]:
        m = result.metrics
        return {
            "total_delivered": m.total_delivered,
            "total_consumed": m.total_consumed,
            "total_waste": m.total_waste,
            "shortfall_days": m.shortfall_days,
            "max_staleness_observed": m.max_staleness_observed,
            "stale_units_eaten": m.stale_units_eaten,
            "total_shortfall_units": m.total_shortfall_units,
            "expired_units_eaten": m.expired_units_eaten,
        }


class DerivedMetrics(MetricsCollector):
    def compute(self, result: SimulationResult) -> Dict[str, float]:
        m = result.metrics
        stock = np.array([d.stock_end for d in result.days], dtype=float)
        ages = np.array(
            [d.oldest_age_eaten for d in result.days if d.oldest_age_eaten is not None],
            dtype=float,
        )
        demand = result.num_days * result.daily_consumption

        return {
            "waste_rate": (
                m.total_waste / m.total_delivered if m.total_delivered > 0 else 0.0
            ),
            "service_level": 1.0 - m.shortfall_days / result.num_days,
            "fill_rate": m.total_consumed / demand if demand > 0 else 0.0,
            "mean_stock_on_hand": float(np.mean(stock)) if stock.size else 0.0,
            "mean_oldest_age_eaten": float(np.mean(ages)) if ages.size else 0.0,
        }


class MetricsPipeline:
    def __init__(self, collectors: list[MetricsCollector]):
        self._collectors = collectors

    def compute(self, result: SimulationResult) -> Dict[str, float]:
        metrics = {}
        for c in self._collectors:
            metrics.update(c.compute(result))
        return metrics


def default_metrics_pipeline() -> MetricsPipeline:
    return MetricsPipeline([BasicMetrics(), DerivedMetrics()])
