# breadsim/simulation/report/summary.py
from __future__ import annotations

import json
from typing import Dict, Optional

from breadsim.simulation.metrics.base import BasicMetrics
from breadsim.simulation.report.base import Report
from breadsim.simulation.result import SimulationResult

_RULE = "-" * 44

# (metric key, label, unit)
_CORE_ROWS = [
    ("total_delivered", "Total delivered", ""),
    ("total_consumed", "Total consumed", ""),
    ("total_waste", "Total waste", ""),
    ("shortfall_days", "Shortfall days", ""),
    ("max_staleness_observed", "Max staleness observed", " days"),
    ("stale_units_eaten", "Stale units eaten", ""),
    ("total_shortfall_units", "Shortfall units", ""),
    ("expired_units_eaten", "Expired units eaten", ""),
]

_RATE_ROWS = [
    ("waste_rate", "Waste rate"),
    ("service_level", "Service level"),
    ("fill_rate", "Fill rate"),
]

_FLOAT_ROWS = [
    ("mean_stock_on_hand", "Mean stock on hand"),
    ("mean_oldest_age_eaten", "Mean age eaten (days)"),
]


class TextSummaryReport(Report):
    def __init__(self, metrics: Optional[Dict[str, float]] = None):
        self._metrics = metrics

    def render(self, result: SimulationResult) -> str:
        metrics = self._metrics or BasicMetrics().compute(result)

        lines = [
            f"Bread simulation summary ({result.num_days} days, "
            f"{result.daily_consumption} unit/day, shelf life {result.shelf_life} days)",
            _RULE,
        ]
        for key, label, unit in _CORE_ROWS:
            if key in metrics:
                lines.append(f"{label:<24}: {metrics[key]:>6}{unit}")

        derived = [k for k, _ in _RATE_ROWS + _FLOAT_ROWS if k in metrics]
        if derived:
            lines.append(_RULE)
            for key, label in _RATE_ROWS:
                if key in metrics:
                    lines.append(f"{label:<24}: {metrics[key] * 100:>6.2f}%")
            for key, label in _FLOAT_ROWS:
                if key in metrics:
                    lines.append(f"{label:<24}: {metrics[key]:>6.2f}")

        if result.n_late_deliveries:
            lines.append(_RULE)
            lines.append(
                f"Note: {result.n_late_deliveries} deliveries fall after day "
                f"{result.num_days} and were never admitted"
            )
        return "\n".join(lines)


class JsonReport(Report):
    def __init__(self, metrics: Optional[Dict[str, float]] = None):
        self._metrics = metrics

    def render(self, result: SimulationResult) -> str:
        payload = {
            "num_days": result.num_days,
            "daily_consumption": result.daily_consumption,
            "initial_stock": result.initial_stock,
            "shelf_life": result.shelf_life,
            "n_deliveries": result.n_deliveries,
            "n_late_deliveries": result.n_late_deliveries,
            "metrics": self._metrics or BasicMetrics().compute(result),
        }
        return json.dumps(payload, indent=2, sort_keys=True)
