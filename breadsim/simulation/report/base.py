# breadsim/simulation/report/base.py
from __future__ import annotations
from abc import ABC, abstractmethod

from breadsim.simulation.result import SimulationResult


class Report(ABC):
    """
    Report (FINAL / FROZEN)

    SimulationResult -> text

    Contract:
      - Reports are read-only consumers of SimulationResult.
      - All derived analytics are computed in the Metrics layer.
      - Same result (+ metrics) → byte-identical text.
    """

    @abstractmethod
    def render(self, result: SimulationResult) -> str:
        ...


class ReportPipeline:
    def __init__(self, reports: list[Report]):
        self._reports = reports

    def render_all(self, result: SimulationResult) -> str:
        return "\n\n".join(r.render(result) for r in self._reports)
