from .parse_step import ParseDeliveriesStep
from .simulate_step import SimulateStep
from .metrics_step import MetricsStep
from .report_step import ReportStep

__all__ = ["ParseDeliveriesStep", "SimulateStep", "MetricsStep", "ReportStep"]
