# breadsim/workflows/run_simulation.py
from __future__ import annotations

from breadsim import logs
from breadsim.config.simulation_config import SimulationConfig
from breadsim.observability.instrumentation import Instrumentation
from breadsim.pipeline.context import SimulationContext
from breadsim.simulation.pipeline import SimulationPipeline
from breadsim.simulation.steps import (
    MetricsStep,
    ParseDeliveriesStep,
    ReportStep,
    SimulateStep,
)
from breadsim.utils.errors import UserInputError


def build_simulation_pipeline(inst: Instrumentation | None = None) -> SimulationPipeline:
    inst = inst or Instrumentation()

    return SimulationPipeline(
        steps=[
            ParseDeliveriesStep(inst=inst),
            SimulateStep(inst=inst),
            MetricsStep(inst=inst),
            ReportStep(inst=inst),
        ],
        inst=inst,
    )


@logs.catch(msg="simulation workflow failed", reraise_quietly=(UserInputError,))
def run_simulation_workflow(
    cfg: SimulationConfig,
    *,
    report_format: str = "text",
    include_daily: bool = False,
    inst: Instrumentation | None = None,
) -> SimulationContext:
    pipeline = build_simulation_pipeline(inst)
    return pipeline.run(
        cfg,
        report_format=report_format,
        include_daily=include_daily,
    )
