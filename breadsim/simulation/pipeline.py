# breadsim/simulation/pipeline.py
from __future__ import annotations

from breadsim import logs
from breadsim.config.simulation_config import SimulationConfig
from breadsim.observability.instrumentation import Instrumentation
from breadsim.pipeline.context import SimulationContext
from breadsim.pipeline.step import PipelineStep


class SimulationPipeline:
    """
    SimulationPipeline（FINAL / FROZEN）

    语义：
      - 一次运行的 orchestration 层
      - 只负责：
          * Context 构造
          * Step 顺序执行
      - 不循环 days（那是 DailySimulation 的事）
    """

    def __init__(
        self,
        *,
        steps: list[PipelineStep],
        inst: Instrumentation,
    ) -> None:
        self.steps = steps
        self.inst = inst

    def run(
        self,
        cfg: SimulationConfig,
        *,
        report_format: str = "text",
        include_daily: bool = False,
    ) -> SimulationContext:
        label = f"num_days={cfg.num_days} deliveries={len(cfg.deliveries.split())}"
        logs.info(f"[SimulationPipeline] ====== START {label} ======")

        ctx = SimulationContext(
            cfg=cfg,
            report_format=report_format,
            include_daily=include_daily,
        )

        for step in self.steps:
            logs.debug(
                f"[SimulationPipeline] running step={step.step_name} "
                f"stage={step.stage} -> ctx.{step.output_slot}"
            )
            ctx = step.run(ctx)

        self.inst.generate_timeline_report(label)

        logs.info(f"[SimulationPipeline] ====== DONE {label} ======")
        return ctx
