# breadsim/simulation/steps/parse_step.py
from breadsim import logs
from breadsim.pipeline.step import PipelineStep
from breadsim.simulation.parser import try_parse_deliveries


class ParseDeliveriesStep(PipelineStep):
    """
    ParseDeliveriesStep（FINAL）

    职责：
      - cfg.deliveries → ctx.events
      - 输入错误直接抛出，模拟状态尚未创建
    """

    stage = "parse"
    output_slot = "events"

    def run(self, ctx):
        with self.inst.timer(self.step_name):
            parsed = try_parse_deliveries(ctx.cfg.deliveries)

        if not parsed.ok:
            logs.info(f"[{self.step_name}] rejected input: {parsed.error}")

        ctx.events = parsed.unwrap()
        self.inst.metrics.record("n_deliveries", len(ctx.events))
        return ctx
