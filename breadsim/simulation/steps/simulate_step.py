# breadsim/simulation/steps/simulate_step.py
from breadsim.pipeline.step import PipelineStep
from breadsim.simulation.engine import DailySimulation


class SimulateStep(PipelineStep):
    """
    SimulateStep（FINAL）

    职责：
      - events + cfg → SimulationResult
    """

    stage = "simulate"
    output_slot = "result"

    def run(self, ctx):
        if ctx.events is None:
            raise RuntimeError("SimulateStep requires parsed events (run ParseDeliveriesStep first)")

        with self.inst.timer(self.step_name):
            ctx.result = DailySimulation.from_config(ctx.cfg, ctx.events).run()
        return ctx
