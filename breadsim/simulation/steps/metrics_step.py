# breadsim/simulation/steps/metrics_step.py
from breadsim.pipeline.step import PipelineStep
from breadsim.simulation.metrics.base import default_metrics_pipeline


class MetricsStep(PipelineStep):
    """
    MetricsStep（FINAL）

    职责：
      - result → metrics dict
    """

    stage = "metrics"
    output_slot = "metrics"

    def run(self, ctx):
        with self.inst.timer(self.step_name):
            metrics = default_metrics_pipeline().compute(ctx.result)

        self.inst.metrics.record_many(metrics)
        ctx.metrics = metrics
        return ctx
