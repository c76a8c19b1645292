# breadsim/simulation/steps/report_step.py
from breadsim.pipeline.step import PipelineStep
from breadsim.simulation.report.base import ReportPipeline
from breadsim.simulation.report.daily import DailyLedgerReport
from breadsim.simulation.report.summary import JsonReport, TextSummaryReport


class ReportStep(PipelineStep):
    """
    ReportStep（FINAL）

    职责：
      - 只读 result + metrics
      - 输出 ctx.report（文本），写 stdout 由调用方负责
    """

    stage = "report"
    output_slot = "report"

    def run(self, ctx):
        if ctx.report_format == "json":
            reports = [JsonReport(ctx.metrics)]
        else:
            reports = [TextSummaryReport(ctx.metrics)]
            if ctx.include_daily:
                reports.append(DailyLedgerReport())

        with self.inst.timer(self.step_name):
            ctx.report = ReportPipeline(reports).render_all(ctx.result)
        return ctx
