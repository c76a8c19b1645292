# breadsim/simulation/report/daily.py
import pandas as pd

from breadsim.simulation.report.base import Report
from breadsim.simulation.result import SimulationResult

COLUMNS = ["day", "admitted", "consumed", "shortfall", "stock_end", "oldest_age_eaten"]


def days_frame(result: SimulationResult) -> pd.DataFrame:
    """DayRecord 序列 → DataFrame（一行一天）"""
    df = pd.DataFrame([d.__dict__ for d in result.days], columns=COLUMNS)
    # 没吃到面包的日子 age 为空，保持整数列
    df["oldest_age_eaten"] = df["oldest_age_eaten"].astype("Int64")
    return df


class DailyLedgerReport(Report):
    def render(self, result: SimulationResult) -> str:
        df = days_frame(result)
        # Int64 的 <NA> 不吃 na_rep，转成字符串列再填 "-"
        df["oldest_age_eaten"] = df["oldest_age_eaten"].astype("string").fillna("-")
        return df.to_string(index=False)
