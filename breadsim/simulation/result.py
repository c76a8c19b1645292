# breadsim/simulation/result.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class DayRecord:
    """一天的事实记录（按 day 顺序）"""

    day: int
    admitted: int                       # 当天入库数量
    consumed: int                       # 当天实际吃掉
    shortfall: int                      # 当天未满足的需求
    stock_end: int                      # 当天结束时库存
    oldest_age_eaten: Optional[int]     # 当天吃到的最大 staleness；没吃到为 None


@dataclass(frozen=True)
class MetricsSnapshot:
    total_delivered: int = 0
    total_consumed: int = 0
    total_waste: int = 0
    shortfall_days: int = 0
    max_staleness_observed: int = 0
    stale_units_eaten: int = 0

    # supplemented
    total_shortfall_units: int = 0
    expired_units_eaten: int = 0


@dataclass(frozen=True)
class SimulationResult:
    """
    SimulationResult (FINAL / FROZEN)

    不可变事实结果，用于：
      - Metrics 派生
      - Report 渲染
      - 回归测试
    """

    # -----------------------
    # Run identity
    # -----------------------
    num_days: int
    daily_consumption: int
    initial_stock: int
    shelf_life: int
    n_deliveries: int
    n_late_deliveries: int      # day > num_days，从未入库

    # -----------------------
    # Facts
    # -----------------------
    metrics: MetricsSnapshot
    days: Tuple[DayRecord, ...]
