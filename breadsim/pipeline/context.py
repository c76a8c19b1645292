#!filepath: breadsim/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from breadsim.config.simulation_config import SimulationConfig
from breadsim.simulation.core.events import DeliveryEvent
from breadsim.simulation.result import SimulationResult


@dataclass
class SimulationContext:
    """
    SimulationContext（FINAL / FROZEN）

    设计原则：
      - Step 之间唯一通信载体
      - cfg 只读；只存“事实 / 中间态”，不存业务逻辑
    """

    # -------------------------
    # identity（injected once）
    # -------------------------
    cfg: SimulationConfig
    report_format: str = "text"
    include_daily: bool = False

    # -------------------------
    # resolved by steps
    # -------------------------
    events: Optional[Tuple[DeliveryEvent, ...]] = None
    result: Optional[SimulationResult] = None
    metrics: Optional[Dict[str, float]] = None
    report: Optional[str] = None
