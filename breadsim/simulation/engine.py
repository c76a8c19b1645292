# breadsim/simulation/engine.py
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from breadsim import logs
from breadsim.config.simulation_config import DEFAULT_SHELF_LIFE, SimulationConfig
from breadsim.simulation.core.events import DeliveryEvent
from breadsim.simulation.core.ledger import Ledger, Withdrawal
from breadsim.simulation.core.policy import DAILY_CONSUMPTION
from breadsim.simulation.result import DayRecord, MetricsSnapshot, SimulationResult

# 初始库存视为第 0 天到货（早于第一个模拟日）
INITIAL_STOCK_DAY = 0


@dataclass
class Metrics:
    """
    累积指标：只增不减
    """

    total_delivered: int = 0
    total_consumed: int = 0
    total_waste: int = 0
    shortfall_days: int = 0
    max_staleness_observed: int = 0
    stale_units_eaten: int = 0
    total_shortfall_units: int = 0
    expired_units_eaten: int = 0

    def snapshot(self) -> MetricsSnapshot:
        return MetricsSnapshot(**self.__dict__)


@dataclass
class SimulationState:
    """
    SimulationState（运行期唯一可变状态）

    只属于 DailySimulation.run 的一次调用，不对外暴露。
    """

    current_day: int = 0
    ledger: Ledger = field(default_factory=Ledger)
    metrics: Metrics = field(default_factory=Metrics)


class DailySimulation:
    """
    Daily Simulation Loop (FINAL / FROZEN)

    每天：
      1. 入库当天所有送货（按解析顺序）
      2. 按固定数量 FIFO 取货
      3. 按批次年龄更新 staleness 指标
      4. 不足部分记为 shortfall（不是异常）
    结束后剩余库存全部记为 waste。

    永远跑满 num_days，没有提前退出。
    """

    daily_consumption: int = DAILY_CONSUMPTION

    def __init__(
        self,
        events: Sequence[DeliveryEvent],
        num_days: int,
        *,
        initial_stock: int = 0,
        shelf_life: int = DEFAULT_SHELF_LIFE,
    ) -> None:
        if num_days < 1:
            raise ValueError(f"num_days must be >= 1, got {num_days}")
        if initial_stock < 0:
            raise ValueError(f"initial_stock must be >= 0, got {initial_stock}")
        if shelf_life < 1:
            raise ValueError(f"shelf_life must be >= 1, got {shelf_life}")

        self.events = tuple(events)
        self.num_days = num_days
        self.initial_stock = initial_stock
        self.shelf_life = shelf_life

        self._by_day = self._group_by_day(self.events)

    @classmethod
    def from_config(
        cls, cfg: SimulationConfig, events: Sequence[DeliveryEvent]
    ) -> "DailySimulation":
        return cls(
            events,
            cfg.num_days,
            initial_stock=cfg.initial_stock,
            shelf_life=cfg.shelf_life,
        )

    @staticmethod
    def _group_by_day(
        events: Iterable[DeliveryEvent],
    ) -> Dict[int, List[DeliveryEvent]]:
        by_day: Dict[int, List[DeliveryEvent]] = defaultdict(list)
        for e in events:
            by_day[e.day].append(e)
        return dict(by_day)

    # --------------------------------------------------
    # Run
    # --------------------------------------------------
    def run(self) -> SimulationResult:
        state = SimulationState()
        days: List[DayRecord] = []

        late = [e for e in self.events if e.day > self.num_days]
        if late:
            logs.warning(
                f"[Simulation] {len(late)} deliveries scheduled after day "
                f"{self.num_days} are never admitted"
            )

        if self.initial_stock:
            state.ledger.admit(INITIAL_STOCK_DAY, self.initial_stock)
            state.metrics.total_delivered += self.initial_stock

        logs.info(
            f"[Simulation] START num_days={self.num_days} "
            f"deliveries={len(self.events)} initial_stock={self.initial_stock}"
        )

        for day in range(1, self.num_days + 1):
            state.current_day = day
            days.append(self._step(state))
            self._check_conservation(state)

        # 期末：剩余库存 → waste
        state.metrics.total_waste += state.ledger.stock

        result = SimulationResult(
            num_days=self.num_days,
            daily_consumption=self.daily_consumption,
            initial_stock=self.initial_stock,
            shelf_life=self.shelf_life,
            n_deliveries=len(self.events),
            n_late_deliveries=len(late),
            metrics=state.metrics.snapshot(),
            days=tuple(days),
        )

        logs.info(
            f"[Simulation] DONE consumed={result.metrics.total_consumed} "
            f"waste={result.metrics.total_waste} "
            f"shortfall_days={result.metrics.shortfall_days}"
        )
        return result

    # --------------------------------------------------
    # One day
    # --------------------------------------------------
    def _step(self, state: SimulationState) -> DayRecord:
        day = state.current_day
        ledger, m = state.ledger, state.metrics

        # ① admissions
        admitted = 0
        for e in self._by_day.get(day, ()):
            ledger.admit(e.day, e.quantity)
            admitted += e.quantity
        m.total_delivered += admitted

        # ② consumption
        w: Withdrawal = ledger.consume(self.daily_consumption, day)

        # ③ staleness
        oldest = None
        for p in w.portions:
            m.total_consumed += p.quantity
            m.max_staleness_observed = max(m.max_staleness_observed, p.age)
            if p.age > 0:
                m.stale_units_eaten += p.quantity
            if p.age >= self.shelf_life:
                m.expired_units_eaten += p.quantity
            oldest = p.age if oldest is None else max(oldest, p.age)

        # ④ shortfall
        if w.shortfall > 0:
            m.shortfall_days += 1
            m.total_shortfall_units += w.shortfall
            logs.debug(f"[Simulation] day={day} shortfall={w.shortfall}")

        return DayRecord(
            day=day,
            admitted=admitted,
            consumed=w.consumed,
            shortfall=w.shortfall,
            stock_end=ledger.stock,
            oldest_age_eaten=oldest,
        )

    @staticmethod
    def _check_conservation(state: SimulationState) -> None:
        m = state.metrics
        on_hand = state.ledger.stock
        if m.total_delivered != m.total_consumed + on_hand:
            raise RuntimeError(
                f"conservation violated on day {state.current_day}: "
                f"delivered={m.total_delivered} consumed={m.total_consumed} "
                f"on_hand={on_hand}"
            )


def run_simulation(
    events: Sequence[DeliveryEvent],
    num_days: int,
    *,
    initial_stock: int = 0,
    shelf_life: int = DEFAULT_SHELF_LIFE,
) -> SimulationResult:
    return DailySimulation(
        events,
        num_days,
        initial_stock=initial_stock,
        shelf_life=shelf_life,
    ).run()
