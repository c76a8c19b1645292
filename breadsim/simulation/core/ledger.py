# breadsim/simulation/core/ledger.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from typing import Deque, Iterator, NamedTuple, Optional, Tuple

from breadsim import logs


@dataclass(slots=True)
class Batch:
    """
    一次送货形成的一批面包。

    arrival_day 创建后不变，staleness 永远相对它计算；
    只有 consume 会减少 remaining。
    """

    arrival_day: int
    remaining: int

    def age(self, day: int) -> int:
        return day - self.arrival_day


@dataclass(frozen=True)
class Portion:
    """consume 从某一批次取走的一部分"""

    arrival_day: int
    quantity: int
    age: int


class Withdrawal(NamedTuple):
    portions: Tuple[Portion, ...]
    shortfall: int

    @property
    def consumed(self) -> int:
        return sum(p.quantity for p in self.portions)


class Ledger:
    """
    Inventory Ledger（FIFO / aging）

    不变量：
      - batches 按 arrival_day 升序；同一天按 admit 顺序（稳定）
      - 同一天的多次送货不合并，各自是独立批次
      - remaining 永不为负；consume 不改变顺序
      - remaining == 0 的批次在 consume 时惰性移除
    """

    def __init__(self) -> None:
        self._batches: Deque[Batch] = deque()

    # --------------------------------------------------
    # Admission
    # --------------------------------------------------
    def admit(self, day: int, quantity: int) -> Batch:
        if quantity <= 0:
            raise ValueError(f"admit quantity must be > 0, got {quantity}")

        batch = Batch(arrival_day=day, remaining=quantity)

        # 常见情况：按时间顺序到货 → 直接 append
        if not self._batches or self._batches[-1].arrival_day <= day:
            self._batches.append(batch)
        else:
            pos = len(self._batches)
            while pos > 0 and self._batches[pos - 1].arrival_day > day:
                pos -= 1
            self._batches.insert(pos, batch)

        logs.debug(f"[Ledger] admit day={day} qty={quantity} stock={self.stock}")
        return batch

    # --------------------------------------------------
    # FIFO withdrawal
    # --------------------------------------------------
    def consume(self, amount: int, current_day: int) -> Withdrawal:
        """
        从最老的非空批次开始取，取空后才移动到下一批。

        返回每个被动到的批次的 (arrival_day, quantity, age)；
        供给不足的部分作为 shortfall 返回（不是异常）。
        """
        if amount < 0:
            raise ValueError(f"consume amount must be >= 0, got {amount}")

        portions = []
        need = amount

        while need > 0 and self._batches:
            head = self._batches[0]

            if head.remaining == 0:
                self._batches.popleft()
                continue

            if head.arrival_day > current_day:
                raise ValueError(
                    f"batch from day {head.arrival_day} is not available on day {current_day}"
                )

            take = min(head.remaining, need)
            head.remaining -= take
            need -= take

            portions.append(
                Portion(
                    arrival_day=head.arrival_day,
                    quantity=take,
                    age=head.age(current_day),
                )
            )

            if head.remaining == 0:
                self._batches.popleft()

        return Withdrawal(portions=tuple(portions), shortfall=need)

    # --------------------------------------------------
    # Read-only views
    # --------------------------------------------------
    @property
    def stock(self) -> int:
        return sum(b.remaining for b in self._batches)

    @property
    def oldest_arrival_day(self) -> Optional[int]:
        for b in self._batches:
            if b.remaining > 0:
                return b.arrival_day
        return None

    def __len__(self) -> int:
        return sum(1 for b in self._batches if b.remaining > 0)

    def __iter__(self) -> Iterator[Batch]:
        # 只给副本，外部不能改动内部批次
        return (replace(b) for b in self._batches if b.remaining > 0)

    def __repr__(self) -> str:
        return f"Ledger(batches={len(self)}, stock={self.stock})"
