# breadsim/simulation/parser.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from breadsim import logs
from breadsim.simulation.core.events import DeliveryEvent
from breadsim.utils.errors import (
    MalformedTupleError,
    UserInputError,
    ValidationError,
)

# ============================
# token 形状：(integer,integer)
# ============================
_TUPLE_RE = re.compile(r"^\(([+-]?\d+),([+-]?\d+)\)$", re.ASCII)


def parse_token(token: str) -> DeliveryEvent:
    """
    单个 token → DeliveryEvent

    形状错误 → MalformedTupleError
    数值越界 → ValidationError
    """
    if not token.startswith("(") or not token.endswith(")"):
        raise MalformedTupleError(token, "missing parenthesis")

    m = _TUPLE_RE.match(token)
    if m is None:
        raise MalformedTupleError(token)

    day, quantity = int(m.group(1)), int(m.group(2))

    if day < 1:
        raise ValidationError(token, f"day must be >= 1, got {day}")
    if quantity <= 0:
        raise ValidationError(token, f"quantity must be > 0, got {quantity}")

    return DeliveryEvent(day=day, quantity=quantity)


# ============================
# 主入口
# ============================
def parse_deliveries(text: str) -> Tuple[DeliveryEvent, ...]:
    """
    输入：空白分隔的 "(day,quantity)" 序列（可为空）
    输出：按 day 升序的 DeliveryEvent（同一天保持输入顺序）

    纯函数：相同输入 → 相同输出
    """
    tokens = text.split()
    events = [parse_token(t) for t in tokens]

    # sorted() 是稳定排序
    ordered = tuple(sorted(events, key=lambda e: e.day))

    logs.debug(f"[Parser] parsed {len(ordered)} delivery events")
    return ordered


@dataclass(frozen=True)
class ParseResult:
    """
    Tagged result：成功（events）或失败（error，四类输入错误之一）
    """

    events: Tuple[DeliveryEvent, ...] = ()
    error: Optional[UserInputError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Tuple[DeliveryEvent, ...]:
        if self.error is not None:
            raise self.error
        return self.events


def try_parse_deliveries(text: str) -> ParseResult:
    try:
        return ParseResult(events=parse_deliveries(text))
    except UserInputError as e:
        return ParseResult(error=e)
