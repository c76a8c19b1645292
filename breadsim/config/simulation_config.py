#!filepath: breadsim/config/simulation_config.py
from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from breadsim.utils.errors import ArgumentCountError, NonIntegerArgumentError

# 原始程序：面包 30 天后过期
DEFAULT_SHELF_LIFE = 30

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


class SimulationDefaults(BaseModel):
    """
    base.yml 中的 simulation 段（可被 CLI 选项覆盖）
    """

    initial_stock: int = Field(0, ge=0)
    shelf_life: int = Field(DEFAULT_SHELF_LIFE, ge=1)


class SimulationConfig(BaseModel):
    """
    SimulationConfig（FINAL / FROZEN）

    语义：
      - 一次运行的全部输入，在 CLI 边界构造一次
      - 之后只读传递（frozen），不存在全局可变参数状态
      - deliveries 保留原始字符串，由 Parser 负责解析
    """

    model_config = ConfigDict(frozen=True)

    num_days: int = Field(..., ge=1)
    deliveries: str = ""

    # supplemented policy knobs（默认值不改变核心场景结果）
    initial_stock: int = Field(0, ge=0)
    shelf_life: int = Field(DEFAULT_SHELF_LIFE, ge=1)


def parse_num_days(raw: str) -> int:
    """NUM_DAYS → positive int, else NonIntegerArgumentError."""
    # int() 也认全角 / 阿拉伯数字和下划线，只接受 ASCII 十进制
    token = raw.strip()
    if _INT_RE.fullmatch(token) is None or int(token) < 1:
        raise NonIntegerArgumentError(
            f"NUM_DAYS must be a positive integer, got {raw!r}"
        )
    return int(token)


def acquire_config(
    num_days: Optional[str],
    deliveries: Optional[str],
    *,
    defaults: Optional[SimulationDefaults] = None,
    initial_stock: Optional[int] = None,
    shelf_life: Optional[int] = None,
) -> SimulationConfig:
    """
    参数获取边界：原始 CLI 字符串 → SimulationConfig

    Raises ArgumentCountError / NonIntegerArgumentError; delivery tuples
    are NOT parsed here.
    """
    if num_days is None or deliveries is None:
        missing = "NUM_DAYS" if num_days is None else "DELIVERIES"
        raise ArgumentCountError(
            f"Missing required argument {missing}. "
            f'Usage: breadsim NUM_DAYS "(day,quantity) ..."'
        )

    defaults = defaults or SimulationDefaults()

    try:
        return SimulationConfig(
            num_days=parse_num_days(num_days),
            deliveries=deliveries,
            initial_stock=(
                defaults.initial_stock if initial_stock is None else initial_stock
            ),
            shelf_life=defaults.shelf_life if shelf_life is None else shelf_life,
        )
    except PydanticValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise NonIntegerArgumentError(
            f"Invalid option value for {fields}: {e.errors()[0]['msg']}"
        ) from None
