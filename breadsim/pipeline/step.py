#!filepath: breadsim/pipeline/step.py
from __future__ import annotations

from breadsim.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step 基类

    职责（唯一）：
      1. 作为 orchestration 层（读 ctx → 调用核心 → 写回 ctx）
      2. 叶子计时只发生在 Step 内部

    设计铁律：
      - Pipeline 本身不打 timer
      - Instrumentation 是可选横切关注点
      - Step 行为不依赖 inst 是否存在
    """

    stage: str = ""
    output_slot: str = ""

    def __init__(self, inst: Instrumentation | None = None):
        # 永远保证 inst 可用（No-op 语义）
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    # --------------------------------------------------
    # Step identity
    # --------------------------------------------------
    @property
    def step_name(self) -> str:
        """默认使用类名作为 Step 名称。"""
        return self.__class__.__name__

    # --------------------------------------------------
    # Contract
    # --------------------------------------------------
    def run(self, ctx):
        """
        子类必须实现。
        """
        raise NotImplementedError
