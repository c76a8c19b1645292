#!filepath: breadsim/config/log_config.py
from typing import Optional

from loguru import logger
from pydantic import BaseModel, field_validator

DEFAULT_LOG_LEVEL = "WARNING"


class LogConfig(BaseModel):
    dir: Optional[str] = None
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = DEFAULT_LOG_LEVEL

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, value):
        """
        未知级别（loguru 不认识）→ 回退默认级别并告警，
        日志开关不能让一次正常模拟失败。
        """
        name = str(value).upper()
        try:
            logger.level(name)
        except ValueError:
            logger.warning(
                f"[Config] unknown log level {value!r}, falling back to {DEFAULT_LOG_LEVEL}"
            )
            return DEFAULT_LOG_LEVEL
        return name
