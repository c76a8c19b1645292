#!filepath: breadsim/config/app_config.py
import yaml
from pydantic import BaseModel
from dotenv import load_dotenv
import os

from .log_config import LogConfig
from .simulation_config import SimulationDefaults

# debug-only toggle，不影响模拟语义
LOG_LEVEL_ENV = "BREADSIM_LOG_LEVEL"


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    breadsim/config/app_config.py → breadsim/config → breadsim → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    simulation: SimulationDefaults = SimulationDefaults()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 breadsim/config/base.yml
        - 不依赖当前工作目录
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下，可缺省）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML（空文件 → 全部默认值）
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 只覆盖日志级别（LogConfig 负责校验 / 回退）
        level = os.getenv(LOG_LEVEL_ENV)
        if level:
            raw["log"] = {**(raw.get("log") or {}), "level": level}

        return cls.model_validate(raw)
