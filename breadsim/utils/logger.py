#!filepath: breadsim/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional


def _stderr_sink(message) -> None:
    # 每次写入时取当前 sys.stderr（测试 / CliRunner 会替换它）
    sys.stderr.write(message)


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - 默认输出到 stderr（stdout 留给报告）
    - 可选：按日期切割的文件日志 + 保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        """
        配置全局 logger（重复调用会替换已有 sink）
        """

        logger.remove()

        logger.add(
            sink=_stderr_sink,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            backtrace=True,
            diagnose=False,
        )

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                backtrace=True,
                diagnose=True,
            )

        logger.debug("-----------Logger initialized (level={})-----------", self.level)

    def reconfigure(
        self,
        *,
        log_dir: Optional[str] = None,
        rotation: Optional[str] = None,
        retention: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if log_dir is not None:
            self.log_dir = log_dir
        if rotation is not None:
            self.rotation = rotation
        if retention is not None:
            self.retention = retention
        if log_level is not None:
            self.level = log_level
        self._configure()

    # ---------- 基础接口封装 ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_time: bool = True,
        reraise_quietly: tuple = (),
    ) -> Callable:
        """
        记录异常（带 traceback）后继续抛出。

        reraise_quietly 中的异常类型（例如用户输入错误）不打印 traceback，
        只记一条 warning。
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except reraise_quietly as e:
                    logger.warning(f"[ERROR] {func.__name__}: {e}")
                    raise
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（可被 reconfigure 调整）
logs = Logging()
