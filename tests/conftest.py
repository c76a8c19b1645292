# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from breadsim.simulation.parser import parse_deliveries


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


# ============================================================
# 原始实验脚本里的样例数据（NUM_DAYS=60）
# ============================================================
SAMPLE_DATA = {
    "default": "(10,200) (15,100) (35,500) (50,30)",
    "multiple_per_day": "(10,200) (10,190) (15,100) (15,99) (35,500) (35,400) (35,300) (50,30)",
    "long_gap": "(19,250) (40,200) (50,40)",
    "empty": "",
    "single_early": "(5,500)",
    "single_late": "(15,200)",
    "two_providers": "(1,500) (40,600)",
    "invalid": "(0,0)",
}


@pytest.fixture(scope="session")
def num_days() -> int:
    return 60


@pytest.fixture
def sample_data():
    return dict(SAMPLE_DATA)


@pytest.fixture
def events_of():
    """
    Usage:
        events = events_of("long_gap")
    """

    def _events(name: str):
        return parse_deliveries(SAMPLE_DATA[name])

    return _events
