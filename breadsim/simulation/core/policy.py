# breadsim/simulation/core/policy.py
"""
Consumption policy constants (FROZEN).

One consumption event of fixed size per day, oldest batch first.
"""

# 每天吃掉的面包数量（原始程序：每天一条）
DAILY_CONSUMPTION: int = 1
