"""
Bread Simulation (FINAL / FROZEN)

Day-by-day simulation of a perishable good (bread) delivered by one or more
providers and eaten oldest-first at a fixed daily rate.

Core doctrine:
- Time is a 1-based day counter; day N depends only on day N-1.
- Every delivery stays a distinct batch and keeps its arrival day forever.
- Consumption is strictly FIFO by arrival day (ties: admission order).
- Shortfall and waste are outcomes, never errors.
- Conservation holds at every step:
      delivered == consumed + on_hand

Layer responsibilities:
- core     : defines WHAT the world IS (delivery events, batches, ledger, policy)
- parser   : raw delivery specification → validated, ordered events
- engine   : defines HOW the world is driven (the daily loop)
- metrics  : pure functions of SimulationResult
- report   : read-only text renderings of SimulationResult
- steps    : pipeline wiring (parse → simulate → metrics → report)

Input validity is decided before the engine runs.
"""
