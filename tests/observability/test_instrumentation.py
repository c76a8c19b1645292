#!filepath: tests/observability/test_instrumentation.py

import time

from loguru import logger

from breadsim.observability.instrumentation import Instrumentation, NoOpInstrumentation


def test_instrumentation_timer():
    inst = Instrumentation(enabled=True)

    with inst.timer("step_A"):
        time.sleep(0.01)

    assert "step_A" in inst.timeline
    assert inst.timeline["step_A"] > 0


def test_parent_scope_timer_not_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("parent", record=False):
        with inst.timer("leaf"):
            pass

    assert list(inst.timeline) == ["leaf"]


def test_disabled_instrumentation_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("step_A"):
        pass
    inst.metrics.record("rows", 1)

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_instrumentation_metrics():
    inst = Instrumentation(enabled=True)
    inst.metrics.record("shortfall_days", 9)
    inst.metrics.record_many({"total_waste": 779, "total_consumed": 51})

    assert inst.metrics.metrics == {
        "shortfall_days": 9,
        "total_waste": 779,
        "total_consumed": 51,
    }


def test_noop_instrumentation():
    inst = NoOpInstrumentation()

    with inst.timer("anything"):
        pass
    inst.metrics.record("x", 1)
    inst.generate_timeline_report("label")

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_generate_timeline_report():
    inst = Instrumentation(enabled=True)

    with inst.timer("SimulateStep"):
        time.sleep(0.005)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    inst.generate_timeline_report("num_days=60")

    logger.remove(sink_id)

    output = "\n".join(captured)

    assert "SimulateStep" in output
    assert "num_days=60" in output
    assert "Simulation timeline" in output


def test_repeated_timer_accumulates():
    inst = Instrumentation(enabled=True)

    for _ in range(2):
        with inst.timer("SimulateStep"):
            time.sleep(0.005)

    assert list(inst.timeline) == ["SimulateStep"]
    assert inst.timeline["SimulateStep"] >= 0.009
