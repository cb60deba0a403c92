"""Test runtime trace capture for Actions."""

import asyncio

import pytest

from condkit import Action, NoMatchingConditionError, Trace, cond_m, if_m, while_m
from condkit.kernel import EvidenceRecord
from fakes import Counter


def test_single_run_records_begin_and_end() -> None:
    trace = Trace()
    asyncio.run(Action.start(1).run(trace))

    actions = [ev.action for ev in trace.get_events()]
    assert actions == ["step_begin", "step_end"]
    end = trace.find_all("step_end")[0]
    assert end.parent_id == 0
    assert end.info == {"control": "continue"}
    assert end.duration_ms is not None


def test_nested_runs_are_children() -> None:
    trace = Trace()
    flow = if_m(Action.start(True), Action.start("a"), Action.start("b"))
    asyncio.run(flow.run(trace))

    begins = trace.find_all("step_begin")
    # the bind itself, the predicate and the selected branch
    assert len(begins) == 3
    assert [ev.id for ev in trace.children(None)] == [0]
    assert begins[1].parent_id == 0
    assert begins[2].parent_id == 0


def test_empty_result_recorded() -> None:
    trace = Trace()
    asyncio.run(Action.zero().run(trace))
    assert trace.find_all("step_end")[0].info == {"control": "empty"}


def test_error_recorded_and_reraised() -> None:
    def explode() -> None:
        raise ValueError("bad")

    trace = Trace()
    with pytest.raises(ValueError):
        asyncio.run(Action.effect(explode).run(trace))

    errors = trace.find_all("step_error")
    assert len(errors) == 1
    assert errors[0].info == {"error": "bad"}
    assert errors[0].parent_id == 0
    # the failed step is closed, so later events are top-level again
    after = trace.record("after")
    assert trace.get_events()[after].parent_id is None


def test_disabled_trace_records_nothing() -> None:
    trace = Trace(enabled=False)
    asyncio.run(Action.start(1).run(trace))
    assert len(trace) == 0
    assert trace.record("anything") is None


def test_export_records() -> None:
    trace = Trace()
    asyncio.run(Action.start(1).run(trace))

    records = trace.export()
    assert all(isinstance(r, EvidenceRecord) for r in records)
    dumped = records[1].model_dump()
    assert dumped["action"] == "step_end"
    assert dumped["parent_id"] == 0


def test_clear() -> None:
    trace = Trace()
    asyncio.run(Action.start(1).run(trace))
    trace.clear()
    assert len(trace) == 0
    assert trace.record("again") == 0


def test_combinator_labels() -> None:
    counter = Counter()
    trace = Trace()
    flow = while_m(counter.below(3), counter.increment()).then(
        lambda _: cond_m([(Action.start(False), Action.start("a")), (Action.start(True), Action.start("b"))])
    )
    assert asyncio.run(flow.value(trace)) == "b"
    assert trace.labels() == ["while_m", "cond_m"]
    assert len(trace.find_all("step_begin", label="cond_m")) == 1


def test_loop_end_records_iterations() -> None:
    counter = Counter()
    trace = Trace()
    asyncio.run(while_m(counter.below(4), counter.increment()).run(trace))

    loop_end = trace.find_all("loop_end")
    assert len(loop_end) == 1
    # four passing checks and the final failing one
    assert loop_end[0].info == {"iterations": 5, "control": "continue"}
    loop_begin = trace.find_all("step_begin", label="while_m")[0]
    assert loop_end[0].parent_id == loop_begin.id


def test_exhausted_cond_m_error_under_its_step() -> None:
    trace = Trace()
    flow = cond_m([(Action.start(False), Action.start(1))])
    with pytest.raises(NoMatchingConditionError):
        asyncio.run(flow.run(trace))

    cond_begin = trace.find_all("step_begin", label="cond_m")[0]
    errors = trace.find_all("step_error")
    assert errors[-1].parent_id == cond_begin.id
    assert errors[-1].info == {"error": "cond_m: no matching conditions"}
