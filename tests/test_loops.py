import asyncio

from condkit import (
    Action,
    Done,
    Loop,
    Option,
    do_until_m,
    do_while_m,
    tail_rec,
    until1_m,
    until_m,
    while1_m,
    while_m,
)
from fakes import Counter, EffectLog, Identity


def test_while_m_zero_iterations() -> None:
    counter = Counter()

    async def run_flow():
        return await while_m(Action.start(False), counter.increment()).run()

    result = asyncio.run(run_flow())
    assert counter.count == 0
    assert result.value is None
    assert not result.is_empty


def test_while_m_counts_up() -> None:
    counter = Counter()

    async def run_flow():
        await while_m(counter.below(5), counter.increment()).run()

    asyncio.run(run_flow())
    assert counter.count == 5


def test_while_m_constant_stack() -> None:
    counter = Counter()

    async def run_flow():
        await while_m(counter.below(20_000), counter.increment()).run()

    asyncio.run(run_flow())
    assert counter.count == 20_000


def test_until_m_is_negated_while() -> None:
    counter = Counter()

    async def run_flow():
        await until_m(counter.reached(3), counter.increment()).run()

    asyncio.run(run_flow())
    assert counter.count == 3


def test_until_m_zero_iterations() -> None:
    counter = Counter()

    async def run_flow():
        await until_m(Action.start(True), counter.increment()).run()

    asyncio.run(run_flow())
    assert counter.count == 0


def test_do_while_m_runs_once_when_predicate_false() -> None:
    counter = Counter()

    async def run_flow():
        return await do_while_m(Action.start(False), counter.increment()).value()

    assert asyncio.run(run_flow()) == 1
    assert counter.count == 1


def test_do_while_m_returns_latest_body_value() -> None:
    counter = Counter()

    async def run_flow():
        return await do_while_m(counter.below(4), counter.increment()).value()

    assert asyncio.run(run_flow()) == 4
    assert while1_m is do_while_m


def test_do_until_m() -> None:
    counter = Counter()

    async def run_flow():
        return await do_until_m(counter.reached(3), counter.increment()).value()

    assert asyncio.run(run_flow()) == 3
    assert until1_m is do_until_m


def test_do_until_m_runs_once_when_predicate_true() -> None:
    counter = Counter()

    async def run_flow():
        return await do_until_m(Action.start(True), counter.increment()).value()

    assert asyncio.run(run_flow()) == 1


def test_loop_order_of_effects() -> None:
    log = EffectLog()
    answers = iter([True, True, False])

    async def run_flow():
        predicate = Action.effect(lambda: log.calls.append("check") or next(answers))
        await while_m(predicate, log.action("body", None)).run()

    asyncio.run(run_flow())
    assert log.calls == ["check", "body", "check", "body", "check"]


def test_empty_body_stops_loop() -> None:
    counter = Counter()

    async def run_flow():
        body = counter.increment().then(lambda n: Action.zero() if n == 2 else Action.start(n))
        return await while_m(Action.start(True), body).run()

    result = asyncio.run(run_flow())
    assert result.is_empty
    assert counter.count == 2


def test_registered_loop_ops() -> None:
    counter = Counter()

    async def run_flow():
        await counter.below(2).while_(counter.increment()).run()
        await counter.reached(4).until(counter.increment()).run()
        last = await counter.increment().do_while(counter.below(6)).value()
        final = await counter.increment().do_until(Action.start(True)).value()
        return last, final

    assert asyncio.run(run_flow()) == (6, 7)
    assert counter.count == 7


def test_tail_rec_option_constant_stack() -> None:
    def step(n: int) -> Option:
        if n == 0:
            return Option.some(Done("finished"))
        return Option.some(Loop(n - 1))

    assert tail_rec(Option, step, 50_000) == Option.some("finished")


def test_tail_rec_option_nothing_stops() -> None:
    def step(n: int) -> Option:
        if n == 3:
            return Option.nothing()
        return Option.some(Loop(n + 1))

    assert tail_rec(Option, step, 0) == Option.nothing()


def test_tail_rec_falls_back_to_bind() -> None:
    def step(n: int) -> Identity:
        if n == 0:
            return Identity(Done("done"))
        return Identity(Loop(n - 1))

    assert tail_rec(Identity, step, 10) == Identity("done")


def test_tail_rec_action() -> None:
    async def run_flow():
        flow = tail_rec(
            Action,
            lambda n: Action.start(Done(n) if n >= 100 else Loop(n + 1)),
            0,
        )
        return await flow.value()

    assert asyncio.run(run_flow()) == 100
