from __future__ import annotations

import asyncio
import random

from condkit import Action, Trace, cond_m, combine_if, do_until_m, when_m


class Job:
    def __init__(self, steps: int) -> None:
        self.remaining = steps
        self.log: list[str] = []

    async def poll(self) -> str:
        await asyncio.sleep(0.01)
        self.remaining -= 1
        return "done" if self.remaining <= 0 else random.choice(["running", "queued"])


def status_is(expected: str, status: Action[str]) -> Action[bool]:
    return status.map(lambda s: s == expected)


async def run_job(job: Job, verbose: bool) -> str:
    poll = Action.effect(job.poll)
    is_done = Action.effect(lambda: job.remaining <= 0)

    # Poll until done, keeping the last status
    last_status = do_until_m(is_done, poll)

    report = cond_m([
        (status_is("done", last_status), Action.start("finished")),
        (Action.start(True), Action.start("stalled")),
    ])

    announce = when_m(
        Action.start(verbose),
        Action.effect(lambda: job.log.append("report" + combine_if(verbose, " (verbose)"))),
    )

    return await announce.then(lambda _: report).value(Trace())


if __name__ == "__main__":
    job = Job(steps=3)
    print(asyncio.run(run_job(job, verbose=True)), job.log)
