"""Runtime trace for deferred computations.

Trace records what an Action ran: a step_begin/step_end pair per run,
nested under the run that sequenced it, tagged with the combinator that
built the step when it has a label, and a loop_end event with the
iteration count for every finished loop. Computations never read it.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Evidence:
    """A single event captured while running a computation."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None

    def to_record(self) -> EvidenceRecord:
        return EvidenceRecord(
            action=self.action,
            id=self.id,
            parent_id=self.parent_id,
            timestamp=self.timestamp,
            info=self.info,
            duration_ms=self.duration_ms,
        )


class EvidenceRecord(BaseModel):
    """Serializable form of Evidence, for export."""

    action: str
    id: int
    parent_id: int | None = None
    timestamp: datetime
    info: dict[str, Any] = Field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Collects Evidence while Actions run.

    Nesting follows the runs: events recorded inside nested() get the
    innermost open step as parent. Intended for a single asyncio task.
    With enabled=False nothing is stored and record() returns None.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open_steps: list[int] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an event under the innermost open step.

        Returns:
            The event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=self._open_steps[-1] if self._open_steps else None,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    @contextmanager
    def nested(self, step_id: int | None) -> Iterator[None]:
        """Make step_id the parent of events recorded inside the block."""
        if step_id is None:
            yield
            return
        self._open_steps.append(step_id)
        try:
            yield
        finally:
            self._open_steps.pop()

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, action: str, label: str | None = None) -> list[Evidence]:
        """Events of the given kind, optionally only those with label."""
        return [
            ev
            for ev in self._events
            if ev.action == action and (label is None or ev.info.get("label") == label)
        ]

    def children(self, parent_id: int | None) -> list[Evidence]:
        return [ev for ev in self._events if ev.parent_id == parent_id]

    def labels(self) -> list[str]:
        """Labels of the labeled steps, in the order they started."""
        return [ev.info["label"] for ev in self.find_all("step_begin") if "label" in ev.info]

    def export(self) -> list[EvidenceRecord]:
        """Export all events as serializable records."""
        return [ev.to_record() for ev in self._events]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._open_steps.clear()
