from dataclasses import dataclass, field
from typing import List

from core.ring import RingQueue, Slot
from control.metrics import Metrics, Snapshot
from .scenarios import Scenario

@dataclass
class DemoSummary:
    raw_before: List[Slot]
    raw_after: List[Slot]
    final_size: int
    popped: List[int] = field(default_factory=list)
    # Walked with a cursor for size() steps
    via_size: List[int] = field(default_factory=list)
    # Walked from begin() until end()
    via_cursors: List[int] = field(default_factory=list)
    metrics: Snapshot = Snapshot(0, 0, 0)

class DemoRunner:
    def run(self, scenario: Scenario) -> DemoSummary:
        metrics = Metrics()
        queue = RingQueue[int](scenario.capacity, factory=int, observer=metrics)
        raw_before = queue.dump()

        for value in scenario.pushes:
            queue.push_back(value)

        popped = []
        for _ in range(scenario.pops):
            popped.append(queue.pop_front())

        via_size = []
        it = queue.begin()
        for _ in range(queue.size()):
            via_size.append(it.deref())
            it.advance()

        via_cursors = []
        it = queue.begin()
        while it != queue.end():
            via_cursors.append(it.post_advance().deref())

        return DemoSummary(
            raw_before=raw_before,
            raw_after=queue.dump(),
            final_size=queue.size(),
            popped=popped,
            via_size=via_size,
            via_cursors=via_cursors,
            metrics=metrics.snapshot()
        )
