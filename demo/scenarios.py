from dataclasses import dataclass, field
from typing import List

@dataclass
class Scenario:
    name: str
    description: str
    capacity: int
    # Values pushed in order, before any pops
    pushes: List[int] = field(default_factory=list)
    pops: int = 0


SCENARIOS = {
    "overwrite": Scenario(
        name="overwrite",
        description="Push one past capacity, evicting the oldest, then pop once",
        capacity=7,
        pushes=list(range(1, 9)),
        pops=1
    ),
    "fill": Scenario(
        name="fill",
        description="Fill to exactly capacity with no eviction",
        capacity=5,
        pushes=list(range(1, 6))
    ),
    "drain": Scenario(
        name="drain",
        description="Fill then pop everything back out",
        capacity=4,
        pushes=[10, 20, 30, 40],
        pops=4
    ),
    "wrap": Scenario(
        name="wrap",
        description="Wrap the start index around the storage several times",
        capacity=3,
        pushes=list(range(1, 12)),
        pops=2
    )
}
