from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..models import Chef, Event, Order
from ..schedulers.queues import ClassQueues
from .collector import ResultCollector

AUTO_PROMOTE_THRESHOLD = 10


@dataclass(slots=True)
class SimulationConfig:
    promotion_threshold: int = AUTO_PROMOTE_THRESHOLD
    max_steps: int = 1_000_000
    record_events: bool = True


@dataclass(slots=True)
class SimulationContext:
    """Estado mutável de uma execução: relógio, filas, chefs e contadores."""

    arrivals: List[Order]  # já ordenadas por (chegada, id)
    chefs: List[Chef]
    config: SimulationConfig = field(default_factory=SimulationConfig)
    clock: int = 0
    next_arrival: int = 0
    steps: int = 0
    promotions: int = 0
    queues: ClassQueues = field(default_factory=ClassQueues)
    collector: ResultCollector = field(default_factory=ResultCollector)
    events: List[Event] = field(default_factory=list)

    def emit(self, kind: str, order_id: Optional[int] = None, chef_id: Optional[int] = None,
             timestamp: Optional[int] = None) -> None:
        if not self.config.record_events:
            return
        ts = self.clock if timestamp is None else timestamp
        self.events.append(Event(timestamp=ts, kind=kind, order_id=order_id, chef_id=chef_id))

    def arrivals_left(self) -> bool:
        return self.next_arrival < len(self.arrivals)

    def busy_chefs(self) -> List[Chef]:
        return [c for c in self.chefs if c.is_busy(self.clock)]
