from __future__ import annotations

import heapq
from typing import Iterator, List, Optional, Tuple

from ..models import Order


def vip_priority_key(order: Order) -> Tuple[float, int, int]:
    # Maior valor primeiro; empate: chegada mais antiga, depois menor id
    return (-order.money, order.arrival_time, order.id)


class VIPQueue:
    def __init__(self) -> None:
        self._heap: List[Tuple[Tuple[float, int, int], Order]] = []

    def push(self, order: Order) -> None:
        heapq.heappush(self._heap, (vip_priority_key(order), order))

    def peek(self) -> Optional[Order]:
        if not self._heap:
            return None
        return self._heap[0][1]

    def pop(self) -> Optional[Order]:
        if not self._heap:
            return None
        _, order = heapq.heappop(self._heap)
        return order

    def __iter__(self) -> Iterator[Order]:
        # Ordem de atendimento, sem alterar o heap
        return iter([order for _, order in sorted(self._heap, key=lambda item: item[0])])

    def __len__(self) -> int:
        return len(self._heap)
