from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterator, List, Optional

from ..models import Order


class FIFOQueue:
    """Fila por ordem de chegada (pedidos normais e veganos)."""

    def __init__(self) -> None:
        self._queue: Deque[Order] = deque()

    def push(self, order: Order) -> None:
        self._queue.append(order)

    def peek(self) -> Optional[Order]:
        if not self._queue:
            return None
        return self._queue[0]

    def pop(self) -> Optional[Order]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def extract_if(self, predicate: Callable[[Order], bool]) -> List[Order]:
        """Remove e devolve os pedidos que satisfazem `predicate`.

        Cada pedido presente é visitado uma única vez; os que ficam mantêm a
        ordem relativa.
        """
        taken: List[Order] = []
        for _ in range(len(self._queue)):
            order = self._queue.popleft()
            if predicate(order):
                taken.append(order)
            else:
                self._queue.append(order)
        return taken

    def __iter__(self) -> Iterator[Order]:
        return iter(self._queue)

    def __len__(self) -> int:
        return len(self._queue)
