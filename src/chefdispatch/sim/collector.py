from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Set

from ..errors import SchedulerInvariantError
from ..models import Chef, ChefClass, Order, OrderClass


class ResultCollector:
    """Acumula os pedidos no momento da atribuição (não na finalização)."""

    def __init__(self) -> None:
        self._orders: List[Order] = []
        self._seen: Set[int] = set()

    def record(self, order: Order) -> None:
        if order.id in self._seen:
            raise SchedulerInvariantError(f"pedido {order.id} atribuído duas vezes")
        if order.start_time is None or order.finish_time is None:
            raise SchedulerInvariantError(f"pedido {order.id} registrado sem horários")
        self._seen.add(order.id)
        self._orders.append(order)

    def completed(self) -> List[Order]:
        """Pedidos ordenados por (término, id), a ordem do relatório."""
        return sorted(self._orders, key=lambda o: (o.finish_time, o.id))

    def promoted_count(self) -> int:
        return sum(1 for o in self._orders if o.promoted)

    def orders_by_class(self) -> Dict[OrderClass, int]:
        # Contagem pela classe final: promovidos contam como VIP
        counts = Counter(o.order_class for o in self._orders)
        return {cls: counts.get(cls, 0) for cls in OrderClass}

    @staticmethod
    def chefs_by_class(chefs: Sequence[Chef]) -> Dict[ChefClass, int]:
        counts = Counter(c.chef_class for c in chefs)
        return {cls: counts.get(cls, 0) for cls in ChefClass}

    @staticmethod
    def served_by_chef(chefs: Sequence[Chef]) -> Dict[int, int]:
        return {c.id: c.served_count for c in chefs}

    def __len__(self) -> int:
        return len(self._orders)
