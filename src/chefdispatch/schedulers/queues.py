from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Union

from ..models import Order, OrderClass
from .fifo import FIFOQueue
from .vip import VIPQueue


@dataclass(slots=True)
class ClassQueues:
    """As três filas de espera, uma por classe de pedido."""

    normal: FIFOQueue = field(default_factory=FIFOQueue)
    vegan: FIFOQueue = field(default_factory=FIFOQueue)
    vip: VIPQueue = field(default_factory=VIPQueue)

    def for_class(self, order_class: OrderClass) -> Union[FIFOQueue, VIPQueue]:
        if order_class is OrderClass.VIP:
            return self.vip
        if order_class is OrderClass.VEGAN:
            return self.vegan
        return self.normal

    def admit(self, order: Order) -> None:
        # A fila é determinada apenas pela classe atual do pedido
        self.for_class(order.order_class).push(order)

    def is_empty(self) -> bool:
        return not self.normal and not self.vegan and not self.vip

    def sizes(self) -> Dict[str, int]:
        return {"normal": len(self.normal), "vegan": len(self.vegan), "vip": len(self.vip)}

    def __len__(self) -> int:
        return len(self.normal) + len(self.vegan) + len(self.vip)
