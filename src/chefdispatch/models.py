from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OrderClass(str, Enum):
    NORMAL = "normal"
    VEGAN = "vegan"
    VIP = "vip"

    @classmethod
    def from_code(cls, code: str) -> "OrderClass":
        # Formato de entrada original: G = vegano, V = VIP, qualquer outro = normal
        if code == "G":
            return cls.VEGAN
        if code == "V":
            return cls.VIP
        return cls.NORMAL


# Chefs usam as mesmas três afinidades dos pedidos
ChefClass = OrderClass


@dataclass(slots=True)
class Order:
    id: int
    order_class: OrderClass
    arrival_time: int
    size: int
    money: float = 0.0

    # Preenchidos uma única vez, no momento da atribuição
    start_time: Optional[int] = None
    finish_time: Optional[int] = None
    waiting_time: Optional[int] = None
    service_time: Optional[int] = None
    promoted: bool = False
    chef_id: Optional[int] = None

    def is_assigned(self) -> bool:
        return self.start_time is not None


@dataclass(slots=True)
class Chef:
    id: int
    chef_class: ChefClass
    speed: float
    next_free: int = 0
    served_count: int = 0

    def is_busy(self, now: int) -> bool:
        return self.next_free > now


@dataclass(slots=True)
class Event:
    timestamp: int
    kind: str  # "arrival", "promotion", "order_start", "order_finish"
    order_id: Optional[int] = None
    chef_id: Optional[int] = None
