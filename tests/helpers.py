from __future__ import annotations

import math
from typing import List, Sequence

from chefdispatch.models import Chef, ChefClass, Order, OrderClass


def order(id: int, kind: str = "N", arrival: int = 0, size: int = 1, money: float = 0.0) -> Order:
    return Order(id=id, order_class=OrderClass.from_code(kind), arrival_time=arrival, size=size, money=money)


def chef(id: int, kind: ChefClass = ChefClass.NORMAL, speed: float = 1.0) -> Chef:
    return Chef(id=id, chef_class=kind, speed=speed)


def by_id(orders: Sequence[Order]) -> dict:
    return {o.id: o for o in orders}


def expected_service(size: int, speed: float) -> int:
    return max(1, math.ceil(size / speed))


def chef_timelines(orders: Sequence[Order]) -> dict:
    lanes: dict = {}
    for o in orders:
        lanes.setdefault(o.chef_id, []).append(o)
    for lane in lanes.values():
        lane.sort(key=lambda o: o.start_time)
    return lanes


def ids(orders: List[Order]) -> List[int]:
    return [o.id for o in orders]
