from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from ..errors import SchedulerInvariantError
from ..models import Chef, ChefClass, Order, OrderClass
from ..schedulers.fifo import FIFOQueue
from ..schedulers.queues import ClassQueues
from ..schedulers.vip import VIPQueue


def fallback_order(chef_class: ChefClass) -> Tuple[OrderClass, ...]:
    """Filas consultadas, em ordem, quando a fila VIP está vazia."""
    if chef_class is ChefClass.VEGAN:
        return (OrderClass.VEGAN, OrderClass.NORMAL)
    # Chefs normais e VIP
    return (OrderClass.NORMAL, OrderClass.VEGAN)


def choose_order(chef: Chef, queues: ClassQueues) -> Optional[Order]:
    # Pedido VIP na fila tem precedência para qualquer chef
    if queues.vip:
        return _take(queues.vip, OrderClass.VIP)
    for order_class in fallback_order(chef.chef_class):
        queue = queues.for_class(order_class)
        if queue:
            return _take(queue, order_class)
    return None


def _take(queue: Union[FIFOQueue, VIPQueue], expected: OrderClass) -> Order:
    order = queue.pop()
    if order is None or order.order_class is not expected:
        raise SchedulerInvariantError(f"fila {expected.value} devolveu pedido inconsistente: {order!r}")
    if order.is_assigned():
        raise SchedulerInvariantError(f"pedido {order.id} retirado da fila após já ter sido atribuído")
    return order


def service_duration(size: int, speed: float) -> int:
    # Nunca menor que 1 unidade de tempo
    return max(1, math.ceil(size / speed))


def assign(order: Order, chef: Chef, now: int) -> None:
    if now < order.arrival_time:
        raise SchedulerInvariantError(f"pedido {order.id} atribuído antes da chegada (t={now})")
    order.start_time = now
    order.service_time = service_duration(order.size, chef.speed)
    order.finish_time = now + order.service_time
    order.waiting_time = now - order.arrival_time
    order.chef_id = chef.id
    chef.next_free = order.finish_time
    chef.served_count += 1
