from helpers import order

from chefdispatch.models import OrderClass
from chefdispatch.schedulers.fifo import FIFOQueue
from chefdispatch.schedulers.queues import ClassQueues
from chefdispatch.schedulers.vip import VIPQueue, vip_priority_key


def test_fifo_keeps_insertion_order():
    q = FIFOQueue()
    for i in (3, 1, 2):
        q.push(order(i))
    assert q.peek().id == 3
    assert [q.pop().id for _ in range(3)] == [3, 1, 2]
    assert q.pop() is None
    assert q.peek() is None
    assert len(q) == 0


def test_fifo_extract_if_visits_each_once_and_keeps_remaining_order():
    q = FIFOQueue()
    for i in range(1, 7):
        q.push(order(i, arrival=i))
    taken = q.extract_if(lambda o: o.id % 2 == 0)
    assert [o.id for o in taken] == [2, 4, 6]
    assert [o.id for o in q] == [1, 3, 5]


def test_vip_key_orders_by_money_then_arrival_then_id():
    a = order(1, "V", arrival=5, money=100)
    b = order(2, "V", arrival=1, money=100)
    c = order(3, "V", arrival=0, money=50)
    d = order(4, "V", arrival=1, money=100)
    ranked = sorted([a, b, c, d], key=vip_priority_key)
    assert [o.id for o in ranked] == [2, 4, 1, 3]


def test_vip_queue_pops_highest_money_first():
    q = VIPQueue()
    q.push(order(1, "V", arrival=0, money=10))
    q.push(order(2, "V", arrival=3, money=300))
    q.push(order(3, "V", arrival=1, money=300))
    assert q.peek().id == 3
    assert [o.id for o in q] == [3, 2, 1]
    assert [q.pop().id for _ in range(3)] == [3, 2, 1]
    assert q.pop() is None


def test_class_queues_route_by_current_class():
    queues = ClassQueues()
    assert queues.is_empty()
    queues.admit(order(1, "N"))
    queues.admit(order(2, "G"))
    queues.admit(order(3, "V", money=5))
    assert queues.sizes() == {"normal": 1, "vegan": 1, "vip": 1}
    assert len(queues) == 3
    assert queues.for_class(OrderClass.VEGAN).peek().id == 2
    assert not queues.is_empty()
