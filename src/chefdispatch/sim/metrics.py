from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from ..models import Chef, ChefClass, Order, OrderClass

ORDER_COLUMNS = [
    "id",
    "order_class",
    "arrival_time",
    "size",
    "money",
    "start_time",
    "finish_time",
    "waiting_time",
    "service_time",
    "promoted",
    "chef_id",
]


@dataclass(slots=True)
class MetricsSummary:
    total_orders: int
    normal_orders: int
    vegan_orders: int
    vip_orders: int
    normal_chefs: int
    vegan_chefs: int
    vip_chefs: int
    promotions: int
    avg_waiting_time: float
    avg_service_time: float
    avg_turnaround_time: float
    promoted_pct: float
    makespan: int


def orders_to_dataframe(orders: List[Order]) -> pd.DataFrame:
    data = [
        {
            "id": o.id,
            "order_class": o.order_class.value,
            "arrival_time": o.arrival_time,
            "size": o.size,
            "money": o.money,
            "start_time": o.start_time,
            "finish_time": o.finish_time,
            "waiting_time": o.waiting_time,
            "service_time": o.service_time,
            "promoted": o.promoted,
            "chef_id": o.chef_id,
        }
        for o in orders
    ]
    return pd.DataFrame(data, columns=ORDER_COLUMNS)


def summarize(orders: List[Order], chefs: List[Chef], promotions: int) -> MetricsSummary:
    df = orders_to_dataframe(orders)
    by_class: Dict[str, int] = df["order_class"].value_counts().to_dict() if not df.empty else {}
    chef_counts = {cls: sum(1 for c in chefs if c.chef_class is cls) for cls in ChefClass}

    avg_wait = float(df["waiting_time"].mean()) if not df.empty else 0.0
    avg_service = float(df["service_time"].mean()) if not df.empty else 0.0
    avg_turn = float((df["finish_time"] - df["arrival_time"]).mean()) if not df.empty else 0.0
    makespan = int(df["finish_time"].max()) if not df.empty else 0
    # Percentual sobre os pedidos atendidos, como no relatório original
    promoted_pct = (100.0 * promotions / len(df)) if len(df) else 0.0

    return MetricsSummary(
        total_orders=len(df),
        normal_orders=int(by_class.get(OrderClass.NORMAL.value, 0)),
        vegan_orders=int(by_class.get(OrderClass.VEGAN.value, 0)),
        vip_orders=int(by_class.get(OrderClass.VIP.value, 0)),
        normal_chefs=chef_counts[ChefClass.NORMAL],
        vegan_chefs=chef_counts[ChefClass.VEGAN],
        vip_chefs=chef_counts[ChefClass.VIP],
        promotions=promotions,
        avg_waiting_time=avg_wait,
        avg_service_time=avg_service,
        avg_turnaround_time=avg_turn,
        promoted_pct=promoted_pct,
        makespan=makespan,
    )


def wait_by_class(orders: List[Order]) -> Dict[str, float]:
    """Espera média por classe final (promovidos contam como VIP)."""
    df = orders_to_dataframe(orders)
    if df.empty:
        return {}
    means = df.groupby("order_class")["waiting_time"].mean()
    return {cls.value: float(means[cls.value]) for cls in OrderClass if cls.value in means.index}
