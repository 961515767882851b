from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .models import Order, OrderClass


@dataclass(slots=True)
class WorkloadConfig:
    num_orders: int
    arrival_pattern: str  # "uniform" | "poisson" | "bursty"
    seed: int
    class_mix: Tuple[float, float, float] = (0.6, 0.25, 0.15)  # normal, vegano, VIP
    horizon: int = 100
    size_range: Tuple[int, int] = (1, 20)
    money_range: Tuple[float, float] = (10.0, 500.0)


def generate_workload(config: WorkloadConfig) -> List[Order]:
    rng = np.random.default_rng(config.seed)
    n = config.num_orders

    if config.arrival_pattern == "uniform":
        arrivals = np.sort(rng.integers(0, config.horizon + 1, size=n))
    elif config.arrival_pattern == "poisson":
        arrivals = _arrivals_poisson(rng, rate=n / max(1, config.horizon), n=n)
    elif config.arrival_pattern == "bursty":
        arrivals = _arrivals_bursty(rng, n)
    else:
        raise ValueError("arrival_pattern inválido")

    mix = np.asarray(config.class_mix, dtype=float)
    if mix.shape != (3,) or (mix < 0).any() or mix.sum() <= 0:
        raise ValueError("class_mix inválido")
    classes = rng.choice(3, size=n, p=mix / mix.sum())

    lo, hi = config.size_range
    sizes = rng.integers(lo, hi + 1, size=n)
    m_lo, m_hi = config.money_range
    money = np.round(rng.uniform(m_lo, m_hi, size=n), 2)

    kinds = (OrderClass.NORMAL, OrderClass.VEGAN, OrderClass.VIP)
    orders = []
    for i in range(n):
        order_class = kinds[int(classes[i])]
        orders.append(
            Order(
                id=i + 1,
                order_class=order_class,
                arrival_time=int(arrivals[i]),
                size=int(sizes[i]),
                # Só pedidos VIP usam o valor para prioridade
                money=float(money[i]) if order_class is OrderClass.VIP else 0.0,
            )
        )
    return orders


def _arrivals_bursty(rng: np.random.Generator, n: int) -> np.ndarray:
    bursts = max(1, n // 5)
    times: List[int] = []
    current = 0
    for _ in range(bursts):
        k = max(1, n // bursts)
        times.extend([current] * k)
        current += int(rng.integers(2, 6))
    while len(times) < n:
        times.append(current)
    return np.sort(np.array(times[:n], dtype=int))


def _arrivals_poisson(rng: np.random.Generator, rate: float, n: int) -> np.ndarray:
    gaps = rng.exponential(1.0 / rate, size=n)
    return np.floor(np.cumsum(gaps)).astype(int)
