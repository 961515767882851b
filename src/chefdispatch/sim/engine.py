from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..errors import InvalidInputError, SchedulerInvariantError, SimulationDidNotTerminate
from ..models import Chef, ChefClass, Event, Order, OrderClass
from .collector import ResultCollector
from .context import SimulationConfig, SimulationContext
from .policy import assign, choose_order
from .promotion import AutoPromotionRule

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    orders: List[Order]  # ordenados por (término, id)
    chefs: List[Chef]
    events: List[Event]
    promotions: int
    final_clock: int
    steps: int
    orders_by_class: Dict[OrderClass, int] = field(default_factory=dict)
    chefs_by_class: Dict[ChefClass, int] = field(default_factory=dict)
    served_by_chef: Dict[int, int] = field(default_factory=dict)


def validate_inputs(orders: Sequence[Order], chefs: Sequence[Chef], config: SimulationConfig) -> None:
    """Rejeita entradas inválidas antes de qualquer passo da simulação."""
    seen_orders = set()
    for order in orders:
        if order.id in seen_orders:
            raise InvalidInputError(f"pedido {order.id}: id duplicado")
        seen_orders.add(order.id)
        if order.size < 0:
            raise InvalidInputError(f"pedido {order.id}: tamanho negativo ({order.size})")
        if order.arrival_time < 0:
            raise InvalidInputError(f"pedido {order.id}: chegada negativa ({order.arrival_time})")
        if not math.isfinite(order.money) or order.money < 0:
            raise InvalidInputError(f"pedido {order.id}: valor deve ser finito e não negativo ({order.money})")
        if order.is_assigned() or order.promoted:
            raise InvalidInputError(f"pedido {order.id}: já possui resultado de outra execução")

    seen_chefs = set()
    for chef in chefs:
        if chef.id in seen_chefs:
            raise InvalidInputError(f"chef {chef.id}: id duplicado")
        seen_chefs.add(chef.id)
        if not math.isfinite(chef.speed) or chef.speed <= 0:
            raise InvalidInputError(f"chef {chef.id}: velocidade deve ser positiva e finita ({chef.speed})")

    if orders and not chefs:
        raise InvalidInputError("há pedidos mas nenhum chef na escala")
    if config.promotion_threshold < 1:
        raise InvalidInputError(f"limite de promoção deve ser >= 1 (recebido {config.promotion_threshold})")
    if config.max_steps < 1:
        raise InvalidInputError(f"max_steps deve ser >= 1 (recebido {config.max_steps})")


def intake(ctx: SimulationContext) -> List[Order]:
    admitted: List[Order] = []
    while ctx.arrivals_left() and ctx.arrivals[ctx.next_arrival].arrival_time <= ctx.clock:
        order = ctx.arrivals[ctx.next_arrival]
        ctx.next_arrival += 1
        ctx.queues.admit(order)
        ctx.emit("arrival", order_id=order.id, timestamp=order.arrival_time)
        admitted.append(order)
    if admitted:
        logger.debug("t=%d: %d pedido(s) admitido(s), filas=%s", ctx.clock, len(admitted), ctx.queues.sizes())
    return admitted


def assign_free_chefs(ctx: SimulationContext) -> List[Order]:
    # Cada chef livre recebe no máximo um pedido por passo
    assigned: List[Order] = []
    for chef in ctx.chefs:
        if chef.is_busy(ctx.clock):
            continue
        order = choose_order(chef, ctx.queues)
        if order is None:
            continue
        assign(order, chef, ctx.clock)
        ctx.collector.record(order)
        ctx.emit("order_start", order_id=order.id, chef_id=chef.id)
        ctx.emit("order_finish", order_id=order.id, chef_id=chef.id, timestamp=order.finish_time)
        logger.debug(
            "t=%d: chef %d (%s) pegou pedido %d (%s), termina em t=%d",
            ctx.clock, chef.id, chef.chef_class.value, order.id, order.order_class.value, order.finish_time,
        )
        assigned.append(order)
    return assigned


def is_finished(ctx: SimulationContext) -> bool:
    return not ctx.arrivals_left() and ctx.queues.is_empty() and not ctx.busy_chefs()


def next_event_time(ctx: SimulationContext) -> Optional[int]:
    candidates: List[int] = []
    if ctx.arrivals_left():
        candidates.append(ctx.arrivals[ctx.next_arrival].arrival_time)
    candidates.extend(c.next_free for c in ctx.busy_chefs())
    if not candidates:
        return None
    return min(candidates)


def advance_clock(ctx: SimulationContext) -> None:
    nxt = next_event_time(ctx)
    if nxt is None:
        # Há pedidos em fila sem chef ocupado nem chegada futura
        raise SimulationDidNotTerminate(ctx.steps, ctx.clock)
    if nxt <= ctx.clock:
        ctx.clock += 1
    else:
        ctx.clock = nxt


def run_simulation(orders: Sequence[Order], chefs: Sequence[Chef],
                   config: Optional[SimulationConfig] = None) -> RunResult:
    """Executa a simulação até todos os pedidos terem sido atribuídos e concluídos.

    Os objetos `Order` e `Chef` recebidos são modificados (campos de execução);
    passe cópias para rodar a mesma entrada mais de uma vez.
    """
    config = config or SimulationConfig()
    validate_inputs(orders, chefs, config)

    # Ordena por (chegada, id) para que chegadas simultâneas entrem sempre na mesma ordem
    arrivals = sorted(orders, key=lambda o: (o.arrival_time, o.id))
    ctx = SimulationContext(arrivals=arrivals, chefs=list(chefs), config=config)
    promotion = AutoPromotionRule(config.promotion_threshold)

    logger.info("iniciando simulação: %d pedido(s), %d chef(s)", len(arrivals), len(ctx.chefs))

    while True:
        if ctx.steps >= config.max_steps:
            raise SimulationDidNotTerminate(ctx.steps, ctx.clock)
        ctx.steps += 1

        intake(ctx)
        promotion.apply(ctx)
        assign_free_chefs(ctx)

        if is_finished(ctx):
            break
        advance_clock(ctx)

    if len(ctx.collector) != len(arrivals):
        raise SchedulerInvariantError(
            f"{len(arrivals) - len(ctx.collector)} pedido(s) admitido(s) não foram atribuídos"
        )
    if ctx.collector.promoted_count() != ctx.promotions:
        raise SchedulerInvariantError(
            f"{ctx.promotions} promoção(ões) contadas, mas {ctx.collector.promoted_count()} pedido(s) promovido(s) atribuído(s)"
        )

    logger.info(
        "simulação concluída em t=%d após %d passo(s); %d promoção(ões)",
        ctx.clock, ctx.steps, ctx.promotions,
    )

    events = sorted(ctx.events, key=lambda e: e.timestamp) if config.record_events else []
    return RunResult(
        orders=ctx.collector.completed(),
        chefs=ctx.chefs,
        events=events,
        promotions=ctx.collector.promoted_count(),
        final_clock=ctx.clock,
        steps=ctx.steps,
        orders_by_class=ctx.collector.orders_by_class(),
        chefs_by_class=ResultCollector.chefs_by_class(ctx.chefs),
        served_by_chef=ResultCollector.served_by_chef(ctx.chefs),
    )
