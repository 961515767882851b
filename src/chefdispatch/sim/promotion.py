from __future__ import annotations

import logging
from typing import List

from ..errors import InvalidInputError
from ..models import Order, OrderClass
from .context import AUTO_PROMOTE_THRESHOLD, SimulationContext

logger = logging.getLogger(__name__)


class AutoPromotionRule:
    """Promove a VIP os pedidos normais que esperaram `threshold` ou mais.

    Só a fila normal é varrida; pedidos veganos nunca são promovidos. O valor
    (`money`) do pedido não muda, então ele entra na fila VIP com a prioridade
    que já tinha.
    """

    def __init__(self, threshold: int = AUTO_PROMOTE_THRESHOLD) -> None:
        if threshold < 1:
            raise InvalidInputError(f"limite de promoção deve ser >= 1 (recebido {threshold})")
        self.threshold = threshold

    def is_due(self, order: Order, now: int) -> bool:
        return now - order.arrival_time >= self.threshold

    def apply(self, ctx: SimulationContext) -> List[Order]:
        now = ctx.clock
        due = ctx.queues.normal.extract_if(lambda o: self.is_due(o, now))
        for order in due:
            order.order_class = OrderClass.VIP
            order.promoted = True
            ctx.queues.vip.push(order)
            ctx.promotions += 1
            ctx.emit("promotion", order_id=order.id)
            logger.debug("t=%d: pedido %d promovido a VIP após %d de espera", now, order.id, now - order.arrival_time)
        return due
