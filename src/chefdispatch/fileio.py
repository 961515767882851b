"""Leitura do arquivo de entrada e escrita do relatório em texto.

Formato de entrada (tokens separados por espaço em branco)::

    N G V          quantidade de chefs normais, veganos e VIP
    SN SG SV       velocidade de cada tipo de chef
    M              quantidade de pedidos
    TIPO RT ID TAMANHO VALOR     (M linhas; TIPO: G=vegano, V=VIP, outro=normal)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple, Union

from .errors import InvalidInputError
from .models import Chef, ChefClass, Order, OrderClass
from .sim.metrics import MetricsSummary

logger = logging.getLogger(__name__)

REPORT_HEADER = "FT ID RT WT ST"


class _Tokens:
    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())
        self.position = 0

    def next(self, what: str) -> str:
        try:
            token = next(self._it)
        except StopIteration:
            raise InvalidInputError(f"entrada terminou antes de {what}") from None
        self.position += 1
        return token

    def next_int(self, what: str) -> int:
        token = self.next(what)
        try:
            return int(token)
        except ValueError:
            raise InvalidInputError(f"{what}: esperado inteiro, recebido {token!r} (token {self.position})") from None

    def next_float(self, what: str) -> float:
        token = self.next(what)
        try:
            return float(token)
        except ValueError:
            raise InvalidInputError(f"{what}: esperado número, recebido {token!r} (token {self.position})") from None


def build_roster(counts: Sequence[int], speeds: Sequence[float]) -> List[Chef]:
    """Cria os chefs na ordem normal, vegano, VIP, com ids a partir de 1."""
    chefs: List[Chef] = []
    next_id = 1
    for chef_class, count, speed in zip((ChefClass.NORMAL, ChefClass.VEGAN, ChefClass.VIP), counts, speeds):
        if count < 0:
            raise InvalidInputError(f"quantidade de chefs {chef_class.value} negativa ({count})")
        for _ in range(count):
            chefs.append(Chef(id=next_id, chef_class=chef_class, speed=speed))
            next_id += 1
    return chefs


def parse_input(text: str) -> Tuple[List[Order], List[Chef]]:
    tokens = _Tokens(text)
    counts = [tokens.next_int(f"quantidade de chefs {cls.value}") for cls in ChefClass]
    speeds = [tokens.next_float(f"velocidade dos chefs {cls.value}") for cls in ChefClass]
    num_orders = tokens.next_int("quantidade de pedidos")
    if num_orders < 0:
        raise InvalidInputError(f"quantidade de pedidos negativa ({num_orders})")

    orders: List[Order] = []
    for i in range(1, num_orders + 1):
        code = tokens.next(f"tipo do pedido #{i}")
        arrival = tokens.next_int(f"chegada do pedido #{i}")
        order_id = tokens.next_int(f"id do pedido #{i}")
        size = tokens.next_int(f"tamanho do pedido #{i}")
        money = tokens.next_float(f"valor do pedido #{i}")
        orders.append(Order(id=order_id, order_class=OrderClass.from_code(code),
                            arrival_time=arrival, size=size, money=money))

    chefs = build_roster(counts, speeds)
    logger.debug("entrada lida: %d pedido(s), %d chef(s)", len(orders), len(chefs))
    return orders, chefs


def read_input(path: Union[str, Path]) -> Tuple[List[Order], List[Chef]]:
    return parse_input(Path(path).read_text(encoding="utf-8"))


def format_report(orders: Sequence[Order], summary: MetricsSummary) -> str:
    lines = [REPORT_HEADER]
    for o in sorted(orders, key=lambda o: (o.finish_time, o.id)):
        lines.append(f"{o.finish_time} {o.id} {o.arrival_time} {o.waiting_time} {o.service_time}")
    lines.append("")
    lines.append("Summary:")
    lines.append(
        f"Orders: {summary.total_orders} (Normal={summary.normal_orders} "
        f"Vegan={summary.vegan_orders} VIP={summary.vip_orders})"
    )
    lines.append(f"Chefs: Normal={summary.normal_chefs} Vegan={summary.vegan_chefs} VIP={summary.vip_chefs}")
    lines.append(f"Average Waiting Time: {summary.avg_waiting_time:g}")
    lines.append(f"Average Service Time: {summary.avg_service_time:g}")
    lines.append(f"% Auto-promoted: {summary.promoted_pct:g}")
    return "\n".join(lines) + "\n"


def write_report(path: Union[str, Path], orders: Sequence[Order], summary: MetricsSummary) -> Path:
    out = Path(path)
    out.write_text(format_report(orders, summary), encoding="utf-8")
    return out
