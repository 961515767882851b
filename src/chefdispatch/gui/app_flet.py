from __future__ import annotations

import sys
from typing import List, Optional

import flet as ft

from ..errors import DispatchError
from ..fileio import read_input
from ..sim.engine import RunResult, run_simulation
from ..sim.metrics import MetricsSummary, summarize

COLUMNS = [
    ("FT", "finish_time"),
    ("ID", "id"),
    ("RT", "arrival_time"),
    ("WT", "waiting_time"),
    ("ST", "service_time"),
    ("Classe", "order_class"),
    ("Chef", "chef_id"),
]

CLASS_BG = {"normal": "#e3f2fd", "vegan": "#e8f5e9", "vip": "#ffebee"}


class ResultsPage:
    """Tabela de pedidos concluídos e resumo da execução."""

    def __init__(self, page: ft.Page, input_path: str) -> None:
        self.page = page
        self.page.title = "chefdispatch — resultados"
        self.page.scroll = ft.ScrollMode.AUTO

        self.path = ft.TextField(label="Arquivo de entrada", value=input_path, width=420)
        self.run_btn = ft.ElevatedButton("Simular", on_click=self.on_run)
        self.error = ft.Text("", color="#b71c1c")
        self.summary = ft.Column(spacing=4)
        self.table = ft.DataTable(
            columns=[ft.DataColumn(ft.Text(label)) for label, _ in COLUMNS]
            + [ft.DataColumn(ft.Text("Promovido"))],
            rows=[],
        )
        self.page.add(
            ft.Text("Simulação de despacho de pedidos", size=20, weight=ft.FontWeight.BOLD),
            ft.Row(controls=[self.path, self.run_btn]),
            self.error,
            self.table,
            self.summary,
        )
        self.on_run(None)

    def on_run(self, _e: Optional[ft.ControlEvent]) -> None:
        self.error.value = ""
        try:
            orders, chefs = read_input(self.path.value or "input.txt")
            result = run_simulation(orders, chefs)
        except (DispatchError, OSError) as exc:
            self.error.value = str(exc)
            self.table.rows = []
            self.summary.controls = []
            self.page.update()
            return
        self._fill(result)
        self.page.update()

    def _fill(self, result: RunResult) -> None:
        rows: List[ft.DataRow] = []
        for o in result.orders:
            cells = [ft.DataCell(ft.Text(str(getattr(o, attr).value if attr == "order_class" else getattr(o, attr))))
                     for _, attr in COLUMNS]
            cells.append(ft.DataCell(ft.Text("sim" if o.promoted else "")))
            rows.append(ft.DataRow(cells=cells, color=CLASS_BG.get(o.order_class.value)))
        self.table.rows = rows
        self.summary.controls = _summary_lines(summarize(result.orders, result.chefs, result.promotions))


def _summary_lines(s: MetricsSummary) -> List[ft.Control]:
    return [
        ft.Text(f"Pedidos: {s.total_orders} (Normal={s.normal_orders} Vegano={s.vegan_orders} VIP={s.vip_orders})"),
        ft.Text(f"Chefs: Normal={s.normal_chefs} Vegano={s.vegan_chefs} VIP={s.vip_chefs}"),
        ft.Text(f"Espera média: {s.avg_waiting_time:.2f}"),
        ft.Text(f"Serviço médio: {s.avg_service_time:.2f}"),
        ft.Text(f"Promovidos automaticamente: {s.promoted_pct:.1f}%"),
    ]


def main() -> None:
    input_path = sys.argv[1] if len(sys.argv) > 1 else "input.txt"

    def _view(page: ft.Page) -> None:
        ResultsPage(page, input_path)
    ft.app(target=_view)


if __name__ == "__main__":
    main()
