from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .errors import DispatchError, InvalidInputError
from .fileio import build_roster, read_input, write_report
from .generators import WorkloadConfig, generate_workload
from .models import Chef, Order
from .plots import plot_bars, plot_gantt
from .sim.context import AUTO_PROMOTE_THRESHOLD, SimulationConfig
from .sim.engine import RunResult, run_simulation
from .sim.metrics import orders_to_dataframe, summarize, wait_by_class

logger = logging.getLogger(__name__)


SCENARIOS: Dict[str, WorkloadConfig] = {
    "uniform": WorkloadConfig(num_orders=40, arrival_pattern="uniform", seed=123),
    "poisson": WorkloadConfig(num_orders=60, arrival_pattern="poisson", seed=123),
    "bursty": WorkloadConfig(num_orders=50, arrival_pattern="bursty", seed=123),
    "vip_rush": WorkloadConfig(num_orders=60, arrival_pattern="bursty", seed=123, class_mix=(0.3, 0.2, 0.5)),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="chefdispatch: simulação de despacho de pedidos para chefs"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=str, default=None, help="Arquivo de entrada (formato texto)")
    source.add_argument("--scenario", choices=sorted(SCENARIOS), default=None, help="Carga gerada aleatoriamente")
    parser.add_argument("--report", type=str, default="output.txt", help="Relatório em texto")
    parser.add_argument("--outputs", type=str, default="outputs", help="Diretório de saída para CSV/JSON/PNG")
    parser.add_argument("--threshold", type=int, default=AUTO_PROMOTE_THRESHOLD, help="Espera para promoção automática")
    parser.add_argument("--max-steps", type=int, default=1_000_000, help="Limite de passos da simulação")
    parser.add_argument("--plots", action="store_true", help="Gera gráficos PNG")
    parser.add_argument("--normal", type=str, nargs=2, default=["2", "1.0"], metavar=("N", "VEL"),
                        help="Chefs normais e velocidade (apenas com --scenario)")
    parser.add_argument("--vegan", type=str, nargs=2, default=["1", "1.0"], metavar=("N", "VEL"),
                        help="Chefs veganos e velocidade (apenas com --scenario)")
    parser.add_argument("--vip", type=str, nargs=2, default=["1", "2.0"], metavar=("N", "VEL"),
                        help="Chefs VIP e velocidade (apenas com --scenario)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log detalhado (DEBUG)")
    return parser


def _chef_spec(flag: str, values: Sequence[str]) -> Tuple[int, float]:
    count, speed = values
    try:
        return int(count), float(speed)
    except ValueError:
        raise InvalidInputError(f"{flag}: esperado N inteiro e VEL numérica, recebido {count!r} {speed!r}") from None


def load_workload(args: argparse.Namespace) -> Tuple[List[Order], List[Chef]]:
    if args.scenario is not None:
        orders = generate_workload(SCENARIOS[args.scenario])
        flags = (("--normal", args.normal), ("--vegan", args.vegan), ("--vip", args.vip))
        specs = [_chef_spec(flag, values) for flag, values in flags]
        counts = [count for count, _ in specs]
        speeds = [speed for _, speed in specs]
        return orders, build_roster(counts, speeds)
    return read_input(args.input or "input.txt")


def export_results(result: RunResult, report: Path, outputs_dir: Path, plots: bool) -> None:
    summary = summarize(result.orders, result.chefs, result.promotions)
    write_report(report, result.orders, summary)

    outputs_dir.mkdir(parents=True, exist_ok=True)
    df_orders = orders_to_dataframe(result.orders)
    df_orders.to_csv(outputs_dir / "orders.csv", index=False)
    df_summary = pd.DataFrame([asdict(summary)])
    (outputs_dir / "summary.json").write_text(df_summary.to_json(orient="records", indent=2), encoding="utf-8")

    if plots:
        plot_bars(wait_by_class(result.orders), "Espera média por classe", outputs_dir / "wait_by_class.png")
        plot_gantt(df_orders, "Gantt por chef", outputs_dir / "gantt.png")

    logger.info(
        "%d pedido(s); espera média %.2f; serviço médio %.2f; %.1f%% promovidos",
        summary.total_orders, summary.avg_waiting_time, summary.avg_service_time, summary.promoted_pct,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        orders, chefs = load_workload(args)
        config = SimulationConfig(promotion_threshold=args.threshold, max_steps=args.max_steps)
        result = run_simulation(orders, chefs, config)
    except (DispatchError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    export_results(result, Path(args.report), Path(args.outputs), args.plots)
    print(f"Simulação concluída. Relatório escrito em {args.report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
