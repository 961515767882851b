from __future__ import annotations


class DispatchError(Exception):
    """Base de todos os erros do simulador."""


class InvalidInputError(DispatchError, ValueError):
    """Entrada rejeitada antes do primeiro passo da simulação."""


class SchedulerInvariantError(DispatchError, RuntimeError):
    """Invariante do escalonador violada (erro de programação, não de usuário)."""


class SimulationDidNotTerminate(DispatchError, RuntimeError):
    def __init__(self, steps: int, clock: int) -> None:
        super().__init__(f"simulação não terminou após {steps} passos (relógio em t={clock})")
        self.steps = steps
        self.clock = clock
