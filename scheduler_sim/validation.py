from __future__ import annotations

from typing import Optional, Sequence

from .errors import InvalidInput
from .models import Process


def validate_processes(processes: Sequence[Process]) -> None:
    """
    Reject workloads that would produce negative or undefined metrics.
    """
    if not processes:
        raise InvalidInput("At least one process is required")

    seen: set[int] = set()
    for p in processes:
        if p.pid <= 0:
            raise InvalidInput(f"Process id must be positive, got {p.pid}")
        if p.pid in seen:
            raise InvalidInput(f"Duplicate process id P{p.pid}")
        seen.add(p.pid)

        if p.arrival_time < 0:
            raise InvalidInput(f"P{p.pid}: arrival time must be >= 0, got {p.arrival_time}")
        if p.burst_time <= 0:
            raise InvalidInput(f"P{p.pid}: burst time must be > 0, got {p.burst_time}")


def validate_quantum(quantum: Optional[int]) -> int:
    if quantum is None or quantum <= 0:
        raise InvalidInput(f"Round Robin requires a positive quantum, got {quantum}")
    return quantum
