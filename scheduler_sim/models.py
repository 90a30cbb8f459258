from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass
class Process:
    """
    One simulated task.

    ``arrival_time`` and ``burst_time`` are fixed at creation. The remaining
    fields are filled in by a scheduling engine on its own working copy.
    """

    pid: int
    arrival_time: int
    burst_time: int
    remaining_time: Optional[int] = None
    completion_time: Optional[int] = None

    def __post_init__(self) -> None:
        if self.remaining_time is None:
            self.remaining_time = self.burst_time

    @property
    def turnaround_time(self) -> Optional[int]:
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time

    @property
    def waiting_time(self) -> Optional[int]:
        turnaround = self.turnaround_time
        if turnaround is None:
            return None
        return turnaround - self.burst_time


def clone_processes(processes: Iterable[Process]) -> List[Process]:
    """
    Return independent copies so one engine's bookkeeping never leaks into
    another engine's run.
    """
    return [copy.deepcopy(p) for p in processes]


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[Process] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
