from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional, Sequence

from .errors import InvalidInput
from .metrics import compute_system_metrics
from .models import Process, ScheduleResult, ScheduledSlice, clone_processes
from .validation import validate_processes, validate_quantum

logger = logging.getLogger(__name__)


def _finish(algorithm: str, quantum: Optional[int], work: List[Process], timeline: List[ScheduledSlice]) -> ScheduleResult:
    processes = sorted(work, key=lambda p: p.pid)
    result = ScheduleResult(algorithm=algorithm, quantum=quantum, processes=processes, timeline=timeline)
    compute_system_metrics(result)
    return result


def schedule_fcfs(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run strictly in arrival order; ``sorted`` is stable, so equal
    arrivals keep their input order.
    """
    validate_processes(processes)
    work = sorted(clone_processes(processes), key=lambda p: p.arrival_time)

    time = 0
    timeline: List[ScheduledSlice] = []

    for p in work:
        if time < p.arrival_time:
            logger.debug("FCFS: CPU idle from t=%d to t=%d", time, p.arrival_time)
            time = p.arrival_time

        p.completion_time = time + p.burst_time
        timeline.append(ScheduledSlice(pid=p.pid, start_time=time, end_time=p.completion_time))
        logger.debug("FCFS: P%d runs [%d, %d)", p.pid, time, p.completion_time)

        time = p.completion_time

    return _finish("FCFS", None, work, timeline)


def schedule_sjf(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    completed, choose the one with the smallest burst time. Once started, a
    process runs to completion even if a shorter one arrives meanwhile.
    """
    validate_processes(processes)
    work = sorted(clone_processes(processes), key=lambda p: p.pid)

    time = 0
    timeline: List[ScheduledSlice] = []
    completed = [False] * len(work)
    completed_count = 0

    while completed_count < len(work):
        chosen = -1
        for i, p in enumerate(work):
            if completed[i] or p.arrival_time > time:
                continue
            # Strict comparison keeps the lowest pid among equal bursts.
            if chosen == -1 or p.burst_time < work[chosen].burst_time:
                chosen = i

        if chosen == -1:
            # Nothing has arrived yet: idle until the next arrival.
            next_arrival = min(p.arrival_time for i, p in enumerate(work) if not completed[i])
            logger.debug("SJF: CPU idle from t=%d to t=%d", time, next_arrival)
            time = next_arrival
            continue

        p = work[chosen]
        p.completion_time = time + p.burst_time
        timeline.append(ScheduledSlice(pid=p.pid, start_time=time, end_time=p.completion_time))
        logger.debug("SJF: P%d (burst %d) runs [%d, %d)", p.pid, p.burst_time, time, p.completion_time)

        completed[chosen] = True
        completed_count += 1
        time = p.completion_time

    return _finish("SJF", None, work, timeline)


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive during a slice are enqueued before the preempted
    process goes back to the tail. When the ready queue drains while some
    processes have not arrived yet, the clock jumps straight to the next
    arrival.
    """
    quantum = validate_quantum(quantum)
    validate_processes(processes)
    work = sorted(clone_processes(processes), key=lambda p: p.arrival_time)
    n = len(work)

    timeline: List[ScheduledSlice] = []
    ready: Deque[int] = deque()
    admitted = [False] * n
    completed_count = 0

    # The clock starts at the earliest arrival.
    ready.append(0)
    admitted[0] = True
    time = work[0].arrival_time

    while completed_count < n:
        i = ready.popleft()
        p = work[i]

        run_time = min(p.remaining_time, quantum)
        timeline.append(ScheduledSlice(pid=p.pid, start_time=time, end_time=time + run_time))
        p.remaining_time -= run_time
        time += run_time
        logger.debug("RR: P%d runs %d unit(s), %d remaining at t=%d", p.pid, run_time, p.remaining_time, time)

        for j in range(n):
            if not admitted[j] and work[j].arrival_time <= time:
                ready.append(j)
                admitted[j] = True

        if p.remaining_time > 0:
            ready.append(i)
        else:
            p.completion_time = time
            completed_count += 1
            logger.debug("RR: P%d completes at t=%d", p.pid, time)

        if not ready and completed_count < n:
            for j in range(n):
                if not admitted[j]:
                    ready.append(j)
                    admitted[j] = True
                    logger.debug("RR: CPU idle from t=%d to t=%d", time, work[j].arrival_time)
                    time = work[j].arrival_time
                    break

    return _finish("Round Robin", quantum, work, timeline)


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum is only used by round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise InvalidInput(f"Unknown algorithm '{name}' (use one of: {', '.join(ALGORITHMS)})")

    func = ALGORITHMS[name]
    logger.info("Running %s on %d process(es)", name, len(processes))
    return func(processes, quantum=quantum)


def run_all(processes: Sequence[Process], quantum: int) -> List[ScheduleResult]:
    """
    Run every algorithm over the same workload.

    Input is validated up front so a bad quantum is reported before any
    table is produced.
    """
    validate_processes(processes)
    validate_quantum(quantum)
    return [run_algorithm(name, processes, quantum=quantum) for name in ALGORITHMS]
