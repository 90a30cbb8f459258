from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from .gantt import build_rich_gantt
from .metrics import summarize_process_metrics
from .models import ScheduleResult

HEADERS = ["PID", "Arrival", "Burst", "Waiting", "Turnaround"]


def build_process_table(result: ScheduleResult) -> Table:
    table = Table(box=box.SIMPLE_HEAVY)
    for h in HEADERS:
        table.add_column(h, justify="center" if h == "PID" else "right")

    for p in sorted(result.processes, key=lambda p: p.pid):
        table.add_row(
            str(p.pid),
            str(p.arrival_time),
            str(p.burst_time),
            str(p.waiting_time),
            str(p.turnaround_time),
        )
    return table


def print_result(result: ScheduleResult, console: Console, gantt: bool = False) -> None:
    """
    Render one algorithm's per-process table followed by its averages.
    """
    console.print()
    console.print(f"[bold]--- {result.algorithm} Results ---[/bold]")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    if gantt:
        panel, time_marks = build_rich_gantt(result.timeline)
        console.print(panel)
        if time_marks:
            console.print(time_marks)

    console.print(build_process_table(result))

    summary = summarize_process_metrics(result.processes)
    console.print(f"Average Waiting Time: {summary['avg_waiting']:.2f}")
    console.print(f"Average Turnaround Time: {summary['avg_turnaround']:.2f}")

    if result.system:
        system = result.system
        console.print(
            f"[dim]Throughput {system.throughput:.3f} proc/unit, "
            f"CPU utilization {system.cpu_utilization * 100:.1f}%[/dim]"
        )
