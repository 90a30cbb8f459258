from __future__ import annotations

from typing import List, Optional, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

# (start, end, pid); pid is None while the CPU idles.
Segment = Tuple[int, int, Optional[int]]

COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def layout_segments(slices: List[ScheduledSlice]) -> List[Segment]:
    """
    Order slices by time and fill the gaps between them with idle segments.

    Both engines that can leave the CPU idle (FCFS/SJF waiting for an
    arrival, Round Robin jumping over an empty queue) show up here as a
    ``None`` segment, so every renderer draws gaps the same way.
    """
    segments: List[Segment] = []
    clock = 0
    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        if sl.start_time > clock:
            segments.append((clock, sl.start_time, None))
        segments.append((sl.start_time, sl.end_time, sl.pid))
        clock = sl.end_time
    return segments


def time_marks(segments: List[Segment]) -> str:
    return " ".join(["0"] + [str(end) for _, end, _ in segments])


def _cell(pid: int, width: int) -> str:
    return f"P{pid}"[:width].ljust(width)


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart, one character per time unit. Idle time is drawn
    as dots.
    """
    if not slices:
        return "(no execution)"

    segments = layout_segments(slices)
    bar = ""
    labels = ""
    for start, end, pid in segments:
        width = max(1, end - start)
        bar += "." * width if pid is None else "=" * width
        labels += " " * width if pid is None else _cell(pid, width)

    return "\n".join(["Gantt Chart:", f"|{bar}|", f" {labels}".rstrip(), time_marks(segments)])


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Colored Gantt chart panel plus the matching time marks line.

    Each pid keeps one color for the whole run, picked by pid so the same
    process has the same color in every algorithm's chart.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    segments = layout_segments(slices)
    bar = Text()
    labels = Text()
    for start, end, pid in segments:
        width = max(1, end - start)
        if pid is None:
            bar.append("." * width, style="dim")
            labels.append(" " * width)
        else:
            bar.append(" " * width, style=f"on {COLORS[(pid - 1) % len(COLORS)]}")
            labels.append(_cell(pid, width), style="bold")

    grid = Table.grid(padding=(0, 0))
    grid.add_row(bar)
    grid.add_row(labels)
    return Panel.fit(grid, title="Gantt Chart"), time_marks(segments)
