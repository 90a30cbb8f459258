from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Callable, List

from .errors import InvalidInput
from .models import Process
from .validation import validate_processes, validate_quantum

logger = logging.getLogger(__name__)


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.

    Process ids are assigned 1..n in file order.
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidInput(f"Workload not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise InvalidInput(f"Unsupported workload format: {suffix} (use .json or .csv)")

    validate_processes(processes)
    logger.info("Loaded %d process(es) from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidInput(f"Malformed JSON workload {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise InvalidInput("JSON workload must be a list of process objects")

    return [_process_from_mapping(pid, entry) for pid, entry in enumerate(raw, start=1)]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for pid, row in enumerate(reader, start=1):
            processes.append(_process_from_mapping(pid, row))
    return processes


def _process_from_mapping(pid: int, mapping) -> Process:
    try:
        arrival_time = int(mapping["arrival_time"])
        burst_time = int(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInput(f"Invalid process entry: {mapping!r}") from exc

    return Process(pid=pid, arrival_time=arrival_time, burst_time=burst_time)


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError as exc:
        raise InvalidInput(f"{what} must be an integer, got {text!r}") from exc


def prompt_process_count(ask: Callable[[str], str]) -> int:
    n = _parse_int(ask("Enter number of processes: "), "Process count")
    if n <= 0:
        raise InvalidInput(f"Process count must be positive, got {n}")
    return n


def prompt_processes(ask: Callable[[str], str], n: int) -> List[Process]:
    """
    Ask for the arrival and burst time of each process, both on one line.
    """
    processes: List[Process] = []
    for pid in range(1, n + 1):
        fields = ask(f"Enter Arrival and Burst Time for P{pid}: ").split()
        if len(fields) != 2:
            raise InvalidInput(f"P{pid}: expected arrival and burst time, got {' '.join(fields)!r}")
        arrival_time = _parse_int(fields[0], f"P{pid} arrival time")
        burst_time = _parse_int(fields[1], f"P{pid} burst time")
        processes.append(Process(pid=pid, arrival_time=arrival_time, burst_time=burst_time))

    validate_processes(processes)
    return processes


def prompt_quantum(ask: Callable[[str], str]) -> int:
    return validate_quantum(_parse_int(ask("Enter Time Quantum for RR: "), "Time quantum"))

