from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .algorithms import run_all
from .errors import InvalidInput
from .report import print_result
from .workload_io import load_workload, prompt_process_count, prompt_processes, prompt_quantum

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpu-sched",
        description="CPU scheduling simulator: runs FCFS, SJF and Round Robin over the same workload.",
    )
    parser.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Path to JSON or CSV workload file (prompted for interactively when omitted).",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=None,
        help="Time quantum for Round Robin (prompted for when omitted).",
    )
    parser.add_argument(
        "--gantt",
        action="store_true",
        help="Also draw a Gantt chart for each algorithm.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every scheduling decision.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    console = console or Console()

    try:
        if args.workload is None:
            processes = prompt_processes(console.input, prompt_process_count(console.input))
        else:
            processes = load_workload(Path(args.workload))
        quantum = args.quantum if args.quantum is not None else prompt_quantum(console.input)

        results = run_all(processes, quantum)
    except InvalidInput as exc:
        logger.error("Rejected input: %s", exc)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    for result in results:
        print_result(result, console, gantt=args.gantt)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
