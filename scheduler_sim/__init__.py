"""
Scheduler simulator package.

Simulates FCFS, SJF and Round Robin CPU scheduling over a fixed workload
and reports waiting and turnaround times.
"""

__all__ = ["cli"]
