from __future__ import annotations


class InvalidInput(ValueError):
    """
    Raised when a workload, quantum or algorithm name cannot be simulated.

    Always raised before any engine starts advancing its clock, so a caller
    never sees a partially scheduled result.
    """
