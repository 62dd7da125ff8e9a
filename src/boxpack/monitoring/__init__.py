"""Monitoring module for boxpack.

Provides metrics tracking and export for packing runs.
"""

from .metrics import (
    PackMetrics,
    RunMetrics,
    export_to_csv,
    export_to_json,
    print_summary,
)

__all__ = [
    "PackMetrics",
    "RunMetrics",
    "export_to_csv",
    "export_to_json",
    "print_summary",
]
