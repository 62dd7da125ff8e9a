"""
Step logger — console output and structured recording of each placement.

Usage:
    step_logger = StepLogger(verbose=True)
    result = pack(boxes, observer=step_logger.log_step)
    step_logger.get_records()
"""

from __future__ import annotations

import logging
import sys
from typing import List, TextIO

from boxpack.core.models import Placement

logger = logging.getLogger(__name__)


class StepLogger:
    """Records placements as dicts and echoes them when verbose."""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None) -> None:
        self.verbose = verbose
        self.stream = stream
        self._records: List[dict] = []

    def log_step(self, placement: Placement) -> None:
        """Log a single placement."""
        self._records.append(placement.to_dict())
        logger.debug("step %d: %s", placement.step, placement)

        if not self.verbose:
            return

        line = (
            f"{placement.phase.tag} Box({placement.width}, {placement.height}) "
            f"-> {placement.x}, {placement.y}"
        )
        if placement.rotated:
            line += "  rotated"
        if placement.region is not None:
            r = placement.region
            line += f"  from Free({r.x}, {r.y}, h={r.height})"
        print(line, file=self.stream or sys.stderr)

    def get_records(self) -> List[dict]:
        """All logged placements as dicts (for JSON output)."""
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()
