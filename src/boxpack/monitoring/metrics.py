"""Metrics tracking and export for packing runs.

Provides dataclasses for tracking per-pack and per-run metrics and
utilities for exporting results to JSON and CSV formats.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from boxpack.core.models import PackResult

CSV_FIELDS = [
    "dataset_id", "boxes_placed", "bin_width", "bin_height", "bin_area",
    "box_area", "waste_area", "utilization_pct", "rotated_boxes",
    "runtime_ms", "packed_at",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PackMetrics:
    """Metrics for a single packing.

    Attributes:
        dataset_id: Name of the box list that was packed.
        boxes_placed: Number of boxes placed.
        bin_width: Final bin width.
        bin_height: Final bin height.
        bin_area: Final bin area.
        box_area: Sum of the box areas.
        waste_area: Bin area not covered by any box.
        utilization_pct: Covered share of the bin (0-100).
        rotated_boxes: Boxes the packer laid on their side.
        runtime_ms: Time spent in the packer.
        packed_at: Timestamp when packing finished.
    """

    dataset_id: str
    boxes_placed: int
    bin_width: int
    bin_height: int
    bin_area: int
    box_area: int
    waste_area: int
    utilization_pct: float
    rotated_boxes: int = 0
    runtime_ms: float = 0.0
    packed_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_result(
        cls, result: PackResult, dataset_id: str, runtime_ms: float = 0.0
    ) -> "PackMetrics":
        """Build metrics from a finished packing.

        Example:
            >>> from boxpack import Box, pack
            >>> pm = PackMetrics.from_result(pack([Box(2, 4)]), "single")
            >>> pm.bin_area, pm.utilization_pct
            (8, 100.0)
        """
        return cls(
            dataset_id=dataset_id,
            boxes_placed=len(result.placements),
            bin_width=result.bin.width,
            bin_height=result.bin.height,
            bin_area=result.bin.area,
            box_area=result.box_area,
            waste_area=result.waste,
            utilization_pct=result.utilization * 100,
            rotated_boxes=sum(1 for p in result.placements if p.rotated),
            runtime_ms=runtime_ms,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with ISO timestamp."""
        d = asdict(self)
        d["packed_at"] = self.packed_at.isoformat()
        return d


@dataclass
class RunMetrics:
    """Aggregate metrics for a CLI run over one or more box lists.

    Attributes:
        run_id: Unique identifier for the run.
        total_packs: Number of box lists packed.
        total_boxes: Total number of boxes placed.
        total_bin_area: Sum of the final bin areas.
        total_box_area: Sum of the box areas.
        avg_utilization_pct: Mean utilization across packings.
        min_utilization_pct: Lowest utilization.
        max_utilization_pct: Highest utilization.
        runtime_seconds: Wall time of the whole run.
        errors_count: Packings that failed validation.
        started_at: Run start timestamp.
        completed_at: Run completion timestamp (None if running).
        pack_metrics: Per-packing metrics.
    """

    run_id: str
    total_packs: int = 0
    total_boxes: int = 0
    total_bin_area: int = 0
    total_box_area: int = 0
    avg_utilization_pct: float = 0.0
    min_utilization_pct: float = 0.0
    max_utilization_pct: float = 0.0
    runtime_seconds: float = 0.0
    errors_count: int = 0
    started_at: datetime = field(default_factory=_utcnow)
    completed_at: datetime | None = None
    pack_metrics: list[PackMetrics] = field(default_factory=list)

    def add_pack(self, pack: PackMetrics) -> None:
        """Add one packing's metrics to the run.

        Example:
            >>> rm = RunMetrics("run_001")
            >>> rm.add_pack(PackMetrics("a", 5, 24, 16, 384, 384, 0, 100.0))
            >>> rm.total_packs, rm.total_boxes
            (1, 5)
        """
        self.pack_metrics.append(pack)
        self.total_packs += 1
        self.total_boxes += pack.boxes_placed
        self.total_bin_area += pack.bin_area
        self.total_box_area += pack.box_area
        self._recalculate_stats()

    def record_error(self) -> None:
        self.errors_count += 1

    def mark_complete(self) -> None:
        """Mark the run complete and compute its runtime."""
        self.completed_at = _utcnow()
        self.runtime_seconds = (self.completed_at - self.started_at).total_seconds()

    def _recalculate_stats(self) -> None:
        if not self.pack_metrics:
            return

        utilizations = [p.utilization_pct for p in self.pack_metrics]
        self.avg_utilization_pct = sum(utilizations) / len(utilizations)
        self.min_utilization_pct = min(utilizations)
        self.max_utilization_pct = max(utilizations)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with ISO timestamps."""
        d = asdict(self)
        d["started_at"] = self.started_at.isoformat()
        d["completed_at"] = self.completed_at.isoformat() if self.completed_at else None
        d["pack_metrics"] = [p.to_dict() for p in self.pack_metrics]
        return d

    def to_summary_dict(self) -> dict[str, Any]:
        """Aggregate metrics only (no per-pack list)."""
        d = self.to_dict()
        del d["pack_metrics"]
        return d


def export_to_json(metrics: RunMetrics, output_path: Path | str, include_packs: bool = True) -> None:
    """Export run metrics to a JSON file.

    Args:
        metrics: RunMetrics instance to export.
        output_path: Path to output JSON file.
        include_packs: If True, include per-pack metrics. If False, summary only.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = metrics.to_dict() if include_packs else metrics.to_summary_dict()

    with output_path.open("w") as f:
        json.dump(data, f, indent=2)


def export_to_csv(metrics: RunMetrics, output_path: Path | str) -> None:
    """Export per-pack metrics to a CSV file (header only when empty)."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for pack in metrics.pack_metrics:
            writer.writerow(pack.to_dict())


def print_summary(metrics: RunMetrics) -> str:
    """Generate a human-readable summary of run metrics.

    Returns:
        Formatted multi-line summary string.
    """
    lines = [
        "=" * 60,
        f"Run: {metrics.run_id}",
        "=" * 60,
        f"Box lists packed: {metrics.total_packs}",
        f"Total boxes:      {metrics.total_boxes}",
        f"Bin area:         {metrics.total_bin_area}",
        f"Box area:         {metrics.total_box_area}",
        "",
        "Utilization Statistics:",
        f"  Average: {metrics.avg_utilization_pct:.2f}%",
        f"  Min:     {metrics.min_utilization_pct:.2f}%",
        f"  Max:     {metrics.max_utilization_pct:.2f}%",
        "",
        f"Runtime: {metrics.runtime_seconds:.3f} seconds",
        f"Errors: {metrics.errors_count}",
        "=" * 60,
    ]
    return "\n".join(lines)
