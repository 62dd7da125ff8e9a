"""Command-line runner for the box packer.

Reads a box list (file or stdin), forces every box tall, packs it, draws
the layout on stderr and prints the bin area on stdout. With ``--tests`` it
packs the built-in scenarios instead.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence, TextIO

from boxpack.algorithms.packer import pack
from boxpack.core.models import Box, PackResult
from boxpack.core.validator import PlacementError, validate_packing
from boxpack.monitoring.metrics import (
    PackMetrics,
    RunMetrics,
    export_to_csv,
    export_to_json,
    print_summary,
)
from boxpack.runner.config import LOG_LEVELS, RunConfig, load_config
from boxpack.runner.dataset import BoxFormatError, build_scenarios, make_tall, read_boxes
from boxpack.visualization.ascii_render import render_layout
from boxpack.visualization.step_logger import StepLogger

logger = logging.getLogger(__name__)


class PackRunner:
    """
    Packs box lists according to a RunConfig and collects metrics.

    Output goes to ``stdout`` (bin areas) and ``stderr`` (layouts, step
    log, summaries), mirroring how the packer is used from a shell.
    """

    def __init__(
        self,
        config: RunConfig | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.config = config or RunConfig()
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.metrics = RunMetrics(
            run_id=f"pack_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"
        )
        self.step_logger = StepLogger(verbose=self.config.verbose, stream=self.stderr)
        self.layouts: dict[str, dict] = {}

    def run_boxes(self, boxes: list[Box], dataset_id: str = "input") -> PackResult:
        """
        Pack one box list, then validate, render and report it.

        Raises:
            PlacementError: if validation is on and the layout is invalid.
        """
        if self.config.normalize:
            boxes = make_tall(boxes)

        self.step_logger.clear()
        start = time.perf_counter()
        result = pack(boxes, observer=self.step_logger.log_step)
        runtime_ms = (time.perf_counter() - start) * 1000

        pack_metrics = PackMetrics.from_result(result, dataset_id, runtime_ms=runtime_ms)
        self.layouts[dataset_id] = {
            **result.to_dict(),
            "steps": self.step_logger.get_records(),
        }

        if self.config.validate_layout:
            try:
                validate_packing(result)
            except PlacementError:
                self.metrics.record_error()
                raise

        if self.config.render:
            rendering = render_layout(result.boxes, result.bin)
            for box in rendering.conflicts:
                print(f"ERR: {box!r}", file=self.stderr)
            print(rendering.text, file=self.stderr)

        self.metrics.add_pack(pack_metrics)
        print(result.bin.area, file=self.stdout)
        logger.info(
            "%s: %d boxes, bin %dx%d, utilization %.1f%%",
            dataset_id, len(result.boxes), result.bin.width, result.bin.height,
            pack_metrics.utilization_pct,
        )
        return result

    def run_input(self, stream: TextIO) -> int:
        """Pack the box list read from ``stream``; returns an exit code."""
        try:
            boxes = read_boxes(stream)
        except BoxFormatError as e:
            logger.error("Bad box list: %s", e)
            print("Unable to read the box list!", file=self.stderr)
            return 1
        return self._run_all({"input": boxes})

    def run_scenarios(self) -> int:
        """Pack every built-in scenario; returns an exit code."""
        code = self._run_all(build_scenarios(seed=self.config.scenario_seed))
        print(print_summary(self.metrics), file=self.stderr)
        return code

    def _run_all(self, datasets: dict[str, list[Box]]) -> int:
        code = 0
        for dataset_id, boxes in datasets.items():
            try:
                self.run_boxes(boxes, dataset_id)
            except PlacementError as e:
                print(f"ERR: {dataset_id}: {e}", file=self.stderr)
                code = 1
        self.metrics.mark_complete()
        self._save_results()
        return code

    def _save_results(self) -> None:
        """Write metrics (JSON + CSV) and layouts to the results directory."""
        if not self.config.results_dir:
            return

        results_dir = Path(self.config.results_dir)
        base = results_dir / self.metrics.run_id
        export_to_json(self.metrics, f"{base}.json")
        export_to_csv(self.metrics, f"{base}_packs.csv")

        with open(f"{base}_layouts.json", "w", encoding="utf-8") as f:
            json.dump(self.layouts, f, indent=2)

        logger.info("Saved results to %s", results_dir)


# ─────────────────────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxpack-run",
        description="Pack rectangles into the narrowest fixed-height bin",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Box list file: a count, then one 'width height' pair per box "
             "(default: stdin)",
    )
    parser.add_argument(
        "--tests",
        action="store_true",
        help="Pack the built-in scenarios instead of reading input",
    )
    parser.add_argument("--config", help="YAML run configuration")
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw the layout on stderr",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Echo every placement on stderr",
    )
    parser.add_argument("--results-dir", help="Directory for metrics and layouts")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    """Load the YAML config (if any) and apply command-line overrides."""
    config = load_config(args.config) if args.config else RunConfig()

    overrides = {
        "render": args.render,
        "verbose": args.verbose,
        "results_dir": args.results_dir,
        "log_level": args.log_level,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``boxpack-run``; returns the exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    runner = PackRunner(config)
    if args.tests:
        return runner.run_scenarios()

    if args.input:
        try:
            stream = open(args.input, "r", encoding="utf-8")
        except OSError as e:
            print(f"Unable to read the box list! ({e})", file=sys.stderr)
            return 1
        with stream:
            return runner.run_input(stream)

    return runner.run_input(sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
