#!/usr/bin/env python3
"""Quick perf benchmark for Okra parsing."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from okrapy.pipeline import parse_result


def _collect_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.okra") if path.is_file())


def _run_once(files: list[Path], *, label: str, show_progress: bool) -> tuple[float, int]:
    start = time.perf_counter()
    total_errors = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        result = parse_result(path.read_text(encoding="utf-8"))
        result.value()
        total_errors += len(result.errors)
    return time.perf_counter() - start, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark Okra parse + resolve throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .okra files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    if not args.root.is_dir():
        raise SystemExit(f"Invalid root: {args.root}")
    files = _collect_files(args.root)
    if not files:
        raise SystemExit(f"No .okra files found under {args.root}")

    show_progress = not args.no_progress
    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(files, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

    timings: list[float] = []
    errors = 0
    for run_idx in range(max(args.runs, 1)):
        duration, errors = _run_once(files, label=f"run {run_idx + 1}", show_progress=show_progress)
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"Files: {len(files)}")
    print(f"Errors: {errors}")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
