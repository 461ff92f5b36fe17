import argparse
import csv
import sys
import time
from pathlib import Path

import numpy as np
import yaml

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from blackout.board import Board  # noqa: E402
from blackout.generator import (  # noqa: E402
    Difficulty,
    generate_with_difficulty,
)
from blackout.patterns import as_pattern  # noqa: E402


def parse_difficulties(cfg_diffs):
    """Parse difficulty names (or explicit targets) from YAML."""
    parsed = []
    for item in cfg_diffs:
        if isinstance(item, int):
            parsed.append({"name": f"target_{item}", "target": item})
        elif isinstance(item, str):
            parsed.append(
                {"name": item, "difficulty": Difficulty(item.lower())}
            )
        else:
            raise ValueError(f"Invalid difficulty spec: {item}")
    return parsed


def _task_seed(base_seed: int, *coords: int) -> int:
    """Generate deterministic seed for each puzzle."""
    ss = np.random.SeedSequence([int(base_seed)] + [int(c) for c in coords])

    return int(
        ss.generate_state(1, dtype=np.uint64)[0] & np.uint64((1 << 63) - 1)
    )


def make_puzzle(rows, cols, pattern, spec, seed, max_attempts):
    """Generate one puzzle and describe it as a CSV row."""
    target = spec.get("target")
    if target is None:
        target = spec["difficulty"].target_moves(rows, cols)

    board = Board(rows, cols, pattern)
    rng = np.random.default_rng(seed)
    start_time = time.perf_counter()
    solution = generate_with_difficulty(board, rng, target, max_attempts)
    time_ms = (time.perf_counter() - start_time) * 1000

    return {
        "rows": rows,
        "cols": cols,
        "pattern": board.pattern.value,
        "difficulty": spec["name"],
        "target": target,
        "seed": seed,
        "solved": int(solution is not None),
        "solution_length": len(solution) if solution is not None else "",
        "free_variables": (
            solution.free_variables if solution is not None else ""
        ),
        "initial_on": board.count_on(),
        "board": "".join("1" if v else "0" for v in board.to_flat()),
        "time_ms": time_ms,
    }


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--config",
        default=str(ROOT / "experiments" / "configs" / "generate_5x5.yaml"),
    )
    ap.add_argument("--out", default=None, help="Output CSV path")
    ap.add_argument(
        "--count", type=int, default=None, help="Puzzles per difficulty"
    )
    args = ap.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)["experiment"]

    rows = int(cfg["board"]["rows"])
    cols = int(cfg["board"].get("cols", rows))
    pattern = as_pattern(cfg["board"].get("pattern", "cross"))
    specs = parse_difficulties(cfg["difficulties"])
    count = int(args.count if args.count is not None else cfg["count"])
    base_seed = int(cfg.get("seed", 0))
    max_attempts = int(cfg.get("max_attempts", 200))
    out_dir = Path(cfg.get("output_dir", "results/puzzles"))
    out_dir.mkdir(parents=True, exist_ok=True)
    out_csv = args.out or str(
        out_dir / f"{pattern.value}_{rows}x{cols}.csv"
    )

    fieldnames = [
        "rows",
        "cols",
        "pattern",
        "difficulty",
        "target",
        "seed",
        "solved",
        "solution_length",
        "free_variables",
        "initial_on",
        "board",
        "time_ms",
    ]

    total = count * len(specs)
    print(
        f"\nGenerating {total:,} puzzles ({rows}x{cols}, {pattern.value})...\n"
    )

    start_time = time.time()
    done = 0
    with open(out_csv, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for si, spec in enumerate(specs):
            for i in range(count):
                seed = _task_seed(base_seed, si, i)
                writer.writerow(
                    make_puzzle(rows, cols, pattern, spec, seed, max_attempts)
                )
                done += 1

                elapsed = time.time() - start_time
                pct = done / total
                progress_line = (
                    f"\r[progress] {done}/{total} puzzles ({pct:>6.1%}) | "
                    f"elapsed: {int(elapsed // 60)}m {int(elapsed % 60)}s"
                )
                print(progress_line, end="", flush=True)
    print()

    elapsed = time.time() - start_time
    print(f"\nDone in {int(elapsed/60)}m {int(elapsed%60)}s")
    print(f"Output: {out_csv}\n")


if __name__ == "__main__":
    main()
