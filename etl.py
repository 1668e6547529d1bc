"""
CLI for the fitness data pipeline.

Commands:
    uv run python etl.py build [--json F] [--csv F] [--write]   # summary, weekly volume, top lifts
    uv run python etl.py exercise "Squat (Barbell)"             # detail series for one exercise
    uv run python etl.py exercises                              # distinct exercise names
    uv run python etl.py build --files a.json b.csv             # drop-in files, sorted by extension
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

from fittrack_etl import (
    AppData,
    build_aggregates,
    classify_files,
    exercise_progress,
    load_default_inputs,
    parse_file_content,
    read_text,
    summarize,
    top_exercises,
    unique_exercises,
    weekly_volume,
    write_artifacts,
)

DEFAULT_EXERCISE = "Squat (Barbell)"


def load_data(args: argparse.Namespace) -> AppData:
    json_path: Optional[Path] = args.json
    csv_path: Optional[Path] = args.csv
    files = list(args.files or [])
    for path in [*files, json_path, csv_path]:
        if path is not None and not path.exists():
            raise SystemExit(f"File not found: {path}")

    texts: Tuple[Optional[str], Optional[str]]
    if files:
        texts = classify_files(files)
    elif json_path or csv_path:
        texts = (
            read_text(json_path) if json_path else None,
            read_text(csv_path) if csv_path else None,
        )
    else:
        texts = load_default_inputs()
    return parse_file_content(*texts)


def print_summary(data: AppData) -> None:
    summary = summarize(data)
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    if summary.latest_weight is not None:
        print(f"  Current weight: {summary.latest_weight:.1f} kg")
        print(f"  Last weigh-in:  {summary.latest_weigh_in:%d %b %Y}")
    else:
        print("  Current weight: N/A")
    print(f"  Workouts:       {summary.workout_count}")
    print(f"  Peak week:      {summary.peak_weekly_volume / 1000:.1f}k kg")


def print_weekly_volume(data: AppData) -> None:
    print("\nWEEKLY VOLUME")
    print("-" * 40)
    for week in weekly_volume(data.workouts):
        print(f"  {week.label:<10} {week.volume / 1000:>8.2f}k kg  ({week.workouts} workouts)")


def print_top_exercises(data: AppData) -> None:
    print("\nTOP EXERCISES")
    print("-" * 40)
    for series in top_exercises(data.workouts):
        best = max((p.e1rm for p in series.points), default=0)
        print(f"  {series.name}: {len(series.points)} sets, best e1RM {best} kg")


def cmd_build(args: argparse.Namespace) -> None:
    data = load_data(args)
    if data.is_empty:
        print("No data found. Provide a measurement JSON and/or a workout CSV.")
        return
    print_summary(data)
    print_weekly_volume(data)
    print_top_exercises(data)
    if args.write:
        write_artifacts(build_aggregates(data, exercise=args.exercise))


def cmd_exercise(args: argparse.Namespace) -> None:
    data = load_data(args)
    points = exercise_progress(data.workouts, args.name)
    if not points:
        print(f"No sets recorded for {args.name}.")
        return
    print(f"{args.name}: {len(points)} sets")
    for p in points:
        print(f"  {p.date}  {p.weight:g} kg x {p.reps:g}  e1RM {p.e1rm} kg")


def cmd_exercises(args: argparse.Namespace) -> None:
    data = load_data(args)
    names = unique_exercises(data.workouts)
    if not names:
        print("No exercises found.")
        return
    for name in names:
        print(name)


def add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", type=Path, default=None, help="Body-metrics JSON file.")
    parser.add_argument("--csv", type=Path, default=None, help="Strong workout CSV export.")
    parser.add_argument(
        "--files",
        type=Path,
        nargs="+",
        default=None,
        help="Any mix of .json/.csv files, sorted by extension (overrides --json/--csv).",
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Fitness data pipeline.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser("build", help="Parse inputs and print the dashboard.")
    add_input_args(p_build)
    p_build.add_argument("--write", action="store_true", help="Write aggregates to data/derived.")
    p_build.add_argument("--exercise", default=DEFAULT_EXERCISE, help="Exercise for the detail artifact.")
    p_build.set_defaults(func=cmd_build)

    p_ex = sub.add_parser("exercise", help="Show the progress series of one exercise.")
    p_ex.add_argument("name", nargs="?", default=DEFAULT_EXERCISE)
    add_input_args(p_ex)
    p_ex.set_defaults(func=cmd_exercise)

    p_list = sub.add_parser("exercises", help="List distinct exercise names.")
    add_input_args(p_list)
    p_list.set_defaults(func=cmd_exercises)

    args = parser.parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")
    args.func(args)


if __name__ == "__main__":
    main()
