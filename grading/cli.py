"""
Command-Line Interface for the grade engine.

This module parses command-line arguments and hands them to GPATracker,
which does the work and the printing.

COMMANDS:
---------
summary   Overall / semester / category GPA for an export
course    One course with its assignments and grade sources
override  Set a manual grade override on a course
revert    Remove a course's override
predict   Score needed on a final exam to reach a target grade

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m grading summary
"""

import argparse
import json
import logging

from .models import GpaScale
from .tracker import GPATracker


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpa-tracker",
        description="Compute course grades and GPAs from a GPA tracker export",
    )
    parser.add_argument("--export", default=None,
                        help="Path to the account export JSON (default: data/example_export.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    summary = commands.add_parser("summary", help="Show GPA summary")
    summary.add_argument("--scale", choices=[s.value for s in GpaScale],
                         help="Display scale (default: the user's preferred scale)")

    course = commands.add_parser("course", help="Show a single course")
    course.add_argument("name", help="Course name or code")

    override = commands.add_parser("override", help="Override a course grade")
    override.add_argument("name", help="Course name or code")
    override.add_argument("value", help="Letter grade (A-) or percentage (91)")
    override.add_argument("--write", action="store_true", help="Save the change to the export")

    revert = commands.add_parser("revert", help="Revert a course's grade override")
    revert.add_argument("name", help="Course name or code")
    revert.add_argument("--write", action="store_true", help="Save the change to the export")

    predict = commands.add_parser("predict", help="Score needed on the final exam")
    predict.add_argument("name", help="Course name or code")
    predict.add_argument("--final-weight", type=float, required=True,
                         help="Final exam weight, percent of the course grade")
    predict.add_argument("--target", type=float, required=True,
                         help="Target course percentage")

    return parser


def main(argv=None) -> int:
    """
    Command-line entry point.

    Returns:
        0 on success, 1 if the export is missing/invalid or the course is unknown
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tracker = GPATracker()

    try:
        if args.command == "summary":
            scale = GpaScale(args.scale) if args.scale else None
            tracker.run_summary(args.export, scale)
            return 0

        if args.command == "course":
            result = tracker.show_course(args.export, args.name)
        elif args.command == "override":
            result = tracker.set_override(args.export, args.name, args.value, write=args.write)
        elif args.command == "revert":
            result = tracker.revert_override(args.export, args.name, write=args.write)
        else:
            result = tracker.predict_final(args.export, args.name, args.final_weight, args.target)
    except FileNotFoundError as e:
        tracker.display.print_error(str(e))
        tracker.display.print_available_exports(
            tracker.loader.data_dir, tracker.loader.list_available_exports()
        )
        return 1
    except json.JSONDecodeError as e:
        tracker.display.print_error(f"Export is not valid JSON: {e}")
        return 1

    return 0 if result is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
