# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Command-line front end for the tracker.
#   Positions shown and accepted here are 1-based.
#
# COMMANDS:
# ---------
# 1. Show subjects:
#    bunkit list
#
# 2. Add a subject (attended and missed as typed):
#    bunkit add "Physics" 18 2
#
# 3. Edit a subject (omitted fields keep their current value):
#    bunkit edit 1 --name "Physics II" --missed 3
#
# 4. Delete a subject (confirmation required):
#    bunkit delete 1 --yes
#
# 5. Record today's class:
#    bunkit attend 1
#    bunkit miss 1
#
# 6. Show storage status:
#    bunkit status
#
#  Also runnable as: python -m bunkit.cli <command>
#
# ==============================================

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from bunkit import __version__
from bunkit.attendance_tracker import AttendanceTracker, SubjectRow
from bunkit.config import get_config
from bunkit.subjects.derivation import AttendanceColor
from bunkit.subjects.store import INDEX_OUT_OF_RANGE, INVALID_COUNT, INVALID_NAME

EXIT_OK = 0
EXIT_REJECTED = 1

_REJECTION_MESSAGES = {
    INVALID_NAME: "Subject name must not be blank.",
    INVALID_COUNT: "Attended and missed classes must be whole numbers.",
    INDEX_OUT_OF_RANGE: "No subject at that position.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bunkit",
        description="Track class attendance and see how many classes you can bunk.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-file",
        help="JSON file used as the key-value store (overrides BUNKIT_DATA_FILE)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show all subjects")

    add_parser = subparsers.add_parser("add", help="Add a subject")
    add_parser.add_argument("name")
    add_parser.add_argument("attended", help="Classes attended")
    add_parser.add_argument("missed", help="Classes missed")

    edit_parser = subparsers.add_parser("edit", help="Edit a subject")
    edit_parser.add_argument("position", type=int)
    edit_parser.add_argument("--name")
    edit_parser.add_argument("--attended")
    edit_parser.add_argument("--missed")

    delete_parser = subparsers.add_parser("delete", help="Delete a subject")
    delete_parser.add_argument("position", type=int)
    delete_parser.add_argument(
        "--yes", action="store_true", help="Confirm the deletion"
    )

    attend_parser = subparsers.add_parser("attend", help="Attended this class")
    attend_parser.add_argument("position", type=int)

    miss_parser = subparsers.add_parser("miss", help="Missed this class")
    miss_parser.add_argument("position", type=int)

    subparsers.add_parser("status", help="Show storage status")

    return parser


def format_row(row: SubjectRow) -> str:
    marker = "+" if row.color is AttendanceColor.OK else "!"
    return (
        f"{row.index + 1}. {row.name}\n"
        f"   Attended: {row.attended}, Total: {row.total}\n"
        f"   {row.percentage_text}\n"
        f"   [{marker}] {row.status}"
    )


def print_subjects(tracker: AttendanceTracker) -> None:
    rows = tracker.rows()
    if not rows:
        print("No subjects added yet")
        return
    for row in rows:
        print(format_row(row))


def _report(result, success_template: str) -> int:
    if result.ok:
        print(success_template.format(name=result.subject.name))
        return EXIT_OK
    print(_REJECTION_MESSAGES.get(result.reason, "Nothing changed."), file=sys.stderr)
    return EXIT_REJECTED


def run(args: argparse.Namespace, tracker: AttendanceTracker) -> int:
    command = args.command

    if command == "list":
        print_subjects(tracker)
        return EXIT_OK

    if command == "status":
        for key, value in tracker.get_status().items():
            print(f"{key}: {value}")
        return EXIT_OK

    if command == "add":
        result = tracker.add_subject(args.name, args.attended, args.missed)
        return _report(result, "Added {name}")

    index = args.position - 1

    if command == "edit":
        name, attended, missed = args.name, args.attended, args.missed
        fields = tracker.edit_fields(index)
        if fields is not None:
            name = fields.name if name is None else name
            attended = fields.attended if attended is None else attended
            missed = fields.missed if missed is None else missed
        result = tracker.update_subject(index, name, attended, missed)
        return _report(result, "Updated {name}")

    if command == "delete":
        subject = tracker.store.get(index)
        if subject is not None and not args.yes:
            print(
                f"Are you sure you want to delete {subject.name}? "
                "Re-run with --yes to confirm.",
                file=sys.stderr,
            )
            return EXIT_REJECTED
        return _report(tracker.delete_subject(index), "Deleted {name}")

    if command in ("attend", "miss"):
        if command == "attend":
            result = tracker.mark_attended(index)
        else:
            result = tracker.mark_missed(index)
        if result.ok:
            print(format_row(SubjectRow.from_subject(index, result.subject)))
            return EXIT_OK
        return _report(result, "{name}")

    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    if args.data_file:
        config = replace(config, storage=replace(config.storage, data_file=args.data_file))

    logging.basicConfig(
        level=config.logging_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tracker = AttendanceTracker(config)
    return run(args, tracker)


if __name__ == "__main__":
    sys.exit(main())
