"""Command-line front end for managing student records."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from studentdesk.records import (
    DEFAULT_DATA_FILE,
    TABLE_HEADERS,
    IncompleteDataError,
    StudentNotFoundError,
    StudentStore,
    make_student,
    table_rows,
)

APP_NAME = "Student Data Manager"
VERSION = "1.0.0"

ABOUT_TEXT = (
    f"App Name: {APP_NAME}\n"
    "Description: This software is designed to manage student data for schools "
    "and colleges. It allows administrators to input and organize information "
    "such as student names, grades, and other relevant data.\n"
    f"Version: {VERSION}"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="studentdesk", description=f"{APP_NAME}: keep student records."
    )
    parser.add_argument(
        "--data-file",
        default=DEFAULT_DATA_FILE,
        help=f"file holding the records (default: {DEFAULT_DATA_FILE})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="add a new student")
    add.add_argument("--name", required=True)
    add.add_argument("--roll", type=int, required=True)
    add.add_argument("--class", dest="stu_class", required=True)
    add.add_argument("--div", required=True)
    add.add_argument("--physics", type=int, default=0)
    add.add_argument("--chemistry", type=int, default=0)
    add.add_argument("--maths", type=int, default=0)

    edit = commands.add_parser("edit", help="edit a stored student")
    edit.add_argument("roll", type=int)
    edit.add_argument("--name")
    edit.add_argument("--class", dest="stu_class")
    edit.add_argument("--div")
    edit.add_argument("--physics", type=int)
    edit.add_argument("--chemistry", type=int)
    edit.add_argument("--maths", type=int)

    commands.add_parser("show", help="show the table of students")
    commands.add_parser("about", help="show information about the program")
    return parser


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _add(store: StudentStore, args: argparse.Namespace) -> int:
    try:
        student = make_student(
            args.name,
            args.roll,
            args.stu_class,
            args.div,
            args.physics,
            args.chemistry,
            args.maths,
        )
    except IncompleteDataError as exc:
        print(f"Incomplete: {exc}", file=sys.stderr)
        return _fail("Failed to add new student :(")
    for line in student.summary_lines():
        print(line)
    store.append(student)
    print("Student was added successfully!")
    return 0


def _edit(store: StudentStore, args: argparse.Namespace) -> int:
    try:
        current = store.find(args.roll)
    except IncompleteDataError as exc:
        print(f"Incomplete: {exc}", file=sys.stderr)
        return _fail("Data wasn't edited successfully!")
    except OSError:
        print("Error: Error opening file!", file=sys.stderr)
        return _fail("Data wasn't edited successfully!")
    except StudentNotFoundError as exc:
        print(f"Not Found: {exc}", file=sys.stderr)
        return _fail("Data wasn't edited successfully!")

    def pick(new, old):
        return old if new is None else new

    updated = store.update(
        args.roll,
        pick(args.name, current.name),
        pick(args.stu_class, current.stu_class),
        pick(args.div, current.div),
        pick(args.physics, current.p),
        pick(args.chemistry, current.c),
        pick(args.maths, current.m),
    )
    for line in updated.summary_lines():
        print(line)
    print("Data was edited successfully!")
    return 0


def _show(store: StudentStore) -> int:
    try:
        students = store.load()
    except OSError:
        students = []
    rows = [TABLE_HEADERS, *table_rows(students)]
    widths = [max(len(row[col]) for row in rows) for col in range(len(TABLE_HEADERS))]
    for row in rows:
        print("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = build_parser().parse_args(argv)
    store = StudentStore(args.data_file)
    if args.command == "add":
        return _add(store, args)
    if args.command == "edit":
        return _edit(store, args)
    if args.command == "show":
        return _show(store)
    print(ABOUT_TEXT)
    return 0


if __name__ == "__main__":
    sys.exit(main())