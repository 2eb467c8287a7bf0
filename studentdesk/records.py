"""Student records and the plain-text file that stores them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

DEFAULT_DATA_FILE = "studentData.txt"
MAX_TOTAL = 150
TABLE_HEADERS = ("Name", "Roll No.", "Class", "Div")
FIELD_COUNT = 8

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class IncompleteDataError(ValueError):
    """Raised when required student data is missing."""


class StudentNotFoundError(LookupError):
    """Raised when no stored student has the requested roll number."""


def _to_int(word: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(word):
        raise ValueError(f"not an integer: {word!r}")
    return int(word)


@dataclass
class Student:
    """One student's basic data and marks."""

    name: str = ""
    roll: int = 0
    stu_class: str = ""
    div: str = ""
    p: int = 0
    c: int = 0
    m: int = 0
    total: int | None = None

    def __post_init__(self) -> None:
        if self.total is None:
            self.total = self.p + self.c + self.m

    def to_line(self) -> str:
        """Return the record as one space-separated line, without newline."""
        return " ".join(
            str(value)
            for value in (
                self.name,
                self.roll,
                self.stu_class,
                self.div,
                self.p,
                self.c,
                self.m,
                self.total,
            )
        )

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Student":
        """Build a student from the eight fields of a stored record."""
        if len(fields) != FIELD_COUNT:
            raise ValueError(
                f"expected {FIELD_COUNT} fields, got {len(fields)}"
            )
        name, roll, stu_class, div, p, c, m, total = fields
        return cls(
            name=name,
            roll=_to_int(roll),
            stu_class=stu_class,
            div=div,
            p=_to_int(p),
            c=_to_int(c),
            m=_to_int(m),
            total=_to_int(total),
        )

    def summary_lines(self) -> list[str]:
        """Return the review lines shown before a new record is saved."""
        return [
            f"Name: {self.name}",
            f"Class: {self.stu_class}",
            f"Div: {self.div}",
            f"Roll No.: {self.roll}",
            f"Physics: {self.p}",
            f"Chemistry: {self.c}",
            f"Mathematics: {self.m}",
            f"Total: {self.total} / {MAX_TOTAL}",
        ]


def make_student(
    name: str, roll: int, stu_class: str, div: str, p: int, c: int, m: int
) -> Student:
    """Validate the entered data and return a new student with its total."""
    if not name or roll == 0:
        raise IncompleteDataError("Please fill the required data!")
    if p == 0 or c == 0 or m == 0:
        raise IncompleteDataError("Please enter the required marks!")
    return Student(name=name, roll=roll, stu_class=stu_class, div=div, p=p, c=c, m=m)


def _iter_records(text: str) -> Iterator[Student]:
    words = text.split()
    for start in range(0, len(words) - FIELD_COUNT + 1, FIELD_COUNT):
        try:
            yield Student.from_fields(words[start:start + FIELD_COUNT])
        except ValueError:
            return


def parse_records(text: str) -> list[Student]:
    """Parse stored records, stopping at the first malformed or partial one."""
    return list(_iter_records(text))


def table_rows(students: Iterable[Student]) -> list[tuple[str, str, str, str]]:
    """Return one row per student for the columns in TABLE_HEADERS."""
    return [(s.name, str(s.roll), s.stu_class, s.div) for s in students]


class StudentStore:
    """Student records kept one per line in a text file."""

    def __init__(self, path: str | Path = DEFAULT_DATA_FILE) -> None:
        self.path = Path(path)

    def load(self) -> list[Student]:
        """Read every well-formed record; raises OSError if the file cannot be read."""
        return parse_records(self.path.read_text(encoding="utf-8"))

    def append(self, student: Student) -> None:
        """Add one record to the end of the file, creating it if needed."""
        with self.path.open("a", encoding="utf-8") as fout:
            fout.write(student.to_line() + "\n")

    def find(self, roll: int) -> Student:
        """Return the first stored student with this roll number."""
        if roll == 0:
            raise IncompleteDataError("Please enter the roll number!")
        for student in self.load():
            if student.roll == roll:
                return student
        raise StudentNotFoundError("Student not found!")

    def update(
        self,
        roll: int,
        name: str,
        stu_class: str,
        div: str,
        p: int,
        c: int,
        m: int,
    ) -> Student:
        """Replace the data of the first student with this roll and rewrite the file."""
        students = self.load()
        target = next((s for s in students if s.roll == roll), None)
        if target is None:
            raise StudentNotFoundError("Student not found!")
        target.name = name
        target.stu_class = stu_class
        target.div = div
        target.p = p
        target.c = c
        target.m = m
        target.total = p + c + m
        self.save_all(students)
        return target

    def save_all(self, students: Iterable[Student]) -> None:
        """Overwrite the file with the given records."""
        with self.path.open("w", encoding="utf-8") as fout:
            for student in students:
                fout.write(student.to_line() + "\n")