"""Exam records: entry, listing and lookup by name and surname."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

MAX_RECORDS = 300


@dataclass(frozen=True)
class ExamRecord:
    """One student's exam result."""

    surname: str
    name: str
    subject: str
    grade: int
    day: int
    month: str
    year: int

    def format(self) -> str:
        """Render the record as indented labelled lines."""
        return (
            f"\tSurname: {self.surname}\n"
            f"\tName: {self.name}\n"
            f"\tSubject: {self.subject}\n"
            f"\tGrade: {self.grade}\n"
            f"\tDay: {self.day}\n"
            f"\tMonth: {self.month}\n"
            f"\tYear: {self.year}"
        )


def find_student(
    records: Iterable[ExamRecord], name: str, surname: str
) -> List[ExamRecord]:
    """Return the records whose name and surname both match exactly."""
    return [r for r in records if r.name == name and r.surname == surname]


def _ask_int(prompt: str) -> int:
    while True:
        answer = input(prompt).strip()
        try:
            return int(answer)
        except ValueError:
            print("Please enter an integer")


def _read_records() -> List[ExamRecord]:
    count = _ask_int("Number of people to register: ")
    if count < 0 or count > MAX_RECORDS:
        print(f"The number must be between 0 and {MAX_RECORDS}")
        return []
    records = []
    for number in range(1, count + 1):
        print(f"\nPerson {number}")
        surname = input("\tSurname: ")
        name = input("\tName: ")
        subject = input("\tSubject: ")
        grade = _ask_int("\tGrade: ")
        print("\tExam date:")
        day = _ask_int("\tDay: ")
        month = input("\tMonth: ")
        year = _ask_int("\tYear: ")
        records.append(ExamRecord(surname, name, subject, grade, day, month, year))
    return records


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive menu on standard input."""
    records: List[ExamRecord] = []
    try:
        while True:
            print("\nChoose an action")
            print("\t0. Quit\n\t1. Insert\n\t2. Print\n\t3. Find student")
            choice = _ask_int(" Choice: ")
            if choice == 0:
                print("\n*********** Program terminated ***********")
                return 0
            if choice == 1:
                records = _read_records()
            elif choice == 2:
                for number, record in enumerate(records, start=1):
                    print(f"\nPerson {number}")
                    print(record.format())
            elif choice == 3:
                print("Student to look for:")
                name = input("\tName: ")
                surname = input("\tSurname: ")
                matches = find_student(records, name, surname)
                if not matches:
                    print("No student matches the search criteria")
                for record in matches:
                    print(record.format())
            else:
                print("Invalid choice")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())