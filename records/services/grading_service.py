"""Grading service - student result files and grade reports."""

from pathlib import Path
from typing import List, Union

from records.console import print_info
from records.exceptions import InvalidIdFormatError, InvalidScoreFormatError, MissingFieldError
from records.models.domain import Student


class GradingService:
    """
    Service for the school grading program.

    Input files hold one ``id, full name, score`` record per line. Blank
    lines are skipped; any other malformed line aborts the read.
    """

    def read_students_from_file(self, input_path: Union[str, Path]) -> List[Student]:
        """Parse a student results file.

        Raises:
            FileNotFoundError: input file doesn't exist
            MissingFieldError: a line doesn't have exactly three fields
            InvalidIdFormatError: an id isn't an integer
            InvalidScoreFormatError: a score isn't an integer
        """
        students = []

        with open(input_path, encoding='utf-8') as f:
            for line in f:
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                students.append(self.parse_student(line))

        return students

    @staticmethod
    def parse_student(line: str) -> Student:
        parts = line.split(',')
        if len(parts) != 3:
            raise MissingFieldError(f"Invalid record format: {line}")

        try:
            student_id = int(parts[0].strip())
        except ValueError:
            raise InvalidIdFormatError(f"Invalid ID format: {parts[0]}") from None

        full_name = parts[1].strip()

        try:
            score = int(parts[2].strip())
        except ValueError:
            raise InvalidScoreFormatError(f"Invalid score format: {parts[2]}") from None

        return Student(student_id, full_name, score)

    @staticmethod
    def format_report_line(student: Student) -> str:
        return f"{student.full_name} (ID: {student.id}): Score = {student.score}, Grade = {student.grade}"

    def write_report_to_file(self, students: List[Student], output_path: Union[str, Path]) -> None:
        """Write one report line per student and echo each to the console."""
        with open(output_path, 'w', encoding='utf-8') as f:
            for student in students:
                report_line = self.format_report_line(student)
                f.write(report_line + "\n")
                print(report_line)

        print_info(f"You can also find this report in: {output_path}")
