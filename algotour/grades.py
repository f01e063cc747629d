"""Student grade records and the sample data set used throughout the tour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class CourseScore:
    """A student's score in one course."""

    course_name: str
    score: float
    max_score: int

    def format(self) -> str:
        """Render as ``"<course>: <score> / <max>"`` with two decimals."""
        return f"{self.course_name}: {self.score:.2f} / {self.max_score}\n"


@dataclass(frozen=True)
class StudentGrades:
    """All course scores of one student."""

    first_name: str
    last_name: str
    scores: tuple[CourseScore, ...]

    def format(self) -> str:
        """Render the student's name followed by every course score."""
        header = f"{self.first_name} {self.last_name}\nStudent Grades: \n"
        return header + "".join(score.format() for score in self.scores)


def flat_scores(students: Iterable[StudentGrades]) -> list[float]:
    """Collect every score of every student, in order, into one list."""
    return [course.score for student in students for course in student.scores]


def _student(first: str, last: str, math: float, physics: float,
             chemistry: float, biology: float, english: float) -> StudentGrades:
    courses = (
        ("Math", math),
        ("Physics", physics),
        ("Chemistry", chemistry),
        ("Biology", biology),
        ("English", english),
    )
    return StudentGrades(
        first, last, tuple(CourseScore(name, score, 100) for name, score in courses)
    )


_TYPICAL = (65.0, 70.0, 80.0, 75.0, 72.0)


def get_scores() -> list[StudentGrades]:
    """Return the sample data set of student grades."""
    return [
        _student("John", "Doe", 85.5, 90.0, 78.0, 88.0, 95.0),
        _student("Jane", "Smith", 92.0, 88.5, 95.0, 90.0, 85.0),
        _student("Emily", "Johnson", 76.0, 82.5, 89.0, 91.0, 80.0),
        _student("Denzel", "Washington", *_TYPICAL),
        _student("Fredrico", "Dimarco", *_TYPICAL),
        _student("Christian", "Vieri", *_TYPICAL),
        _student("Michael", "Own", *_TYPICAL),
        _student("Arnold", "Schevienz", *_TYPICAL),
        _student("Steve", "Carel", *_TYPICAL),
        _student("Jackie", "Chan", *_TYPICAL),
        _student("John", "Austin", *_TYPICAL),
    ]


def john_doe_scores() -> StudentGrades:
    """Return the scores of the student omitted from the main data set."""
    return _student("John", "Doe", *_TYPICAL)


def format_all(students: Iterable[StudentGrades]) -> str:
    """Render every student's grades under an ``All Data:`` heading."""
    return "All Data:\n" + "".join(student.format() for student in students)