import pytest

from algotour.grades import (
    CourseScore,
    StudentGrades,
    flat_scores,
    format_all,
    get_scores,
    john_doe_scores,
)


def test_course_score_format():
    assert CourseScore("Math", 85.5, 100).format() == "Math: 85.50 / 100\n"


def test_student_format_contains_every_course():
    student = get_scores()[0]
    text = student.format()
    assert text.startswith(f"{student.first_name} {student.last_name}\nStudent Grades: \n")
    for course in student.scores:
        assert course.format() in text


def test_student_format_line_count():
    student = john_doe_scores()
    lines = student.format().splitlines()
    assert len(lines) == 2 + len(student.scores)


def test_flat_scores_count_matches_courses():
    students = get_scores()
    flat = flat_scores(students)
    assert len(flat) == sum(len(s.scores) for s in students)


def test_flat_scores_order():
    students = get_scores()
    flat = flat_scores(students)
    assert flat[: len(students[0].scores)] == [c.score for c in students[0].scores]
    assert flat[0] == 85.5


def test_flat_scores_empty():
    assert flat_scores([]) == []


def test_john_doe_matches_typical_student():
    extra = john_doe_scores()
    denzel = get_scores()[3]
    assert flat_scores([extra]) == flat_scores([denzel])
    assert (extra.first_name, extra.last_name) == ("John", "Doe")


def test_all_max_scores_are_100():
    assert {c.max_score for s in get_scores() for c in s.scores} == {100}


def test_format_all_heading_and_students():
    students = get_scores()
    text = format_all(students)
    assert text.startswith("All Data:\n")
    assert text == "All Data:\n" + "".join(s.format() for s in students)


def test_records_are_immutable():
    score = CourseScore("Math", 1.0, 100)
    with pytest.raises(AttributeError):
        score.score = 2.0  # type: ignore[misc]
    assert score.score == 1.0
    assert score.format() == "Math: 1.00 / 100\n"


def test_student_equality():
    assert john_doe_scores() == john_doe_scores()
    assert StudentGrades("A", "B", ()).format() == "A B\nStudent Grades: \n"