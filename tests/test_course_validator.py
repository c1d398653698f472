import pytest

from course_validator import ensure_valid, validate_courses
from errors import CourseValidationError
from tests.helpers import course


def test_valid_batch():
    entries = [course("CS101", "Intro", ["Programming"]), course("CS102", "Next", [], units=1.5)]
    result = validate_courses(entries)
    assert result.ok
    assert result.violations == []
    assert [c.code for c in result.courses] == ["CS101", "CS102"]
    assert result.courses[1].units == 1.5


def test_empty_batch_is_valid():
    result = validate_courses([])
    assert result.ok
    assert result.courses == []


def test_non_list_is_format_error():
    result = validate_courses({"code": "CS101"})
    assert not result.ok
    assert len(result.violations) == 1
    assert result.violations[0].index is None
    assert "Expected an array" in result.violations[0].message


@pytest.mark.parametrize(
    "entry, field",
    [
        ({"description": "Intro", "units": 3, "tags": []}, "code"),
        (course(101, "Intro", []), "code"),
        (course("", "Intro", []), "code"),
        (course("CS101", None, []), "description"),
        (course("CS101", "Intro", [], units="3"), "units"),
        (course("CS101", "Intro", [], units=True), "units"),
        ({"code": "CS101", "description": "Intro", "units": 3, "tags": "Programming"}, "tags"),
        (course("CS101", "Intro", ["Programming", 7]), "tags"),
    ],
)
def test_invalid_fields(entry, field):
    result = validate_courses([entry])
    assert not result.ok
    assert result.courses == []
    assert [v.field for v in result.violations] == [field]
    assert result.violations[0].index == 0


def test_non_object_entry():
    result = validate_courses([course("CS101", "Intro", []), "CS102"])
    assert not result.ok
    assert result.violations[0].index == 1
    assert result.violations[0].message == "must be an object"


def test_one_bad_entry_rejects_whole_batch():
    entries = [course("CS101", "Intro", []), course("CS102", "Next", [], units="3"), course("CS103", "Last", [])]
    result = validate_courses(entries)
    assert not result.ok
    assert result.courses == []
    assert str(result.violations[0]) == "course #1: units must be a number"


def test_extra_keys_are_dropped():
    entry = dict(course("CS101", "Intro", ["BSIT"]), year="1st")
    (c,) = ensure_valid([entry])
    assert c.model_dump() == course("CS101", "Intro", ["BSIT"])


def test_ensure_valid_raises_with_violations():
    with pytest.raises(CourseValidationError) as exc:
        ensure_valid([course("CS101", "Intro", [], units="3")])
    assert len(exc.value.violations) == 1
    assert "units" in str(exc.value)


@pytest.mark.parametrize("units", [2 ** 63, -(2 ** 63) - 1, float("nan"), float("inf")])
def test_units_must_fit_the_store(units):
    result = validate_courses([course("CS101", "Intro", [], units=units)])
    assert not result.ok
    assert [v.field for v in result.violations] == ["units"]


def test_int64_bounds_are_accepted():
    result = validate_courses([course("CS101", "Intro", [], units=2 ** 63 - 1)])
    assert result.ok
