import pytest

from userstore.errors import AgeOutOfRangeError, NameInvalidError, ValidationError
from userstore.validation import validate


@pytest.mark.parametrize("age", [0, 1, 75, 149, 150])
@pytest.mark.parametrize("length", [1, 2, 50, 99, 100])
def test_valid(age, length):
    validate("a" * length, age)


@pytest.mark.parametrize("age", [-100, -1, 151, 1000])
def test_age_out_of_range(age):
    with pytest.raises(AgeOutOfRangeError) as exc_info:
        validate("Alice", age)

    assert exc_info.value.message == "Age must be between 0 and 150."


@pytest.mark.parametrize("age", [True, 25.0, "25", None])
def test_age_not_an_integer(age):
    with pytest.raises(AgeOutOfRangeError):
        validate("Alice", age)


@pytest.mark.parametrize("name", ["", "a" * 101, "a" * 1000])
def test_name_invalid(name):
    with pytest.raises(NameInvalidError) as exc_info:
        validate(name, 25)

    assert exc_info.value.message == "Name must be between 1 and 100 characters."


@pytest.mark.parametrize("name", [None, b"Alice", 42])
def test_name_not_a_string(name):
    with pytest.raises(NameInvalidError):
        validate(name, 25)


def test_length_counts_characters():
    validate("é" * 100, 25)
    validate("🙂" * 100, 25)


def test_age_checked_first():
    with pytest.raises(AgeOutOfRangeError):
        validate("", -1)


def test_error_hierarchy():
    assert issubclass(AgeOutOfRangeError, ValidationError)
    assert issubclass(NameInvalidError, ValidationError)

    err = AgeOutOfRangeError("Invalid age", "Age must be between 0 and 150.")
    assert str(err) == "Invalid age. Age must be between 0 and 150."
