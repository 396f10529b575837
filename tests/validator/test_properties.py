"""Tests for the property helpers shared by the validator and converters."""

import pytest

from docspec.validator import ValidationError, ValidationMode
from docspec.validator.errors import format_path
from docspec.validator.models import BoundModel, LengthModel
from docspec.validator.properties import (
    check_length,
    format_number,
    is_integral,
    is_name,
    is_number,
    read_bound,
)
from docspec.validator.reporting import Reporter


class TestPredicates:
    @pytest.mark.parametrize("value", [0, -3, 4.5, 1e300])
    def test_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize("value", [True, False, "1", None, float("nan"), float("-inf")])
    def test_not_numbers(self, value):
        assert not is_number(value)

    def test_integral(self):
        assert is_integral(3)
        assert is_integral(3.0)
        assert not is_integral(3.5)

    @pytest.mark.parametrize("value", ["foobar", "FOOBAR", "123456", "foo-bar", "foo_bar"])
    def test_names(self, value):
        assert is_name(value)

    @pytest.mark.parametrize("value", ["foo*bar", "foo bar", "", "foo\n", 42, None])
    def test_not_names(self, value):
        assert not is_name(value)


class TestFormatting:
    @pytest.mark.parametrize(
        "value,expected", [(42, "42"), (42.0, "42"), (0.5, "0.5"), (-3, "-3")]
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_format_path(self):
        assert format_path([]) == "<root>"
        assert format_path(["$users", "[1]", "{x}"]) == "$users.[1].{x}"


class TestReadBound:
    def test_bare_number_is_inclusive(self):
        assert read_bound(5) == BoundModel(value=5, exclusive=False)

    def test_object_form_is_kept(self):
        bound = BoundModel(value=5, exclusive=True)

        assert read_bound(bound) is bound

    def test_absent(self):
        assert read_bound(None) is None


class TestCheckLength:
    def run(self, size, length):
        reporter = Reporter(ValidationMode.COLLECT_ALL)
        ok = check_length(reporter, ["x"], size, length)
        return ok, [e.message for e in reporter.errors]

    def test_exact(self):
        assert self.run(3, 3) == (True, [])
        assert self.run(2, 3) == (False, ["length must be equal to 3"])

    def test_decimal_constraint_is_truncated(self):
        assert self.run(3, 3.7) == (True, [])

    def test_range(self):
        length = LengthModel(minimum=2, maximum=4)

        assert self.run(2, length) == (True, [])
        assert self.run(4, length) == (True, [])
        assert self.run(1, length) == (False, ["length must be equal or greater than 2"])
        assert self.run(5, length) == (False, ["length must be equal or lower than 4"])

    def test_fail_fast_raises(self):
        reporter = Reporter(ValidationMode.FAIL_FAST)

        with pytest.raises(ValidationError) as exc_info:
            check_length(reporter, ["x"], 0, 1)

        assert exc_info.value.path == ["x"]
        assert reporter.errors == [exc_info.value]
