from datetime import datetime

import pytest

from app.core.errors import BadRequestError, NotFoundError
from app.core.utils import parse_datetime, parse_id, trim_inputs
from app.core.validation import (
    Field,
    FieldError,
    collect_values,
    exists,
    is_available,
    is_integer,
    is_number,
    is_string,
    min_length,
    optional,
    raise_for_errors,
    validate,
)
from app.country.models.country_model import Country

NAME = Field("name", [is_string("not a string"), min_length(3, "too short")], required="name required")
CODE = Field("code", [is_string("not a string")], required="code required", column="iso_code")


class TestParsing:
    def test_parse_date(self):
        assert parse_datetime("2018-01-01") == datetime(2018, 1, 1)

    def test_parse_utc_datetime(self):
        assert parse_datetime("2018-01-01T10:00:00.000Z") == datetime(2018, 1, 1, 10)

    def test_parse_offset_datetime(self):
        assert parse_datetime("2018-01-01T10:00:00+02:00") == datetime(2018, 1, 1, 8)

    @pytest.mark.parametrize("value", ["01/01/2018", "yesterday", "", 2018])
    def test_rejects_non_iso_values(self, value):
        with pytest.raises(ValueError):
            parse_datetime(value)

    def test_parse_id(self):
        assert parse_id(7) == 7
        assert parse_id("7") == 7
        assert parse_id("seven") is None
        assert parse_id(True) is None
        assert parse_id(1.5) is None

    def test_parse_id_rejects_unstorable_values(self):
        assert parse_id("²") is None
        assert parse_id("٣") is None
        assert parse_id(2 ** 63) is None
        assert parse_id("99999999999999999999") is None
        assert parse_id(2 ** 63 - 1) == 2 ** 63 - 1

    def test_trim_inputs(self):
        data = {"name": "  Brazil ", "tags": [" a ", 1], "nested": {"code": " BR"}}
        assert trim_inputs(data) == {"name": "Brazil", "tags": ["a", 1], "nested": {"code": "BR"}}


class TestValidate:
    def test_collects_every_violation_in_order(self):
        errors = validate(None, {"name": 12}, [NAME, CODE])
        assert [(error.field, error.message) for error in errors] == [
            ("name", "not a string"),
            ("code", "code required"),
        ]

    def test_stops_at_first_rule_per_field(self):
        errors = validate(None, {"name": 12, "code": "BR"}, [NAME, CODE])
        assert len(errors) == 1

    def test_optional_drops_required(self):
        assert validate(None, {}, optional([NAME, CODE])) == []

    def test_collect_values_maps_columns(self):
        assert collect_values([NAME, CODE], {"name": "Brazil", "code": "BR"}) == {
            "name": "Brazil",
            "iso_code": "BR",
        }

    def test_integer_rule(self):
        rule = is_integer("not an integer")
        assert rule(3, None) is None
        assert rule(3.0, None) is None
        assert rule(3.5, None) is not None
        assert rule(True, None) is not None

    def test_number_rule_rejects_non_finite(self):
        rule = is_number("not a number")
        assert rule(1.5, None) is None
        assert rule(float("inf"), None) is not None
        assert rule(float("nan"), None) is not None

    def test_raise_for_errors(self):
        raise_for_errors([])
        with pytest.raises(BadRequestError):
            raise_for_errors([FieldError("name", "bad")])
        with pytest.raises(NotFoundError):
            raise_for_errors([FieldError("id", "missing", 404)])


class TestDataStoreRules:
    def test_is_available(self, db):
        rule = is_available(Country.name, "in use")
        assert rule("Brazil", db).message == "in use"
        assert rule("Chile", db) is None

    def test_is_available_skips_own_row(self, db):
        rule = is_available(Country.name, "in use", exclude_id=1)
        assert rule("Brazil", db) is None

    def test_exists(self, db):
        rule = exists(Country, "missing")
        assert rule("1", db) is None
        assert rule(999, db).status_code == 404
        assert rule("abc", db).is_not_found
