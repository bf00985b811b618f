import pytest

from jobly.errors import ValidationError
from jobly.sql import SqlFragments, sql_for_partial_update


class TestPartialUpdate:
    def test_translates_columns(self):
        set_cols, values = sql_for_partial_update(
            {"first_name": "Aliya", "age": 32},
            {"first_name": "firstName", "age": "age"},
        )
        assert set_cols == '"firstName"=?1, "age"=?2'
        assert values == ["Aliya", 32]

    def test_placeholder_index_matches_position(self):
        data = {"a": 1, "b": None, "c": "x", "d": 4.5}
        set_cols, values = sql_for_partial_update(data, {k: k for k in data})
        fragments = set_cols.split(", ")
        assert len(fragments) == len(values) == 4
        for n, fragment in enumerate(fragments, start=1):
            assert fragment.endswith(f"=?{n}")
        assert values == [1, None, "x", 4.5]

    def test_keeps_data_order(self):
        set_cols, values = sql_for_partial_update(
            {"salary": 5, "title": "T"}, {"title": "title", "salary": "salary"}
        )
        assert set_cols == '"salary"=?1, "title"=?2'
        assert values == [5, "T"]

    @pytest.mark.parametrize("column_map", [{}, {"title": "title"}])
    def test_empty_data_rejected(self, column_map):
        with pytest.raises(ValidationError, match="No data"):
            sql_for_partial_update({}, column_map)

    def test_field_outside_allowlist_rejected(self):
        with pytest.raises(ValidationError, match="company_handle"):
            sql_for_partial_update(
                {"title": "New", "company_handle": "c2"}, {"title": "title"}
            )

    def test_untrusted_key_never_reaches_sql(self):
        with pytest.raises(ValidationError):
            sql_for_partial_update({'title"=1; DROP TABLE jobs; --': "x"}, {"title": "title"})


class TestSqlFragments:
    def test_empty(self):
        fragments = SqlFragments()
        assert not fragments
        assert fragments.render(" AND ") == ("", [])
        assert fragments.next_position == 1

    def test_literal_consumes_no_position(self):
        fragments = SqlFragments()
        fragments.add("a = {}", 1)
        fragments.add("flag > 0")
        fragments.add("b >= {}", 2)
        assert fragments.render(" AND ") == ("a = ?1 AND flag > 0 AND b >= ?2", [1, 2])
        assert len(fragments) == 3
        assert fragments.next_position == 3

    def test_start_offset(self):
        fragments = SqlFragments(start=4)
        fragments.add("x = {}", "v")
        assert fragments.render(", ") == ("x = ?4", ["v"])
        assert fragments.next_position == 5

    def test_marker_count_must_match_values(self):
        with pytest.raises(ValueError):
            SqlFragments().add("a = {} AND b = {}", 1)
