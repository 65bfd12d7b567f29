"""
UPDATE SET 절 생성 유틸 테스트

실행 방법:
    pip install -e ".[dev]"
    pytest tests/test_query.py -v
"""
import re
from decimal import Decimal

import pytest

from utils.errors import InvalidArgumentError
from utils.query import SetClause, build_set_clause, build_update_query


class TestBuildSetClause:
    """build_set_clause 테스트"""

    def test_translates_mapped_fields(self):
        """매핑된 필드는 컬럼명으로, 나머지는 그대로"""
        result = build_set_clause({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})

        assert result.clause == '"first_name"=$1, "age"=$2'
        assert result.values == ["Aliya", 32]

    def test_single_field(self):
        result = build_set_clause({"companyHandle": "ibm"}, {"companyHandle": "company_handle"})

        assert result == SetClause('"company_handle"=$1', ["ibm"])

    def test_tuple_unpacking(self):
        """기존 (clause, values) 튜플 방식으로도 사용 가능"""
        clause, values = build_set_clause({"title": "Engineer"})

        assert clause == '"title"=$1'
        assert values == ["Engineer"]

    def test_without_column_map(self):
        result = build_set_clause({"name": "IBM", "description": "Big Blue"})

        assert result.clause == '"name"=$1, "description"=$2'

    def test_empty_column_map(self):
        result = build_set_clause({"name": "IBM"}, {})

        assert result.clause == '"name"=$1'

    def test_unused_column_map_entries_ignored(self):
        """매핑에만 있고 전송되지 않은 필드는 SET 절에 포함되지 않음"""
        result = build_set_clause({"name": "IBM"}, {"numEmployees": "num_employees", "logoUrl": "logo_url"})

        assert result.clause == '"name"=$1'
        assert result.values == ["IBM"]

    def test_scalar_values_kept_as_is(self):
        """문자열/숫자/불리언/None 값은 변환 없이 그대로 전달"""
        fields = {"a": "text", "b": 1, "c": 1.5, "d": Decimal("0.25"), "e": True, "f": None}

        result = build_set_clause(fields)

        assert result.values == ["text", 1, 1.5, Decimal("0.25"), True, None]

    def test_empty_fields_raises(self):
        """수정할 필드가 없으면 InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            build_set_clause({}, {"firstName": "first_name"})

        assert exc_info.value.message == "No data"
        assert str(exc_info.value) == "No data"

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            build_set_clause({})

    def test_inputs_not_mutated(self):
        fields = {"firstName": "Aliya", "age": 32}
        column_map = {"firstName": "first_name"}

        build_set_clause(fields, column_map)

        assert fields == {"firstName": "Aliya", "age": 32}
        assert column_map == {"firstName": "first_name"}

    def test_same_input_same_output(self):
        fields = {"numEmployees": 10, "logoUrl": "/logo.png", "name": "IBM"}
        column_map = {"numEmployees": "num_employees", "logoUrl": "logo_url"}

        assert build_set_clause(fields, column_map) == build_set_clause(fields, column_map)

    @pytest.mark.parametrize("size", [1, 2, 5, 12])
    def test_placeholders_match_values(self, size):
        """$1..$n 이 빈틈없이 순서대로, values 와 1:1 대응"""
        fields = {f"field{i}": i * 10 for i in range(size)}
        column_map = {"field0": "first_column"}

        clause, values = build_set_clause(fields, column_map)
        parts = clause.split(", ")

        assert len(parts) == size
        assert len(values) == size
        for idx, (part, key) in enumerate(zip(parts, fields), start=1):
            column, placeholder = re.fullmatch(r'"([^"]+)"=\$(\d+)', part).groups()
            assert int(placeholder) == idx
            assert column == column_map.get(key, key)
            assert values[idx - 1] == fields[key]


class TestBuildUpdateQuery:
    """build_update_query 테스트"""

    def test_where_param_after_set_params(self):
        """WHERE 조건 값은 항상 마지막 위치($n+1)"""
        query, params = build_update_query(
            "jobs",
            {"title": "Engineer", "companyHandle": "ibm"},
            {"companyHandle": "company_handle"},
            key_column="id",
            key_value=7,
            returning="id, title",
        )

        assert query == (
            'UPDATE jobs SET "title"=$1, "company_handle"=$2 '
            'WHERE id = $3 RETURNING id, title'
        )
        assert params == ["Engineer", "ibm", 7]

    def test_key_value_not_interpolated(self):
        query, params = build_update_query(
            "companies", {"name": "IBM"}, None,
            key_column="handle", key_value="ibm'; DROP TABLE companies; --",
            returning="handle",
        )

        assert "DROP TABLE" not in query
        assert params[-1] == "ibm'; DROP TABLE companies; --"

    def test_empty_fields_raises(self):
        with pytest.raises(InvalidArgumentError):
            build_update_query("companies", {}, None, key_column="handle", key_value="ibm", returning="handle")
