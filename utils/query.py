from decimal import Decimal
from typing import Mapping, NamedTuple

from utils.errors import InvalidArgumentError

Scalar = str | int | float | Decimal | bool | None


class SetClause(NamedTuple):
    clause: str
    values: list[Scalar]


def build_set_clause(
    update_fields: Mapping[str, Scalar],
    column_map: Mapping[str, str] | None = None
) -> SetClause:
    """
    부분 수정(PATCH)용 UPDATE SET 절 생성.

    전달된 필드만 SET 절에 포함되며, 순서는 update_fields의 순서를 따른다.

    Args:
        update_fields: 업데이트할 필드와 값 {"firstName": "Aliya", "age": 32}
        column_map: 필드명 -> DB 컬럼 매핑 {"firstName": "first_name"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용

    Returns:
        SetClause(clause, values)
        - clause: '"first_name"=$1, "age"=$2'
        - values: ["Aliya", 32]  ($1, $2 ... 순서와 동일)

    Raises:
        InvalidArgumentError: update_fields가 비어 있는 경우

    Example:
        >>> build_set_clause({"companyHandle": "ibm"}, {"companyHandle": "company_handle"})
        SetClause(clause='"company_handle"=$1', values=['ibm'])
    """
    if not update_fields:
        raise InvalidArgumentError("No data")

    column_map = column_map or {}
    set_parts = [
        f'"{column_map.get(field_name, field_name)}"=${idx}'
        for idx, field_name in enumerate(update_fields, start=1)
    ]

    return SetClause(", ".join(set_parts), list(update_fields.values()))


def build_update_query(
    table: str,
    update_fields: Mapping[str, Scalar],
    column_map: Mapping[str, str] | None,
    key_column: str,
    key_value: Scalar,
    returning: str,
) -> tuple[str, list[Scalar]]:
    """
    SET 절 + WHERE 절을 합쳐 완성된 UPDATE 쿼리 생성.

    WHERE 조건 값은 항상 마지막 파라미터($n+1)로 바인딩된다.
    table, key_column, returning은 코드에 하드코딩된 값만 넘길 것 (SQL Injection 방지)
    """
    set_clause, values = build_set_clause(update_fields, column_map)
    key_idx = len(values) + 1

    query = (
        f"UPDATE {table} "
        f"SET {set_clause} "
        f"WHERE {key_column} = ${key_idx} "
        f"RETURNING {returning}"
    )
    return query, [*values, key_value]
