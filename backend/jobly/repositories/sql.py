"""SQL fragment builders shared by the repositories.

Both builders return a ``SqlClause``: SQL text that only ever contains
column names chosen by the caller, plus the values that go with its
``:p1 .. :pN`` bind parameters. Values are never interpolated into the text.
"""

from typing import Any, Mapping, NamedTuple

from jobly.errors import JoblyError


class SqlClause(NamedTuple):
    sql: str
    values: list

    def params(self, start: int = 1) -> dict[str, Any]:
        """Bind parameter dict for ``text()``: {"p1": values[0], ...}."""
        return {bind_name(i): value for i, value in enumerate(self.values, start)}


def bind_name(index: int) -> str:
    return f"p{index}"


def _quote(column: str) -> str:
    return '"' + column.replace('"', '""') + '"'


def _escape_like(value: str) -> str:
    # LIKE wildcards in user input match literally
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str] | None = None,
) -> SqlClause:
    """Build the SET clause of a partial update.

    Args:
        data: Field name -> new value, only the fields being changed
        js_to_sql: Field name -> column name, for fields whose column differs

    Returns:
        SqlClause whose sql is like '"first_name"=:p1, "age"=:p2' and whose
        values are in the same order as ``data``.

    Raises:
        JoblyError (validation): if ``data`` is empty

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        SqlClause(sql='"first_name"=:p1, "age"=:p2', values=['Aliya', 32])
    """
    if not data:
        raise JoblyError.validation("No data")

    js_to_sql = js_to_sql or {}
    cols = [
        f"{_quote(js_to_sql.get(name, name))}=:{bind_name(i)}"
        for i, name in enumerate(data, 1)
    ]
    return SqlClause(", ".join(cols), list(data.values()))


def sql_for_job_filters(
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool = False,
    company_handle: str | None = None,
) -> SqlClause:
    """Build the WHERE predicate for a job search.

    Only filters that are present contribute a clause; the clauses are
    ANDed together. LIKE wildcards in ``title`` are escaped so it matches as a
    literal substring. ``has_equity`` adds ``equity > 0`` when true and binds
    nothing. With no filters the predicate is ``1 = 1`` so every job matches.
    """
    clauses = []
    values = []

    if title:
        values.append(f"%{_escape_like(title)}%")
        clauses.append(f"lower(title) LIKE lower(:{bind_name(len(values))}) ESCAPE '\\'")
    if min_salary is not None:
        values.append(min_salary)
        clauses.append(f"salary >= :{bind_name(len(values))}")
    if has_equity:
        clauses.append("equity > 0")
    if company_handle:
        values.append(company_handle)
        clauses.append(f"company_handle = :{bind_name(len(values))}")

    if not clauses:
        return SqlClause("1 = 1", [])
    return SqlClause(" AND ".join(clauses), values)
