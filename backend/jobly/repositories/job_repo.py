# Data access for the jobs table. Builds parameterized SQL, runs it on the
# Store and maps missing rows to NotFoundError. Store errors pass through.
from collections.abc import Mapping
from typing import Any

from jobly.database import Store
from jobly.errors import NotFoundError, ValidationError
from jobly.sql import SqlFragments, sql_for_partial_update

JOB_COLUMNS = "id, title, salary, equity, company_handle"

# Updatable fields -> columns. id and company_handle never change after insert.
UPDATABLE_COLUMNS = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

FILTERS = frozenset({"title", "min_salary", "has_equity"})


class JobRepository:
    def __init__(self, store: Store):
        self.store = store

    def create(
        self,
        *,
        title: str,
        salary: int | None,
        equity: str | None,
        company_handle: str,
    ) -> dict[str, Any]:
        """Insert a job and return it, including the id the database assigned."""
        result = self.store.execute(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES (?1, ?2, ?3, ?4)
                RETURNING {JOB_COLUMNS}""",
            [title, salary, equity, company_handle],
        )
        return result.rows[0]

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """List jobs ordered by title.

        Supported filters:
            title: case-insensitive (Unicode casefold) substring of the title. ``%`` and ``_``
                in the value act as LIKE wildcards.
            min_salary: inclusive lower bound on salary.
            has_equity: when true, only jobs with equity above zero.
        """
        filters = filters or {}
        unknown = set(filters) - FILTERS
        if unknown:
            raise ValidationError(f"Unknown filter: {', '.join(sorted(unknown))}")

        where = SqlFragments()
        if filters.get("title") is not None:
            where.add("casefold(title) LIKE casefold({})", f"%{filters['title']}%")
        if filters.get("min_salary") is not None:
            where.add("salary >= {}", filters["min_salary"])
        if filters.get("has_equity"):
            where.add("CAST(equity AS REAL) > 0")

        conditions, values = where.render(" AND ")
        query = f"SELECT {JOB_COLUMNS} FROM jobs"
        if where:
            query += f" WHERE {conditions}"
        query += " ORDER BY title"

        return self.store.execute(query, values).rows

    def get(self, job_id: int) -> dict[str, Any]:
        result = self.store.execute(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = ?1",
            [job_id],
        )
        if not result.rows:
            raise NotFoundError(f"No job: {job_id}")
        return result.rows[0]

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partial update: only the fields present in ``data`` change.

        Raises:
            ValidationError: ``data`` is empty or names id, company_handle or
                any other field outside UPDATABLE_COLUMNS.
            NotFoundError: no job has ``job_id``.
        """
        set_cols, values = sql_for_partial_update(data, UPDATABLE_COLUMNS)
        id_idx = len(values) + 1

        result = self.store.execute(
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = ?{id_idx}
                RETURNING {JOB_COLUMNS}""",
            [*values, job_id],
        )
        if not result.rows:
            raise NotFoundError(f"No job: {job_id}")
        return result.rows[0]

    def remove(self, job_id: int) -> None:
        result = self.store.execute(
            "DELETE FROM jobs WHERE id = ?1 RETURNING id",
            [job_id],
        )
        if not result.rows:
            raise NotFoundError(f"No job: {job_id}")
