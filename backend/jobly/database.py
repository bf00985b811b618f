from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from fastapi import Request
from sqlalchemy import Engine, create_engine, event

from jobly.config import settings


def _casefold(value):
    return value.casefold() if value is not None else None


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Unicode case folding for title search; LIKE folds ASCII only.
    dbapi_conn.create_function("casefold", 1, _casefold, deterministic=True)


def get_engine(db_path: Path | None = None) -> Engine:
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


SCHEMA_SQL = """\
-- ============================================================
-- COMPANIES
-- ============================================================
CREATE TABLE IF NOT EXISTS companies (
    handle        TEXT PRIMARY KEY CHECK (handle = lower(handle)),
    name          TEXT NOT NULL UNIQUE,
    num_employees INTEGER CHECK (num_employees >= 0),
    description   TEXT,
    logo_url      TEXT
);

-- ============================================================
-- JOBS
-- ============================================================
CREATE TABLE IF NOT EXISTS jobs (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    title          TEXT NOT NULL,
    salary         INTEGER CHECK (salary >= 0),
    equity         TEXT CHECK (
                       equity IS NULL OR (
                           equity GLOB '[01]*'
                           AND equity NOT GLOB '*[^0-9.]*'
                           AND equity NOT GLOB '*.*.*'
                           AND CAST(equity AS REAL) BETWEEN 0 AND 1
                       )
                   ),
    company_handle TEXT NOT NULL REFERENCES companies(handle) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_jobs_title ON jobs(title);
CREATE INDEX IF NOT EXISTS idx_jobs_company ON jobs(company_handle);
"""


def init_db(engine: Engine) -> None:
    raw = engine.raw_connection()
    try:
        raw.driver_connection.executescript(SCHEMA_SQL)
        raw.commit()
    finally:
        raw.close()


@dataclass
class QueryResult:
    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0


class Store:
    """Runs single parameterized statements against the database.

    Every call gets its own connection and transaction, committed when the
    statement succeeds. Driver errors propagate as SQLAlchemy exceptions.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, sql: str, params: Sequence[Any] = ()) -> QueryResult:
        with self.engine.begin() as conn:
            result = conn.exec_driver_sql(sql, tuple(params))
            if result.returns_rows:
                rows = [dict(row) for row in result.mappings().all()]
                return QueryResult(rows=rows, rowcount=len(rows))
            return QueryResult(rowcount=result.rowcount)

    def dispose(self) -> None:
        self.engine.dispose()


def get_store(request: Request) -> Store:
    return request.app.state.store
