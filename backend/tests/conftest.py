import pytest
from fastapi.testclient import TestClient

from jobly.config import settings
from jobly.database import Store, get_engine, get_store, init_db
from jobly.main import app
from jobly.repositories.job_repo import JobRepository
from jobly.utils.security import hash_token

ADMIN_TOKEN = "test-admin-token-123"
ADMIN_TOKEN_HASH = hash_token(ADMIN_TOKEN)


@pytest.fixture
def store(tmp_path):
    engine = get_engine(tmp_path / "jobly.sqlite")
    init_db(engine)
    s = Store(engine)
    yield s
    s.dispose()


@pytest.fixture
def job_ids(store):
    """Seed companies c1..c3 and jobs JobA, JobB, JobC (all at c1)."""
    for n in (1, 2, 3):
        store.execute(
            "INSERT INTO companies (handle, name, num_employees, description, logo_url) "
            "VALUES (?1, ?2, ?3, ?4, ?5)",
            [f"c{n}", f"C{n}", n, f"Desc{n}", f"http://c{n}.img"],
        )
    ids = []
    for title, salary, equity in [("JobA", 1000, "0.1"), ("JobB", 100, "0.2"), ("JobC", 1200, "0")]:
        result = store.execute(
            "INSERT INTO jobs (title, salary, equity, company_handle) "
            "VALUES (?1, ?2, ?3, 'c1') RETURNING id",
            [title, salary, equity],
        )
        ids.append(result.rows[0]["id"])
    return ids


@pytest.fixture
def repo(store, job_ids):
    return JobRepository(store)


@pytest.fixture
def admin_headers():
    original = settings.admin_token_hash
    settings.admin_token_hash = ADMIN_TOKEN_HASH
    yield {"Authorization": f"Bearer {ADMIN_TOKEN}"}
    settings.admin_token_hash = original


@pytest.fixture
def client(store, job_ids):
    app.dependency_overrides[get_store] = lambda: store
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()
