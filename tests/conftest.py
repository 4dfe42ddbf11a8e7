import pytest
from fastapi.testclient import TestClient

from catalog_api.app.api.dependencies import get_gateway
from catalog_api.app.core.db import get_connection, init_db
from catalog_api.app.main import create_app
from catalog_api.app.repositories import SQLiteStorageGateway
from catalog_api.app.services.class_service import ClassService
from catalog_api.app.services.sector_service import SectorService


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "catalog_test.db"
    init_db(path, seed=False)
    return path


@pytest.fixture
def gateway(db_path):
    return SQLiteStorageGateway(db_path)


@pytest.fixture
def sector_service(gateway):
    return SectorService(gateway)


@pytest.fixture
def class_service(gateway):
    return ClassService(gateway)


@pytest.fixture
def count_rows(db_path):
    """Return a helper that counts rows of a table straight from the file."""

    def _count(table: str) -> int:
        conn = get_connection(db_path)
        try:
            return conn.execute(f"SELECT COUNT(*) AS n FROM {table}").fetchone()["n"]
        finally:
            conn.close()

    return _count


@pytest.fixture
def client(gateway):
    app = create_app()
    app.dependency_overrides[get_gateway] = lambda: gateway
    return TestClient(app)
