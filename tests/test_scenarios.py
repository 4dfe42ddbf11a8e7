"""End-to-end service scenarios, including concurrent writers."""

import threading

import pytest

from catalog_api.app.core.db import get_connection
from catalog_api.app.core.exceptions import (
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)


def _dangling_classes(db_path) -> int:
    conn = get_connection(db_path)
    try:
        row = conn.execute(
            "SELECT COUNT(*) AS n FROM classes WHERE sector_id NOT IN (SELECT id FROM sectors)"
        ).fetchone()
        return row["n"]
    finally:
        conn.close()


def test_informatique_lifecycle(sector_service, class_service, count_rows):
    sector = sector_service.create_sector("Informatique")
    assert sector.id == 1

    classe_a = class_service.create_class("Classe A", "intro", sector.id)
    assert classe_a.sector_id == sector.id

    with pytest.raises(InvalidReferenceError):
        class_service.create_class("Classe B", "", 99)
    assert count_rows("classes") == 1

    sector_service.delete_sector(sector.id)

    with pytest.raises(NotFoundError):
        class_service.get_class_by_id(classe_a.id)
    with pytest.raises(NotFoundError):
        sector_service.get_sector_by_id(sector.id)


def test_blank_sector_leaves_count_unchanged(sector_service):
    before = len(sector_service.get_all_sectors())
    with pytest.raises(ValidationError):
        sector_service.create_sector("")
    assert len(sector_service.get_all_sectors()) == before


def test_concurrent_cascade_and_class_creation_never_dangles(db_path, sector_service, class_service):
    sector = sector_service.create_sector("Contended")
    for i in range(10):
        class_service.create_class(f"Seed {i}", None, sector.id)

    start = threading.Barrier(5)
    outcomes = []
    lock = threading.Lock()

    def create(n):
        start.wait()
        try:
            class_service.create_class(f"Late {n}", None, sector.id)
            result = "created"
        except InvalidReferenceError:
            result = "rejected"
        with lock:
            outcomes.append(result)

    def delete():
        start.wait()
        sector_service.delete_sector(sector.id)

    threads = [threading.Thread(target=create, args=(n,)) for n in range(4)]
    threads.append(threading.Thread(target=delete))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert len(outcomes) == 4
    assert class_service.get_all_classes() == []
    assert _dangling_classes(db_path) == 0
