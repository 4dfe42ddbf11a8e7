from contextlib import contextmanager

import pytest

from catalog_api.app.core import db
from catalog_api.app.core.exceptions import NotFoundError, ValidationError
from catalog_api.app.mappers import SectorMapper
from catalog_api.app.repositories import SQLiteCatalogRepository, SQLiteStorageGateway
from catalog_api.app.services.sector_service import SectorService


def test_create_assigns_fresh_ids(sector_service):
    first = sector_service.create_sector("Informatique")
    second = sector_service.create_sector("Informatique")

    assert first.id != second.id
    assert sector_service.get_sector_by_id(first.id) == first
    # Duplicate names are allowed.
    assert [s.name for s in sector_service.get_all_sectors()] == ["Informatique", "Informatique"]


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_rejects_blank_name_without_writing(sector_service, count_rows, name):
    sector_service.create_sector("Existing")

    with pytest.raises(ValidationError) as exc_info:
        sector_service.create_sector(name)

    assert exc_info.value.field == "name"
    assert len(sector_service.get_all_sectors()) == 1
    assert count_rows("sectors") == 1


def test_update_replaces_name_and_keeps_id(sector_service):
    sector = sector_service.create_sector("Old")
    updated = sector_service.update_sector(sector.id, "New")

    assert updated.id == sector.id
    assert sector_service.get_sector_by_id(sector.id).name == "New"


def test_update_rejects_blank_name(sector_service):
    sector = sector_service.create_sector("Old")
    with pytest.raises(ValidationError):
        sector_service.update_sector(sector.id, " ")
    assert sector_service.get_sector_by_id(sector.id).name == "Old"


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get_sector_by_id(404),
        lambda s: s.update_sector(404, "Name"),
        lambda s: s.update_sector(404, ""),
        lambda s: s.delete_sector(404),
    ],
)
def test_missing_sector_raises_not_found(sector_service, call):
    with pytest.raises(NotFoundError) as exc_info:
        call(sector_service)
    assert exc_info.value.entity == "Sector"
    assert exc_info.value.entity_id == 404


def test_delete_cascades_to_classes(sector_service, class_service):
    doomed = sector_service.create_sector("Doomed")
    kept = sector_service.create_sector("Kept")
    children = [class_service.create_class(f"C{i}", None, doomed.id) for i in range(3)]
    survivor = class_service.create_class("Other", None, kept.id)

    assert sector_service.delete_sector(doomed.id) == 3

    with pytest.raises(NotFoundError):
        sector_service.get_sector_by_id(doomed.id)
    assert class_service.get_classes_by_sector(doomed.id) == []
    for child in children:
        with pytest.raises(NotFoundError):
            class_service.get_class_by_id(child.id)
    assert class_service.get_all_classes() == [survivor]


def test_delete_of_empty_sector(sector_service):
    sector = sector_service.create_sector("Empty")
    assert sector_service.delete_sector(sector.id) == 0
    assert sector_service.get_all_sectors() == []


class _FailingParentDelete(SQLiteCatalogRepository):
    def delete_sector(self, sector_id):
        raise RuntimeError("disk unplugged")


class _FailingGateway(SQLiteStorageGateway):
    @contextmanager
    def transaction(self, write=False):
        with db.transaction(self.path, write=write) as conn:
            yield _FailingParentDelete(conn)


def test_interrupted_cascade_leaves_everything_in_place(db_path, sector_service, class_service, count_rows):
    sector = sector_service.create_sector("Informatique")
    class_service.create_class("Classe A", None, sector.id)
    class_service.create_class("Classe B", None, sector.id)

    failing = SectorService(_FailingGateway(db_path))
    with pytest.raises(RuntimeError):
        failing.delete_sector(sector.id)

    assert count_rows("classes") == 2
    assert sector_service.get_sector_by_id(sector.id).name == "Informatique"
    assert len(class_service.get_classes_by_sector(sector.id)) == 2


@pytest.mark.parametrize("sector_id", [2 ** 63, -(2 ** 63) - 1])
def test_ids_beyond_sqlite_range_are_not_found(sector_service, sector_id):
    with pytest.raises(NotFoundError):
        sector_service.get_sector_by_id(sector_id)
    with pytest.raises(NotFoundError):
        sector_service.update_sector(sector_id, "Name")
    with pytest.raises(NotFoundError):
        sector_service.delete_sector(sector_id)


class _RecordingMapper(SectorMapper):
    def __init__(self):
        self.written = []

    def to_record(self, schema):
        self.written.append(schema)
        return super().to_record(schema)


def test_writes_go_through_the_mapper(gateway):
    mapper = _RecordingMapper()
    service = SectorService(gateway, mapper)

    created = service.create_sector("Informatique")
    service.update_sector(created.id, "Gestion")

    assert [(s.id, s.name) for s in mapper.written] == [(None, "Informatique"), (created.id, "Gestion")]
