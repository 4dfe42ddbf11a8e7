from catalog_api.app.mappers import ClassMapper, SectorMapper
from catalog_api.app.models import ClassRecord, SectorRecord
from catalog_api.app.schemas import ClassRead, SectorRead


def test_sector_schema_survives_record_round_trip():
    schema = SectorRead(id=7, name="Informatique")
    assert SectorMapper.to_schema(SectorMapper.to_record(schema)) == schema


def test_sector_without_id_maps_to_unassigned_record():
    record = SectorMapper.to_record(SectorRead(name="Gestion"))
    assert record == SectorRecord(name="Gestion", id=None)


def test_class_schema_survives_record_round_trip():
    schema = ClassRead(id=3, class_name="Classe A", description="intro", sector_id=1)
    assert ClassMapper.to_schema(ClassMapper.to_record(schema)) == schema


def test_class_mapper_keeps_missing_description_and_id():
    schema = ClassRead(class_name="Classe B", sector_id=2)
    record = ClassMapper.to_record(schema)
    assert record == ClassRecord(class_name="Classe B", sector_id=2, description=None, id=None)
    assert ClassMapper.to_schema(record) == schema


def test_mapper_does_not_validate_business_rules():
    # Blank names are the service's concern; mapping is shape only.
    record = ClassRecord(class_name="  ", sector_id=99)
    assert ClassMapper.to_schema(record).class_name == "  "
