from catalog_api.app.models import ClassRecord
from catalog_api.app.schemas.school_class import ClassRead


class ClassMapper:
    """Maps ``ClassRecord`` to ``ClassRead`` and back."""

    @staticmethod
    def to_schema(record: ClassRecord) -> ClassRead:
        return ClassRead(
            id=record.id,
            class_name=record.class_name,
            description=record.description,
            sector_id=record.sector_id,
        )

    @staticmethod
    def to_record(schema: ClassRead) -> ClassRecord:
        return ClassRecord(
            id=schema.id,
            class_name=schema.class_name,
            description=schema.description,
            sector_id=schema.sector_id,
        )
