from catalog_api.app.models import SectorRecord
from catalog_api.app.schemas.sector import SectorRead


class SectorMapper:
    """Maps ``SectorRecord`` to ``SectorRead`` and back."""

    @staticmethod
    def to_schema(record: SectorRecord) -> SectorRead:
        return SectorRead(id=record.id, name=record.name)

    @staticmethod
    def to_record(schema: SectorRead) -> SectorRecord:
        return SectorRecord(id=schema.id, name=schema.name)
