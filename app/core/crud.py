import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.utils import parse_id
from app.core.validation import EntityValidator, collect_values, optional, raise_for_errors

logger = logging.getLogger(__name__)


class ModelService:
    """Queries and writes for one model, without any input validation."""

    model = None
    label = "record"

    def __init__(self, db: Session):
        self.db = db

    def query(self):
        return self.db.query(self.model)

    def get_all(self) -> List:
        return self.query().order_by(self.model.id).all()

    def get(self, record_id) -> Optional[object]:
        record_id = parse_id(record_id)
        if record_id is None:
            return None
        return self.query().filter(self.model.id == record_id).first()

    def apply(self, record, values: dict):
        for column, value in values.items():
            setattr(record, column, value)
        self.commit(record)
        logger.info(f"✅ Updated {self.label} {record.id}")
        return record

    def remove(self, record):
        self.db.delete(record)
        self.commit()
        logger.info(f"🗑️ Deleted {self.label} {record.id}")
        return record

    def commit(self, record=None):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error(f"❌ Failed to write {self.label}")
            raise
        if record is not None:
            self.db.refresh(record)


class CrudService(ModelService):
    """
    List / get / create / update / delete for one model.

    Subclasses set ``model``, ``validator`` and ``label``. Every write runs the
    entity's validator first; the first violation is raised as an ApiError.
    """

    validator: EntityValidator = None

    def get_or_raise(self, record_id):
        """Fetch a row by its path id, raising NotFoundError when it does not exist."""
        raise_for_errors(self.validator.validate_id(self.db, record_id))
        return self.get(record_id)

    def create(self, data: dict):
        raise_for_errors(self.validator.validate_create(self.db, data))
        values = collect_values(self.validator.fields(), data)

        record = self.model(**values)
        self.db.add(record)
        self.commit(record)
        logger.info(f"✅ Created {self.label} {record.id}")
        return record

    def update(self, record_id, data: dict):
        raise_for_errors(self.validator.validate_update(self.db, record_id, data))
        record = self.get(record_id)
        values = collect_values(optional(self.validator.fields(record.id)), data)
        return self.apply(record, values)

    def delete(self, record_id):
        record = self.get_or_raise(record_id)
        return self.remove(record)
