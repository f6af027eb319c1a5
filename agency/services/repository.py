"""
Entity Repository

The one persistence abstraction every blueprint and service goes through:
create / get / list / filter / update / delete over a SQLAlchemy model,
optionally scoped to the operator who owns the records.

The storage backend is whatever SQLALCHEMY_DATABASE_URI points at
(Postgres in production, SQLite locally); there is no runtime fallback.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from agency.errors import ConflictError, StorageError, ValidationFailedError
from agency.extensions import db

logger = logging.getLogger(__name__)

DEFAULT_ORDER = '-created_at'


def commit_session(action: str, entity: str):
    """Commit the current session, translating database failures."""
    try:
        db.session.commit()
    except StaleDataError as e:
        db.session.rollback()
        logger.warning(f"{entity} {action}: stale write rejected", extra={"error": str(e)})
        raise ConflictError(f"{entity} was modified by someone else, reload and try again")
    except IntegrityError as e:
        db.session.rollback()
        logger.warning(f"{entity} {action}: integrity error", extra={"error": str(e.orig)})
        raise ConflictError(f"{entity} conflicts with an existing record")
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"{entity} {action}: database error", extra={"error": str(e)})
        raise StorageError(f"Failed to {action} {entity.lower()}")


class EntityRepository:
    """
    CRUD + equality filtering over one model.

    Args:
        model: SQLAlchemy model class
        owner_id: when given, every read and write is limited to records
            whose owner_field equals it, and created records get it stamped
        owner_field: column holding the owner id
        default_order: order used when the caller passes none

    Order syntax is a column name, optionally prefixed with '-' for
    descending (e.g. '-created_at').
    """

    def __init__(self, model, owner_id: Optional[str] = None, owner_field: str = 'user_id',
                 default_order: str = DEFAULT_ORDER):
        self.model = model
        self.owner_id = owner_id
        self.owner_field = owner_field
        self.default_order = default_order
        self.entity = model.__name__
        self._columns = {column.key: column for column in inspect(model).columns}
        self._pk = inspect(model).primary_key[0].key

    def _column(self, name: str):
        attr = self._columns.get(name)
        if attr is None:
            raise ValidationFailedError(f"Unknown field '{name}' for {self.entity}")
        return getattr(self.model, name)

    def _query(self):
        query = self.model.query
        if self.owner_id is not None:
            query = query.filter(getattr(self.model, self.owner_field) == self.owner_id)
        return query

    def _ordered(self, query, order: Optional[str]):
        order = order or self.default_order
        descending = order.startswith('-')
        column = self._column(order.lstrip('-'))
        return query.order_by(column.desc() if descending else column.asc())

    def create(self, data: Dict[str, Any]):
        record = self.model(**data)
        if self.owner_id is not None:
            setattr(record, self.owner_field, self.owner_id)
        db.session.add(record)
        commit_session('create', self.entity)
        logger.debug(f"{self.entity} created", extra={"id": getattr(record, self._pk)})
        return record

    def get(self, record_id: str):
        return self._query().filter(getattr(self.model, self._pk) == record_id).first()

    def list(self, order: Optional[str] = None) -> List[Any]:
        return self._ordered(self._query(), order).all()

    def filter(self, criteria: Dict[str, Any], order: Optional[str] = None) -> List[Any]:
        query = self._query()
        for key, value in criteria.items():
            if value is None or value == '':
                continue
            query = query.filter(self._column(key) == value)
        return self._ordered(query, order).all()

    def update(self, record_id: str, partial: Dict[str, Any], expected_version: Optional[int] = None):
        record = self.get(record_id)
        if record is None:
            return None

        if expected_version is not None and hasattr(record, 'version') and record.version != expected_version:
            raise ConflictError(
                f"{self.entity} was modified by someone else, reload and try again",
                details={"expected_version": expected_version, "current_version": record.version},
            )

        for key, value in partial.items():
            if key == self._pk or key == self.owner_field:
                continue
            self._column(key)
            setattr(record, key, value)

        commit_session('update', self.entity)
        return record

    def delete(self, record_id: str) -> bool:
        record = self.get(record_id)
        if record is None:
            return False
        db.session.delete(record)
        commit_session('delete', self.entity)
        return True
