from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import NotFoundError
from app.database.session import Base
from app.utils.response_utils import handle_db_error

ModelType = TypeVar("ModelType", bound=Base)


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run one logical mutation: commit when the block finishes, roll back on
    any exception (including cancellation) and re-raise it. SQLAlchemy errors
    come out translated into domain errors.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise handle_db_error(e) from e
    except BaseException:
        db.rollback()
        raise


@contextmanager
def translate_db_errors(db: Session) -> Iterator[None]:
    """Read-side counterpart of ``transaction``: nothing to commit."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        raise handle_db_error(e) from e


class CRUDBase(Generic[ModelType]):
    """
    Base class for the entity stores.

    Single-row reads return ``None`` when nothing matches; deciding that
    ``None`` means "not found" is left to the caller. Keyed mutations that
    touch zero rows raise ``NotFoundError``.
    """
    def __init__(self, model: Type[ModelType]):
        """
        Initialize with the model class
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Get an object by ID
        """
        with translate_db_errors(db):
            return db.query(self.model).filter(self.model.id == id).first()

    def get_multi(self, db: Session, *, filters: Dict = None) -> List[ModelType]:
        """
        Get multiple objects with optional equality filters
        """
        query = db.query(self.model)

        if filters:
            for attr, value in filters.items():
                if hasattr(self.model, attr):
                    query = query.filter(getattr(self.model, attr) == value)

        with translate_db_errors(db):
            return query.order_by(self.model.created_at.desc()).all()

    def insert(self, db: Session, db_obj: ModelType) -> ModelType:
        """
        Persist a new object in its own transaction and reload it
        """
        with transaction(db):
            db.add(db_obj)
        db.refresh(db_obj)
        return db_obj

    def update_row(self, db: Session, *, id: Any, values: Dict[str, Any]) -> None:
        """
        Issue a single UPDATE for the row with this ID.

        Raises NotFoundError when no row was affected. No version column is
        checked, so concurrent writers to the same row overwrite each other.
        """
        with transaction(db):
            rows = (
                db.query(self.model)
                .filter(self.model.id == id)
                .update(values, synchronize_session=False)
            )
            if rows == 0:
                raise NotFoundError(
                    f"{self.model.__name__} {id} not found",
                    {"rows_affected": 0},
                )

    def snapshot(self, db: Session, query) -> Optional[ModelType]:
        """
        Load one row and detach it so it keeps its current values after
        the row is changed or removed.
        """
        with translate_db_errors(db):
            obj = query.first()
        if obj is not None:
            db.expunge(obj)
        return obj

    def remove(self, db: Session, *, id: Any) -> Optional[ModelType]:
        """
        Hard-delete a row, returning it as it was just before deletion,
        or None if there was no such row.
        """
        deleted = self.snapshot(db, db.query(self.model).filter(self.model.id == id))
        if deleted is None:
            return None

        with transaction(db):
            rows = (
                db.query(self.model)
                .filter(self.model.id == id)
                .delete(synchronize_session=False)
            )
            if rows == 0:
                raise NotFoundError(
                    f"{self.model.__name__} {id} not found",
                    {"rows_affected": 0},
                )
        return deleted
