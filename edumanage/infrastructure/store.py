from contextlib import contextmanager
from dataclasses import fields
from typing import Any, Iterable

import structlog
from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from .models import (
    UserORM, TeacherRequestORM, ClassORM, EnrollmentORM,
    AssignmentORM, SubmissionORM, FeedbackORM, PartnerORM,
)
from .metrics import store_operations_total, store_errors_total
from ..application.dto import UpdateResult
from ..application.ports import IDocumentStore
from ..domain import entities as e
from ..domain.errors import DuplicateKey, NotFound, StoreFailure, StoreUnavailable

logger = structlog.get_logger()

# коллекция -> (ORM-модель, доменная сущность, имя для сообщений)
COLLECTIONS = {
    e.USERS: (UserORM, e.User, "User"),
    e.TEACHER_REQUESTS: (TeacherRequestORM, e.TeacherRequest, "Request"),
    e.CLASSES: (ClassORM, e.Class, "Class"),
    e.ENROLLMENTS: (EnrollmentORM, e.Enrollment, "Enrollment"),
    e.ASSIGNMENTS: (AssignmentORM, e.Assignment, "Assignment"),
    e.SUBMISSIONS: (SubmissionORM, e.Submission, "Submission"),
    e.FEEDBACK: (FeedbackORM, e.Feedback, "Feedback"),
    e.PARTNERS: (PartnerORM, e.Partner, "Partner"),
}


def to_domain(row, entity_cls):
    return entity_cls(**{f.name: getattr(row, f.name) for f in fields(entity_cls)})


class DocumentStore(IDocumentStore):
    """
    CRUD по коллекциям поверх SQLAlchemy.

    Каждый публичный метод - одна операция хранилища со своим commit,
    транзакций на несколько вызовов нет. increment_field выполняется одним
    UPDATE ... SET f = f + delta и только он безопасен при конкурентной
    записи в одну строку.
    """

    def __init__(self, db: Session): self.db = db

    def insert(self, collection: str, document: dict[str, Any]) -> int:
        model, _, _ = self._resolve(collection, document)
        with self._guard("insert", collection):
            row = model(**document)
            self.db.add(row); self.db.commit(); self.db.refresh(row)
        return row.id

    def find_one(self, collection: str, filter: dict[str, Any]):
        model, entity_cls, label = self._resolve(collection, filter)
        with self._guard("find_one", collection):
            row = self.db.execute(self._select(model, filter)).scalars().first()
        if row is None:
            raise NotFound(f"{label} not found")
        return to_domain(row, entity_cls)

    def find_many(self, collection: str, filter: dict[str, Any] | None = None) -> list:
        filter = filter or {}
        model, entity_cls, _ = self._resolve(collection, filter)
        with self._guard("find_many", collection):
            stmt = self._select(model, filter).order_by(model.id)
            rows = self.db.execute(stmt).scalars().all()
        return [to_domain(row, entity_cls) for row in rows]

    def search(self, collection: str, term: str, fields: Iterable[str]) -> list:
        """Регистронезависимый поиск подстроки по любому из полей; пустая строка = все."""
        fields = list(fields)
        model, entity_cls, _ = self._resolve(collection, dict.fromkeys(fields))
        stmt = self._select(model, {}).order_by(model.id)
        if term:
            stmt = stmt.where(or_(*[getattr(model, f).icontains(term, autoescape=True) for f in fields]))
        with self._guard("search", collection):
            rows = self.db.execute(stmt).scalars().all()
        return [to_domain(row, entity_cls) for row in rows]

    def update_one(self, collection: str, filter: dict[str, Any], patch: dict[str, Any]) -> UpdateResult:
        model, _, _ = self._resolve(collection, {**filter, **patch})
        with self._guard("update_one", collection):
            row = self.db.execute(self._select(model, filter)).scalars().first()
            if row is None:
                return UpdateResult(matched_count=0, modified_count=0)
            changed = {k: v for k, v in patch.items() if getattr(row, k) != v}
            for k, v in changed.items():
                setattr(row, k, v)
            self.db.commit()
        return UpdateResult(matched_count=1, modified_count=1 if changed else 0)

    def increment_field(self, collection: str, filter: dict[str, Any], field: str, delta: int = 1) -> int:
        model, _, _ = self._resolve(collection, {**filter, field: delta})
        stmt = (update(model)
                .where(*self._where(model, filter))
                .values({field: getattr(model, field) + delta})
                .execution_options(synchronize_session=False))
        with self._guard("increment_field", collection):
            result = self.db.execute(stmt)
            self.db.commit()
        return result.rowcount

    def delete_one(self, collection: str, filter: dict[str, Any]) -> bool:
        model, _, _ = self._resolve(collection, filter)
        stmt = delete(model).where(*self._where(model, filter)).execution_options(synchronize_session=False)
        with self._guard("delete_one", collection):
            result = self.db.execute(stmt)
            self.db.commit()
        return result.rowcount > 0

    # --- helpers

    def _resolve(self, collection: str, names: dict[str, Any]):
        try:
            model, entity_cls, label = COLLECTIONS[collection]
        except KeyError:
            raise StoreFailure(f"Unknown collection: {collection}") from None
        unknown = sorted(set(names) - set(model.__table__.columns.keys()))
        if unknown:
            raise StoreFailure(f"Unknown field(s) for {collection}: {', '.join(unknown)}")
        return model, entity_cls, label

    @staticmethod
    def _where(model, filter: dict[str, Any]) -> list:
        return [getattr(model, k) == v for k, v in filter.items()]

    def _select(self, model, filter: dict[str, Any]):
        # increment_field пишет мимо identity map, поэтому всегда перечитываем строки
        return select(model).where(*self._where(model, filter)).execution_options(populate_existing=True)

    @contextmanager
    def _guard(self, operation: str, collection: str):
        store_operations_total.labels(operation=operation, collection=collection).inc()
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            err = self._translate(exc, operation, collection)
            store_errors_total.labels(operation=operation, collection=collection, kind=type(err).__name__).inc()
            logger.warning("store_error", operation=operation, collection=collection,
                           kind=type(err).__name__, error=str(exc.orig if hasattr(exc, "orig") else exc))
            raise err from exc

    @staticmethod
    def _translate(exc: SQLAlchemyError, operation: str, collection: str):
        if isinstance(exc, IntegrityError) and "unique" in str(exc.orig).lower():
            return DuplicateKey(f"Duplicate key in {collection}")
        if isinstance(exc, OperationalError):
            return StoreUnavailable("Store unavailable")
        return StoreFailure(f"Failed to {operation.replace('_', ' ')} {collection}")
