from datetime import datetime, timezone

import structlog

from ..dto import ClassPatch, InsertAck, UpdateResult
from ..ports import IDocumentStore
from ...domain.entities import CLASS_STATUSES, CLASSES
from ...domain.errors import NotFound

logger = structlog.get_logger()


class CreateClass:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, fields: dict) -> InsertAck:
        doc = {
            **fields,
            "status": "pending",
            "total_enrollment": 0,
            "created_at": datetime.now(timezone.utc),
        }
        class_id = self.store.insert(CLASSES, doc)
        logger.info("class_created", class_id=class_id, teacher_id=doc.get("teacher_id"))
        return InsertAck(inserted_id=class_id)


class UpdateClass:
    """
    Применяет ClassPatch к классу и проставляет updated_at.

    Одобрение админом - это просто ClassPatch(status="approved").
    """

    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, class_id: int, patch: ClassPatch) -> UpdateResult:
        changes = patch.as_dict()
        status = changes.get("status")
        if status is not None and status not in CLASS_STATUSES:
            logger.warning("unrecognized_status", collection=CLASSES, id=class_id, status=status)
        changes["updated_at"] = datetime.now(timezone.utc)
        result = self.store.update_one(CLASSES, {"id": class_id}, changes)
        if result.matched_count == 0:
            raise NotFound("Class not found")
        if status is not None:
            logger.info("class_status_set", class_id=class_id, status=status)
        return result


class DeleteClass:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, class_id: int) -> None:
        if not self.store.delete_one(CLASSES, {"id": class_id}):
            raise NotFound("Class not found")
        logger.info("class_deleted", class_id=class_id)
