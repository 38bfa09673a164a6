from datetime import datetime, timezone

import structlog

from ..dto import InsertAck, UpdateResult
from ..ports import IDocumentStore
from ...domain.entities import REQUEST_STATUSES, TEACHER_REQUESTS
from ...domain.errors import NotFound

logger = structlog.get_logger()


class SubmitTeacherRequest:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, application: dict) -> InsertAck:
        doc = {**application, "status": "pending", "submitted_at": datetime.now(timezone.utc)}
        request_id = self.store.insert(TEACHER_REQUESTS, doc)
        logger.info("teacher_request_submitted", request_id=request_id, user_id=doc.get("user_id"))
        return InsertAck(inserted_id=request_id)


class SetRequestStatus:
    """
    Перезаписывает статус заявки, без проверки переходов и без истории.

    Записывается любая строка. Значения вне REQUEST_STATUSES тоже
    записываются и логируются как unrecognized_status.
    """

    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, request_id: int, status: str) -> UpdateResult:
        if status not in REQUEST_STATUSES:
            logger.warning("unrecognized_status", collection=TEACHER_REQUESTS, id=request_id, status=status)
        result = self.store.update_one(
            TEACHER_REQUESTS,
            {"id": request_id},
            {"status": status, "updated_at": datetime.now(timezone.utc)},
        )
        if result.matched_count == 0:
            raise NotFound("Request not found")
        logger.info("teacher_request_status_set", request_id=request_id, status=status)
        return result
