from datetime import datetime, timezone

import structlog

from .counted_insert import insert_and_increment
from ..dto import InsertAck
from ..ports import IDocumentStore
from ...domain.entities import ASSIGNMENTS, SUBMISSIONS

logger = structlog.get_logger()


class CreateAssignment:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, fields: dict) -> InsertAck:
        doc = {**fields, "submission_count": 0, "created_at": datetime.now(timezone.utc)}
        assignment_id = self.store.insert(ASSIGNMENTS, doc)
        logger.info("assignment_created", assignment_id=assignment_id, class_id=doc.get("class_id"))
        return InsertAck(inserted_id=assignment_id)


class SubmitAssignment:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, fields: dict) -> InsertAck:
        doc = {**fields, "submitted_at": datetime.now(timezone.utc)}
        submission_id = insert_and_increment(
            self.store, SUBMISSIONS, doc,
            target_collection=ASSIGNMENTS, target_id=doc["assignment_id"], counter_field="submission_count",
        )
        logger.info("submission_created", submission_id=submission_id,
                    assignment_id=doc["assignment_id"], student_id=doc.get("student_id"))
        return InsertAck(inserted_id=submission_id)
