from datetime import datetime, timezone

import structlog

from .counted_insert import insert_and_increment
from ..dto import InsertAck
from ..ports import IDocumentStore
from ...domain.entities import CLASSES, ENROLLMENTS

logger = structlog.get_logger()


class EnrollStudent:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, student_id: int, class_id: int) -> InsertAck:
        # оплата не интегрирована: запись всегда "paid"
        doc = {
            "student_id": student_id,
            "class_id": class_id,
            "payment_status": "paid",
            "enrolled_at": datetime.now(timezone.utc),
        }
        enrollment_id = insert_and_increment(
            self.store, ENROLLMENTS, doc,
            target_collection=CLASSES, target_id=class_id, counter_field="total_enrollment",
        )
        logger.info("enrollment_created", enrollment_id=enrollment_id, student_id=student_id, class_id=class_id)
        return InsertAck(inserted_id=enrollment_id)
