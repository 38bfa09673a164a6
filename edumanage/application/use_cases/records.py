from datetime import datetime, timezone

from ..dto import InsertAck
from ..ports import IDocumentStore
from ...domain.entities import FEEDBACK, PARTNERS


class LeaveFeedback:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, fields: dict) -> InsertAck:
        doc = {**fields, "created_at": datetime.now(timezone.utc)}
        return InsertAck(inserted_id=self.store.insert(FEEDBACK, doc))


class AddPartner:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, fields: dict) -> InsertAck:
        return InsertAck(inserted_id=self.store.insert(PARTNERS, fields))
