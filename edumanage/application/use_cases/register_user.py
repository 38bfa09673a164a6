from datetime import datetime, timezone

import structlog

from ..dto import InsertAck
from ..ports import IDocumentStore
from ...domain.entities import USERS
from ...domain.errors import DuplicateKey

logger = structlog.get_logger()


class RegisterUser:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, name: str, email: str, role: str = "student",
                photo_url: str | None = None, phone: str | None = None) -> InsertAck:
        doc = {
            "name": name,
            "email": email,
            "role": role,
            "photo_url": photo_url,
            "phone": phone,
            "created_at": datetime.now(timezone.utc),
        }
        try:
            user_id = self.store.insert(USERS, doc)
        except DuplicateKey:
            raise DuplicateKey("Email already exists") from None
        logger.info("user_registered", user_id=user_id, role=role)
        return InsertAck(inserted_id=user_id)
