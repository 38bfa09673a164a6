import structlog

from ..dto import UpdateResult, UserPatch
from ..ports import IDocumentStore
from ...domain.entities import USERS
from ...domain.errors import NotFound, ValidationError

logger = structlog.get_logger()


class UpdateUser:
    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, user_id: int, patch: UserPatch) -> UpdateResult:
        result = self.store.update_one(USERS, {"id": user_id}, patch.as_dict())
        if result.matched_count == 0:
            raise NotFound("User not found")
        return result


class ChangeUserRole:
    """Меняет роль по email.

    «Не найден» и «роль не изменилась» сообщаются одной и той же ошибкой:
    хранилище сообщает только modified == 0.
    """

    def __init__(self, store: IDocumentStore):
        self.store = store

    def execute(self, email: str, role: str | None) -> str:
        if not role:
            raise ValidationError("Role is required in request body.")
        result = self.store.update_one(USERS, {"email": email}, {"role": role})
        if result.modified_count == 0:
            raise NotFound("User not found or role not changed.")
        logger.info("user_role_changed", email=email, role=role)
        return role
