class DomainError(Exception):
    """Базовая ошибка ядра: сообщение уходит клиенту как есть."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(DomainError):
    pass


class DuplicateKey(DomainError):
    pass


class ValidationError(DomainError):
    pass


class StoreFailure(DomainError):
    pass


class StoreUnavailable(StoreFailure):
    pass
