from typing import Any

import structlog

from ..ports import IDocumentStore
from ...infrastructure.metrics import counter_increments_total

logger = structlog.get_logger()


def insert_and_increment(
    store: IDocumentStore,
    collection: str,
    document: dict[str, Any],
    target_collection: str,
    target_id: int,
    counter_field: str,
) -> int:
    """
    Вставляет document, затем увеличивает counter_field у связанной записи.

    Это две отдельные операции хранилища. Ошибка вставки прерывает всё до
    инкремента. Ошибка инкремента приходит уже после commit документа:
    документ остаётся, а счётчик отстаёт на единицу. Компенсации и повторов
    нет, вызывающий получает StoreFailure, счётчик сверяется отдельно.

    Инкремент, не нашедший записи (висячая ссылка), ошибкой не считается.
    """
    inserted_id = store.insert(collection, document)
    try:
        matched = store.increment_field(target_collection, {"id": target_id}, counter_field, 1)
    except Exception:
        counter_increments_total.labels(collection=target_collection, field=counter_field, outcome="error").inc()
        logger.error("counter_increment_failed", collection=collection, inserted_id=inserted_id,
                     target_collection=target_collection, target_id=target_id, field=counter_field)
        raise

    if matched == 0:
        counter_increments_total.labels(collection=target_collection, field=counter_field, outcome="miss").inc()
        logger.warning("counter_target_missing", collection=collection, inserted_id=inserted_id,
                       target_collection=target_collection, target_id=target_id)
    else:
        counter_increments_total.labels(collection=target_collection, field=counter_field, outcome="hit").inc()
    return inserted_id
