from datetime import datetime, timedelta, timezone
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from edumanage.domain.entities import CLASSES, ENROLLMENTS, USERS, Class, User
from edumanage.domain.errors import DuplicateKey, NotFound, StoreFailure, StoreUnavailable
from edumanage.infrastructure.db import Base, build_engine, build_session_factory
from edumanage.infrastructure.store import DocumentStore


def _user(name, email, role="student"):
    return {"name": name, "email": email, "role": role}


def test_insert_and_find_one(store):
    """Тест вставки и поиска по полю"""
    user_id = store.insert(USERS, _user("Alice", "alice@example.com"))
    assert isinstance(user_id, int)

    user = store.find_one(USERS, {"email": "alice@example.com"})
    assert isinstance(user, User)
    assert user.id == user_id
    assert user.role == "student"


def test_find_one_missing_raises_not_found(store):
    """Тест отсутствующего документа"""
    with pytest.raises(NotFound) as exc:
        store.find_one(CLASSES, {"id": 999})
    assert exc.value.message == "Class not found"


def test_duplicate_email_rejected(store):
    """Тест уникальности email: вторая вставка падает, первая не тронута"""
    first_id = store.insert(USERS, _user("Alice", "alice@example.com"))
    with pytest.raises(DuplicateKey):
        store.insert(USERS, _user("Impostor", "alice@example.com", role="admin"))

    user = store.find_one(USERS, {"email": "alice@example.com"})
    assert user.id == first_id
    assert user.name == "Alice"
    assert user.role == "student"
    # после rollback сессия остаётся рабочей
    assert len(store.find_many(USERS)) == 1


def test_find_many_with_filter(store):
    """Тест фильтрации find_many"""
    store.insert(ENROLLMENTS, {"student_id": 1, "class_id": 10})
    store.insert(ENROLLMENTS, {"student_id": 1, "class_id": 11})
    store.insert(ENROLLMENTS, {"student_id": 2, "class_id": 10})

    assert len(store.find_many(ENROLLMENTS)) == 3
    rows = store.find_many(ENROLLMENTS, {"student_id": 1})
    assert [r.class_id for r in rows] == [10, 11]
    assert store.find_many(ENROLLMENTS, {"student_id": 3}) == []


def test_update_one_matched_vs_modified(store):
    """Тест: «не найдено» отличается от «найдено, но без изменений»"""
    store.insert(USERS, _user("Alice", "alice@example.com"))

    missing = store.update_one(USERS, {"email": "nobody@example.com"}, {"role": "admin"})
    assert (missing.matched_count, missing.modified_count) == (0, 0)

    same = store.update_one(USERS, {"email": "alice@example.com"}, {"role": "student"})
    assert (same.matched_count, same.modified_count) == (1, 0)

    changed = store.update_one(USERS, {"email": "alice@example.com"}, {"role": "teacher"})
    assert (changed.matched_count, changed.modified_count) == (1, 1)
    assert store.find_one(USERS, {"email": "alice@example.com"}).role == "teacher"


def test_increment_field(store):
    """Тест атомарного инкремента"""
    class_id = store.insert(CLASSES, {"title": "Algebra", "status": "pending", "total_enrollment": 0})

    assert store.increment_field(CLASSES, {"id": class_id}, "total_enrollment", 1) == 1
    assert store.increment_field(CLASSES, {"id": class_id}, "total_enrollment", 2) == 1
    assert store.find_one(CLASSES, {"id": class_id}).total_enrollment == 3

    # несуществующая цель: ничего не совпало
    assert store.increment_field(CLASSES, {"id": 999}, "total_enrollment", 1) == 0


def test_delete_one(store):
    """Тест удаления: второй раз удалять нечего"""
    class_id = store.insert(CLASSES, {"title": "Algebra"})
    assert store.delete_one(CLASSES, {"id": class_id}) is True
    assert store.delete_one(CLASSES, {"id": class_id}) is False
    with pytest.raises(NotFound):
        store.find_one(CLASSES, {"id": class_id})


def test_search_case_insensitive_substring(store):
    """Тест поиска подстроки без учёта регистра по name или email"""
    store.insert(USERS, _user("Alice Smith", "asmith@example.com"))
    store.insert(USERS, _user("Carol", "alice@x.com"))
    store.insert(USERS, _user("Bob", "bob@example.com"))

    found = store.search(USERS, "alice", ["name", "email"])
    assert sorted(u.name for u in found) == ["Alice Smith", "Carol"]
    assert len(store.search(USERS, "", ["name", "email"])) == 3
    # спецсимволы LIKE экранируются
    assert store.search(USERS, "%", ["name", "email"]) == []


def test_unknown_collection_and_field(store):
    """Тест неизвестной коллекции и неизвестного поля"""
    with pytest.raises(StoreFailure):
        store.insert("courses", {"title": "x"})
    with pytest.raises(StoreFailure):
        store.find_many(USERS, {"nickname": "al"})


def test_concurrent_increments_are_not_lost(tmp_path):
    """Тест: параллельные инкременты одного счётчика не теряются"""
    engine = build_engine(f"sqlite:///{tmp_path / 'counters.db'}")
    Base.metadata.create_all(bind=engine)
    session_factory = build_session_factory(engine)

    setup = session_factory()
    class_id = DocumentStore(setup).insert(CLASSES, {"title": "Busy class", "total_enrollment": 0})
    setup.close()

    def bump(_):
        session = session_factory()
        try:
            return DocumentStore(session).increment_field(CLASSES, {"id": class_id}, "total_enrollment", 1)
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(bump, range(20)))
    assert results == [1] * 20

    check = session_factory()
    try:
        cls = DocumentStore(check).find_one(CLASSES, {"id": class_id})
        assert isinstance(cls, Class)
        assert cls.total_enrollment == 20
    finally:
        check.close()
        engine.dispose()


def test_operational_error_maps_to_unavailable_and_rolls_back(store, monkeypatch):
    """Тест: OperationalError -> StoreUnavailable, сессия откатывается и остаётся рабочей"""
    store.insert(USERS, _user("Alice", "alice@example.com"))

    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    rollbacks = []
    real_rollback = store.db.rollback
    monkeypatch.setattr(store.db, "rollback", lambda: (rollbacks.append(1), real_rollback()))
    monkeypatch.setattr(store.db, "execute", broken_execute)

    with pytest.raises(StoreUnavailable) as exc:
        store.find_one(USERS, {"email": "alice@example.com"})
    assert exc.value.message == "Store unavailable"
    assert rollbacks == [1]

    monkeypatch.undo()
    assert store.find_one(USERS, {"email": "alice@example.com"}).name == "Alice"


def test_non_unique_integrity_error_is_store_failure(store, monkeypatch):
    """Тест: нарушение NOT NULL - это StoreFailure, а не DuplicateKey"""
    def broken_commit():
        raise IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: users.name"))

    monkeypatch.setattr(store.db, "commit", broken_commit)
    with pytest.raises(StoreFailure) as exc:
        store.insert(USERS, _user("Alice", "alice@example.com"))
    assert not isinstance(exc.value, DuplicateKey)
    assert exc.value.message == "Failed to insert users"

    monkeypatch.undo()
    assert store.find_many(USERS, {}) == []


def test_timestamps_read_back_as_utc(store):
    """Тест: метки времени возвращаются aware в UTC"""
    moscow = timezone(timedelta(hours=3))
    class_id = store.insert(CLASSES, {"title": "Art", "created_at": datetime(2026, 1, 1, 15, 0, tzinfo=moscow)})

    created_at = store.find_one(CLASSES, {"id": class_id}).created_at
    assert created_at.tzinfo is not None
    assert created_at.utcoffset() == timedelta(0)
    assert created_at == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
