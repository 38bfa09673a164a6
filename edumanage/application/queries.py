from ..domain import entities as e
from .ports import IDocumentStore

USER_SEARCH_FIELDS = ("name", "email")


def search_users(store: IDocumentStore, term: str = "") -> list[e.User]:
    return store.search(e.USERS, term or "", USER_SEARCH_FIELDS)


def get_user_by_email(store: IDocumentStore, email: str) -> e.User:
    return store.find_one(e.USERS, {"email": email})


def list_teacher_requests(store: IDocumentStore) -> list[e.TeacherRequest]:
    return store.find_many(e.TEACHER_REQUESTS)


def list_approved_classes(store: IDocumentStore) -> list[e.Class]:
    """Публичный каталог: только одобренные классы."""
    return store.find_many(e.CLASSES, {"status": "approved"})


def get_class(store: IDocumentStore, class_id: int) -> e.Class:
    # по id отдаём класс в любом статусе
    return store.find_one(e.CLASSES, {"id": class_id})


def list_enrollments_for_student(store: IDocumentStore, student_id: int) -> list[e.Enrollment]:
    return store.find_many(e.ENROLLMENTS, {"student_id": student_id})


def list_assignments_for_class(store: IDocumentStore, class_id: int) -> list[e.Assignment]:
    return store.find_many(e.ASSIGNMENTS, {"class_id": class_id})


def list_submissions(store: IDocumentStore, student_id: int | None = None,
                     assignment_id: int | None = None) -> list[e.Submission]:
    filter = {}
    if student_id is not None:
        filter["student_id"] = student_id
    if assignment_id is not None:
        filter["assignment_id"] = assignment_id
    return store.find_many(e.SUBMISSIONS, filter)


def list_feedback(store: IDocumentStore) -> list[e.Feedback]:
    return store.find_many(e.FEEDBACK)


def list_partners(store: IDocumentStore) -> list[e.Partner]:
    return store.find_many(e.PARTNERS)
