from dataclasses import dataclass
from datetime import datetime

# Имена коллекций
USERS = "users"
TEACHER_REQUESTS = "teacherRequests"
CLASSES = "classes"
ENROLLMENTS = "enrollments"
ASSIGNMENTS = "assignments"
SUBMISSIONS = "submissions"
FEEDBACK = "feedback"
PARTNERS = "partners"

REQUEST_STATUSES = ("pending", "accepted", "rejected")
CLASS_STATUSES = ("pending", "approved", "rejected")


@dataclass(frozen=True)
class User:
    id: int | None
    name: str
    email: str
    role: str = "student"
    photo_url: str | None = None
    phone: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class TeacherRequest:
    id: int | None
    user_id: int | None
    name: str
    email: str
    title: str | None = None
    experience: str | None = None
    category: str | None = None
    image: str | None = None
    status: str = "pending"
    submitted_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Class:
    id: int | None
    title: str
    teacher_id: int | None = None
    teacher_name: str | None = None
    teacher_email: str | None = None
    description: str | None = None
    price: float | None = None
    image: str | None = None
    status: str = "pending"
    total_enrollment: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Enrollment:
    id: int | None
    student_id: int
    class_id: int
    payment_status: str = "paid"
    enrolled_at: datetime | None = None


@dataclass(frozen=True)
class Assignment:
    id: int | None
    class_id: int
    title: str
    description: str | None = None
    deadline: datetime | None = None
    submission_count: int = 0
    created_at: datetime | None = None


@dataclass(frozen=True)
class Submission:
    id: int | None
    student_id: int
    assignment_id: int
    class_id: int | None = None
    content: str | None = None
    submitted_at: datetime | None = None


@dataclass(frozen=True)
class Feedback:
    id: int | None
    class_id: int
    student_id: int | None = None
    student_name: str | None = None
    rating: int | None = None
    description: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class Partner:
    id: int | None
    name: str
    logo: str | None = None
    description: str | None = None
    website: str | None = None
