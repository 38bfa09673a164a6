from datetime import datetime

from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase на проводе, snake_case в коде; на входе принимаются оба."""
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

# --- общие ответы

class InsertAckOut(CamelModel):
    acknowledged: bool = True
    inserted_id: int

class UpdateResultOut(CamelModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int

class MessageOut(CamelModel):
    message: str

class RoleChangeOut(CamelModel):
    success: bool = True
    message: str

# --- users

class UserCreate(CamelModel):
    name: str
    email: EmailStr
    role: str = "student"
    photo_url: str | None = None
    phone: str | None = None

class UserUpdate(CamelModel):
    name: str | None = None
    photo_url: str | None = None
    phone: str | None = None

class RoleUpdate(CamelModel):
    role: str | None = None

class UserOut(CamelModel):
    id: int
    name: str
    email: str
    role: str
    photo_url: str | None = None
    phone: str | None = None
    created_at: datetime | None = None

# --- teacher requests

class TeacherRequestCreate(CamelModel):
    user_id: int | None = None
    name: str
    email: EmailStr
    title: str | None = None
    experience: str | None = None
    category: str | None = None
    image: str | None = None

class StatusUpdate(CamelModel):
    status: str

class TeacherRequestOut(CamelModel):
    id: int
    user_id: int | None = None
    name: str
    email: str
    title: str | None = None
    experience: str | None = None
    category: str | None = None
    image: str | None = None
    status: str
    submitted_at: datetime | None = None
    updated_at: datetime | None = None

# --- classes

class ClassCreate(CamelModel):
    title: str
    teacher_id: int | None = None
    teacher_name: str | None = None
    teacher_email: str | None = None
    description: str | None = None
    price: float | None = Field(None, ge=0)
    image: str | None = None

class ClassUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    price: float | None = Field(None, ge=0)
    image: str | None = None
    status: str | None = None

class ClassOut(CamelModel):
    id: int
    title: str
    teacher_id: int | None = None
    teacher_name: str | None = None
    teacher_email: str | None = None
    description: str | None = None
    price: float | None = None
    image: str | None = None
    status: str
    total_enrollment: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

# --- enrollments

class EnrollmentCreate(CamelModel):
    student_id: int
    class_id: int

class EnrollmentOut(CamelModel):
    id: int
    student_id: int
    class_id: int
    payment_status: str
    enrolled_at: datetime | None = None

# --- assignments & submissions

class AssignmentCreate(CamelModel):
    class_id: int
    title: str
    description: str | None = None
    deadline: datetime | None = None

class AssignmentOut(CamelModel):
    id: int
    class_id: int
    title: str
    description: str | None = None
    deadline: datetime | None = None
    submission_count: int
    created_at: datetime | None = None

class SubmissionCreate(CamelModel):
    student_id: int
    assignment_id: int
    class_id: int | None = None
    content: str | None = None

class SubmissionOut(CamelModel):
    id: int
    student_id: int
    assignment_id: int
    class_id: int | None = None
    content: str | None = None
    submitted_at: datetime | None = None

# --- feedback & partners

class FeedbackCreate(CamelModel):
    class_id: int
    student_id: int | None = None
    student_name: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    description: str | None = None

class FeedbackOut(CamelModel):
    id: int
    class_id: int
    student_id: int | None = None
    student_name: str | None = None
    rating: int | None = None
    description: str | None = None
    created_at: datetime | None = None

class PartnerCreate(CamelModel):
    name: str
    logo: str | None = None
    description: str | None = None
    website: str | None = None

class PartnerOut(CamelModel):
    id: int
    name: str
    logo: str | None = None
    description: str | None = None
    website: str | None = None
