from fastapi import APIRouter, Depends, status

from ....application import queries
from ....application.use_cases.enroll_student import EnrollStudent
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import EnrollmentCreate, EnrollmentOut, InsertAckOut

router = APIRouter(prefix="/enrollments", tags=["enrollments"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def enroll(payload: EnrollmentCreate, store: DocumentStore = Depends(get_store)):
    return EnrollStudent(store).execute(payload.student_id, payload.class_id)

@router.get("/{student_id}", response_model=list[EnrollmentOut])
def student_enrollments(student_id: int, store: DocumentStore = Depends(get_store)):
    return queries.list_enrollments_for_student(store, student_id)
