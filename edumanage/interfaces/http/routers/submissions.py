from fastapi import APIRouter, Depends, Query, status

from ....application import queries
from ....application.use_cases.assignments import SubmitAssignment
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import InsertAckOut, SubmissionCreate, SubmissionOut

router = APIRouter(prefix="/submissions", tags=["submissions"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def submit(payload: SubmissionCreate, store: DocumentStore = Depends(get_store)):
    return SubmitAssignment(store).execute(payload.model_dump())

@router.get("", response_model=list[SubmissionOut])
def list_submissions(student_id: int | None = Query(None, alias="studentId"),
                     assignment_id: int | None = Query(None, alias="assignmentId"),
                     store: DocumentStore = Depends(get_store)):
    return queries.list_submissions(store, student_id=student_id, assignment_id=assignment_id)
