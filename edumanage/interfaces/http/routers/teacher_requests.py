from fastapi import APIRouter, Depends, status

from ....application import queries
from ....application.use_cases.teacher_requests import SetRequestStatus, SubmitTeacherRequest
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import InsertAckOut, StatusUpdate, TeacherRequestCreate, TeacherRequestOut, UpdateResultOut

router = APIRouter(prefix="/teacherRequests", tags=["teacher-requests"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def submit_request(payload: TeacherRequestCreate, store: DocumentStore = Depends(get_store)):
    return SubmitTeacherRequest(store).execute(payload.model_dump())

@router.get("", response_model=list[TeacherRequestOut])
def list_requests(store: DocumentStore = Depends(get_store)):
    return queries.list_teacher_requests(store)

@router.patch("/{request_id}", response_model=UpdateResultOut)
def set_status(request_id: int, payload: StatusUpdate, store: DocumentStore = Depends(get_store)):
    # ожидается "accepted" / "rejected" / "pending", но принимается любая строка
    return SetRequestStatus(store).execute(request_id, payload.status)
