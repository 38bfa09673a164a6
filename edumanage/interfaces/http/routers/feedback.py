from fastapi import APIRouter, Depends, status

from ....application import queries
from ....application.use_cases.records import LeaveFeedback
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import FeedbackCreate, FeedbackOut, InsertAckOut

router = APIRouter(prefix="/feedback", tags=["feedback"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def leave_feedback(payload: FeedbackCreate, store: DocumentStore = Depends(get_store)):
    return LeaveFeedback(store).execute(payload.model_dump())

@router.get("", response_model=list[FeedbackOut])
def list_feedback(store: DocumentStore = Depends(get_store)):
    return queries.list_feedback(store)
