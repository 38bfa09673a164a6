from fastapi import APIRouter, Depends, status

from ....application import queries
from ....application.use_cases.assignments import CreateAssignment
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import AssignmentCreate, AssignmentOut, InsertAckOut

router = APIRouter(prefix="/assignments", tags=["assignments"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def create_assignment(payload: AssignmentCreate, store: DocumentStore = Depends(get_store)):
    return CreateAssignment(store).execute(payload.model_dump())

@router.get("/{class_id}", response_model=list[AssignmentOut])
def class_assignments(class_id: int, store: DocumentStore = Depends(get_store)):
    return queries.list_assignments_for_class(store, class_id)
