from fastapi import APIRouter, Depends, status

from ....application import queries
from ....application.dto import ClassPatch
from ....application.use_cases.classes import CreateClass, DeleteClass, UpdateClass
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import ClassCreate, ClassOut, ClassUpdate, InsertAckOut, MessageOut, UpdateResultOut

router = APIRouter(prefix="/classes", tags=["classes"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def create_class(payload: ClassCreate, store: DocumentStore = Depends(get_store)):
    return CreateClass(store).execute(payload.model_dump())

@router.get("", response_model=list[ClassOut])
def list_classes(store: DocumentStore = Depends(get_store)):
    return queries.list_approved_classes(store)

@router.get("/{class_id}", response_model=ClassOut)
def get_class(class_id: int, store: DocumentStore = Depends(get_store)):
    return queries.get_class(store, class_id)

@router.patch("/{class_id}", response_model=UpdateResultOut)
def update_class(class_id: int, payload: ClassUpdate, store: DocumentStore = Depends(get_store)):
    patch = ClassPatch(**payload.model_dump())
    return UpdateClass(store).execute(class_id, patch)

@router.delete("/{class_id}", response_model=MessageOut)
def delete_class(class_id: int, store: DocumentStore = Depends(get_store)):
    DeleteClass(store).execute(class_id)
    return MessageOut(message="Class deleted")
