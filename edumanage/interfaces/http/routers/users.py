from fastapi import APIRouter, Depends, Query, status

from ....application import queries
from ....application.dto import UserPatch
from ....application.use_cases.manage_users import ChangeUserRole, UpdateUser
from ....application.use_cases.register_user import RegisterUser
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import (
    InsertAckOut, RoleChangeOut, RoleUpdate, UpdateResultOut, UserCreate, UserOut, UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, store: DocumentStore = Depends(get_store)):
    return RegisterUser(store).execute(
        name=payload.name, email=payload.email, role=payload.role,
        photo_url=payload.photo_url, phone=payload.phone,
    )

@router.get("", response_model=list[UserOut])
def search_users(search: str = Query(""), store: DocumentStore = Depends(get_store)):
    return queries.search_users(store, search)

@router.get("/{email}", response_model=UserOut)
def get_user(email: str, store: DocumentStore = Depends(get_store)):
    return queries.get_user_by_email(store, email)

@router.patch("/role/{email}", response_model=RoleChangeOut)
def change_role(email: str, payload: RoleUpdate, store: DocumentStore = Depends(get_store)):
    role = ChangeUserRole(store).execute(email, payload.role)
    return RoleChangeOut(message=f"Role updated to {role}")

@router.patch("/{user_id}", response_model=UpdateResultOut)
def update_user(user_id: int, payload: UserUpdate, store: DocumentStore = Depends(get_store)):
    patch = UserPatch(name=payload.name, photo_url=payload.photo_url, phone=payload.phone)
    return UpdateUser(store).execute(user_id, patch)
