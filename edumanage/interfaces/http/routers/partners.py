from fastapi import APIRouter, Depends, status

from ....application import queries
from ....application.use_cases.records import AddPartner
from ....infrastructure.store import DocumentStore
from ..deps import get_store
from ..schemas import InsertAckOut, PartnerCreate, PartnerOut

router = APIRouter(prefix="/partners", tags=["partners"])

@router.post("", response_model=InsertAckOut, status_code=status.HTTP_201_CREATED)
def add_partner(payload: PartnerCreate, store: DocumentStore = Depends(get_store)):
    return AddPartner(store).execute(payload.model_dump())

@router.get("", response_model=list[PartnerOut])
def list_partners(store: DocumentStore = Depends(get_store)):
    return queries.list_partners(store)
