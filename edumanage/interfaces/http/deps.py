from fastapi import Depends
from sqlalchemy.orm import Session

from ...infrastructure.db import get_db
from ...infrastructure.store import DocumentStore


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    return DocumentStore(db)
