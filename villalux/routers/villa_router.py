import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas, crud
from ..database import get_db
from ..errors import StorageError

logger = logging.getLogger("villalux")

router = APIRouter(prefix="/api/villas", tags=["Villas"])


@router.get(
    "",
    response_model=List[schemas.VillaRead],
    responses={500: {"model": schemas.ErrorResponse}}
)
def read_villas(location: Optional[str] = None, db: Session = Depends(get_db)):
    """
    List all villas, optionally only those whose location contains `location`.
    """
    try:
        return crud.get_villas(db, location=location)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load villas: {e}")
        raise StorageError.from_exception(e)
