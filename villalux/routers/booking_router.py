import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas, crud
from ..database import get_db
from ..errors import StorageError, VillaNotFoundError

logger = logging.getLogger("villalux")

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


@router.post(
    "",
    response_model=schemas.BookingCreated,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": schemas.ErrorResponse},
        500: {"model": schemas.ErrorResponse},
    }
)
def create_booking(booking: schemas.BookingCreate, db: Session = Depends(get_db)):
    """
    Book a villa for a customer identified by email.

    The customer is created on their first booking and reused afterwards.
    """
    try:
        db_villa = crud.get_villa_by_name(db, name=booking.villa)
        if db_villa is None:
            raise VillaNotFoundError()

        db_customer = crud.get_or_create_customer(db, full_name=booking.full_name, email=booking.email)

        db_booking = crud.create_booking(
            db=db,
            booking=booking,
            customer_id=db_customer.customer_id,
            villa_id=db_villa.villa_id
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create booking {booking.booking_id}: {e}")
        raise StorageError.from_exception(e)

    logger.info(f"Created booking {db_booking.booking_id} ({booking.booking_id}) for villa '{booking.villa}'.")
    return schemas.BookingCreated(booking_id=db_booking.booking_id)
