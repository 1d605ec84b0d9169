from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from . import models, schemas


def count_villas(db: Session) -> int:
    return db.query(models.Villa).count()


def get_villas(db: Session, location: Optional[str] = None) -> list[models.Villa]:
    """
    Returns every villa, or only those whose location contains `location`.

    The match is a case-sensitive substring test. instr() is used instead of
    LIKE because SQLite's LIKE folds ASCII case and treats % and _ as wildcards.
    """
    query = db.query(models.Villa)
    if location:
        query = query.filter(func.instr(models.Villa.location, location) > 0)
    return query.order_by(models.Villa.villa_id).all()


def get_villa_by_name(db: Session, name: str) -> Optional[models.Villa]:
    return db.query(models.Villa).filter(models.Villa.name == name).first()


def get_customer_by_email(db: Session, email: str) -> Optional[models.Customer]:
    return db.query(models.Customer).filter(models.Customer.email == email).first()


def create_customer(db: Session, full_name: str, email: str) -> models.Customer:
    db_customer = models.Customer(full_name=full_name, email=email)
    db.add(db_customer)
    db.commit()
    db.refresh(db_customer)
    return db_customer


def get_or_create_customer(db: Session, full_name: str, email: str) -> models.Customer:
    """
    Looks the customer up by email and creates it when missing.

    The stored name of an existing customer is left untouched.
    """
    db_customer = get_customer_by_email(db, email=email)
    if db_customer is not None:
        return db_customer
    return create_customer(db, full_name=full_name, email=email)


def create_booking(db: Session, booking: schemas.BookingCreate, customer_id: int, villa_id: int) -> models.Booking:
    # Committed on its own: a customer created just before stays even if this insert fails
    db_booking = models.Booking(
        booking_confirmation_id=booking.booking_id,
        customer_id=customer_id,
        villa_id=villa_id,
        arrival_date=booking.arrival_date,
        departure_date=booking.departure_date,
        guests=booking.guests,
        special_requests=booking.requests
    )
    db.add(db_booking)
    db.commit()
    db.refresh(db_booking)
    return db_booking
