from sqlalchemy import Column, Integer, Float, String, Text, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from .database import Base


class Villa(Base):
    __tablename__ = "villas"

    villa_id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String, nullable=False)
    location = Column(String, nullable=False)
    price_per_night = Column(Integer, nullable=False)
    rating = Column(Float, nullable=True)
    image_url = Column(Text, nullable=True)

    bookings = relationship("Booking", back_populates="villa")


class Customer(Base):
    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String, nullable=False)

    # Natural key: one customer row per email
    email = Column(String, unique=True, nullable=False)

    bookings = relationship("Booking", back_populates="customer")


class Booking(Base):
    __tablename__ = "bookings"

    booking_id = Column(Integer, primary_key=True, autoincrement=True)

    # Confirmation code supplied by the caller
    booking_confirmation_id = Column(String, unique=True, nullable=False)

    customer_id = Column(Integer, ForeignKey("customers.customer_id"))
    villa_id = Column(Integer, ForeignKey("villas.villa_id"))

    # Dates are stored exactly as the client sent them
    arrival_date = Column(String, nullable=False)
    departure_date = Column(String, nullable=False)

    guests = Column(Integer, nullable=False)
    special_requests = Column(Text, nullable=True)

    booking_date = Column(TIMESTAMP, server_default=func.current_timestamp())

    customer = relationship("Customer", back_populates="bookings")
    villa = relationship("Villa", back_populates="bookings")
