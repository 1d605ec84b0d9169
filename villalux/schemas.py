from typing import Optional
from pydantic import BaseModel, Field


class VillaRead(BaseModel):
    villa_id: int
    name: str
    location: str
    price_per_night: int
    rating: Optional[float] = None
    image_url: Optional[str] = None

    class Config:
        from_attributes = True


class BookingCreate(BaseModel):
    # Field names follow the frontend's camelCase form payload
    booking_id: str = Field(alias="bookingId")
    villa: str
    arrival_date: str = Field(alias="arrivalDate")
    departure_date: str = Field(alias="departureDate")
    full_name: str = Field(alias="fullName")
    email: str
    # Bounded to what an SQLite INTEGER column can hold
    guests: int = Field(ge=1, le=2**63 - 1)
    requests: Optional[str] = None

    class Config:
        populate_by_name = True


class BookingCreated(BaseModel):
    message: str = "Booking successful!"
    booking_id: int = Field(alias="bookingId")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: str
