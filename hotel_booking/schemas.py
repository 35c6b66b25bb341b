from datetime import datetime
from typing import Optional

from pydantic import BaseModel, StrictInt
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class Room(_CamelModel):
    id: int
    room_number: str
    room_type: str
    price: float
    available: bool


class BookingCreate(_CamelModel):
    # Presence and ranges are checked by services.book so that missing
    # fields produce the same message as blank ones.
    guest_name: Optional[str] = None
    guest_phone: Optional[str] = None
    room_number: Optional[str] = None
    days: Optional[StrictInt] = None


class BookingCancel(_CamelModel):
    id: Optional[int] = None
    room_number: Optional[str] = None


class Booking(_CamelModel):
    id: int
    guest_name: str
    guest_phone: str
    room_number: str
    days: int
    total_amount: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingCreated(BaseModel):
    message: str
    booking: Booking


class Message(BaseModel):
    message: str


class Health(BaseModel):
    status: str
    message: str
    timestamp: datetime


class ApiIndex(BaseModel):
    message: str
    endpoints: dict[str, str]


class ErrorDetail(BaseModel):
    message: str
    error: Optional[str] = None
    errors: Optional[list] = None
