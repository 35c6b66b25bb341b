"""Booking and cancellation of rooms.

A room is unavailable exactly while one booking references it: ``book``
flips the flag off together with inserting the booking, ``cancel`` flips it
back together with the delete. Rejected calls leave the store untouched.
"""
import logging

from sqlalchemy.orm import Session

from . import crud, models

logger = logging.getLogger(__name__)

MAX_DAYS = 365


class BookingError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    status_code = 400


class NotFound(BookingError):
    status_code = 404


class Conflict(BookingError):
    status_code = 400


def _clean(value):
    if value is None:
        return ""
    return str(value).strip()


def book(db: Session, guest_name, guest_phone, room_number, days) -> models.Booking:
    guest_name = _clean(guest_name)
    guest_phone = _clean(guest_phone)
    room_number = _clean(room_number)

    if not guest_name or not guest_phone or not room_number or days is None:
        raise ValidationError("All fields are required")
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise ValidationError("Days must be a positive whole number")
    if days > MAX_DAYS:
        raise ValidationError(f"Days cannot exceed {MAX_DAYS}")

    room = crud.get_room(db, room_number=room_number)
    if not room:
        raise NotFound("Room not found")
    if not room.available:
        raise Conflict("Room is not available")

    booking = models.Booking(
        guest_name=guest_name,
        guest_phone=guest_phone,
        room_number=room.room_number,
        days=days,
        total_amount=room.price * days,
    )
    booking = crud.create_booking(db, booking=booking, room=room)
    logger.info("Booked room %s for %s (%d days, total %s)",
                room.room_number, guest_name, days, booking.total_amount)
    return booking


def cancel(db: Session, booking_id, room_number) -> str:
    room_number = _clean(room_number)
    if booking_id is None or not room_number:
        raise ValidationError("Booking ID and room number are required")

    booking = crud.get_booking(db, booking_id=booking_id)
    if not booking:
        raise NotFound("Booking not found")
    if booking.room_number != room_number:
        raise ValidationError("Room number does not match the booking")

    room = crud.get_room(db, room_number=booking.room_number)
    crud.delete_booking(db, booking=booking, room=room)
    logger.info("Cancelled booking %s for room %s", booking_id, room_number)
    return "Booking Cancelled Successfully!"
