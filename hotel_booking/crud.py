import logging

from sqlalchemy.orm import Session

from . import models

logger = logging.getLogger(__name__)

SAMPLE_ROOMS = [
    {"room_number": "101", "room_type": "Single", "price": 1000, "available": True},
    {"room_number": "102", "room_type": "Double", "price": 1500, "available": True},
    {"room_number": "103", "room_type": "Deluxe", "price": 2000, "available": True},
]

def get_rooms(db: Session):
    return db.query(models.Room).order_by(models.Room.room_number.asc()).all()

def get_room(db: Session, room_number: str):
    return db.query(models.Room).filter(models.Room.room_number == room_number).first()

def get_bookings(db: Session):
    return db.query(models.Booking).order_by(
        models.Booking.created_at.desc(),
        models.Booking.id.desc()
    ).all()

def get_booking(db: Session, booking_id: int):
    return db.query(models.Booking).filter(models.Booking.id == booking_id).first()

def create_booking(db: Session, booking: models.Booking, room: models.Room):
    db.add(booking)
    room.available = False
    db.commit()
    db.refresh(booking)
    return booking

def delete_booking(db: Session, booking: models.Booking, room: models.Room = None):
    db.delete(booking)
    if room is not None:
        room.available = True
    db.commit()
    return booking

def seed_rooms(db: Session, rooms=None):
    """
    Inserts the sample rooms when the room table is empty.
    Returns the number of rooms inserted.
    """
    if db.query(models.Room).count() > 0:
        return 0

    rooms = SAMPLE_ROOMS if rooms is None else rooms
    db.add_all([models.Room(**room) for room in rooms])
    db.commit()
    logger.info("Sample room data initialized (%d rooms)", len(rooms))
    return len(rooms)
