import logging
import os
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from dotenv import load_dotenv

from . import crud, models, schemas, services
from .database import SessionLocal, engine

load_dotenv()

# --- Globals ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
SEED_ROOMS = os.getenv("SEED_ROOMS", "true").lower() in ("1", "true", "yes")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# --- Database ---
models.Base.metadata.create_all(bind=engine)

# --- FastAPI app ---
app = FastAPI(title="Hotel Booking API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

def get_db():
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()

@app.on_event("startup")
def on_startup():
    if not SEED_ROOMS:
        return
    db = SessionLocal()
    try:
        crud.seed_rooms(db)
    finally:
        db.close()

# --- Error handlers ---
@app.exception_handler(services.BookingError)
async def booking_error_handler(request: Request, exc: services.BookingError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Database error", "error": str(exc)})

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error", "error": str(exc)})

# --- API Endpoints ---
_errors = {
    400: {"model": schemas.ErrorDetail},
    404: {"model": schemas.ErrorDetail},
}

@app.get("/api/rooms", response_model=list[schemas.Room])
def get_rooms(db: Session = Depends(get_db)):
    return crud.get_rooms(db)

@app.get("/api/bookings", response_model=list[schemas.Booking])
def get_bookings(db: Session = Depends(get_db)):
    return crud.get_bookings(db)

@app.post("/api/book", response_model=schemas.BookingCreated, status_code=201, responses=_errors)
def create_booking(payload: schemas.BookingCreate, db: Session = Depends(get_db)):
    booking = services.book(
        db,
        guest_name=payload.guest_name,
        guest_phone=payload.guest_phone,
        room_number=payload.room_number,
        days=payload.days,
    )
    return schemas.BookingCreated(
        message="Booking Successful!",
        booking=schemas.Booking.model_validate(booking),
    )

@app.post("/api/cancel", response_model=schemas.Message, responses=_errors)
def cancel_booking(payload: schemas.BookingCancel, db: Session = Depends(get_db)):
    message = services.cancel(db, booking_id=payload.id, room_number=payload.room_number)
    return {"message": message}

@app.get("/health", response_model=schemas.Health)
def health():
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc),
    }

@app.get("/", response_model=schemas.ApiIndex)
def index():
    return {
        "message": "Hotel Booking API Server",
        "endpoints": {
            "rooms": "GET /api/rooms",
            "bookings": "GET /api/bookings",
            "book": "POST /api/book",
            "cancel": "POST /api/cancel",
            "health": "GET /health",
            "ui": "GET /ui/",
        },
    }

# --- Static Files ---
app.mount("/ui", StaticFiles(directory=STATIC_DIR, html=True), name="static")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
