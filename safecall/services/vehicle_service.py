# safecall/services/vehicle_service.py
"""
Vehicle registration and management helpers.
Used by the vehicles router; the call router reads vehicles through call_registry.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from safecall.models.user import User
from safecall.models.vehicle import Vehicle, VEHICLE_STATUSES
from safecall.utils.validators import validate_phone, validate_plate4, validate_model
from safecall.utils.logger import get_logger

logger = get_logger(__name__)

NEW_USER_NAME = "New user"


def collect_vehicle_errors(phone: Optional[str] = None, plate4: Optional[str] = None,
                           model: Optional[str] = None, status: Optional[str] = None) -> list[str]:
    """Run every validator for the fields that were supplied; None means 'not supplied'."""
    errors = []
    if phone is not None:
        errors.append(validate_phone(phone))
    if plate4 is not None:
        errors.append(validate_plate4(plate4))
    if model is not None:
        errors.append(validate_model(model))
    if status is not None and status not in VEHICLE_STATUSES:
        errors.append("Status must be 'active' or 'inactive'.")
    return [e for e in errors if e]


def list_user_vehicles(db: Session, user_id: str) -> list[Vehicle]:
    return (
        db.query(Vehicle)
        .filter(Vehicle.user_id == user_id)
        .order_by(Vehicle.created_at.asc())
        .all()
    )


def get_owned_vehicle(db: Session, vehicle_id: str, user_id: str) -> Optional[Vehicle]:
    """Find a vehicle only if it belongs to user_id. Returns None otherwise."""
    return db.query(Vehicle).filter(Vehicle.id == vehicle_id, Vehicle.user_id == user_id).first()


def find_or_create_user(db: Session, phone: str) -> User:
    user = db.query(User).filter(User.phone_number == phone).first()
    if not user:
        user = User(phone_number=phone, name=NEW_USER_NAME, role="user", created_at=datetime.utcnow())
        db.add(user)
        db.flush()
        logger.info(f"[VEHICLE] Created placeholder user {user.id} for public registration")
    return user


def create_vehicle(db: Session, user_id: str, plate4: str, model: str) -> Vehicle:
    vehicle = Vehicle(
        user_id=user_id,
        plate_number_last4=plate4.strip(),
        model_name=model.strip(),
        status="active",
        created_at=datetime.utcnow(),
    )
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    logger.info(f"[VEHICLE] Registered {vehicle.id} plate=****{vehicle.plate_number_last4} for user {user_id}")
    return vehicle


def register_vehicle(db: Session, phone: str, plate4: str, model: str) -> Vehicle:
    """Public registration: attach the vehicle to the user with this phone, creating one if needed."""
    user = find_or_create_user(db, phone.strip())
    return create_vehicle(db, user.id, plate4, model)


def update_vehicle(db: Session, vehicle: Vehicle, plate4: Optional[str] = None,
                   model: Optional[str] = None, status: Optional[str] = None) -> Vehicle:
    if plate4 is not None:
        vehicle.plate_number_last4 = plate4.strip()
    if model is not None:
        vehicle.model_name = model.strip()
    if status is not None:
        vehicle.status = status
    db.commit()
    db.refresh(vehicle)
    logger.info(f"[VEHICLE] Updated {vehicle.id} status={vehicle.status}")
    return vehicle
