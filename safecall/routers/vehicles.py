# safecall/routers/vehicles.py
"""Vehicle registration + owner vehicle management."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from safecall.database import get_db
from safecall.models.user import User
from safecall.schemas.vehicle import VehicleRegister, VehicleCreate, VehicleUpdate, VehicleOut
from safecall.services.vehicle_service import (
    collect_vehicle_errors, create_vehicle, get_owned_vehicle, list_user_vehicles,
    register_vehicle, update_vehicle,
)
from safecall.utils.security import get_current_user

router = APIRouter()


def _reject_invalid(errors: list[str]):
    if errors:
        raise HTTPException(status_code=400, detail={"message": "Invalid input", "errors": errors})


@router.post("/vehicles/register", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Register a vehicle by phone number (no account needed)")
def register_public(body: VehicleRegister, db: Session = Depends(get_db)):
    if not body.phone or not body.plate4 or not body.model:
        raise HTTPException(status_code=400, detail="phone, plate4 and model are required")
    _reject_invalid(collect_vehicle_errors(phone=body.phone, plate4=body.plate4, model=body.model))
    return register_vehicle(db, body.phone, body.plate4, body.model)


@router.get("/users/{user_id}/vehicles", response_model=list[VehicleOut], summary="List a user's vehicles")
def list_for_user(user_id: str, db: Session = Depends(get_db)):
    return list_user_vehicles(db, user_id)


@router.get("/me/vehicles", response_model=list[VehicleOut], summary="List my vehicles")
def list_mine(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_user_vehicles(db, user.id)


@router.post("/me/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Add a vehicle to my account")
def add_mine(body: VehicleCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if not body.plate4 or not body.model:
        raise HTTPException(status_code=400, detail="plate4 and model are required")
    _reject_invalid(collect_vehicle_errors(plate4=body.plate4, model=body.model))
    return create_vehicle(db, user.id, body.plate4, body.model)


@router.put("/me/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Edit or deactivate my vehicle")
def edit_mine(vehicle_id: str, body: VehicleUpdate, user: User = Depends(get_current_user),
              db: Session = Depends(get_db)):
    """Only supplied fields change. status=inactive hides the vehicle from callers."""
    vehicle = get_owned_vehicle(db, vehicle_id, user.id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    _reject_invalid(collect_vehicle_errors(plate4=body.plate4, model=body.model, status=body.status))
    return update_vehicle(db, vehicle, plate4=body.plate4, model=body.model, status=body.status)
