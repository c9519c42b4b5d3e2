# safecall/schemas/vehicle.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class VehicleRegister(BaseModel):
    phone: Optional[str] = None
    plate4: Optional[str] = None
    model: Optional[str] = None


class VehicleCreate(BaseModel):
    plate4: Optional[str] = None
    model: Optional[str] = None


class VehicleUpdate(BaseModel):
    plate4: Optional[str] = None
    model: Optional[str] = None
    status: Optional[str] = None     # active | inactive


class VehicleOut(BaseModel):
    id: str
    user_id: str
    plate_number_last4: str
    model_name: str
    status: str
    created_at: datetime

    class Config:
        from_attributes = True
