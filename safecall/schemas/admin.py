# safecall/schemas/admin.py
from pydantic import BaseModel
from typing import Optional
from safecall.schemas.user import UserOut
from safecall.schemas.vehicle import VehicleOut
from safecall.schemas.call_log import CallLogOut


class AdminUserSummary(BaseModel):
    id: str
    name: Optional[str]
    phone_number: str
    role: str
    vehicle_count: int
    call_count: int


class AdminUserDetail(BaseModel):
    user: UserOut
    vehicles: list[VehicleOut]
    calls: list[CallLogOut]
