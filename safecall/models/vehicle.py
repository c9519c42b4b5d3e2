# safecall/models/vehicle.py
"""
Registered vehicles table.
Looked up by the last 4 digits of the plate when a caller dials in.
"""

import uuid
from sqlalchemy import Column, String, DateTime
from safecall.database import Base

VEHICLE_STATUSES = ("active", "inactive")


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)    # users.id, not enforced
    plate_number_last4 = Column(String(4), nullable=False, index=True)
    model_name = Column(String(50), nullable=False)
    status = Column(String(20), default="active", nullable=False)  # active | inactive
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Vehicle {self.id} plate={self.plate_number_last4} status={self.status}>"
