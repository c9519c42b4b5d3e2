# safecall/services/call_registry.py
"""
Storage seam for the call router.
The router only needs to find active vehicles by plate fragment, resolve an
owner, and append to the call history. SqlCallRegistry backs those three
operations with a SQLAlchemy session; tests swap in an in-memory double.
"""

from typing import Optional, Protocol
from sqlalchemy.orm import Session
from safecall.models.call_log import CallLog
from safecall.models.user import User
from safecall.models.vehicle import Vehicle


class CallRegistry(Protocol):
    def find_active_vehicles_by_plate_fragment(self, fragment: str) -> list[Vehicle]: ...

    def find_user_by_id(self, user_id: str) -> Optional[User]: ...

    def append_call_log(self, entry: CallLog) -> None: ...


class SqlCallRegistry:
    def __init__(self, db: Session):
        self.db = db

    def find_active_vehicles_by_plate_fragment(self, fragment: str) -> list[Vehicle]:
        """Active vehicles with this plate fragment, oldest registration first."""
        return (
            self.db.query(Vehicle)
            .filter(Vehicle.plate_number_last4 == fragment, Vehicle.status == "active")
            .order_by(Vehicle.created_at.asc(), Vehicle.id.asc())
            .all()
        )

    def find_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def append_call_log(self, entry: CallLog) -> None:
        """Persist a new call log. Always commits immediately."""
        self.db.add(entry)
        self.db.commit()
