# safecall/models/call_log.py
"""
Call history table, one row per simulated ARS call.
Append-only: rows are written by the call router and never updated.
vehicle_plate is the dialed digits frozen at call time.
"""

from sqlalchemy import Column, String, DateTime, Boolean
from safecall.database import Base

CALL_STATUSES = ("connected", "failed", "busy", "not_found")


class CallLog(Base):
    __tablename__ = "call_logs"

    id = Column(String(36), primary_key=True)
    vehicle_id = Column(String(36), index=True)       # NULL when no vehicle was reached
    vehicle_plate = Column(String(4), nullable=False)
    caller_phone_hash = Column(String(20), nullable=False)
    call_status = Column(String(20), nullable=False, index=True)
    timestamp = Column(DateTime, nullable=False, index=True)
    sms_sent = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<CallLog {self.id} plate={self.vehicle_plate} status={self.call_status}>"
