# safecall/schemas/call_log.py
from pydantic import BaseModel, field_serializer
from datetime import datetime, timezone
from typing import Optional


class SimulateCallRequest(BaseModel):
    caller_number: Optional[str] = None
    input_digits: Optional[str] = None


class RoutingDecisionOut(BaseModel):
    action: str                          # connect | prompt | play_audio
    target_number: Optional[str] = None
    audio_message: str

    class Config:
        from_attributes = True


class CallLogOut(BaseModel):
    id: str
    vehicle_id: Optional[str]
    vehicle_plate: str
    caller_phone_hash: str
    call_status: str                     # connected | failed | busy | not_found
    timestamp: datetime
    sms_sent: bool

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        """Stored as naive UTC; emitted as ISO-8601 with a Z suffix."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

    class Config:
        from_attributes = True


class SimulateCallOut(BaseModel):
    response: RoutingDecisionOut
    log: CallLogOut
