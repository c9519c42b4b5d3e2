# safecall/routers/calls.py
"""
ARS call simulation + call history.
POST /simulate-call: route a dialed plate fragment and record the call.
GET  /logs:          call history, newest first.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from safecall.config import settings
from safecall.database import get_db
from safecall.models.call_log import CallLog
from safecall.schemas.call_log import SimulateCallRequest, SimulateCallOut, CallLogOut
from safecall.services.call_registry import SqlCallRegistry
from safecall.services.call_router import resolve_call
from safecall.utils.validators import validate_plate4
from safecall.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/simulate-call", response_model=SimulateCallOut, summary="Simulate an inbound ARS call")
def simulate_call(body: SimulateCallRequest, db: Session = Depends(get_db)):
    """
    The caller's own number never reaches the owner; the response carries the
    owner's number only as the bridge target for the telephony layer.
    """
    caller_number = (body.caller_number or "").strip()
    input_digits = (body.input_digits or "").strip()
    if not caller_number or not input_digits:
        raise HTTPException(status_code=400, detail="caller_number and input_digits are required")
    error = validate_plate4(input_digits)
    if error:
        raise HTTPException(status_code=400, detail=error)

    try:
        result = resolve_call(
            caller_number,
            input_digits,
            SqlCallRegistry(db),
            sms_always=settings.SMS_FOLLOWUP_ALWAYS,
        )
    except Exception as e:
        logger.error(f"Call simulation failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error during ARS call simulation")
    return {"response": result.decision, "log": result.log}


@router.get("/logs", response_model=list[CallLogOut], summary="Call history")
def list_call_logs(limit: int = 100, status: str = None, db: Session = Depends(get_db)):
    """Returns call logs newest first, optionally filtered by call_status."""
    q = db.query(CallLog)
    if status:
        q = q.filter(CallLog.call_status == status)
    return q.order_by(CallLog.timestamp.desc()).limit(limit).all()
