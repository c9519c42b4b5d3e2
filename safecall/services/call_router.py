# safecall/services/call_router.py
"""
ARS call routing.
A caller dials the last 4 digits of a plate; the router decides what the
phone menu does next and records the call.

  0 active matches  → play_audio "not found"          → not_found
  1 match, owner    → connect to the owner's number    → connected
  1 match, no owner → play_audio system error          → failed
  2+ matches        → prompt caller to pick a vehicle  → busy

Outcomes are returned, never raised. Every call appends exactly one CallLog.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from safecall.models.call_log import CallLog
from safecall.services.call_registry import CallRegistry
from safecall.utils.logger import get_logger

logger = get_logger(__name__)

CALLER_MASK = "***-"

MSG_NOT_FOUND = "No registered vehicle was found for the number you entered."
MSG_CONNECT = "Connecting you to the vehicle owner. Your phone number will not be shown."
MSG_OWNER_MISSING = "System error: the vehicle owner could not be found."
MSG_CHOOSE = "Several vehicles are registered with this number. Press 1 for {first}, press 2 for {second}."


@dataclass
class RoutingDecision:
    action: str                          # connect | prompt | play_audio
    audio_message: str
    target_number: Optional[str] = None  # set only for connect


@dataclass
class CallResolution:
    decision: RoutingDecision
    log: CallLog


def mask_caller(caller_number: str) -> str:
    """'010-1234-5678' → '***-5678'."""
    return f"{CALLER_MASK}{caller_number[-4:]}"


def resolve_call(caller_number: str, dialed_digits: str, registry: CallRegistry,
                 sms_always: bool = True) -> CallResolution:
    """
    Route one inbound call. dialed_digits must already be validated as 4 digits.
    sms_always=False records the follow-up SMS only for connected calls.
    """
    caller_hash = mask_caller(caller_number)
    matches = registry.find_active_vehicles_by_plate_fragment(dialed_digits)
    vehicle_id = None

    if not matches:
        decision = RoutingDecision(action="play_audio", audio_message=MSG_NOT_FOUND)
        status = "not_found"
    elif len(matches) == 1:
        vehicle = matches[0]
        owner = registry.find_user_by_id(vehicle.user_id)
        if owner:
            decision = RoutingDecision(action="connect", audio_message=MSG_CONNECT,
                                       target_number=owner.phone_number)
            status = "connected"
            vehicle_id = vehicle.id
        else:
            logger.error(f"[ARS] Vehicle {vehicle.id} points at missing user {vehicle.user_id}")
            decision = RoutingDecision(action="play_audio", audio_message=MSG_OWNER_MISSING)
            status = "failed"
    else:
        first, second = matches[0], matches[1]
        decision = RoutingDecision(
            action="prompt",
            audio_message=MSG_CHOOSE.format(first=first.model_name, second=second.model_name),
        )
        status = "busy"
        # Caller has not picked yet; the first candidate stands in for the audit trail
        vehicle_id = first.id

    log = CallLog(
        id=str(uuid.uuid4()),
        vehicle_id=vehicle_id,
        vehicle_plate=dialed_digits,
        caller_phone_hash=caller_hash,
        call_status=status,
        timestamp=datetime.utcnow(),
        sms_sent=sms_always or status == "connected",
    )
    registry.append_call_log(log)

    logger.info(f"[ARS] Caller={caller_hash} | Digits={dialed_digits} | "
                f"Matches={len(matches)} | Status={status} | Action={decision.action}")
    return CallResolution(decision=decision, log=log)
