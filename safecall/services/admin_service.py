# safecall/services/admin_service.py
"""
Admin user directory: searchable summaries and per-user detail.
Search is a case-insensitive substring match on name, phone or any plate fragment.
"""

from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from safecall.models.call_log import CallLog
from safecall.models.user import User
from safecall.models.vehicle import Vehicle


def search_users(db: Session, q: str = "") -> list[User]:
    query = db.query(User)
    q = (q or "").strip().lower()
    if q:
        # Literal substring match; % and _ in q are escaped, not wildcards
        plate_owners = db.query(Vehicle.user_id).filter(Vehicle.plate_number_last4.contains(q, autoescape=True))
        query = query.filter(or_(
            func.lower(func.coalesce(User.name, "")).contains(q, autoescape=True),
            func.lower(User.phone_number).contains(q, autoescape=True),
            User.id.in_(plate_owners),
        ))
    return query.order_by(User.created_at.asc()).all()


def user_summary(db: Session, user: User) -> dict:
    vehicle_ids = [v.id for v in db.query(Vehicle.id).filter(Vehicle.user_id == user.id)]
    call_count = 0
    if vehicle_ids:
        call_count = db.query(func.count(CallLog.id)).filter(CallLog.vehicle_id.in_(vehicle_ids)).scalar()
    return {
        "id": user.id,
        "name": user.name,
        "phone_number": user.phone_number,
        "role": user.role or "user",
        "vehicle_count": len(vehicle_ids),
        "call_count": call_count,
    }


def user_calls(db: Session, vehicle_ids: list[str]) -> list[CallLog]:
    """Calls that reached (or were routed towards) any of these vehicles, newest first."""
    if not vehicle_ids:
        return []
    return (
        db.query(CallLog)
        .filter(CallLog.vehicle_id.in_(vehicle_ids))
        .order_by(CallLog.timestamp.desc())
        .all()
    )
