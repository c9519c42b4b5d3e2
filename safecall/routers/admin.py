# safecall/routers/admin.py
"""Admin-only user directory."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from safecall.database import get_db
from safecall.models.user import User
from safecall.schemas.admin import AdminUserSummary, AdminUserDetail
from safecall.services.admin_service import search_users, user_summary, user_calls
from safecall.services.vehicle_service import list_user_vehicles
from safecall.utils.security import require_admin

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/admin/users", response_model=list[AdminUserSummary], summary="Search users")
def list_users(q: str = "", db: Session = Depends(get_db)):
    """Matches name, phone or plate fragment. Empty q lists everyone."""
    return [user_summary(db, u) for u in search_users(db, q)]


@router.get("/admin/users/{user_id}", response_model=AdminUserDetail, summary="User detail")
def get_user_detail(user_id: str, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    vehicles = list_user_vehicles(db, user.id)
    return {"user": user, "vehicles": vehicles, "calls": user_calls(db, [v.id for v in vehicles])}
