# safecall/services/seed.py
"""
Demo data: one admin account with a single active vehicle (plate fragment 1234).
Runs on startup when SEED_DEMO_DATA is set, and from scripts/setup/init_db.py.
"""

from datetime import datetime
from sqlalchemy.orm import Session
from safecall.config import settings
from safecall.models.user import User
from safecall.models.vehicle import Vehicle
from safecall.services.auth_service import hash_password
from safecall.utils.logger import get_logger

logger = get_logger(__name__)

DEMO_PLATE = "1234"
DEMO_MODEL = "Hyundai Sonata"


def seed_demo_data(db: Session) -> bool:
    """Create the demo admin if absent. Returns True when anything was written."""
    if db.query(User).filter(User.phone_number == settings.SEED_ADMIN_PHONE).first():
        return False

    admin = User(
        phone_number=settings.SEED_ADMIN_PHONE,
        name=settings.SEED_ADMIN_NAME,
        password_hash=hash_password(settings.SEED_ADMIN_PASSWORD),
        role="admin",
        created_at=datetime.utcnow(),
    )
    db.add(admin)
    db.flush()
    db.add(Vehicle(user_id=admin.id, plate_number_last4=DEMO_PLATE, model_name=DEMO_MODEL,
                   status="active", created_at=datetime.utcnow()))
    db.commit()
    logger.info(f"Seeded demo admin {admin.id} with vehicle {DEMO_PLATE}")
    return True
