# tests/test_call_registry.py
"""SqlCallRegistry against an in-memory SQLite database."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import datetime, timedelta
from safecall.models.call_log import CallLog
from safecall.models.user import User
from safecall.models.vehicle import Vehicle
from safecall.services.call_registry import SqlCallRegistry
from safecall.services.call_router import resolve_call


def add_vehicle(db, vehicle_id, user_id, plate, model, status="active", age_minutes=0):
    db.add(Vehicle(id=vehicle_id, user_id=user_id, plate_number_last4=plate, model_name=model,
                   status=status, created_at=datetime.utcnow() - timedelta(minutes=age_minutes)))
    db.commit()


class TestSqlCallRegistry:
    def test_only_active_matches_oldest_first(self, db):
        add_vehicle(db, "new", "u1", "1234", "Kia K5", age_minutes=1)
        add_vehicle(db, "old", "u2", "1234", "Hyundai Sonata", age_minutes=10)
        add_vehicle(db, "off", "u3", "1234", "Genesis G80", status="inactive", age_minutes=20)
        add_vehicle(db, "other", "u4", "5678", "Kia Ray")

        found = SqlCallRegistry(db).find_active_vehicles_by_plate_fragment("1234")
        assert [v.id for v in found] == ["old", "new"]

    def test_find_user_by_id(self, db):
        db.add(User(id="u1", phone_number="010-1111-1111", role="user"))
        db.commit()
        registry = SqlCallRegistry(db)

        assert registry.find_user_by_id("u1").phone_number == "010-1111-1111"
        assert registry.find_user_by_id("missing") is None

    def test_resolve_call_persists_log(self, db):
        db.add(User(id="u1", phone_number="010-1111-1111", role="user"))
        db.commit()
        add_vehicle(db, "v1", "u1", "1234", "Hyundai Sonata")

        result = resolve_call("010-9999-0000", "1234", SqlCallRegistry(db))

        stored = db.query(CallLog).all()
        assert len(stored) == 1
        assert stored[0].id == result.log.id
        assert stored[0].call_status == "connected"
        assert stored[0].vehicle_id == "v1"
        assert stored[0].caller_phone_hash == "***-0000"
