# scripts/setup/init_db.py
"""
Initialize database — creates all tables and seeds the demo admin.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--no-seed]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from safecall.database import create_tables, engine, SessionLocal
from safecall.config import settings
from safecall.services.seed import seed_demo_data
from sqlalchemy import inspect, text


def main():
    parser = argparse.ArgumentParser(description="Create SafeCall tables and demo data")
    parser.add_argument("--no-seed", action="store_true", help="skip the demo admin + vehicle")
    args = parser.parse_args()

    print("SafeCall DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()

    if not args.no_seed:
        db = SessionLocal()
        try:
            created = seed_demo_data(db)
        finally:
            db.close()
        print(f"Demo admin {settings.SEED_ADMIN_PHONE}: {'created' if created else 'already present'}")

    tables = sorted(inspect(engine).get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn safecall.main:app --host {settings.BACKEND_HOST} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
