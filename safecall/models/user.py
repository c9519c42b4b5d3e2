# safecall/models/user.py
"""
Users table: vehicle owners and admins.
A user created by the public vehicle registration has no password_hash
until the owner signs up with the same phone number.
"""

import uuid
from sqlalchemy import Column, String, DateTime
from safecall.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    phone_number = Column(String(30), unique=True, nullable=False, index=True)
    name = Column(String(100))
    password_hash = Column(String(100))       # bcrypt, never serialised
    role = Column(String(20), default="user", nullable=False)  # admin | user
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<User {self.id} phone={self.phone_number} role={self.role}>"
