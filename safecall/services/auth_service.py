# safecall/services/auth_service.py
"""
Account signup/login, bcrypt password hashing and JWT session tokens.
Used by the auth router and by the bearer-token dependencies in utils/security.py.
"""

from datetime import datetime, timedelta
from typing import Optional

import bcrypt
import jwt
from sqlalchemy.orm import Session

from safecall.config import settings
from safecall.models.user import User
from safecall.utils.logger import get_logger

logger = get_logger(__name__)

# bcrypt only looks at the first 72 bytes and newer releases reject longer input
BCRYPT_MAX_BYTES = 72


class AuthError(Exception):
    """Signup/login failure carrying the HTTP status the API should answer with."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], salt).decode("utf-8")


def check_password(password_hash: str, password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], password_hash.encode("utf-8"))


def create_token(user_id: str, expires_in: Optional[timedelta] = None) -> str:
    expires_in = expires_in if expires_in is not None else timedelta(days=settings.TOKEN_EXPIRE_DAYS)
    payload = {"sub": user_id, "iat": datetime.utcnow(), "exp": datetime.utcnow() + expires_in}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[str]:
    """Return the user id inside a valid token, None if it is malformed, forged or expired."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError as e:
        logger.debug(f"Rejected token: {e}")
        return None
    return payload.get("sub")


def find_user_by_phone(db: Session, phone: str) -> Optional[User]:
    return db.query(User).filter(User.phone_number == phone).first()


def register_user(db: Session, phone: str, name: str, password: str) -> User:
    """
    Create an account, or claim the password-less user that the public
    vehicle registration created for this phone number.
    """
    existing = find_user_by_phone(db, phone)
    if existing and existing.password_hash:
        raise AuthError("This phone number is already registered.")

    password_hash = hash_password(password)
    if existing:
        existing.name = name
        existing.password_hash = password_hash
        user = existing
        logger.info(f"[AUTH] Claimed existing user {user.id} on signup")
    else:
        user = User(phone_number=phone, name=name, password_hash=password_hash,
                    role="user", created_at=datetime.utcnow())
        db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"[AUTH] Signup complete for user {user.id}")
    return user


def login_user(db: Session, phone: str, password: str) -> User:
    user = find_user_by_phone(db, phone)
    if not user or not user.password_hash:
        raise AuthError("No account was found for this phone number.")
    if not check_password(user.password_hash, password):
        logger.warning(f"[AUTH] Wrong password for user {user.id}")
        raise AuthError("Incorrect password.", status_code=401)
    return user
