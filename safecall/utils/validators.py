# safecall/utils/validators.py
"""
Input validators for phone numbers, plate fragments, model names and passwords.
Each returns a human-readable error message, or None when the value is valid.
"""

import re
from typing import Optional

PHONE_CHARS = re.compile(r"^[0-9+\-\s]+$")
PLATE4 = re.compile(r"^[0-9]{4}$")
MODEL_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 100


def validate_phone(phone: str) -> Optional[str]:
    trimmed = phone.strip()
    if not trimmed:
        return "Please enter a phone number."
    if not PHONE_CHARS.match(trimmed):
        return "Phone number format is invalid."
    digits = re.sub(r"\D", "", trimmed)
    if len(digits) < 9 or len(digits) > 12:
        return "Phone number length is invalid."
    return None


def validate_plate4(plate4: str) -> Optional[str]:
    trimmed = plate4.strip()
    if not trimmed:
        return "Please enter the last 4 digits of the plate."
    if not PLATE4.match(trimmed):
        return "Plate number must be exactly 4 digits."
    return None


def validate_model(model: str) -> Optional[str]:
    trimmed = model.strip()
    if not trimmed:
        return "Please enter the vehicle name or model."
    if len(trimmed) > MODEL_MAX_LEN:
        return f"Vehicle name or model must be at most {MODEL_MAX_LEN} characters."
    return None


def validate_password(password: str) -> Optional[str]:
    if not password:
        return "Please enter a password."
    if len(password) < PASSWORD_MIN_LEN:
        return f"Password must be at least {PASSWORD_MIN_LEN} characters."
    if len(password) > PASSWORD_MAX_LEN:
        return "Password is too long."
    return None
