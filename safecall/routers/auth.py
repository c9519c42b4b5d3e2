# safecall/routers/auth.py
"""
Account endpoints.
POST /auth/signup, POST /auth/login: issue bearer tokens.
GET/PUT /me: read and edit the signed-in user's profile.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from safecall.database import get_db
from safecall.models.user import User
from safecall.schemas.user import SignupRequest, LoginRequest, ProfileUpdate, UserOut, AuthOut
from safecall.services.auth_service import AuthError, register_user, login_user, create_token
from safecall.utils.security import get_current_user
from safecall.utils.validators import validate_phone, validate_password

router = APIRouter()


def _check_credentials(phone: str, password: str):
    error = validate_phone(phone) or validate_password(password)
    if error:
        raise HTTPException(status_code=400, detail=error)


@router.post("/auth/signup", response_model=AuthOut, status_code=status.HTTP_201_CREATED,
             summary="Create an account")
def signup(body: SignupRequest, db: Session = Depends(get_db)):
    """Creates a user, or claims the one made by a public vehicle registration with the same phone."""
    if not body.phone or not body.name or not body.password:
        raise HTTPException(status_code=400, detail="phone, name and password are required")
    _check_credentials(body.phone, body.password)

    try:
        user = register_user(db, body.phone.strip(), body.name.strip(), body.password)
    except AuthError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"token": create_token(user.id), "user": user}


@router.post("/auth/login", response_model=AuthOut, summary="Log in with phone + password")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    if not body.phone or not body.password:
        raise HTTPException(status_code=400, detail="phone and password are required")
    _check_credentials(body.phone, body.password)

    try:
        user = login_user(db, body.phone.strip(), body.password)
    except AuthError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"token": create_token(user.id), "user": user}


@router.get("/me", response_model=UserOut, summary="Current user")
def get_me(user: User = Depends(get_current_user)):
    return user


@router.put("/me", response_model=UserOut, summary="Update name / phone")
def update_me(body: ProfileUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Blank fields are ignored. A production deployment should re-verify a changed phone number."""
    if body.phone and body.phone.strip():
        error = validate_phone(body.phone)
        if error:
            raise HTTPException(status_code=400, detail=error)
        phone = body.phone.strip()
        taken = db.query(User).filter(User.phone_number == phone, User.id != user.id).first()
        if taken:
            raise HTTPException(status_code=400, detail="This phone number is already registered.")
        user.phone_number = phone
    if body.name and body.name.strip():
        user.name = body.name.strip()
    db.commit()
    db.refresh(user)
    return user
