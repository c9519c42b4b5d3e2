# tests/test_auth_service.py
"""Unit tests for password hashing, tokens and signup/login rules."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime, timedelta
from safecall.models.user import User
from safecall.services.auth_service import (
    AuthError, hash_password, check_password, create_token, decode_token,
    register_user, login_user,
)


class TestPasswords:
    def test_hash_round_trip(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert check_password(hashed, "secret123")
        assert not check_password(hashed, "secret124")

    def test_long_password_accepted(self):
        hashed = hash_password("p" * 100)
        assert check_password(hashed, "p" * 100)


class TestTokens:
    def test_token_carries_user_id(self):
        assert decode_token(create_token("user-42")) == "user-42"

    def test_expired_token_rejected(self):
        assert decode_token(create_token("user-42", expires_in=timedelta(seconds=-10))) is None

    def test_garbage_rejected(self):
        assert decode_token("not-a-token") is None

    def test_tampered_token_rejected(self):
        header, _, signature = create_token("user-42").split(".")
        _, forged_payload, _ = create_token("admin-1").split(".")
        assert decode_token(f"{header}.{forged_payload}.{signature}") is None


class TestSignupLogin:
    def test_signup_creates_user(self, db):
        user = register_user(db, "010-5555-6666", "Kim", "secret123")
        assert user.id
        assert user.role == "user"
        assert user.password_hash and user.password_hash != "secret123"

    def test_signup_claims_placeholder_user(self, db):
        placeholder = User(phone_number="010-5555-6666", name="New user", role="user",
                           created_at=datetime.utcnow())
        db.add(placeholder)
        db.commit()

        user = register_user(db, "010-5555-6666", "Kim", "secret123")
        assert user.id == placeholder.id
        assert user.name == "Kim"
        assert db.query(User).count() == 1

    def test_duplicate_signup_rejected(self, db):
        register_user(db, "010-5555-6666", "Kim", "secret123")
        with pytest.raises(AuthError) as exc:
            register_user(db, "010-5555-6666", "Lee", "other123")
        assert exc.value.status_code == 400

    def test_login(self, db):
        created = register_user(db, "010-5555-6666", "Kim", "secret123")
        assert login_user(db, "010-5555-6666", "secret123").id == created.id

    def test_login_wrong_password_is_401(self, db):
        register_user(db, "010-5555-6666", "Kim", "secret123")
        with pytest.raises(AuthError) as exc:
            login_user(db, "010-5555-6666", "wrong-pass")
        assert exc.value.status_code == 401

    def test_login_unknown_phone_is_400(self, db):
        with pytest.raises(AuthError) as exc:
            login_user(db, "010-0000-0000", "secret123")
        assert exc.value.status_code == 400
