# tests/test_validators.py
"""Unit tests for input validators."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from safecall.utils.validators import validate_phone, validate_plate4, validate_model, validate_password


class TestPhone:
    def test_valid_formats(self):
        for phone in ("010-1234-5678", "01012345678", "+82 10 1234 5678", " 010 1234 5678 "):
            assert validate_phone(phone) is None, phone

    def test_blank(self):
        assert validate_phone("   ") is not None

    def test_letters_rejected(self):
        assert "format" in validate_phone("010-CALL-ME00")

    def test_digit_count_bounds(self):
        assert validate_phone("12345678") is not None        # 8 digits
        assert validate_phone("123456789") is None           # 9 digits
        assert validate_phone("123456789012") is None        # 12 digits
        assert validate_phone("1234567890123") is not None   # 13 digits


class TestPlate4:
    def test_four_digits(self):
        assert validate_plate4("1234") is None
        assert validate_plate4(" 0007 ") is None

    def test_wrong_length_or_letters(self):
        for plate in ("123", "12345", "12a4", "", "１２３４"):
            assert validate_plate4(plate) is not None, plate


class TestModel:
    def test_valid(self):
        assert validate_model("Kia K5") is None

    def test_blank_and_too_long(self):
        assert validate_model("  ") is not None
        assert validate_model("x" * 50) is None
        assert validate_model("x" * 51) is not None


class TestPassword:
    def test_bounds(self):
        assert validate_password("") is not None
        assert validate_password("12345") is not None
        assert validate_password("123456") is None
        assert validate_password("x" * 100) is None
        assert validate_password("x" * 101) is not None
