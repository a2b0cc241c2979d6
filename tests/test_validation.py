"""Unit tests for core/validation.py -- ordered, fail-fast field rules.

Covers:
- Each user rule fires with its own message, in declared order
- Each customer rule fires with its own message, in declared order
- Contact length/digit boundaries ("12345", "1234567890", letters)
"""

from types import SimpleNamespace

import pytest

from auth.models import Registration
from core.validation import customer_violation, is_valid_email, user_violation
from customers.models import Customer

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _user(**overrides) -> Registration:
    fields = {"name": "Ann", "email": "ann@x.com", "password": "secret1"}
    fields.update(overrides)
    return Registration(**fields)


def _customer(**overrides) -> Customer:
    fields = {"name": "Acme Ltd", "contact": "1234567890", "city": "Pune", "email": "ops@acme.io"}
    fields.update(overrides)
    return Customer(**fields)


# ---------------------------------------------------------------------------
# Email format
# ---------------------------------------------------------------------------


class TestEmailFormat:
    @pytest.mark.parametrize("value", ["ann@x.com", "first.last@sub.acme.io", "  ann@x.com  "])
    def test_accepts_plain_addresses(self, value: str) -> None:
        assert is_valid_email(value)

    @pytest.mark.parametrize("value", ["not-an-email", "ann@", "@x.com", "ann@x", "Ann <ann@x.com>", "a b@x.com"])
    def test_rejects_malformed_addresses(self, value: str) -> None:
        assert not is_valid_email(value)


# ---------------------------------------------------------------------------
# User rules
# ---------------------------------------------------------------------------


class TestUserRules:
    def test_valid_user_has_no_violation(self) -> None:
        assert user_violation(_user()) is None

    def test_absent_input(self) -> None:
        assert user_violation(None) == "User data is required."

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name(self, name) -> None:
        assert user_violation(_user(name=name)) == "Name is required."

    @pytest.mark.parametrize("email", [None, "", "\t"])
    def test_blank_email(self, email) -> None:
        assert user_violation(_user(email=email)) == "Email is required."

    def test_malformed_email(self) -> None:
        assert user_violation(_user(email="ann.x.com")) == "Invalid email format."

    @pytest.mark.parametrize("password", [None, "", "      "])
    def test_blank_password(self, password) -> None:
        assert user_violation(_user(password=password)) == "Password is required."

    def test_short_password(self) -> None:
        assert user_violation(_user(password="abc12")) == "Password must be at least 6 characters."

    def test_six_character_password_is_enough(self) -> None:
        assert user_violation(_user(password="abc123")) is None

    def test_first_violation_wins(self) -> None:
        """Blank name is reported even though email and password are also bad."""
        candidate = _user(name="", email="nope", password="x")
        assert user_violation(candidate) == "Name is required."

    def test_email_checked_before_password(self) -> None:
        assert user_violation(_user(email="nope", password="")) == "Invalid email format."

    def test_duck_typed_candidate(self) -> None:
        candidate = SimpleNamespace(name="Ann", email="ann@x.com", password="secret1")
        assert user_violation(candidate) is None


# ---------------------------------------------------------------------------
# Customer rules
# ---------------------------------------------------------------------------


class TestCustomerRules:
    def test_valid_customer_has_no_violation(self) -> None:
        assert customer_violation(_customer()) is None

    def test_absent_input(self) -> None:
        assert customer_violation(None) == "Customer data is required."

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_blank_name(self, name) -> None:
        assert customer_violation(_customer(name=name)) == "Customer name is required."

    def test_short_name(self) -> None:
        assert customer_violation(_customer(name="Al")) == "Customer name must be at least 3 characters."

    @pytest.mark.parametrize("contact", [None, "", "   "])
    def test_blank_contact(self, contact) -> None:
        assert customer_violation(_customer(contact=contact)) == "Contact number is required."

    def test_five_digit_contact_rejected(self) -> None:
        assert customer_violation(_customer(contact="12345")) == "Contact must be at least 10 digits."

    def test_ten_digit_contact_accepted(self) -> None:
        assert customer_violation(_customer(contact="1234567890")) is None

    @pytest.mark.parametrize("contact", ["12345abcde", "123456789a", "12a", "+911234567890", "12345 67890", "١٢٣٤٥٦٧٨٩٠"])
    def test_non_digit_contact_rejected_regardless_of_length(self, contact: str) -> None:
        assert customer_violation(_customer(contact=contact)) == "Contact must contain only digits."

    @pytest.mark.parametrize("city", [None, "", " "])
    def test_blank_city(self, city) -> None:
        assert customer_violation(_customer(city=city)) == "City is required."

    @pytest.mark.parametrize("email", [None, "", "  "])
    def test_blank_email(self, email) -> None:
        assert customer_violation(_customer(email=email)) == "Email is required."

    def test_malformed_email(self) -> None:
        assert customer_violation(_customer(email="ops-at-acme")) == "Invalid email format."

    def test_order_name_then_contact_then_city_then_email(self) -> None:
        everything_bad = _customer(name="Al", contact="abc", city="", email="bad")
        assert customer_violation(everything_bad) == "Customer name must be at least 3 characters."
        assert customer_violation(_customer(contact="abc", city="", email="bad")) == "Contact must contain only digits."
        assert customer_violation(_customer(city="", email="bad")) == "City is required."
        assert customer_violation(_customer(email="bad")) == "Invalid email format."


    def test_email_with_surrounding_whitespace_accepted(self) -> None:
        assert customer_violation(_customer(email="  ops@acme.io ")) is None
