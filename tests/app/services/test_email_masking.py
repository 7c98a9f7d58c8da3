"""Testes do mascaramento de e-mail."""

from __future__ import annotations

import pytest

from app.domain.customer import CustomerResponse
from app.services.email_masking import mask_customer_response, mask_email


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("johndoe@example.com", "joh****@exa********"),
        ("ab@cd.com", "ab@cd.***"),
        ("abc@xyz", "abc@xyz"),
        ("abcd@wxyz", "abc*@wxy*"),
        ("@example.com", "@exa********"),
    ],
)
def test_mask_email(email: str, expected: str) -> None:
    assert mask_email(email) == expected


@pytest.mark.parametrize("email", ["no-at-sign", "a@b@c.com", ""])
def test_malformed_email_is_unchanged(email: str) -> None:
    assert mask_email(email) == email


@pytest.mark.parametrize(
    "email",
    ["johndoe@example.com", "ab@cd.com", "maria.rodriguez@bhd.com.do", "x@y"],
)
def test_mask_is_stable_on_second_pass(email: str) -> None:
    once = mask_email(email)
    assert mask_email(once) == once


def test_mask_customer_response_only_touches_email() -> None:
    response = CustomerResponse(name="John Doe", email="johndoe@example.com", phone="8095551234")

    shaped = mask_customer_response(response)

    assert shaped is response
    assert shaped.model_dump() == {
        "name": "John Doe",
        "email": "joh****@exa********",
        "phone": "8095551234",
    }


def test_mask_customer_response_without_email() -> None:
    response = CustomerResponse(name="John Doe", phone="8095551234")
    assert mask_customer_response(response).email is None
