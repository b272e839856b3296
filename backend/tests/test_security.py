"""Tests for password hashing, tokens and error payloads."""

from datetime import timedelta

import pytest

from booknotes.shared.core.exceptions import BookNotFoundError, DuplicateResourceError
from booknotes.shared.utils.security import SecurityUtils

from conftest import PASSWORD, PASSWORD_HASH


def test_password_hash_verifies():
    assert SecurityUtils.verify_password(PASSWORD, PASSWORD_HASH)
    assert not SecurityUtils.verify_password("wrong", PASSWORD_HASH)


def test_token_round_trip():
    token = SecurityUtils.create_access_token({"user_id": "abc"}, secret_key="k")

    payload = SecurityUtils.decode_access_token(token, secret_key="k")

    assert payload["user_id"] == "abc"
    assert "exp" in payload


def test_token_with_wrong_key_is_rejected():
    token = SecurityUtils.create_access_token({"user_id": "abc"}, secret_key="k")

    with pytest.raises(ValueError, match="Invalid token"):
        SecurityUtils.decode_access_token(token, secret_key="other")


def test_expired_token_is_rejected():
    token = SecurityUtils.create_access_token(
        {"user_id": "abc"},
        secret_key="k",
        expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(ValueError, match="expired"):
        SecurityUtils.decode_access_token(token, secret_key="k")


def test_error_payload_shape():
    error = BookNotFoundError("123")

    assert error.status_code == 404
    assert error.to_dict()["error"]["code"] == "NOT_FOUND"
    assert "123" in error.to_dict()["error"]["message"]


def test_duplicate_is_a_conflict():
    assert DuplicateResourceError("Email already registered").status_code == 409
