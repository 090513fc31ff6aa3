"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError

from shared.models import AccountType, Identity


class TestIdentity:
    def test_defaults(self):
        """An identity without flags should be unverified."""
        identity = Identity(id="user-1")
        assert identity.email == ""
        assert identity.email_verified is False

    def test_is_frozen(self):
        """Identities are read-only."""
        identity = Identity(id="user-1", email="a@example.com")
        with pytest.raises(ValidationError):
            identity.email = "b@example.com"

    def test_ignores_extra_fields(self):
        """Unknown provider fields should be ignored."""
        identity = Identity(id="user-1", phone="123")
        assert not hasattr(identity, "phone")


class TestAccountType:
    def test_values(self):
        assert AccountType("client") == AccountType.CLIENT
        assert AccountType("freelancer") == AccountType.FREELANCER
